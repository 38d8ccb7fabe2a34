"""Prompt helpers that keep asking until the user enters a valid value."""
from __future__ import annotations

import math
from typing import Callable, Optional

Reader = Callable[[str], str]
Writer = Callable[[str], None]


def _parse_float(text: str) -> Optional[float]:
    try:
        value = float(text.strip())
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def _format_bound(value: float) -> str:
    value = float(value)
    return str(int(value)) if value.is_integer() else str(value)


def prompt_non_empty_string(prompt: str, *, read: Reader = input, write: Writer = print) -> str:
    """Return the stripped answer, retrying on blank input."""
    while True:
        value = read(prompt).strip()
        if value:
            return value
        write("Error: value cannot be empty. Try again.")


def prompt_positive_float(
    prompt: str,
    *,
    maximum: float = 1_000_000.0,
    read: Reader = input,
    write: Writer = print,
) -> float:
    while True:
        value = _parse_float(read(prompt))
        if value is None:
            write("Error: enter a number.")
            continue
        if value <= 0.0:
            write("Error: value must be greater than 0. Try again.")
            continue
        if value > maximum:
            write(f"Error: value must not exceed {_format_bound(maximum)}. Try again.")
            continue
        return value


def prompt_discount_percent(prompt: str, *, read: Reader = input, write: Writer = print) -> float:
    """Return a percentage in ``[0, 100)``."""
    while True:
        value = _parse_float(read(prompt))
        if value is None:
            write("Error: enter a number.")
            continue
        if value < 0.0:
            write("Error: value cannot be negative. Try again.")
            continue
        if value >= 100.0:
            write("Error: discount percent must be less than 100. Try again.")
            continue
        return value


def prompt_menu_choice(
    prompt: str,
    low: int,
    high: int,
    *,
    read: Reader = input,
    write: Writer = print,
) -> int:
    """Return a whole number in ``[low, high]``; only ASCII digits are accepted."""
    while True:
        text = read(prompt).strip()
        if not text:
            write("Error: enter a number.")
            continue
        if not (text.isascii() and text.isdigit()):
            write("Error: enter a whole number.")
            continue
        value = int(text)
        if value < low or value > high:
            write(f"Error: number must be in range [{low}, {high}].")
            continue
        return value
