from __future__ import annotations

from typing import Callable, List

import pytest


@pytest.fixture
def scripted_input() -> Callable[..., Callable[[str], str]]:
    """Build a reader that replays answers and raises EOFError once exhausted."""

    def factory(*answers: str) -> Callable[[str], str]:
        remaining = iter(answers)

        def read(prompt: str) -> str:
            try:
                return next(remaining)
            except StopIteration:
                raise EOFError from None

        return read

    return factory


@pytest.fixture
def output() -> List[str]:
    return []
