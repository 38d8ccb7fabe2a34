"""Interactive menu wiring the prompts to the hotel."""
from __future__ import annotations

import logging
from typing import Iterable, Optional

from hotel_rooms.config.settings import Settings
from hotel_rooms.console.prompts import (
    Reader,
    Writer,
    prompt_discount_percent,
    prompt_menu_choice,
    prompt_non_empty_string,
    prompt_positive_float,
)
from hotel_rooms.core.errors import HotelError
from hotel_rooms.rooms import Hotel, RoomSummary

logger = logging.getLogger(__name__)

MENU_TEXT = "\n".join(
    (
        "",
        "===== HOTEL SYSTEM MENU =====",
        "1. Add room information",
        "2. Show all rooms",
        "3. Calculate average stay cost (with discounts)",
        "0. Exit",
        "=============================",
    )
)

CHOICE_EXIT = 0
CHOICE_ADD = 1
CHOICE_LIST = 2
CHOICE_AVERAGE = 3


def format_room_table(rooms: Iterable[RoomSummary], settings: Settings) -> list[str]:
    """Render rooms as fixed-width lines, or a single notice when there are none."""
    rooms = list(rooms)
    if not rooms:
        return ["Room list is empty."]
    lines = [
        "Current rooms:",
        f"{'Room':<12}{'Base cost':<14}{'Discounted':<16}",
    ]
    for room in rooms:
        lines.append(
            f"{room.label:<12}"
            f"{settings.format_cost(room.base_cost):<14}"
            f"{settings.format_cost(room.final_cost):<16}"
        )
    return lines


def _add_room(hotel: Hotel, settings: Settings, read: Reader, write: Writer) -> None:
    label = prompt_non_empty_string("Enter room label (e.g. 101, A-12): ", read=read, write=write)
    base_cost = prompt_positive_float(
        "Enter base cost per night: ", maximum=settings.max_base_cost, read=read, write=write
    )
    discount = prompt_discount_percent(
        "Enter stay discount percent (0 if none, <100): ", read=read, write=write
    )
    hotel.add_room(label, base_cost, discount)
    write("Room information added.")


def _show_average(hotel: Hotel, settings: Settings, write: Writer) -> None:
    average = hotel.average_final_cost()
    write(f"Average stay cost (after discounts): {settings.format_cost(average)}")


def run_menu(
    hotel: Hotel,
    settings: Optional[Settings] = None,
    *,
    read: Reader = input,
    write: Writer = print,
) -> int:
    """Run the menu until the user exits or input ends; returns the exit code."""
    settings = settings or Settings()

    while True:
        write(MENU_TEXT)
        try:
            choice = prompt_menu_choice("Your choice: ", CHOICE_EXIT, CHOICE_AVERAGE, read=read, write=write)
        except EOFError:
            logger.debug("Input closed at menu prompt")
            choice = CHOICE_EXIT

        if choice == CHOICE_EXIT:
            write("Exiting.")
            return 0

        try:
            if choice == CHOICE_ADD:
                _add_room(hotel, settings, read, write)
            elif choice == CHOICE_LIST:
                for line in format_room_table(hotel.list_rooms(), settings):
                    write(line)
            elif choice == CHOICE_AVERAGE:
                _show_average(hotel, settings, write)
        except EOFError:
            logger.debug("Input closed while reading room details")
            write("Exiting.")
            return 0
        except HotelError as exc:
            write(f"Error: {exc}")
        except Exception as exc:
            logger.exception("Unexpected failure handling menu choice %s", choice)
            write(f"Unexpected error: {exc}")
