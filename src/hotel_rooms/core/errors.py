"""Domain errors raised by the room and hotel layer."""
from __future__ import annotations


class HotelError(Exception):
    """Base class for recoverable hotel errors surfaced to the console."""


class InvalidValueError(HotelError, ValueError):
    """A constructor argument violates its invariant."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Invalid value: {message}")


class DuplicateRoomError(HotelError):
    """A room with the same label is already registered."""

    def __init__(self, label: str) -> None:
        self.label = label
        super().__init__(f"Duplicate room: room '{label}' already exists")


class EmptyCollectionError(HotelError):
    """An aggregate was requested over zero rooms."""

    def __init__(self, message: str) -> None:
        super().__init__(f"Room list is empty: {message}")
