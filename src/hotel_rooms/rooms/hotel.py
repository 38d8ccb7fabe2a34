"""In-memory hotel: the collection of rooms and its aggregates."""
from __future__ import annotations

import logging
from typing import Dict, List

from hotel_rooms.core.errors import DuplicateRoomError, EmptyCollectionError
from hotel_rooms.rooms.discounts import build_discount
from hotel_rooms.rooms.models import Room, RoomSummary

logger = logging.getLogger(__name__)

DEFAULT_LABEL_WARNING_LENGTH = 50


class Hotel:
    """Owns the rooms in insertion order and keeps their labels unique."""

    def __init__(self, *, label_warning_length: int = DEFAULT_LABEL_WARNING_LENGTH) -> None:
        self._rooms: Dict[str, Room] = {}
        self._label_warning_length = label_warning_length

    def __len__(self) -> int:
        return len(self._rooms)

    def __contains__(self, label: object) -> bool:
        return label in self._rooms

    def add_room(self, label: str, base_cost: float, discount_percent: float = 0.0) -> RoomSummary:
        """Register a new room and return its snapshot.

        Raises ``DuplicateRoomError`` when ``label`` is taken and propagates
        ``InvalidValueError`` from the policy or room constructors. Nothing is
        stored unless the room was built successfully.
        """
        if len(label) > self._label_warning_length:
            logger.warning(
                "Room label '%s' is longer than %d characters", label, self._label_warning_length
            )

        if label in self._rooms:
            logger.info("Rejected duplicate room '%s'", label)
            raise DuplicateRoomError(label)

        room = Room(label, base_cost, build_discount(discount_percent))
        self._rooms[label] = room
        logger.info(
            "Added room '%s' (base %.2f, final %.2f)", room.label, room.base_cost, room.final_cost
        )
        return room.summary()

    def average_final_cost(self) -> float:
        if not self._rooms:
            raise EmptyCollectionError("nothing to average")
        total = sum(room.final_cost for room in self._rooms.values())
        return total / float(len(self._rooms))

    def list_rooms(self) -> List[RoomSummary]:
        return [room.summary() for room in self._rooms.values()]
