"""Room entity and the read-only snapshot handed out by the hotel."""
from __future__ import annotations

from typing import NamedTuple, Optional

from hotel_rooms.core.errors import InvalidValueError
from hotel_rooms.rooms.discounts import DiscountPolicy


class RoomSummary(NamedTuple):
    """Snapshot of a room as shown in listings."""

    label: str
    base_cost: float
    final_cost: float


class Room:
    """A labelled room with a base nightly cost and a discount policy.

    The label, base cost and policy are fixed at construction. ``final_cost``
    is recomputed from the policy on every access.
    """

    __slots__ = ("_label", "_base_cost", "_discount")

    def __init__(self, label: str, base_cost: float, discount: Optional[DiscountPolicy]) -> None:
        if not label:
            raise InvalidValueError("room label cannot be empty")
        if not base_cost > 0.0:
            raise InvalidValueError("base cost must be > 0")
        if discount is None:
            raise InvalidValueError("discount policy cannot be None")
        self._label = label
        self._base_cost = float(base_cost)
        self._discount = discount

    @property
    def label(self) -> str:
        return self._label

    @property
    def base_cost(self) -> float:
        return self._base_cost

    @property
    def discount(self) -> DiscountPolicy:
        return self._discount

    @property
    def final_cost(self) -> float:
        return self._discount.compute_final_cost(self._base_cost)

    def summary(self) -> RoomSummary:
        return RoomSummary(self._label, self._base_cost, self.final_cost)

    def __repr__(self) -> str:
        return f"Room(label={self._label!r}, base_cost={self._base_cost!r}, discount={self._discount!r})"
