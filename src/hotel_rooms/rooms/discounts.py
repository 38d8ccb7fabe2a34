"""Discount policies that turn a base nightly cost into a final cost."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from hotel_rooms.core.errors import InvalidValueError


class DiscountPolicy(Protocol):
    def compute_final_cost(self, base_cost: float) -> float:
        ...


@dataclass(frozen=True, slots=True)
class NoDiscount:
    """Identity policy: the final cost is the base cost."""

    def compute_final_cost(self, base_cost: float) -> float:
        return base_cost


@dataclass(frozen=True, slots=True)
class PercentageDiscount:
    """Reduces the base cost by ``rate`` percent, with ``0 <= rate < 100``."""

    rate: float

    def __post_init__(self) -> None:
        if not self.rate >= 0.0:
            raise InvalidValueError("discount percent must be >= 0")
        if self.rate >= 100.0:
            raise InvalidValueError("discount percent must be < 100")

    def compute_final_cost(self, base_cost: float) -> float:
        return base_cost * (1.0 - self.rate / 100.0)


def build_discount(percent: float = 0.0) -> DiscountPolicy:
    """Return ``NoDiscount`` for a zero percent, otherwise a validated ``PercentageDiscount``."""
    if percent == 0.0:
        return NoDiscount()
    return PercentageDiscount(percent)
