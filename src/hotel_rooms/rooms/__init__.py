"""Room domain models, discount policies and the hotel collection."""

from .discounts import DiscountPolicy, NoDiscount, PercentageDiscount, build_discount
from .hotel import Hotel
from .models import Room, RoomSummary

__all__ = [
    "DiscountPolicy",
    "Hotel",
    "NoDiscount",
    "PercentageDiscount",
    "Room",
    "RoomSummary",
    "build_discount",
]
