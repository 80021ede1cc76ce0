from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List

from game_clock import seconds_to_millis


@dataclass(frozen=True)
class CropType:
    """
    Immutable economic constants of a crop.

    - new_field_price: cost of buying a field of this crop
    - planting_price: cost paid every time the field is planted
    - max_level: highest level a field of this crop can reach
    - level_multiplier: drives both level-up prices and harvest growth
    - grow_time: milliseconds from planting until harvest is allowed
    - payout: harvest value before level compounding
    """
    new_field_price: float
    planting_price: float
    max_level: int
    level_multiplier: float
    grow_time: int
    payout: float


class Crop(Enum):
    """The closed set of crops sold in the shop, in shop order."""

    WHEAT = "Wheat"
    POTATO = "Potato"
    CARROT = "Carrot"

    @classmethod
    def all(cls) -> List["Crop"]:
        return list(cls)

    @classmethod
    def from_name(cls, name: str) -> "Crop":
        """Parse a persisted crop name ("Wheat"); raises ValueError if unknown."""
        return cls(name)

    @property
    def display_name(self) -> str:
        return self.value

    @property
    def crop_type(self) -> CropType:
        return CROP_TYPES[self]

    @property
    def new_field_price(self) -> float:
        return self.crop_type.new_field_price

    @property
    def planting_price(self) -> float:
        return self.crop_type.planting_price

    @property
    def max_level(self) -> int:
        return self.crop_type.max_level

    @property
    def level_multiplier(self) -> float:
        return self.crop_type.level_multiplier

    @property
    def grow_time(self) -> int:
        return self.crop_type.grow_time

    @property
    def payout(self) -> float:
        return self.crop_type.payout

    def next_level_price(self, level: int) -> float:
        """Price to raise a field of this crop from `level` to `level + 1`."""
        base_price = self.planting_price * 10.0
        level_multiplier = self.level_multiplier / 2.0
        return base_price * (level_multiplier * level)

    def __str__(self) -> str:
        return self.value


CROP_TYPES: Dict[Crop, CropType] = {
    Crop.WHEAT: CropType(
        new_field_price=10.0,
        planting_price=1.0,
        max_level=5,
        level_multiplier=0.5,
        grow_time=seconds_to_millis(100),
        payout=1.0,
    ),
    Crop.POTATO: CropType(
        new_field_price=100.0,
        planting_price=20.0,
        max_level=10,
        level_multiplier=0.5,
        grow_time=seconds_to_millis(300),
        payout=10.0,
    ),
    Crop.CARROT: CropType(
        new_field_price=1000.0,
        planting_price=50.0,
        max_level=20,
        level_multiplier=0.5,
        grow_time=seconds_to_millis(1000),
        payout=100.0,
    ),
}
