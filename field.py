from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from crop_type import Crop
from game_errors import AlreadyFarmed, AlreadyPlanted, MaxLevelReached, NotYetReady

logger = logging.getLogger(__name__)


@dataclass
class Field:
    """
    A purchased plot bound to one crop.

    Stores:
    - crop: which crop this field grows (Wheat, Potato, etc)
    - level: upgrade tier, 1..crop.max_level
    - plant_timestamp: ms timestamp of planting while growing, None while idle
    """
    crop: Crop
    level: int = 1
    plant_timestamp: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.crop, Crop):
            raise TypeError(f"crop must be a Crop, got {self.crop!r}")
        if not _is_int(self.level):
            raise TypeError(f"level must be an integer, got {self.level!r}")
        if not 1 <= self.level <= self.crop.max_level:
            raise ValueError(
                f"{self.crop} field level {self.level} outside 1..{self.crop.max_level}"
            )
        if self.plant_timestamp is not None and not _is_int(self.plant_timestamp):
            raise TypeError(
                f"plant_timestamp must be an integer, got {self.plant_timestamp!r}"
            )

    @staticmethod
    def calculate_price(crop: Crop) -> float:
        return crop.new_field_price

    @property
    def planted(self) -> bool:
        return self.plant_timestamp is not None

    def plant(self, now: int) -> None:
        if self.planted:
            raise AlreadyPlanted()
        self.plant_timestamp = now

    def time_to_farm(self, now: int) -> int:
        """
        Milliseconds left until the crop can be harvested, never negative.
        Only meaningful while the field is planted.
        """
        if self.plant_timestamp is None:
            raise ValueError("field is not planted")
        elapsed = now - self.plant_timestamp
        return max(0, self.crop.grow_time - elapsed)

    def is_ready(self, now: int) -> bool:
        """Return True if the field is planted and fully grown."""
        return self.planted and self.time_to_farm(now) == 0

    def harvest(self, now: int) -> float:
        """Clear the field and return what the harvest is worth."""
        if not self.planted:
            raise AlreadyFarmed()
        if self.time_to_farm(now) > 0:
            raise NotYetReady()
        self.plant_timestamp = None
        return self.earnings()

    def earnings(self) -> float:
        return self.crop.payout * (1.0 + self.crop.level_multiplier) ** self.level

    def level_up_price(self) -> float:
        if self.level >= self.crop.max_level:
            raise MaxLevelReached()
        return self.crop.next_level_price(self.level)

    def level_up(self) -> None:
        # Funds are the caller's concern; see Farm.level_up_field.
        if self.level >= self.crop.max_level:
            raise MaxLevelReached()
        self.level += 1

    def to_dict(self) -> dict:
        return {
            "crop": self.crop.display_name,
            "level": self.level,
            "plant_timestamp": self.plant_timestamp,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Field":
        if not isinstance(data, dict):
            raise TypeError(f"field entry must be an object, got {type(data).__name__}")
        field = cls(
            crop=Crop.from_name(data["crop"]),
            level=data.get("level", 1),
            plant_timestamp=data.get("plant_timestamp"),
        )
        logger.debug("Loaded %s field, level %d", field.crop, field.level)
        return field


def _is_int(value) -> bool:
    # bool is an int subclass; JSON true/false is never a level or timestamp
    return isinstance(value, int) and not isinstance(value, bool)
