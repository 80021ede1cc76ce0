from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from dataclasses import field as dataclass_field
from typing import Callable, List, Optional

from crop_type import Crop
from field import Field
from game_clock import timestamp
from game_errors import InsufficientFunds, OutOfBounds, TooManyFields

logger = logging.getLogger(__name__)

# --- Constants ---
STARTING_MONEY = 20.0
SAVE_FILE = "save.json"


@dataclass
class Farm:
    """
    The player's farm: a cash balance and the fields bought with it.

    Fields are addressed by their 0-based position in `fields`, which is
    purchase order. Selling a field shifts every later field down by one.

    Every operation checks all of its preconditions before touching money or
    fields, so a raised GameError leaves the farm exactly as it was.

    Timing-sensitive operations take `now` in ms; when it is omitted the
    farm reads `clock` once for that operation.
    """
    name: str
    money: float = STARTING_MONEY
    fields: List[Field] = dataclass_field(default_factory=list)
    clock: Callable[[], int] = dataclass_field(
        default=timestamp, compare=False, repr=False
    )
    max_fields: Optional[int] = dataclass_field(default=None, compare=False)

    @staticmethod
    def available_crops() -> List[Crop]:
        return Crop.all()

    def field(self, index: int) -> Field:
        if not 0 <= index < len(self.fields):
            logger.debug("Field %d requested, farm has %d", index, len(self.fields))
            raise OutOfBounds()
        return self.fields[index]

    def _now(self, now: Optional[int]) -> int:
        return self.clock() if now is None else now

    def _require_funds(self, price: float) -> None:
        if self.money < price:
            logger.debug("Need $%.2f, have $%.2f", price, self.money)
            raise InsufficientFunds()

    def buy_field(self, crop: Crop) -> None:
        if self.max_fields is not None and len(self.fields) >= self.max_fields:
            raise TooManyFields()
        price = Field.calculate_price(crop)
        self._require_funds(price)
        self.fields.append(Field(crop))
        self.money -= price
        logger.info("Bought %s field for $%.2f", crop, price)

    def plant_field(self, index: int, now: Optional[int] = None) -> None:
        field = self.field(index)
        price = field.crop.planting_price
        self._require_funds(price)
        field.plant(self._now(now))
        self.money -= price
        logger.info("Planted field %d (%s) for $%.2f", index, field.crop, price)

    def harvest_field(self, index: int, now: Optional[int] = None) -> float:
        field = self.field(index)
        payout = field.harvest(self._now(now))
        self.money += payout
        logger.info("Harvested field %d (%s) for $%.2f", index, field.crop, payout)
        return payout

    def level_up_field(self, index: int) -> None:
        field = self.field(index)
        price = field.level_up_price()
        self._require_funds(price)
        field.level_up()
        self.money -= price
        logger.info(
            "Field %d (%s) raised to level %d for $%.2f",
            index, field.crop, field.level, price,
        )

    def sell_field(self, index: int) -> float:
        """
        Remove the field and refund its full purchase price.

        Levels and any crop still growing are lost with the field.
        """
        field = self.field(index)
        price = Field.calculate_price(field.crop)
        del self.fields[index]
        self.money += price
        logger.info("Sold field %d (%s) for $%.2f", index, field.crop, price)
        return price

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "money": self.money,
            "fields": [f.to_dict() for f in self.fields],
        }

    @classmethod
    def from_dict(cls, data: dict, **kwargs) -> "Farm":
        """
        Rebuild a farm from `to_dict` output. Extra keyword arguments
        (clock, max_fields) are passed to the constructor.
        """
        if not isinstance(data, dict):
            raise TypeError("Invalid save format")
        fields_data = data.get("fields", [])
        if not isinstance(fields_data, list):
            raise TypeError("Invalid save format: fields must be a list")
        name = data["name"]
        if not isinstance(name, str):
            raise TypeError(f"Invalid save format: name must be a string, got {name!r}")
        money = data["money"]
        if isinstance(money, bool) or not isinstance(money, (int, float)):
            raise TypeError(f"Invalid save format: money must be a number, got {money!r}")
        if not math.isfinite(money):
            raise ValueError(f"Invalid save format: money is {money!r}")
        return cls(
            name=name,
            money=float(money),
            fields=[Field.from_dict(fd) for fd in fields_data],
            **kwargs,
        )
