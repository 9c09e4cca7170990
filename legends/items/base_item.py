"""
Base item module for the game.

Defines the fields shared by every item kind sold in markets and carried in
hero inventories.
"""

from pydantic import BaseModel, ConfigDict, Field

from legends.core.constants import RESALE_RATIO, ItemKind


class BaseItem(BaseModel):
    """
    Common shape of weapons, armors, potions and spells.

    Items are immutable catalog entries. Heroes hold references to them and
    consumables are removed from the holder's inventory once used.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        min_length=1,
        description="The name of the item.",
    )
    price: float = Field(
        ge=0,
        description="The price of the item in gold.",
    )
    min_level: int = Field(
        default=1,
        ge=0,
        description="The minimum hero level required to buy the item.",
    )

    @property
    def item_kind(self) -> ItemKind:
        """Returns the kind of this item as an enumeration."""
        return ItemKind(getattr(self, "kind"))

    @property
    def resale_value(self) -> float:
        """Returns the gold a market pays when buying this item back."""
        return self.price * RESALE_RATIO

    def describe(self) -> str:
        """Returns the kind specific part of the item summary."""
        return ""

    def __str__(self) -> str:
        details = self.describe()
        summary = f"{self.name} (cost {self.price:.0f}, lvl {self.min_level}"
        if details:
            summary += f", {details}"
        return summary + ")"
