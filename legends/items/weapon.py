from typing import Literal

from pydantic import Field

from .base_item import BaseItem


class Weapon(BaseItem):
    """
    Represents a weapon that a hero can equip.

    The weapon damage is added to the hero strength when attacking.
    """

    kind: Literal["weapon"] = "weapon"
    damage: float = Field(
        ge=0,
        description="The damage added to the wielder's strength.",
    )
    hands_required: int = Field(
        default=1,
        ge=0,
        description="Number of hands required to wield this weapon.",
    )

    @property
    def is_two_handed(self) -> bool:
        return self.hands_required >= 2

    def describe(self) -> str:
        return f"dmg {self.damage:.0f}, {self.hands_required}H"
