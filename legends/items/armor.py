"""
Armor module for the game.

Defines the Armor item, which mitigates the damage of monster attacks while
it is equipped.
"""

from typing import Literal

from pydantic import Field

from legends.core.constants import ARMOR_FACTOR

from .base_item import BaseItem


class Armor(BaseItem):
    """
    Represents a piece of armor that can be equipped by heroes.

    Only the equipped armor counts: its damage reduction, scaled by the armor
    factor, is subtracted from each monster hit.
    """

    kind: Literal["armor"] = "armor"
    damage_reduction: float = Field(
        ge=0,
        description="The raw damage reduction of the armor.",
    )

    def mitigate(self, raw_damage: float) -> float:
        """
        Returns the damage left after this armor absorbs its share.

        Args:
            raw_damage (float): The incoming damage.

        Returns:
            float: The mitigated damage, never below zero.

        """
        return max(0.0, raw_damage - self.damage_reduction * ARMOR_FACTOR)

    def describe(self) -> str:
        return f"reduction {self.damage_reduction:.0f}"
