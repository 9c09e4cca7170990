"""
Spell module for the game.

Defines the Spell item. Spells are single-use: casting one consumes it from
the caster's inventory, deals damage scaled by the caster's dexterity, and
weakens a surviving target according to the spell element.
"""

from typing import Literal

from pydantic import Field

from legends.core.constants import SPELL_DEXTERITY_DIVISOR, ElementType

from .base_item import BaseItem


class Spell(BaseItem):
    """
    Represents an elemental spell scroll.

    Attributes:
        damage (float):
            The base damage of the spell.
        mana_cost (float):
            The mana spent by the caster.
        element (ElementType):
            The element, which selects the debuff applied on a surviving target.

    """

    kind: Literal["spell"] = "spell"
    damage: float = Field(
        ge=0,
        description="The base damage of the spell.",
    )
    mana_cost: float = Field(
        ge=0,
        description="The mana needed to cast the spell.",
    )
    element: ElementType = Field(
        description="The element of the spell.",
    )

    @property
    def colored_name(self) -> str:
        return self.element.colorize(self.name)

    def damage_for(self, dexterity: float) -> float:
        """
        Returns the damage dealt when cast by a hero with the given dexterity.

        Args:
            dexterity (float): The caster's dexterity.

        Returns:
            float: The spell damage including the dexterity bonus.

        """
        return self.damage + (dexterity / SPELL_DEXTERITY_DIVISOR) * self.damage

    def describe(self) -> str:
        return (
            f"{self.element.emoji} {self.element.display_name}, "
            f"dmg {self.damage:.0f}, mana {self.mana_cost:.0f}"
        )
