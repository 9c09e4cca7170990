"""
Stat block module for the game.

Holds the numeric shape shared by heroes and monsters: hit points, mana, the
three skills and the level.
"""

from pydantic import BaseModel, Field

from legends.core.constants import HP_PER_LEVEL


class StatBlock(BaseModel):
    """
    Mutable numeric state of a combatant.

    ``hp`` may drop below zero while damage is applied; any value at or below
    zero means the owner is fainted. Nothing clamps ``hp`` upward, so
    regeneration and potions may push it past ``max_hp_basis``.

    Attributes:
        hp (float):
            The current hit points.
        max_hp_basis (float):
            The nominal maximum hit points, ``level * 100``.
        mana (float):
            The current mana.
        strength (float):
            Physical attack skill.
        dexterity (float):
            Spell damage skill.
        agility (float):
            Dodge skill.
        level (int):
            The current level.

    """

    hp: float = Field(description="The current hit points.")
    max_hp_basis: float = Field(ge=0, description="The nominal maximum hit points.")
    mana: float = Field(default=0.0, ge=0, description="The current mana.")
    strength: float = Field(default=0.0, ge=0, description="Physical attack skill.")
    dexterity: float = Field(default=0.0, ge=0, description="Spell damage skill.")
    agility: float = Field(default=0.0, ge=0, description="Dodge skill.")
    level: int = Field(default=1, ge=0, description="The current level.")

    @classmethod
    def for_level(cls, level: int, **skills: float) -> "StatBlock":
        """
        Builds a stat block at full health for the given level.

        Args:
            level (int): The level of the owner.
            **skills (float): Optional mana, strength, dexterity and agility.

        Returns:
            StatBlock: A new stat block with ``hp == max_hp_basis``.

        """
        basis = float(level * HP_PER_LEVEL)
        return cls(hp=basis, max_hp_basis=basis, level=level, **skills)

    def is_fainted(self) -> bool:
        """Returns True if hit points are at or below zero."""
        return self.hp <= 0
