"""
Combatant module for the game.

Provides the behaviour shared by heroes and monsters: delegated stat
properties, fainted checks and damage intake.
"""

from legends.core.logging import log_debug

from .stats import StatBlock


class Combatant:
    """
    Base class of everything that fights in an encounter.

    Attributes:
        name (str):
            The name of the combatant.
        stats (StatBlock):
            The mutable numeric state of the combatant.

    """

    name: str
    stats: StatBlock

    def __init__(self, name: str, stats: StatBlock) -> None:
        self.name = name
        self.stats = stats

    # ============================================================================
    # DELEGATED STAT PROPERTIES
    # ============================================================================

    @property
    def hp(self) -> float:
        return self.stats.hp

    @hp.setter
    def hp(self, value: float) -> None:
        self.stats.hp = value

    @property
    def mana(self) -> float:
        return self.stats.mana

    @mana.setter
    def mana(self, value: float) -> None:
        self.stats.mana = value

    @property
    def strength(self) -> float:
        return self.stats.strength

    @strength.setter
    def strength(self, value: float) -> None:
        self.stats.strength = value

    @property
    def dexterity(self) -> float:
        return self.stats.dexterity

    @dexterity.setter
    def dexterity(self, value: float) -> None:
        self.stats.dexterity = value

    @property
    def agility(self) -> float:
        return self.stats.agility

    @agility.setter
    def agility(self, value: float) -> None:
        self.stats.agility = value

    @property
    def level(self) -> int:
        return self.stats.level

    @property
    def max_hp_basis(self) -> float:
        return self.stats.max_hp_basis

    @property
    def colored_name(self) -> str:
        return f"[bold]{self.name}[/]"

    # ============================================================================
    # STATE
    # ============================================================================

    def is_fainted(self) -> bool:
        """Returns True if the combatant has no hit points left."""
        return self.stats.is_fainted()

    def is_alive(self) -> bool:
        return not self.is_fainted()

    def take_damage(self, amount: float) -> float:
        """
        Subtracts damage from the hit points.

        Args:
            amount (float): The damage to apply. Negative amounts count as zero.

        Returns:
            float: The damage actually applied.

        """
        amount = max(0.0, amount)
        self.stats.hp -= amount
        log_debug(
            f"{self.name} takes {amount:.2f} damage",
            {"hp": round(self.stats.hp, 2), "fainted": self.is_fainted()},
        )
        return amount

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, hp={self.hp:.1f}, lvl={self.level})"
