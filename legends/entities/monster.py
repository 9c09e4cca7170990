"""
Monster module for the game.

Defines the monster templates of the catalog and the Monster entity fought in
an encounter, including the elemental debuffs spells inflict on it.
"""

from pydantic import BaseModel, ConfigDict, Field

from legends.core.constants import DEBUFF_RATIO, ElementType, MonsterType
from legends.core.logging import log_debug
from legends.core.utils import make_bar

from .combatant import Combatant
from .stats import StatBlock


class MonsterTemplate(BaseModel):
    """A catalog prototype that the spawner scales into live monsters."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="The name of the monster.")
    monster_type: MonsterType = Field(description="The family of the monster.")
    level: int = Field(ge=0, description="The level the stats are given for.")
    base_damage: float = Field(ge=0, description="Damage dealt by each hit.")
    defense: float = Field(ge=0, description="Defense against physical attacks.")
    dodge_chance: float = Field(
        ge=0,
        le=1,
        description="Probability of dodging a physical attack, as a fraction.",
    )


class Monster(Combatant):
    """
    A live enemy owned by one encounter.

    Attributes:
        monster_type (MonsterType):
            The family of the monster.
        base_damage (float):
            Damage dealt by each hit before armor.
        defense (float):
            Defense subtracted from physical attacks.
        dodge_chance (float):
            Probability of dodging a physical attack, in [0, 1].

    """

    def __init__(
        self,
        name: str,
        monster_type: MonsterType,
        level: int,
        base_damage: float,
        defense: float,
        dodge_chance: float,
    ) -> None:
        super().__init__(name, StatBlock.for_level(level))
        self.monster_type = monster_type
        self.base_damage = base_damage
        self.defense = defense
        self.dodge_chance = dodge_chance

    @property
    def colored_name(self) -> str:
        return f"[bold red]{self.name}[/]"

    def apply_debuff(self, element: ElementType) -> float:
        """
        Weakens the stat matching the element by 10% of its current value.

        Debuffs last for the whole encounter and compound: each one is taken
        from the already reduced value, so the stat shrinks towards zero
        without ever crossing it.

        Args:
            element (ElementType): The element of the spell.

        Returns:
            float: The amount removed from the stat.

        """
        stat = element.weakened_stat
        current = getattr(self, stat)
        reduction = current * DEBUFF_RATIO
        setattr(self, stat, current - reduction)
        log_debug(
            f"{self.name} {stat} reduced by {element.display_name}",
            {"before": round(current, 4), "after": round(current - reduction, 4)},
        )
        return reduction

    def get_status_line(self, show_bars: bool = False) -> str:
        status = f"{self.monster_type.emoji} {self.colored_name} Lvl {self.level} "
        if show_bars:
            status += make_bar(self.hp, self.max_hp_basis, length=8, color="red") + " "
        status += (
            f"HP {max(0.0, self.hp):.0f} DMG {self.base_damage:.0f} "
            f"DEF {self.defense:.0f} DODGE {self.dodge_chance * 100:.0f}%"
        )
        if self.is_fainted():
            status += " [dim](defeated)[/]"
        return status
