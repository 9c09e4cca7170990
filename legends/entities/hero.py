"""
Hero module for the game.

Defines the hero templates loaded from the catalog and the Hero entity that a
party owns, including equipment, money, experience, level ups and revival.
"""

from pydantic import BaseModel, ConfigDict, Field

from legends.core.constants import (
    LEVEL_UP_FAVORED_FACTOR,
    LEVEL_UP_MANA_FACTOR,
    LEVEL_UP_SKILL_FACTOR,
    HP_PER_LEVEL,
    REVIVE_RATIO,
    XP_PER_LEVEL,
    HeroClass,
)
from legends.core.logging import log_debug
from legends.core.utils import make_bar
from legends.items import Armor, Weapon

from .combatant import Combatant
from .inventory import Inventory
from .stats import StatBlock


class HeroTemplate(BaseModel):
    """A catalog entry from which a Hero is created at roster selection."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1, description="The name of the hero.")
    hero_class: HeroClass = Field(description="The class of the hero.")
    level: int = Field(default=1, ge=1, description="The starting level.")
    mana: float = Field(ge=0, description="The starting mana.")
    strength: float = Field(ge=0, description="The starting strength.")
    agility: float = Field(ge=0, description="The starting agility.")
    dexterity: float = Field(ge=0, description="The starting dexterity.")
    money: float = Field(default=0.0, ge=0, description="The starting gold.")
    experience: int = Field(default=0, ge=0, description="The starting experience.")


class Hero(Combatant):
    """
    A player controlled adventurer.

    Attributes:
        hero_class (HeroClass):
            The class of the hero, which selects its favored skills.
        money (float):
            The gold carried by the hero.
        experience (int):
            Experience accumulated towards the next level.
        equipped_weapon (Weapon | None):
            The weapon used for attacks, if any.
        equipped_armor (Armor | None):
            The armor mitigating monster hits, if any.
        inventory (Inventory):
            The items owned by the hero.

    """

    def __init__(
        self,
        name: str,
        hero_class: HeroClass,
        stats: StatBlock,
        money: float = 0.0,
        experience: int = 0,
    ) -> None:
        super().__init__(name, stats)
        self.hero_class = hero_class
        self.money = money
        self.experience = experience
        self.equipped_weapon: Weapon | None = None
        self.equipped_armor: Armor | None = None
        self.inventory = Inventory()

    @classmethod
    def from_template(cls, template: HeroTemplate) -> "Hero":
        """Creates a fresh hero, at full health, from a catalog template."""
        stats = StatBlock.for_level(
            template.level,
            mana=template.mana,
            strength=template.strength,
            dexterity=template.dexterity,
            agility=template.agility,
        )
        return cls(
            name=template.name,
            hero_class=template.hero_class,
            stats=stats,
            money=template.money,
            experience=template.experience,
        )

    @property
    def colored_name(self) -> str:
        return self.hero_class.colorize(self.name)

    @property
    def weapon_damage(self) -> float:
        return self.equipped_weapon.damage if self.equipped_weapon else 0.0

    @property
    def armor_reduction(self) -> float:
        return self.equipped_armor.damage_reduction if self.equipped_armor else 0.0

    # ============================================================================
    # EQUIPMENT
    # ============================================================================

    def equip_weapon(self, weapon: Weapon) -> None:
        self.equipped_weapon = weapon

    def equip_armor(self, armor: Armor) -> None:
        self.equipped_armor = armor

    # ============================================================================
    # MONEY AND PROGRESSION
    # ============================================================================

    def add_money(self, amount: float) -> None:
        self.money += amount

    def deduct_money(self, amount: float) -> None:
        self.money -= amount

    def gain_experience(self, amount: int) -> int:
        """
        Adds experience and applies every level up it unlocks.

        Args:
            amount (int): The experience gained.

        Returns:
            int: The number of levels gained.

        """
        self.experience += amount
        levels_gained = 0
        while self.experience >= self.level * XP_PER_LEVEL:
            self.experience -= self.level * XP_PER_LEVEL
            self.level_up()
            levels_gained += 1
        return levels_gained

    def level_up(self) -> None:
        """
        Raises the level by one.

        Hit points are raised to at least the new basis, mana grows by 10%,
        every skill by 5% and the two favored skills of the class by a further
        5%.
        """
        self.stats.level += 1
        self.stats.max_hp_basis = float(self.stats.level * HP_PER_LEVEL)
        self.stats.hp = max(self.stats.hp, self.stats.max_hp_basis)
        self.stats.mana *= LEVEL_UP_MANA_FACTOR
        favored = self.hero_class.favored_skills
        for skill in ("strength", "dexterity", "agility"):
            factor = LEVEL_UP_SKILL_FACTOR
            if skill in favored:
                factor *= LEVEL_UP_FAVORED_FACTOR
            setattr(self.stats, skill, getattr(self.stats, skill) * factor)
        log_debug(
            f"{self.name} reached level {self.level}",
            {"hp": self.hp, "mana": round(self.mana, 2)},
        )

    def revive(self) -> None:
        """Brings a fainted hero back with half of its hp basis and half its mana."""
        self.stats.hp = self.stats.max_hp_basis * REVIVE_RATIO
        self.stats.mana *= REVIVE_RATIO

    # ============================================================================
    # DISPLAY
    # ============================================================================

    def get_status_line(self, show_bars: bool = False) -> str:
        """
        Get a formatted status line for the hero.

        Args:
            show_bars (bool): Whether to include an hp bar. Defaults to False.

        Returns:
            str: The status line.

        """
        status = f"{self.colored_name} [dim]{self.hero_class.display_name}[/] "
        status += f"Lvl {self.level} "
        if show_bars:
            status += make_bar(self.hp, self.max_hp_basis, length=8, color="green") + " "
        status += (
            f"HP {max(0.0, self.hp):.0f} MP {self.mana:.0f} "
            f"STR {self.strength:.0f} DEX {self.dexterity:.0f} AGI {self.agility:.0f} "
            f"Gold {self.money:.0f}"
        )
        if self.equipped_weapon:
            status += f" W:{self.equipped_weapon.name}"
        if self.equipped_armor:
            status += f" A:{self.equipped_armor.name}"
        if self.is_fainted():
            status += " [red](fainted)[/]"
        return status
