"""
Constants and enumerations for the game.

Defines the tuning constants of the combat and market rules, together with the
enumerations for hero classes, monster types, item kinds, spell elements and
potion attributes used throughout the game.
"""

from enum import Enum

# =============================================================================
# Combat tuning
# =============================================================================

# Scale applied to hero strength (plus weapon damage) for a physical attack.
ATTACK_FACTOR = 0.05
# Scale applied to monster defense when mitigating a physical attack.
DEFENSE_FACTOR = 0.05
# Scale applied to armor damage reduction when mitigating a monster attack.
ARMOR_FACTOR = 0.2
# Hero dodge chance per point of agility.
AGILITY_DODGE_FACTOR = 0.002
# Dexterity divisor for the spell damage bonus.
SPELL_DEXTERITY_DIVISOR = 10000.0
# Fraction of the current value removed by an elemental debuff.
DEBUFF_RATIO = 0.1
# End of round regeneration multiplier for hp and mana.
REGENERATION_FACTOR = 1.1
# Gold granted per level of each defeated monster.
GOLD_PER_MONSTER_LEVEL = 100
# Experience granted per defeated monster.
XP_PER_MONSTER = 2

# =============================================================================
# Progression
# =============================================================================

# Maximum hp basis per hero/monster level.
HP_PER_LEVEL = 100
# Experience needed to level up is the current level times this value.
XP_PER_LEVEL = 10
# Mana growth on level up.
LEVEL_UP_MANA_FACTOR = 1.1
# Skill growth on level up, and the extra growth for favored skills.
LEVEL_UP_SKILL_FACTOR = 1.05
LEVEL_UP_FAVORED_FACTOR = 1.05
# Fraction of hp basis (and of current mana) restored on revive.
REVIVE_RATIO = 0.5

# =============================================================================
# Market and world
# =============================================================================

RESALE_RATIO = 0.5
MARKET_STOCK_SIZE = 10
ENCOUNTER_PROBABILITY = 0.5
MIN_PARTY_SIZE = 1
MAX_PARTY_SIZE = 3


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().capitalize()


class Attribute(NiceEnum):
    """Defines the hero attributes a potion can raise."""

    HEALTH = "HEALTH"
    MANA = "MANA"
    STRENGTH = "STRENGTH"
    DEXTERITY = "DEXTERITY"
    AGILITY = "AGILITY"

    @property
    def stat_name(self) -> str:
        """Returns the name of the stat block field backing this attribute."""
        return {
            Attribute.HEALTH: "hp",
            Attribute.MANA: "mana",
            Attribute.STRENGTH: "strength",
            Attribute.DEXTERITY: "dexterity",
            Attribute.AGILITY: "agility",
        }[self]


class HeroClass(NiceEnum):
    """Defines the classes a hero can belong to."""

    WARRIOR = "WARRIOR"
    SORCERER = "SORCERER"
    PALADIN = "PALADIN"

    @property
    def favored_skills(self) -> tuple[str, str]:
        """Returns the two skills this class grows faster on level up."""
        return {
            HeroClass.WARRIOR: ("strength", "agility"),
            HeroClass.SORCERER: ("dexterity", "agility"),
            HeroClass.PALADIN: ("strength", "dexterity"),
        }[self]

    @property
    def blurb(self) -> str:
        """Returns a short description used by the class selection menu."""
        first, second = self.favored_skills
        return f"{self.display_name} (Favors {first.capitalize()}/{second.capitalize()})"

    @property
    def color(self) -> str:
        """Returns the color string associated with this class."""
        return {
            HeroClass.WARRIOR: "bold red",
            HeroClass.SORCERER: "bold magenta",
            HeroClass.PALADIN: "bold yellow",
        }.get(self, "bold blue")

    def colorize(self, message: str) -> str:
        """Applies class color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class MonsterType(NiceEnum):
    """Defines the families of monsters."""

    DRAGON = "DRAGON"
    EXOSKELETON = "EXOSKELETON"
    SPIRIT = "SPIRIT"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this monster type."""
        return {
            MonsterType.DRAGON: "🐉",
            MonsterType.EXOSKELETON: "🦂",
            MonsterType.SPIRIT: "👻",
        }.get(self, "👹")


class ElementType(NiceEnum):
    """Defines the elements of spells and the stat each one weakens."""

    FIRE = "FIRE"
    ICE = "ICE"
    LIGHTNING = "LIGHTNING"

    @property
    def weakened_stat(self) -> str:
        """Returns the monster field reduced by a spell of this element."""
        return {
            ElementType.FIRE: "defense",
            ElementType.ICE: "base_damage",
            ElementType.LIGHTNING: "dodge_chance",
        }[self]

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this element."""
        return {
            ElementType.FIRE: "🔥",
            ElementType.ICE: "❄️",
            ElementType.LIGHTNING: "⚡",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this element."""
        return {
            ElementType.FIRE: "bold red",
            ElementType.ICE: "bold cyan",
            ElementType.LIGHTNING: "bold blue",
        }.get(self, "dim white")

    def colorize(self, message: str) -> str:
        """Applies element color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class ItemKind(NiceEnum):
    """Defines the kinds of items, used as the discriminator of the item union."""

    WEAPON = "weapon"
    ARMOR = "armor"
    POTION = "potion"
    SPELL = "spell"


class EncounterPhase(NiceEnum):
    """Defines the states of the combat state machine."""

    SETUP = "SETUP"
    HEROES_TURN = "HEROES_TURN"
    ENEMIES_TURN = "ENEMIES_TURN"
    REGENERATION = "REGENERATION"
    VICTORY = "VICTORY"
    DEFEAT = "DEFEAT"

    @property
    def is_terminal(self) -> bool:
        return self in (EncounterPhase.VICTORY, EncounterPhase.DEFEAT)
