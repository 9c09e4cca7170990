"""
Damage module for the game.

Holds the combat arithmetic: dodge rolls, physical attack damage and its
mitigation, spell damage and monster hits against armor.
"""

from random import Random

from legends.core.constants import (
    AGILITY_DODGE_FACTOR,
    ATTACK_FACTOR,
    DEFENSE_FACTOR,
)
from legends.entities import Hero, Monster


def roll_dodge(rng: Random, chance: float) -> bool:
    """
    Rolls a dodge against a uniform draw in [0, 1).

    Args:
        rng (Random): The shared random generator.
        chance (float): The dodge probability.

    Returns:
        bool: True if the attack is dodged.

    """
    return rng.random() < chance


def hero_dodge_chance(hero: Hero) -> float:
    """Returns the chance of a hero dodging a monster hit."""
    return hero.agility * AGILITY_DODGE_FACTOR


def attack_damage(hero: Hero, target: Monster) -> float:
    """
    Computes the damage of a physical hero attack after the target's defense.

    Args:
        hero (Hero): The attacking hero.
        target (Monster): The defending monster.

    Returns:
        float: The damage, never below zero.

    """
    raw_damage = (hero.strength + hero.weapon_damage) * ATTACK_FACTOR
    return max(0.0, raw_damage - target.defense * DEFENSE_FACTOR)


def monster_damage(monster: Monster, target: Hero) -> float:
    """
    Computes the damage of a monster hit after the target's equipped armor.

    Args:
        monster (Monster): The attacking monster.
        target (Hero): The defending hero.

    Returns:
        float: The damage, never below zero.

    """
    if target.equipped_armor is None:
        return max(0.0, monster.base_damage)
    return target.equipped_armor.mitigate(monster.base_damage)
