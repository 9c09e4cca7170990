"""
Entity module for the game.

This module contains the stat block, heroes, monsters, inventories and the
party, together with the catalog templates heroes and monsters are built from.
"""

from .combatant import Combatant
from .hero import Hero, HeroTemplate
from .inventory import Inventory
from .monster import Monster, MonsterTemplate
from .party import Party
from .stats import StatBlock

__all__ = [
    "Combatant",
    "Hero",
    "HeroTemplate",
    "Inventory",
    "Monster",
    "MonsterTemplate",
    "Party",
    "StatBlock",
]
