"""
Combat system module for the game.

This module handles the encounter state machine, damage arithmetic, monster
spawning and decision making, and the encounter outcome.
"""

from .combat_manager import CombatManager, start_encounter
from .outcome import Defeat, Outcome, Victory, compute_rewards
from .spawner import MonsterSpawner, scale_template, target_level_for

__all__ = [
    "CombatManager",
    "Defeat",
    "MonsterSpawner",
    "Outcome",
    "Victory",
    "compute_rewards",
    "scale_template",
    "start_encounter",
    "target_level_for",
]
