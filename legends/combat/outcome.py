"""
Encounter outcome module for the game.

An encounter ends either in a Victory, carrying the reward granted to each
surviving hero, or in a Defeat.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from legends.core.constants import GOLD_PER_MONSTER_LEVEL, XP_PER_MONSTER
from legends.entities import Monster


class Victory(BaseModel):
    """All monsters fainted. Every surviving hero received the full reward."""

    model_config = ConfigDict(frozen=True)

    result: Literal["victory"] = "victory"
    gold: float = Field(ge=0, description="Gold granted to each surviving hero.")
    xp: int = Field(ge=0, description="Experience granted to each surviving hero.")
    rounds: int = Field(ge=1, description="Number of rounds fought.")
    revived: list[str] = Field(
        default_factory=list,
        description="Names of the heroes revived after the battle.",
    )


class Defeat(BaseModel):
    """Every hero fainted. No reward is granted."""

    model_config = ConfigDict(frozen=True)

    result: Literal["defeat"] = "defeat"
    rounds: int = Field(ge=1, description="Number of rounds fought.")


Outcome = Victory | Defeat


def compute_rewards(enemies: list[Monster]) -> tuple[float, int]:
    """
    Computes the reward of a won encounter.

    Args:
        enemies (list[Monster]): The defeated roster.

    Returns:
        tuple[float, int]: The gold (100 per monster level) and the experience
        (2 per monster) granted to each surviving hero.

    """
    gold = float(sum(enemy.level for enemy in enemies) * GOLD_PER_MONSTER_LEVEL)
    xp = len(enemies) * XP_PER_MONSTER
    return gold, xp
