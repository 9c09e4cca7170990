"""
Core system module for the game.

This module contains the fundamental components shared by every other
package: game constants, the error taxonomy, logging and console helpers.
The content repository lives in ``legends.core.content`` and is imported from
there, since it depends on the entity and item packages.
"""

from .constants import (
    Attribute,
    ElementType,
    EncounterPhase,
    HeroClass,
    ItemKind,
    MonsterType,
)
from .errors import (
    DataLoadError,
    EmptyCatalogError,
    LegendsError,
    PreconditionViolation,
)

__all__ = [
    # Import from constants.py
    "Attribute",
    "ElementType",
    "EncounterPhase",
    "HeroClass",
    "ItemKind",
    "MonsterType",
    # Import from errors.py
    "DataLoadError",
    "EmptyCatalogError",
    "LegendsError",
    "PreconditionViolation",
]
