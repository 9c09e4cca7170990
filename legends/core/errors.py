"""
Error taxonomy for the game.

Only fatal conditions are exceptions. Recoverable conditions (a cancelled menu,
not enough mana, not enough gold) are reported to the player and handled by
returning to the menu, so they never reach this module.
"""

from typing import Any


class LegendsError(Exception):
    """Base class of every error raised by the game."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}


class PreconditionViolation(LegendsError):
    """A caller broke a contract the engine relies on (programming error)."""


class EmptyCatalogError(PreconditionViolation):
    """Monsters were requested from an empty template catalog."""


class DataLoadError(LegendsError):
    """A definition file is missing or malformed, or no hero could be loaded."""
