"""
User interface module for the game.

This module holds the ChoiceProvider and OutputSink contracts used by the
rules, and their terminal implementations.
"""

from .interfaces import ChoiceProvider, MemorySink, OutputSink

__all__ = [
    "ChoiceProvider",
    "MemorySink",
    "OutputSink",
]
