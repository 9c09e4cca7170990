"""
Interfaces between the game rules and whatever drives them.

The combat engine and the market never read from a terminal or print to one.
They ask a ChoiceProvider for menu selections and narrate through an
OutputSink, so a terminal, a script or a test can stand on the other side.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class ChoiceProvider(Protocol):
    """Source of validated menu selections."""

    def choose_int(self, prompt: str, minimum: int, maximum: int) -> int:
        """
        Blocks until an integer in ``[minimum, maximum]`` is chosen.

        Args:
            prompt (str): The question shown to the player.
            minimum (int): The smallest valid answer.
            maximum (int): The largest valid answer.

        Returns:
            int: The chosen value, always within range.

        """
        ...

    def choose_option(self, prompt: str, valid_tokens: set[str]) -> str:
        """Blocks until one of ``valid_tokens`` is chosen and returns it."""
        ...


@runtime_checkable
class OutputSink(Protocol):
    """Append-only narration log."""

    def emit(self, line: str) -> None: ...


class MemorySink:
    """
    OutputSink keeping every emitted line in memory.

    Attributes:
        lines (list[str]):
            The emitted lines, in order.

    """

    def __init__(self) -> None:
        self.lines: list[str] = []

    def emit(self, line: str) -> None:
        self.lines.append(line)

    def contains(self, fragment: str) -> bool:
        """Returns True if any emitted line contains the fragment."""
        return any(fragment in line for line in self.lines)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)
