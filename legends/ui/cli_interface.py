"""
User interface module for the game.

Provides the terminal side of the ChoiceProvider and OutputSink contracts:
prompts read with prompt_toolkit and narration printed with rich.
"""

from prompt_toolkit import PromptSession
from rich.console import Console


class PromptChoiceProvider:
    """
    ChoiceProvider reading answers from the terminal.

    Invalid answers are rejected and the question is asked again, so callers
    only ever receive in-range values.
    """

    def __init__(self, prompt_session: PromptSession | None = None) -> None:
        self._session = prompt_session

    @property
    def session(self) -> PromptSession:
        # One session keeps history; it is created on first use.
        if self._session is None:
            self._session = PromptSession()
        return self._session

    def choose_int(self, prompt: str, minimum: int, maximum: int) -> int:
        """Asks until the player types an integer in ``[minimum, maximum]``."""
        while True:
            answer = self.session.prompt(f"{prompt} [{minimum}-{maximum}] > ")
            value = self.parse_int(answer)
            if value is not None and minimum <= value <= maximum:
                return value

    def choose_option(self, prompt: str, valid_tokens: set[str]) -> str:
        """Asks until the player types one of ``valid_tokens`` (case-insensitive)."""
        tokens = {token.lower(): token for token in valid_tokens}
        hint = "/".join(sorted(valid_tokens))
        while True:
            answer = self.session.prompt(f"{prompt} [{hint}] > ").strip().lower()
            if answer in tokens:
                return tokens[answer]

    @staticmethod
    def parse_int(answer: str) -> int | None:
        """Returns the integer typed by the player, or None if it is not one."""
        try:
            return int(answer.strip())
        except ValueError:
            return None


class ConsoleSink:
    """OutputSink printing narration lines, with rich markup, to the terminal."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console(markup=True, width=120)

    def emit(self, line: str) -> None:
        self._console.print(line)
