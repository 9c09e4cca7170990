"""
Main entry point for Legends: Monsters and Heroes.

Loads the definition files, asks the player to build a party, then runs the
session loop of exploring, fighting and shopping in the terminal.
"""

import argparse
import logging
from pathlib import Path
from random import Random

from legends.core.content import ContentRepository
from legends.core.errors import LegendsError
from legends.core.logging import setup_logging
from legends.core.utils import cprint, crule
from legends.game import GameSession
from legends.ui.cli_interface import ConsoleSink, PromptChoiceProvider

# Get the path to the data folder.
DEFAULT_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Legends: Monsters and Heroes")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=DEFAULT_DATA_DIR,
        help="Directory containing the definition files.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the random generator, for reproducible sessions.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    crule("Legends: Monsters and Heroes", style="bold green")
    try:
        content = ContentRepository(args.data_dir)
        session = GameSession(
            content, Random(args.seed), PromptChoiceProvider(), ConsoleSink()
        )
        session.play()
    except LegendsError as e:
        cprint(f"[bold red]{e.message}[/]")
        return 1
    except (KeyboardInterrupt, EOFError):
        cprint("\nSession interrupted.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
