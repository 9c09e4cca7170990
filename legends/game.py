"""
Game session module.

Builds the party from the catalog's hero pools and runs the top-level loop in
which the party fights random encounters and visits markets until it is wiped
out or the player quits. Board traversal is left to the caller: this loop only
decides, with a dice roll, whether exploring leads to an ambush.
"""

from random import Random

from catchery import log_critical

from legends.combat import Defeat, Outcome, start_encounter
from legends.core.constants import (
    ENCOUNTER_PROBABILITY,
    MAX_PARTY_SIZE,
    MIN_PARTY_SIZE,
    HeroClass,
)
from legends.core.content import ContentRepository
from legends.core.errors import DataLoadError
from legends.entities import Hero, HeroTemplate, Party
from legends.market import MarketSession
from legends.ui.interfaces import ChoiceProvider, OutputSink


def roll_for_encounter(rng: Random, probability: float = ENCOUNTER_PROBABILITY) -> bool:
    """Returns True if moving onto a common space triggers an encounter."""
    return rng.random() < probability


def select_party(
    hero_pools: dict[HeroClass, list[HeroTemplate]],
    choices: ChoiceProvider,
    sink: OutputSink,
) -> Party:
    """
    Asks for a party size and then for each hero.

    Chosen templates are removed from their pool, so a hero can only be picked
    once. Classes whose pool is empty are not offered.

    Args:
        hero_pools (dict[HeroClass, list[HeroTemplate]]):
            The available heroes by class; mutated as heroes are picked.
        choices (ChoiceProvider):
            Source of menu selections.
        sink (OutputSink):
            Destination of the menus.

    Raises:
        DataLoadError: If every pool is empty.

    Returns:
        Party: The new party.

    """
    if not any(hero_pools.values()):
        log_critical("No heroes available for selection", {})
        raise DataLoadError("No heroes available for selection")
    sink.emit("--- Hero Selection ---")
    available = sum(len(pool) for pool in hero_pools.values())
    size = choices.choose_int(
        "Enter party size", MIN_PARTY_SIZE, min(MAX_PARTY_SIZE, available)
    )
    party = Party()
    for slot in range(size):
        sink.emit(f"Select Hero #{slot + 1}:")
        classes = [c for c in HeroClass if hero_pools.get(c)]
        for index, hero_class in enumerate(classes, 1):
            sink.emit(f"{index}. {hero_class.blurb}")
        hero_class = classes[choices.choose_int("Choose class", 1, len(classes)) - 1]
        pool = hero_pools[hero_class]
        sink.emit("Available Heroes:")
        sink.emit(
            f"{'ID':<4} {'Name':<20} {'Lvl':<5} {'MP':<5} {'Str':<5} {'Dex':<5} {'Agi':<5}"
        )
        for index, template in enumerate(pool, 1):
            sink.emit(
                f"{index:<4} {template.name:<20} {template.level:<5} "
                f"{template.mana:<5.0f} {template.strength:<5.0f} "
                f"{template.dexterity:<5.0f} {template.agility:<5.0f}"
            )
        picked = pool.pop(choices.choose_int("Select hero ID", 1, len(pool)) - 1)
        party.add_hero(Hero.from_template(picked))
    return party


class GameSession:
    """
    The top-level loop of a play session.

    Attributes:
        content (ContentRepository):
            The read-only catalog.
        rng (Random):
            The shared random generator.
        party (Party | None):
            The party, once selected.
        last_outcome (Outcome | None):
            The outcome of the most recent encounter.

    """

    def __init__(
        self,
        content: ContentRepository,
        rng: Random,
        choices: ChoiceProvider,
        sink: OutputSink,
    ) -> None:
        self.content = content
        self.rng = rng
        self.choices = choices
        self.sink = sink
        self.party: Party | None = None
        self.last_outcome: Outcome | None = None
        self._quit = False

    def initialize(self) -> None:
        pools = {c: list(self.content.heroes_of(c)) for c in HeroClass}
        self.party = select_party(pools, self.choices, self.sink)
        self.sink.emit("The party enters the world...")

    def is_game_over(self) -> bool:
        return self.party is not None and self.party.is_wiped_out()

    def play(self) -> None:
        """Runs the session until the party is wiped out or the player quits."""
        self.initialize()
        while not self.is_game_over() and not self._quit:
            self.process_turn()
        self.end_game()

    def process_turn(self) -> None:
        assert self.party is not None, "The party must be selected first."
        for hero in self.party.heroes:
            self.sink.emit(hero.get_status_line())
        self.sink.emit("Controls: [E]xplore [M]arket [I]nfo [Q]uit")
        action = self.choices.choose_option("Action", {"e", "m", "i", "q"})
        if action == "e":
            self.explore()
        elif action == "m":
            MarketSession(
                self.party, self.content.all_items(), self.rng, self.choices, self.sink
            ).run()
        elif action == "i":
            self.show_detailed_info()
        else:
            self._quit = True

    def explore(self) -> Outcome | None:
        """Moves on through the wilds, possibly running into monsters."""
        assert self.party is not None, "The party must be selected first."
        if not roll_for_encounter(self.rng):
            self.sink.emit("The path is quiet.")
            return None
        self.sink.emit("[bold red]*** AMBUSH! You have encountered monsters! ***[/]")
        self.last_outcome = start_encounter(
            self.party, self.content.all_monsters(), self.rng, self.choices, self.sink
        )
        return self.last_outcome

    def show_detailed_info(self) -> None:
        assert self.party is not None, "The party must be selected first."
        self.sink.emit("=== Detailed Party Info ===")
        for hero in self.party.heroes:
            self.sink.emit(hero.get_status_line(show_bars=True))
            for line in hero.inventory.describe():
                self.sink.emit(f"  {line}")
            self.sink.emit("---------------------------")

    def end_game(self) -> None:
        if isinstance(self.last_outcome, Defeat) and self.is_game_over():
            self.sink.emit("Your legend ends here.")
        self.sink.emit("Game Over. Thanks for playing Legends: Monsters and Heroes!")
