"""
Party module for the game.

A party is the ordered group of heroes that travels and fights together.
Insertion order is turn order.
"""

from legends.core.constants import MAX_PARTY_SIZE
from legends.core.errors import PreconditionViolation

from .hero import Hero


class Party:
    """
    The ordered group of 1 to 3 heroes controlled by the player.

    Attributes:
        heroes (list[Hero]):
            The heroes in turn order.
        row (int):
            The current row of the party on the world grid.
        col (int):
            The current column of the party on the world grid.

    """

    def __init__(self, heroes: list[Hero] | None = None) -> None:
        self.heroes: list[Hero] = []
        self.row = 0
        self.col = 0
        for hero in heroes or []:
            self.add_hero(hero)

    def add_hero(self, hero: Hero) -> None:
        """
        Appends a hero at the end of the turn order.

        Raises:
            PreconditionViolation: If the party is full or already has the hero.

        """
        if len(self.heroes) >= MAX_PARTY_SIZE:
            raise PreconditionViolation(
                "The party is full", {"size": len(self.heroes), "hero": hero.name}
            )
        if any(member is hero for member in self.heroes):
            raise PreconditionViolation(
                "A hero cannot join the same party twice", {"hero": hero.name}
            )
        self.heroes.append(hero)

    @property
    def size(self) -> int:
        return len(self.heroes)

    def get_hero(self, index: int) -> Hero:
        return self.heroes[index]

    def alive_heroes(self) -> list[Hero]:
        return [hero for hero in self.heroes if not hero.is_fainted()]

    def is_wiped_out(self) -> bool:
        """Returns True if every hero is fainted."""
        return all(hero.is_fainted() for hero in self.heroes)

    def highest_level(self) -> int:
        """Returns the highest hero level, or 1 for an empty party."""
        return max((hero.level for hero in self.heroes), default=1)

    def set_location(self, row: int, col: int) -> None:
        self.row = row
        self.col = col

    def __iter__(self):
        return iter(self.heroes)

    def __len__(self) -> int:
        return len(self.heroes)
