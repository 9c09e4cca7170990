"""
Monster decision making.

Monsters follow a fixed rule: each one attacks a living hero picked uniformly
at random.
"""

from random import Random

from legends.entities import Hero, Party


def choose_monster_target(party: Party, rng: Random) -> Hero | None:
    """
    Picks the hero a monster attacks.

    Args:
        party (Party): The party under attack.
        rng (Random): The shared random generator.

    Returns:
        Hero | None: A living hero, or None if every hero is fainted.

    """
    alive = party.alive_heroes()
    if not alive:
        return None
    return alive[rng.randrange(len(alive))]
