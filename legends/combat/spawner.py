"""
Monster spawning module for the game.

Builds the enemy roster of an encounter by drawing templates from the monster
catalog and rescaling them to the party's level.
"""

from collections.abc import Sequence
from random import Random

from catchery import log_critical

from legends.core.errors import EmptyCatalogError
from legends.core.logging import log_debug
from legends.entities import Monster, MonsterTemplate, Party


def target_level_for(party: Party) -> int:
    """Returns the level monsters are scaled to: the highest hero level, or 1."""
    return party.highest_level()


def scale_template(template: MonsterTemplate, target_level: int) -> Monster:
    """
    Creates a fresh monster from a template, rescaled to the target level.

    Damage and defense grow with ``target_level / template.level`` (a template
    level of zero counts as one), dodge is kept unchanged and the level is set
    to the target. The monster never references the template afterwards.

    Args:
        template (MonsterTemplate): The catalog prototype.
        target_level (int): The level of the spawned monster.

    Returns:
        Monster: The new monster, at full health.

    """
    ratio = target_level / max(1, template.level)
    return Monster(
        name=template.name,
        monster_type=template.monster_type,
        level=target_level,
        base_damage=template.base_damage * ratio,
        defense=template.defense * ratio,
        dodge_chance=template.dodge_chance,
    )


class MonsterSpawner:
    """
    Draws encounter monsters from a read-only template catalog.

    Attributes:
        catalog (tuple[MonsterTemplate, ...]):
            The templates to draw from.
        rng (Random):
            The shared random generator.

    """

    def __init__(self, catalog: Sequence[MonsterTemplate], rng: Random) -> None:
        self.catalog: tuple[MonsterTemplate, ...] = tuple(catalog)
        self.rng = rng

    def spawn(self, party_size: int, target_level: int) -> list[Monster]:
        """
        Spawns one monster per hero slot.

        Args:
            party_size (int): The number of monsters to spawn.
            target_level (int): The level of every spawned monster.

        Raises:
            EmptyCatalogError: If the catalog holds no template.

        Returns:
            list[Monster]: Exactly ``party_size`` fresh monsters.

        """
        if not self.catalog:
            log_critical(
                "Cannot spawn monsters from an empty catalog",
                {"party_size": party_size, "target_level": target_level},
            )
            raise EmptyCatalogError(
                "The monster catalog is empty", {"party_size": party_size}
            )
        monsters = []
        for _ in range(party_size):
            template = self.catalog[self.rng.randrange(len(self.catalog))]
            monsters.append(scale_template(template, target_level))
        log_debug(
            "Spawned monsters",
            {"names": [m.name for m in monsters], "level": target_level},
        )
        return monsters

    def spawn_for(self, party: Party) -> list[Monster]:
        """Spawns a roster sized and scaled for the given party."""
        return self.spawn(party.size, target_level_for(party))
