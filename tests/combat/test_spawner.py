"""
Tests for monster spawning and level scaling.
"""

from random import Random

import pytest
from conftest import make_hero, make_template

from legends.combat import MonsterSpawner, scale_template, target_level_for
from legends.core.errors import EmptyCatalogError, PreconditionViolation
from legends.entities import Party


def test_spawns_one_monster_per_hero_at_target_level():
    catalog = [make_template("Natsunomeryu"), make_template("Chrysophylax", level=2)]
    spawner = MonsterSpawner(catalog, Random(3))
    monsters = spawner.spawn(3, 4)
    assert len(monsters) == 3
    assert all(monster.level == 4 for monster in monsters)
    assert all(monster.hp == 400 for monster in monsters)


def test_scaling_uses_target_over_template_level():
    template = make_template(level=2, base_damage=10, defense=40, dodge_chance=0.25)
    party = Party([make_hero("A", level=3), make_hero("B", level=5)])

    monster = scale_template(template, target_level_for(party))

    assert monster.level == 5
    assert monster.base_damage == pytest.approx(25)
    assert monster.defense == pytest.approx(100)
    assert monster.dodge_chance == 0.25


def test_template_level_zero_counts_as_one():
    monster = scale_template(make_template(level=0, base_damage=10), 3)
    assert monster.base_damage == pytest.approx(30)
    assert monster.level == 3


def test_empty_catalog_is_an_error():
    with pytest.raises(EmptyCatalogError) as exc:
        MonsterSpawner([], Random(0)).spawn(1, 1)
    assert isinstance(exc.value, PreconditionViolation)


def test_spawned_monsters_are_independent_instances():
    template = make_template()
    monsters = MonsterSpawner([template], Random(0)).spawn(2, 1)
    assert monsters[0] is not monsters[1]
    monsters[0].take_damage(50)
    assert monsters[1].hp == 100
    assert template.base_damage == 10


def test_spawn_for_uses_party_size_and_highest_level():
    party = Party([make_hero("A", level=1), make_hero("B", level=2)])
    monsters = MonsterSpawner([make_template()], Random(0)).spawn_for(party)
    assert [monster.level for monster in monsters] == [2, 2]


def test_same_seed_gives_same_roster():
    catalog = [make_template(f"M{i}") for i in range(6)]
    first = MonsterSpawner(catalog, Random(99)).spawn(3, 1)
    second = MonsterSpawner(catalog, Random(99)).spawn(3, 1)
    assert [m.name for m in first] == [m.name for m in second]
