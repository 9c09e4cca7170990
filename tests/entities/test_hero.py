"""
Tests for heroes: fainted state, equipment, progression and revival.
"""

import pytest
from conftest import make_hero

from legends.core.constants import HeroClass
from legends.items import Armor, Weapon


def test_hero_starts_at_full_hp_basis():
    hero = make_hero(level=3)
    assert hero.max_hp_basis == 300
    assert hero.hp == 300
    assert not hero.is_fainted()


@pytest.mark.parametrize("hp, fainted", [(1, False), (0.01, False), (0, True), (-25, True)])
def test_fainted_iff_hp_not_positive(hero, hp, fainted):
    hero.hp = hp
    assert hero.is_fainted() is fainted
    assert hero.is_alive() is not fainted


def test_take_damage_can_drive_hp_below_zero(hero):
    dealt = hero.take_damage(150)
    assert dealt == 150
    assert hero.hp == -50
    assert hero.is_fainted()


def test_take_damage_ignores_negative_amounts(hero):
    assert hero.take_damage(-5) == 0
    assert hero.hp == 100


def test_equipment_feeds_damage_and_reduction(hero):
    assert hero.weapon_damage == 0
    assert hero.armor_reduction == 0
    hero.equip_weapon(Weapon(name="Sword", price=500, damage=800))
    hero.equip_armor(Armor(name="Breastplate", price=350, damage_reduction=600))
    assert hero.weapon_damage == 800
    assert hero.armor_reduction == 600


def test_gain_experience_levels_up_and_boosts_favored_skills():
    hero = make_hero(
        hero_class=HeroClass.WARRIOR, mana=100, strength=100, dexterity=100, agility=100
    )
    hero.hp = 20
    gained = hero.gain_experience(12)
    assert gained == 1
    assert hero.level == 2
    assert hero.experience == 2
    assert hero.max_hp_basis == 200
    assert hero.hp == 200
    assert hero.mana == pytest.approx(110)
    assert hero.strength == pytest.approx(100 * 1.05 * 1.05)
    assert hero.agility == pytest.approx(100 * 1.05 * 1.05)
    assert hero.dexterity == pytest.approx(105)


def test_level_up_never_lowers_regenerated_hp(hero):
    hero.hp = 250
    hero.level_up()
    assert hero.max_hp_basis == 200
    assert hero.hp == 250


def test_gain_experience_below_threshold_keeps_level(hero):
    assert hero.gain_experience(2) == 0
    assert hero.level == 1
    assert hero.experience == 2


def test_gain_experience_can_cross_several_levels():
    hero = make_hero(hero_class=HeroClass.SORCERER)
    # 10 xp for level 1 -> 2, then 20 for level 2 -> 3.
    assert hero.gain_experience(30) == 2
    assert hero.level == 3
    assert hero.experience == 0


def test_revive_restores_half_of_hp_basis(hero):
    hero.hp = -40
    hero.mana = 200
    hero.revive()
    assert hero.hp == 50
    assert hero.mana == 100
    assert not hero.is_fainted()


def test_status_line_flags_fainted_hero(hero):
    hero.hp = 0
    assert "fainted" in hero.get_status_line()
