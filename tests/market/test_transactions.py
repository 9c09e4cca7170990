"""
Tests for buying, selling and restocking.
"""

from random import Random

import pytest
from conftest import make_hero

from legends.core.errors import PreconditionViolation
from legends.items import Armor, Potion, Weapon
from legends.market import (
    TransactionStatus,
    can_purchase,
    check_purchase,
    generate_stock,
    purchase,
    sell,
)


@pytest.fixture
def sword():
    return Weapon(name="Sword", price=100, min_level=1, damage=800)


def test_purchase_debits_and_adds(hero, sword):
    assert purchase(hero, sword) is TransactionStatus.OK
    assert hero.money == 900
    assert hero.inventory.weapons == [sword]


def test_level_is_checked_before_gold():
    hero = make_hero(level=4, money=0)
    relic = Armor(name="Guardian_Angel", price=1000, min_level=5, damage_reduction=1000)
    assert check_purchase(hero, relic) is TransactionStatus.LEVEL_TOO_LOW
    assert purchase(hero, relic) is TransactionStatus.LEVEL_TOO_LOW
    assert hero.inventory.is_empty()
    assert hero.money == 0


def test_insufficient_gold_changes_nothing():
    hero = make_hero(money=99)
    sword = Weapon(name="Sword", price=100, damage=800)
    assert not can_purchase(hero, sword)
    assert purchase(hero, sword) is TransactionStatus.INSUFFICIENT_GOLD
    assert hero.money == 99
    assert hero.inventory.is_empty()


def test_exact_gold_is_enough():
    hero = make_hero(money=100)
    assert purchase(hero, Weapon(name="Sword", price=100, damage=800)) is TransactionStatus.OK
    assert hero.money == 0


def test_sell_credits_half_price(hero, sword):
    purchase(hero, sword)
    assert sell(hero, sword) == 50
    assert hero.money == 950
    assert hero.inventory.is_empty()


def test_selling_equipped_item_unequips_it(hero, sword):
    purchase(hero, sword)
    hero.equip_weapon(sword)
    sell(hero, sword)
    assert hero.equipped_weapon is None


def test_selling_a_duplicate_keeps_the_equipped_copy(hero, sword):
    purchase(hero, sword)
    purchase(hero, sword)
    hero.equip_weapon(hero.inventory.weapons[0])
    sell(hero, hero.inventory.weapons[1])
    assert len(hero.inventory.weapons) == 1
    assert hero.equipped_weapon is sword
    sell(hero, sword)
    assert hero.equipped_weapon is None


def test_selling_unowned_item_is_rejected(hero, sword):
    with pytest.raises(PreconditionViolation):
        sell(hero, sword)
    assert hero.money == 1000


def test_stock_has_ten_catalog_items():
    catalog = [
        Weapon(name="Dagger", price=200, damage=250),
        Potion(name="Ambrosia", price=1000, min_level=8, attribute_increase=150,
               affected_attributes="Health/Mana/Strength/Dexterity/Agility"),
    ]
    stock = generate_stock(catalog, Random(4))
    assert len(stock) == 10
    assert all(item in catalog for item in stock)


def test_stock_from_empty_catalog_is_empty():
    assert generate_stock([], Random(0)) == []
