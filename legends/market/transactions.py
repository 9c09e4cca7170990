"""
Transaction rules for markets.

Heroes buy items at full price when their level and gold allow it, and sell
owned items back at half price. Markets restock on every visit with a random
selection, duplicates included, drawn from the whole item catalog.
"""

from collections.abc import Sequence
from random import Random

from catchery import log_warning

from legends.core.constants import MARKET_STOCK_SIZE, NiceEnum
from legends.core.errors import PreconditionViolation
from legends.entities import Hero
from legends.items import BaseItem


class TransactionStatus(NiceEnum):
    """Result of a purchase attempt."""

    OK = "OK"
    LEVEL_TOO_LOW = "LEVEL_TOO_LOW"
    INSUFFICIENT_GOLD = "INSUFFICIENT_GOLD"


def check_purchase(hero: Hero, item: BaseItem) -> TransactionStatus:
    """Returns why a purchase would be rejected, or OK. Level is checked first."""
    if hero.level < item.min_level:
        return TransactionStatus.LEVEL_TOO_LOW
    if hero.money < item.price:
        return TransactionStatus.INSUFFICIENT_GOLD
    return TransactionStatus.OK


def can_purchase(hero: Hero, item: BaseItem) -> bool:
    """Returns True if the hero meets the level requirement and has the gold."""
    return check_purchase(hero, item) is TransactionStatus.OK


def purchase(hero: Hero, item: BaseItem) -> TransactionStatus:
    """
    Buys an item for the hero.

    On success the price is debited and the item added to the inventory. The
    market keeps its stock. A rejected purchase changes nothing.

    Args:
        hero (Hero): The buyer.
        item (BaseItem): The item on sale.

    Returns:
        TransactionStatus: OK, or the reason of the rejection.

    """
    status = check_purchase(hero, item)
    if status is TransactionStatus.OK:
        hero.deduct_money(item.price)
        hero.inventory.add_item(item)
    return status


def sell(hero: Hero, item: BaseItem) -> float:
    """
    Sells an owned item for half of its price.

    The item leaves the inventory (and the equipment slot holding it) and does
    not return to the market stock.

    Args:
        hero (Hero): The seller.
        item (BaseItem): An item the hero owns.

    Raises:
        PreconditionViolation: If the hero does not own the item.

    Returns:
        float: The gold credited.

    """
    if not hero.inventory.contains(item):
        raise PreconditionViolation(
            f"{hero.name} does not own {item.name}",
            {"hero": hero.name, "item": item.name},
        )
    hero.inventory.remove_item(item)
    # Bought twice from the same stock entry, both copies are the same object.
    if not hero.inventory.contains(item):
        if hero.equipped_weapon is item:
            hero.equipped_weapon = None
        if hero.equipped_armor is item:
            hero.equipped_armor = None
    value = item.resale_value
    hero.add_money(value)
    return value


def generate_stock(
    catalog: Sequence[BaseItem],
    rng: Random,
    size: int = MARKET_STOCK_SIZE,
) -> list[BaseItem]:
    """
    Draws the stock of one market visit, uniformly and with replacement.

    Args:
        catalog (Sequence[BaseItem]): Every item the market may sell.
        rng (Random): The shared random generator.
        size (int): The number of items drawn.

    Returns:
        list[BaseItem]: The stock, empty if the catalog is empty.

    """
    if not catalog:
        log_warning("Market initialized with no items. Check data files.", {"size": size})
        return []
    return [catalog[rng.randrange(len(catalog))] for _ in range(size)]
