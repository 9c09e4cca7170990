"""
Market session module for the game.

Drives one visit to a market through the ChoiceProvider/OutputSink contracts:
pick a shopper or a seller, then buy from the visit's stock or sell owned
items until the player backs out.
"""

from collections.abc import Sequence
from random import Random

from legends.entities import Hero, Party
from legends.items import BaseItem
from legends.ui.interfaces import ChoiceProvider, OutputSink

from .transactions import TransactionStatus, generate_stock, purchase, sell

BUY, SELL, EXIT = 1, 2, 3


class MarketSession:
    """
    One visit of the party to a market.

    Attributes:
        party (Party):
            The visiting party.
        stock (list[BaseItem]):
            The items on sale for this visit; buying never depletes it.

    """

    def __init__(
        self,
        party: Party,
        item_catalog: Sequence[BaseItem],
        rng: Random,
        choices: ChoiceProvider,
        sink: OutputSink,
    ) -> None:
        self.party = party
        self.choices = choices
        self.sink = sink
        self.stock: list[BaseItem] = generate_stock(item_catalog, rng)

    def run(self) -> None:
        """Shows the market menu until the player leaves."""
        self.sink.emit("You enter a bustling marketplace...")
        while True:
            self.sink.emit("--- Market Menu ---")
            self.sink.emit("1. Buy Items")
            self.sink.emit("2. Sell Items")
            self.sink.emit("3. Exit Market")
            choice = self.choices.choose_int("Choose action", BUY, EXIT)
            if choice == BUY:
                self.buy_loop()
            elif choice == SELL:
                self.sell_loop()
            else:
                break
        self.sink.emit("You leave the market.")

    def select_hero(self, prompt: str) -> Hero | None:
        self.sink.emit(prompt)
        for index, hero in enumerate(self.party.heroes, 1):
            self.sink.emit(f"{index}. {hero.name}")
        self.sink.emit(f"{self.party.size + 1}. Cancel")
        choice = self.choices.choose_int("Select Hero", 1, self.party.size + 1)
        if choice == self.party.size + 1:
            return None
        return self.party.get_hero(choice - 1)

    def buy_loop(self) -> None:
        shopper = self.select_hero("Who is buying?")
        if shopper is None:
            return
        while True:
            self.sink.emit(
                f"--- Items for Sale (Shopper: {shopper.name} | Gold: {shopper.money:.0f}) ---"
            )
            for index, item in enumerate(self.stock, 1):
                self.sink.emit(f"{index}. {item}")
            back = len(self.stock) + 1
            self.sink.emit(f"{back}. Back")
            choice = self.choices.choose_int("Select item to buy", 1, back)
            if choice == back:
                break
            self.process_purchase(shopper, self.stock[choice - 1])

    def process_purchase(self, hero: Hero, item: BaseItem) -> TransactionStatus:
        status = purchase(hero, item)
        if status is TransactionStatus.LEVEL_TOO_LOW:
            self.sink.emit(f"Cannot buy! Required Level: {item.min_level}")
        elif status is TransactionStatus.INSUFFICIENT_GOLD:
            self.sink.emit(f"Insufficient Gold! Cost: {item.price:.0f}")
        else:
            self.sink.emit(f"Purchase successful! {item.name} added to inventory.")
        return status

    def sell_loop(self) -> None:
        seller = self.select_hero("Who is selling?")
        if seller is None:
            return
        while True:
            sellable = seller.inventory.all_items()
            if not sellable:
                self.sink.emit(f"{seller.name} has nothing to sell.")
                break
            self.sink.emit(f"--- Your Inventory (Seller: {seller.name}) ---")
            for index, item in enumerate(sellable, 1):
                self.sink.emit(f"{index}. {item.name} (Sell for: {item.resale_value:.0f})")
            back = len(sellable) + 1
            self.sink.emit(f"{back}. Back")
            choice = self.choices.choose_int("Select item to sell", 1, back)
            if choice == back:
                break
            item = sellable[choice - 1]
            value = sell(seller, item)
            self.sink.emit(f"Sold {item.name} for {value:.0f} gold.")
