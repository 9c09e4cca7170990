"""
Inventory management module for the game.

Stores the items owned by a single hero, grouped by item kind and kept in
acquisition order.
"""

from legends.core.constants import ItemKind
from legends.core.errors import PreconditionViolation
from legends.items import Armor, BaseItem, Potion, Spell, Weapon


class Inventory:
    """
    Maps each item kind to the ordered list of items of that kind.

    Attributes:
        items_by_kind (dict[ItemKind, list[BaseItem]]):
            The owned items, one list per kind.

    """

    def __init__(self, items: list[BaseItem] | None = None) -> None:
        self.items_by_kind: dict[ItemKind, list[BaseItem]] = {
            kind: [] for kind in ItemKind
        }
        for item in items or []:
            self.add_item(item)

    def add_item(self, item: BaseItem) -> None:
        """Appends an item to the list of its kind."""
        self.items_by_kind[item.item_kind].append(item)

    def remove_item(self, item: BaseItem) -> None:
        """
        Removes one owned item, preferring the very same instance.

        Args:
            item (BaseItem): The item to remove.

        Raises:
            PreconditionViolation: If the item is not owned.

        """
        bucket = self.items_by_kind[item.item_kind]
        for index, owned in enumerate(bucket):
            if owned is item:
                del bucket[index]
                return
        try:
            bucket.remove(item)
        except ValueError as e:
            raise PreconditionViolation(
                f"{item.name} is not in the inventory",
                {"item": item.name, "kind": item.item_kind},
            ) from e

    def contains(self, item: BaseItem) -> bool:
        """Returns True if the exact item instance is owned."""
        return any(owned is item for owned in self.items_by_kind[item.item_kind])

    @property
    def weapons(self) -> list[Weapon]:
        return list(self.items_by_kind[ItemKind.WEAPON])  # type: ignore[arg-type]

    @property
    def armors(self) -> list[Armor]:
        return list(self.items_by_kind[ItemKind.ARMOR])  # type: ignore[arg-type]

    @property
    def potions(self) -> list[Potion]:
        return list(self.items_by_kind[ItemKind.POTION])  # type: ignore[arg-type]

    @property
    def spells(self) -> list[Spell]:
        return list(self.items_by_kind[ItemKind.SPELL])  # type: ignore[arg-type]

    def all_items(self) -> list[BaseItem]:
        """Returns every owned item, grouped by kind."""
        return [item for kind in ItemKind for item in self.items_by_kind[kind]]

    def is_empty(self) -> bool:
        return not any(self.items_by_kind.values())

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self.items_by_kind.values())

    def describe(self) -> list[str]:
        """Returns one display line per non-empty kind."""
        lines = []
        for kind in ItemKind:
            bucket = self.items_by_kind[kind]
            if bucket:
                names = ", ".join(item.name for item in bucket)
                lines.append(f"{kind.display_name}s: {names}")
        return lines or ["(empty)"]
