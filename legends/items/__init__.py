"""
Items module for the game.

This module contains the item definitions (weapons, armor, potions and
spells) as a tagged union discriminated on the ``kind`` field.
"""

from typing import Annotated, Any

from pydantic import Field, TypeAdapter

from .armor import Armor
from .base_item import BaseItem
from .potion import Potion
from .spell import Spell
from .weapon import Weapon

Item = Annotated[Weapon | Armor | Potion | Spell, Field(discriminator="kind")]

_ITEM_ADAPTER: TypeAdapter[Weapon | Armor | Potion | Spell] = TypeAdapter(Item)


def deserialize_item(data: dict[str, Any]) -> Weapon | Armor | Potion | Spell:
    """
    Deserialize an item from a dictionary.

    Args:
        data (dict[str, Any]):
            The dictionary containing item data, including its ``kind``.

    Raises:
        pydantic.ValidationError:
            If the kind is unknown or a required field is missing.

    Returns:
        Weapon | Armor | Potion | Spell:
            The deserialized item instance.
    """
    return _ITEM_ADAPTER.validate_python(data)


__all__ = [
    "Armor",
    "BaseItem",
    "Item",
    "Potion",
    "Spell",
    "Weapon",
    "deserialize_item",
]
