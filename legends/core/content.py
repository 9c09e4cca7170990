"""
Content loading module for the game.

Reads the static definition files (heroes by class, monsters by type, items
by kind) into a read-only catalog. Nothing in the game mutates the catalog:
heroes are copied out of it at roster selection and monsters are rescaled
into fresh instances by the spawner.
"""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

from catchery import log_critical, log_warning
from pydantic import ValidationError

from legends.core.constants import ElementType, HeroClass, ItemKind, MonsterType
from legends.core.errors import DataLoadError
from legends.core.logging import log_info
from legends.entities import HeroTemplate, MonsterTemplate
from legends.items import BaseItem, deserialize_item

HERO_FILES: dict[HeroClass, str] = {
    HeroClass.WARRIOR: "warriors.json",
    HeroClass.SORCERER: "sorcerers.json",
    HeroClass.PALADIN: "paladins.json",
}

MONSTER_FILES: dict[MonsterType, str] = {
    MonsterType.DRAGON: "dragons.json",
    MonsterType.EXOSKELETON: "exoskeletons.json",
    MonsterType.SPIRIT: "spirits.json",
}

ITEM_FILES: list[tuple[str, ItemKind, dict[str, Any]]] = [
    ("weaponry.json", ItemKind.WEAPON, {}),
    ("armory.json", ItemKind.ARMOR, {}),
    ("potions.json", ItemKind.POTION, {}),
    ("fire_spells.json", ItemKind.SPELL, {"element": ElementType.FIRE}),
    ("ice_spells.json", ItemKind.SPELL, {"element": ElementType.ICE}),
    ("lightning_spells.json", ItemKind.SPELL, {"element": ElementType.LIGHTNING}),
]


class ContentRepository:
    """
    Read-only catalog of every template the game is built from.

    Attributes:
        hero_pools (dict[HeroClass, tuple[HeroTemplate, ...]]):
            The heroes available for each class.
        monsters (dict[MonsterType, tuple[MonsterTemplate, ...]]):
            The monster templates of each type.
        items (dict[ItemKind, tuple[BaseItem, ...]]):
            The items of each kind.

    """

    hero_pools: dict[HeroClass, tuple[HeroTemplate, ...]]
    monsters: dict[MonsterType, tuple[MonsterTemplate, ...]]
    items: dict[ItemKind, tuple[BaseItem, ...]]

    def __init__(self, data_dir: Path) -> None:
        """
        Initialize the ContentRepository.

        Args:
            data_dir (Path):
                The directory containing the definition files.

        Raises:
            DataLoadError:
                If a file is malformed or no hero can be loaded at all.

        """
        self.data_dir = data_dir
        self.reload(data_dir)

    def reload(self, root: Path) -> None:
        """
        (Re)load all JSON assets from disk.

        Args:
            root (Path):
                The directory containing the definition files.
        """
        self.hero_pools = {
            hero_class: _load_json_file(
                root / filename,
                lambda data, c=hero_class: self._load_heroes(data, c),
                f"{hero_class.display_name.lower()} heroes",
            )
            for hero_class, filename in HERO_FILES.items()
        }
        self.monsters = {
            monster_type: _load_json_file(
                root / filename,
                lambda data, t=monster_type: self._load_monsters(data, t),
                f"{monster_type.display_name.lower()} monsters",
            )
            for monster_type, filename in MONSTER_FILES.items()
        }
        items: dict[ItemKind, list[BaseItem]] = {kind: [] for kind in ItemKind}
        for filename, kind, defaults in ITEM_FILES:
            items[kind].extend(
                _load_json_file(
                    root / filename,
                    lambda data, k=kind, d=defaults: self._load_items(data, k, d),
                    f"{kind.display_name.lower()}s from {filename}",
                )
            )
        self.items = {kind: tuple(entries) for kind, entries in items.items()}

        if not any(self.hero_pools.values()):
            log_critical(
                "No heroes could be loaded. Check the data directory.",
                {"data_dir": str(root)},
            )
            raise DataLoadError(
                "No heroes could be loaded", {"data_dir": str(root)}
            )

    # ============================================================================
    # ACCESSORS
    # ============================================================================

    def all_monsters(self) -> tuple[MonsterTemplate, ...]:
        """Returns every monster template, dragons first, then exoskeletons and spirits."""
        return tuple(m for monster_type in MonsterType for m in self.monsters[monster_type])

    def all_items(self) -> tuple[BaseItem, ...]:
        """Returns the full item catalog sold by markets."""
        return tuple(item for kind in ItemKind for item in self.items[kind])

    def heroes_of(self, hero_class: HeroClass) -> tuple[HeroTemplate, ...]:
        return self.hero_pools[hero_class]

    # ============================================================================
    # LOADERS
    # ============================================================================

    @staticmethod
    def _load_heroes(data: list[dict], hero_class: HeroClass) -> tuple[HeroTemplate, ...]:
        return tuple(HeroTemplate(hero_class=hero_class, **entry) for entry in data)

    @staticmethod
    def _load_monsters(
        data: list[dict], monster_type: MonsterType
    ) -> tuple[MonsterTemplate, ...]:
        """
        Load monster templates from JSON data.

        Definition files give the dodge chance as a percentage; templates store
        it as a fraction.

        Args:
            data (list[dict]): List of monster data dictionaries.
            monster_type (MonsterType): The type shared by the file's monsters.

        Returns:
            tuple[MonsterTemplate, ...]: The templates, in file order.

        """
        templates = []
        for entry in data:
            entry = dict(entry)
            entry["dodge_chance"] = entry.pop("dodge") / 100.0
            entry["base_damage"] = entry.pop("damage")
            templates.append(MonsterTemplate(monster_type=monster_type, **entry))
        return tuple(templates)

    @staticmethod
    def _load_items(
        data: list[dict], kind: ItemKind, defaults: dict[str, Any]
    ) -> tuple[BaseItem, ...]:
        return tuple(
            deserialize_item({**defaults, **entry, "kind": kind.value}) for entry in data
        )


def _load_json_file(
    filepath: Path,
    loader_func: Callable[[list[dict]], tuple[Any, ...]],
    description: str,
) -> tuple[Any, ...]:
    """
    Helper to load and validate one definition file.

    A missing file yields an empty tuple and a warning; a malformed one is fatal.
    """
    if not filepath.is_file():
        log_warning(
            f"Definition file for {description} not found",
            {"path": str(filepath)},
        )
        return ()
    log_info(f"Loading {description}", {"path": filepath.name})
    try:
        with open(filepath, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, list):
            raise ValueError(f"Expected list, got {type(data).__name__}")
        return loader_func(data)
    except (json.JSONDecodeError, ValidationError, ValueError, KeyError, TypeError) as e:
        raise DataLoadError(
            f"File {filepath} raised an error: {e}", {"path": str(filepath)}
        ) from e
