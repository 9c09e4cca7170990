"""
Shared fixtures and fakes for the test suite.
"""

from pathlib import Path
from random import Random

import pytest

from legends.core.constants import HeroClass, MonsterType
from legends.entities import Hero, HeroTemplate, MonsterTemplate, Party
from legends.ui.interfaces import MemorySink

DATA_DIR = Path(__file__).resolve().parent.parent / "data"


class ScriptedChoices:
    """ChoiceProvider answering from a queue of prepared answers."""

    def __init__(self, answers=(), options=(), default: int | None = None) -> None:
        self.answers = list(answers)
        self.options = list(options)
        self.default = default
        self.prompts: list[tuple[str, int, int]] = []

    def choose_int(self, prompt: str, minimum: int, maximum: int) -> int:
        self.prompts.append((prompt, minimum, maximum))
        if self.answers:
            answer = self.answers.pop(0)
        elif self.default is not None:
            answer = self.default
        else:
            raise AssertionError(f"Unexpected prompt: {prompt}")
        assert minimum <= answer <= maximum, f"{answer} out of [{minimum}, {maximum}]"
        return answer

    def choose_option(self, prompt: str, valid_tokens: set[str]) -> str:
        if not self.options:
            raise AssertionError(f"Unexpected prompt: {prompt}")
        option = self.options.pop(0)
        assert option in valid_tokens
        return option


class ScriptedRandom(Random):
    """
    Random generator whose ``random()`` draws come from a script.

    Integer draws (``randrange``, ``choice``) stay seeded and unaffected.
    """

    def __init__(self, rolls=(), default: float = 0.99, seed: int = 0) -> None:
        super().__init__(seed)
        self.rolls = list(rolls)
        self.default = default

    def random(self) -> float:
        if self.rolls:
            return self.rolls.pop(0)
        return self.default

    def getrandbits(self, k: int) -> int:
        return super().getrandbits(k)


def make_hero(
    name: str = "Gaerdal",
    hero_class: HeroClass = HeroClass.WARRIOR,
    level: int = 1,
    mana: float = 500,
    strength: float = 700,
    dexterity: float = 600,
    agility: float = 0,
    money: float = 1000,
    experience: int = 0,
) -> Hero:
    return Hero.from_template(
        HeroTemplate(
            name=name,
            hero_class=hero_class,
            level=level,
            mana=mana,
            strength=strength,
            dexterity=dexterity,
            agility=agility,
            money=money,
            experience=experience,
        )
    )


def make_template(
    name: str = "Natsunomeryu",
    level: int = 1,
    base_damage: float = 10,
    defense: float = 0,
    dodge_chance: float = 0.0,
    monster_type: MonsterType = MonsterType.DRAGON,
) -> MonsterTemplate:
    return MonsterTemplate(
        name=name,
        monster_type=monster_type,
        level=level,
        base_damage=base_damage,
        defense=defense,
        dodge_chance=dodge_chance,
    )


@pytest.fixture
def sink():
    return MemorySink()


@pytest.fixture
def hero():
    return make_hero()


@pytest.fixture
def party(hero):
    return Party([hero])
