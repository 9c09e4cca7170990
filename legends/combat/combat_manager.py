"""
Combat management module for the game.

Runs one encounter from setup to victory or defeat: heroes act in party order
through the action menu, monsters answer, living heroes regenerate, and the
loop repeats until one side is wiped out.
"""

from collections.abc import Sequence
from random import Random
from typing import Any

from catchery import log_critical, log_warning

from legends.core.constants import REGENERATION_FACTOR, Attribute, EncounterPhase
from legends.core.errors import PreconditionViolation
from legends.core.logging import log_debug
from legends.entities import Hero, Monster, MonsterTemplate, Party
from legends.items import Potion, Spell
from legends.ui.interfaces import ChoiceProvider, OutputSink

from .damage import (
    attack_damage,
    hero_dodge_chance,
    monster_damage,
    roll_dodge,
)
from .npc_ai import choose_monster_target
from .outcome import Defeat, Outcome, Victory, compute_rewards
from .spawner import MonsterSpawner

ACTION_MENU = ["Attack", "Cast Spell", "Use Potion", "Equip Gear", "Info"]
ATTACK, CAST_SPELL, USE_POTION, EQUIP_GEAR, INFO = range(1, len(ACTION_MENU) + 1)


def _require(condition: bool, message: str, context: dict[str, Any]) -> None:
    """Fails loudly when the engine is driven outside its contract."""
    if not condition:
        log_critical(message, context)
        raise PreconditionViolation(message, context)


class CombatManager:
    """
    Manages the flow of one encounter between a party and spawned monsters.

    The manager owns the enemy roster for the lifetime of the encounter. It
    never reads input or prints by itself: selections come from the
    ChoiceProvider and narration goes to the OutputSink.

    Attributes:
        party (Party):
            The heroes fighting the encounter.
        rng (Random):
            The shared random generator used for every roll.
        choices (ChoiceProvider):
            Source of menu selections.
        sink (OutputSink):
            Destination of narration lines.
        enemies (list[Monster]):
            The live enemy roster, filled during setup.
        phase (EncounterPhase):
            The current state of the encounter.
        round_number (int):
            The current round, starting at 1.

    """

    def __init__(
        self,
        party: Party,
        monster_catalog: Sequence[MonsterTemplate],
        rng: Random,
        choices: ChoiceProvider,
        sink: OutputSink,
    ) -> None:
        self.party = party
        self.rng = rng
        self.choices = choices
        self.sink = sink
        self.spawner = MonsterSpawner(monster_catalog, rng)
        self.enemies: list[Monster] = []
        self.phase = EncounterPhase.SETUP
        self.round_number = 0

    # ============================================================================
    # STATE QUERIES
    # ============================================================================

    def get_alive_enemies(self) -> list[Monster]:
        return [enemy for enemy in self.enemies if not enemy.is_fainted()]

    def all_enemies_fainted(self) -> bool:
        return all(enemy.is_fainted() for enemy in self.enemies)

    # ============================================================================
    # MAIN LOOP
    # ============================================================================

    def run(self) -> Outcome:
        """
        Runs the encounter to completion.

        Returns:
            Outcome: Victory with the per-hero reward, or Defeat.

        """
        self.initialize()
        while True:
            outcome = self.run_round()
            if outcome is not None:
                return outcome

    def initialize(self) -> None:
        """Spawns the enemy roster and announces it."""
        _require(
            self.party.size > 0 and not self.party.is_wiped_out(),
            "An encounter needs at least one living hero",
            {"party_size": self.party.size},
        )
        self.enemies = self.spawner.spawn_for(self.party)
        self.phase = EncounterPhase.SETUP
        self.round_number = 0
        self.sink.emit("[bold]Battle Started! Enemies approaching:[/]")
        for enemy in self.enemies:
            self.sink.emit(f"- {enemy.get_status_line()}")

    def run_round(self) -> Outcome | None:
        """
        Runs a single round: heroes, monsters, then regeneration.

        Returns:
            Outcome | None: The outcome if the encounter ended this round.

        """
        self.round_number += 1
        self.sink.emit(f"=== Round {self.round_number} ===")

        self.phase = EncounterPhase.HEROES_TURN
        self.run_heroes_turn()
        if self.all_enemies_fainted():
            return self.resolve_victory()

        self.phase = EncounterPhase.ENEMIES_TURN
        self.run_enemies_turn()
        if self.party.is_wiped_out():
            return self.resolve_defeat()

        self.phase = EncounterPhase.REGENERATION
        self.regenerate()
        return None

    # ============================================================================
    # HEROES
    # ============================================================================

    def run_heroes_turn(self) -> None:
        """Lets every living hero act, in party order."""
        for hero in self.party.heroes:
            if hero.is_fainted():
                continue
            # Remaining heroes get no action once the roster is cleared.
            if self.all_enemies_fainted():
                break
            self.run_hero_turn(hero)

    def run_hero_turn(self, hero: Hero) -> None:
        """Presents the action menu until the hero performs a turn-consuming action."""
        _require(
            not hero.is_fainted(),
            "A fainted hero cannot act",
            {"hero": hero.name, "hp": hero.hp},
        )
        self.sink.emit(f"It is {hero.colored_name}'s turn.")
        self.sink.emit(hero.get_status_line(show_bars=True))
        while not self.ask_for_hero_action(hero):
            pass

    def ask_for_hero_action(self, hero: Hero) -> bool:
        """
        Asks the hero for one action and performs it.

        Returns:
            bool: True if the action consumed the turn.

        """
        for index, label in enumerate(ACTION_MENU, 1):
            self.sink.emit(f"{index}. {label}")
        choice = self.choices.choose_int("Action", 1, len(ACTION_MENU))
        if choice == ATTACK:
            return self.perform_attack(hero)
        if choice == CAST_SPELL:
            return self.perform_spell(hero)
        if choice == USE_POTION:
            return self.perform_potion(hero)
        if choice == EQUIP_GEAR:
            self.perform_equip(hero)
        elif choice == INFO:
            self.show_battle_info()
        return False

    def _choose_index(
        self,
        prompt: str,
        entries: list[str],
        cancel_entry: str | None = "Cancel",
    ) -> int | None:
        """
        Lists numbered entries and returns the zero based index chosen.

        Returns:
            int | None: The index, or None if the cancel entry was chosen.

        """
        for index, entry in enumerate(entries, 1):
            self.sink.emit(f"{index}. {entry}")
        maximum = len(entries)
        if cancel_entry:
            maximum += 1
            self.sink.emit(f"{maximum}. {cancel_entry}")
        choice = self.choices.choose_int(prompt, 1, maximum)
        if choice > len(entries):
            return None
        return choice - 1

    def select_monster(self) -> Monster | None:
        """Asks for a living target. Returns None on cancel or if none is alive."""
        alive = self.get_alive_enemies()
        if not alive:
            return None
        self.sink.emit("Select Target:")
        index = self._choose_index(
            "Target", [enemy.get_status_line() for enemy in alive]
        )
        return None if index is None else alive[index]

    def perform_attack(self, hero: Hero) -> bool:
        target = self.select_monster()
        if target is None:
            return False
        self.resolve_attack(hero, target)
        return True

    def resolve_attack(self, hero: Hero, target: Monster) -> float:
        """
        Resolves a physical attack.

        Args:
            hero (Hero): The attacking hero.
            target (Monster): A living monster of this encounter.

        Returns:
            float: The damage dealt, zero if the target dodged.

        """
        _require(
            not hero.is_fainted() and not target.is_fainted(),
            "Attacks need a living attacker and a living target",
            {"hero": hero.name, "target": target.name},
        )
        if roll_dodge(self.rng, target.dodge_chance):
            self.sink.emit(f"{target.colored_name} dodged the attack!")
            return 0.0
        dealt = target.take_damage(attack_damage(hero, target))
        self.sink.emit(
            f"{hero.colored_name} attacks {target.colored_name} for {dealt:.0f} damage!"
        )
        if target.is_fainted():
            self.sink.emit(f"{target.colored_name} has been defeated!")
        return dealt

    def perform_spell(self, hero: Hero) -> bool:
        spells = hero.inventory.spells
        if not spells:
            self.sink.emit("You have no spells!")
            return False
        self.sink.emit("--- Spellbook ---")
        index = self._choose_index("Select Spell", [str(spell) for spell in spells])
        if index is None:
            return False
        spell = spells[index]
        if hero.mana < spell.mana_cost:
            self.sink.emit("Not enough Mana!")
            log_warning(
                "Spell cast rejected",
                {"hero": hero.name, "spell": spell.name, "mana": hero.mana},
            )
            return False
        target = self.select_monster()
        if target is None:
            return False
        self.resolve_spell(hero, spell, target)
        return True

    def resolve_spell(self, hero: Hero, spell: Spell, target: Monster) -> float:
        """
        Casts a spell the hero owns and can afford on a living monster.

        The spell is consumed. If the target survives, it is weakened according
        to the spell element.

        Returns:
            float: The damage dealt.

        """
        _require(
            not hero.is_fainted() and not target.is_fainted(),
            "Spells need a living caster and a living target",
            {"hero": hero.name, "target": target.name},
        )
        _require(
            hero.mana >= spell.mana_cost,
            "Not enough mana to cast",
            {"hero": hero.name, "spell": spell.name, "mana": hero.mana},
        )
        hero.mana -= spell.mana_cost
        hero.inventory.remove_item(spell)
        dealt = target.take_damage(spell.damage_for(hero.dexterity))
        if target.is_fainted():
            self.sink.emit(
                f"{hero.colored_name} casts {spell.colored_name} on "
                f"{target.colored_name} for {dealt:.0f} damage!"
            )
            self.sink.emit(f"{target.colored_name} has been defeated!")
            return dealt
        target.apply_debuff(spell.element)
        self.sink.emit(
            f"{target.colored_name}'s {spell.element.weakened_stat.replace('_', ' ')} "
            f"reduced by {spell.element.colorize(spell.element.display_name)}!"
        )
        self.sink.emit(
            f"{hero.colored_name} casts {spell.colored_name} on "
            f"{target.colored_name} for {dealt:.0f} damage!"
        )
        return dealt

    def perform_potion(self, hero: Hero) -> bool:
        potions = hero.inventory.potions
        if not potions:
            self.sink.emit("No potions in inventory.")
            return False
        self.sink.emit("--- Potions ---")
        index = self._choose_index("Use Potion", [str(potion) for potion in potions])
        if index is None:
            return False
        self.resolve_potion(hero, potions[index])
        return True

    def resolve_potion(self, hero: Hero, potion: Potion) -> None:
        """Adds the potion bonus to every attribute it affects, then consumes it."""
        for attribute in Attribute:
            if potion.affects(attribute):
                stat = attribute.stat_name
                setattr(hero.stats, stat, getattr(hero.stats, stat) + potion.attribute_increase)
        hero.inventory.remove_item(potion)
        self.sink.emit(f"{hero.colored_name} used {potion.name}!")

    def perform_equip(self, hero: Hero) -> None:
        """Equips a weapon or an armor from the inventory. Never consumes the turn."""
        kind = self._choose_index("Type", ["Weapons", "Armor"], cancel_entry="Back")
        if kind is None:
            return
        if kind == 0:
            weapons = hero.inventory.weapons
            if not weapons:
                self.sink.emit("No weapons.")
                return
            index = self._choose_index("Equip", [str(w) for w in weapons])
            if index is not None:
                weapon = weapons[index]
                hero.equip_weapon(weapon)
                grip = "with both hands" if weapon.is_two_handed else "in one hand"
                self.sink.emit(f"{hero.colored_name} equips {weapon.name} {grip}.")
        else:
            armors = hero.inventory.armors
            if not armors:
                self.sink.emit("No armor.")
                return
            index = self._choose_index("Equip", [str(a) for a in armors])
            if index is not None:
                hero.equip_armor(armors[index])
                self.sink.emit(f"{hero.colored_name} equips {armors[index].name}.")

    def show_battle_info(self) -> None:
        self.sink.emit("--- Battle Status ---")
        self.sink.emit("HEROES:")
        for hero in self.party.heroes:
            self.sink.emit(hero.get_status_line(show_bars=True))
        self.sink.emit("MONSTERS:")
        for enemy in self.enemies:
            self.sink.emit(enemy.get_status_line(show_bars=True))
        self.sink.emit("---------------------")

    # ============================================================================
    # MONSTERS
    # ============================================================================

    def run_enemies_turn(self) -> None:
        """Lets every living monster attack a random living hero, in roster order."""
        for monster in self.enemies:
            if monster.is_fainted():
                continue
            target = choose_monster_target(self.party, self.rng)
            if target is None:
                break
            self.monster_attack(monster, target)

    def monster_attack(self, monster: Monster, target: Hero) -> float:
        """
        Resolves a monster hit on a hero.

        Returns:
            float: The damage dealt, zero if the hero dodged.

        """
        if roll_dodge(self.rng, hero_dodge_chance(target)):
            self.sink.emit(
                f"{target.colored_name} dodged {monster.colored_name}'s attack!"
            )
            return 0.0
        dealt = target.take_damage(monster_damage(monster, target))
        self.sink.emit(
            f"{monster.colored_name} attacks {target.colored_name} for {dealt:.0f} damage!"
        )
        if target.is_fainted():
            self.sink.emit(f"{target.colored_name} has fainted!")
        return dealt

    # ============================================================================
    # END OF ROUND
    # ============================================================================

    def regenerate(self) -> None:
        """Grows hp and mana of every living hero by 10%. There is no cap."""
        for hero in self.party.heroes:
            if not hero.is_fainted():
                hero.hp *= REGENERATION_FACTOR
                hero.mana *= REGENERATION_FACTOR
        self.sink.emit("Heroes regain some health and mana.")

    def resolve_victory(self) -> Victory:
        """Revives fainted heroes and grants the full reward to each survivor."""
        self.phase = EncounterPhase.VICTORY
        gold, xp = compute_rewards(self.enemies)
        self.sink.emit("[bold green]*** VICTORY! ***[/]")
        self.sink.emit(f"Party gains {gold:.0f} Gold and {xp} XP!")
        revived = []
        for hero in self.party.heroes:
            if hero.is_fainted():
                hero.revive()
                revived.append(hero.name)
                self.sink.emit(f"{hero.colored_name} is revived.")
            else:
                hero.add_money(gold)
                if hero.gain_experience(xp):
                    self.sink.emit(f"{hero.colored_name} reached level {hero.level}!")
        log_debug(
            "Encounter won",
            {"rounds": self.round_number, "gold": gold, "xp": xp},
        )
        return Victory(gold=gold, xp=xp, rounds=self.round_number, revived=revived)

    def resolve_defeat(self) -> Defeat:
        self.phase = EncounterPhase.DEFEAT
        self.sink.emit("[bold red]The party has been defeated![/]")
        log_debug("Encounter lost", {"rounds": self.round_number})
        return Defeat(rounds=self.round_number)


def start_encounter(
    party: Party,
    monster_catalog: Sequence[MonsterTemplate],
    rng: Random,
    choices: ChoiceProvider,
    sink: OutputSink,
) -> Outcome:
    """
    Runs a full encounter for the party.

    Args:
        party (Party): The heroes; at least one must be alive.
        monster_catalog (Sequence[MonsterTemplate]): Non-empty template catalog.
        rng (Random): The shared random generator.
        choices (ChoiceProvider): Source of menu selections.
        sink (OutputSink): Destination of narration lines.

    Returns:
        Outcome: Victory or Defeat.

    """
    return CombatManager(party, monster_catalog, rng, choices, sink).run()
