"""
Tests for the encounter loop of the combat manager.
"""

from random import Random

import pytest
from conftest import ScriptedChoices, ScriptedRandom, make_hero, make_template

from legends.combat import CombatManager, Defeat, Victory, start_encounter
from legends.combat.combat_manager import ATTACK, CAST_SPELL, EQUIP_GEAR, INFO, USE_POTION
from legends.core.constants import ElementType, EncounterPhase
from legends.core.errors import PreconditionViolation
from legends.entities import Party
from legends.items import Potion, Spell, Weapon


@pytest.fixture
def heat_wave():
    return Spell(name="Heat_Wave", price=450, damage=50, mana_cost=100, element=ElementType.FIRE)


def make_manager(party, choices, sink, templates=None, rng=None):
    return CombatManager(
        party,
        templates if templates is not None else [make_template()],
        rng if rng is not None else ScriptedRandom(),
        choices,
        sink,
    )


def test_single_attack_wins_and_rewards(sink):
    hero = make_hero(strength=2000)
    party = Party([hero])
    choices = ScriptedChoices([ATTACK, 1])

    outcome = start_encounter(party, [make_template()], ScriptedRandom(), choices, sink)

    assert outcome == Victory(gold=100, xp=2, rounds=1)
    assert hero.money == 1100
    assert hero.experience == 2
    assert sink.contains("VICTORY")


def test_dodged_attack_deals_no_damage(sink, hero):
    manager = make_manager(
        Party([hero]),
        ScriptedChoices(),
        sink,
        templates=[make_template(dodge_chance=0.5)],
        rng=ScriptedRandom([0.2]),
    )
    manager.initialize()
    target = manager.enemies[0]
    assert manager.resolve_attack(hero, target) == 0
    assert target.hp == 100
    assert sink.contains("dodged")


def test_attack_is_mitigated_by_defense(sink, hero):
    manager = make_manager(
        Party([hero]), ScriptedChoices(), sink, templates=[make_template(defense=200)]
    )
    manager.initialize()
    target = manager.enemies[0]
    # (700 + 0) * 0.05 - 200 * 0.05
    assert manager.resolve_attack(hero, target) == pytest.approx(25)
    assert target.hp == pytest.approx(75)


def test_spell_is_consumed_and_debuffs_survivor(sink, hero, heat_wave):
    hero.inventory.add_item(heat_wave)
    manager = make_manager(
        Party([hero]), ScriptedChoices(), sink, templates=[make_template(defense=100)]
    )
    manager.initialize()
    target = manager.enemies[0]

    dealt = manager.resolve_spell(hero, heat_wave, target)

    assert dealt == pytest.approx(50 + 600 / 10000 * 50)
    assert hero.mana == 400
    assert hero.inventory.spells == []
    assert target.defense == pytest.approx(90)


def test_spell_that_kills_applies_no_debuff(sink, hero):
    spell = Spell(name="Ice_Blade", price=250, damage=500, mana_cost=100, element="ICE")
    hero.inventory.add_item(spell)
    manager = make_manager(Party([hero]), ScriptedChoices(), sink)
    manager.initialize()
    target = manager.enemies[0]
    manager.resolve_spell(hero, spell, target)
    assert target.is_fainted()
    assert target.base_damage == 10


def test_not_enough_mana_keeps_the_turn(sink, heat_wave):
    hero = make_hero(mana=50)
    hero.inventory.add_item(heat_wave)
    choices = ScriptedChoices([CAST_SPELL, 1])
    manager = make_manager(Party([hero]), choices, sink)
    manager.initialize()

    assert manager.ask_for_hero_action(hero) is False
    assert hero.mana == 50
    assert hero.inventory.spells == [heat_wave]
    assert sink.contains("Not enough Mana!")


def test_casting_without_spells_keeps_the_turn(sink, hero):
    manager = make_manager(Party([hero]), ScriptedChoices([CAST_SPELL]), sink)
    manager.initialize()
    assert manager.ask_for_hero_action(hero) is False
    assert sink.contains("You have no spells!")


def test_cancel_target_selection_keeps_the_turn(sink, hero):
    # One monster: entry 2 is Cancel.
    manager = make_manager(Party([hero]), ScriptedChoices([ATTACK, 2]), sink)
    manager.initialize()
    assert manager.ask_for_hero_action(hero) is False
    assert manager.enemies[0].hp == 100


def test_potion_raises_every_affected_attribute(sink, hero):
    potion = Potion(
        name="Magic_Potion", price=350, attribute_increase=50, affected_attributes="Health/Mana"
    )
    hero.inventory.add_item(potion)
    manager = make_manager(Party([hero]), ScriptedChoices([USE_POTION, 1]), sink)
    manager.initialize()

    assert manager.ask_for_hero_action(hero) is True
    assert hero.hp == 150
    assert hero.mana == 550
    assert hero.strength == 700
    assert hero.inventory.potions == []


def test_equip_and_info_do_not_consume_the_turn(sink, hero):
    sword = Weapon(name="Sword", price=500, damage=800)
    hero.inventory.add_item(sword)
    choices = ScriptedChoices([EQUIP_GEAR, 1, 1, INFO])
    manager = make_manager(Party([hero]), choices, sink)
    manager.initialize()

    assert manager.ask_for_hero_action(hero) is False
    assert hero.equipped_weapon is sword
    assert hero.inventory.weapons == [sword]
    assert manager.ask_for_hero_action(hero) is False
    assert sink.contains("Battle Status")
    assert sink.contains("equips Sword in one hand.")


def test_equip_narrates_two_handed_grip(sink, hero):
    bow = Weapon(name="Bow", price=300, damage=500, hands_required=2)
    hero.inventory.add_item(bow)
    manager = make_manager(Party([hero]), ScriptedChoices([EQUIP_GEAR, 1, 1]), sink)
    manager.initialize()
    manager.ask_for_hero_action(hero)
    assert hero.equipped_weapon is bow
    assert sink.contains("equips Bow with both hands.")


def test_hero_turn_repeats_until_an_action_consumes_it(sink):
    hero = make_hero(strength=2000)
    choices = ScriptedChoices([INFO, CAST_SPELL, ATTACK, 1])
    manager = make_manager(Party([hero]), choices, sink)
    manager.initialize()
    manager.run_hero_turn(hero)
    assert manager.all_enemies_fainted()
    assert choices.answers == []


def test_victory_revives_fainted_heroes_without_reward(sink):
    fighter = make_hero("Fighter", strength=2000)
    fallen = make_hero("Fallen")
    fallen.hp = 0
    party = Party([fighter, fallen])
    choices = ScriptedChoices([ATTACK, 1, ATTACK, 1])

    outcome = start_encounter(party, [make_template()], ScriptedRandom(), choices, sink)

    assert isinstance(outcome, Victory)
    assert outcome.rounds == 2
    assert outcome.gold == 200
    assert outcome.xp == 4
    assert outcome.revived == ["Fallen"]
    assert fighter.money == 1200
    assert fighter.experience == 4
    assert fallen.hp == 50
    assert fallen.mana == 250
    assert fallen.money == 1000
    assert fallen.experience == 0


def test_party_wiped_out_is_defeat(sink):
    hero = make_hero(strength=0)
    choices = ScriptedChoices([ATTACK, 1])

    outcome = start_encounter(
        Party([hero]), [make_template(base_damage=200)], ScriptedRandom(), choices, sink
    )

    assert outcome == Defeat(rounds=1)
    assert hero.is_fainted()
    assert hero.money == 1000
    assert sink.contains("has fainted!")


def test_agility_lets_the_hero_dodge(sink):
    hero = make_hero(agility=250)
    manager = make_manager(
        Party([hero]),
        ScriptedChoices(),
        sink,
        templates=[make_template(base_damage=100)],
        rng=ScriptedRandom([0.4, 0.6]),
    )
    manager.initialize()
    monster = manager.enemies[0]
    # agility 250 gives a 0.5 dodge chance
    assert manager.monster_attack(monster, hero) == 0
    assert manager.monster_attack(monster, hero) == 100
    assert hero.hp == 0


def test_regeneration_skips_fainted_heroes(sink):
    standing = make_hero("Standing", mana=100)
    standing.hp = 80
    fallen = make_hero("Fallen", mana=100)
    fallen.hp = -10
    manager = make_manager(Party([standing, fallen]), ScriptedChoices(), sink)

    manager.regenerate()

    assert standing.hp == pytest.approx(88)
    assert standing.mana == pytest.approx(110)
    assert fallen.hp == -10
    assert fallen.mana == 100


def test_regeneration_is_not_capped(sink, hero):
    manager = make_manager(Party([hero]), ScriptedChoices(), sink)
    manager.regenerate()
    assert hero.hp == pytest.approx(110)
    assert hero.hp > hero.max_hp_basis


@pytest.mark.parametrize("seed", [1, 7, 42])
def test_encounter_terminates_with_default_choices(sink, seed):
    party = Party([make_hero("A"), make_hero("B", agility=100)])
    templates = [make_template("Swift", dodge_chance=0.5), make_template("Heavy", defense=300)]
    choices = ScriptedChoices(default=1)

    manager = make_manager(party, choices, sink, templates=templates, rng=Random(seed))
    outcome = manager.run()

    assert isinstance(outcome, (Victory, Defeat))
    assert manager.phase.is_terminal
    if isinstance(outcome, Victory):
        assert manager.all_enemies_fainted()
        assert manager.phase is EncounterPhase.VICTORY
    else:
        assert party.is_wiped_out()


def test_spawned_roster_matches_party(sink):
    party = Party([make_hero("A", level=2), make_hero("B", level=4)])
    manager = make_manager(party, ScriptedChoices(), sink, templates=[make_template(level=2)])
    manager.initialize()
    assert len(manager.enemies) == 2
    assert all(enemy.level == 4 for enemy in manager.enemies)


def test_wiped_out_party_cannot_start(sink, hero):
    hero.hp = 0
    with pytest.raises(PreconditionViolation):
        make_manager(Party([hero]), ScriptedChoices(), sink).initialize()


def test_empty_party_cannot_start(sink):
    with pytest.raises(PreconditionViolation):
        make_manager(Party(), ScriptedChoices(), sink).initialize()


def test_attacking_a_fainted_monster_is_rejected(sink, hero):
    manager = make_manager(Party([hero]), ScriptedChoices(), sink)
    manager.initialize()
    target = manager.enemies[0]
    target.hp = 0
    with pytest.raises(PreconditionViolation):
        manager.resolve_attack(hero, target)


def test_fainted_hero_cannot_take_a_turn(sink):
    fighter, fallen = make_hero("Fighter"), make_hero("Fallen")
    manager = make_manager(Party([fighter, fallen]), ScriptedChoices(), sink)
    manager.initialize()
    fallen.hp = 0
    with pytest.raises(PreconditionViolation):
        manager.run_hero_turn(fallen)


def test_casting_without_mana_is_rejected(sink, heat_wave):
    hero = make_hero(mana=10)
    hero.inventory.add_item(heat_wave)
    manager = make_manager(Party([hero]), ScriptedChoices(), sink)
    manager.initialize()
    with pytest.raises(PreconditionViolation):
        manager.resolve_spell(hero, heat_wave, manager.enemies[0])
