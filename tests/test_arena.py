from __future__ import annotations

import pytest

from battlesim.core.rng import RNG
from battlesim.domain.entities import BossMonster, Combatant, Healer, Mage, Warrior
from battlesim.services.arena import Arena
from battlesim.services.errors import ConfigurationError
from tests.helpers.scripted_rng import ScriptedRNG


def _warrior(
    name: str,
    team: str = "heroes",
    health: int = 100,
    attack_power: int = 10,
    defense: int = 0,
    initiative: int = 5,
) -> Warrior:
    return Warrior(
        name=name,
        health=health,
        attack_power=attack_power,
        defense=defense,
        initiative=initiative,
        team=team,
    )


def _make_arena(*combatants: Combatant, max_rounds: int = 10, rng: RNG | None = None) -> Arena:
    arena = Arena(max_rounds=max_rounds, rng=rng or ScriptedRNG())
    arena.add_combatants(combatants)
    return arena


# -----------------------
# Configuration
# -----------------------
@pytest.mark.parametrize("max_rounds", [0, -3])
def test_non_positive_round_cap_rejected(max_rounds: int) -> None:
    with pytest.raises(ConfigurationError):
        Arena(max_rounds=max_rounds)


def test_add_none_rejected() -> None:
    with pytest.raises(ConfigurationError):
        Arena(max_rounds=5).add_combatant(None)  # type: ignore[arg-type]


def test_duplicate_name_is_case_insensitive() -> None:
    arena = Arena(max_rounds=5)
    arena.add_combatant(_warrior("Bob"))

    with pytest.raises(ConfigurationError):
        arena.add_combatant(_warrior("BOB", team="monsters"))
    assert len(arena.combatants) == 1


def test_duplicate_check_matches_simple_case_folding() -> None:
    arena = Arena(max_rounds=5)
    arena.add_combatant(_warrior("Straße"))
    arena.add_combatant(_warrior("STRASSE", team="monsters"))

    with pytest.raises(ConfigurationError):
        arena.add_combatant(_warrior("STRAßE"))
    assert [c.name for c in arena.combatants] == ["Straße", "STRASSE"]


def test_empty_roster_cannot_start() -> None:
    with pytest.raises(ConfigurationError):
        Arena(max_rounds=5).start_battle()


def test_single_sided_roster_cannot_start() -> None:
    arena = _make_arena(_warrior("Aragorn"), _warrior("Legolas"))

    with pytest.raises(ConfigurationError):
        arena.start_battle()
    assert arena.phase == "not_started"


def test_roster_is_frozen_after_battle() -> None:
    arena = _make_arena(_warrior("Aragorn"), _warrior("Orc", team="monsters"), max_rounds=1)
    arena.start_battle()

    with pytest.raises(ConfigurationError):
        arena.add_combatant(_warrior("Latecomer"))
    with pytest.raises(ConfigurationError):
        arena.start_battle()


def test_ids_are_sequential_per_arena() -> None:
    first = _make_arena(_warrior("A"), _warrior("B", team="monsters"))
    second = _make_arena(_warrior("C"), _warrior("D", team="monsters"))

    assert [c.id for c in first.combatants] == [1, 2]
    assert [c.id for c in second.combatants] == [1, 2]


def test_team_rosters_keep_insertion_order() -> None:
    arena = _make_arena(
        _warrior("Orc", team="monsters"),
        _warrior("Aragorn"),
        _warrior("Goblin", team="monsters"),
    )

    assert [c.name for c in arena.team_roster("monsters")] == ["Orc", "Goblin"]
    assert [c.name for c in arena.team_roster("heroes")] == ["Aragorn"]


# -----------------------
# Queries
# -----------------------
def test_living_enemies_and_allies() -> None:
    aragorn = _warrior("Aragorn")
    legolas = _warrior("Legolas")
    gimli = _warrior("Gimli")
    orc = _warrior("Orc", team="monsters")
    goblin = _warrior("Goblin", team="monsters")
    arena = _make_arena(aragorn, orc, legolas, goblin, gimli)
    legolas.take_damage(1000)
    orc.take_damage(1000)

    assert arena.living_enemies_of(aragorn) == [goblin]
    assert arena.living_allies_of(aragorn) == [gimli]
    assert arena.living_enemies_of(goblin) == [aragorn, gimli]
    assert arena.living_count("heroes") == 2
    assert arena.dead_count("heroes") == 1


# -----------------------
# Turn order
# -----------------------
def test_acting_order_is_initiative_descending_and_stable() -> None:
    arena = _make_arena(
        _warrior("Slow", initiative=3),
        _warrior("Tie A", team="monsters", initiative=7),
        _warrior("Fast", initiative=10),
        _warrior("Tie B", initiative=7),
        _warrior("Tie C", team="monsters", initiative=7),
    )

    order = arena.acting_order()

    assert [c.name for c in order] == ["Fast", "Tie A", "Tie B", "Tie C", "Slow"]
    initiatives = [c.initiative for c in order]
    assert initiatives == sorted(initiatives, reverse=True)


def test_acting_order_skips_the_dead() -> None:
    fallen = _warrior("Fallen", initiative=9)
    arena = _make_arena(fallen, _warrior("Orc", team="monsters"), _warrior("Aragorn"))
    fallen.take_damage(1000)

    assert [c.name for c in arena.acting_order()] == ["Orc", "Aragorn"]


# -----------------------
# Round loop and outcome
# -----------------------
def test_one_round_cap_runs_exactly_one_round() -> None:
    hero = _warrior("Hero", attack_power=10)
    monster = _warrior("Monster", team="monsters", attack_power=10)
    arena = _make_arena(hero, monster, max_rounds=1)

    result = arena.start_battle()

    assert arena.current_round == 1
    assert result.rounds == 1
    assert hero.health == 90
    assert monster.health == 90
    assert arena.phase == "finished"


def test_equal_health_at_round_cap_is_a_draw() -> None:
    arena = _make_arena(_warrior("Hero"), _warrior("Monster", team="monsters"), max_rounds=1)

    result = arena.start_battle()

    assert result.winner is None
    assert result.is_draw


def test_higher_total_health_wins_at_round_cap() -> None:
    hero = _warrior("Hero", attack_power=30, initiative=9)
    monster = _warrior("Monster", team="monsters", attack_power=5)
    arena = _make_arena(hero, monster, max_rounds=2)

    result = arena.start_battle()

    assert monster.alive and hero.alive
    assert result.winner == "heroes"
    assert arena.winner == "heroes"


def test_total_health_counts_the_whole_team() -> None:
    hero = _warrior("Hero", health=200, attack_power=0)
    weak = _warrior("Weak", team="monsters", health=120, attack_power=0, initiative=1)
    strong = _warrior("Strong", team="monsters", health=120, attack_power=0, initiative=1)
    arena = _make_arena(hero, weak, strong, max_rounds=1)

    result = arena.start_battle()

    assert result.winner == "monsters"


def test_battle_stops_mid_round_once_decided() -> None:
    hero = _warrior("Hero", attack_power=50, initiative=9)
    monster = _warrior("Monster", team="monsters", health=40, attack_power=30, initiative=1)
    arena = _make_arena(hero, monster, max_rounds=5)

    result = arena.start_battle()

    assert result.winner == "heroes"
    assert result.rounds == 1
    assert hero.health == 100
    assert monster.alive is False


def test_elimination_ends_battle_before_cap() -> None:
    boss = BossMonster(name="Balrog", health=300, attack_power=40, defense=5, initiative=2, team="monsters")
    arena = _make_arena(_warrior("Hero", health=60, defense=2), boss, max_rounds=50, rng=RNG(3))

    result = arena.start_battle()

    assert result.winner == "monsters"
    assert result.rounds < 50
    assert arena.living_count("heroes") == 0


def test_round_loop_terminates_at_cap() -> None:
    first = Healer(name="Cleric", health=1000, attack_power=0, defense=0, initiative=1, team="heroes", heal_power=5)
    second = Healer(name="Shaman", health=1000, attack_power=0, defense=0, initiative=1, team="monsters", heal_power=5)
    arena = _make_arena(first, second, max_rounds=7, rng=RNG(1))

    result = arena.start_battle()

    assert result.rounds == 7
    assert arena.current_round == arena.max_rounds
    assert first.health == 993
    assert second.health == 993


def test_result_reports_every_combatant() -> None:
    hero = _warrior("Hero", attack_power=50, initiative=9)
    monster = _warrior("Monster", team="monsters", health=40)
    arena = _make_arena(hero, monster)

    result = arena.start_battle()

    assert [(view.id, view.name, view.alive) for view in result.combatants] == [
        (1, "Hero", True),
        (2, "Monster", False),
    ]
    assert result.combatants[1].health == 0
    assert result.combatants[0].kind == "warrior"
    assert result.max_rounds == 10


def test_same_seed_same_battle() -> None:
    def run(seed: int) -> list[tuple[str, int, bool]]:
        arena = Arena(max_rounds=30, rng=RNG(seed))
        arena.add_combatants(
            [
                Warrior(name="Aragorn", health=120, attack_power=25, defense=8, initiative=6, team="heroes"),
                Mage(name="Gandalf", health=80, attack_power=35, defense=3, initiative=8, team="heroes"),
                Healer(name="Elrond", health=90, attack_power=12, defense=5, initiative=7, team="heroes", heal_power=25),
                BossMonster(name="Balrog", health=250, attack_power=30, defense=10, initiative=5, team="monsters"),
                Warrior(name="Orc Captain", health=100, attack_power=22, defense=6, initiative=4, team="monsters"),
            ]
        )
        result = arena.start_battle()
        return [(view.name, view.health, view.alive) for view in result.combatants] + [
            (str(result.winner), result.rounds, True)
        ]

    assert run(99) == run(99)


def test_health_invariants_hold_through_battle() -> None:
    arena = Arena(max_rounds=40, rng=RNG(5))
    arena.add_combatants(
        [
            Mage(name="Gandalf", health=80, attack_power=35, defense=3, initiative=8, team="heroes"),
            Healer(name="Elrond", health=90, attack_power=12, defense=5, initiative=7, team="heroes", heal_power=25),
            Warrior(name="Orc", health=100, attack_power=22, defense=6, initiative=4, team="monsters"),
            Warrior(name="Goblin", health=60, attack_power=15, defense=3, initiative=9, team="monsters"),
        ]
    )

    arena.start_battle()

    assert arena.current_round <= arena.max_rounds
    for combatant in arena.combatants:
        assert 0 <= combatant.health <= combatant.max_health
        assert combatant.alive == (combatant.health > 0)
