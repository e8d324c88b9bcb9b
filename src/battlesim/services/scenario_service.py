"""Builds and runs arenas from scenario definitions."""
from __future__ import annotations

import logging

from battlesim.config import ArenaSettings
from battlesim.core.rng import RNG
from battlesim.data.repositories import ScenariosRepository
from battlesim.domain.defs import ScenarioDef
from battlesim.services.arena import Arena, BattleResult
from battlesim.services.factories import create_combatant

logger = logging.getLogger(__name__)


def build_arena(scenario: ScenarioDef, settings: ArenaSettings | None = None) -> Arena:
    """Create an arena with the scenario's roster added in file order."""
    settings = settings or ArenaSettings()
    seed = scenario.seed if scenario.seed is not None else settings.default_seed
    max_rounds = scenario.max_rounds if scenario.max_rounds is not None else settings.default_max_rounds
    arena = Arena(max_rounds, RNG(seed))
    for defn in scenario.combatants:
        arena.add_combatant(create_combatant(defn))
    logger.debug("Built arena for scenario '%s' with seed %d", scenario.id, seed)
    return arena


def run_scenario(
    scenario_id: str,
    repo: ScenariosRepository | None = None,
    settings: ArenaSettings | None = None,
) -> BattleResult:
    """Load ``scenario_id``, fight it out and return the result."""
    repo = repo or ScenariosRepository()
    scenario = repo.get(scenario_id)
    arena = build_arena(scenario, settings)
    return arena.start_battle()
