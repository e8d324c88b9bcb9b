"""Service layer exports."""

from .errors import ConfigurationError, FactoryError
from .arena import Arena, BattleResult, CombatantView
from .scenario_service import build_arena, run_scenario

__all__ = [
    "Arena",
    "BattleResult",
    "CombatantView",
    "ConfigurationError",
    "FactoryError",
    "build_arena",
    "run_scenario",
]
