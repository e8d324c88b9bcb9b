"""Static definitions loaded from data files."""

from .scenario_def import CombatantDef, ScenarioDef

__all__ = ["CombatantDef", "ScenarioDef"]
