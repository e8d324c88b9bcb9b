"""Scenario definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from battlesim.core.types import Team


@dataclass(slots=True)
class CombatantDef:
    """Stats for one roster entry before it is turned into a combatant."""

    kind: str
    name: str
    health: int
    attack_power: int
    defense: int
    initiative: int
    team: Team
    heal_power: int | None = None


@dataclass(slots=True)
class ScenarioDef:
    id: str
    name: str
    combatants: Tuple[CombatantDef, ...]
    max_rounds: int | None = None
    seed: int | None = None
