"""Damage and health arithmetic shared by every combatant kind."""
from __future__ import annotations

import math

CRITICAL_HIT_CHANCE = 0.25
CRITICAL_MULTIPLIER = 1.5

ENRAGE_THRESHOLD = 0.5
ENRAGE_MULTIPLIER = 1.5

HEAL_THRESHOLD = 0.6

AOE_DAMAGE_PERCENT = 60
AOE_MAX_TARGETS = 3
MAGE_RESOURCE_POOL = 3

VARIANCE_MIN = 0.8
VARIANCE_SPAN = 0.4


def mitigate(raw: int, defense: int) -> int:
    """Damage left after defense; a landed hit always deals at least 1."""
    return max(1, raw - defense)


def scale(value: int, factor: float) -> int:
    """Scale ``value`` by ``factor`` and round down."""
    return math.floor(value * factor)


def percent_of(value: int, percent: int) -> int:
    return value * percent // 100


def health_ratio(health: int, max_health: int) -> float:
    return health / max_health


def apply_damage(health: int, amount: int) -> int:
    """Return the new health after losing ``amount``, floored at zero."""
    return max(0, health - amount)


def apply_heal(health: int, max_health: int, amount: int) -> int:
    """Return the new health after healing, capped at ``max_health``."""
    return min(max_health, health + amount)
