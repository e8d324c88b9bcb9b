"""Healer: patches up badly wounded allies, otherwise attacks a random enemy."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from battlesim.core.rng import RNG
from battlesim.domain import damage
from battlesim.domain.errors import CreatureStateError
from battlesim.domain.targeting import most_wounded

from .combatant import BattleContext, Combatant

logger = logging.getLogger(__name__)


@dataclass(slots=True, eq=False)
class Healer(Combatant):
    kind: ClassVar[str] = "healer"

    heal_power: int

    def __post_init__(self) -> None:
        Combatant.__post_init__(self)
        if isinstance(self.heal_power, bool) or not isinstance(self.heal_power, int):
            raise CreatureStateError(f"heal_power must be an integer, got: {self.heal_power!r}")
        if self.heal_power < 0:
            raise CreatureStateError(f"Heal power cannot be negative, got: {self.heal_power}")

    def calculate_damage(self, target: Combatant, rng: RNG) -> int:
        return self.attack_power

    def act(self, context: BattleContext, rng: RNG) -> None:
        if not self.alive:
            return
        patient = most_wounded(context.living_allies_of(self), damage.HEAL_THRESHOLD)
        if patient is not None:
            restored = patient.heal(self.heal_power)
            logger.debug("%s heals %s for %d", self.name, patient.name, restored)
            return
        enemies = context.living_enemies_of(self)
        if not enemies:
            logger.debug("%s has no target", self.name)
            return
        self.attack(rng.choice(enemies), rng)
