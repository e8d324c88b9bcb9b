"""Warrior: finishes off the weakest enemy and sometimes lands a critical hit."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from battlesim.core.rng import RNG
from battlesim.domain import damage
from battlesim.domain.targeting import first_min

from .combatant import BattleContext, Combatant

logger = logging.getLogger(__name__)


@dataclass(slots=True, eq=False)
class Warrior(Combatant):
    kind: ClassVar[str] = "warrior"

    def calculate_damage(self, target: Combatant, rng: RNG) -> int:
        base = self.attack_power
        if rng.random() < damage.CRITICAL_HIT_CHANCE:
            logger.debug("%s lands a critical hit", self.name)
            return damage.scale(base, damage.CRITICAL_MULTIPLIER)
        return base

    def act(self, context: BattleContext, rng: RNG) -> None:
        if not self.alive:
            return
        target = first_min(context.living_enemies_of(self), key=lambda enemy: enemy.health)
        if target is None:
            logger.debug("%s has no target", self.name)
            return
        self.attack(target, rng)
