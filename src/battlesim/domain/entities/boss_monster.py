"""Boss monster: goes after soft targets and enrages at half health."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar

from battlesim.core.rng import RNG
from battlesim.domain import damage
from battlesim.domain.targeting import first_min

from .combatant import BattleContext, Combatant

logger = logging.getLogger(__name__)


@dataclass(slots=True, eq=False)
class BossMonster(Combatant):
    kind: ClassVar[str] = "boss_monster"

    enraged: bool = field(init=False, default=False)

    def calculate_damage(self, target: Combatant, rng: RNG) -> int:
        # Enrage is checked lazily and applies to the attack that triggers it.
        if not self.enraged and self.health_ratio <= damage.ENRAGE_THRESHOLD:
            self.enraged = True
            logger.debug("%s becomes enraged", self.name)
        if self.enraged:
            return damage.scale(self.attack_power, damage.ENRAGE_MULTIPLIER)
        return self.attack_power

    def act(self, context: BattleContext, rng: RNG) -> None:
        if not self.alive:
            return
        target = first_min(context.living_enemies_of(self), key=lambda enemy: enemy.defense)
        if target is None:
            logger.debug("%s has no target", self.name)
            return
        self.attack(target, rng)
