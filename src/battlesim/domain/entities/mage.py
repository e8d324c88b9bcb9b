"""Mage: spends a limited pool on area attacks, otherwise strikes the toughest enemy."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import ClassVar, List

from battlesim.core.rng import RNG
from battlesim.domain import damage
from battlesim.domain.targeting import first_max

from .combatant import BattleContext, Combatant

logger = logging.getLogger(__name__)


@dataclass(slots=True, eq=False)
class Mage(Combatant):
    kind: ClassVar[str] = "mage"

    resource_pool: int = field(init=False, default=damage.MAGE_RESOURCE_POOL)

    def calculate_damage(self, target: Combatant, rng: RNG) -> int:
        # 80%-120% of attack power
        factor = damage.VARIANCE_MIN + rng.random() * damage.VARIANCE_SPAN
        return damage.scale(self.attack_power, factor)

    def area_damage(self) -> int:
        return damage.percent_of(self.attack_power, damage.AOE_DAMAGE_PERCENT)

    def act(self, context: BattleContext, rng: RNG) -> None:
        if not self.alive:
            return
        enemies = context.living_enemies_of(self)
        if not enemies:
            logger.debug("%s has no target", self.name)
            return
        if self.resource_pool > 0 and len(enemies) >= 2:
            self._area_attack(enemies)
            self.resource_pool -= 1
            return
        target = first_max(enemies, key=lambda enemy: enemy.health)
        assert target is not None
        self.attack(target, rng)

    def _area_attack(self, enemies: List[Combatant]) -> None:
        amount = self.area_damage()
        logger.debug("%s casts an area attack for %d", self.name, amount)
        for target in enemies[: damage.AOE_MAX_TARGETS]:
            if target.alive:
                dealt = target.take_damage(amount)
                logger.debug("%s takes %d area damage", target.name, dealt)
