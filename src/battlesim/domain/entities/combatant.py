"""Base combatant model shared by every creature kind."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import ClassVar, List, Protocol

from battlesim.core.rng import RNG
from battlesim.core.types import TEAMS, Team
from battlesim.domain import damage
from battlesim.domain.errors import CreatureStateError

logger = logging.getLogger(__name__)


def _require_int(value: object, stat: str) -> int:
    # bool is an int subclass but never a valid stat
    if isinstance(value, bool) or not isinstance(value, int):
        raise CreatureStateError(f"{stat} must be an integer, got: {value!r}")
    return value


class BattleContext(Protocol):
    """Queries a combatant may make about the battle it is fighting in."""

    def living_enemies_of(self, combatant: Combatant) -> List[Combatant]:
        ...

    def living_allies_of(self, combatant: Combatant) -> List[Combatant]:
        ...


@dataclass(slots=True, eq=False)
class Combatant(ABC):
    """
    A participant in battle.

    Stats are fixed at creation; only ``health`` and ``alive`` change. Once
    ``alive`` turns False it never turns back. Subclasses supply the damage
    rule (``calculate_damage``) and the per-round decision rule (``act``).
    """

    kind: ClassVar[str] = "combatant"

    name: str
    health: int
    attack_power: int
    defense: int
    initiative: int
    team: Team
    max_health: int = field(init=False, default=0)
    alive: bool = field(init=False, default=True)
    id: int | None = field(init=False, default=None)  # assigned by the arena

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise CreatureStateError("Creature name cannot be empty.")
        for stat in ("health", "attack_power", "defense", "initiative"):
            _require_int(getattr(self, stat), stat)
        if self.health <= 0:
            raise CreatureStateError(f"Health must be positive, got: {self.health}")
        if self.attack_power < 0:
            raise CreatureStateError(f"Attack power cannot be negative, got: {self.attack_power}")
        if self.defense < 0:
            raise CreatureStateError(f"Defense cannot be negative, got: {self.defense}")
        if self.team not in TEAMS:
            raise CreatureStateError(f"Team must be one of {list(TEAMS)}, got: {self.team!r}")
        self.max_health = self.health
        self.alive = True

    @property
    def is_alive(self) -> bool:
        return self.alive

    @property
    def health_ratio(self) -> float:
        return damage.health_ratio(self.health, self.max_health)

    # -----------------------
    # State primitives
    # -----------------------
    def take_damage(self, raw: int) -> int:
        """
        Apply ``raw`` damage reduced by defense and return the amount applied.

        Dead combatants ignore damage and 0 is returned.
        """
        if not self.alive:
            return 0
        actual = damage.mitigate(raw, self.defense)
        self.health = damage.apply_damage(self.health, actual)
        if self.health == 0:
            self.alive = False
            logger.debug("%s has been defeated", self.name)
        return actual

    def heal(self, amount: int) -> int:
        """
        Restore up to ``amount`` health and return how much was restored.

        Non-positive amounts restore nothing.
        """
        if not self.alive or amount <= 0:
            return 0
        before = self.health
        self.health = damage.apply_heal(self.health, self.max_health, amount)
        return self.health - before

    def attack(self, target: Combatant, rng: RNG) -> int:
        """Hit ``target`` using this combatant's damage rule."""
        if not self.alive or not target.alive:
            return 0
        raw = self.calculate_damage(target, rng)
        dealt = target.take_damage(raw)
        logger.debug("%s attacks %s for %d damage (%d raw)", self.name, target.name, dealt, raw)
        return dealt

    # -----------------------
    # Variant hooks
    # -----------------------
    @abstractmethod
    def calculate_damage(self, target: Combatant, rng: RNG) -> int:
        """Return the raw damage this combatant deals to ``target``."""

    @abstractmethod
    def act(self, context: BattleContext, rng: RNG) -> None:
        """Choose and perform this combatant's action for the round."""
