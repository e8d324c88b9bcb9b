"""Arena orchestrating a deterministic, round-based battle."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from battlesim.core.rng import RNG
from battlesim.core.types import TEAMS, ArenaPhase, Team, opposing_team
from battlesim.domain.entities import Combatant
from battlesim.domain.targeting import initiative_order
from battlesim.services.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CombatantView:
    """Final state of a single roster entry."""

    id: int
    name: str
    kind: str
    team: Team
    health: int
    max_health: int
    alive: bool


@dataclass(slots=True)
class BattleResult:
    """Observable outcome of a battle."""

    rounds: int
    max_rounds: int
    winner: Team | None
    combatants: List[CombatantView]

    @property
    def is_draw(self) -> bool:
        return self.winner is None


class Arena:
    """
    Owns the roster, runs the round loop and decides the winner.

    Combatants are added while the arena is ``not_started``; ``start_battle``
    runs the whole battle synchronously and leaves the arena ``finished``.
    Every random draw comes from the single RNG handed to the constructor.
    """

    def __init__(self, max_rounds: int, rng: RNG | None = None, *, seed: int = 0) -> None:
        if max_rounds <= 0:
            raise ConfigurationError(f"Max rounds must be positive, got: {max_rounds}")
        self._max_rounds = max_rounds
        self._rng = rng if rng is not None else RNG(seed)
        self._roster: List[Combatant] = []
        self._teams: Dict[Team, List[Combatant]] = {team: [] for team in TEAMS}
        self._next_id = 1
        self._current_round = 0
        self._winner: Team | None = None
        self._phase: ArenaPhase = "not_started"

    # -----------------------
    # Read-only state
    # -----------------------
    @property
    def max_rounds(self) -> int:
        return self._max_rounds

    @property
    def current_round(self) -> int:
        return self._current_round

    @property
    def winner(self) -> Team | None:
        return self._winner

    @property
    def phase(self) -> ArenaPhase:
        return self._phase

    @property
    def rng(self) -> RNG:
        return self._rng

    @property
    def combatants(self) -> Tuple[Combatant, ...]:
        return tuple(self._roster)

    def team_roster(self, team: Team) -> Tuple[Combatant, ...]:
        return tuple(self._teams[team])

    def living_count(self, team: Team) -> int:
        return sum(1 for c in self._teams[team] if c.alive)

    def dead_count(self, team: Team) -> int:
        return sum(1 for c in self._teams[team] if not c.alive)

    # -----------------------
    # Setup
    # -----------------------
    def add_combatant(self, combatant: Combatant) -> Combatant:
        """Register ``combatant`` and assign it the next arena-scoped id."""
        if combatant is None:
            raise ConfigurationError("Cannot add a missing combatant.")
        if self._phase != "not_started":
            raise ConfigurationError("Cannot add combatants once the battle has started.")
        wanted = combatant.name.lower()
        if any(existing.name.lower() == wanted for existing in self._roster):
            raise ConfigurationError(f"Duplicate creature name: {combatant.name}")
        combatant.id = self._next_id
        self._next_id += 1
        self._roster.append(combatant)
        self._teams[combatant.team].append(combatant)
        return combatant

    def add_combatants(self, combatants: Iterable[Combatant]) -> None:
        for combatant in combatants:
            self.add_combatant(combatant)

    # -----------------------
    # Battle Lifecycle
    # -----------------------
    def start_battle(self) -> BattleResult:
        """Run the battle to completion and return its result."""
        if self._phase != "not_started":
            raise ConfigurationError("The battle has already been fought.")
        if not self._roster:
            raise ConfigurationError("Cannot start battle with no creatures.")
        if any(not self._teams[team] for team in TEAMS):
            raise ConfigurationError("Both teams must have at least one creature.")

        self._phase = "running"
        logger.info(
            "Battle begins: %d heroes vs %d monsters, at most %d rounds",
            len(self._teams["heroes"]),
            len(self._teams["monsters"]),
            self._max_rounds,
        )
        while self._current_round < self._max_rounds and not self.is_decided():
            self._current_round += 1
            self._run_round()

        self._winner = self._determine_winner()
        self._phase = "finished"
        logger.info(
            "Battle ended after %d rounds: %s",
            self._current_round,
            f"{self._winner} win" if self._winner else "draw",
        )
        return self.get_result()

    def acting_order(self) -> List[Combatant]:
        """Living combatants in the order they act this round."""
        return initiative_order(c for c in self._roster if c.alive)

    def is_decided(self) -> bool:
        """True once either team has no living combatants."""
        return any(self.living_count(team) == 0 for team in TEAMS)

    def get_result(self) -> BattleResult:
        return BattleResult(
            rounds=self._current_round,
            max_rounds=self._max_rounds,
            winner=self._winner,
            combatants=[self._to_view(c) for c in self._roster],
        )

    # -----------------------
    # Queries for decision rules
    # -----------------------
    def living_enemies_of(self, combatant: Combatant) -> List[Combatant]:
        return [c for c in self._teams[opposing_team(combatant.team)] if c.alive]

    def living_allies_of(self, combatant: Combatant) -> List[Combatant]:
        return [c for c in self._teams[combatant.team] if c.alive and c is not combatant]

    # -----------------------
    # Helpers
    # -----------------------
    def _run_round(self) -> None:
        logger.debug("Round %d", self._current_round)
        for combatant in self.acting_order():
            if self.is_decided():
                break
            if not combatant.alive:
                continue
            combatant.act(self, self._rng)

    def _determine_winner(self) -> Team | None:
        heroes_alive = self.living_count("heroes") > 0
        monsters_alive = self.living_count("monsters") > 0
        if heroes_alive and not monsters_alive:
            return "heroes"
        if monsters_alive and not heroes_alive:
            return "monsters"
        if self._current_round >= self._max_rounds:
            return self._winner_by_health()
        return None

    def _winner_by_health(self) -> Team | None:
        heroes_hp = sum(c.health for c in self._teams["heroes"])
        monsters_hp = sum(c.health for c in self._teams["monsters"])
        if heroes_hp > monsters_hp:
            return "heroes"
        if monsters_hp > heroes_hp:
            return "monsters"
        return None

    @staticmethod
    def _to_view(combatant: Combatant) -> CombatantView:
        assert combatant.id is not None
        return CombatantView(
            id=combatant.id,
            name=combatant.name,
            kind=combatant.kind,
            team=combatant.team,
            health=combatant.health,
            max_health=combatant.max_health,
            alive=combatant.alive,
        )
