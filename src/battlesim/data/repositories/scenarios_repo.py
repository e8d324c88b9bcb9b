"""Scenarios repository."""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List

from battlesim.core.types import TEAMS, Team
from battlesim.data.errors import DataValidationError
from battlesim.data.repositories.base import RepositoryBase
from battlesim.domain.defs import CombatantDef, ScenarioDef

COMBATANT_KINDS = ("warrior", "mage", "healer", "boss_monster")


class ScenariosRepository(RepositoryBase[ScenarioDef]):
    """Loads and validates battle scenario definitions."""

    def __init__(self, base_path: Path | str | None = None, filename: str = "scenarios.json") -> None:
        super().__init__(filename, base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, ScenarioDef]:
        scenarios: Dict[str, ScenarioDef] = {}
        for raw_id, payload in raw.items():
            context = f"scenario '{raw_id}'"
            scenario_data = self._require_mapping(payload, context)
            self._assert_required(scenario_data, {"name", "combatants"}, context)

            seed = scenario_data.get("seed")
            max_rounds = scenario_data.get("max_rounds")
            entries = self._require_list(scenario_data["combatants"], f"{context} combatants")
            scenarios[raw_id] = ScenarioDef(
                id=raw_id,
                name=self._require_str(scenario_data["name"], f"{context} name"),
                max_rounds=None if max_rounds is None else self._require_int(max_rounds, f"{context} max_rounds"),
                seed=None if seed is None else self._require_int(seed, f"{context} seed"),
                combatants=tuple(
                    self._build_combatant(entry, f"{context} combatant #{index}")
                    for index, entry in enumerate(entries)
                ),
            )
        return scenarios

    def _build_combatant(self, payload: object, context: str) -> CombatantDef:
        data = self._require_mapping(payload, context)
        required = {"kind", "name", "health", "attack_power", "defense", "initiative", "team"}
        self._assert_required(data, required, context)

        kind = self._require_str(data["kind"], f"{context} kind")
        if kind not in COMBATANT_KINDS:
            raise DataValidationError(f"{context} has unknown kind '{kind}'.")
        if kind == "healer" and "heal_power" not in data:
            raise DataValidationError(f"{context} healer requires heal_power.")
        heal_power = data.get("heal_power")

        return CombatantDef(
            kind=kind,
            name=self._require_str(data["name"], f"{context} name"),
            health=self._require_int(data["health"], f"{context} health"),
            attack_power=self._require_int(data["attack_power"], f"{context} attack_power"),
            defense=self._require_int(data["defense"], f"{context} defense"),
            initiative=self._require_int(data["initiative"], f"{context} initiative"),
            team=self._require_team(data["team"], f"{context} team"),
            heal_power=None if heal_power is None else self._require_int(heal_power, f"{context} heal_power"),
        )

    @staticmethod
    def _require_team(value: object, context: str) -> Team:
        if value not in TEAMS:
            raise DataValidationError(f"{context} must be one of {list(TEAMS)}.")
        return value  # type: ignore[return-value]

    def ids(self) -> List[str]:
        return [scenario.id for scenario in self.all()]
