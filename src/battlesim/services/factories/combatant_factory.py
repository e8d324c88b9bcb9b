"""Factory for creating combatants from definitions."""
from __future__ import annotations

from battlesim.domain.defs import CombatantDef
from battlesim.domain.entities import BossMonster, Combatant, Healer, Mage, Warrior
from battlesim.services.errors import FactoryError


def create_combatant(defn: CombatantDef) -> Combatant:
    """
    Instantiate the combatant kind named by ``defn``.

    Invalid stats surface as CreatureStateError from the combatant itself.
    """
    stats = dict(
        name=defn.name,
        health=defn.health,
        attack_power=defn.attack_power,
        defense=defn.defense,
        initiative=defn.initiative,
        team=defn.team,
    )
    if defn.kind == "warrior":
        return Warrior(**stats)
    if defn.kind == "mage":
        return Mage(**stats)
    if defn.kind == "boss_monster":
        return BossMonster(**stats)
    if defn.kind == "healer":
        if defn.heal_power is None:
            raise FactoryError(f"Healer '{defn.name}' has no heal power.")
        return Healer(**stats, heal_power=defn.heal_power)
    raise FactoryError(f"Unknown combatant kind '{defn.kind}' for '{defn.name}'.")
