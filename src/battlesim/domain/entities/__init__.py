"""Combatant exports."""

from .boss_monster import BossMonster
from .combatant import BattleContext, Combatant
from .healer import Healer
from .mage import Mage
from .warrior import Warrior

__all__ = [
    "BattleContext",
    "BossMonster",
    "Combatant",
    "Healer",
    "Mage",
    "Warrior",
]
