"""Domain-layer exceptions."""

from battlesim.errors import BattleSimError


class CreatureStateError(BattleSimError):
    """Raised when a combatant is created with invalid attributes."""
