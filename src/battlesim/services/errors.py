"""Service-layer exceptions."""

from battlesim.errors import BattleSimError


class ConfigurationError(BattleSimError):
    """Raised when a battle is set up or driven incorrectly."""


class FactoryError(BattleSimError):
    """Raised when a combatant cannot be created from a definition."""
