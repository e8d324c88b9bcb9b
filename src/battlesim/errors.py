"""Root exception shared by every layer."""


class BattleSimError(Exception):
    """Base exception for the battle simulator."""
