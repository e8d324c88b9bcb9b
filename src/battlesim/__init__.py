"""Deterministic round-based creature battle simulator."""

from .errors import BattleSimError

__all__ = ["BattleSimError"]

__version__ = "0.1.0"
