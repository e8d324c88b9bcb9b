"""Factory helpers for runtime entities."""

from .combatant_factory import create_combatant

__all__ = ["create_combatant"]
