"""Battle domain: combatants and the arithmetic they share."""

from .errors import CreatureStateError

__all__ = ["CreatureStateError"]
