"""Core helpers shared across layers."""

from .rng import RNG
from .types import TEAMS, Team, opposing_team

__all__ = ["RNG", "TEAMS", "Team", "opposing_team"]
