"""Shared type aliases for the core and domain layers."""
from typing import Literal, Tuple

Team = Literal["heroes", "monsters"]
ArenaPhase = Literal["not_started", "running", "finished"]

TEAMS: Tuple[Team, ...] = ("heroes", "monsters")


def opposing_team(team: Team) -> Team:
    """Return the faction fighting against ``team``."""
    return "monsters" if team == "heroes" else "heroes"


__all__ = ["ArenaPhase", "TEAMS", "Team", "opposing_team"]
