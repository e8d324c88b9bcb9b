"""Repositories for JSON definition data."""

from .scenarios_repo import ScenariosRepository

__all__ = ["ScenariosRepository"]
