"""Target selection and turn-order helpers."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Iterable, List, Sequence, TypeVar

if TYPE_CHECKING:
    from battlesim.domain.entities import Combatant

T = TypeVar("T")


def initiative_order(combatants: Iterable[Combatant]) -> List[Combatant]:
    """
    Return combatants sorted by initiative, highest first.

    The sort is stable, so combatants sharing an initiative value keep the
    order in which they were given (roster insertion order for the arena).
    """
    return sorted(combatants, key=lambda c: -c.initiative)


def first_min(items: Sequence[T], key: Callable[[T], float]) -> T | None:
    """Return the item with the smallest key; ties go to the earliest item."""
    best: T | None = None
    best_key = 0.0
    for item in items:
        value = key(item)
        if best is None or value < best_key:
            best = item
            best_key = value
    return best


def first_max(items: Sequence[T], key: Callable[[T], float]) -> T | None:
    """Return the item with the largest key; ties go to the earliest item."""
    best: T | None = None
    best_key = 0.0
    for item in items:
        value = key(item)
        if best is None or value > best_key:
            best = item
            best_key = value
    return best


def most_wounded(allies: Sequence[Combatant], threshold: float) -> Combatant | None:
    """Ally with the lowest health ratio strictly below ``threshold``, if any."""
    wounded = [ally for ally in allies if ally.health_ratio < threshold]
    return first_min(wounded, key=lambda ally: ally.health_ratio)
