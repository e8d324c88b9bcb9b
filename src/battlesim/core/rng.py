"""Deterministic RNG wrapper built on top of random.Random."""
from __future__ import annotations

import hashlib
from random import Random
from typing import Sequence, TypeVar

T_co = TypeVar("T_co")


class RNG:
    """Wrapper around random.Random that provides deterministic helpers."""

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._random = Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def randint(self, a: int, b: int) -> int:
        """Return a random integer N such that a <= N <= b."""
        return self._random.randint(a, b)

    def random(self) -> float:
        """Return the next random floating point number in the range [0.0, 1.0)."""
        return self._random.random()

    def choice(self, seq: Sequence[T_co]) -> T_co:
        """Return a random element from the non-empty sequence."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        return self._random.choice(seq)

    def spawn(self, label: str) -> RNG:
        """
        Derive an independent child stream from this RNG's seed.

        The child depends only on the parent seed and the label, never on how
        many values the parent has already produced.
        """
        digest = hashlib.sha256(f"{self._seed}:{label}".encode("utf-8")).digest()
        return RNG(int.from_bytes(digest[:8], "big"))
