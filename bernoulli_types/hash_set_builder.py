"""Search for a hash seed that places every element below a threshold."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable
from typing import Any

from bernoulli_types.hash_set import HashSet, SimpleHash


class HashSetBuilder:
    """Builds a :class:`HashSet` with a chosen false positive rate.

    Settings chain: ``HashSetBuilder().false_positive_rate(0.01).seed(7).build(xs)``.
    """

    def __init__(self, hash_factory: Callable[[], Any] = SimpleHash) -> None:
        self._hash_factory = hash_factory
        self._fpr = 0.01
        self._max_attempts = 10000
        self._rng = random.Random()

    def false_positive_rate(self, fpr: float) -> HashSetBuilder:
        """Set the target false positive rate, which must lie in (0, 1)."""
        if fpr <= 0.0 or fpr >= 1.0:
            raise ValueError("False positive rate must be in (0, 1)")
        self._fpr = float(fpr)
        return self

    def max_attempts(self, attempts: int) -> HashSetBuilder:
        """Set how many random seeds to try before giving up."""
        if attempts < 0:
            raise ValueError("max attempts must not be negative")
        self._max_attempts = int(attempts)
        return self

    def seed(self, s: int) -> HashSetBuilder:
        """Seed the random search for reproducible results."""
        self._rng.seed(s)
        return self

    def build(self, elements: Iterable[Any]) -> HashSet:
        """Build a set holding every element; raise RuntimeError if no seed works."""
        items = list(elements)
        h = self._hash_factory()
        if not items:
            return HashSet(0, h, 0, 0.0)

        hash_max = h.max()
        threshold = int(self._fpr * hash_max)
        for _ in range(self._max_attempts):
            index = self._rng.randint(0, hash_max)
            if all(h.mix(index, x) <= threshold for x in items):
                return HashSet(threshold, h, index, 0.0)

        raise RuntimeError(
            f"Could not find suitable hash seed after {self._max_attempts} attempts"
        )