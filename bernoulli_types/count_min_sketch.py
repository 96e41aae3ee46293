"""Count-min sketch: approximate frequency counts with one-sided error."""

from __future__ import annotations

import math
from typing import Any

from bernoulli_types.hash_set import SimpleHash

_MASK = (1 << 64) - 1
_GOLDEN64 = 0x9E3779B97F4A7C15


def _salt(row: int) -> int:
    return (_GOLDEN64 ^ (row + (row << 6) + (row >> 2))) & _MASK


class CountMinSketch:
    """A ``depth`` x ``width`` table of counters; estimates never undercount."""

    def __init__(self, width: int, depth: int, hash_fn: Any = None) -> None:
        if width < 0 or depth < 0:
            raise ValueError("width and depth must not be negative")
        self._width = width
        self._depth = depth
        self._rows = [[0] * width for _ in range(depth)]
        self.hash_fn = hash_fn if hash_fn is not None else SimpleHash()
        self._total = 0

    def _indices(self, x: Any) -> list[int]:
        if self._depth and not self._width:
            raise ValueError("sketch has rows but no columns")
        hx = self.hash_fn(x) & _MASK
        return [(hx ^ _salt(r)) % self._width for r in range(self._depth)]

    def update(self, x: Any, count: int = 1) -> None:
        """Add ``count`` occurrences of ``x``."""
        if count < 0:
            raise ValueError("count must not be negative")
        for row, idx in zip(self._rows, self._indices(x)):
            row[idx] += count
        self._total += count

    def estimate(self, x: Any) -> int:
        """Upper estimate of how often ``x`` was counted; 0 for a sketch with no rows."""
        return min((row[idx] for row, idx in zip(self._rows, self._indices(x))), default=0)

    def epsilon(self) -> float:
        """Relative error bound ``e / width``; 1.0 when there are no columns."""
        return math.e / self._width if self._width else 1.0

    def one_minus_delta(self) -> float:
        """Confidence ``1 - e^(-depth)``; 0.0 when there are no rows."""
        return 1.0 - math.exp(-self._depth) if self._depth else 0.0

    def width(self) -> int:
        """Number of counters per row."""
        return self._width

    def depth(self) -> int:
        """Number of rows."""
        return self._depth

    def total(self) -> int:
        """Sum of all counts added."""
        return self._total