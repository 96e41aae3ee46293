"""A Bloom filter sized to the minimum bits for a target false positive rate."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from typing import Any

from bernoulli_types.hash_set import SimpleHash

_SALTS = (
    0x8CA63C47, 0x42CC2884, 0x8E89919B, 0x6EDBD7D3,
    0x15B6796C, 0x1D6FDFE4, 0x63FF9092, 0xE7401432,
    0xEFFE9412, 0xAEAEDF79, 0x9F245A31, 0x83C136FC,
    0xC3DA4A8C, 0xA5112C8C, 0x5271F491, 0x9A948DAB,
    0xCEE59A8D, 0xB5F525AB, 0x59D13217, 0x24E7C331,
    0x697C2103, 0x84B0A460, 0x86156DA9, 0xAEF2AC68,
    0x23243DA5, 0x3F649643, 0x5FA495A8, 0x67710DF8,
    0x9A6C499E, 0xDCFB0227, 0x46A43433, 0x1832B07A,
    0xC46AFF3C, 0xB9C8FFF0, 0xC9500467, 0x34431BDF,
    0xB652432B, 0xE367F12B, 0x427F4C1B, 0x224C006E,
)

BITS_PER_ELEMENT = 1.4426950408889634


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


class SpaceOptimalBloomFilter:
    """An immutable Bloom filter using about 1.44 bits per element per bit of ``log2(1/fpr)``.

    The items should hold no duplicates; their count is taken as the number
    of elements.
    """

    def __init__(self, items: Iterable[Any], fpr: float, hash_fn: Any = None) -> None:
        if not 0.0 < fpr < 1.0:
            raise ValueError("false positive rate must be in (0, 1)")
        elements = list(items)
        self.hash_fn = hash_fn if hash_fn is not None else SimpleHash()
        self._fpr = float(fpr)
        self._n = len(elements)
        bits_per_item = math.log2(1.0 / fpr)
        self._k = _round_half_up(bits_per_item)
        m = _round_half_up(self._n * BITS_PER_ELEMENT * bits_per_item)
        bits = bytearray(m)
        if m:
            for x in elements:
                for idx in self._positions(x, m):
                    bits[idx] = 1
        self._bits = bytes(bits)

    @staticmethod
    def salt(index: int) -> int:
        """Salt for the ``index``-th hash function."""
        if index >= len(_SALTS):
            return _SALTS[index % len(_SALTS)] ^ index
        return _SALTS[index]

    def _positions(self, x: Any, m: int) -> Iterator[int]:
        hx = self.hash_fn(x)
        return ((self.salt(s) ^ hx) % m for s in range(self._k))

    def __call__(self, x: Any) -> bool:
        if not self._bits:
            return self._k == 0
        return all(self._bits[idx] for idx in self._positions(x, len(self._bits)))

    def __contains__(self, x: Any) -> bool:
        return self(x)

    def __iter__(self) -> Iterator[bool]:
        return (bool(b) for b in self._bits)

    def __len__(self) -> int:
        return len(self._bits)

    def __hash__(self) -> int:
        return hash((self._bits, self._k, self._n))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SpaceOptimalBloomFilter):
            return NotImplemented
        return (
            self._bits == other._bits
            and self._k == other._k
            and self._n == other._n
            and self._fpr == other._fpr
        )

    def fpr(self) -> float:
        """The false positive rate the filter was built for."""
        return self._fpr

    def fnr(self) -> float:
        """A Bloom filter never misses an inserted element."""
        return 0.0

    def n(self) -> int:
        """Number of elements the filter was built from."""
        return self._n

    def m(self) -> int:
        """Number of bits."""
        return len(self._bits)

    def k(self) -> int:
        """Number of hash functions."""
        return self._k

    def bit_length(self) -> int:
        """Number of bits."""
        return len(self._bits)

    def bits(self) -> tuple[bool, ...]:
        """The bit array as booleans."""
        return tuple(self)