"""Hash-based observed sets and the simple 64-bit hash they rely on."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Any

_MASK = (1 << 64) - 1
_FNV_OFFSET = 0xCBF29CE484222325
_FNV_PRIME = 0x100000001B3
_GOLDEN = 0x9E3779B9


def _fnv1a(data: bytes) -> int:
    h = _FNV_OFFSET
    for byte in data:
        h ^= byte
        h = (h * _FNV_PRIME) & _MASK
    return h


@dataclass(frozen=True)
class SimpleHash:
    """A 64-bit hash: FNV-1a over text and bytes, identity on integers."""

    def __call__(self, x: Any) -> int:
        if isinstance(x, int):
            return x & _MASK
        if isinstance(x, str):
            data = x.encode("utf-8")
        elif isinstance(x, (bytes, bytearray, memoryview)):
            data = bytes(x)
        elif isinstance(x, float):
            data = struct.pack("<d", x)
        else:
            return hash(x) & _MASK
        return _fnv1a(data)

    def mix(self, seed: int, value: Any) -> int:
        """Mix ``value`` into ``seed``; integers are taken as hash values already."""
        v = value & _MASK if isinstance(value, int) else self(value)
        s = seed & _MASK
        return (s ^ (v + _GOLDEN + (s << 6) + (s >> 2))) & _MASK

    def max(self) -> int:
        """The largest hash value."""
        return _MASK


@dataclass(frozen=True)
class HashSet:
    """An observed set: ``x`` is a member when ``mix(index, x) <= threshold``."""

    threshold: int
    hash_fn: Any
    index: int
    fnr: float

    def contains(self, x: Any) -> bool:
        """Test membership in the observed set."""
        return self.hash_fn.mix(self.index, x) <= self.threshold

    def __contains__(self, x: Any) -> bool:
        return self.contains(x)

    def false_positive_rate(self) -> float:
        """``P(x in ~S | x not in S)``: the threshold's share of the hash range."""
        return self.threshold / self.hash_fn.max()

    def false_negative_rate(self) -> float:
        """``P(x not in ~S | x in S)``."""
        return self.fnr