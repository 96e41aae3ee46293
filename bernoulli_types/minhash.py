"""MinHash signatures for estimating Jaccard similarity of sets."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from bernoulli_types.hash_set import SimpleHash

_MASK = (1 << 64) - 1
_SALT_BASE = 0x517CC1B727220A95


def _salt(i: int) -> int:
    return (_SALT_BASE ^ (i + (i << 6) + (i >> 2))) & _MASK


class MinHash:
    """A signature of ``signature_size`` minimum salted hash values."""

    def __init__(self, signature_size: int, hash_fn: Any = None) -> None:
        if signature_size < 0:
            raise ValueError("signature size must not be negative")
        self._signature = [_MASK] * signature_size
        self.hash_fn = hash_fn if hash_fn is not None else SimpleHash()
        self._count = 0

    def add(self, x: Any) -> None:
        """Fold one element into the signature."""
        hx = self.hash_fn(x) & _MASK
        self._signature = [min(cur, hx ^ _salt(i)) for i, cur in enumerate(self._signature)]
        self._count += 1

    def add_all(self, items: Iterable[Any]) -> None:
        """Fold every element of ``items`` into the signature."""
        for x in items:
            self.add(x)

    @staticmethod
    def jaccard_estimate(a: MinHash, b: MinHash) -> float:
        """Fraction of equal signature components over the shorter signature."""
        pairs = list(zip(a._signature, b._signature))
        if not pairs:
            return 0.0
        return sum(x == y for x, y in pairs) / len(pairs)

    def __len__(self) -> int:
        return len(self._signature)