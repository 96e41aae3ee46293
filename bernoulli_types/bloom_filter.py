"""A classic Bloom filter with salted hashing and sizing helpers."""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

from bernoulli_types.hash_set import SimpleHash
from bernoulli_types.rate_span import RateSpan

_SALTS = (
    0x8CA63C47, 0x42CC2884, 0x8E89919B, 0x6EDBD7D3,
    0x15B6796C, 0x1D6FDFE4, 0x63FF9092, 0xE7401432,
    0xEFFE9412, 0xAEAEDF79, 0x9F245A31, 0x83C136FC,
    0xC3DA4A8C, 0xA5112C8C, 0x5271F491, 0x9A948DAB,
)


def bloom_salt(index: int) -> int:
    """Salt for the ``index``-th hash function."""
    return _SALTS[index % len(_SALTS)] ^ index


class BloomFilter:
    """A bit array of ``m`` bits probed by ``k`` salted hashes."""

    def __init__(self, m_bits: int, k_hashes: int, hash_fn: Any = None) -> None:
        if m_bits < 0 or k_hashes < 0:
            raise ValueError("bit count and hash count must not be negative")
        self._bits = bytearray(m_bits)
        self._k = k_hashes
        self._n = 0
        self.hash_fn = hash_fn if hash_fn is not None else SimpleHash()

    @classmethod
    def from_items(
        cls, items: Iterable[Any], m_bits: int, k_hashes: int, hash_fn: Any = None
    ) -> BloomFilter:
        """Build a filter and insert every item."""
        bf = cls(m_bits, k_hashes, hash_fn)
        for x in items:
            bf.insert(x)
        return bf

    def _positions(self, x: Any) -> Iterable[int]:
        hx = self.hash_fn(x)
        m = len(self._bits)
        return ((bloom_salt(s) ^ hx) % m for s in range(self._k))

    def insert(self, x: Any) -> None:
        """Add ``x`` to the filter."""
        if not self._bits:
            raise ValueError("cannot insert into a filter with no bits")
        for idx in self._positions(x):
            self._bits[idx] = 1
        self._n += 1

    def contains(self, x: Any) -> bool:
        """True if ``x`` may be in the set; False means it certainly is not."""
        if not self._bits:
            return False
        return all(self._bits[idx] for idx in self._positions(x))

    def __contains__(self, x: Any) -> bool:
        return self.contains(x)

    def false_positive_rate(self) -> RateSpan:
        """Approximate rate ``(1 - e^(-k n / m))^k``."""
        m = len(self._bits)
        if m == 0:
            return RateSpan(0.0)
        one_minus = math.exp(-self._k * self._n / m)
        return RateSpan((1.0 - one_minus) ** self._k)

    def false_negative_rate(self) -> RateSpan:
        """A Bloom filter never misses an inserted element."""
        return RateSpan(0.0)

    def m(self) -> int:
        """Number of bits."""
        return len(self._bits)

    def k(self) -> int:
        """Number of hash functions."""
        return self._k

    def n(self) -> int:
        """Number of insertions."""
        return self._n


def bloom_params(n: int, target_fpr: float) -> tuple[int, int]:
    """Bit count and hash count that reach ``target_fpr`` for ``n`` elements."""
    if n == 0:
        return 0, 0
    if not 0.0 < target_fpr < 1.0:
        raise ValueError("target false positive rate must be in (0, 1)")
    ln2 = math.log(2.0)
    m = math.ceil(-(n * math.log(target_fpr)) / (ln2 * ln2))
    k = math.floor(m / n * ln2 + 0.5)
    return int(m), int(k)


def make_bloom_filter_fpr(
    items: Iterable[Any], target_fpr: float, hash_fn: Any = None
) -> BloomFilter:
    """Build a filter sized for the items and the target false positive rate."""
    elements = list(items)
    m, k = bloom_params(len(elements), target_fpr)
    return BloomFilter.from_items(elements, m, max(1, k), hash_fn)