"""Hash-based observed maps: a latent function observed through hashing."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class SimpleDecoder:
    """Turn a hash value into a value of ``value_type``; booleans take the low bit."""

    value_type: type = int

    def __call__(self, hash_value: int) -> Any:
        if self.value_type is bool:
            return (hash_value & 1) != 0
        return self.value_type(hash_value)


@dataclass(frozen=True)
class HashMap:
    """An observed function ``x -> decoder(mix(hash(x), seed))`` with a uniform error rate."""

    hash_fn: Any
    decoder: Callable[[int], Any]
    seed: int
    error: float

    def __call__(self, x: Any) -> Any:
        return self.decoder(self.hash_fn.mix(self.hash_fn(x), self.seed))

    def error_rate(self, *args: Any) -> float:
        """Average error rate, or the rate on one input, which is the same here."""
        if len(args) > 1:
            raise TypeError(f"error_rate takes at most one argument ({len(args)} given)")
        return self.error


def make_hash_map(hash_fn: Any, decoder: Callable[[int], Any], seed: int, error_rate: float) -> HashMap:
    """Build a :class:`HashMap`."""
    return HashMap(hash_fn, decoder, seed, error_rate)