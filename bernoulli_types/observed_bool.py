"""Observed booleans: a value that may differ from its latent truth."""

from __future__ import annotations

from typing import Any

from bernoulli_types.rate_span import RateSpan


class ObservedBool:
    """An observed boolean ``~b`` with an error rate ``P(~b != b)``."""

    __slots__ = ("value", "error")

    def __init__(self, value: bool, error: RateSpan | float = 0.0) -> None:
        self.value = bool(value)
        self.error = error if isinstance(error, RateSpan) else RateSpan(error)

    def __bool__(self) -> bool:
        return self.value

    def __invert__(self) -> ObservedBool:
        """Negation keeps the error rate; it is deterministic."""
        return ObservedBool(not self.value, self.error)

    def __and__(self, other: Any) -> ObservedBool:
        if not isinstance(other, ObservedBool):
            return NotImplemented
        a, b = self.error, other.error
        if self.value and other.value:
            return ObservedBool(True, a + b - a * b)
        err1 = b - a * b
        err2 = a - a * b
        err3 = RateSpan(1.0) - a - b + a * b
        spans = (err1, err2, err3)
        combined = RateSpan(min(s.low for s in spans), max(s.high for s in spans))
        return ObservedBool(False, combined)

    def __or__(self, other: Any) -> ObservedBool:
        if not isinstance(other, ObservedBool):
            return NotImplemented
        return ~(~self & ~other)

    def __xor__(self, other: Any) -> ObservedBool:
        if not isinstance(other, ObservedBool):
            return NotImplemented
        return (~self & other) | (self & ~other)

    def __repr__(self) -> str:
        return f"ObservedBool({self.value!r}, {self.error!r})"


BernoulliBool = ObservedBool


def nor(a: ObservedBool, b: ObservedBool) -> ObservedBool:
    """Logical NOR of two observed booleans."""
    return ~(a | b)


def nand(a: ObservedBool, b: ObservedBool) -> ObservedBool:
    """Logical NAND of two observed booleans."""
    return ~(a & b)


def xnor(a: ObservedBool, b: ObservedBool) -> ObservedBool:
    """Logical equivalence of two observed booleans."""
    return ~(a ^ b)