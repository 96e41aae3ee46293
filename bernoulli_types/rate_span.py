"""Interval type for uncertain rates confined to [0, 1]."""

from __future__ import annotations

from numbers import Real
from typing import Any


class RateSpan:
    """An immutable interval ``[low, high]`` modelling an uncertain rate.

    ``RateSpan()`` is the fully uncertain rate ``[0, 1]``. ``RateSpan(r)`` is the
    point rate ``r``. ``RateSpan(a, b)`` is the interval spanned by ``a`` and
    ``b``, clamped to ``[0, 1]``.
    """

    __slots__ = ("_low", "_high")

    def __init__(self, low: float | None = None, high: float | None = None) -> None:
        if low is None:
            if high is not None:
                raise TypeError("an upper bound requires a lower bound")
            lo, hi = 0.0, 1.0
        elif high is None:
            r = float(low)
            lo, hi = max(r, 0.0), min(r, 1.0)
        else:
            a, b = float(low), float(high)
            lo = max(0.0, min(a, b))
            hi = min(1.0, max(a, b))
        self._low = lo
        self._high = hi

    @property
    def low(self) -> float:
        """Lower bound of the rate."""
        return self._low

    @property
    def high(self) -> float:
        """Upper bound of the rate."""
        return self._high

    def __add__(self, other: Any) -> RateSpan:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return RateSpan(self.low + other.low, self.high + other.high)

    def __radd__(self, other: Any) -> RateSpan:
        return self.__add__(other)

    def __sub__(self, other: Any) -> RateSpan:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return RateSpan(self.low - other.high, self.high - other.low)

    def __rsub__(self, other: Any) -> RateSpan:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return other - self

    def __mul__(self, other: Any) -> RateSpan:
        other = _coerce(other)
        if other is None:
            return NotImplemented
        products = (
            self.low * other.low,
            self.low * other.high,
            self.high * other.low,
            self.high * other.high,
        )
        return RateSpan(min(products), max(products))

    def __rmul__(self, other: Any) -> RateSpan:
        return self.__mul__(other)

    def __and__(self, other: Any) -> RateSpan:
        """Intersection: the larger lower bound and the smaller upper bound."""
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return RateSpan(max(self.low, other.low), min(self.high, other.high))

    def __rand__(self, other: Any) -> RateSpan:
        return self.__and__(other)

    def __or__(self, other: Any) -> RateSpan:
        """Hull: the smaller lower bound and the larger upper bound."""
        other = _coerce(other)
        if other is None:
            return NotImplemented
        return RateSpan(min(self.low, other.low), max(self.high, other.high))

    def __ror__(self, other: Any) -> RateSpan:
        return self.__or__(other)

    def __eq__(self, other: object) -> bool:
        other_span = _coerce(other)
        if other_span is None:
            return NotImplemented
        return self.low == other_span.low and self.high == other_span.high

    def __hash__(self) -> int:
        if self.low == self.high:
            return hash(self.low)
        return hash((self.low, self.high))

    def __repr__(self) -> str:
        return f"RateSpan({self.low!r}, {self.high!r})"


def _coerce(value: Any) -> RateSpan | None:
    if isinstance(value, RateSpan):
        return value
    if isinstance(value, Real):
        return RateSpan(float(value))
    return None