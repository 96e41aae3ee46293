"""Type-erased observed maps: approximate functions with error rates."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

X = TypeVar("X")
Y = TypeVar("Y")


class ObservedMap(Generic[X, Y]):
    """An observed function ``~f`` standing for a latent function ``f``.

    The wrapped object must be callable and offer ``error_rate()`` for the
    average error rate and ``error_rate(x)`` for the rate on one input.
    """

    __slots__ = ("_f",)

    def __init__(self, f: Any) -> None:
        if isinstance(f, ObservedMap):
            f = f._f
        if not callable(f) or not callable(getattr(f, "error_rate", None)):
            raise TypeError(
                f"{type(f).__name__} is not an observed map; "
                "it must be callable and have error_rate"
            )
        self._f = f

    def __call__(self, x: X) -> Y:
        return self._f(x)

    def error_rate(self, *args: X) -> float:
        """Average error rate with no argument, or the error rate on one input."""
        if len(args) > 1:
            raise TypeError(f"error_rate takes at most one argument ({len(args)} given)")
        return float(self._f.error_rate(*args))


BernoulliMap = ObservedMap