"""Type-erased observed sets with false positive and false negative rates."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from bernoulli_types.rate_span import RateSpan

X = TypeVar("X")

_REQUIRED = ("contains", "false_positive_rate", "false_negative_rate")


def _as_span(value: Any) -> RateSpan:
    return value if isinstance(value, RateSpan) else RateSpan(value)


class ObservedSet(Generic[X]):
    """An observed set ``~S`` standing for a latent set ``S``.

    The backend must offer ``contains(x)``, ``false_positive_rate()`` and
    ``false_negative_rate()``. Rates are reported as :class:`RateSpan`.
    The set is not iterable.
    """

    __slots__ = ("_backend",)

    def __init__(self, backend: Any) -> None:
        if isinstance(backend, ObservedSet):
            backend = backend._backend
        missing = [name for name in _REQUIRED if not callable(getattr(backend, name, None))]
        if missing:
            raise TypeError(
                f"{type(backend).__name__} is not an observed set backend; "
                f"missing {', '.join(missing)}"
            )
        self._backend = backend

    def contains(self, x: X) -> bool:
        """Test membership in ``~S``; may be wrong at the set's error rates."""
        return bool(self._backend.contains(x))

    def __call__(self, x: X) -> bool:
        return self.contains(x)

    def __contains__(self, x: X) -> bool:
        return self.contains(x)

    def false_positive_rate(self) -> RateSpan:
        """``P(x in ~S | x not in S)``."""
        return _as_span(self._backend.false_positive_rate())

    def false_negative_rate(self) -> RateSpan:
        """``P(x not in ~S | x in S)``."""
        return _as_span(self._backend.false_negative_rate())


BernoulliSet = ObservedSet