import pytest

from bernoulli_types.rate_span import RateSpan


def test_default_construction():
    r = RateSpan()
    assert r.low == 0.0
    assert r.high == 1.0


def test_single_value_construction():
    r = RateSpan(0.5)
    assert r.low == 0.5
    assert r.high == 0.5


def test_range_construction():
    r = RateSpan(0.2, 0.8)
    assert r.low == 0.2
    assert r.high == 0.8


def test_clamping_to_unit_interval():
    r = RateSpan(-0.5, 1.5)
    assert r.low == 0.0
    assert r.high == 1.0


def test_bounds_are_ordered():
    assert RateSpan(0.8, 0.2) == RateSpan(0.2, 0.8)


def test_addition():
    r = RateSpan(0.1, 0.3) + RateSpan(0.2, 0.4)
    assert r.low == pytest.approx(0.3)
    assert r.high == pytest.approx(0.7)


def test_subtraction():
    r = RateSpan(0.5, 0.8) - RateSpan(0.1, 0.3)
    assert r.low == pytest.approx(0.2)
    assert r.high == pytest.approx(0.7)


def test_multiplication():
    r = RateSpan(0.2, 0.5) * RateSpan(0.4, 0.6)
    assert r.low == pytest.approx(0.08)
    assert r.high == pytest.approx(0.30)


def test_intersection():
    r = RateSpan(0.2, 0.7) & RateSpan(0.4, 0.9)
    assert r.low == pytest.approx(0.4)
    assert r.high == pytest.approx(0.7)


def test_union():
    r = RateSpan(0.2, 0.7) | RateSpan(0.4, 0.9)
    assert r.low == pytest.approx(0.2)
    assert r.high == pytest.approx(0.9)


def test_addition_saturates_at_one():
    r = RateSpan(0.6, 0.9) + RateSpan(0.5, 0.8)
    assert r.high == 1.0


def test_subtraction_saturates_at_zero():
    r = RateSpan(0.1, 0.2) - RateSpan(0.5, 0.6)
    assert r.low == 0.0


def test_numbers_mix_with_spans():
    span = RateSpan(0.1, 0.3)
    assert 1.0 - span == RateSpan(1.0) - span
    assert span + 0.2 == span + RateSpan(0.2)
    assert 0.5 * span == span * RateSpan(0.5)


def test_equality_with_number():
    assert RateSpan(0.25) == 0.25
    assert hash(RateSpan(0.25)) == hash(0.25)


def test_is_immutable():
    r = RateSpan(0.1, 0.2)
    with pytest.raises(AttributeError):
        r.low = 0.5
    assert r.low == 0.1


def test_upper_bound_alone_is_rejected():
    with pytest.raises(TypeError):
        RateSpan(high=0.5)


def test_repr_round_trip_values():
    assert repr(RateSpan(0.2, 0.8)) == "RateSpan(0.2, 0.8)"