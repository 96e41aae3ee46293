import pytest

from bernoulli_types.observed_bool import ObservedBool, nand, nor, xnor
from bernoulli_types.rate_span import RateSpan


def test_construction_default_error():
    b = ObservedBool(True)
    assert b.value is True
    assert b.error.low == 0.0
    assert b.error.high == 0.0


def test_construction_with_rate():
    b = ObservedBool(False, 0.1)
    assert b.value is False
    assert b.error.low == 0.1
    assert b.error.high == 0.1


def test_construction_with_interval():
    b = ObservedBool(True, RateSpan(0.05, 0.15))
    assert b.value is True
    assert b.error.low == 0.05
    assert b.error.high == 0.15


def test_logical_not():
    neg = ~ObservedBool(True, 0.1)
    assert neg.value is False
    assert neg.error.low == 0.1
    assert neg.error.high == 0.1


def test_logical_and_both_true():
    result = ObservedBool(True, 0.1) & ObservedBool(True, 0.2)
    assert result.value is True
    assert result.error.low == pytest.approx(0.28)
    assert result.error.high == pytest.approx(0.28)


def test_logical_or():
    a = ObservedBool(False, 0.1)
    b = ObservedBool(False, 0.2)
    result = a | b
    expected = ~(~a & ~b)
    assert result.value is False
    assert result.value == expected.value
    assert result.error == expected.error


def test_implicit_conversion():
    raw_true = bool(ObservedBool(True, 0.1))
    raw_false = bool(ObservedBool(False, 0.1))
    assert raw_true is True
    assert raw_false is False
    chosen = "yes" if ObservedBool(True, 0.1) else "no"
    assert chosen == "yes"


def test_error_propagation_complex():
    a = ObservedBool(True, 0.1)
    b = ObservedBool(False, 0.2)
    c = ObservedBool(True, 0.15)

    and_result = a & b
    assert and_result.value is False
    not_c = ~c
    assert not_c.value is False

    result = (a & b) | (~c)
    assert result.value is False
    assert result.error.high >= result.error.low
    assert result.error.low >= 0.0
    assert result.error.high <= 1.0


@pytest.mark.parametrize("x", [True, False])
@pytest.mark.parametrize("y", [True, False])
def test_values_follow_boolean_logic(x, y):
    a = ObservedBool(x, 0.1)
    b = ObservedBool(y, 0.2)
    assert (a & b).value == (x and y)
    assert (a | b).value == (x or y)
    assert (a ^ b).value == (x != y)
    assert nor(a, b).value == (not (x or y))
    assert nand(a, b).value == (not (x and y))
    assert xnor(a, b).value == (x == y)


@pytest.mark.parametrize("x", [True, False])
@pytest.mark.parametrize("y", [True, False])
def test_derived_operators_keep_error(x, y):
    a = ObservedBool(x, 0.1)
    b = ObservedBool(y, 0.3)
    assert nor(a, b).error == (a | b).error
    assert nand(a, b).error == (a & b).error
    assert xnor(a, b).error == (a ^ b).error


def test_and_with_exact_operands_is_exact_when_true():
    result = ObservedBool(True) & ObservedBool(True)
    assert result.error == RateSpan(0.0)


def test_and_rejects_plain_bool():
    with pytest.raises(TypeError):
        ObservedBool(True, 0.1) & True