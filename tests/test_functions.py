import math

import pytest

from unitcalc import functions
from unitcalc.core.quantity import Quantity
from unitcalc.core.rational import Rational
from unitcalc.errors import ArgumentMismatch, BadArgument, MissingFunction, NonFinite
from unitcalc.units.algebra import parse_quantity as q


def test_sin_and_cos_keep_unit():
    result = functions.call("sin", [q("0m")])
    assert result.value == 0
    assert result.unit == q("1m").unit

    cosine = functions.call("cos", [q("0")])
    assert cosine.value == 1


def test_sin_is_exact_image_of_float_result():
    result = functions.call("sin", [q("1")])
    assert result.value == Rational.from_float(math.sin(1.0))


def test_transcendental_arity():
    with pytest.raises(ArgumentMismatch) as excinfo:
        functions.call("cos", [q("1"), q("2")])
    assert excinfo.value.expected == 1
    assert excinfo.value.actual == 2


def test_transcendental_rejects_values_too_large_for_float():
    with pytest.raises(BadArgument) as excinfo:
        functions.sin([Quantity(Rational(10**400))])
    assert excinfo.value.argument == 0


def test_non_finite_result(monkeypatch):
    monkeypatch.setattr(functions.math, "cos", lambda value: float("nan"))
    with pytest.raises(NonFinite):
        functions.call("cos", [q("1")])


@pytest.mark.parametrize(
    "args, expected",
    [
        (["2.5"], Rational(3)),
        (["-2.5"], Rational(-3)),
        (["7"], Rational(7)),
        (["3.14159", "2"], Rational(314, 100)),
        (["1234", "-2"], Rational(1200)),
        (["1250", "-2"], Rational(1300)),
    ],
)
def test_round(args, expected):
    assert functions.call("round", [q(arg) for arg in args]).value == expected


def test_round_keeps_unit():
    assert functions.call("round", [q("2.4km")]).unit == q("1km").unit


def test_round_arity_errors():
    with pytest.raises(ArgumentMismatch) as none:
        functions.call("round", [])
    assert none.value.expected == 1

    with pytest.raises(ArgumentMismatch) as many:
        functions.call("round", [q("1"), q("2"), q("3")])
    assert many.value.expected == 2


@pytest.mark.parametrize("digits", ["1.5", "2m"])
def test_round_rejects_bad_digit_count(digits):
    with pytest.raises(BadArgument) as excinfo:
        functions.call("round", [q("1.234"), q(digits)])
    assert excinfo.value.argument == 1


def test_floor_and_ceil():
    assert functions.call("floor", [q("3.7s")]).value == 3
    assert functions.call("ceil", [q("3.2s")]).value == 4
    assert functions.call("floor", [q("5")]).value == 5
    assert functions.call("ceil", [q("5")]).value == 5


def test_floor_arity():
    with pytest.raises(ArgumentMismatch):
        functions.call("floor", [])


def test_lookup_and_missing_function():
    assert functions.lookup("sin") is functions.sin
    assert functions.lookup("tan") is None
    with pytest.raises(MissingFunction):
        functions.call("tan", [q("1")])
