import pytest

from unitcalc.core.dimensions import BaseUnit
from unitcalc.errors import IllegalUnit
from unitcalc.units import catalog
from unitcalc.units.registry import DEFAULT_REGISTRY, ParsedUnit, UnitRegistry


@pytest.mark.parametrize(
    "word, expected",
    [
        ("m", ParsedUnit(BaseUnit.METER, 0)),
        ("km", ParsedUnit(BaseUnit.METER, 3)),
        ("kilometers", ParsedUnit(BaseUnit.METER, 3)),
        ("kg", ParsedUnit(BaseUnit.KILOGRAM, 0)),
        ("g", ParsedUnit(BaseUnit.KILOGRAM, -3)),
        ("mg", ParsedUnit(BaseUnit.KILOGRAM, -6)),
        ("μs", ParsedUnit(BaseUnit.SECOND, -6)),
        ("us", ParsedUnit(BaseUnit.SECOND, -6)),
        ("dam", ParsedUnit(BaseUnit.METER, 1)),
        ("hPa", ParsedUnit(catalog.PASCAL, 2)),
        ("Gbtu", ParsedUnit(catalog.BTU, 9)),
        ("kJ", ParsedUnit(catalog.JOULE, 3)),
    ],
)
def test_prefixed_lookup(word, expected):
    assert DEFAULT_REGISTRY.get(word) == expected


@pytest.mark.parametrize(
    "word, unit",
    [
        ("h", catalog.HOUR),
        ("T", catalog.TESLA),
        ("M", catalog.MILLENIUM),
        ("c", catalog.LIGHTSPEED),
        ("a", catalog.ACCELERATION),
        ("y", catalog.YEAR),
        ("t", catalog.LONG_TON),
        ("min", catalog.MINUTE),
        ("mi", catalog.MILE),
        ("cd", BaseUnit.CANDELA),
        ("kt", catalog.KNOT),
        ("Pa", catalog.PASCAL),
        ("days", catalog.DAY),
        ("millenia", catalog.MILLENIUM),
        ("°C", catalog.CELSIUS),
        ("ohm", catalog.OHM),
    ],
)
def test_exact_names_win_over_prefixes(word, unit):
    assert DEFAULT_REGISTRY.get(word) == ParsedUnit(unit, 0)


def test_acceleration_bias_reads_g_as_gforce():
    assert DEFAULT_REGISTRY.get("g", acceleration_bias=True) == ParsedUnit(catalog.GFORCE, 0)
    assert DEFAULT_REGISTRY.get("g-force") == ParsedUnit(catalog.GFORCE, 0)


def test_unknown_word_raises():
    with pytest.raises(IllegalUnit) as excinfo:
        DEFAULT_REGISTRY.get("furlongish")
    assert excinfo.value.unit == "furlongish"
    assert "furlongish" not in DEFAULT_REGISTRY


def test_bare_prefix_is_not_a_unit():
    with pytest.raises(IllegalUnit):
        DEFAULT_REGISTRY.get("kilo")


def test_register_custom_spelling():
    registry = UnitRegistry()
    registry.register(catalog.FOOT, ["foots"])
    assert registry.get("foots") == ParsedUnit(catalog.FOOT, 0)
    assert "foots" not in DEFAULT_REGISTRY


def test_multi_word_spellings_are_indexed():
    assert "fl oz" in DEFAULT_REGISTRY.phrases()
    assert DEFAULT_REGISTRY.get("fl-oz") == ParsedUnit(catalog.FLUID_OUNCE, 0)
    registry = UnitRegistry()
    registry.register(catalog.KNOT, ["nautical mile per hour"])
    assert registry.phrases()[0] == "nautical mile per hour"
    assert registry.get("nautical-mile-per-hour") == ParsedUnit(catalog.KNOT, 0)
