"""Static catalog of named derived units.

Every entry is a process-wide constant. The catalog also records each
accepted spelling of a unit so the registry can resolve surface words.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence, Tuple, Union

from ..core.dimensions import BaseUnit
from ..core.rational import Rational
from ..core.units import Conversion, DerivedUnit

Unit = Union[BaseUnit, DerivedUnit]

S = BaseUnit.SECOND
KG = BaseUnit.KILOGRAM
M = BaseUnit.METER
A = BaseUnit.AMPERE
K = BaseUnit.KELVIN
MOL = BaseUnit.MOLE
CD = BaseUnit.CANDELA
B = BaseUnit.BYTE

#: Every derived unit in registration order.
DERIVED_UNITS: List[DerivedUnit] = []

#: Accepted spelling -> (unit, prefix implied by the spelling itself).
NAMES: Dict[str, Tuple[Unit, int]] = {}


def _alias(unit: Unit, *names: str, prefix: int = 0) -> None:
    for name in names:
        if name in NAMES:
            raise ValueError(f"duplicate unit name {name!r}")
        NAMES[name] = (unit, prefix)


def _define(
    symbol: str,
    bases: Sequence[Tuple[BaseUnit, int]],
    ratio: Optional[Rational] = None,
    *,
    names: Sequence[str] = (),
    register_symbol: bool = True,
    plural: Optional[str] = None,
    offset: Optional[Rational] = None,
    description: str = "",
) -> DerivedUnit:
    conversion = None
    if ratio is not None or offset is not None:
        conversion = Conversion(
            ratio=ratio if ratio is not None else Rational(1),
            offset=offset if offset is not None else Rational(0),
        )
    unit = DerivedUnit(
        id=len(DERIVED_UNITS) + 1,
        symbol=symbol,
        bases=tuple(bases),
        plural=plural,
        conversion=conversion,
        description=description,
    )
    DERIVED_UNITS.append(unit)
    spellings = [symbol] if register_symbol else []
    _alias(unit, *spellings, *(n for n in names if n != symbol))
    return unit


def _r(numerator: int, denominator: int = 1) -> Rational:
    return Rational(numerator, denominator)


# -- Base units -------------------------------------------------------------
_alias(S, "s", "sec", "secs", "second", "seconds")
_alias(KG, "g", "gram", "grams", prefix=-3)
_alias(M, "m", "metre", "metres", "meter", "meters")
_alias(A, "A", "amp", "amps", "ampere", "amperes")
_alias(K, "K", "kelvin", "kelvins")
_alias(MOL, "mol", "mols", "mole", "moles")
_alias(CD, "cd", "candela", "candelas")
_alias(B, "B", "byte", "bytes")

# -- Time -------------------------------------------------------------------
_YEAR_SECONDS = 31557600

MINUTE = _define("min", [(S, 1)], _r(60), names=["mins", "minute", "minutes"])
HOUR = _define("hr", [(S, 1)], _r(3600), names=["h", "hour", "hours"])
DAY = _define("dy", [(S, 1)], _r(86400), names=["day", "days"])
WEEK = _define("wk", [(S, 1)], _r(604800), names=["week", "weeks"])
MONTH = _define("mth", [(S, 1)], _r(_YEAR_SECONDS, 12), names=["mths", "month", "months"])
YEAR = _define("yr", [(S, 1)], _r(_YEAR_SECONDS), names=["y", "yrs", "year", "years"])
DECADE = _define("decade", [(S, 1)], _r(_YEAR_SECONDS * 10), names=["decades"], plural="decades")
CENTURY = _define(
    "century", [(S, 1)], _r(_YEAR_SECONDS * 100), names=["centuries"], plural="centuries"
)
MILLENIUM = _define(
    "millenium",
    [(S, 1)],
    _r(_YEAR_SECONDS * 1000),
    names=["M", "milleniums", "millenia", "millennium", "millennia"],
    plural="millenia",
)
SPECIFIC_IMPULSE = _define("sp", [(S, 1)], description="specific impulse")

# -- Length -----------------------------------------------------------------
AU = _define("au", [(M, 1)], _r(149597870700), description="astronomical unit")
FATHOM = _define("ftm", [(M, 1)], _r(1852, 1000), names=["fathom", "fathoms"])
CABLE = _define("cable", [(M, 1)], _r(1852, 10), names=["cables"], plural="cables")
NAUTICAL_MILE = _define("NM", [(M, 1)], _r(1852), names=["nmi"])
LINK = _define("link", [(M, 1)], _r(201168, 1000000), names=["links"], plural="links")
ROD = _define("rd", [(M, 1)], _r(50292, 10000), names=["rod", "rods"])
THOU = _define("th", [(M, 1)], _r(254, 10000000), names=["thou", "thous"])
BARLEYCORN = _define("Bc", [(M, 1)], _r(254, 30000), names=["barleycorn", "barleycorns"])
INCH = _define("in", [(M, 1)], _r(254, 10000), names=["inch", "inches"])
HAND = _define("hand", [(M, 1)], _r(1016, 10000), names=["hands"])
FOOT = _define("ft", [(M, 1)], _r(3048, 10000), names=["foot", "feet"])
YARD = _define("yd", [(M, 1)], _r(9144, 10000), names=["yard", "yards"])
CHAIN = _define("ch", [(M, 1)], _r(201168, 10000), names=["chain", "chains"])
FURLONG = _define("fur", [(M, 1)], _r(201168, 1000), names=["furlong", "furlongs"])
MILE = _define("mi", [(M, 1)], _r(1609344, 1000), names=["mile", "miles"])
LEAGUE = _define("lea", [(M, 1)], _r(4828032, 1000), names=["league", "leagues"])

# -- Mass -------------------------------------------------------------------
TON = _define("ton", [(KG, 1)], _r(1000), names=["tons", "tonne", "tonnes"], plural="tons")
DALTON = _define("Da", [(KG, 1)], _r(332107813321, 200000000000), names=["dalton", "daltons"])
GRAIN = _define("gr", [(KG, 1)], _r(6479891, 100000000000), names=["grain", "grains"])
DRACHM = _define("dr", [(KG, 1)], _r(17718451953125, 10000000000000000), names=["drachm", "drachms"])
OUNCE = _define("oz", [(KG, 1)], _r(28349523125, 1000000000000), names=["ounce", "ounces"])
POUND = _define("lb", [(KG, 1)], _r(45359237, 100000000), names=["lbs", "pound", "pounds"])
STONE = _define("st", [(KG, 1)], _r(635029318, 100000000), names=["stone", "stones"])
QUARTER = _define("qr", [(KG, 1)], _r(1270058636, 100000000), names=["qtr", "quarter", "quarters"])
HUNDREDWEIGHT = _define(
    "hundredweight",
    [(KG, 1)],
    _r(5080234544, 100000000),
    names=["cwt", "hundredweights"],
)
LONG_TON = _define("t", [(KG, 1)], _r(10160469088, 10000000), description="imperial long ton")
SLUG = _define("slug", [(KG, 1)], _r(1459390294, 100000000), names=["slugs"])

# -- Area -------------------------------------------------------------------
HECTARE = _define("ha", [(M, 2)], _r(10000), names=["hectare", "hectares"])
PERCH = _define("perch", [(M, 2)], _r(2529285264, 100000000), names=["perches"], plural="perches")
ROOD = _define("rood", [(M, 2)], _r(10117141056, 10000000), names=["roods"], plural="roods")
ACRE = _define("acre", [(M, 2)], _r(40468564224, 10000000), names=["acres"], plural="acres")

# -- Volume -----------------------------------------------------------------
_PINT = 473176473

LITRE = _define("l", [(M, 3)], _r(1, 1000), names=["L", "litre", "litres", "liter", "liters"])
CUBIC_CENTIMETRE = _define("cc", [(M, 3)], _r(1, 1000000))
GALLON = _define(
    "gallon", [(M, 3)], _r(3785411784, 1000000000000), names=["gallons", "gal"], plural="gallons"
)
PINT = _define("pint", [(M, 3)], _r(_PINT, 250000000000), names=["pints"], plural="pints")
QUART = _define("quart", [(M, 3)], _r(_PINT, 500000000000), names=["quarts"], plural="quarts")
CUP = _define("cup", [(M, 3)], _r(_PINT, 2000000000000), names=["cups"], plural="cups")
GILL = _define("gill", [(M, 3)], _r(_PINT, 4000000000000), names=["gills"], plural="gills")
FLUID_OUNCE = _define(
    "floz",
    [(M, 3)],
    _r(_PINT, 16000000000000),
    names=["fl oz", "fluid ounce", "fluid ounces"],
)
TABLESPOON = _define(
    "tbsp", [(M, 3)], _r(_PINT, 32000000000000), names=["tbsps", "tablespoon", "tablespoons"], plural="tbsps"
)
TEASPOON = _define(
    "tsp", [(M, 3)], _r(157725491, 32000000000000), names=["tsps", "teaspoon", "teaspoons"], plural="tsps"
)

# -- Velocity and acceleration ----------------------------------------------
VELOCITY = _define("v", [(M, 1), (S, -1)], names=["vel", "velocity"])
LIGHTSPEED = _define("c", [(M, 1), (S, -1)], _r(299792458), description="speed of light")
KNOT = _define("kt", [(M, 1), (S, -1)], _r(1852, 3600), names=["knot", "knots"])
ACCELERATION = _define("a", [(M, 1), (S, -2)], names=["acc", "acceleration"])
# "g" alone spells the gram; the registry only reads it as g-force on request.
GFORCE = _define(
    "g",
    [(M, 1), (S, -2)],
    _r(980665, 100000),
    names=["gforce", "g-force"],
    register_symbol=False,
)

# -- Energy -----------------------------------------------------------------
JOULE = _define("J", [(KG, 1), (M, 2), (S, -2)], names=["joule", "joules"])
BTU = _define("btu", [(KG, 1), (M, 2), (S, -2)], _r(1055), names=["btus"], plural="btus")
ELECTRONVOLT = _define(
    "eV",
    [(KG, 1), (M, 2), (S, -2)],
    _r(801088317, 5000000000000000000000000000),
    names=["electronvolt", "electronvolts"],
)

# -- SI derived -------------------------------------------------------------
NEWTON = _define("N", [(KG, 1), (M, 1), (S, -2)], names=["newton", "newtons"])
PASCAL = _define("Pa", [(KG, 1), (M, -1), (S, -2)], names=["pascal", "pascals"])
WATT = _define("W", [(KG, 1), (M, 2), (S, -3)], names=["watt", "watts"])
COULOMB = _define("C", [(S, 1), (A, 1)], names=["coulomb", "coulombs"])
VOLT = _define("V", [(KG, 1), (M, 2), (S, -3), (A, -1)], names=["volt", "volts"])
FARAD = _define("F", [(KG, -1), (M, -2), (S, 4), (A, 2)], names=["farad", "farads"])
OHM = _define("Ω", [(KG, 1), (M, 2), (S, -3), (A, -2)], names=["ohm", "ohms"])
SIEMENS = _define("S", [(KG, -1), (M, -2), (S, 3), (A, 2)], names=["siemens"])
WEBER = _define("Wb", [(KG, 1), (M, 2), (S, -2), (A, -1)], names=["weber", "webers"])
TESLA = _define("T", [(KG, 1), (S, -2), (A, -1)], names=["tesla", "teslas"])
HENRY = _define("H", [(KG, 1), (M, 2), (S, -2), (A, -2)], names=["henry", "henrys", "henries"])
LUMEN = _define("lm", [(CD, 1)], names=["lumen", "lumens"])
LUX = _define("lx", [(CD, 1), (M, -2)], names=["lux"])
BECQUEREL = _define("Bq", [(S, -1)], names=["becquerel", "becquerels"])
GRAY = _define("Gy", [(M, 2), (S, -2)], names=["gray", "grays"])
SIEVERT = _define("Sv", [(M, 2), (S, -2)], names=["sievert", "sieverts"])
KATAL = _define("kat", [(MOL, 1), (S, -1)], names=["katal", "katals"])

# -- Temperature ------------------------------------------------------------
CELSIUS = _define(
    "°C", [(K, 1)], _r(1), offset=_r(27315, 100), names=["celsius", "degC"]
)
FAHRENHEIT = _define(
    "°F", [(K, 1)], _r(5, 9), offset=_r(45967, 180), names=["fahrenheit", "degF"]
)


__all__ = ["DERIVED_UNITS", "NAMES", "Unit"] + [
    name for name, value in list(globals().items()) if isinstance(value, DerivedUnit)
]
