"""SI decimal prefixes."""

from __future__ import annotations

import bisect
from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class Prefix:
    """A named power-of-ten scale factor such as ``kilo`` (10³)."""

    exponent: int
    symbol: str
    name: str

    def __str__(self) -> str:
        return self.symbol


YOCTO = Prefix(-24, "y", "yocto")
ZEPTO = Prefix(-21, "z", "zepto")
ATTO = Prefix(-18, "a", "atto")
FEMTO = Prefix(-15, "f", "femto")
PICO = Prefix(-12, "p", "pico")
NANO = Prefix(-9, "n", "nano")
MICRO = Prefix(-6, "μ", "micro")
MILLI = Prefix(-3, "m", "milli")
CENTI = Prefix(-2, "c", "centi")
DECI = Prefix(-1, "d", "deci")
NONE = Prefix(0, "", "")
DECA = Prefix(1, "da", "deca")
HECTO = Prefix(2, "h", "hecto")
KILO = Prefix(3, "k", "kilo")
MEGA = Prefix(6, "M", "mega")
GIGA = Prefix(9, "G", "giga")
TERA = Prefix(12, "T", "tera")
PETA = Prefix(15, "P", "peta")
EXA = Prefix(18, "E", "exa")
ZETTA = Prefix(21, "Z", "zetta")
YOTTA = Prefix(24, "Y", "yotta")

# Prefixes chosen when rendering; deca and hecto are accepted on input only.
PREFIXES: Tuple[Prefix, ...] = (
    YOCTO,
    ZEPTO,
    ATTO,
    FEMTO,
    PICO,
    NANO,
    MICRO,
    MILLI,
    CENTI,
    DECI,
    NONE,
    KILO,
    MEGA,
    GIGA,
    TERA,
    PETA,
    EXA,
    ZETTA,
    YOTTA,
)

_EXPONENTS: List[int] = [prefix.exponent for prefix in PREFIXES]


def _build_lookup() -> Dict[str, int]:
    lookup: Dict[str, int] = {}
    for prefix in (*PREFIXES, DECA, HECTO):
        if prefix is NONE:
            continue
        lookup[prefix.symbol] = prefix.exponent
        lookup[prefix.name] = prefix.exponent
    # micro sign, greek mu and plain ascii all spell micro
    lookup["µ"] = MICRO.exponent
    lookup["u"] = MICRO.exponent
    return lookup


#: Every spelling accepted in front of a unit name, mapped to its exponent.
PREFIX_LOOKUP: Dict[str, int] = _build_lookup()
SORTED_PREFIX_NAMES: Tuple[str, ...] = tuple(sorted(PREFIX_LOOKUP, key=len, reverse=True))


def find(power: int) -> Tuple[Prefix, int]:
    """Return the prefix for ``power`` and the exponent it leaves unexplained.

    The exact prefix is used when one exists, otherwise the largest prefix
    below ``power``. Powers under the table fall back to ``yocto``. The
    leftover satisfies ``prefix.exponent + leftover == power``.
    """

    index = bisect.bisect_right(_EXPONENTS, power) - 1
    prefix = PREFIXES[max(index, 0)]
    return prefix, power - prefix.exponent


def format_prefix(power: int) -> str:
    """Render ``power`` as a prefix symbol, prepending ``e<k>`` for leftovers."""

    prefix, leftover = find(power)
    if leftover:
        return f"e{leftover}{prefix.symbol}"
    return prefix.symbol


__all__ = [
    "Prefix",
    "PREFIXES",
    "PREFIX_LOOKUP",
    "SORTED_PREFIX_NAMES",
    "find",
    "format_prefix",
    "YOCTO",
    "ZEPTO",
    "ATTO",
    "FEMTO",
    "PICO",
    "NANO",
    "MICRO",
    "MILLI",
    "CENTI",
    "DECI",
    "NONE",
    "DECA",
    "HECTO",
    "KILO",
    "MEGA",
    "GIGA",
    "TERA",
    "PETA",
    "EXA",
    "ZETTA",
    "YOTTA",
]
