"""unitcalc - exact, unit-aware arithmetic."""

from . import core, errors, units
from .core.quantity import Quantity
from .core.rational import Rational
from .functions import call
from .units.algebra import parse_quantity, parse_unit
from .units.compound import Compound
from .version import __version__

__all__ = [
    "core",
    "errors",
    "units",
    "Quantity",
    "Rational",
    "Compound",
    "call",
    "parse_quantity",
    "parse_unit",
    "__version__",
]
