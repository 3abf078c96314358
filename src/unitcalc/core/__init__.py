"""Core numeric and dimensional primitives."""

from .dimensions import BaseUnit
from .display import DisplaySpec, display, display_exact
from .powers import Powers
from .prefix import Prefix
from .rational import Rational
from .units import Conversion, DerivedUnit

__all__ = [
    "BaseUnit",
    "DisplaySpec",
    "display",
    "display_exact",
    "Powers",
    "Prefix",
    "Rational",
    "Conversion",
    "DerivedUnit",
]
