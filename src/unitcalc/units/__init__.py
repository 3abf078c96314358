"""Unit catalog, lookup and compound-unit algebra."""

from .compound import DIMENSIONLESS, Compound, State
from .registry import DEFAULT_REGISTRY, ParsedUnit, UnitRegistry
from .algebra import parse_quantity, parse_unit, parse_unit_triples

__all__ = [
    "DIMENSIONLESS",
    "Compound",
    "State",
    "DEFAULT_REGISTRY",
    "ParsedUnit",
    "UnitRegistry",
    "parse_quantity",
    "parse_unit",
    "parse_unit_triples",
]
