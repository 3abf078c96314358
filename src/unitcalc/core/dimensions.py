"""Base units of the calculator.

The closed set of physical dimensions every other unit decomposes into:
time, mass, length, electric current, temperature, amount of substance,
luminous intensity and information. A base unit contributes itself to a
:class:`~unitcalc.core.powers.Powers` accumulator and never acts as a
reconstruction seed.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:  # pragma: no cover
    from .powers import Powers


class BaseUnit(Enum):
    """One physical base dimension together with its display symbol."""

    SECOND = (0, "s", "time")
    KILOGRAM = (1, "g", "mass")
    METER = (2, "m", "length")
    AMPERE = (3, "A", "current")
    KELVIN = (4, "K", "temperature")
    MOLE = (5, "mol", "amount")
    CANDELA = (6, "cd", "luminosity")
    BYTE = (7, "B", "information")

    def __init__(self, order: int, symbol: str, dimension: str) -> None:
        self.order = order
        self.symbol = symbol
        self.dimension = dimension

    @property
    def prefix_bias(self) -> int:
        """Prefix implied by the unit itself; the kilogram renders as ``kg``."""

        return 3 if self is BaseUnit.KILOGRAM else 0

    @property
    def conversion(self) -> None:
        return None

    @property
    def sort_key(self) -> Tuple[int, int]:
        return (0, self.order)

    def powers(self, acc: "Powers", power: int) -> bool:
        acc.insert(self, power)
        return False

    def format(self, pluralize: bool = False) -> str:
        return self.symbol

    def __str__(self) -> str:
        return f"{'k' if self.prefix_bias else ''}{self.symbol}"

    def __repr__(self) -> str:
        return f"BaseUnit.{self.name}"


__all__ = ["BaseUnit"]
