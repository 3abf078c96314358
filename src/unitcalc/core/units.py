"""Named derived units and their conversions to base units."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from .dimensions import BaseUnit
from .powers import Powers
from .rational import ONE, ZERO, Rational


@dataclass(frozen=True)
class Conversion:
    """Linear map from a derived unit to its base-unit decomposition.

    ``to_base(x) = x * ratio + offset``. Most units only carry a ratio; an
    offset appears for temperature scales such as Celsius.
    """

    ratio: Rational = ONE
    offset: Rational = ZERO

    @property
    def is_affine(self) -> bool:
        return not self.offset.is_zero()

    def to_base(self, value: Rational) -> Rational:
        return value * self.ratio + self.offset

    def from_base(self, value: Rational) -> Rational:
        return (value - self.offset) / self.ratio


@dataclass(frozen=True, eq=False)
class DerivedUnit:
    """A statically registered unit defined in terms of base units."""

    id: int
    symbol: str
    bases: Tuple[Tuple[BaseUnit, int], ...]
    plural: Optional[str] = None
    conversion: Optional[Conversion] = None
    description: str = field(default="", compare=False)

    prefix_bias = 0

    @property
    def sort_key(self) -> Tuple[int, int]:
        return (1, self.id)

    def powers(self, acc: Powers, power: int) -> bool:
        """Add this unit's decomposition raised to ``power`` into ``acc``."""

        for base, base_power in self.bases:
            acc.insert(base, base_power * power)
        return True

    def format(self, pluralize: bool = False) -> str:
        if pluralize and self.plural:
            return self.plural
        return self.symbol

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DerivedUnit):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(("derived", self.id))

    def __str__(self) -> str:
        return self.symbol

    def __repr__(self) -> str:
        return f"DerivedUnit({self.id}, {self.symbol!r})"


__all__ = ["Conversion", "DerivedUnit"]
