"""Quantities: an exact value paired with the compound unit it is expressed in."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..errors import ConversionNotPossible, DivideByZero, IllegalOperation, IllegalPower
from ..units.compound import DIMENSIONLESS, Compound
from .display import DisplaySpec
from .rational import ONE, Rational


@dataclass(frozen=True)
class Quantity:
    """A :class:`Rational` value carrying a :class:`Compound` unit."""

    value: Rational
    unit: Compound = DIMENSIONLESS

    def __post_init__(self) -> None:
        if isinstance(self.value, int):
            object.__setattr__(self, "value", Rational(self.value))
        if not isinstance(self.value, Rational):
            raise TypeError(f"Quantity value must be a Rational, got {type(self.value)}")

    # -- Additive -----------------------------------------------------------
    def _additive_operand(self, op: str, other: "Quantity") -> Rational:
        factor = self.unit.factor(other.unit)
        if factor is None:
            raise IllegalOperation(op, self.unit, other.unit)
        return other.value * factor

    def __add__(self, other: "Quantity") -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity(self.value + self._additive_operand("+", other), self.unit)

    def __sub__(self, other: "Quantity") -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        return Quantity(self.value - self._additive_operand("-", other), self.unit)

    def __neg__(self) -> "Quantity":
        return Quantity(-self.value, self.unit)

    # -- Multiplicative -----------------------------------------------------
    def __mul__(self, other: "Quantity") -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        unit, lhs_scale, rhs_scale = self.unit.mul(other.unit, 1)
        return Quantity((self.value * lhs_scale) * (other.value * rhs_scale), unit)

    def __truediv__(self, other: "Quantity") -> "Quantity":
        if not isinstance(other, Quantity):
            return NotImplemented
        unit, lhs_scale, rhs_scale = self.unit.mul(other.unit, -1)
        divisor = other.value * rhs_scale
        if divisor.is_zero():
            raise DivideByZero()
        return Quantity(self.value * lhs_scale / divisor, unit)

    def __pow__(self, exponent: Union["Quantity", int]) -> "Quantity":
        if isinstance(exponent, int):
            exponent = Quantity(Rational(exponent))
        if not isinstance(exponent, Quantity):
            return NotImplemented
        if not exponent.unit.is_empty():
            raise IllegalPower("exponent must be dimensionless")
        power = exponent.value.to_int()
        if power is None:
            raise IllegalPower("exponent must be an integer")

        if power == 0:
            return Quantity(ONE, DIMENSIONLESS)
        if self.value.is_zero():
            if power < 0:
                raise DivideByZero()
            return Quantity(self.value, self.unit.pow(power))
        return Quantity(self.value**power, self.unit.pow(power))

    # -- Conversion ---------------------------------------------------------
    def to(self, unit: Compound) -> "Quantity":
        """Re-express this quantity in ``unit``."""

        converted = unit.convert(self.value, self.unit)
        if converted is None:
            raise ConversionNotPossible(self.unit, unit)
        return Quantity(converted, unit)

    # -- Formatting ---------------------------------------------------------
    def display(self, spec: Optional[DisplaySpec] = None) -> str:
        spec = spec or DisplaySpec()
        return spec.render(self.value) + self.unit.display(pluralize=self.value != ONE)

    def __str__(self) -> str:
        return self.display()


__all__ = ["Quantity"]
