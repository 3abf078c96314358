"""Exact rational numbers backed by arbitrary-precision integers.

Every numeric value handled by the calculator is a :class:`Rational`. The
type is immutable and always kept in canonical form: the denominator is
positive and shares no common factor with the numerator, with zero stored as
``0/1``. No floating point arithmetic takes place except for the explicit
:meth:`Rational.from_float` and :meth:`Rational.to_float` bridges used by the
transcendental builtins.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from fractions import Fraction
from functools import total_ordering
from typing import Optional, Union

from ..errors import DivideByZero, ParseError

RationalLike = Union["Rational", int]

#: Largest exponent magnitude accepted by :meth:`Rational.parse`; anything
#: larger would build an integer with more digits than any display can use.
MAX_EXPONENT = 100_000


def _coerce(value: object) -> Optional["Rational"]:
    if isinstance(value, Rational):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational(value)
    return None


@total_ordering
@dataclass(frozen=True, eq=False)
class Rational:
    """A numerator/denominator pair in lowest terms."""

    numerator: int
    denominator: int = 1

    def __post_init__(self) -> None:
        numerator = self.numerator
        denominator = self.denominator
        if denominator == 0:
            raise DivideByZero()
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        divisor = math.gcd(numerator, denominator)
        if divisor > 1:
            numerator //= divisor
            denominator //= divisor
        object.__setattr__(self, "numerator", numerator)
        object.__setattr__(self, "denominator", denominator)

    # -- Construction -------------------------------------------------------
    @classmethod
    def from_fraction(cls, value: Fraction) -> "Rational":
        return cls(value.numerator, value.denominator)

    @classmethod
    def from_float(cls, value: float) -> Optional["Rational"]:
        """Return the exact value of ``value``, or ``None`` for NaN and infinities."""

        if not math.isfinite(value):
            return None
        numerator, denominator = value.as_integer_ratio()
        return cls(numerator, denominator)

    @classmethod
    def parse(cls, text: str) -> "Rational":
        """Parse decimal or scientific notation without a floating point step.

        Leading zeros are skipped, digits after a single ``.`` are counted and
        undone at the end, and an optional ``e``/``E`` exponent scales the
        accumulated digits by a power of ten.
        """

        pos = 0
        negative = False
        if text[:1] in ("+", "-"):
            negative = text[0] == "-"
            pos = 1

        value = cls(0)
        digits = 0
        dot = False
        dots = 0
        init = False

        while pos < len(text):
            ch = text[pos]
            pos += 1

            if ch == "0" and not init:
                continue
            if "0" <= ch <= "9":
                init = True
                digits = digits * 10 + (ord(ch) - ord("0"))
                if dot:
                    dots += 1
                continue
            if ch == ".":
                if dot:
                    raise ParseError("illegal numeric value: second decimal point", text, pos - 1)
                init = True
                dot = True
                continue
            if ch in ("e", "E"):
                exponent, exponent_negative = cls._parse_exponent(text, pos)
                if exponent_negative:
                    value = cls(digits, 10**exponent)
                else:
                    value = cls(digits * 10**exponent)
                break
            raise ParseError(f"illegal numeric value: unexpected '{ch}'", text, pos - 1)
        else:
            value = cls(digits)

        value = value / cls(10**dots)
        return -value if negative else value

    @staticmethod
    def _parse_exponent(text: str, pos: int) -> tuple[int, bool]:
        negative = False
        if pos < len(text) and text[pos] in ("+", "-"):
            negative = text[pos] == "-"
            pos += 1

        exponent = 0
        init = False
        for offset in range(pos, len(text)):
            ch = text[offset]
            if ch == "0" and not init:
                continue
            if not "0" <= ch <= "9":
                raise ParseError(f"illegal numeric value: unexpected '{ch}' in exponent", text, offset)
            init = True
            exponent = exponent * 10 + (ord(ch) - ord("0"))
            if exponent > MAX_EXPONENT:
                raise ParseError("illegal numeric value: exponent overflow", text, offset)
        return exponent, negative

    # -- Inspection ---------------------------------------------------------
    def is_integer(self) -> bool:
        return self.denominator == 1

    def is_zero(self) -> bool:
        return self.numerator == 0

    def to_int(self) -> Optional[int]:
        """Return the value as an ``int`` when it is an exact integer."""

        if self.denominator != 1:
            return None
        return self.numerator

    def to_float(self) -> Optional[float]:
        """Best-effort conversion to a 64-bit float, ``None`` on overflow."""

        try:
            return self.numerator / self.denominator
        except OverflowError:
            return None

    def to_fraction(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    # -- Arithmetic ---------------------------------------------------------
    def __add__(self, other: RationalLike) -> "Rational":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(
            self.numerator * rhs.denominator + rhs.numerator * self.denominator,
            self.denominator * rhs.denominator,
        )

    __radd__ = __add__

    def __sub__(self, other: RationalLike) -> "Rational":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self + (-rhs)

    def __rsub__(self, other: RationalLike) -> "Rational":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: RationalLike) -> "Rational":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(self.numerator * rhs.numerator, self.denominator * rhs.denominator)

    __rmul__ = __mul__

    def __truediv__(self, other: RationalLike) -> "Rational":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs.numerator == 0:
            raise DivideByZero()
        return Rational(self.numerator * rhs.denominator, self.denominator * rhs.numerator)

    def __rtruediv__(self, other: RationalLike) -> "Rational":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __pow__(self, exponent: int) -> "Rational":
        if not isinstance(exponent, int):
            return NotImplemented
        if exponent < 0:
            base = self.reciprocal()
            return Rational(base.numerator ** -exponent, base.denominator ** -exponent)
        return Rational(self.numerator**exponent, self.denominator**exponent)

    def __neg__(self) -> "Rational":
        return Rational(-self.numerator, self.denominator)

    def __pos__(self) -> "Rational":
        return self

    def __abs__(self) -> "Rational":
        return Rational(abs(self.numerator), self.denominator)

    def reciprocal(self) -> "Rational":
        """Return ``1 / self``.

        Zero has no reciprocal; asking for one is a programming error and
        raises :class:`ZeroDivisionError`.
        """

        if self.numerator == 0:
            raise ZeroDivisionError("reciprocal of zero")
        return Rational(self.denominator, self.numerator)

    # -- Rounding -----------------------------------------------------------
    def trunc(self) -> "Rational":
        """Round toward zero."""

        magnitude = abs(self.numerator) // self.denominator
        return Rational(-magnitude if self.numerator < 0 else magnitude)

    def round(self) -> "Rational":
        """Round to the nearest integer, half-way cases away from zero."""

        quotient, remainder = divmod(abs(self.numerator), self.denominator)
        if 2 * remainder >= self.denominator:
            quotient += 1
        return Rational(-quotient if self.numerator < 0 else quotient)

    def floor(self) -> "Rational":
        if self.denominator == 1:
            return self
        return self.trunc()

    def ceil(self) -> "Rational":
        if self.denominator == 1:
            return self
        return (self + 1).trunc()

    # -- Comparison ---------------------------------------------------------
    def __eq__(self, other: object) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.numerator == rhs.numerator and self.denominator == rhs.denominator

    def __lt__(self, other: RationalLike) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return self.numerator * rhs.denominator < rhs.numerator * self.denominator

    def __hash__(self) -> int:
        if self.denominator == 1:
            return hash(self.numerator)
        return hash((self.numerator, self.denominator))

    def __bool__(self) -> bool:
        return self.numerator != 0

    # -- Formatting ---------------------------------------------------------
    def display(
        self,
        limit: int | None = None,
        exponent_limit: int | None = None,
        show_continuation: bool | None = None,
    ) -> str:
        from .display import DisplaySpec, display

        spec = DisplaySpec()
        return display(
            self,
            limit=spec.limit if limit is None else limit,
            exponent_limit=spec.exponent_limit if exponent_limit is None else exponent_limit,
            show_continuation=spec.show_continuation if show_continuation is None else show_continuation,
        )

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"Rational({self.numerator}, {self.denominator})"


ZERO = Rational(0)
ONE = Rational(1)


def pow10(exponent: int) -> Rational:
    """Return ``10 ** exponent`` as an exact rational."""

    if exponent < 0:
        return Rational(1, 10**-exponent)
    return Rational(10**exponent)


__all__ = ["Rational", "RationalLike", "ZERO", "ONE", "MAX_EXPONENT", "pow10"]
