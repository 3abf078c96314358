"""Error taxonomy shared by every layer of the calculator."""

from __future__ import annotations

from typing import Any


class CalcError(Exception):
    """Base class for conditions raised by the calculator core."""


class DivideByZero(CalcError, ZeroDivisionError):
    """Raised when dividing by the zero rational."""

    def __init__(self, message: str = "division by zero") -> None:
        super().__init__(message)


class ParseError(CalcError, ValueError):
    """Raised when numeric or unit text cannot be parsed."""

    def __init__(self, message: str, text: str, position: int | None = None) -> None:
        pointer = ""
        if position is not None and 0 <= position <= len(text):
            pointer = f"\n{text}\n{' ' * position}^"
        super().__init__(f"{message}{pointer}")
        self.text = text
        self.position = position


class IllegalUnit(ParseError):
    """Raised when a word does not name a known unit."""

    def __init__(self, unit: str, text: str | None = None, position: int | None = None) -> None:
        super().__init__(f"unit `{unit}` is not a valid unit", text or unit, position)
        self.unit = unit


class PrefixMismatch(CalcError):
    """Raised when a unit repeats in a compound with a different prefix."""

    def __init__(self, unit: str, expected: int, actual: int) -> None:
        super().__init__(
            f"mismatching prefix for unit `{unit}`; expected {expected} but got {actual}"
        )
        self.unit = unit
        self.expected = expected
        self.actual = actual


class ConversionNotPossible(CalcError):
    """Raised when converting between dimensionally incompatible units."""

    def __init__(self, source: Any, target: Any) -> None:
        super().__init__(f"cannot cast `{source}` to `{target}`")
        self.source = source
        self.target = target


class IllegalOperation(CalcError):
    """Raised when an operator cannot reconcile the units of its operands."""

    def __init__(self, op: str, lhs: Any, rhs: Any) -> None:
        super().__init__(f"illegal operation: {lhs} {op} {rhs}")
        self.op = op
        self.lhs = lhs
        self.rhs = rhs


class IllegalPower(CalcError):
    """Raised when an exponent carries a unit or is not an integer."""


class ArgumentMismatch(CalcError):
    """Raised when a builtin function receives the wrong number of arguments."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"bad number of arguments, got {actual} but expected {expected}")
        self.expected = expected
        self.actual = actual


class BadArgument(CalcError):
    """Raised when a builtin argument cannot be used."""

    def __init__(self, argument: int) -> None:
        super().__init__(f"bad argument {argument}")
        self.argument = argument


class NonFinite(CalcError):
    """Raised when a computation has no exact rational representation."""

    def __init__(self) -> None:
        super().__init__("result is not a finite number")


class MissingFunction(CalcError):
    """Raised when calling a builtin that does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(f"missing function `{name}`")
        self.name = name


__all__ = [
    "CalcError",
    "DivideByZero",
    "ParseError",
    "IllegalUnit",
    "PrefixMismatch",
    "ConversionNotPossible",
    "IllegalOperation",
    "IllegalPower",
    "ArgumentMismatch",
    "BadArgument",
    "NonFinite",
    "MissingFunction",
]
