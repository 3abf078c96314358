"""Builtin numeric functions callable from expressions."""

from __future__ import annotations

import logging
import math
from typing import Callable, Dict, Optional, Sequence

from .core.quantity import Quantity
from .core.rational import Rational, pow10
from .errors import ArgumentMismatch, BadArgument, MissingFunction, NonFinite

logger = logging.getLogger(__name__)

Builtin = Callable[[Sequence[Quantity]], Quantity]


def _one(arguments: Sequence[Quantity]) -> Quantity:
    if len(arguments) != 1:
        raise ArgumentMismatch(expected=1, actual=len(arguments))
    return arguments[0]


def _transcendental(arguments: Sequence[Quantity], fn: Callable[[float], float]) -> Quantity:
    first = _one(arguments)
    value = first.value.to_float()
    if value is None:
        raise BadArgument(0)
    result = Rational.from_float(fn(value))
    if result is None:
        raise NonFinite()
    return Quantity(result, first.unit)


def sin(arguments: Sequence[Quantity]) -> Quantity:
    """Sine of the value, computed in floating point and made exact again."""

    return _transcendental(arguments, math.sin)


def cos(arguments: Sequence[Quantity]) -> Quantity:
    return _transcendental(arguments, math.cos)


def round_(arguments: Sequence[Quantity]) -> Quantity:
    """Round to the nearest integer, or to ``digits`` decimal places.

    ``round(x, digits)`` scales by ``10**digits``, rounds half away from
    zero and scales back, so negative ``digits`` round to tens, hundreds and
    so on.
    """

    if len(arguments) == 1:
        first, digits = arguments[0], 0
    elif len(arguments) == 2:
        first, second = arguments
        digits = second.value.to_int()
        if digits is None or not second.unit.is_empty():
            raise BadArgument(1)
    else:
        raise ArgumentMismatch(expected=1 if not arguments else 2, actual=len(arguments))

    value = first.value
    if digits >= 0 and value.is_integer():
        return Quantity(value, first.unit)
    if digits == 0:
        return Quantity(value.round(), first.unit)
    scale = pow10(digits)
    return Quantity((value * scale).round() / scale, first.unit)


def floor(arguments: Sequence[Quantity]) -> Quantity:
    first = _one(arguments)
    return Quantity(first.value.floor(), first.unit)


def ceil(arguments: Sequence[Quantity]) -> Quantity:
    first = _one(arguments)
    return Quantity(first.value.ceil(), first.unit)


BUILTINS: Dict[str, Builtin] = {
    "sin": sin,
    "cos": cos,
    "round": round_,
    "floor": floor,
    "ceil": ceil,
}


def lookup(name: str) -> Optional[Builtin]:
    return BUILTINS.get(name)


def call(name: str, arguments: Sequence[Quantity]) -> Quantity:
    """Invoke the builtin ``name`` or raise :class:`MissingFunction`."""

    builtin = lookup(name)
    if builtin is None:
        raise MissingFunction(name)
    logger.debug("calling %s with %d argument(s)", name, len(arguments))
    return builtin(arguments)


__all__ = ["BUILTINS", "Builtin", "lookup", "call", "sin", "cos", "round_", "floor", "ceil"]
