"""Parsing of unit expressions and quantity literals.

Unit expressions accept ``*``, ``·``, ``×`` and juxtaposition for
multiplication, ``/`` for division, ``^n`` or Unicode superscripts for
powers, parentheses and the literal ``1``. ``/`` binds looser than
multiplication, so ``J/kg K`` reads as ``J/(kg·K)``. Multi-word unit names
such as ``fl oz`` are joined before tokenizing.
"""

from __future__ import annotations

import re
from typing import List, Tuple

from ..core.quantity import Quantity
from ..core.rational import Rational
from ..errors import IllegalUnit, ParseError
from .catalog import Unit
from .compound import DIMENSIONLESS, Compound
from .registry import DEFAULT_REGISTRY, UnitRegistry

Triple = Tuple[Unit, int, int]


class _Token(Tuple[str, str, int, int]):
    __slots__ = ()


_SUPERSCRIPT_TRANS = str.maketrans({
    "⁰": "0",
    "¹": "1",
    "²": "2",
    "³": "3",
    "⁴": "4",
    "⁵": "5",
    "⁶": "6",
    "⁷": "7",
    "⁸": "8",
    "⁹": "9",
    "⁺": "+",
    "⁻": "-",
})

_SYMBOL_START = "A-Za-zµμΩ°"

_TOKEN_RE = re.compile(
    rf"""
    (?P<space>\s+)
    |(?P<lpar>\()
    |(?P<rpar>\))
    |(?P<op>[*/])
    |(?P<pow>\^)
    |(?P<num>[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)
    |(?P<sym>[{_SYMBOL_START}_][{_SYMBOL_START}_\-]*)
    """,
    re.VERBOSE,
)

_NUMBER_RE = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")


def _normalize_input(text: str) -> str:
    text = text.replace("·", "*").replace("×", "*")

    def replace_superscripts(match: re.Match[str]) -> str:
        base = match.group(1)
        supers = match.group(2).translate(_SUPERSCRIPT_TRANS)
        return f"{base}^{supers}"

    text = re.sub(
        rf"([{_SYMBOL_START}0-9\)])([⁰¹²³⁴⁵⁶⁷⁸⁹⁺⁻]+)", replace_superscripts, text
    )

    # m2 and s-1 are shorthands for m^2 and s^-1
    text = re.sub(
        rf"(?<![{_SYMBOL_START}0-9_])([{_SYMBOL_START}]+)([-+]?\d+)",
        lambda match: f"{match.group(1)}^{match.group(2)}",
        text,
    )
    return text


def _join_phrases(text: str, registry: UnitRegistry) -> str:
    for phrase in registry.phrases():
        pattern = r"\s+".join(re.escape(word) for word in phrase.split())
        text = re.sub(
            rf"(?<![{_SYMBOL_START}_]){pattern}(?![{_SYMBOL_START}_])", "-".join(phrase.split()), text
        )
    return text


def _tokenize(text: str) -> List[_Token]:
    tokens: List[_Token] = []
    pos = 0
    while pos < len(text):
        match = _TOKEN_RE.match(text, pos)
        if not match:
            raise ParseError(f"unexpected character '{text[pos]}' in unit expression", text, pos)
        if match.lastgroup != "space":
            tokens.append(_Token((match.lastgroup, match.group(0), match.start(), match.end())))
        pos = match.end()
    return tokens


class _TokenStream:
    def __init__(
        self,
        tokens: List[_Token],
        original: str,
        registry: UnitRegistry,
        acceleration_bias: bool,
    ) -> None:
        self.tokens = tokens
        self.original = original
        self.registry = registry
        self.acceleration_bias = acceleration_bias
        self.index = 0

    def peek(self) -> _Token | None:
        if self.index >= len(self.tokens):
            return None
        return self.tokens[self.index]

    def pop(self, expected: str | None = None) -> _Token:
        token = self.peek()
        if token is None:
            raise ParseError("unexpected end of unit expression", self.original, len(self.original))
        kind, value, start, _ = token
        if expected and kind != expected:
            raise ParseError(f"expected {expected} but found '{value}'", self.original, start)
        self.index += 1
        return token


def parse_unit_triples(
    text: str,
    *,
    registry: UnitRegistry | None = None,
    acceleration_bias: bool = False,
) -> List[Triple]:
    """Parse ``text`` into ``(unit, power, prefix)`` triples in source order."""

    if registry is None:
        registry = DEFAULT_REGISTRY

    stripped = text.strip()
    if not stripped:
        raise ParseError("unit expression is empty", text, 0)

    normalized = _normalize_input(_join_phrases(stripped, registry))
    stream = _TokenStream(_tokenize(normalized), normalized, registry, acceleration_bias)

    triples = _parse_expr(stream)
    trailing = stream.peek()
    if trailing is not None:
        _, value, start, _ = trailing
        raise ParseError(f"unexpected token '{value}'", normalized, start)
    return triples


def parse_unit(
    text: str,
    *,
    registry: UnitRegistry | None = None,
    acceleration_bias: bool = False,
) -> Compound:
    """Parse a unit expression such as ``km/h`` or ``kg·m²/s²``."""

    return Compound.from_iter(
        parse_unit_triples(text, registry=registry, acceleration_bias=acceleration_bias)
    )


def _scaled(triples: List[Triple], factor: int) -> List[Triple]:
    return [(unit, power * factor, prefix) for unit, power, prefix in triples]


def _parse_expr(stream: _TokenStream) -> List[Triple]:
    triples = _parse_term(stream)
    while True:
        next_tok = stream.peek()
        if next_tok and next_tok[0] == "op" and next_tok[1] == "/":
            stream.pop("op")
            triples = triples + _scaled(_parse_term(stream), -1)
        else:
            break
    return triples


def _parse_term(stream: _TokenStream) -> List[Triple]:
    triples = _parse_factor(stream)
    while True:
        next_tok = stream.peek()
        if not next_tok:
            break
        kind, value, _, _ = next_tok
        if kind == "op" and value == "*":
            stream.pop("op")
            triples = triples + _parse_factor(stream)
            continue
        if kind in {"sym", "num", "lpar"}:
            triples = triples + _parse_factor(stream)
            continue
        break
    return triples


def _parse_factor(stream: _TokenStream) -> List[Triple]:
    triples = _parse_atom(stream)
    next_tok = stream.peek()
    if next_tok and next_tok[0] == "pow":
        stream.pop("pow")
        _, value, start, _ = stream.pop("num")
        try:
            exponent = int(value)
        except ValueError:
            raise ParseError(f"unit exponent must be an integer, got '{value}'", stream.original, start) from None
        triples = _scaled(triples, exponent)
    return triples


def _parse_atom(stream: _TokenStream) -> List[Triple]:
    token = stream.peek()
    if token is None:
        raise ParseError("unexpected end of unit expression", stream.original, len(stream.original))
    kind, value, start, _ = token
    if kind == "lpar":
        stream.pop("lpar")
        inner = _parse_expr(stream)
        stream.pop("rpar")
        return inner
    if kind == "sym":
        stream.pop("sym")
        try:
            parsed = stream.registry.get(value, acceleration_bias=stream.acceleration_bias)
        except IllegalUnit:
            raise IllegalUnit(value, stream.original, start) from None
        return [(parsed.unit, 1, parsed.prefix)]
    if kind == "num":
        stream.pop("num")
        if value != "1":
            raise ParseError(f"only the number 1 may appear in a unit, got '{value}'", stream.original, start)
        return []
    raise ParseError(f"unexpected token '{value}'", stream.original, start)


def parse_quantity(
    text: str,
    *,
    registry: UnitRegistry | None = None,
    acceleration_bias: bool = False,
) -> Quantity:
    """Parse a literal such as ``1.5km`` or ``32 °F`` into a :class:`Quantity`."""

    match = _NUMBER_RE.match(text)
    if not match:
        raise ParseError("expected a numeric value", text, len(text) - len(text.lstrip()))
    value = Rational.parse(match.group(1))
    rest = text[match.end() :]
    if not rest.strip():
        return Quantity(value, DIMENSIONLESS)
    unit = parse_unit(rest, registry=registry, acceleration_bias=acceleration_bias)
    return Quantity(value, unit)


__all__ = ["parse_unit", "parse_unit_triples", "parse_quantity"]
