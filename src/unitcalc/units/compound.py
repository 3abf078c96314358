"""Compound units: sparse products of prefixed units raised to integer powers.

A :class:`Compound` maps each unit appearing in an expression to a
:class:`State` holding its power and the SI prefix currently folded into it.
The empty compound is the dimensionless unit. Three algorithms live here:

* ``factor`` computes the exact multiplier between two compatible compounds;
* ``convert`` additionally understands affine temperature scales;
* ``mul`` combines two compounds under multiplication or division, unwinds
  every prefix and ratio into plain base units and then greedily rebuilds
  named derived units from the residue, seeded by the operands' own derived
  units in order (left operand first).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Tuple

from ..core.dimensions import BaseUnit
from ..core.powers import Powers
from ..core.prefix import format_prefix
from ..core.rational import ONE, Rational, pow10
from ..errors import PrefixMismatch
from .catalog import Unit

logger = logging.getLogger(__name__)

_SUPERSCRIPTS = str.maketrans("0123456789-", "⁰¹²³⁴⁵⁶⁷⁸⁹⁻")


def superscript(power: int) -> str:
    return str(power).translate(_SUPERSCRIPTS)


@dataclass(frozen=True)
class State:
    """Power and applied prefix exponent of one unit inside a compound."""

    power: int
    prefix: int = 0


def _sorted_entries(names: Dict[Unit, State]) -> Tuple[Tuple[Unit, State], ...]:
    return tuple(
        sorted(
            ((unit, state) for unit, state in names.items() if state.power != 0),
            key=lambda item: item[0].sort_key,
        )
    )


def _scale_of(unit: Unit, state: State) -> Rational:
    scale = pow10(state.prefix * state.power)
    conversion = unit.conversion
    if conversion is not None:
        scale = scale * conversion.ratio**state.power
    return scale


def _covers(have: Optional[int], need: int) -> bool:
    if have is None:
        return False
    return (have > 0) == (need > 0) and abs(have) >= abs(need)


def _bases_match(power: int, scratch: Powers, merged: Powers) -> Optional[int]:
    """Return the largest power of ``scratch`` that ``merged`` still contains."""

    step = 1 if power > 0 else -1
    current = power
    while current != 0:
        if all(_covers(merged.get(base), base_power * current) for base, base_power in scratch):
            return current
        current -= step
    return None


@dataclass(frozen=True)
class Compound:
    """An immutable, sorted collection of ``(unit, State)`` entries."""

    entries: Tuple[Tuple[Unit, State], ...] = ()

    # -- Construction -------------------------------------------------------
    @classmethod
    def empty(cls) -> "Compound":
        return cls()

    @classmethod
    def from_map(cls, names: Dict[Unit, State]) -> "Compound":
        return cls(_sorted_entries(names))

    @classmethod
    def from_iter(cls, items: Iterable[Tuple[Unit, int, int]]) -> "Compound":
        """Build a compound from ``(unit, power, prefix)`` triples.

        A unit named twice accumulates its power, provided both mentions
        carry the same prefix.
        """

        names: Dict[Unit, State] = {}
        for unit, power, prefix in items:
            existing = names.get(unit)
            if existing is None:
                names[unit] = State(power, prefix)
                continue
            if existing.prefix != prefix:
                raise PrefixMismatch(str(unit), existing.prefix, prefix)
            names[unit] = State(existing.power + power, prefix)
        return cls.from_map(names)

    @classmethod
    def of(cls, unit: Unit, power: int = 1, prefix: int = 0) -> "Compound":
        return cls.from_iter([(unit, power, prefix)])

    # -- Inspection ---------------------------------------------------------
    def is_empty(self) -> bool:
        return not self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[Tuple[Unit, State]]:
        return iter(self.entries)

    def get(self, unit: Unit) -> Optional[State]:
        for name, state in self.entries:
            if name == unit:
                return state
        return None

    def base_units(self) -> Tuple[List[Tuple[Unit, int]], Powers]:
        """Decompose into base powers, collecting derived units as seeds."""

        powers = Powers()
        derived: List[Tuple[Unit, int]] = []
        for unit, state in self.entries:
            if unit.powers(powers, state.power):
                derived.append((unit, state.power))
        return derived, powers

    def is_acceleration(self) -> bool:
        _, bases = self.base_units()
        return bases == Powers({BaseUnit.METER: 1, BaseUnit.SECOND: -2})

    def scale(self) -> Rational:
        """Multiplier taking a value in this unit to plain base units."""

        scale = ONE
        for unit, state in self.entries:
            scale = scale * _scale_of(unit, state)
        return scale

    # -- Conversion ---------------------------------------------------------
    def factor(self, other: "Compound") -> Optional[Rational]:
        """Multiplier converting a value expressed in ``other`` into ``self``.

        Returns ``None`` when the two compounds decompose into different base
        powers. The dimensionless unit converts to anything with factor one.
        """

        if self.is_empty() or other.is_empty() or self == other:
            return ONE

        _, lhs_bases = self.base_units()
        _, rhs_bases = other.base_units()
        if lhs_bases != rhs_bases:
            return None

        return other.scale() / self.scale()

    def convert(self, value: Rational, other: "Compound") -> Optional[Rational]:
        """Re-express ``value``, given in ``other``, in this unit.

        Single temperature units at power one go through their affine
        conversions; everything else is a plain multiplication by
        :meth:`factor`.
        """

        if self == other:
            return value

        if len(self) == 1 and len(other) == 1:
            (unit, state), = self.entries
            (source, source_state), = other.entries
            affine = any(
                u.conversion is not None and u.conversion.is_affine for u in (unit, source)
            )
            if affine and state.power == 1 and source_state.power == 1:
                _, lhs_bases = self.base_units()
                _, rhs_bases = other.base_units()
                if lhs_bases != rhs_bases:
                    return None
                base = value * pow10(source_state.prefix)
                if source.conversion is not None:
                    base = source.conversion.to_base(base)
                if unit.conversion is not None:
                    base = unit.conversion.from_base(base)
                return base / pow10(state.prefix)

        factor = self.factor(other)
        if factor is None:
            return None
        return value * factor

    # -- Algebra ------------------------------------------------------------
    def mul(self, other: "Compound", n: int) -> Tuple["Compound", Rational, Rational]:
        """Compute the unit of ``self * other**n`` for ``n`` in ``(1, -1)``.

        Returns the combined unit together with the scales that must be
        applied to the left and right operand values before they are
        combined.
        """

        if self.is_empty() or other.is_empty():
            if self.is_empty():
                unit = Compound.from_iter(
                    (name, state.power * n, state.prefix) for name, state in other.entries
                )
            else:
                unit = self
            return unit, ONE, ONE

        lhs_seeds, merged = self.base_units()
        rhs_seeds, rhs_bases = other.base_units()
        for base, power in rhs_bases:
            merged.insert(base, power * n)

        lhs_scale = self.scale()
        rhs_scale = other.scale()

        names: Dict[Unit, int] = {}
        candidates = lhs_seeds + [(unit, power * n) for unit, power in rhs_seeds]
        scratch = Powers()

        for candidate, power in candidates:
            scratch.clear()
            if not candidate.powers(scratch, 1):
                continue
            matched = _bases_match(power, scratch, merged)
            if matched is None:
                continue

            for base, base_power in scratch:
                merged.insert(base, -base_power * matched)
            names[candidate] = names.get(candidate, 0) + matched
            conversion = candidate.conversion
            if conversion is not None:
                lhs_scale = lhs_scale * conversion.ratio ** -matched
            logger.debug("reconstructed %s^%d, residue %r", candidate, matched, merged)

        for base, power in merged:
            names[base] = names.get(base, 0) + power

        unit = Compound.from_map({name: State(power) for name, power in names.items()})
        return unit, lhs_scale, rhs_scale

    def pow(self, n: int) -> "Compound":
        return Compound.from_iter(
            (unit, state.power * n, state.prefix) for unit, state in self.entries
        )

    # -- Formatting ---------------------------------------------------------
    def display(self, pluralize: bool = False) -> str:
        """Render as ``num·num/den·den`` with superscript powers.

        Pluralization only applies when exactly one unit sits in the
        numerator.
        """

        numerator = [(unit, state) for unit, state in self.entries if state.power > 0]
        denominator = [(unit, state) for unit, state in self.entries if state.power < 0]
        pluralize = pluralize and len(numerator) == 1

        out = "·".join(_format_entry(unit, state, pluralize, 1) for unit, state in numerator)
        if denominator:
            out += "/" + "·".join(
                _format_entry(unit, state, False, -1) for unit, state in denominator
            )
        return out

    def __str__(self) -> str:
        return self.display(False)

    def __repr__(self) -> str:
        inner = ", ".join(
            f"{unit!r}: ({state.power}, {state.prefix})" for unit, state in self.entries
        )
        return f"Compound({{{inner}}})"


def _format_entry(unit: Unit, state: State, pluralize: bool, sign: int) -> str:
    power = state.power * sign
    text = format_prefix(state.prefix + unit.prefix_bias) + unit.format(pluralize)
    if power != 1:
        text += superscript(power)
    return text


DIMENSIONLESS = Compound.empty()


__all__ = ["State", "Compound", "DIMENSIONLESS", "superscript"]
