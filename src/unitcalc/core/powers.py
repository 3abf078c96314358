"""Scratch accumulator of base-unit powers."""

from __future__ import annotations

from typing import Dict, Iterator, Optional, Tuple

from .dimensions import BaseUnit


class Powers:
    """Mapping of :class:`BaseUnit` to an accumulated integer power.

    Inserting adds to an existing entry and an entry that sums to zero is
    dropped, so two accumulators describing the same dimension always
    compare equal.
    """

    def __init__(self, items: Optional[Dict[BaseUnit, int]] = None) -> None:
        self._powers: Dict[BaseUnit, int] = {}
        for base, power in (items or {}).items():
            self.insert(base, power)

    def insert(self, base: BaseUnit, power: int) -> None:
        total = self._powers.get(base, 0) + power
        if total == 0:
            self._powers.pop(base, None)
        else:
            self._powers[base] = total

    def get(self, base: BaseUnit) -> Optional[int]:
        return self._powers.get(base)

    def clear(self) -> None:
        self._powers.clear()

    def copy(self) -> "Powers":
        clone = Powers()
        clone._powers = dict(self._powers)
        return clone

    def is_empty(self) -> bool:
        return not self._powers

    def items(self) -> Iterator[Tuple[BaseUnit, int]]:
        for base in sorted(self._powers, key=lambda b: b.order):
            yield base, self._powers[base]

    def __iter__(self) -> Iterator[Tuple[BaseUnit, int]]:
        return self.items()

    def __len__(self) -> int:
        return len(self._powers)

    def __contains__(self, base: object) -> bool:
        return base in self._powers

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Powers):
            return NotImplemented
        return self._powers == other._powers

    def __repr__(self) -> str:
        inner = ", ".join(f"{base.symbol}: {power}" for base, power in self.items())
        return f"Powers({{{inner}}})"


__all__ = ["Powers"]
