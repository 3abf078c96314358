"""Resolution of unit words such as ``km`` or ``kilometres`` to units."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from ..core.prefix import PREFIX_LOOKUP, SORTED_PREFIX_NAMES
from ..errors import IllegalUnit
from . import catalog
from .catalog import Unit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedUnit:
    """A unit word split into its unit and the prefix exponent it carries."""

    unit: Unit
    prefix: int = 0


class UnitRegistry:
    """Registry of unit spellings with SI prefix stripping.

    Multi-word spellings such as ``fl oz`` are also stored hyphenated, which
    is the form the unit-expression tokenizer hands back after joining them.
    """

    def __init__(self, names: Dict[str, Tuple[Unit, int]] | None = None) -> None:
        self._units: Dict[str, Tuple[Unit, int]] = {}
        self._phrases: List[str] = []
        self._sorted_prefixes = SORTED_PREFIX_NAMES
        for name, (unit, prefix) in (catalog.NAMES if names is None else names).items():
            self._store(name, unit, prefix)

    def _store(self, name: str, unit: Unit, prefix: int) -> None:
        words = name.split()
        if len(words) > 1:
            if name not in self._phrases:
                self._phrases.append(name)
                self._phrases.sort(key=len, reverse=True)
            self._units["-".join(words)] = (unit, prefix)
        self._units[name] = (unit, prefix)

    # ------------------------------------------------------------------
    def register(self, unit: Unit, names: Iterable[str], *, prefix: int = 0) -> None:
        for name in names:
            self._store(name, unit, prefix)

    def __contains__(self, word: str) -> bool:
        try:
            self.get(word)
        except IllegalUnit:
            return False
        return True

    def get(self, word: str, *, acceleration_bias: bool = False) -> ParsedUnit:
        """Resolve ``word`` or raise :class:`IllegalUnit`.

        Exact spellings win over prefixed readings, so ``h`` is an hour and
        ``m`` a metre. With ``acceleration_bias`` a bare ``g`` names the
        standard gravity instead of the gram.
        """

        if acceleration_bias and word == "g":
            return ParsedUnit(catalog.GFORCE, 0)

        if word in self._units:
            unit, prefix = self._units[word]
            return ParsedUnit(unit, prefix)

        for name in self._sorted_prefixes:
            if word.startswith(name) and len(word) > len(name):
                tail = word[len(name) :]
                if tail in self._units:
                    unit, prefix = self._units[tail]
                    logger.debug("resolved %r as prefix %r + unit %r", word, name, tail)
                    return ParsedUnit(unit, prefix + PREFIX_LOOKUP[name])
        raise IllegalUnit(word)

    def phrases(self) -> Tuple[str, ...]:
        """Multi-word spellings, longest first."""

        return tuple(self._phrases)


DEFAULT_REGISTRY = UnitRegistry()


__all__ = ["ParsedUnit", "UnitRegistry", "DEFAULT_REGISTRY"]
