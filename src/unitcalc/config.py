"""Environment driven defaults for rendering results."""

from __future__ import annotations

import os
from typing import Any, Dict, Optional

from .core.display import DisplaySpec

LIMIT_ENV = "UNITCALC_DISPLAY_LIMIT"
EXPONENT_LIMIT_ENV = "UNITCALC_EXPONENT_LIMIT"
SHOW_CONTINUATION_ENV = "UNITCALC_SHOW_CONTINUATION"


def load_display_spec(
    *,
    limit: Optional[int] = None,
    exponent_limit: Optional[int] = None,
    show_continuation: Optional[bool] = None,
) -> DisplaySpec:
    """Build a :class:`DisplaySpec` from the environment.

    Explicit arguments win over environment variables, which win over the
    model defaults. Malformed values raise :class:`pydantic.ValidationError`.
    """

    values: Dict[str, Any] = {}
    for field, env, override in (
        ("limit", LIMIT_ENV, limit),
        ("exponent_limit", EXPONENT_LIMIT_ENV, exponent_limit),
        ("show_continuation", SHOW_CONTINUATION_ENV, show_continuation),
    ):
        if override is not None:
            values[field] = override
            continue
        raw = os.getenv(env)
        if raw is not None and raw.strip():
            values[field] = raw.strip()
    return DisplaySpec(**values)


__all__ = ["LIMIT_ENV", "EXPONENT_LIMIT_ENV", "SHOW_CONTINUATION_ENV", "load_display_spec"]
