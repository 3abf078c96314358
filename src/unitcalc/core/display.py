"""Decimal and scientific rendering of exact rationals."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .rational import Rational

CONTINUATION = "…"


class DisplaySpec(BaseModel):
    """Knobs controlling how many digits are rendered and in which form."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    limit: int = Field(default=12, ge=0, description="Maximum number of significant digits emitted")
    exponent_limit: int = Field(
        default=-6,
        description="Values whose leading digit sits at or below this exponent use scientific form",
    )
    show_continuation: bool = Field(
        default=True, description="Append a continuation marker when digits were cut off"
    )

    def render(self, value: Rational) -> str:
        return display(value, self.limit, self.exponent_limit, self.show_continuation)


def display(
    value: Rational,
    limit: int = 12,
    exponent_limit: int = -6,
    show_continuation: bool = True,
) -> str:
    """Render ``value`` by long division, emitting at most ``limit`` digits.

    Magnitudes of one or more print as ``<whole>.<fraction>``. Smaller values
    print either as a zero-padded decimal or, once the first significant
    digit sits at or below ``exponent_limit``, as ``d.ddd…e<exponent>``.
    Leading zeros after the decimal point do not count against ``limit``.
    """

    sign = "-" if value.numerator < 0 else ""
    denominator = value.denominator
    whole, rem = divmod(abs(value.numerator), denominator)

    out: List[str] = [sign]
    if whole != 0 or rem == 0:
        out.append(str(whole))
        if rem and limit > 0:
            out.append(".")
            emitted = 0
            while rem and emitted < limit:
                digit, rem = divmod(rem * 10, denominator)
                out.append(str(digit))
                emitted += 1
        if rem and show_continuation:
            out.append(CONTINUATION)
        return "".join(out)

    if limit == 0:
        out.append("0")
        if show_continuation:
            out.append(CONTINUATION)
        return "".join(out)

    exponent = -1
    while True:
        digit, rem = divmod(rem * 10, denominator)
        if digit:
            break
        exponent -= 1

    pending_dot = False
    if exponent <= exponent_limit:
        out.append(str(digit))
        pending_dot = True
    else:
        out.append("0.")
        out.append("0" * (-exponent - 1))
        out.append(str(digit))
        exponent = 0

    emitted = 1
    while rem and emitted < limit:
        digit, rem = divmod(rem * 10, denominator)
        if pending_dot:
            out.append(".")
            pending_dot = False
        out.append(str(digit))
        emitted += 1

    if rem and show_continuation:
        out.append(CONTINUATION)
    if exponent != 0:
        out.append(f"e{exponent}")
    return "".join(out)


def display_exact(value: Rational) -> str:
    """Render ``value`` as ``numerator/denominator`` without any rounding."""

    if value.denominator == 1:
        return str(value.numerator)
    return f"{value.numerator}/{value.denominator}"


__all__ = ["CONTINUATION", "DisplaySpec", "display", "display_exact"]
