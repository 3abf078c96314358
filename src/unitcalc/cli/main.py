"""Command-line interface for unitcalc."""

from __future__ import annotations

import logging
from typing import Callable, Dict, Tuple

import click
from pydantic import ValidationError

from ..config import load_display_spec
from ..core.display import DisplaySpec, display_exact
from ..core.quantity import Quantity
from ..core.rational import Rational
from ..errors import CalcError
from ..functions import call
from ..units.algebra import parse_quantity, parse_unit

logger = logging.getLogger(__name__)

OPERATIONS: Dict[str, Callable[[Quantity, Quantity], Quantity]] = {
    "add": lambda lhs, rhs: lhs + rhs,
    "sub": lambda lhs, rhs: lhs - rhs,
    "mul": lambda lhs, rhs: lhs * rhs,
    "div": lambda lhs, rhs: lhs / rhs,
}


def _settings(ctx: click.Context) -> Tuple[DisplaySpec, bool]:
    obj = ctx.find_root().obj or {}
    return obj.get("spec", DisplaySpec()), obj.get("exact", False)


def _render(ctx: click.Context, quantity: Quantity) -> str:
    spec, exact = _settings(ctx)
    if exact:
        pluralize = quantity.value != Rational(1)
        return display_exact(quantity.value) + quantity.unit.display(pluralize=pluralize)
    return quantity.display(spec)


@click.group()
@click.option("--limit", type=click.IntRange(min=0), default=None, help="Maximum digits to print.")
@click.option(
    "--exponent-limit",
    type=int,
    default=None,
    help="Exponent at or below which small values use scientific notation.",
)
@click.option("--exact", is_flag=True, default=False, help="Print results as exact fractions.")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(
    ctx: click.Context,
    limit: int | None,
    exponent_limit: int | None,
    exact: bool,
    verbose: bool,
) -> None:
    """Exact, unit-aware calculator."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        spec = load_display_spec(limit=limit, exponent_limit=exponent_limit)
    except ValidationError as exc:
        raise click.ClickException(f"invalid display settings: {exc}") from exc
    ctx.ensure_object(dict)
    ctx.obj.update(spec=spec, exact=exact)


@cli.command()
@click.argument("quantity")
@click.argument("unit")
@click.pass_context
def convert(ctx: click.Context, quantity: str, unit: str) -> None:
    """Convert QUANTITY (e.g. ``5ft``) into UNIT (e.g. ``m``)."""

    try:
        target = parse_unit(unit)
        source = parse_quantity(quantity, acceleration_bias=target.is_acceleration())
        result = source.to(target)
    except CalcError as exc:
        raise click.ClickException(str(exc)) from exc
    logger.debug("converted %r into %r", source, target)
    click.echo(_render(ctx, result))


@cli.command()
@click.argument("op", type=click.Choice(sorted(OPERATIONS)))
@click.argument("lhs")
@click.argument("rhs")
@click.pass_context
def calc(ctx: click.Context, op: str, lhs: str, rhs: str) -> None:
    """Apply OP to two quantities, e.g. ``calc add 1m 1cm``."""

    try:
        result = OPERATIONS[op](parse_quantity(lhs), parse_quantity(rhs))
    except CalcError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(_render(ctx, result))


@cli.command("fn")
@click.argument("name")
@click.argument("args", nargs=-1)
@click.pass_context
def fn(ctx: click.Context, name: str, args: Tuple[str, ...]) -> None:
    """Call the builtin NAME (sin, cos, round, floor, ceil) on ARGS."""

    try:
        result = call(name, [parse_quantity(arg) for arg in args])
    except CalcError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(_render(ctx, result))


@cli.command("format")
@click.argument("number")
@click.pass_context
def format_number(ctx: click.Context, number: str) -> None:
    """Parse NUMBER exactly and print it back with the display settings."""

    try:
        value = Rational.parse(number)
    except CalcError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(_render(ctx, Quantity(value)))


if __name__ == "__main__":
    cli()
