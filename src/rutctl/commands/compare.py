"""Command: compare two RUTs ignoring layout."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rutctl.commands._base import RutCommand

if TYPE_CHECKING:
    from rutctl.commands._context import AppContext


@click.command(
    cls=RutCommand,
    examples="""\
  rutctl compare 12.345.678-5 123456785
  rutctl -q compare 800000-K 800.000-k""",
)
@click.argument("first")
@click.argument("second")
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with code 1 when the RUTs differ.",
)
@click.pass_obj
def compare(app: AppContext, first: str, second: str, strict: bool) -> None:
    """Tell whether FIRST and SECOND are the same RUT."""
    result = app.service.compare(first, second)
    app.emit(result)
    if strict and not result.data["equal"]:
        raise SystemExit(1)
