"""Command: render a RUT in a canonical layout."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rutctl.commands._base import RutCommand, style_option

if TYPE_CHECKING:
    from rutctl.commands._context import AppContext


@click.command(
    "format",
    cls=RutCommand,
    examples="""\
  rutctl format 123456785
  rutctl format 12345678 --style dash
  rutctl -q format "12 345 678 5" --style nodash""",
)
@click.argument("rut")
@style_option
@click.pass_obj
def format_cmd(app: AppContext, rut: str, style: str | None) -> None:
    """Reformat RUT, computing the check character when it is missing."""
    app.emit(app.service.format(rut, style))
