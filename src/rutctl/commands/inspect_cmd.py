"""Command: show how an input is read."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rutctl.commands._base import RutCommand

if TYPE_CHECKING:
    from rutctl.commands._context import AppContext


@click.command(
    "inspect",
    cls=RutCommand,
    examples="""\
  rutctl inspect 12345678
  rutctl --json inspect 11.111.111-1""",
)
@click.argument("rut")
@click.pass_obj
def inspect_cmd(app: AppContext, rut: str) -> None:
    """Show the sanitized form, body/check split and every check for RUT."""
    app.emit(app.service.inspect(rut))
