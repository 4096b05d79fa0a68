"""Command: append the check character to a bare body."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rutctl.commands._base import RutCommand, style_option

if TYPE_CHECKING:
    from rutctl.commands._context import AppContext


@click.command(
    cls=RutCommand,
    examples="""\
  rutctl complete 12345678
  rutctl complete 800000 --style dash""",
)
@click.argument("body")
@style_option
@click.pass_obj
def complete(app: AppContext, body: str, style: str | None) -> None:
    """Compute the check character for a 6-8 digit BODY and render the RUT."""
    app.emit(app.service.complete(body, style))
