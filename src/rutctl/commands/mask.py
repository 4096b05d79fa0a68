"""Command: as-you-type masking of partial input."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rutctl.commands._base import RutCommand

if TYPE_CHECKING:
    from rutctl.commands._context import AppContext


@click.command(
    cls=RutCommand,
    examples="""\
  rutctl mask 1234
  rutctl mask 12345678
  rutctl -q mask 800000k""",
)
@click.argument("text")
@click.pass_obj
def mask(app: AppContext, text: str) -> None:
    """Format TEXT the way a live input field shows a RUT being typed."""
    app.emit(app.service.mask(text))
