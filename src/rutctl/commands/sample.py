"""Command: print an example RUT."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rutctl.commands._base import RutCommand, style_option

if TYPE_CHECKING:
    from rutctl.commands._context import AppContext


@click.command(
    cls=RutCommand,
    examples="""\
  rutctl sample
  rutctl -q sample --style nodash""",
)
@style_option
@click.pass_obj
def sample(app: AppContext, style: str | None) -> None:
    """Print a correctly checksummed example RUT (for demos and tests)."""
    app.emit(app.service.sample(style))
