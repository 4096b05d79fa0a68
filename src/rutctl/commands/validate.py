"""Command: validate a complete RUT."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from rutctl.commands._base import RutCommand

if TYPE_CHECKING:
    from rutctl.commands._context import AppContext


@click.command(
    cls=RutCommand,
    examples="""\
  rutctl validate 12.345.678-5
  rutctl validate 800000-k
  rutctl --json validate 123456785""",
)
@click.argument("rut")
@click.pass_obj
def validate(app: AppContext, rut: str) -> None:
    """Check that RUT has 6-8 digits and a matching check character."""
    app.emit(app.service.validate(rut))
