"""Subcommand modules for rutctl.

Provides register_commands() which uses deferred imports to keep
``rutctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from rutctl.commands.compare import compare
    from rutctl.commands.complete import complete
    from rutctl.commands.format_cmd import format_cmd
    from rutctl.commands.inspect_cmd import inspect_cmd
    from rutctl.commands.mask import mask
    from rutctl.commands.sample import sample
    from rutctl.commands.validate import validate

    cli.add_command(validate)
    cli.add_command(format_cmd)
    cli.add_command(complete)
    cli.add_command(mask)
    cli.add_command(inspect_cmd)
    cli.add_command(compare)
    cli.add_command(sample)
