"""Subcommand modules for valuespace.

Provides register_commands() which uses deferred imports to keep
``valuespace --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from valuespace.commands.emit import emit
    from valuespace.commands.graph import graph
    from valuespace.commands.inspect_cmd import inspect_cmd
    from valuespace.commands.types import types
    from valuespace.commands.validate import validate

    cli.add_command(types)
    cli.add_command(inspect_cmd)
    cli.add_command(validate)
    cli.add_command(emit)
    cli.add_command(graph)
