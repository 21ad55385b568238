"""Command: list the constrained datatypes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from valuespace.commands._base import VsCommand

if TYPE_CHECKING:
    from valuespace.commands._context import AppContext


@click.command(
    cls=VsCommand,
    examples="""\
  valuespace types
  valuespace --quiet types
  valuespace --json types""",
)
@click.pass_obj
def types(app: AppContext) -> None:
    """List every XSD datatype whose value space is constrained."""
    app.emit(app.service.list_types())
