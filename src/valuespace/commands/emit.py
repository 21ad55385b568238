"""Command: generate Python guard statements for a datatype."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from valuespace.commands._base import VsCommand
from valuespace.domain.datatypes import expand_identifier

if TYPE_CHECKING:
    from valuespace.commands._context import AppContext


@click.command(
    cls=VsCommand,
    examples="""\
  valuespace emit xsd:token
  valuespace emit unsignedShort --var port
  valuespace --quiet emit language > guard.py""",
)
@click.argument("datatype")
@click.option("--var", "variable", default=None, help="Name of the guarded variable.")
@click.pass_obj
def emit(app: AppContext, datatype: str, variable: str | None) -> None:
    """Print the guard statements enforcing DATATYPE's value space."""
    app.emit(app.service.emit_guard(expand_identifier(datatype), variable))
