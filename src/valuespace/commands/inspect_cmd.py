"""Command: describe a datatype's value space and checks."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from valuespace.commands._base import VsCommand
from valuespace.domain.datatypes import expand_identifier

if TYPE_CHECKING:
    from valuespace.commands._context import AppContext


@click.command(
    "inspect",
    cls=VsCommand,
    examples="""\
  valuespace inspect xsd:token
  valuespace inspect unsignedByte
  valuespace --json inspect http://www.w3.org/2001/XMLSchema#language""",
)
@click.argument("datatype")
@click.pass_obj
def inspect_cmd(app: AppContext, datatype: str) -> None:
    """Show whether DATATYPE is constrained, its value space and its checks."""
    app.emit(app.service.inspect_type(expand_identifier(datatype)))
