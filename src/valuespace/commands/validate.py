"""Command: validate a single lexical value against a datatype."""

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
  valuespace validate xsd:unsignedByte 255
  valuespace validate xsd:token "two  spaces"
  valuespace validate language en-GB
  valuespace --json validate xsd:positiveInteger -- -3""",
)
@click.argument("datatype")
@click.argument("value")
@click.pass_obj
def validate(app: AppContext, datatype: str, value: str) -> None:
    """Check that VALUE lies in the value space of DATATYPE.

    Exits with status 1 and the first violated constraint otherwise.
    """
    app.emit(app.service.validate_value(expand_identifier(datatype), value, lexical=True))
