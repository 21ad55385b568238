"""Command: validate every typed literal in an RDF document."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from valuespace.commands._base import VsCommand

if TYPE_CHECKING:
    from valuespace.commands._context import AppContext


@click.command(
    cls=VsCommand,
    examples="""\
  valuespace graph annotations.ttl
  valuespace graph dump.nt --format nt
  valuespace --json graph data.jsonld --format json-ld""",
)
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--format",
    "fmt",
    default=None,
    help="rdflib parser name (turtle, nt, xml, json-ld, ...). Guessed if omitted.",
)
@click.pass_obj
def graph(app: AppContext, path: Path, fmt: str | None) -> None:
    """Validate the constrained typed literals in the RDF file at PATH."""
    app.emit(app.service.validate_graph(path, fmt))
