"""Shared pytest fixtures and test helpers for valuespace tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from valuespace.domain.datatypes import XSD_NS


def xsd(local_name: str) -> str:
    """Absolute XSD identifier for *local_name*."""
    return f"{XSD_NS}{local_name}"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run from an empty temp directory so no valuespace.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_config")`` on command test
    classes.
    """
    monkeypatch.delenv("VALUESPACE_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def turtle_file(tmp_path: Path) -> Path:
    """A small Turtle document with one valid and two invalid typed literals."""
    path = tmp_path / "data.ttl"
    path.write_text(
        """\
@prefix ex: <http://example.org/> .
@prefix xsd: <http://www.w3.org/2001/XMLSchema#> .

ex:a ex:age "42"^^xsd:unsignedByte ;
     ex:name "Alice" ;
     ex:rank "0"^^xsd:positiveInteger .
ex:b ex:age "300"^^xsd:unsignedByte ;
     ex:count "7"^^xsd:integer .
""",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def valid_turtle_file(tmp_path: Path) -> Path:
    """A Turtle document whose constrained literals are all in their value space."""
    path = tmp_path / "valid.ttl"
    path.write_text(
        """\
@prefix ex: <http://example.org/> .
@prefix xsd: <http://www.w3.org/2001/XMLSchema#> .

ex:a ex:age "42"^^xsd:unsignedByte ;
     ex:rank "1"^^xsd:positiveInteger ;
     ex:label "plain" .
""",
        encoding="utf-8",
    )
    return path
