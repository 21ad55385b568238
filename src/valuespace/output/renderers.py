"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.

All user-supplied text goes through :class:`rich.text.Text` so patterns such
as ``[a-zA-Z]`` are never parsed as console markup.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from valuespace.output.console import create_console, get_output, style_for_kind

if TYPE_CHECKING:
    from rich.console import Console

    from valuespace.services.result import ServiceResult


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op}: {msg}"

    if result.op == "list_types":
        return "\n".join(item["identifier"] for item in result.data.get("items", []))
    if result.op == "emit_guard":
        imports = list(result.data.get("imports", []))
        source = str(result.data.get("source", ""))
        return "\n".join([*imports, "", source]) if imports else source
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    console.print(Text("OK", style="vs.ok"), Text(f"  {result.op}", style="vs.op"))


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="vs.key")
    if key in ("identifier", "datatype"):
        v = Text(str(value), style="vs.iri")
    elif key == "family":
        v = Text(str(value), style="vs.family")
    elif key == "kind":
        v = Text(str(value), style=style_for_kind(str(value)))
    else:
        v = Text(str(value))
    console.print(k + v)


def _violation_table(violations: list[dict[str, Any]]) -> Table:
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Subject", no_wrap=True)
    table.add_column("Predicate")
    table.add_column("Datatype", style="vs.iri")
    table.add_column("Value")
    table.add_column("Message", style="vs.message")
    for item in violations:
        table.add_row(
            *(
                Text(str(item.get(col, "")))
                for col in ("subject", "predicate", "datatype", "value", "message")
            )
        )
    return table


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text("ERROR", style="vs.error"),
        Text(f"  {result.op}", style="vs.op"),
        Text(f"  {msg}"),
    )

    if err is None:
        return
    violations = err.detail.get("violations")
    if violations:
        console.print()
        console.print(_violation_table(violations))
    elif verbose and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


# ── Op renderers ──────────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


def _render_type_list(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    items = result.data.get("items", [])
    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("Family", style="vs.family", no_wrap=True)
    table.add_column("Identifier", style="vs.iri")
    for item in items:
        table.add_row(Text(item["family"]), Text(item["identifier"]))
    console.print(table)
    console.print(Text(f"\n{result.data.get('count', len(items))} constrained datatypes"))


def _render_type_detail(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    if not d.get("constrained"):
        _status_line(console, result)
        _field(console, "identifier", d.get("identifier"))
        console.print(Text("  not constrained", style="dim"))
        return

    body = Text()
    body.append("kind: ", style="vs.key")
    body.append(str(d.get("kind")), style=style_for_kind(d.get("kind")))
    body.append("\n\n")
    body.append(str(d.get("description", "")))
    checks = d.get("checks", [])
    if checks:
        body.append("\n\nchecks:", style="vs.key")
        for index, message in enumerate(checks, start=1):
            body.append(f"\n  {index}. {message}", style="vs.message")

    title = Text(f"{d.get('family')}  {d.get('identifier')}")
    console.print(Panel(body, title=title, border_style="vs.family", expand=False))


def _render_validation(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("identifier", "value", "valid"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_graph(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    for key in ("path", "triples", "checked", "violation_count"):
        if key in result.data:
            _field(console, key, result.data[key])


def _render_guard(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    d = result.data
    if verbose:
        _status_line(console, result)
        _field(console, "identifier", d.get("identifier"))
        _field(console, "check_count", d.get("check_count"))
        console.print()
    for statement in d.get("imports", []):
        console.print(Text(statement))
    if d.get("imports"):
        console.print()
    console.print(Text(str(d.get("source", ""))))


_OP_RENDERERS: dict[str, Callable[..., None]] = {
    "list_types": _render_type_list,
    "inspect_type": _render_type_detail,
    "validate": _render_validation,
    "validate_literal": _render_validation,
    "validate_graph": _render_graph,
    "emit_guard": _render_guard,
}
