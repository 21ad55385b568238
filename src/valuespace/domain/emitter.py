"""Python guard emitter: renders a validation chain as inline source.

A code generator inlines the result before a typed property accepts a value::

    if '\\r' in value or '\\n' in value or '\\t' in value:
        raise ValueError('Value must be a normalized string. ...')

Guards are emitted in chain order, so the generated code reports the same
first violation as direct evaluation.
"""

from __future__ import annotations

from collections.abc import Iterable

from valuespace.domain.checks import Check, Condition, Operator

_NEGATED_COMPARISON: dict[Operator, str] = {
    Operator.LT: ">=",
    Operator.LE: ">",
    Operator.GT: "<=",
    Operator.GE: "<",
}


def failure_expression(condition: Condition, variable: str) -> str:
    """Return a Python expression that is true when *condition* fails."""
    op = condition.operator
    operand = condition.operand
    if op is Operator.EXCLUDES_ANY:
        return " or ".join(f"{part!r} in {variable}" for part in operand)
    if op is Operator.NO_AFFIX:
        return f"{variable}.startswith({operand!r}) or {variable}.endswith({operand!r})"
    if op is Operator.EXCLUDES:
        return f"{operand!r} in {variable}"
    if op is Operator.MATCHES:
        return f"re.fullmatch({operand!r}, {variable}) is None"
    if op in _NEGATED_COMPARISON:
        return f"{variable} {_NEGATED_COMPARISON[op]} {operand!r}"
    msg = f"Unsupported operator: {op!r}"
    raise ValueError(msg)


def required_imports(checks: Iterable[Check]) -> list[str]:
    """Import statements the emitted guards depend on."""
    if any(check.condition.operator is Operator.MATCHES for check in checks):
        return ["import re"]
    return []


def emit_guards(
    checks: Iterable[Check],
    *,
    variable: str = "value",
    exception: str = "ValueError",
    indent: int = 4,
) -> str:
    """Render *checks* as a sequence of ``if ...: raise`` guard statements.

    Raises:
        ValueError: If *variable* or *exception* is not a Python identifier.
    """
    if not variable.isidentifier():
        msg = f"Not a valid Python identifier: {variable!r}"
        raise ValueError(msg)
    if not all(part.isidentifier() for part in exception.split(".")):
        msg = f"Not a valid exception name: {exception!r}"
        raise ValueError(msg)

    pad = " " * indent
    lines: list[str] = []
    for check in checks:
        lines.append(f"if {failure_expression(check.condition, variable)}:")
        lines.append(f"{pad}raise {exception}({check.message!r})")
    return "\n".join(lines)
