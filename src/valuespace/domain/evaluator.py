"""Direct evaluation of validation chains."""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import cache
from typing import Any

from valuespace.domain.checks import Check, Condition, Operator


@cache
def _compiled(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern)


def holds(condition: Condition, value: Any) -> bool:
    """Return True when *value* satisfies *condition*."""
    op = condition.operator
    operand = condition.operand
    if op is Operator.EXCLUDES_ANY:
        return not any(part in value for part in operand)
    if op is Operator.NO_AFFIX:
        return not (value.startswith(operand) or value.endswith(operand))
    if op is Operator.EXCLUDES:
        return operand not in value
    if op is Operator.MATCHES:
        return _compiled(operand).fullmatch(value) is not None
    if op is Operator.LT:
        return value < operand
    if op is Operator.LE:
        return value <= operand
    if op is Operator.GT:
        return value > operand
    if op is Operator.GE:
        return value >= operand
    msg = f"Unsupported operator: {op!r}"
    raise ValueError(msg)


def first_violation(checks: Iterable[Check], value: Any) -> Check | None:
    """Run *checks* in order and return the first one that fails.

    Evaluation stops at the first failure, so later checks never see a value
    an earlier check already rejected.
    """
    for check in checks:
        if not holds(check.condition, value):
            return check
    return None
