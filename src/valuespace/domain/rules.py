"""Constraint rule library: one rule per constrained datatype family.

Rules reference their prerequisite by family, never by containment. The
composer resolves the edge and prepends the prerequisite's checks.

The diagnostic messages below are a literal contract. Consumers match on the
exact wording, so any change is a breaking change.

Bounded unsigned families share one check template and differ only in the
``maximum`` carried as rule data. ``unsignedLong`` has no explicit upper
bound check; the native integer width is relied on instead.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

from valuespace.domain.checks import (
    Check,
    at_least,
    at_most,
    excludes,
    excludes_any,
    greater_than,
    less_than,
    matches,
    no_affix,
)
from valuespace.domain.datatypes import DatatypeFamily, ValueKind
from valuespace.domain.errors import RuleTableError

LANGUAGE_PATTERN = r"[a-zA-Z]{1,8}(-[a-zA-Z0-9]{1,8})*"

# --- Diagnostic catalogue ---

MSG_NORMALIZED_STRING = (
    "Value must be a normalized string. Must not contain carriage return, line feed or tab."
)
MSG_TOKEN_EDGE_SPACE = "Value must be a XSD token. Must not start or end with whitespace."
MSG_TOKEN_DOUBLE_SPACE = (
    "Value must be a XSD token. Must not contain subsequences of two or more whitespaces."
)
MSG_LANGUAGE = "Value must be a language identifier, as defined by BCP 47."
MSG_NON_POSITIVE = "Value must be non-positive."
MSG_NEGATIVE = "Value must be negative."
MSG_NON_NEGATIVE = "Value must be non-negative."
MSG_UNSIGNED = "Value must be non-negative"
MSG_POSITIVE = "Value must be positive"


def maximum_message(maximum: int) -> str:
    """Message for a violated inclusive upper bound."""
    return f"Value must be less than {maximum}"


@dataclass(frozen=True, slots=True)
class ConstraintRule:
    """A named, ordered list of checks with an optional prerequisite edge.

    Attributes:
        family: The datatype family this rule enforces.
        kind: Runtime type the checks expect.
        checks: The rule's own checks, in evaluation order.
        prerequisite: Family whose checks must pass first, if any.
        maximum: Inclusive upper bound for bounded numeric families.
    """

    family: DatatypeFamily
    kind: ValueKind
    checks: tuple[Check, ...]
    prerequisite: DatatypeFamily | None = None
    maximum: int | None = None


def _unsigned_rule(family: DatatypeFamily, maximum: int | None = None) -> ConstraintRule:
    checks = [Check(at_least(0), MSG_UNSIGNED)]
    if maximum is not None:
        checks.append(Check(at_most(maximum), maximum_message(maximum)))
    return ConstraintRule(family, ValueKind.INTEGER, tuple(checks), maximum=maximum)


_RULE_LIST: tuple[ConstraintRule, ...] = (
    ConstraintRule(
        DatatypeFamily.NORMALIZED_STRING,
        ValueKind.TEXT,
        (Check(excludes_any("\r", "\n", "\t"), MSG_NORMALIZED_STRING),),
    ),
    ConstraintRule(
        DatatypeFamily.TOKEN,
        ValueKind.TEXT,
        (
            Check(no_affix(" "), MSG_TOKEN_EDGE_SPACE),
            Check(excludes("  "), MSG_TOKEN_DOUBLE_SPACE),
        ),
        prerequisite=DatatypeFamily.NORMALIZED_STRING,
    ),
    ConstraintRule(
        DatatypeFamily.LANGUAGE,
        ValueKind.TEXT,
        (Check(matches(LANGUAGE_PATTERN), MSG_LANGUAGE),),
    ),
    ConstraintRule(
        DatatypeFamily.NON_POSITIVE_INTEGER,
        ValueKind.INTEGER,
        (Check(at_most(0), MSG_NON_POSITIVE),),
    ),
    ConstraintRule(
        DatatypeFamily.NEGATIVE_INTEGER,
        ValueKind.INTEGER,
        (Check(less_than(0), MSG_NEGATIVE),),
    ),
    ConstraintRule(
        DatatypeFamily.NON_NEGATIVE_INTEGER,
        ValueKind.INTEGER,
        (Check(at_least(0), MSG_NON_NEGATIVE),),
    ),
    _unsigned_rule(DatatypeFamily.UNSIGNED_LONG),
    _unsigned_rule(DatatypeFamily.UNSIGNED_INT, 4294967295),
    _unsigned_rule(DatatypeFamily.UNSIGNED_SHORT, 65535),
    _unsigned_rule(DatatypeFamily.UNSIGNED_BYTE, 255),
    ConstraintRule(
        DatatypeFamily.POSITIVE_INTEGER,
        ValueKind.INTEGER,
        (Check(greater_than(0), MSG_POSITIVE),),
    ),
)


def build_rule_table(rules: tuple[ConstraintRule, ...]) -> Mapping[DatatypeFamily, ConstraintRule]:
    """Index *rules* by family, requiring exactly one rule per family."""
    table: dict[DatatypeFamily, ConstraintRule] = {}
    for rule in rules:
        if rule.family in table:
            msg = f"Duplicate rule for {rule.family}"
            raise RuleTableError(msg)
        table[rule.family] = rule
    missing = set(DatatypeFamily) - set(table)
    if missing:
        names = ", ".join(sorted(missing))
        msg = f"No rule defined for: {names}"
        raise RuleTableError(msg)
    return MappingProxyType(table)


RULES: Mapping[DatatypeFamily, ConstraintRule] = build_rule_table(_RULE_LIST)
