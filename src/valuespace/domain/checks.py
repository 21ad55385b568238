"""Check model: a pure (condition, message) pair.

A :class:`Condition` states what a value must satisfy, without saying how
the check is carried out. The evaluator runs it directly; the emitter turns
it into guard source. Both read the same data.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Operator(StrEnum):
    """Predicate families a condition can express."""

    EXCLUDES_ANY = "excludes_any"  # operand: tuple of substrings
    NO_AFFIX = "no_affix"  # operand: str that must not start or end the value
    EXCLUDES = "excludes"  # operand: substring
    MATCHES = "matches"  # operand: regex that must match the whole value
    LT = "lt"
    LE = "le"
    GT = "gt"
    GE = "ge"


@dataclass(frozen=True, slots=True)
class Condition:
    """A passing predicate: ``operator`` applied to the value and ``operand``."""

    operator: Operator
    operand: str | int | tuple[str, ...]


@dataclass(frozen=True, slots=True)
class Check:
    """One validation step: the condition and the message shown when it fails."""

    condition: Condition
    message: str


def excludes_any(*substrings: str) -> Condition:
    return Condition(Operator.EXCLUDES_ANY, tuple(substrings))


def no_affix(affix: str) -> Condition:
    return Condition(Operator.NO_AFFIX, affix)


def excludes(substring: str) -> Condition:
    return Condition(Operator.EXCLUDES, substring)


def matches(pattern: str) -> Condition:
    return Condition(Operator.MATCHES, pattern)


def less_than(bound: int) -> Condition:
    return Condition(Operator.LT, bound)


def at_most(bound: int) -> Condition:
    return Condition(Operator.LE, bound)


def greater_than(bound: int) -> Condition:
    return Condition(Operator.GT, bound)


def at_least(bound: int) -> Condition:
    return Condition(Operator.GE, bound)
