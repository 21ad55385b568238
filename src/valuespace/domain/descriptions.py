"""Canonical prose descriptions of each constrained value space.

Used for documentation and error surfaces only; independent of the composer.

NOTE: the bounded families (unsignedLong/Int/Short/Byte) and positiveInteger
describe their sets as "infinite". The wording is kept as published because
downstream documentation matches on it.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from valuespace.domain.datatypes import DatatypeFamily, family_for
from valuespace.domain.errors import RuleTableError
from valuespace.domain.rules import LANGUAGE_PATTERN

_DESCRIPTIONS: dict[DatatypeFamily, str] = {
    DatatypeFamily.NORMALIZED_STRING: (
        "The value space is the set of strings that do not contain the carriage "
        "return (#xD), line feed (#xA) nor tab (#x9) characters."
    ),
    DatatypeFamily.TOKEN: (
        "The value space is the set of strings that do not contain the carriage return (#xD), "
        "line feed (#xA) nor tab (#x9) characters, that have no leading or trailing spaces (#x20) "
        "and that have no internal sequences of two or more spaces."
    ),
    DatatypeFamily.LANGUAGE: (
        f"The value space is the set of all strings that conform to the pattern {LANGUAGE_PATTERN}"
    ),
    DatatypeFamily.NON_POSITIVE_INTEGER: "The value space is the infinite set {...,-2,-1,0}.",
    DatatypeFamily.NEGATIVE_INTEGER: "The value space is the infinite set {...,-2,-1}.",
    DatatypeFamily.NON_NEGATIVE_INTEGER: "The value space is the infinite set {0,1,2,...}.",
    DatatypeFamily.UNSIGNED_LONG: (
        "The value space is the infinite set {0,1,2,..., 18446744073709551615}."
    ),
    DatatypeFamily.UNSIGNED_INT: "The value space is the infinite set {0,1,2,..., 4294967295}.",
    DatatypeFamily.UNSIGNED_SHORT: "The value space is the infinite set {0,1,2,..., 65535}.",
    DatatypeFamily.UNSIGNED_BYTE: "The value space is the infinite set {0,1,2,..., 255}.",
    DatatypeFamily.POSITIVE_INTEGER: "The value space is the infinite set {1,2,...}.",
}

if set(_DESCRIPTIONS) != set(DatatypeFamily):
    raise RuleTableError("Value-space descriptions do not cover every datatype family")

DESCRIPTIONS: Mapping[DatatypeFamily, str] = MappingProxyType(_DESCRIPTIONS)


def describe(identifier: str) -> str | None:
    """Return the value-space description for *identifier*, or None."""
    family = family_for(identifier)
    if family is None:
        return None
    return DESCRIPTIONS[family]
