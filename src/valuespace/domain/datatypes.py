"""Datatype registry: the XSD datatypes whose value space is constrained.

A datatype is *constrained* when its value space is a strict subset of the
lexical space of its storage representation (``unsignedByte`` is stored as an
integer but only permits 0-255).

INVARIANT: ``CONSTRAINED_IDENTIFIERS`` is sorted and deduplicated, so
membership is a binary search.
"""

from __future__ import annotations

from bisect import bisect_left
from enum import StrEnum
from types import MappingProxyType

XSD_NS = "http://www.w3.org/2001/XMLSchema#"


class DatatypeFamily(StrEnum):
    """Closed set of constrained XSD datatype families (local names)."""

    NORMALIZED_STRING = "normalizedString"
    TOKEN = "token"
    LANGUAGE = "language"
    NON_POSITIVE_INTEGER = "nonPositiveInteger"
    NEGATIVE_INTEGER = "negativeInteger"
    NON_NEGATIVE_INTEGER = "nonNegativeInteger"
    UNSIGNED_LONG = "unsignedLong"
    UNSIGNED_INT = "unsignedInt"
    UNSIGNED_SHORT = "unsignedShort"
    UNSIGNED_BYTE = "unsignedByte"
    POSITIVE_INTEGER = "positiveInteger"


class ValueKind(StrEnum):
    """Runtime type a family's checks operate on."""

    TEXT = "text"
    INTEGER = "integer"


def identifier_for(family: DatatypeFamily) -> str:
    """Return the absolute XSD identifier of *family*."""
    return f"{XSD_NS}{family.value}"


_FAMILY_BY_IDENTIFIER: MappingProxyType[str, DatatypeFamily] = MappingProxyType(
    {identifier_for(family): family for family in DatatypeFamily}
)

CONSTRAINED_IDENTIFIERS: tuple[str, ...] = tuple(sorted(set(_FAMILY_BY_IDENTIFIER)))


def is_constrained(identifier: str) -> bool:
    """Check whether *identifier* names a constrained XSD datatype.

    Identifiers outside the XSD namespace are never constrained. Well-formed
    XSD identifiers such as ``xsd:string`` are simply not in the table.
    """
    if not identifier.startswith(XSD_NS):
        return False
    index = bisect_left(CONSTRAINED_IDENTIFIERS, identifier)
    return index < len(CONSTRAINED_IDENTIFIERS) and CONSTRAINED_IDENTIFIERS[index] == identifier


def family_for(identifier: str) -> DatatypeFamily | None:
    """Return the family for an exact constrained identifier, else None."""
    if not is_constrained(identifier):
        return None
    return _FAMILY_BY_IDENTIFIER[identifier]


def expand_identifier(name: str) -> str:
    """Expand ``xsd:token`` or a bare ``token`` to the absolute identifier.

    Absolute identifiers (anything containing ``://``) pass through unchanged.

    Examples:
        >>> expand_identifier("xsd:token")
        'http://www.w3.org/2001/XMLSchema#token'
        >>> expand_identifier("http://example.org/t")
        'http://example.org/t'
    """
    if "://" in name:
        return name
    for prefix in ("xsd:", "xs:"):
        if name.startswith(prefix):
            return f"{XSD_NS}{name[len(prefix):]}"
    return f"{XSD_NS}{name}"
