"""Validation engine: the public facade over registry, composer and descriptor.

INVARIANT: the engine never raises for unknown identifiers or bad values.
An unconstrained identifier is always valid; a failing check is reported as
a :class:`ValidationOutcome` carrying the first violated message.
"""

from __future__ import annotations

import logging
import re
from functools import cache
from typing import Any

from pydantic import BaseModel

from valuespace.domain import datatypes, descriptions
from valuespace.domain.composer import RuleComposer, ValidationChain
from valuespace.domain.datatypes import ValueKind
from valuespace.domain.evaluator import first_violation

logger = logging.getLogger(__name__)

MSG_NOT_INTEGER = "Value must be an integer."
MSG_NOT_TEXT = "Value must be a string."

_INTEGER_LEXICAL = re.compile(r"[+-]?[0-9]+")


class ValidationOutcome(BaseModel):
    """Result of validating one value against one datatype."""

    model_config = {"frozen": True}

    identifier: str
    valid: bool
    violation: str | None = None


def _parse_integer(text: str) -> int:
    """Convert an XSD integer lexical form, however many digits it has.

    Forms past the interpreter's string conversion limit are replaced by a
    same-signed stand-in that still compares beyond every rule bound.
    """
    sign = -1 if text.startswith("-") else 1
    digits = text.lstrip("+-").lstrip("0") or "0"
    try:
        return sign * int(digits)
    except ValueError:
        logger.debug("Integer lexical form of %d digits compared by sign", len(digits))
        return sign * 10 ** len(digits)


def coerce_value(kind: ValueKind, value: Any, *, lexical: bool = True) -> tuple[Any, str | None]:
    """Read *value* as *kind*.

    Returns ``(coerced, None)`` on success or ``(value, message)`` when the
    value cannot be read as that kind. With *lexical* enabled, strings are
    accepted for integer families using the XSD integer lexical form.
    """
    if kind is ValueKind.TEXT:
        if isinstance(value, str):
            return value, None
        return value, MSG_NOT_TEXT

    if isinstance(value, bool):
        return value, MSG_NOT_INTEGER
    if isinstance(value, int):
        return value, None
    if lexical and isinstance(value, str):
        text = value.strip()
        if _INTEGER_LEXICAL.fullmatch(text):
            return _parse_integer(text), None
    return value, MSG_NOT_INTEGER


class ValidationEngine:
    """Answer "is this constrained?", "which checks?" and "is this value valid?".

    Usage::

        engine = ValidationEngine()
        engine.validate(XSD_NS + "unsignedByte", 256).violation
        # 'Value must be less than 255'
    """

    def __init__(self, composer: RuleComposer | None = None, *, coerce_lexical: bool = True) -> None:
        self._composer = composer or RuleComposer()
        self._coerce_lexical = coerce_lexical

    def is_constrained(self, identifier: str) -> bool:
        return datatypes.is_constrained(identifier)

    def checks_for(self, identifier: str) -> ValidationChain:
        """Return the raw chain for external renderers."""
        return self._composer.build(identifier)

    def describe(self, identifier: str) -> str | None:
        return descriptions.describe(identifier)

    def validate(
        self, identifier: str, value: Any, *, lexical: bool | None = None
    ) -> ValidationOutcome:
        """Validate *value* against the value space of *identifier*.

        *lexical* overrides the engine-wide string-to-integer coercion, e.g.
        for RDF literals whose value is always a lexical form.
        """
        if lexical is None:
            lexical = self._coerce_lexical
        if not self.is_constrained(identifier):
            return ValidationOutcome(identifier=identifier, valid=True)

        chain = self._composer.build(identifier)
        if chain.kind is None:
            return ValidationOutcome(identifier=identifier, valid=True)

        coerced, problem = coerce_value(chain.kind, value, lexical=lexical)
        if problem is None:
            failed = first_violation(chain, coerced)
            problem = failed.message if failed is not None else None

        if problem is None:
            return ValidationOutcome(identifier=identifier, valid=True)
        logger.debug("Value %r violates %s: %s", value, chain.family, problem)
        return ValidationOutcome(identifier=identifier, valid=False, violation=problem)


@cache
def default_engine() -> ValidationEngine:
    """Process-wide engine over the built-in rule table, built on first use."""
    return ValidationEngine()
