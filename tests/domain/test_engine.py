"""Tests for the validation engine facade."""

from __future__ import annotations

from typing import Any

import pytest

from tests.conftest import xsd
from valuespace.domain.datatypes import CONSTRAINED_IDENTIFIERS, DatatypeFamily, ValueKind
from valuespace.domain.engine import (
    MSG_NOT_INTEGER,
    MSG_NOT_TEXT,
    ValidationEngine,
    ValidationOutcome,
    coerce_value,
    default_engine,
)
from valuespace.domain.rules import (
    MSG_LANGUAGE,
    MSG_NORMALIZED_STRING,
    MSG_TOKEN_DOUBLE_SPACE,
    MSG_TOKEN_EDGE_SPACE,
)


@pytest.fixture
def engine() -> ValidationEngine:
    return ValidationEngine()


class TestValidateNumeric:
    def test_unsigned_byte_negative_checks_lower_bound_first(
        self, engine: ValidationEngine
    ) -> None:
        outcome = engine.validate(xsd("unsignedByte"), -1)
        assert outcome.valid is False
        assert outcome.violation == "Value must be non-negative"

    def test_unsigned_byte_above_maximum(self, engine: ValidationEngine) -> None:
        outcome = engine.validate(xsd("unsignedByte"), 256)
        assert outcome.violation == "Value must be less than 255"

    def test_unsigned_byte_inclusive_maximum(self, engine: ValidationEngine) -> None:
        assert engine.validate(xsd("unsignedByte"), 255).valid is True
        assert engine.validate(xsd("unsignedByte"), 0).valid is True

    def test_unsigned_short_and_int_bounds(self, engine: ValidationEngine) -> None:
        assert engine.validate(xsd("unsignedShort"), 65535).valid is True
        assert engine.validate(xsd("unsignedShort"), 65536).violation == (
            "Value must be less than 65535"
        )
        assert engine.validate(xsd("unsignedInt"), 4294967295).valid is True
        assert engine.validate(xsd("unsignedInt"), 4294967296).violation == (
            "Value must be less than 4294967295"
        )

    def test_unsigned_long_has_no_upper_bound(self, engine: ValidationEngine) -> None:
        """Known gap kept as published: values past 2**64 - 1 are accepted."""
        assert engine.validate(xsd("unsignedLong"), 2**64).valid is True
        assert engine.validate(xsd("unsignedLong"), -1).violation == "Value must be non-negative"

    def test_positive_integer_zero(self, engine: ValidationEngine) -> None:
        outcome = engine.validate(xsd("positiveInteger"), 0)
        assert outcome.violation == "Value must be positive"

    @pytest.mark.parametrize(
        ("name", "valid", "invalid", "message"),
        [
            ("nonPositiveInteger", 0, 1, "Value must be non-positive."),
            ("negativeInteger", -1, 0, "Value must be negative."),
            ("nonNegativeInteger", 0, -1, "Value must be non-negative."),
        ],
    )
    def test_sign_families(
        self, engine: ValidationEngine, name: str, valid: int, invalid: int, message: str
    ) -> None:
        assert engine.validate(xsd(name), valid).valid is True
        assert engine.validate(xsd(name), invalid).violation == message


class TestValidateText:
    def test_token_double_space(self, engine: ValidationEngine) -> None:
        assert engine.validate(xsd("token"), "a  b").violation == MSG_TOKEN_DOUBLE_SPACE

    def test_token_leading_space(self, engine: ValidationEngine) -> None:
        assert engine.validate(xsd("token"), " ab").violation == MSG_TOKEN_EDGE_SPACE

    def test_token_trailing_space(self, engine: ValidationEngine) -> None:
        assert engine.validate(xsd("token"), "ab ").violation == MSG_TOKEN_EDGE_SPACE

    def test_token_prerequisite_reported_first(self, engine: ValidationEngine) -> None:
        outcome = engine.validate(xsd("token"), " a\rb")
        assert outcome.violation == MSG_NORMALIZED_STRING

    def test_valid_token(self, engine: ValidationEngine) -> None:
        assert engine.validate(xsd("token"), "a b c").valid is True

    def test_normalized_string_allows_spaces(self, engine: ValidationEngine) -> None:
        assert engine.validate(xsd("normalizedString"), "  spaced  out ").valid is True
        assert engine.validate(xsd("normalizedString"), "line\n").violation == (
            MSG_NORMALIZED_STRING
        )

    @pytest.mark.parametrize("tag", ["en", "en-US", "zh-Hant-TW", "x-private1", "abcdefgh"])
    def test_valid_language(self, engine: ValidationEngine, tag: str) -> None:
        assert engine.validate(xsd("language"), tag).valid is True

    @pytest.mark.parametrize("tag", ["", "abcdefghi", "en_US", "en-", "-en", "1en"])
    def test_invalid_language(self, engine: ValidationEngine, tag: str) -> None:
        assert engine.validate(xsd("language"), tag).violation == MSG_LANGUAGE


class TestUnconstrained:
    @pytest.mark.parametrize(
        ("identifier", "value"),
        [
            (xsd("string"), "a  b\t"),
            (xsd("integer"), -5),
            ("http://example.org/unsignedByte", 999),
            ("", None),
        ],
    )
    def test_always_valid(self, engine: ValidationEngine, identifier: str, value: Any) -> None:
        outcome = engine.validate(identifier, value)
        assert outcome == ValidationOutcome(identifier=identifier, valid=True)


class TestValueKinds:
    def test_lexical_integer_accepted(self, engine: ValidationEngine) -> None:
        assert engine.validate(xsd("unsignedByte"), " +42 ").valid is True
        assert engine.validate(xsd("unsignedByte"), "256").violation == (
            "Value must be less than 255"
        )

    def test_lexical_integer_past_digit_limit(self, engine: ValidationEngine) -> None:
        huge = "1" * 5000
        assert engine.validate(xsd("unsignedLong"), huge).valid is True
        assert engine.validate(xsd("unsignedInt"), huge).violation == (
            "Value must be less than 4294967295"
        )
        assert engine.validate(xsd("unsignedLong"), "-" + huge).violation == (
            "Value must be non-negative"
        )
        assert engine.validate(xsd("positiveInteger"), "0" * 5000 + "7").valid is True

    def test_lexical_disabled(self) -> None:
        strict = ValidationEngine(coerce_lexical=False)
        assert strict.validate(xsd("unsignedByte"), "42").violation == MSG_NOT_INTEGER
        assert strict.validate(xsd("unsignedByte"), "42", lexical=True).valid is True

    @pytest.mark.parametrize("value", ["4.2", "forty", "", None, 4.0, True])
    def test_non_integer_reported(self, engine: ValidationEngine, value: Any) -> None:
        assert engine.validate(xsd("positiveInteger"), value).violation == MSG_NOT_INTEGER

    def test_non_text_reported(self, engine: ValidationEngine) -> None:
        assert engine.validate(xsd("token"), 42).violation == MSG_NOT_TEXT

    def test_coerce_value(self) -> None:
        assert coerce_value(ValueKind.INTEGER, "-7") == (-7, None)
        assert coerce_value(ValueKind.TEXT, "x") == ("x", None)
        assert coerce_value(ValueKind.INTEGER, "7", lexical=False) == ("7", MSG_NOT_INTEGER)


class TestFacade:
    def test_is_constrained(self, engine: ValidationEngine) -> None:
        assert engine.is_constrained(xsd("token")) is True
        assert engine.is_constrained(xsd("string")) is False

    def test_checks_for(self, engine: ValidationEngine) -> None:
        chain = engine.checks_for(xsd("token"))
        assert chain.family is DatatypeFamily.TOKEN
        assert len(chain) == 3

    @pytest.mark.parametrize("identifier", CONSTRAINED_IDENTIFIERS)
    def test_completeness(self, engine: ValidationEngine, identifier: str) -> None:
        assert engine.is_constrained(identifier)
        assert len(engine.checks_for(identifier)) > 0
        assert engine.describe(identifier)

    def test_idempotent(self, engine: ValidationEngine) -> None:
        first = [engine.validate(xsd("token"), " x") for _ in range(3)]
        assert first[0] == first[1] == first[2]
        assert engine.checks_for(xsd("token")) == engine.checks_for(xsd("token"))

    def test_default_engine_is_shared(self) -> None:
        assert default_engine() is default_engine()

    def test_outcome_is_frozen(self, engine: ValidationEngine) -> None:
        outcome = engine.validate(xsd("token"), "ok")
        with pytest.raises(Exception):
            outcome.valid = False  # type: ignore[misc]
