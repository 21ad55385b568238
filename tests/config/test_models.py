"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from valuespace.config.models import EmitConfig, ValidationConfig


class TestDefaults:
    def test_section_defaults(self) -> None:
        assert ValidationConfig().coerce_lexical is True
        emit = EmitConfig()
        assert emit.variable == "value"
        assert emit.exception == "ValueError"
        assert emit.indent == 4

    def test_sparse_override(self) -> None:
        emit = EmitConfig.model_validate({"indent": 2})
        assert emit.indent == 2
        assert emit.variable == "value"

    def test_frozen(self) -> None:
        with pytest.raises(ValidationError):
            ValidationConfig().coerce_lexical = False  # type: ignore[misc]


class TestEmitConfig:
    def test_indent_bounds(self) -> None:
        with pytest.raises(ValidationError):
            EmitConfig(indent=-1)
        with pytest.raises(ValidationError):
            EmitConfig(indent=17)
