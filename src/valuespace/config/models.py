"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, valuespace.toml only contains
overrides. An empty or missing file is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- valuespace.toml sections ---


class ValidationConfig(BaseModel):
    """[validation] section."""

    model_config = {"frozen": True}

    coerce_lexical: bool = True


class EmitConfig(BaseModel):
    """[emit] section."""

    model_config = {"frozen": True}

    variable: str = "value"
    exception: str = "ValueError"
    indent: int = Field(default=4, ge=0, le=16)

