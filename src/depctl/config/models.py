"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, depctl.toml only contains overrides.
An empty (or missing) depctl.toml is a valid configuration.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class InputConfig(BaseModel):
    """[input] section."""

    model_config = {"frozen": True}

    encoding: str = "utf-8"


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    indent: int = Field(default=3, ge=0)
    echo: bool = True

