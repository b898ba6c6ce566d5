"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, taskctl.toml only contains
overrides. A fresh setup needs no config file at all.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class StorageConfig(BaseModel):
    """[storage] section."""

    model_config = {"frozen": True}

    # Relative paths resolve against the data root (see TaskSettings).
    path: str = ".taskctl/tasks.yaml"


class DisplayConfig(BaseModel):
    """[display] section."""

    model_config = {"frozen": True}

    width: int = Field(default=100, ge=40)
    greeting: bool = True
