"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, airules.toml only contains overrides.
A fresh library needs only ``name``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class LookupConfig(BaseModel):
    """[lookup] section."""

    model_config = {"frozen": True}

    suffixes: list[str] = Field(default_factory=lambda: [".md"])
    strict: bool = False


class ListingConfig(BaseModel):
    """[listing] section."""

    model_config = {"frozen": True}

    extensions: list[str] = Field(default_factory=lambda: [".md"])
    exclude: list[str] = Field(default_factory=lambda: ["README*"])
    skip_dirs: list[str] = Field(default_factory=lambda: [".git", ".airules"])


class AliasConfig(BaseModel):
    """One entry of the [aliases] table."""

    model_config = {"frozen": True}

    path: str
    description: str = ""


def coerce_alias_table(value: Any) -> Any:
    """Accept ``keyword = "path"`` as shorthand for ``[aliases.keyword] path = ...``."""
    if not isinstance(value, dict):
        return value
    return {
        key: {"path": entry} if isinstance(entry, str) else entry for key, entry in value.items()
    }
