"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, mintcompat.toml only contains
overrides. An empty file (or no file at all) reproduces the stock
Mintlify -> VitePress behavior.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from mintcompat.domain.rules import DEFAULT_ATTRIBUTE_RENAMES, DEFAULT_SELF_CLOSING_TAGS

# --- mintcompat.toml sections ---


class TransformConfig(BaseModel):
    """[transform] section."""

    model_config = {"frozen": True}

    suffixes: list[str] = Field(default_factory=lambda: [".md"])
    unterminated_fence: Literal["verbatim", "prose"] = "verbatim"
    self_closing_tags: list[str] = Field(default_factory=lambda: list(DEFAULT_SELF_CLOSING_TAGS))
    attribute_renames: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_ATTRIBUTE_RENAMES)
    )


class ElementsConfig(BaseModel):
    """[elements] section."""

    model_config = {"frozen": True}

    extra: list[str] = Field(default_factory=list)


class SourcesConfig(BaseModel):
    """[sources] section."""

    model_config = {"frozen": True}

    root: str = "docs"
    exclude: list[str] = Field(default_factory=lambda: ["**/node_modules/**"])


class PluginsConfig(BaseModel):
    """[plugins] section."""

    model_config = {"frozen": True}

    enabled: bool = True
    local_dir: str = ".mintcompat/plugins"
