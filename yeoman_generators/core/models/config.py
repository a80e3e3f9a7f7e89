"""
Project configuration model — the parsed ``yeoman.yml``.

Only two keys mean something to the engine; everything else is
carried along untouched and handed to generators as their ``config``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ProjectConfig(BaseModel):
    """Root of ``yeoman.yml``."""

    model_config = ConfigDict(extra="allow")

    # hook name → namespace prefix, e.g. {"test": "mocha"}
    generator: dict[str, str] = Field(default_factory=dict)

    # dependency directory scanned for yeoman-* plugins
    plugins_dir: str = "plugins"

    def to_mapping(self) -> dict[str, Any]:
        """The config mapping passed to generator constructors."""
        return self.model_dump()
