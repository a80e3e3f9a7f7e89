"""
Generator models — what the engine knows about a resolved generator.

GeneratorDescriptor is the resolver's answer ("this module, found
here, under this namespace").  Hook is a generator's declared
dependency on another generator.  GeneratorSummary is one row of the
help catalog.

These carry live module objects and generator instances, so they are
plain dataclasses rather than pydantic models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import ModuleType
from typing import Any

from pydantic import BaseModel


class ArgumentSpec(BaseModel):
    """A positional argument declared by a generator."""

    name: str
    description: str = ""
    required: bool = True


class OptionSpec(BaseModel):
    """A ``--flag`` declared by a generator."""

    name: str
    description: str = ""
    alias: str | None = None
    default: Any = None


@dataclass
class GeneratorDescriptor:
    """A successful resolution.

    ``namespace`` is derived from the candidate path that loaded, which
    is not necessarily the namespace the caller asked for: asking for
    ``yeoman:jasmine`` may be answered by ``jasmine``.
    """

    namespace: str
    source_path: str
    module: ModuleType


@dataclass
class Hook:
    """A sub-generator declared with ``hook_for()``.

    ``context`` and ``generator`` are filled in by the factory.  A hook
    whose context could not be computed or resolved keeps
    ``generator = None``.
    """

    name: str
    as_: str | None = None
    default: str | None = None
    args: list[str] | None = None
    options: dict[str, Any] | None = None
    config: dict[str, Any] | None = None

    context: str | None = None
    generator: Any = None

    @property
    def resolved(self) -> bool:
        return self.generator is not None


@dataclass
class GeneratorSummary:
    """One generator found while cataloging a search root."""

    root: str
    path: str
    fullpath: str
    namespace: str
    module: ModuleType | None = None
    instance: Any = field(default=None, repr=False)

    def to_dict(self) -> dict:
        return {
            "namespace": self.namespace,
            "root": self.root,
            "path": self.path,
            "fullpath": self.fullpath,
        }
