"""
Namespace model — the colon-delimited name of a generator.

``yeoman:jasmine`` has two segments: the base namespace ``yeoman`` and
the generator name ``jasmine``.  Namespaces compare by their segments,
so ``Namespace.parse("a:b") == Namespace(segments=("a", "b"))``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

SEPARATOR = ":"


class Namespace(BaseModel):
    """An ordered, non-empty sequence of non-empty segments."""

    model_config = ConfigDict(frozen=True)

    segments: tuple[str, ...]

    @field_validator("segments")
    @classmethod
    def _check_segments(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("a namespace needs at least one segment")
        if any(not seg for seg in value):
            raise ValueError(f"empty segment in namespace {SEPARATOR.join(value)!r}")
        return value

    @classmethod
    def parse(cls, text: str) -> Namespace:
        """Parse ``"a:b:c"`` into a Namespace."""
        return cls(segments=tuple(text.split(SEPARATOR)))

    @property
    def name(self) -> str:
        """The generator name (last segment)."""
        return self.segments[-1]

    @property
    def base(self) -> str:
        """The base namespace (every segment but the last), or ``""``."""
        return SEPARATOR.join(self.segments[:-1])

    @property
    def head(self) -> str:
        """The first segment, used to group generators in help output."""
        return self.segments[0]

    def __str__(self) -> str:
        return SEPARATOR.join(self.segments)
