"""
Generator capability — the structural "is this a generator" check.

Generators are not required to subclass ``Base``.  Anything exposing
the surface below is accepted by the cataloger and the invoker.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, runtime_checkable


@runtime_checkable
class GeneratorLike(Protocol):
    arguments: list[Any]
    hooks: list[Any]

    def source_root(self, path: str | None = None) -> str | None: ...

    def help(self) -> str: ...

    def run(self, args: list[str] | None = None,
            callback: Callable[..., Any] | None = None) -> Any: ...


def is_generator(obj: Any) -> bool:
    return isinstance(obj, GeneratorLike)
