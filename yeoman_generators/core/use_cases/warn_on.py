"""
Warn-on use case — which files would a generator write?

Generators declare the paths (or glob patterns) they create with
``warn_on()`` in their constructor.  Hosts read them before running the
generator to warn about overwriting existing files.
"""

from __future__ import annotations

from typing import Any

from yeoman_generators.core.context import EngineContext
from yeoman_generators.core.engine.factory import create


def warn_on(
    ctx: EngineContext,
    namespace: str,
    args: list[str],
    options: dict[str, Any],
    config: dict[str, Any],
) -> list[str]:
    """Return the patterns declared by the generator, or [] if none/not found."""
    if not namespace:
        return []
    generator = create(ctx, namespace, args, options, config)
    if generator is None:
        return []
    return list(getattr(generator, "warns", []) or [])
