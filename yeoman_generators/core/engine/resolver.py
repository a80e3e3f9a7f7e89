"""
Resolver — find a generator module by namespace.

    find_by_namespace(ctx, "jasmine", "yeoman")

searches the namespaces ``yeoman:jasmine`` then ``yeoman``, which in
turn are looked up at these paths under each search root::

    lib/yeoman/generators/yeoman/jasmine
    lib/generators/yeoman/jasmine
    lib/yeoman/generators/yeoman
    lib/generators/yeoman

The application root is searched first, then each plugin, then the
built-in generators.  The first module that loads wins.
"""

from __future__ import annotations

import logging
from pathlib import Path

from yeoman_generators.core.context import EngineContext
from yeoman_generators.core.engine.loader import Loaded, attempt_load
from yeoman_generators.core.engine.paths import (
    SUB_BASES,
    candidate_path,
    namespaces_to_paths,
    path_to_namespace,
)
from yeoman_generators.core.models.generator import GeneratorDescriptor
from yeoman_generators.core.models.namespace import SEPARATOR

logger = logging.getLogger(__name__)


def find_by_namespace(
    ctx: EngineContext,
    name: str,
    base: str | None = None,
) -> GeneratorDescriptor | None:
    """Resolve ``name`` (optionally under ``base``) across all roots."""
    lookups = [f"{base}{SEPARATOR}{name}", base] if base else [name]

    found = lookup(ctx, lookups, ctx.roots.local)
    if found:
        return found

    for plugin in ctx.roots.plugins:
        found = lookup(ctx, lookups, plugin.resolve())
        if found:
            return found

    return lookup(ctx, lookups, ctx.roots.builtin)


def lookup(
    ctx: EngineContext,
    namespaces: list[str],
    basedir: Path | None = None,
) -> GeneratorDescriptor | None:
    """Try each namespace under both sub-bases of a single root.

    Every candidate tried is recorded on ``ctx.loaded_paths``.  The
    first candidate with a module behind it ends the search; errors
    raised by that module propagate.
    """
    basedir = basedir or ctx.base

    for raw_path in namespaces_to_paths(namespaces):
        for sub_base in SUB_BASES:
            path = candidate_path(basedir, sub_base, raw_path)
            ctx.record_path(path)

            result = attempt_load(path)
            if isinstance(result, Loaded):
                namespace = path_to_namespace(raw_path)
                logger.debug("Resolved %s at %s", namespace, result.file)
                return GeneratorDescriptor(
                    namespace=namespace,
                    source_path=path,
                    module=result.module,
                )

    return None
