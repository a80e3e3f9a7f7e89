"""
Generator factory — locate, instantiate and wire up a generator.

    create(ctx, "yeoman:jasmine", args, options, config)

Resolution widens when the namespace has no base segment: ``jasmine``
is tried as is, then as ``yeoman:jasmine``, then as ``jasmine:all``.

Declared hooks are expanded right away so that the parent can expose
the child generators' arguments and options (in help output, for
instance).  A hook's generator namespace is built from its configured
value and its alias::

    --test=mocha      + hook_for("test")            → "mocha:<name>"
    generator.test    + hook_for("test", as_="spec") → "<value>:spec"
"""

from __future__ import annotations

import logging
import os
from typing import Any

from pydantic import ValidationError

from yeoman_generators.core.context import EngineContext
from yeoman_generators.core.engine.loader import GeneratorLoadError
from yeoman_generators.core.engine.paths import DEFAULT_NAMESPACE, GENERATOR_ATTR, TEMPLATES_DIR
from yeoman_generators.core.engine.resolver import find_by_namespace
from yeoman_generators.core.models.generator import GeneratorDescriptor, Hook
from yeoman_generators.core.models.namespace import SEPARATOR, Namespace

logger = logging.getLogger(__name__)

# hooks of hooks are expanded too; a cycle stops here
MAX_HOOK_DEPTH = 8


def resolve(ctx: EngineContext, namespace: str) -> tuple[str, GeneratorDescriptor | None]:
    """Resolve a namespace with fallback widening.

    Returns the generator name and the descriptor (or None).  A
    malformed namespace (empty, or with an empty segment) resolves to
    nothing without touching the filesystem.
    """
    try:
        parsed = Namespace.parse(namespace)
    except ValidationError:
        logger.debug("Malformed namespace %r", namespace)
        return namespace, None

    name, base = parsed.name, parsed.base

    found = find_by_namespace(ctx, name, base or None)

    # try by forcing the default namespace, if none is specified
    if found is None and not base:
        found = find_by_namespace(ctx, name, DEFAULT_NAMESPACE)

    # still nothing: look for an "all" sub-generator
    if found is None and not base:
        found = find_by_namespace(ctx, f"{name}{SEPARATOR}all")

    return name, found


def create(
    ctx: EngineContext,
    namespace: str,
    args: list[str],
    options: dict[str, Any],
    config: dict[str, Any],
    _depth: int = 0,
) -> Any | None:
    """Locate, instantiate and return the generator for ``namespace``.

    Returns None when nothing in the search space matches; the trail of
    attempted paths is on ``ctx.loaded_paths``.
    """
    name, descriptor = resolve(ctx, namespace)
    if descriptor is None:
        logger.debug("No generator for %s", namespace)
        return None

    klass = getattr(descriptor.module, GENERATOR_ATTR, None)
    if not callable(klass):
        raise GeneratorLoadError(
            descriptor.source_path,
            f"Generator module for '{descriptor.namespace}' has no {GENERATOR_ATTR} class",
        )

    generator = klass(args, options, config)

    generator.namespace = descriptor.namespace
    generator.generator_name = name
    generator.generator_path = descriptor.source_path
    generator.context = ctx

    hooks = list(getattr(generator, "hooks", []) or [])
    if hooks and _depth >= MAX_HOOK_DEPTH:
        logger.warning(
            "Hook depth limit (%d) reached at %s, hooks left unresolved",
            MAX_HOOK_DEPTH, descriptor.namespace,
        )
        return generator

    for hook in hooks:
        _expand_hook(ctx, hook, name, args, options, config, _depth)

    return generator


def _expand_hook(
    ctx: EngineContext,
    hook: Hook,
    name: str,
    args: list[str],
    options: dict[str, Any],
    config: dict[str, Any],
    depth: int,
) -> None:
    overrides = config.get("generator") or {}
    # an explicit --no-<hook> (False) disables the hook
    if hook.name in options:
        value = options[hook.name]
    elif hook.name in overrides:
        value = overrides[hook.name]
    else:
        value = hook.default

    if not value:
        logger.debug("Hook '%s' of %s has no value configured, skipped", hook.name, name)
        hook.context = None
        hook.generator = None
        return

    hook.context = f"{value}{SEPARATOR}{hook.as_ or name}"
    if hook.args is None:
        hook.args = args
    if hook.options is None:
        hook.options = options
    if hook.config is None:
        hook.config = config

    hook.generator = create(
        ctx, hook.context, hook.args, hook.options, hook.config, _depth=depth + 1
    )
    if hook.generator is None:
        logger.info("Hook '%s' → %s did not resolve", hook.name, hook.context)
    elif not hook.generator.source_root():
        hook.generator.source_root(os.path.join(hook.generator.generator_path, TEMPLATES_DIR))
