"""
Invoke use case — create a generator, validate it, and run it.

This is the entry point of ``yeoman generate NAME``.  The outcome is
always one of three things: the generator ran, its help text should
be shown, or it could not be found (with the list of paths searched).
None of them raise.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Callable

from yeoman_generators.core.context import EngineContext
from yeoman_generators.core.engine.factory import create
from yeoman_generators.core.engine.paths import DEFAULT_NAMESPACE, TEMPLATES_DIR
from yeoman_generators.core.models.namespace import SEPARATOR

logger = logging.getLogger(__name__)


@dataclass
class InvokeResult:
    """What happened to an invocation."""

    namespace: str
    status: str = "ran"  # ran, help, not_found
    generator: Any = None
    help_text: str = ""
    tried: list[str] = field(default_factory=list)

    @property
    def found(self) -> bool:
        return self.status != "not_found"

    def to_dict(self) -> dict:
        result: dict = {"namespace": self.namespace, "status": self.status}
        if self.generator is not None:
            result["resolved"] = self.generator.namespace
            result["path"] = self.generator.generator_path
        if self.help_text:
            result["help"] = self.help_text
        if self.tried:
            result["tried"] = self.tried
        return result


def _noop(*_args: Any, **_kwargs: Any) -> None:
    return None


def display_name(namespace: str) -> str:
    """Strip the default namespace prefix for display."""
    prefix = f"{DEFAULT_NAMESPACE}{SEPARATOR}"
    return namespace[len(prefix):] if namespace.startswith(prefix) else namespace


def invoke(
    ctx: EngineContext,
    namespace: str,
    args: list[str],
    options: dict[str, Any],
    config: dict[str, Any],
    callback: Callable[..., Any] | None = None,
    announce: Callable[[str], None] | None = None,
) -> InvokeResult:
    """Resolve ``namespace`` and run the generator.

    Args:
        ctx: Engine context; its path log is reset here.
        namespace: Generator namespace, e.g. ``yeoman:jasmine`` or ``jasmine``.
        args: Positional arguments for the generator.
        options: Options for the generator (``help`` triggers help output).
        config: Project configuration mapping.
        callback: Called by the generator when its run completes.
        announce: Receives the ``.. Invoke X ..`` line before the run.

    Returns:
        InvokeResult describing the outcome.
    """
    ctx.reset_loaded_paths()

    generator = create(ctx, namespace, args, options, config)

    if generator is None:
        logger.info("Could not find generator %s (%d paths tried)",
                    namespace, len(ctx.loaded_paths))
        return InvokeResult(
            namespace=namespace,
            status="not_found",
            tried=list(ctx.loaded_paths),
        )

    # templates sit next to the generator unless it configured its own
    if not generator.source_root():
        generator.source_root(os.path.join(generator.generator_path, TEMPLATES_DIR))

    required_args = any(getattr(arg, "required", False) for arg in generator.arguments)
    if not args and required_args:
        return InvokeResult(
            namespace=namespace, status="help", generator=generator,
            help_text=generator.help(),
        )

    if options.get("help"):
        return InvokeResult(
            namespace=namespace, status="help", generator=generator,
            help_text=generator.help(),
        )

    line = f".. Invoke {display_name(namespace)} .."
    if announce is not None:
        announce(line)
    else:
        logger.info(line)

    generator.run(args, callback or _noop)
    return InvokeResult(namespace=namespace, status="ran", generator=generator)
