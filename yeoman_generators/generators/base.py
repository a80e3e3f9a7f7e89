"""
Generator base classes — what a generator module's ``Generator`` extends.

A generator declares its interface in ``__init__`` and does its work in
public methods, which ``run()`` calls in the order they are defined::

    from yeoman_generators import NamedBase

    class Generator(NamedBase):
        def __init__(self, args, options, config):
            super().__init__(args, options, config)
            self.hook_for("test", as_="spec")
            self.warn_on("app/models/*.py")

        def create_model(self):
            self.write(f"app/models/{self.name}.py", "...")

The engine stamps ``namespace``, ``generator_name``, ``generator_path``
and ``context`` on the instance after construction.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Any, Callable

from yeoman_generators.core.models.generator import ArgumentSpec, Hook, OptionSpec
from yeoman_generators.core.observability.logging_config import ACTION_LOGGER

logger = logging.getLogger(__name__)
actions = logging.getLogger(ACTION_LOGGER)


class Base:
    """Base generator: arguments, options, hooks, help and the run loop."""

    def __init__(
        self,
        args: list[str] | None = None,
        options: dict[str, Any] | None = None,
        config: dict[str, Any] | None = None,
    ):
        self.args = list(args or [])
        self.options = dict(options or {})
        self.config = dict(config or {})

        self.arguments: list[ArgumentSpec] = []
        self.option_specs: list[OptionSpec] = []
        self.hooks: list[Hook] = []
        self.warns: list[str] = []

        self.namespace = ""
        self.generator_name = ""
        self.generator_path = ""
        self.context: Any = None

        self._source_root: str | None = None

        self.option("help", alias="h", description="Print generator's options and usage")

    # ── Declarations ────────────────────────────────────────────

    def argument(self, name: str, description: str = "", required: bool = True) -> None:
        """Declare the next positional argument.

        The value is exposed as an attribute (``self.<name>``), ``None``
        when it was not given.  No type conversion is applied.
        """
        position = len(self.arguments)
        self.arguments.append(ArgumentSpec(name=name, description=description, required=required))
        setattr(self, name, self.args[position] if position < len(self.args) else None)

    def option(
        self,
        name: str,
        description: str = "",
        alias: str | None = None,
        default: Any = None,
    ) -> None:
        """Declare a ``--name`` option; ``default`` fills it when absent."""
        self.option_specs.append(
            OptionSpec(name=name, description=description, alias=alias, default=default)
        )
        if default is not None:
            self.options.setdefault(name, default)

    def hook_for(
        self,
        name: str,
        as_: str | None = None,
        default: str | None = None,
        args: list[str] | None = None,
        options: dict[str, Any] | None = None,
        config: dict[str, Any] | None = None,
    ) -> Hook:
        """Declare a sub-generator, resolved from ``--<name>`` or ``generator.<name>``."""
        hook = Hook(name=name, as_=as_, default=default, args=args, options=options, config=config)
        self.hooks.append(hook)
        self.option(name, description=f"{name} generator to be invoked", default=default)
        return hook

    def warn_on(self, *patterns: str) -> None:
        """Declare files this generator writes."""
        self.warns.extend(patterns)

    # ── Paths ───────────────────────────────────────────────────

    def source_root(self, path: str | None = None) -> str | None:
        """Get the template root, or set it when ``path`` is given."""
        if path is not None:
            self._source_root = str(path)
        return self._source_root

    def read(self, source: str) -> str:
        """Read a file relative to the source root."""
        return (Path(self.source_root() or ".") / source).read_text(encoding="utf-8")

    def write(self, destination: str, content: str) -> Path:
        """Write a file relative to the current directory."""
        target = Path(destination)
        target.parent.mkdir(parents=True, exist_ok=True)
        if target.exists():
            if target.read_text(encoding="utf-8") == content:
                actions.info("%s", destination, extra={"action": "identical"})
                return target
            action = "force"
        else:
            action = "create"
        target.write_text(content, encoding="utf-8")
        actions.info("%s", destination, extra={"action": action})
        return target

    def copy(self, source: str, destination: str | None = None) -> Path:
        """Copy a file from the source root to the current directory."""
        target = Path(destination or source)
        target.parent.mkdir(parents=True, exist_ok=True)
        action = "force" if target.exists() else "create"
        shutil.copyfile(Path(self.source_root() or ".") / source, target)
        actions.info("%s", target, extra={"action": action})
        return target

    # ── Help ────────────────────────────────────────────────────

    def usage(self) -> str:
        name = self.generator_name or self.namespace or type(self).__name__.lower()
        parts = ["yeoman generate", name]
        parts += [a.name.upper() if a.required else f"[{a.name.upper()}]" for a in self.arguments]
        parts.append("[options]")
        return "Usage:\n  " + " ".join(parts)

    def help(self) -> str:
        lines = [self.usage(), ""]

        if self.option_specs:
            lines.append("Options:")
            for spec in self.option_specs:
                flag = f"-{spec.alias}, --{spec.name}" if spec.alias else f"    --{spec.name}"
                default = f"  Default: {spec.default}" if spec.default is not None else ""
                lines.append(f"  {flag:<20} # {spec.description}{default}")
            lines.append("")

        if self.arguments:
            lines.append("Arguments:")
            for arg in self.arguments:
                required = "" if arg.required else " (optional)"
                lines.append(f"  {arg.name:<20} # {arg.description}{required}")
            lines.append("")

        return "\n".join(lines)

    # ── Run loop ────────────────────────────────────────────────

    def _steps(self) -> list[str]:
        steps: list[str] = []
        for klass in reversed(type(self).__mro__):
            if issubclass(Base, klass):
                continue
            for attr, value in vars(klass).items():
                if attr.startswith("_") or attr in steps or not callable(value):
                    continue
                # overrides of the generator API (help, usage, ...) are not steps
                if hasattr(Base, attr):
                    continue
                steps.append(attr)
        return steps

    def run(
        self,
        args: list[str] | None = None,
        callback: Callable[..., Any] | None = None,
    ) -> None:
        """Run every step, then every resolved hook, then ``callback``."""
        for step in self._steps():
            logger.debug("%s → %s()", self.namespace or type(self).__name__, step)
            getattr(self, step)()

        for hook in self.hooks:
            if hook.generator is None:
                continue
            hook.generator.run(hook.args)

        if callback is not None:
            callback()

    def invoke(
        self,
        namespace: str,
        args: list[str] | None = None,
        options: dict[str, Any] | None = None,
        config: dict[str, Any] | None = None,
        callback: Callable[..., Any] | None = None,
    ):
        """Invoke another generator with this generator's engine context."""
        from yeoman_generators.core.use_cases.invoke import invoke

        if self.context is None:
            raise RuntimeError(f"{type(self).__name__} was not created by the engine")
        return invoke(
            self.context,
            namespace,
            list(args or []),
            dict(options if options is not None else self.options),
            dict(config if config is not None else self.config),
            callback=callback,
        )

    def __repr__(self) -> str:
        return f"<{type(self).__name__} namespace={self.namespace!r}>"


class NamedBase(Base):
    """A generator taking a required ``name`` argument."""

    def __init__(
        self,
        args: list[str] | None = None,
        options: dict[str, Any] | None = None,
        config: dict[str, Any] | None = None,
    ):
        super().__init__(args, options, config)
        self.argument("name", description="Name of the generated item")
