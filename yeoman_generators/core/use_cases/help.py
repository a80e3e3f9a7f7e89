"""
Help use case — list every generator available to the application.

Cataloging walks the same roots as resolution (application, plugins,
built-ins) but loads every ``index.py`` it finds instead of stopping at
the first match, and never runs anything.  The result is grouped by
the first namespace segment for display::

    Yeoman:
      gitignore
      readme

    Mocha:
      mocha:controller
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from yeoman_generators.core.context import EngineContext
from yeoman_generators.core.engine.capability import is_generator
from yeoman_generators.core.engine.loader import load_file
from yeoman_generators.core.engine.paths import (
    DEFAULT_NAMESPACE,
    ENTRY_MODULE,
    GENERATOR_ATTR,
    SUB_BASES,
    TEMPLATES_DIR,
    path_to_namespace,
)
from yeoman_generators.core.models.generator import GeneratorSummary
from yeoman_generators.core.models.namespace import SEPARATOR, Namespace

logger = logging.getLogger(__name__)

# hidden namespaces don't show up in the help output
HIDDEN_NAMESPACES = frozenset({
    "yeoman:app",
    "yeoman:js",
    "sass:app",
    "jasmine:app",
    "mocha:app",
})

# a generator module failing to import this is reported, not raised
SHARED_DEPENDENCY = "yeoman_generators"

USAGE = "\n".join([
    "Usage: yeoman generate GENERATOR [args] [options]",
    "",
    "General options:",
    "  -h, --help     # Print generator's options and usage",
    "",
    "Please choose a generator below.",
    "",
])


@dataclass
class HelpListing:
    """Generators grouped by their first namespace segment."""

    groups: dict[str, list[str]] = field(default_factory=dict)

    def render(self) -> str:
        lines = [USAGE]
        for base, members in self.groups.items():
            lines.append(base[:1].upper() + base[1:] + ":")
            lines.extend(f"  {ns}" for ns in members)
            lines.append("")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        return {"groups": self.groups}


def _entry_modules(prefix: Path) -> list[Path]:
    """Every entry module below ``prefix``, following symlinked directories.

    A directory reached twice (a link cycle, or two links to one place)
    is only walked the first time.
    """
    seen: set[str] = set()
    files = []
    for dirpath, dirnames, filenames in os.walk(prefix, followlinks=True):
        real = os.path.realpath(dirpath)
        if real in seen:
            dirnames[:] = []
            continue
        seen.add(real)
        if ENTRY_MODULE in filenames:
            files.append(Path(dirpath) / ENTRY_MODULE)
    return sorted(files)


def _is_missing_shared_dependency(exc: ModuleNotFoundError) -> bool:
    return (exc.name or "").split(".")[0] == SHARED_DEPENDENCY


def lookup_help(
    ctx: EngineContext,
    basedir: Path | None,
    args: list[str],
    options: dict[str, Any],
    config: dict[str, Any],
) -> list[GeneratorSummary]:
    """Catalog every generator under a single search root.

    Entries are sorted by namespace and deduplicated by resolved file
    path, keeping the first one.
    """
    basedir = basedir or ctx.base
    found: list[GeneratorSummary] = []

    for sub_base in SUB_BASES:
        prefix = basedir.joinpath(*sub_base.split("/"))
        if not prefix.is_dir():
            continue

        files = _entry_modules(prefix)
        # don't load anything from an immediate templates/ directory
        files = [f for f in files if f.parent.name != TEMPLATES_DIR]

        for filepath in files:
            shorten = filepath.relative_to(prefix)
            if shorten.parent == Path("."):
                # an index.py directly under the sub-base has no namespace
                continue
            summary = GeneratorSummary(
                root=str(prefix),
                path=str(shorten),
                fullpath=str(filepath.resolve()),
                namespace=path_to_namespace(shorten),
            )

            try:
                summary.module = load_file(filepath)
            except ModuleNotFoundError as e:
                if not _is_missing_shared_dependency(e):
                    raise
                logger.error(
                    "[Error] loading generator at %s\n"
                    "Make sure you have the %s package installed locally:\n\n"
                    "  pip install yeoman-generators\n",
                    filepath, SHARED_DEPENDENCY,
                )
                continue

            found.append(summary)

    retained = []
    for summary in found:
        klass = getattr(summary.module, GENERATOR_ATTR, None)
        if not callable(klass):
            continue
        instance = klass(args, options, config)
        if not is_generator(instance):
            continue
        summary.instance = instance
        retained.append(summary)

    retained.sort(key=lambda s: s.namespace)
    return _unique_by_path(retained)


def _unique_by_path(summaries: list[GeneratorSummary]) -> list[GeneratorSummary]:
    seen: set[str] = set()
    unique = []
    for summary in summaries:
        if summary.fullpath in seen:
            continue
        seen.add(summary.fullpath)
        unique.append(summary)
    return unique


def catalog(
    ctx: EngineContext,
    args: list[str],
    options: dict[str, Any],
    config: dict[str, Any],
) -> list[GeneratorSummary]:
    """Catalog the application root, each plugin, then the built-ins."""
    summaries = lookup_help(ctx, ctx.roots.local, args, options, config)
    for plugin in ctx.roots.plugins:
        summaries += lookup_help(ctx, plugin.resolve(), args, options, config)
    summaries += lookup_help(ctx, ctx.roots.builtin, args, options, config)
    return _unique_by_path(summaries)


def build_listing(summaries: list[GeneratorSummary]) -> HelpListing:
    """Group the visible namespaces of a catalog for display."""
    namespaces = list(dict.fromkeys(s.namespace for s in summaries))
    namespaces = [ns for ns in namespaces if ns not in HIDDEN_NAMESPACES]

    groups: dict[str, list[str]] = {}
    for namespace in namespaces:
        groups.setdefault(Namespace.parse(namespace).head, []).append(namespace)

    prefix = f"{DEFAULT_NAMESPACE}{SEPARATOR}"
    ordered = {
        DEFAULT_NAMESPACE: [
            ns[len(prefix):] if ns.startswith(prefix) else ns
            for ns in groups.pop(DEFAULT_NAMESPACE, [])
        ]
    }
    ordered.update(groups)
    return HelpListing(groups=ordered)


def help_listing(
    ctx: EngineContext,
    args: list[str],
    options: dict[str, Any],
    config: dict[str, Any],
) -> HelpListing:
    """Catalog all roots and build the grouped listing."""
    return build_listing(catalog(ctx, args, options, config))
