"""
Search roots — the ordered directories generators are looked up in.

Order is fixed and significant: the application root first, then each
``yeoman-*`` plugin in discovery order, then the built-in generators
shipped with this package.  The first root with a match wins.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

PLUGIN_GLOB = "yeoman-*"

BUILTIN_ROOT = Path(__file__).resolve().parent.parent.parent / "builtin"


def discover_plugins(
    base: Path,
    plugins_dir: str = "plugins",
    pattern: str = PLUGIN_GLOB,
) -> list[Path]:
    """Find plugin directories under ``<base>/<plugins_dir>``.

    Returns an empty list when the dependency directory is missing or
    holds no match.
    """
    deps = base / plugins_dir
    if not deps.is_dir():
        logger.debug("No plugin directory at %s", deps)
        return []

    plugins = sorted(p for p in deps.glob(pattern) if p.is_dir())
    logger.debug("Discovered %d plugin(s) in %s: %s", len(plugins), deps,
                 [p.name for p in plugins])
    return plugins


@dataclass
class SearchRoots:
    """Local root, plugin roots and the built-in root."""

    local: Path
    plugins: list[Path] = field(default_factory=list)
    builtin: Path = BUILTIN_ROOT

    def all(self) -> list[Path]:
        """Every root, in lookup order."""
        return [self.local, *self.plugins, self.builtin]

    def add_plugin(self, path: Path) -> None:
        """Append a plugin root; it still comes before the built-ins."""
        self.plugins.append(path)
