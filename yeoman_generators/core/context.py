"""
Engine context — the state shared by resolution, creation and invocation.

One EngineContext is built at startup by ``setup_context()`` and passed
to every engine call:

    - CLI:    main.py   → setup_context(config_path=...)
    - Tests:  fixtures  → EngineContext(base=tmp_path, ...)

Design notes:
    - ``roots`` is computed once and read-only afterwards.
    - ``loaded_paths`` is the only mutable field.  It is reset by
      every top-level invoke and records each candidate path the
      resolver tried, so a failed lookup can report where it searched.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from yeoman_generators.core.config.loader import find_project_file, load_config
from yeoman_generators.core.engine.search_roots import SearchRoots, discover_plugins
from yeoman_generators.core.models.config import ProjectConfig

logger = logging.getLogger(__name__)


@dataclass
class EngineContext:
    """Where the application lives and where generators are searched."""

    base: Path
    roots: SearchRoots
    cwd: Path = field(default_factory=Path.cwd)
    project_file: Path | None = None
    config: ProjectConfig = field(default_factory=ProjectConfig)
    loaded_paths: list[str] = field(default_factory=list)

    @property
    def plugins(self) -> list[Path]:
        return self.roots.plugins

    def reset_loaded_paths(self) -> None:
        self.loaded_paths = []

    def record_path(self, path: str) -> None:
        self.loaded_paths.append(path)


def setup_context(
    cwd: Path | None = None,
    config_path: Path | None = None,
) -> EngineContext:
    """Build the engine context for the current process.

    The application root is the directory holding yeoman.yml (searched
    upward from ``cwd`` unless ``config_path`` is given), or ``cwd``
    itself when there is none.  Plugins are the ``yeoman-*`` directories
    of its dependency directory.

    Raises:
        ConfigError: If the project file exists but cannot be loaded.
    """
    cwd = (cwd or Path.cwd()).resolve()
    project_file = config_path or find_project_file(cwd)

    if project_file is not None:
        config = load_config(project_file)
        base = project_file.parent.resolve()
    else:
        config = ProjectConfig()
        base = cwd

    roots = SearchRoots(local=base, plugins=discover_plugins(base, config.plugins_dir))
    logger.debug("Engine base %s, %d plugin root(s)", base, len(roots.plugins))

    return EngineContext(
        base=base,
        roots=roots,
        cwd=cwd,
        project_file=project_file,
        config=config,
    )
