"""
Shared test fixtures and configuration.
"""

import logging
import textwrap
from pathlib import Path
from typing import Callable

import pytest

from yeoman_generators.core.context import EngineContext
from yeoman_generators.core.engine import loader
from yeoman_generators.core.engine.search_roots import SearchRoots
from yeoman_generators.core.observability.logging_config import ACTION_LOGGER

GENERATOR_SOURCE = textwrap.dedent("""\
    from yeoman_generators import Base

    ORIGIN = {origin!r}


    class Generator(Base):
        pass
""")


@pytest.fixture(autouse=True)
def _fresh_module_cache():
    """Every test starts without memoized generator modules."""
    loader.clear_cache()
    yield
    loader.clear_cache()


@pytest.fixture(autouse=True)
def _isolated_logging():
    """Undo whatever setup_logging() did to the root and action loggers."""
    loggers = [logging.getLogger(), logging.getLogger(ACTION_LOGGER)]
    saved = [(lg.level, lg.propagate) for lg in loggers]
    yield
    for lg, (level, propagate) in zip(loggers, saved):
        for handler in list(lg.handlers):
            # pytest's own capture handlers are subclasses; leave them
            if type(handler) in (logging.StreamHandler, logging.FileHandler, logging.NullHandler):
                lg.removeHandler(handler)
                handler.close()
        lg.setLevel(level)
        lg.propagate = propagate


@pytest.fixture
def write_generator() -> Callable[..., Path]:
    """Write a generator module under ``root``.

    ``relpath`` is relative to the root, e.g.
    ``lib/generators/jasmine/index.py`` or ``lib/generators/jasmine.py``.
    """

    def _write(root: Path, relpath: str, source: str | None = None, origin: str = "") -> Path:
        path = root / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        if source is None:
            source = GENERATOR_SOURCE.format(origin=origin or str(root.name))
        path.write_text(textwrap.dedent(source))
        return path

    return _write


@pytest.fixture
def app_root(tmp_path: Path) -> Path:
    root = tmp_path.resolve() / "app"
    root.mkdir()
    return root


@pytest.fixture
def builtin_root(tmp_path: Path) -> Path:
    root = tmp_path.resolve() / "builtin"
    root.mkdir()
    return root


@pytest.fixture
def engine(app_root: Path, builtin_root: Path) -> EngineContext:
    """An engine with an empty application root, no plugins, empty built-ins."""
    return EngineContext(
        base=app_root,
        roots=SearchRoots(local=app_root, plugins=[], builtin=builtin_root),
        cwd=app_root,
    )


@pytest.fixture
def make_plugin(app_root: Path) -> Callable[[str], Path]:
    """Create ``plugins/<name>`` under the application root."""

    def _make(name: str) -> Path:
        path = app_root / "plugins" / name
        path.mkdir(parents=True)
        return path

    return _make
