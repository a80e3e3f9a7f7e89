"""
Module loader — load a generator module from a candidate path.

Loading doubles as the existence check: a candidate either has no
module behind it (``NotPresent``) or it is executed and returned
(``Loaded``).  Anything raised while a found module executes is a real
error in that module and propagates to the caller unchanged.

Modules are memoized per resolved file, so resolving the same
generator twice, or reaching it through a symlinked plugin, executes
it once.
"""

from __future__ import annotations

import hashlib
import importlib.util
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType

from yeoman_generators.core.engine.paths import ENTRY_MODULE

logger = logging.getLogger(__name__)

_module_cache: dict[Path, ModuleType] = {}


@dataclass(frozen=True)
class Loaded:
    module: ModuleType
    file: Path


@dataclass(frozen=True)
class NotPresent:
    candidate: str


LoadResult = Loaded | NotPresent


class GeneratorLoadError(Exception):
    """A module was found but does not provide a usable generator."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{message} ({path})")
        self.path = path


def entry_file(candidate: str | Path) -> Path | None:
    """The file a candidate resolves to: ``<c>.py`` first, then ``<c>/index.py``."""
    base = Path(candidate)
    for file in (base.with_name(base.name + ".py"), base / ENTRY_MODULE):
        if file.is_file():
            return file
    return None


def attempt_load(candidate: str) -> LoadResult:
    """Load the generator module behind ``candidate``, if any."""
    file = entry_file(candidate)
    if file is None:
        return NotPresent(candidate)
    return Loaded(load_file(file), file)


def load_file(file: Path) -> ModuleType:
    """Execute a module file, or return it from the cache.

    A module whose execution raises is evicted so that the next attempt
    runs it again.
    """
    resolved = file.resolve()
    cached = _module_cache.get(resolved)
    if cached is not None:
        return cached

    digest = hashlib.sha1(str(resolved).encode("utf-8")).hexdigest()[:16]
    module_name = f"_yeoman_generator_{digest}"

    spec = importlib.util.spec_from_file_location(module_name, resolved)
    if spec is None or spec.loader is None:
        raise GeneratorLoadError(str(resolved), "Cannot create a module spec")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    try:
        spec.loader.exec_module(module)
    except BaseException:
        sys.modules.pop(module_name, None)
        raise

    _module_cache[resolved] = module
    logger.debug("Loaded generator module %s", resolved)
    return module


def clear_cache() -> None:
    """Forget every loaded module."""
    for module in _module_cache.values():
        sys.modules.pop(module.__name__, None)
    _module_cache.clear()
