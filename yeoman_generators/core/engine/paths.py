"""
Path convention — how namespaces map onto the filesystem.

Namespaces are directly tied to file structure.  Under every search
root two sub-bases are tried, in this order::

    lib/yeoman/generators/<segments>     "namespaced"
    lib/generators/<segments>            "flat"

``yeoman:jasmine`` therefore becomes ``yeoman/jasmine`` under each
sub-base.  The entry module lives either at ``<candidate>.py`` or at
``<candidate>/index.py``; the loader decides which.
"""

from __future__ import annotations

import os
from pathlib import PurePath

from yeoman_generators.core.models.namespace import SEPARATOR

DEFAULT_NAMESPACE = "yeoman"

NAMESPACED_SUB_BASE = f"lib/{DEFAULT_NAMESPACE}/generators"
FLAT_SUB_BASE = "lib/generators"
SUB_BASES = (NAMESPACED_SUB_BASE, FLAT_SUB_BASE)

ENTRY_MODULE = "index.py"
TEMPLATES_DIR = "templates"

# module attribute holding the generator class
GENERATOR_ATTR = "Generator"


def namespaces_to_paths(namespaces: list[str]) -> list[str]:
    """Convert namespaces to relative paths by replacing ":" with "/"."""
    return [os.sep.join(ns.split(SEPARATOR)) for ns in namespaces]


def path_to_namespace(relative: str | PurePath) -> str:
    """Invert the convention for a path relative to a sub-base.

    A trailing entry module is dropped, so both ``jasmine/index.py``
    and ``jasmine`` give ``jasmine``.
    """
    parts = list(PurePath(relative).parts)
    if parts and parts[-1] == ENTRY_MODULE:
        parts = parts[:-1]
    return SEPARATOR.join(parts)


def candidate_path(basedir: str | PurePath, sub_base: str, raw_path: str) -> str:
    """Join a search root, a sub-base and a converted namespace."""
    return os.path.join(str(basedir), *sub_base.split("/"), raw_path)
