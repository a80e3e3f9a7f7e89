"""yeoman-generators — locate, compose and invoke project generators.

The base generator classes are hoisted here so generator modules only
need ``from yeoman_generators import Base``.
"""

__version__ = "0.1.0"

from yeoman_generators.generators.base import Base, NamedBase  # noqa: E402

__all__ = ["Base", "NamedBase", "__version__"]
