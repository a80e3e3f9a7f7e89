"""Generator base classes.

Public re-exports for convenient access.
"""

from yeoman_generators.generators.base import Base, NamedBase

__all__ = [
    "Base",
    "NamedBase",
]
