"""
Domain models for the generator engine.

All models are re-exported here for convenient access:

    from yeoman_generators.core.models import Namespace, Hook, ProjectConfig
"""

from yeoman_generators.core.models.config import ProjectConfig
from yeoman_generators.core.models.generator import (
    ArgumentSpec,
    GeneratorDescriptor,
    GeneratorSummary,
    Hook,
    OptionSpec,
)
from yeoman_generators.core.models.namespace import Namespace

__all__ = [
    "ArgumentSpec",
    "GeneratorDescriptor",
    "GeneratorSummary",
    "Hook",
    "Namespace",
    "OptionSpec",
    "ProjectConfig",
]
