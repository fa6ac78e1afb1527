"""Domain models for checkcites-build."""

from checkcites_build.core.models.invocation import CommandInvocation, CommandOutput
from checkcites_build.core.models.packaging import PackagingConfig
from checkcites_build.core.models.template import GeneratedFile

__all__ = [
    "CommandInvocation",
    "CommandOutput",
    "GeneratedFile",
    "PackagingConfig",
]
