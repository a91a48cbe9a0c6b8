"""Domain layer for build contexts."""

from buildpipe.build_context.domain.build_context import BuildContext, Component
from buildpipe.build_context.domain.build_context_registry import BuildContextRegistry

__all__ = [
    "BuildContext",
    "BuildContextRegistry",
    "Component",
]
