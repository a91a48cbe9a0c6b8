"""Build contexts of environments and their registry."""

from buildpipe.build_context.domain import BuildContext, BuildContextRegistry, Component

__all__ = [
    "BuildContext",
    "BuildContextRegistry",
    "Component",
]
