"""Infrastructure layer for artifacts."""

from .artifact_factory import ArtifactFactory

__all__ = ["ArtifactFactory"]
