"""Artifacts produced by successful build tasks."""

from buildpipe.artifact.domain import (
    Artifact,
    ArtifactDefinition,
    ArtifactFactoryPort,
    ArtifactList,
)
from buildpipe.artifact.infrastructure import ArtifactFactory

__all__ = [
    "Artifact",
    "ArtifactDefinition",
    "ArtifactFactory",
    "ArtifactFactoryPort",
    "ArtifactList",
]
