"""Domain layer for artifacts."""

from buildpipe.artifact.domain.artifact import Artifact, ArtifactList
from buildpipe.artifact.domain.artifact_definition import ArtifactDefinition
from buildpipe.artifact.domain.artifact_factory_port import ArtifactFactoryPort

__all__ = [
    "Artifact",
    "ArtifactDefinition",
    "ArtifactFactoryPort",
    "ArtifactList",
]
