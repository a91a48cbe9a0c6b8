"""Artifacts materialized by successful tasks."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from buildpipe.artifact.domain.artifact_definition import ArtifactDefinition
from buildpipe.build_task.domain.task_id import TaskId


@dataclass(frozen=True)
class Artifact:
    """Files of one artifact definition for one component.

    Attributes:
        definition: The definition the files were resolved from
        files: Paths relative to root_dir, in POSIX form, sorted
        root_dir: Directory the files live under
        task_id: Id of the task that produced the artifact
    """

    definition: ArtifactDefinition
    files: tuple[str, ...]
    root_dir: Path
    task_id: TaskId

    @property
    def name(self) -> str:
        """Get the artifact name."""
        return self.definition.name

    def absolute_paths(self) -> list[Path]:
        """Get the files as absolute paths."""
        return [self.root_dir / file for file in self.files]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "name": self.name,
            "description": self.definition.description,
            "files": list(self.files),
            "root_dir": str(self.root_dir),
            "task": self.task_id.serialize(),
        }


@dataclass
class ArtifactList:
    """Ordered artifacts of a single component."""

    artifacts: list[Artifact] = field(default_factory=list)

    @classmethod
    def from_artifacts(cls, artifacts: Iterable[Artifact]) -> ArtifactList:
        return cls(artifacts=list(artifacts))

    def is_empty(self) -> bool:
        return not self.artifacts

    def get_by_name(self, name: str) -> Artifact | None:
        """
        Get an artifact by its definition name.

        Args:
            name: Artifact name

        Returns:
            The first artifact with that name, None if not found
        """
        for artifact in self.artifacts:
            if artifact.name == name:
                return artifact
        return None

    def get_by_task(self, task_id: TaskId) -> list[Artifact]:
        """Get the artifacts produced by tasks matching ``task_id``."""
        return [artifact for artifact in self.artifacts if task_id.matches(artifact.task_id)]

    def list_files(self) -> list[str]:
        return [file for artifact in self.artifacts for file in artifact.files]

    def to_dict(self) -> list[dict[str, Any]]:
        return [artifact.to_dict() for artifact in self.artifacts]

    def __iter__(self) -> Iterator[Artifact]:
        return iter(self.artifacts)

    def __len__(self) -> int:
        return len(self.artifacts)
