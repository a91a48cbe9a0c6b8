"""Result of one executed queue entry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from buildpipe.artifact.domain.artifact import ArtifactList
from buildpipe.build_task.domain.build_task import BuildTask
from buildpipe.build_task.domain.component_result import ComponentResult
from buildpipe.build_task.domain.task_id import TaskId
from buildpipe.pipeline.domain.task_status import TaskStatus


@dataclass
class TaskResults:
    """Represents the outcome of a task that actually ran.

    Skipped entries never get one.

    Attributes:
        task: The task itself, useful for its id and description
        env_id: Environment the task ran in
        components_results: Per-component build results
        artifacts: Artifacts per component id. None when the task finished
                   with component errors, defined (possibly empty) otherwise
        start_time: Timestamp (seconds since the epoch) the task started
        end_time: Timestamp (seconds since the epoch) the task completed
    """

    task: BuildTask
    env_id: str
    components_results: list[ComponentResult] = field(default_factory=list)
    artifacts: dict[str, ArtifactList] | None = None
    start_time: float = 0.0
    end_time: float = 0.0

    def __post_init__(self) -> None:
        """Validate the task results."""
        if not self.env_id:
            raise ValueError("env_id must not be empty")
        if self.end_time < self.start_time:
            raise ValueError("end_time must not be before start_time")
        if self.artifacts is not None and self.has_errors:
            raise ValueError("artifacts must be None when components have errors")

    @property
    def task_id(self) -> TaskId:
        """Get the identifier of the task."""
        return self.task.task_id

    @property
    def has_errors(self) -> bool:
        """Check if any component failed."""
        return any(result.has_errors for result in self.components_results)

    @property
    def status(self) -> TaskStatus:
        """Get the terminal status of the task."""
        return TaskStatus.FAILED if self.has_errors else TaskStatus.SUCCEEDED

    @property
    def duration(self) -> float:
        """Get the wall-clock time the task took, in seconds."""
        return self.end_time - self.start_time

    @property
    def components_with_errors(self) -> list[ComponentResult]:
        """Get the component results that carry errors."""
        return [result for result in self.components_results if result.has_errors]

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary representation.

        Returns:
            Dictionary containing all result information
        """
        return {
            "task": self.task_id.serialize(),
            "description": self.task.description,
            "env_id": self.env_id,
            "status": self.status.name,
            "components_results": [result.to_dict() for result in self.components_results],
            "artifacts": (
                {
                    component_id: artifacts.to_dict()
                    for component_id, artifacts in self.artifacts.items()
                }
                if self.artifacts is not None
                else None
            ),
            "start_time": self.start_time,
            "end_time": self.end_time,
        }
