"""Per-component outcome of a build task execution."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from buildpipe.artifact.domain.artifact_definition import ArtifactDefinition


@dataclass
class ComponentResult:
    """Result of running a task on a single component.

    Errors are data: a task fails when any of its component results carries
    at least one error, but nothing is raised.

    Attributes:
        component_id: Id of the component the task ran on
        errors: Errors collected for the component (exceptions or messages)
        warnings: Non-fatal messages
        metadata: Task specific data about the component build
        start_time: Optional timestamp the component build started
        end_time: Optional timestamp the component build ended
    """

    component_id: str
    errors: list[Exception | str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)
    start_time: float | None = None
    end_time: float | None = None

    def __post_init__(self) -> None:
        """Validate the component result."""
        if not self.component_id:
            raise ValueError("component_id must not be empty")

    @property
    def has_errors(self) -> bool:
        """Check if the component failed."""
        return len(self.errors) > 0

    def error_messages(self) -> list[str]:
        """Get the errors rendered as strings."""
        return [str(error) for error in self.errors]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation."""
        return {
            "component_id": self.component_id,
            "errors": self.error_messages(),
            "warnings": list(self.warnings),
            "metadata": self.metadata,
            "start_time": self.start_time,
            "end_time": self.end_time,
        }


@dataclass
class ExecuteResult:
    """Value returned by a build task's execute operation.

    Attributes:
        components_results: One result per component the task processed
        artifacts: Artifact definitions to materialize if the task succeeds
    """

    components_results: list[ComponentResult] = field(default_factory=list)
    artifacts: list[ArtifactDefinition] | None = None

    @property
    def components_with_errors(self) -> list[ComponentResult]:
        """Get the component results that carry errors."""
        return [result for result in self.components_results if result.has_errors]

    @property
    def has_errors(self) -> bool:
        """Check if any component failed."""
        return any(result.has_errors for result in self.components_results)
