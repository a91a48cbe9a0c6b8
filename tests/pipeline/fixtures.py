"""Test fixtures for build pipe tests."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from buildpipe.artifact.domain.artifact import ArtifactList
from buildpipe.artifact.domain.artifact_definition import ArtifactDefinition
from buildpipe.artifact.domain.artifact_factory_port import ArtifactFactoryPort
from buildpipe.build_context.domain.build_context import BuildContext
from buildpipe.build_task.domain.build_task import BuildTask
from buildpipe.build_task.domain.component_result import ComponentResult, ExecuteResult
from buildpipe.build_task.infrastructure.function_build_task import FunctionBuildTask
from buildpipe.pipeline.domain.build_logger_port import BuildLoggerPort, LongProcessLoggerPort


class RecordingLongProcessLogger(LongProcessLoggerPort):
    """Long process logger remembering every call."""

    def __init__(self, process_description: str, total: int) -> None:
        self.process_description = process_description
        self.total = total
        self.progress: list[str] = []
        self.ended = False

    def log_progress(self, text: str) -> None:
        self.progress.append(text)

    def end(self) -> None:
        self.ended = True


class RecordingBuildLogger(BuildLoggerPort):
    """Build logger remembering every call for assertions."""

    def __init__(self) -> None:
        self.status_lines: list[str] = []
        self.successes: list[str | None] = []
        self.warnings: list[str] = []
        self.failures: list[str] = []
        self.long_process_loggers: list[RecordingLongProcessLogger] = []

    def create_long_process_logger(
        self, process_description: str, total: int
    ) -> RecordingLongProcessLogger:
        long_process_logger = RecordingLongProcessLogger(process_description, total)
        self.long_process_loggers.append(long_process_logger)
        return long_process_logger

    def set_status_line(self, text: str) -> None:
        self.status_lines.append(text)

    def console_success(self, text: str | None = None) -> None:
        self.successes.append(text)

    def console_warning(self, text: str) -> None:
        self.warnings.append(text)

    def console_failure(self, text: str) -> None:
        self.failures.append(text)


class RecordingArtifactFactory(ArtifactFactoryPort):
    """Artifact factory returning empty lists and remembering its calls."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, list[ArtifactDefinition], BuildTask]] = []

    def generate(
        self,
        context: BuildContext,
        definitions: Sequence[ArtifactDefinition],
        task: BuildTask,
    ) -> dict[str, ArtifactList]:
        self.calls.append((context.env_id, list(definitions), task))
        return {component.id: ArtifactList() for component in context.components}


def make_task(
    aspect_id: str,
    name: str | None = None,
    *,
    dependencies: list[str] | None = None,
    fail: bool = False,
    events: list[str] | None = None,
    with_hooks: bool = False,
    artifacts: list[ArtifactDefinition] | None = None,
    raises: Exception | None = None,
) -> FunctionBuildTask:
    """Create a task recording its lifecycle calls into ``events``.

    Args:
        aspect_id: Aspect id of the task
        name: Task name
        dependencies: Serialized dependency ids
        fail: Report a component error for every component
        events: List receiving "<phase>:<task id>:<env id>" entries
        with_hooks: Define pre_build and post_build hooks
        artifacts: Artifact definitions returned on execute
        raises: Exception raised by execute
    """
    recorded = events if events is not None else []
    label = f"{aspect_id}:{name}" if name else aspect_id

    async def execute(context: BuildContext) -> ExecuteResult:
        recorded.append(f"execute:{label}:{context.env_id}")
        if raises is not None:
            raise raises
        return ExecuteResult(
            components_results=[
                ComponentResult(
                    component_id=component.id,
                    errors=[f"{label} failed on {component.id}"] if fail else [],
                )
                for component in context.components
            ],
            artifacts=artifacts,
        )

    async def pre_build(context: BuildContext) -> None:
        recorded.append(f"pre_build:{label}:{context.env_id}")

    async def post_build(context: BuildContext, tasks_results: Any) -> None:
        recorded.append(f"post_build:{label}:{context.env_id}")

    return FunctionBuildTask(
        aspect_id,
        execute,
        name,
        dependencies=dependencies,
        pre_build=pre_build if with_hooks else None,
        post_build=post_build if with_hooks else None,
    )
