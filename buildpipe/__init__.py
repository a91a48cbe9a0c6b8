"""
buildpipe: sequential build task orchestration.

Executes a queue of (task, environment) pairs through their lifecycle,
cascades skips to dependents of failed tasks and materializes artifacts of
successful tasks.
"""

from buildpipe.artifact import ArtifactDefinition, ArtifactFactory, ArtifactList
from buildpipe.build_context import BuildContext, BuildContextRegistry, Component
from buildpipe.build_task import (
    BuildTask,
    ComponentResult,
    ExecuteResult,
    FunctionBuildTask,
    TaskId,
    build_task,
)
from buildpipe.errors import (
    BuildContextNotFoundError,
    BuildPipeError,
    BuildTaskFailedError,
    DuplicateTaskError,
    TaskIdError,
)
from buildpipe.pipeline import (
    BuildPipe,
    BuildPipeConfig,
    LoggingBuildLogger,
    TaskResults,
    TaskResultsList,
    TasksQueue,
    TaskStatus,
)

__all__ = [
    "ArtifactDefinition",
    "ArtifactFactory",
    "ArtifactList",
    "BuildContext",
    "BuildContextNotFoundError",
    "BuildContextRegistry",
    "BuildPipe",
    "BuildPipeConfig",
    "BuildPipeError",
    "BuildTask",
    "BuildTaskFailedError",
    "Component",
    "ComponentResult",
    "DuplicateTaskError",
    "ExecuteResult",
    "FunctionBuildTask",
    "LoggingBuildLogger",
    "TaskId",
    "TaskIdError",
    "TaskResults",
    "TaskResultsList",
    "TaskStatus",
    "TasksQueue",
    "build_task",
]
