"""
Build Task System.

Provides task identifiers, the build task interface, per-component results
and function-backed tasks.
"""

from buildpipe.build_task.decorator import build_task
from buildpipe.build_task.domain import (
    BuildTask,
    ComponentResult,
    ExecuteResult,
    TaskId,
    TaskIdError,
    deserialize_id,
    serialize_id,
)
from buildpipe.build_task.infrastructure import FunctionBuildTask
from buildpipe.build_task.utils import is_async_function, resolve, run_callable

__all__ = [
    # Decorator
    "build_task",
    # Domain
    "BuildTask",
    "ComponentResult",
    "ExecuteResult",
    "TaskId",
    "TaskIdError",
    "serialize_id",
    "deserialize_id",
    # Infrastructure
    "FunctionBuildTask",
    # Utils
    "is_async_function",
    "resolve",
    "run_callable",
]
