"""Domain layer for build tasks."""

from buildpipe.build_task.domain.build_task import BuildTask
from buildpipe.build_task.domain.component_result import ComponentResult, ExecuteResult
from buildpipe.build_task.domain.task_id import TaskId, TaskIdError, deserialize_id, serialize_id

__all__ = [
    "BuildTask",
    "ComponentResult",
    "ExecuteResult",
    "TaskId",
    "TaskIdError",
    "deserialize_id",
    "serialize_id",
]
