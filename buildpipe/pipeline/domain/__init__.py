"""Build pipe domain models."""

from buildpipe.pipeline.domain.build_logger_port import BuildLoggerPort, LongProcessLoggerPort
from buildpipe.pipeline.domain.build_pipe import BuildPipe
from buildpipe.pipeline.domain.config import BuildPipeConfig
from buildpipe.pipeline.domain.task_results import TaskResults
from buildpipe.pipeline.domain.task_results_list import TaskResultsList
from buildpipe.pipeline.domain.task_status import TaskStatus
from buildpipe.pipeline.domain.tasks_queue import QueueEntry, TasksQueue

__all__ = [
    "BuildLoggerPort",
    "BuildPipe",
    "BuildPipeConfig",
    "LongProcessLoggerPort",
    "QueueEntry",
    "TaskResults",
    "TaskResultsList",
    "TaskStatus",
    "TasksQueue",
]
