"""
Build pipe system.

Runs a queue of build tasks through their pre-build, execute and post-build
phases, skipping dependents of failed tasks and collecting the results.
"""

from buildpipe.pipeline.domain import (
    BuildLoggerPort,
    BuildPipe,
    BuildPipeConfig,
    LongProcessLoggerPort,
    QueueEntry,
    TaskResults,
    TaskResultsList,
    TasksQueue,
    TaskStatus,
)
from buildpipe.pipeline.infrastructure import LoggingBuildLogger, LoggingLongProcessLogger

__all__ = [
    # Domain
    "BuildPipe",
    "BuildPipeConfig",
    "BuildLoggerPort",
    "LongProcessLoggerPort",
    "QueueEntry",
    "TasksQueue",
    "TaskResults",
    "TaskResultsList",
    "TaskStatus",
    # Infrastructure
    "LoggingBuildLogger",
    "LoggingLongProcessLogger",
]
