"""Infrastructure layer for the build pipe."""

from .logging_build_logger import LoggingBuildLogger, LoggingLongProcessLogger

__all__ = ["LoggingBuildLogger", "LoggingLongProcessLogger"]
