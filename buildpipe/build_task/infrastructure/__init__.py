"""Infrastructure layer for build tasks."""

from buildpipe.build_task.infrastructure.function_build_task import FunctionBuildTask

__all__ = ["FunctionBuildTask"]
