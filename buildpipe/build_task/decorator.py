"""
Build task decorator.
Turns functions into build tasks.
"""

from collections.abc import Callable
from typing import Any

from buildpipe.build_task.infrastructure.function_build_task import FunctionBuildTask


def _first_doc_line(func: Callable[..., Any]) -> str | None:
    if not func.__doc__:
        return None
    lines = [line.strip() for line in func.__doc__.strip().splitlines()]
    return lines[0] or None


def build_task(
    aspect_id: str,
    name: str | None = None,
    *,
    dependencies: list[str] | None = None,
    description: str | None = None,
    pre_build: Callable[..., Any] | None = None,
    post_build: Callable[..., Any] | None = None,
) -> Callable[[Callable[..., Any]], FunctionBuildTask]:
    """
    Decorator to turn an execute function into a build task.

    Args:
        aspect_id: Id of the aspect owning the task.
        name: Task name (defaults to the function name).
        dependencies: Serialized ids of the tasks this task depends on.
        description: Human-readable description (defaults to the first docstring line).
        pre_build: Optional pre-build hook.
        post_build: Optional post-build hook.

    Returns:
        Decorator producing a FunctionBuildTask.

    Example:
        @build_task("teambit.compilation/compiler", "TranspileComponents")
        async def transpile(context: BuildContext) -> ExecuteResult:
            return ExecuteResult(components_results=[...])

        @build_task("teambit.pkg/pkg", dependencies=["teambit.compilation/compiler"])
        def pack(context: BuildContext) -> ExecuteResult:
            ...
    """

    def decorator(func: Callable[..., Any]) -> FunctionBuildTask:
        return FunctionBuildTask(
            aspect_id,
            func,
            name or func.__name__,
            description=description or _first_doc_line(func),
            dependencies=dependencies,
            pre_build=pre_build,
            post_build=post_build,
        )

    return decorator
