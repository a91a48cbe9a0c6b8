"""
Function build task.
Adapts plain (sync or async) callables to the BuildTask interface.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from buildpipe.build_task.domain.build_task import BuildTask
from buildpipe.build_task.domain.component_result import ExecuteResult
from buildpipe.build_task.domain.task_id import TaskId
from buildpipe.build_task.utils.async_utils import run_callable

if TYPE_CHECKING:
    from buildpipe.build_context.domain.build_context import BuildContext


class FunctionBuildTask(BuildTask):
    """
    Build task backed by functions.

    Example:
        def transpile(context: BuildContext) -> ExecuteResult:
            ...

        task = FunctionBuildTask("teambit.compilation/compiler", transpile, "Transpile")
        result = await task.execute(context)
    """

    def __init__(
        self,
        aspect_id: str,
        execute: Callable[..., Any],
        name: str | None = None,
        *,
        description: str | None = None,
        dependencies: Sequence[str] | None = None,
        pre_build: Callable[..., Any] | None = None,
        post_build: Callable[..., Any] | None = None,
    ) -> None:
        """
        Initialize the task.

        Args:
            aspect_id: Id of the aspect owning the task.
            execute: Function receiving the build context and returning an ExecuteResult.
            name: Task name.
            description: Human-readable description.
            dependencies: Serialized ids of the tasks this task depends on.
            pre_build: Optional function called with the build context before any task runs.
            post_build: Optional function called with the build context and the
                results list after all tasks ran.

        Raises:
            ValueError: If a function is not callable or dependencies are invalid.
        """
        # Validates both parts
        TaskId(aspect_id=aspect_id, name=name)

        if not callable(execute):
            raise ValueError(f"Task '{aspect_id}' execute must be callable")
        for hook_name, hook in (("pre_build", pre_build), ("post_build", post_build)):
            if hook is not None and not callable(hook):
                raise ValueError(f"Task '{aspect_id}' {hook_name} must be callable")

        task_dependencies = list(dependencies or [])
        if len(task_dependencies) != len(set(task_dependencies)):
            raise ValueError(f"Task '{aspect_id}' has duplicate dependencies")
        for dependency in task_dependencies:
            TaskId.deserialize(dependency)

        self.aspect_id = aspect_id
        self.name = name
        self.description = description
        self.dependencies = task_dependencies

        self._execute_func = execute
        self._pre_build_func = pre_build
        self._post_build_func = post_build

        if pre_build is not None:
            self.pre_build = self._run_pre_build
        if post_build is not None:
            self.post_build = self._run_post_build

    async def execute(self, context: BuildContext) -> ExecuteResult:
        """
        Execute the wrapped function.

        Raises:
            TypeError: If the function does not return an ExecuteResult.
            Exception: Any exception raised by the function.
        """
        result = await run_callable(self._execute_func, context)
        if not isinstance(result, ExecuteResult):
            raise TypeError(
                f"Task '{self.task_id}' returned {type(result).__name__}, "
                "expected ExecuteResult"
            )
        return result

    async def _run_pre_build(self, context: BuildContext) -> None:
        assert self._pre_build_func is not None
        await run_callable(self._pre_build_func, context)

    async def _run_post_build(self, context: BuildContext, tasks_results: Any) -> None:
        assert self._post_build_func is not None
        await run_callable(self._post_build_func, context, tasks_results)
