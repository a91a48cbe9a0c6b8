"""
Build task interface.
Defines the unit of work orchestrated by the build pipe.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable, Sequence
from typing import TYPE_CHECKING, Any

from buildpipe.build_task.domain.task_id import TaskId

if TYPE_CHECKING:
    from buildpipe.build_context.domain.build_context import BuildContext
    from buildpipe.build_task.domain.component_result import ExecuteResult

PreBuildHook = Callable[["BuildContext"], Awaitable[None] | None]
PostBuildHook = Callable[["BuildContext", Any], Awaitable[None] | None]


class BuildTask(ABC):
    """
    Interface for build tasks.

    Subclasses set ``aspect_id`` (and usually ``name``) and implement
    ``execute``. The lifecycle hooks are optional: a task without a hook
    leaves the attribute as ``None``, a task with one defines a method of
    the same name. ``execute`` and the hooks may be plain methods or
    coroutines.

    Example:
        class CompileTask(BuildTask):
            aspect_id = "teambit.compilation/compiler"
            name = "TranspileComponents"

            async def execute(self, context: BuildContext) -> ExecuteResult:
                ...

            async def post_build(self, context, tasks_results) -> None:
                ...
    """

    aspect_id: str
    name: str | None = None
    description: str | None = None
    dependencies: Sequence[str] = ()

    pre_build: PreBuildHook | None = None
    post_build: PostBuildHook | None = None

    @abstractmethod
    def execute(self, context: BuildContext) -> ExecuteResult | Awaitable[ExecuteResult]:
        """
        Run the task on the components of a build context.

        Args:
            context: Build context of the environment the task runs in.

        Returns:
            Per-component results and optional artifact definitions.
        """
        ...

    @property
    def task_id(self) -> TaskId:
        """Get the identifier of this task."""
        return TaskId(aspect_id=self.aspect_id, name=self.name)

    def get_dependencies(self) -> list[TaskId]:
        """Get the declared dependencies as parsed identifiers."""
        return [TaskId.deserialize(dependency) for dependency in self.dependencies]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.task_id})"
