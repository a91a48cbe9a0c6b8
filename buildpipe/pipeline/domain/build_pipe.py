"""Sequential build pipe executing a queue of build tasks."""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from uuid6 import uuid7

from buildpipe.build_context.domain.build_context_registry import BuildContextRegistry
from buildpipe.build_task.domain.component_result import ExecuteResult
from buildpipe.build_task.domain.task_id import TaskId
from buildpipe.build_task.utils.async_utils import resolve
from buildpipe.errors import BuildContextNotFoundError
from buildpipe.pipeline.domain.config import BuildPipeConfig
from buildpipe.pipeline.domain.task_results import TaskResults
from buildpipe.pipeline.domain.task_results_list import TaskResultsList
from buildpipe.pipeline.utils.time_format import pretty_time

if TYPE_CHECKING:
    from buildpipe.artifact.domain.artifact import ArtifactList
    from buildpipe.artifact.domain.artifact_factory_port import ArtifactFactoryPort
    from buildpipe.build_context.domain.build_context import BuildContext
    from buildpipe.build_task.domain.build_task import BuildTask
    from buildpipe.pipeline.domain.build_logger_port import (
        BuildLoggerPort,
        LongProcessLoggerPort,
    )
    from buildpipe.pipeline.domain.tasks_queue import TasksQueue

logger = logging.getLogger(__name__)


@dataclass
class _RunState:
    """Failure tracking of a single run."""

    run_id: str
    failed_tasks: list[BuildTask] = field(default_factory=list)
    failed_dependency_task: BuildTask | None = None


class BuildPipe:
    """Executes a queue of build tasks, one entry at a time.

    A run has three phases:
    1. pre-build: every task's pre_build hook, in queue order
    2. tasks: every task's execute, in queue order, with failure tracking
    3. post-build: every task's post_build hook with the full results list

    Component errors returned by a task are data: the task is recorded as
    failed and, once a later task is found to depend on a failed one, that
    task and every entry after it are skipped. Exceptions raised by hooks or
    tasks, or a missing build context, abort the run.

    Each phase awaits one entry to completion before starting the next, so
    skip decisions always see the outcome of every earlier entry.
    """

    def __init__(
        self,
        tasks_queue: TasksQueue,
        envs_build_context: Mapping[str, BuildContext],
        build_logger: BuildLoggerPort,
        artifact_factory: ArtifactFactoryPort,
        config: BuildPipeConfig | None = None,
    ) -> None:
        """Initialize the build pipe.

        Args:
            tasks_queue: Tasks per environment, ordered so dependencies come first
            envs_build_context: Build context of every environment in the queue
            build_logger: Progress and outcome reporting
            artifact_factory: Generates artifacts of successful tasks
            config: Run settings (defaults if not provided)
        """
        if not isinstance(envs_build_context, BuildContextRegistry):
            envs_build_context = BuildContextRegistry(envs_build_context)

        self.tasks_queue = tasks_queue
        self.envs_build_context = envs_build_context
        self.build_logger = build_logger
        self.artifact_factory = artifact_factory
        self.config = config or BuildPipeConfig()
        self._state: _RunState | None = None

    @classmethod
    def from_queue(
        cls,
        tasks_queue: TasksQueue,
        envs_build_context: Mapping[str, BuildContext],
        build_logger: BuildLoggerPort,
        artifact_factory: ArtifactFactoryPort,
        config: BuildPipeConfig | None = None,
    ) -> BuildPipe:
        """Create a build pipe from a queue of tasks."""
        return cls(tasks_queue, envs_build_context, build_logger, artifact_factory, config)

    @property
    def failed_tasks(self) -> list[BuildTask]:
        """Get the tasks that failed in the current or last run, in discovery order."""
        if self._state is None:
            return []
        return list(self._state.failed_tasks)

    @property
    def failed_dependency_task(self) -> BuildTask | None:
        """Get the failed task that caused the skips of the current or last run."""
        if self._state is None:
            return None
        return self._state.failed_dependency_task

    async def execute(self) -> TaskResultsList:
        """Execute the pipeline of build tasks.

        Returns:
            Results of the executed tasks, in queue order

        Raises:
            BuildContextNotFoundError: If an environment of the queue has no build context
            DuplicateTaskError: If a task is queued twice for one environment
            BuildTaskFailedError: If throw_on_error is set and a task failed
            Exception: Anything raised by a task's hooks or execute
        """
        self._state = _RunState(run_id=str(uuid7()))
        self._validate()

        logger.info(
            "Started build pipe: run_id=%s, tasks=%d",
            self._state.run_id,
            len(self.tasks_queue),
        )

        await self._execute_pre_build()

        long_process_logger = self.build_logger.create_long_process_logger(
            self.config.process_description, len(self.tasks_queue)
        )
        results: list[TaskResults] = []
        for entry in self.tasks_queue:
            task_results = await self._execute_task(entry.task, entry.env_id, long_process_logger)
            if task_results is not None:
                results.append(task_results)
        long_process_logger.end()

        tasks_results_list = TaskResultsList(self.tasks_queue, results, run_id=self._state.run_id)
        await self._execute_post_build(tasks_results_list)

        logger.info(
            "Completed build pipe: run_id=%s, executed=%d, failed=%d, skipped=%d",
            self._state.run_id,
            len(tasks_results_list),
            len(self._state.failed_tasks),
            len(self.tasks_queue) - len(tasks_results_list),
        )

        if self.config.throw_on_error:
            tasks_results_list.throw_errors_if_exist()

        return tasks_results_list

    def _validate(self) -> None:
        """Reject misconfigured queues before any hook runs."""
        if self.config.validate_queue:
            self.tasks_queue.validate()

        for env_id in self.tasks_queue.get_env_ids():
            self._get_build_context(env_id)

    async def _execute_pre_build(self) -> None:
        self.build_logger.set_status_line("executing pre-build for all tasks")
        for entry in self.tasks_queue:
            if entry.task.pre_build is None:
                continue
            await resolve(entry.task.pre_build(self._get_build_context(entry.env_id)))
        self.build_logger.console_success()

    async def _execute_post_build(self, tasks_results: TaskResultsList) -> None:
        self.build_logger.set_status_line("executing post-build for all tasks")
        for entry in self.tasks_queue:
            if entry.task.post_build is None:
                continue
            await resolve(
                entry.task.post_build(self._get_build_context(entry.env_id), tasks_results)
            )
        self.build_logger.console_success()

    async def _execute_task(
        self,
        task: BuildTask,
        env_id: str,
        long_process_logger: LongProcessLoggerPort,
    ) -> TaskResults | None:
        """Execute a single queue entry.

        Args:
            task: Task of the entry
            env_id: Environment of the entry
            long_process_logger: Progress tracker of the task loop

        Returns:
            The task's results, None if the task was skipped
        """
        task_id = task.task_id
        task_label = task_id.label(task.description)
        long_process_logger.log_progress(f'env "{env_id}", task "{task_label}"')

        build_context = self._get_build_context(env_id)

        self._update_failed_dependency_task(task)
        if self._should_skip_task(task_label, env_id):
            return None

        start = time.perf_counter()
        start_time = time.time()
        build_task_result = await resolve(task.execute(build_context))
        if not isinstance(build_task_result, ExecuteResult):
            raise TypeError(
                f"task '{task_id}' returned {type(build_task_result).__name__}, "
                "expected ExecuteResult"
            )

        artifacts: dict[str, ArtifactList] | None = None
        if build_task_result.has_errors:
            self.build_logger.console_failure(f'env: {env_id}, task "{task_label}" has failed')
            self._run_state.failed_tasks.append(task)
        else:
            duration = pretty_time(time.perf_counter() - start)
            self.build_logger.console_success(
                f'env "{env_id}", task "{task_label}" has completed successfully in {duration}'
            )
            definitions = list(build_task_result.artifacts or [])
            artifacts = self.artifact_factory.generate(build_context, definitions, task)

        return TaskResults(
            task=task,
            env_id=env_id,
            components_results=build_task_result.components_results,
            artifacts=artifacts,
            start_time=start_time,
            # end_time - start_time is the monotonic duration of the task
            end_time=start_time + (time.perf_counter() - start),
        )

    def _update_failed_dependency_task(self, task: BuildTask) -> None:
        """Record the first failed task this task depends on, if none is recorded yet.

        Dependencies are scanned in declared order, failed tasks in the
        order they failed; the first match wins.
        """
        state = self._run_state
        if state.failed_dependency_task is not None or not state.failed_tasks:
            return

        for dependency in task.dependencies:
            dependency_id = TaskId.deserialize(dependency)
            for failed_task in state.failed_tasks:
                if dependency_id.matches(failed_task.task_id):
                    state.failed_dependency_task = failed_task
                    return

    def _should_skip_task(self, task_label: str, env_id: str) -> bool:
        cause = self._run_state.failed_dependency_task
        if cause is None:
            return False
        self.build_logger.console_warning(
            f'env: {env_id}, task "{task_label}" has skipped due to '
            f'"{cause.task_id.label(cause.description)}" failure'
        )
        return True

    def _get_build_context(self, env_id: str) -> BuildContext:
        try:
            return self.envs_build_context.get_context(env_id)
        except BuildContextNotFoundError:
            logger.error("Build context not found for env: %s", env_id)
            raise

    @property
    def _run_state(self) -> _RunState:
        if self._state is None:
            raise RuntimeError("build pipe is not running")
        return self._state
