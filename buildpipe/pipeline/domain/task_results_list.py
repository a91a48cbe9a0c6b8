"""Ordered results of a build pipe run."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from uuid6 import uuid7

from buildpipe.artifact.domain.artifact import Artifact
from buildpipe.build_task.domain.task_id import TaskId
from buildpipe.errors import BuildTaskFailedError
from buildpipe.pipeline.domain.task_results import TaskResults
from buildpipe.pipeline.domain.task_status import TaskStatus
from buildpipe.pipeline.domain.tasks_queue import QueueEntry, TasksQueue


def _to_task_id(task_id: TaskId | str) -> TaskId:
    if isinstance(task_id, TaskId):
        return task_id
    return TaskId.deserialize(task_id)


class TaskResultsList:
    """
    Results of the queue entries that actually executed, in execution order.

    Entries that were skipped have no result. The list is handed to every
    post-build hook and returned to the caller of the run.

    Attributes:
        tasks_queue: The queue the run executed
        run_id: Unique identifier of the run
    """

    def __init__(
        self,
        tasks_queue: TasksQueue,
        tasks_results: list[TaskResults],
        run_id: str | None = None,
    ) -> None:
        """
        Initialize the results list.

        Args:
            tasks_queue: The queue the run executed.
            tasks_results: Results of the executed entries, in execution order.
            run_id: Identifier of the run (generated if not provided).
        """
        self.tasks_queue = tasks_queue
        self.run_id = run_id or str(uuid7())
        self._tasks_results = tuple(tasks_results)

    @property
    def tasks_results(self) -> list[TaskResults]:
        """Get a copy of the results in execution order."""
        return list(self._tasks_results)

    def get(self, task_id: TaskId | str, env_id: str | None = None) -> TaskResults | None:
        """
        Get the first result of a task.

        Args:
            task_id: Task identifier or its serialized form.
            env_id: Restrict the lookup to one environment.

        Returns:
            The task's result, None if the task did not execute.
        """
        wanted = _to_task_id(task_id)
        for result in self._tasks_results:
            if result.task_id == wanted and (env_id is None or result.env_id == env_id):
                return result
        return None

    def get_all(self, task_id: TaskId | str) -> list[TaskResults]:
        """Get the results of a task in every environment it executed in."""
        wanted = _to_task_id(task_id)
        return [result for result in self._tasks_results if result.task_id == wanted]

    def get_status(self, task_id: TaskId | str, env_id: str) -> TaskStatus:
        """
        Get the final status of a queue entry.

        Args:
            task_id: Task identifier or its serialized form.
            env_id: Environment of the entry.

        Returns:
            SUCCEEDED or FAILED for executed entries, SKIPPED otherwise.

        Raises:
            KeyError: If the entry is not in the queue.
        """
        wanted = _to_task_id(task_id)
        result = self.get(wanted, env_id)
        if result is not None:
            return result.status
        if any(entry.task_id == wanted and entry.env_id == env_id for entry in self.tasks_queue):
            return TaskStatus.SKIPPED
        raise KeyError(f"task '{wanted}' is not queued for env '{env_id}'")

    @property
    def skipped_entries(self) -> list[QueueEntry]:
        """Get the queue entries that did not execute."""
        executed = {(result.task_id, result.env_id) for result in self._tasks_results}
        return [
            entry
            for entry in self.tasks_queue
            if (entry.task_id, entry.env_id) not in executed
        ]

    @property
    def failed_results(self) -> list[TaskResults]:
        """Get the results of tasks that finished with component errors."""
        return [result for result in self._tasks_results if result.has_errors]

    def has_errors(self) -> bool:
        return any(result.has_errors for result in self._tasks_results)

    @property
    def is_successful(self) -> bool:
        """Check if no task failed."""
        return not self.has_errors()

    def get_artifacts_of_component(self, component_id: str) -> list[Artifact]:
        """
        Get all artifacts produced for a component, across tasks.

        Args:
            component_id: Component identifier.

        Returns:
            Artifacts in execution order.
        """
        artifacts: list[Artifact] = []
        for result in self._tasks_results:
            if result.artifacts is None or component_id not in result.artifacts:
                continue
            artifacts.extend(result.artifacts[component_id])
        return artifacts

    def get_errors_message_formatted(self) -> str | None:
        """
        Summarize the component errors of all failed tasks.

        Returns:
            Human-readable summary, None if no task failed.
        """
        sections: list[str] = []
        for result in self.failed_results:
            title = f'failed task "{result.task_id}" for env "{result.env_id}"'
            components = "\n".join(
                f"component: {component.component_id}\n"
                + "\n".join(component.error_messages())
                for component in result.components_with_errors
            )
            sections.append(f"{title}\n{components}")

        if not sections:
            return None
        return "the build has failed.\n" + "\n\n".join(sections)

    def throw_errors_if_exist(self) -> None:
        """
        Raise if any task failed.

        Raises:
            BuildTaskFailedError: With the formatted errors summary.
        """
        message = self.get_errors_message_formatted()
        if message:
            raise BuildTaskFailedError(message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert to dictionary representation.

        Returns:
            Dictionary containing run and per-task information
        """
        return {
            "run_id": self.run_id,
            "is_successful": self.is_successful,
            "tasks_results": [result.to_dict() for result in self._tasks_results],
            "skipped": [
                {"task": entry.task_id.serialize(), "env_id": entry.env_id}
                for entry in self.skipped_entries
            ],
        }

    def __iter__(self) -> Iterator[TaskResults]:
        return iter(self._tasks_results)

    def __len__(self) -> int:
        return len(self._tasks_results)

    def __getitem__(self, index: int) -> TaskResults:
        return self._tasks_results[index]
