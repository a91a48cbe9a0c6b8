"""
Tasks queue.
Ordered (task, environment) pairs to run in one build.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import overload

from buildpipe.build_task.domain.build_task import BuildTask
from buildpipe.build_task.domain.task_id import TaskId
from buildpipe.errors import DuplicateTaskError


@dataclass(frozen=True)
class QueueEntry:
    """A task scheduled to run in an environment.

    Attributes:
        task: The build task
        env_id: Id of the environment whose build context the task receives
    """

    task: BuildTask
    env_id: str

    def __post_init__(self) -> None:
        """Validate the entry."""
        if not self.env_id:
            raise ValueError("env_id must not be empty")

    @property
    def task_id(self) -> TaskId:
        """Get the identifier of the entry's task."""
        return self.task.task_id


class TasksQueue:
    """
    Ordered queue of tasks per environment.

    The caller is responsible for the order: every task must come after the
    tasks it depends on. The build pipe never reorders the queue.

    Example:
        queue = TasksQueue()
        queue.add(compile_task, "teambit.react/react")
        queue.add(pack_task, "teambit.react/react")
    """

    def __init__(self, entries: Iterable[QueueEntry | tuple[BuildTask, str]] | None = None) -> None:
        """
        Initialize the queue.

        Args:
            entries: Queue entries or (task, env_id) tuples, in execution order.
        """
        self._entries: list[QueueEntry] = []
        for entry in entries or []:
            if isinstance(entry, QueueEntry):
                self._entries.append(entry)
            else:
                task, env_id = entry
                self.add(task, env_id)

    def add(self, task: BuildTask, env_id: str) -> QueueEntry:
        """
        Append a task to the end of the queue.

        Args:
            task: The build task.
            env_id: Environment the task runs in.

        Returns:
            The created entry.
        """
        entry = QueueEntry(task=task, env_id=env_id)
        self._entries.append(entry)
        return entry

    def validate(self) -> None:
        """
        Check that no task is queued twice for the same environment.

        Raises:
            DuplicateTaskError: If a (task id, env_id) pair repeats.
        """
        seen: set[tuple[TaskId, str]] = set()
        for entry in self._entries:
            key = (entry.task_id, entry.env_id)
            if key in seen:
                raise DuplicateTaskError(
                    f"task '{entry.task_id}' is queued more than once for env '{entry.env_id}'"
                )
            seen.add(key)

    def get_env_ids(self) -> list[str]:
        """Get the distinct environment ids in order of first appearance."""
        return list(dict.fromkeys(entry.env_id for entry in self._entries))

    def __iter__(self) -> Iterator[QueueEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    @overload
    def __getitem__(self, index: int) -> QueueEntry: ...

    @overload
    def __getitem__(self, index: slice) -> list[QueueEntry]: ...

    def __getitem__(self, index: int | slice) -> QueueEntry | list[QueueEntry]:
        return self._entries[index]

    def __str__(self) -> str:
        return "\n".join(f"{entry.env_id}, {entry.task_id}" for entry in self._entries)
