"""
Task identifier codec.
Encodes an aspect id plus an optional task name into a single string.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from buildpipe.errors import TaskIdError

ID_SEPARATOR = ":"


@dataclass(frozen=True)
class TaskId:
    """
    Identifier of a build task.

    The canonical string form is ``aspect_id`` when the task has no name and
    ``aspect_id:name`` otherwise. The separator is reserved and may not appear
    inside either part.

    Attributes:
        aspect_id: Id of the aspect owning the task.
        name: Optional task name, unique within the aspect.
    """

    aspect_id: str
    name: str | None = None

    def __post_init__(self) -> None:
        """Validate the identifier parts."""
        if not self.aspect_id:
            raise TaskIdError("aspect_id must not be empty")
        if ID_SEPARATOR in self.aspect_id:
            raise TaskIdError(
                f"aspect_id '{self.aspect_id}' must not contain '{ID_SEPARATOR}'"
            )
        if self.name is None:
            return
        if not self.name:
            raise TaskIdError(f"name of task '{self.aspect_id}' must not be empty")
        if ID_SEPARATOR in self.name:
            raise TaskIdError(f"name '{self.name}' must not contain '{ID_SEPARATOR}'")

    def serialize(self) -> str:
        """
        Serialize to the canonical string form.

        Returns:
            ``aspect_id`` or ``aspect_id:name``.
        """
        if self.name is None:
            return self.aspect_id
        return f"{self.aspect_id}{ID_SEPARATOR}{self.name}"

    @classmethod
    def deserialize(cls, serialized: str) -> TaskId:
        """
        Parse a canonical task id string.

        Args:
            serialized: String produced by ``serialize``.

        Returns:
            The parsed TaskId.

        Raises:
            TaskIdError: If the string is not a valid canonical id.
        """
        parts = serialized.split(ID_SEPARATOR)
        if len(parts) == 1:
            return cls(aspect_id=parts[0])
        if len(parts) == 2:
            return cls(aspect_id=parts[0], name=parts[1])
        raise TaskIdError(
            f"task id '{serialized}' has more than one '{ID_SEPARATOR}' separator"
        )

    @classmethod
    def from_task(cls, task: Any) -> TaskId:
        """Build the identifier of any object exposing aspect_id and name."""
        if isinstance(task, TaskId):
            return task
        return cls(aspect_id=task.aspect_id, name=getattr(task, "name", None))

    def matches(self, other: TaskId) -> bool:
        """
        Check whether this id, used as a dependency, refers to ``other``.

        A nameless id matches every task of the same aspect. A named id
        matches only the task with that exact name.

        Args:
            other: Identifier of a concrete task.

        Returns:
            True if the dependency refers to ``other``.
        """
        if self.name is not None and self.name != other.name:
            return False
        return self.aspect_id == other.aspect_id

    def label(self, description: str | None = None) -> str:
        """Human-readable label used in log lines."""
        if description:
            return f"{self.serialize()} ({description})"
        return self.serialize()

    def __str__(self) -> str:
        return self.serialize()


def serialize_id(task: Any) -> str:
    """
    Serialize the id of a task or TaskId.

    Args:
        task: A TaskId or an object with ``aspect_id`` and ``name`` attributes.

    Returns:
        Canonical id string.
    """
    return TaskId.from_task(task).serialize()


def deserialize_id(serialized: str) -> TaskId:
    """Parse a canonical id string into a TaskId."""
    return TaskId.deserialize(serialized)
