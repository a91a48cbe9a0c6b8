"""Queue entry status enumeration."""

from enum import StrEnum, auto


class TaskStatus(StrEnum):
    """Represents the state of a queue entry during a run.

    Attributes:
        PENDING: Entry has not been reached yet
        SKIPPED: Entry was not executed because a dependency failed
        SUCCEEDED: Task finished without component errors
        FAILED: Task finished with at least one component error
    """

    PENDING = auto()
    SKIPPED = auto()
    SUCCEEDED = auto()
    FAILED = auto()

    def is_terminal(self) -> bool:
        """Check if this status is terminal.

        Returns:
            True if status is SKIPPED, SUCCEEDED, or FAILED
        """
        return self in (
            TaskStatus.SKIPPED,
            TaskStatus.SUCCEEDED,
            TaskStatus.FAILED,
        )

    def is_successful(self) -> bool:
        """Check if this status indicates a successful execution.

        Returns:
            True only if status is SUCCEEDED
        """
        return self == TaskStatus.SUCCEEDED
