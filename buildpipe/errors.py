"""Error types for build pipe failures."""


class BuildPipeError(Exception):
    """Base exception for all build pipe errors."""


class TaskIdError(BuildPipeError, ValueError):
    """Raised when a task identifier is malformed."""


class BuildContextNotFoundError(BuildPipeError, KeyError):
    """Raised when an environment id has no registered build context."""

    def __init__(self, env_id: str) -> None:
        super().__init__(env_id)
        self.env_id = env_id

    def __str__(self) -> str:
        return f"unable to find build context for {self.env_id}"


class DuplicateTaskError(BuildPipeError):
    """Raised when the same task is queued twice for one environment."""


class BuildTaskFailedError(BuildPipeError):
    """Raised when a finished run has component errors and errors were requested to be thrown."""
