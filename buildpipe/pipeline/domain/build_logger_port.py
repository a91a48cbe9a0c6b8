"""Build logger port interfaces."""

from abc import ABC, abstractmethod


class LongProcessLoggerPort(ABC):
    """
    Abstract port tracking the progress of a long-running operation.

    Created with the total number of steps; each step is reported once.
    """

    @abstractmethod
    def log_progress(self, text: str) -> None:
        """
        Report that the next step started.

        Args:
            text: Description of the step.
        """
        raise NotImplementedError

    @abstractmethod
    def end(self) -> None:
        """Report that the operation finished."""
        raise NotImplementedError


class BuildLoggerPort(ABC):
    """
    Abstract port for reporting the progress and outcome of a build.

    All calls are fire-and-forget; the build pipe never reads anything back.
    """

    @abstractmethod
    def create_long_process_logger(
        self, process_description: str, total: int
    ) -> LongProcessLoggerPort:
        """
        Start tracking a long-running operation.

        Args:
            process_description: What the operation does.
            total: Number of steps the operation has.

        Returns:
            Progress tracker for the operation.
        """
        raise NotImplementedError

    @abstractmethod
    def set_status_line(self, text: str) -> None:
        """Show what the build is currently doing."""
        raise NotImplementedError

    @abstractmethod
    def console_success(self, text: str | None = None) -> None:
        """
        Report a success.

        Args:
            text: Message, or None to mark the current status line as done.
        """
        raise NotImplementedError

    @abstractmethod
    def console_warning(self, text: str) -> None:
        """Report a warning."""
        raise NotImplementedError

    @abstractmethod
    def console_failure(self, text: str) -> None:
        """Report a failure."""
        raise NotImplementedError
