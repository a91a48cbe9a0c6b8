"""Build logger backed by the logging module."""

import logging
import time

from buildpipe.pipeline.domain.build_logger_port import BuildLoggerPort, LongProcessLoggerPort
from buildpipe.pipeline.utils.time_format import pretty_time

logger = logging.getLogger(__name__)


class LoggingLongProcessLogger(LongProcessLoggerPort):
    """
    Progress tracker writing one log line per step.

    Lines look like ``[2/5] running tasks: env "env1", task "aspect:name"``.
    """

    def __init__(self, process_description: str, total: int, log: logging.Logger) -> None:
        """
        Initialize and report the start of the operation.

        Args:
            process_description: What the operation does.
            total: Number of steps.
            log: Logger to write to.
        """
        if total < 0:
            raise ValueError("total must be non-negative")
        self.process_description = process_description
        self.total = total
        self.current = 0
        self._log = log
        self._start = time.perf_counter()
        self._log.info("%s (total: %d)", process_description, total)

    def log_progress(self, text: str) -> None:
        """Report that the next step started."""
        self.current += 1
        self._log.info("[%d/%d] %s: %s", self.current, self.total, self.process_description, text)

    def end(self) -> None:
        """Report the end of the operation with its duration."""
        duration = pretty_time(time.perf_counter() - self._start)
        self._log.info("%s (completed in %s)", self.process_description, duration)


class LoggingBuildLogger(BuildLoggerPort):
    """
    Logging implementation of BuildLoggerPort.

    Successes and progress go to INFO, warnings to WARNING, failures to ERROR.
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        """
        Initialize the build logger.

        Args:
            log: Logger to write to (default: this module's logger).
        """
        self._log = log or logger
        self._status_line: str | None = None

    @property
    def status_line(self) -> str | None:
        """Get the current status line."""
        return self._status_line

    def create_long_process_logger(
        self, process_description: str, total: int
    ) -> LoggingLongProcessLogger:
        return LoggingLongProcessLogger(process_description, total, self._log)

    def set_status_line(self, text: str) -> None:
        self._status_line = text
        self._log.info(text)

    def console_success(self, text: str | None = None) -> None:
        message = text or self._status_line
        self._status_line = None
        if message:
            self._log.info("✔ %s", message)

    def console_warning(self, text: str) -> None:
        self._log.warning(text)

    def console_failure(self, text: str) -> None:
        self._log.error(text)
