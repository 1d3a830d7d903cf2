"""Errors raised while running a command with a timeout."""

from enum import Enum


class IoErrorContext(Enum):
    """The step of a run that hit an OS-level failure."""

    COMMAND = "Failed to execute command"
    WAIT_WITH_TIMEOUT = "Failed to wait with timeout"
    KILL_PROCESS = "Failed to kill process after timeout"
    WAIT_FOR_PROCESS = "Failed to wait for process after killing it after timeout"


class RunError(Exception):
    """Running a command failed."""


class TimedOutError(RunError):
    """The command did not finish in time; it has been killed and reaped."""

    def __init__(self, command: str, timeout: float | None) -> None:
        super().__init__("Command timed out")
        self.command = command
        self.timeout = timeout


class RunIoError(RunError):
    """An OS-level operation failed.

    Always raised from the underlying ``OSError``, so ``__cause__`` is the
    same object as ``error``.
    """

    def __init__(
        self,
        context: IoErrorContext,
        error: OSError,
        command: str | None = None,
    ) -> None:
        self.context = context
        self.error = error
        self.command = command
        super().__init__(self._describe())

    def _describe(self) -> str:
        if self.context is IoErrorContext.COMMAND:
            return f"I/O error: {self.context.value} `{self.command}`"
        return f"I/O error: {self.context.value}"
