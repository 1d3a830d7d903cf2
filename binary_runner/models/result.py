"""Models for process termination and run results."""

from dataclasses import dataclass
from pathlib import Path
from signal import Signals
from typing import Literal, Self, TypeAlias

from binary_runner.binary_kind import BinaryKind

RunStatus: TypeAlias = Literal["success", "failure", "timeout", "error"]


@dataclass(frozen=True, kw_only=True)
class ExitStatus:
    """Termination status of a finished process.

    Exactly one of ``code`` and ``signal`` is set: ``code`` when the process
    exited on its own, ``signal`` when it was terminated by a signal.
    """

    code: int | None = None
    signal: int | None = None

    @classmethod
    def from_returncode(cls, returncode: int) -> Self:
        """Build from a ``Popen.returncode`` (negative means killed by signal)."""
        if returncode < 0:
            return cls(signal=-returncode)
        return cls(code=returncode)

    @property
    def success(self) -> bool:
        """Whether the process exited with code 0."""
        return self.code == 0

    def __str__(self) -> str:
        if self.signal is not None:
            try:
                name = Signals(self.signal).name
            except ValueError:
                name = "unknown"
            return f"signal: {self.signal} ({name})"
        return f"exit code: {self.code}"


@dataclass(frozen=True, kw_only=True)
class RunResult:
    """Outcome of running one binary through the harness."""

    binary: Path
    kind: BinaryKind
    status: RunStatus
    duration: float
    exit_status: ExitStatus | None = None
    message: str | None = None
