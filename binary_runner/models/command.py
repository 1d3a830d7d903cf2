"""Models describing a command to execute."""

import shlex
from collections.abc import Mapping, Sequence
from pathlib import Path

from pydantic import Field

from binary_runner.models.base import Model


class CommandSpec(Model):
    """Description of a program to spawn.

    The runner only borrows a spec for the duration of a single call, so a
    spec can be reused for any number of runs.
    """

    program: str = Field(..., description="Executable name or path")
    args: Sequence[str] = Field(
        default_factory=tuple, description="Arguments passed after the program"
    )
    env: Mapping[str, str] | None = Field(
        default=None,
        description="Full child environment (None inherits the caller's)",
    )
    cwd: Path | None = Field(
        default=None, description="Working directory (None keeps the caller's)"
    )

    @property
    def argv(self) -> list[str]:
        """Program followed by its arguments."""
        return [self.program, *self.args]

    def render(self) -> str:
        """Render the command as a single shell-quoted line."""
        return shlex.join(self.argv)
