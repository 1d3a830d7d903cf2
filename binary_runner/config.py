"""Configuration for running binaries inside an external environment."""

from collections.abc import Mapping, Sequence
from pathlib import Path

from pydantic import Field, PositiveFloat

from binary_runner.models.base import Model

BINARY_PLACEHOLDER = "{}"


class RunnerConfig(Model):
    """How to launch a binary and how long to give it."""

    run_command: Sequence[str] = Field(
        default=(
            "qemu-system-x86_64",
            "-drive",
            f"format=raw,file={BINARY_PLACEHOLDER}",
        ),
        min_length=1,
        description="Command launching the environment, '{}' is the binary path",
    )
    run_args: Sequence[str] | None = Field(
        default=None, description="Extra arguments for non-test binaries"
    )
    test_args: Sequence[str] | None = Field(
        default=None, description="Extra arguments for test binaries"
    )
    test_timeout: PositiveFloat = Field(
        default=300, description="Seconds a test binary may run"
    )
    run_timeout: PositiveFloat | None = Field(
        default=None,
        description="Seconds a non-test binary may run (None means no limit)",
    )
    test_success_exit_code: int | None = Field(
        default=None,
        description="Exit code that marks a passing test (None means 0)",
    )
    env: Mapping[str, str] | None = Field(
        default=None, description="Environment for the launched command"
    )
    cwd: Path | None = Field(
        default=None, description="Working directory for the launched command"
    )
