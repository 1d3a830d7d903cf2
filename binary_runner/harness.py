"""Run a single binary inside the configured environment and judge the result."""

import logging
import os
import time
from pathlib import Path

from binary_runner.binary_kind import BinaryKind, binary_kind
from binary_runner.config import BINARY_PLACEHOLDER, RunnerConfig
from binary_runner.errors import RunIoError, TimedOutError
from binary_runner.models.command import CommandSpec
from binary_runner.models.result import ExitStatus, RunResult, RunStatus
from binary_runner.process import run_with_timeout

log = logging.getLogger(__name__)


def build_command(binary: Path, kind: BinaryKind, config: RunnerConfig) -> CommandSpec:
    """Build the command launching ``binary`` in the configured environment.

    Every ``{}`` in the run command is replaced by the binary path. Test
    binaries get ``test_args`` appended, all others ``run_args``.
    """
    binary_str = os.fspath(binary)
    program, *args = (
        part.replace(BINARY_PLACEHOLDER, binary_str) for part in config.run_command
    )

    extra_args = config.test_args if kind.is_test() else config.run_args
    if extra_args:
        args.extend(extra_args)

    return CommandSpec(program=program, args=args, env=config.env, cwd=config.cwd)


def run_binary(binary: Path, config: RunnerConfig) -> RunResult:
    """Classify, launch and judge a binary.

    Runner errors are turned into results, so this never raises ``RunError``.
    """
    kind = binary_kind(binary)
    command = build_command(binary, kind, config)
    timeout = config.test_timeout if kind.is_test() else config.run_timeout

    log.info("Running %s binary %s: %s", kind, binary, command.render())
    start = time.monotonic()

    try:
        exit_status = run_with_timeout(command, timeout)
    except TimedOutError as error:
        return RunResult(
            binary=binary,
            kind=kind,
            status="timeout",
            duration=time.monotonic() - start,
            message=f"Timed out after {error.timeout:g}s",
        )
    except RunIoError as error:
        log.error("Failed to run %s: %s", binary, error, exc_info=error)
        return RunResult(
            binary=binary,
            kind=kind,
            status="error",
            duration=time.monotonic() - start,
            message=str(error),
        )

    status = judge(kind, exit_status, config)
    return RunResult(
        binary=binary,
        kind=kind,
        status=status,
        duration=time.monotonic() - start,
        exit_status=exit_status,
        message=None if status == "success" else str(exit_status),
    )


def judge(kind: BinaryKind, exit_status: ExitStatus, config: RunnerConfig) -> RunStatus:
    """Decide whether a finished binary passed."""
    if kind.is_test() and config.test_success_exit_code is not None:
        passed = exit_status.code == config.test_success_exit_code
    else:
        passed = exit_status.success
    return "success" if passed else "failure"
