"""Run an external command with an enforced wall-clock timeout."""

import logging
import math
import subprocess
from datetime import timedelta

from binary_runner.errors import IoErrorContext, RunIoError, TimedOutError
from binary_runner.models.command import CommandSpec
from binary_runner.models.result import ExitStatus

log = logging.getLogger(__name__)


def run_with_timeout(
    command: CommandSpec,
    timeout: float | timedelta | None,
) -> ExitStatus:
    """Run a command and wait for it for at most ``timeout``.

    The child inherits the caller's standard streams. Whatever happens, the
    child is either waited for until it exits or killed and reaped before
    this function returns.

    Args:
        command: The command to spawn
        timeout: Deadline in seconds or as a timedelta, None waits forever

    Returns:
        The termination status of the process, passed through unmodified

    Raises:
        TimedOutError: If the process did not exit before the deadline. It
            has been killed and reaped by the time this is raised.
        RunIoError: If spawning, waiting for or killing the process failed.
        ValueError: If the timeout is negative or not finite.

    """
    timeout_seconds = _to_seconds(timeout)
    rendered = command.render()

    try:
        child = subprocess.Popen(command.argv, env=command.env, cwd=command.cwd)
    except OSError as error:
        raise RunIoError(IoErrorContext.COMMAND, error, command=rendered) from error

    log.debug("Spawned process %d: %s", child.pid, rendered)

    try:
        returncode = child.wait(timeout=timeout_seconds)
    except subprocess.TimeoutExpired:
        returncode = None
    except OSError as error:
        _discard(child)
        raise RunIoError(IoErrorContext.WAIT_WITH_TIMEOUT, error) from error
    except BaseException:
        _discard(child)
        raise

    if returncode is not None:
        exit_status = ExitStatus.from_returncode(returncode)
        log.debug("Process %d finished with %s", child.pid, exit_status)
        return exit_status

    log.warning(
        "Process %d did not finish within %.3fs, killing it: %s",
        child.pid,
        timeout_seconds,
        rendered,
    )
    _kill_and_reap(child)
    raise TimedOutError(rendered, timeout_seconds)


def _kill_and_reap(child: subprocess.Popen[bytes]) -> None:
    """Kill a process and wait until the OS has released it."""
    try:
        child.kill()
    except OSError as error:
        raise RunIoError(IoErrorContext.KILL_PROCESS, error) from error

    try:
        child.wait()
    except OSError as error:
        raise RunIoError(IoErrorContext.WAIT_FOR_PROCESS, error) from error


def _discard(child: subprocess.Popen[bytes]) -> None:
    """Best-effort kill and reap once the bounded wait itself has failed."""
    try:
        _kill_and_reap(child)
    except RunIoError as error:
        log.warning(
            "Could not clean up process %d: %s", child.pid, error, exc_info=error
        )


def _to_seconds(timeout: float | timedelta | None) -> float | None:
    if timeout is None:
        return None
    if isinstance(timeout, timedelta):
        timeout = timeout.total_seconds()
    if not math.isfinite(timeout):
        raise ValueError(f"Timeout must be finite, got {timeout}")
    if timeout < 0:
        raise ValueError(f"Timeout must not be negative, got {timeout}")
    return float(timeout)
