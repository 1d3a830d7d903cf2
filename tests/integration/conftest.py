"""Fixtures for running real child processes."""

import subprocess
import sys
from typing import Any, Protocol

import pytest

from binary_runner.models.command import CommandSpec


class PythonCommandFn(Protocol):
    """Protocol for building a command that runs a Python snippet."""

    def __call__(self, code: str) -> CommandSpec:
        """Return a command running ``code`` in a fresh interpreter."""


@pytest.fixture
def python_command() -> PythonCommandFn:
    """Return a function building commands for the current interpreter."""

    def _command(code: str) -> CommandSpec:
        return CommandSpec(program=sys.executable, args=["-c", code])

    return _command


@pytest.fixture
def spawned(monkeypatch: pytest.MonkeyPatch) -> list[subprocess.Popen[bytes]]:
    """Record every child the runner spawns."""
    children: list[subprocess.Popen[bytes]] = []
    real_popen = subprocess.Popen

    def _popen(*args: Any, **kwargs: Any) -> subprocess.Popen[bytes]:
        child = real_popen(*args, **kwargs)
        children.append(child)
        return child

    monkeypatch.setattr("binary_runner.process.subprocess.Popen", _popen)
    return children
