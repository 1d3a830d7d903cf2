"""Classify executables by where the build placed them."""

import os
from enum import StrEnum
from pathlib import PurePath
from typing import TypeAlias

BinaryPath: TypeAlias = str | bytes | os.PathLike[str] | os.PathLike[bytes]

DOC_TEST_DIR_PREFIX = "rustdoctest"


class BinaryKind(StrEnum):
    """Role of an executable, derived from its parent directory name."""

    TEST = "test"
    DOC_TEST = "doctest"
    OTHER = "other"

    def is_test(self) -> bool:
        """Whether the binary is a unit test or documentation test."""
        return self in (BinaryKind.TEST, BinaryKind.DOC_TEST)


def binary_kind(binary_path: BinaryPath) -> BinaryKind:
    """Classify a binary from its path alone.

    Unit test binaries live in a ``deps`` directory, documentation test
    binaries in a directory whose name starts with ``rustdoctest``. Anything
    else, including paths without a parent directory or whose parent name is
    not valid UTF-8, is an ordinary binary. The path does not need to exist.
    """
    match _parent_dir_name(binary_path):
        case "deps":
            return BinaryKind.TEST
        case str(name) if name.startswith(DOC_TEST_DIR_PREFIX):
            return BinaryKind.DOC_TEST
        case _:
            return BinaryKind.OTHER


def _parent_dir_name(binary_path: BinaryPath) -> str | None:
    """Return the final component of the parent directory, if it is valid UTF-8."""
    # fsdecode keeps undecodable bytes as lone surrogates
    path = PurePath(os.fsdecode(binary_path))
    if path.parent == path:
        return None

    name = path.parent.name
    if not name:
        return None

    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return name
