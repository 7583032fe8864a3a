"""POSIX path helpers."""

import os
import posixpath
from pathlib import Path


def norm_path(path: str | os.PathLike) -> Path:
    """Normalize a path, eliminating double slashes, `.` and `..`.

    Does not resolve symbolic links. Any run of leading slashes is
    collapsed into a single one.
    """
    normalized = posixpath.normpath(os.fspath(path))
    if normalized.startswith("//"):
        normalized = "/" + normalized.lstrip("/")
    return Path(normalized)


def absolute(path: str | os.PathLike) -> Path:
    """Return the absolute, normalized form of `path`.

    A leading `~` is expanded to the user's home directory and relative
    paths are resolved against the current working directory.
    """
    expanded = os.path.expanduser(os.fspath(path))
    if not os.path.isabs(expanded):
        expanded = os.path.join(os.getcwd(), expanded)
    return norm_path(expanded)


def join_path(base: str | os.PathLike, path: str | os.PathLike) -> Path:
    """Join `path` onto `base`."""
    return Path(base) / path
