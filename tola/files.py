"""File discovery and freshness checks shared by the build pipeline."""

from __future__ import annotations

import os
from os import PathLike
from pathlib import Path

__all__ = ["IGNORED_FILES", "collect_all_files", "is_up_to_date"]

StrPath = str | PathLike[str]

IGNORED_FILES = frozenset({".DS_Store"})
"""File names skipped during directory traversal."""


def collect_all_files(directory: StrPath) -> list[Path]:
    """Return every regular file below ``directory``, recursively.

    Symbolic links are not followed, unreadable entries are skipped and a
    missing directory yields an empty list.
    """
    root = Path(directory)
    if root.is_file() and not root.is_symlink():
        return [] if root.name in IGNORED_FILES else [root]

    found: list[Path] = []
    for dirpath, dirnames, filenames in os.walk(root, followlinks=False):
        dirnames.sort()
        base = Path(dirpath)
        for name in sorted(filenames):
            if name in IGNORED_FILES:
                continue
            path = base / name
            if path.is_symlink() or not path.is_file():
                continue
            found.append(path)
    return found


def is_up_to_date(
    src: StrPath, dst: StrPath, deps_mtime: float | None = None
) -> bool:
    """Tell whether ``dst`` is at least as new as ``src`` and its dependencies.

    ``deps_mtime`` is the newest modification time (seconds since the epoch)
    among shared dependencies, or None when there are none to consider.
    Any file that cannot be inspected makes the destination stale.
    """
    try:
        src_time = os.stat(src).st_mtime
        dst_time = os.stat(dst).st_mtime
    except OSError:
        return False

    if src_time > dst_time:
        return False
    if deps_mtime is not None and deps_mtime > dst_time:
        return False
    return True