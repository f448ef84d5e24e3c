"""Dependency tracking between content files and the files they pull in."""

from __future__ import annotations

import threading
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

__all__ = ["DependencyGraph", "DEPENDENCY_GRAPH"]

StrPath = str | PathLike[str]


class DependencyGraph:
    """Forward and reverse mapping of content files to their dependencies.

    When a template or utility file changes, the reverse mapping tells which
    content files must be rebuilt. All operations are thread-safe.
    """

    def __init__(self) -> None:
        self._forward: dict[Path, set[Path]] = {}
        self._reverse: dict[Path, set[Path]] = {}
        self._lock = threading.RLock()

    def record_dependencies(
        self, content_file: StrPath, accessed_files: Iterable[StrPath]
    ) -> None:
        """Replace the recorded dependencies of ``content_file``.

        The content file itself is never recorded as its own dependency.
        """
        content = Path(content_file)
        deps = {Path(p) for p in accessed_files} - {content}
        with self._lock:
            self._remove_forward_entry(content)
            for dep in deps:
                self._reverse.setdefault(dep, set()).add(content)
            self._forward[content] = deps

    def get_dependents(self, dependency: StrPath) -> frozenset[Path] | None:
        """Return the content files that depend on ``dependency``, or None."""
        with self._lock:
            dependents = self._reverse.get(Path(dependency))
            return frozenset(dependents) if dependents is not None else None

    def clear(self) -> None:
        """Forget every recorded dependency."""
        with self._lock:
            self._forward.clear()
            self._reverse.clear()

    def _remove_forward_entry(self, content: Path) -> None:
        for dep in self._forward.pop(content, ()):
            dependents = self._reverse.get(dep)
            if dependents is None:
                continue
            dependents.discard(content)
            if not dependents:
                del self._reverse[dep]


DEPENDENCY_GRAPH = DependencyGraph()
"""Shared graph that persists across rebuilds in watch mode."""