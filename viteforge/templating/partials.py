"""Named partial templates.

A :class:`PartialStore` is a read-through cache in front of a partials
directory.  The directory is walked once when the store is built to record
which names exist; sources are read on first use and kept for the lifetime of
the store.  One store belongs to one engine, so partials are never shared
between engines pointed at different directories.
"""

from __future__ import annotations

import threading
from pathlib import Path


def partial_name(path: Path, root: Path, extension: str) -> str:
    """Derive a partial name from its file path.

    The name is the path relative to *root*, with *extension* stripped and
    separators normalised to ``/`` (``partials/providers/redux.hbs`` ->
    ``providers/redux``).
    """
    rel = path.relative_to(root).as_posix()
    if extension and rel.endswith(extension):
        rel = rel[: -len(extension)]
    return rel


class PartialStore:
    """Lock-protected read-through cache of partial sources.

    Args:
        partials_dir: Directory holding partial files.  ``None`` gives a
            store that only serves partials added with :meth:`register`.
        extension: File extension of partial files (including the dot).
    """

    def __init__(self, partials_dir: str | Path | None = None, extension: str = ".hbs") -> None:
        self.partials_dir = Path(partials_dir) if partials_dir is not None else None
        self.extension = extension
        self._lock = threading.Lock()
        self._sources: dict[str, str] = {}
        self._paths: dict[str, Path] = self._discover()

    def _discover(self) -> dict[str, Path]:
        if self.partials_dir is None or not self.partials_dir.is_dir():
            return {}
        return {
            partial_name(path, self.partials_dir, self.extension): path
            for path in sorted(self.partials_dir.rglob(f"*{self.extension}"))
            if path.is_file()
        }

    # -- Lookup ------------------------------------------------------------

    def load(self, name: str) -> str | None:
        """Return the source of partial *name*, or ``None`` if it does not exist.

        The first successful read is cached; later calls return the cached
        text even if the file changes on disk.
        """
        with self._lock:
            cached = self._sources.get(name)
            if cached is not None:
                return cached

            path = self._paths.get(name)
            if path is None and self.partials_dir is not None:
                path = self.partials_dir / f"{name}{self.extension}"
            if path is None or not path.is_file():
                return None

            source = path.read_text(encoding="utf-8")
            self._sources[name] = source
            self._paths.setdefault(name, path)
            return source

    def register(self, name: str, source: str) -> bool:
        """Add an in-memory partial.

        Returns ``False`` (and keeps the existing source) when *name* was
        already loaded or registered.
        """
        with self._lock:
            if name in self._sources:
                return False
            self._sources[name] = source
            return True

    def names(self) -> list[str]:
        """Sorted names of every partial known to the store."""
        with self._lock:
            return sorted(set(self._paths) | set(self._sources))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name in self.names()

    def __len__(self) -> int:
        return len(self.names())
