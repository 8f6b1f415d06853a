"""
Tablet Registry

Holds the ordered list of known documents and resolves it to tablets
(whole documents) and to the heap of every shard across all of them.
"""

import os
from pathlib import Path
from typing import Iterable, Optional

from .tablet import EmptyTabletError, Tablet, TabletError, count_lines


class Registry:
    """
    Collection of all tablets and shards available.

    Args:
        paths: Ordered document paths.
        on_error: "raise" to propagate the first unreadable document,
            "skip" to report it and leave it out of the catalog.
    """

    ERROR_POLICIES = ("raise", "skip")

    def __init__(self, paths: Iterable[str | Path], on_error: str = "raise"):
        if on_error not in self.ERROR_POLICIES:
            raise ValueError(
                f"on_error must be one of {self.ERROR_POLICIES}, got {on_error!r}"
            )
        self._paths = tuple(str(p) for p in paths)
        self.on_error = on_error

    @classmethod
    def from_directory(
        cls,
        directory: str | Path,
        extensions: Optional[Iterable[str]] = None,
        on_error: str = "raise",
    ) -> "Registry":
        """
        Build a registry from the files of a directory, sorted by name.

        Args:
            directory: Directory holding the documents.
            extensions: Optional extensions to keep, e.g. [".rs", ".md"].
            on_error: Error policy passed to the registry.
        """
        if not os.path.isdir(directory):
            raise NotADirectoryError(f"Not a directory: {directory}")

        wanted = None
        if extensions is not None:
            wanted = {_normalize_ext(ext) for ext in extensions}

        paths = []
        for filename in sorted(os.listdir(directory)):
            file_path = os.path.join(directory, filename)
            if not os.path.isfile(file_path):
                continue
            _, ext = os.path.splitext(filename.lower())
            if wanted is not None and ext not in wanted:
                continue
            paths.append(file_path)

        return cls(paths, on_error=on_error)

    @property
    def paths(self) -> tuple[str, ...]:
        return self._paths

    def __len__(self):
        return len(self._paths)

    def __iter__(self):
        return iter(self._paths)

    def __repr__(self):
        return f"Registry({len(self._paths)} paths, on_error={self.on_error!r})"

    @staticmethod
    def tablet(path: str | Path) -> Tablet:
        """
        Build the whole-document tablet for a path.

        Raises:
            TabletUnreadableError: If the file cannot be read.
            EmptyTabletError: If the file has no lines.
        """
        path = str(path)
        length = count_lines(path)
        if length == 0:
            raise EmptyTabletError(f"Tablet has no lines: {path}")
        return Tablet(path, (0, length - 1))

    def catalog(self) -> list[Tablet]:
        """Return every available tablet, in registry order."""
        tablets = []
        for path in self._paths:
            try:
                tablets.append(self.tablet(path))
            except TabletError as e:
                if self.on_error == "raise":
                    raise
                print(f"[SKIP] {path}: {e}")
        return tablets

    def heap(self) -> list[Tablet]:
        """Return every shard of every tablet, in registry and line order."""
        return [shard for tablet in self.catalog() for shard in tablet.shards()]

    def find(self, name: str) -> Tablet:
        """
        Return the catalogued tablet with the given name.

        Raises:
            KeyError: If no tablet has that name.
        """
        for tablet in self.catalog():
            if tablet.name == name:
                return tablet
        raise KeyError(f"No tablet named {name!r}")


def _normalize_ext(ext: str) -> str:
    ext = ext.lower()
    return ext if ext.startswith(".") else f".{ext}"
