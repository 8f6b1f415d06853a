"""
Tablet: the addressing value shared by whole documents and their shards.

A Tablet is nothing more than a path and an inclusive line range. It owns
no text; the file on disk is read only when a tablet is segmented or
transcribed.
"""

from dataclasses import dataclass
from pathlib import Path


class TabletError(Exception):
    """Base class for tablet errors."""
    pass


class TabletUnreadableError(TabletError, OSError):
    """Raised when a tablet's file cannot be opened, decoded, or is too short."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Tablet is not readable: {path} ({reason})")
        self.path = path
        self.reason = reason


class TabletNameError(TabletError, ValueError):
    """Raised when a tablet path has no base name."""
    pass


class EmptyTabletError(TabletError):
    """Raised when a catalogued document has no lines."""
    pass


@dataclass(frozen=True)
class Tablet:
    """
    A whole-document or sub-section reference.

    `range` holds zero-based, inclusive (start, end) line indices.
    """
    path: str
    range: tuple[int, int]

    def __post_init__(self):
        if not isinstance(self.path, str):
            object.__setattr__(self, "path", str(self.path))
        start, end = self.range
        for bound in (start, end):
            if not isinstance(bound, int) or isinstance(bound, bool):
                raise TypeError(f"Tablet range bounds must be int, got {bound!r}")
        if start < 0:
            raise ValueError(f"Tablet start must be >= 0, got {start}")
        if end < start:
            raise ValueError(f"Tablet end ({end}) must be >= start ({start})")
        object.__setattr__(self, "range", (start, end))

    @property
    def start(self) -> int:
        """Which line to start reading from."""
        return self.range[0]

    @property
    def end(self) -> int:
        """Which line to stop reading on."""
        return self.range[1]

    @property
    def length(self) -> int:
        """Count of lines addressed by the tablet."""
        return self.end - self.start + 1

    @property
    def fs_path(self) -> Path:
        return Path(self.path)

    @property
    def name(self) -> str:
        """Name of the tablet, taken from the file name without its extension."""
        file_name = self.fs_path.name
        if file_name in ("", ".", ".."):
            raise TabletNameError(f"Tablet path has no file name: {self.path!r}")
        return self.fs_path.stem

    def shards(self):
        """Return a fresh iterator over every shard of this tablet."""
        from .segmenter import Shards
        return Shards(self)

    def read(self) -> str:
        """Transcribe the tablet to markdown."""
        from .transcriptor import Transcriptor
        return Transcriptor.read(self)


# A shard is a tablet with a narrower range.
Shard = Tablet


def read_window(tablet: Tablet) -> list[str]:
    """
    Read the lines addressed by a tablet.

    The file handle is released before returning. Line terminators are
    not included in the returned lines.

    Raises:
        TabletUnreadableError: If the file cannot be opened or decoded,
            or ends before the tablet's last line.
    """
    lines = []
    try:
        with open(tablet.path, "r", encoding="utf-8", newline="\n") as f:
            for num, line in enumerate(f):
                if num < tablet.start:
                    continue
                if num > tablet.end:
                    break
                lines.append(line.removesuffix("\n").removesuffix("\r"))
    except UnicodeDecodeError as e:
        raise TabletUnreadableError(tablet.path, f"invalid UTF-8: {e.reason}") from e
    except OSError as e:
        raise TabletUnreadableError(tablet.path, e.strerror or str(e)) from e

    if len(lines) < tablet.length:
        raise TabletUnreadableError(
            tablet.path,
            f"expected lines {tablet.start}..{tablet.end}, "
            f"file ends after {tablet.start + len(lines)} lines",
        )
    return lines


def count_lines(path: str) -> int:
    """
    Count the lines of a file.

    Raises:
        TabletUnreadableError: If the file cannot be opened or decoded.
    """
    try:
        with open(path, "r", encoding="utf-8", newline="\n") as f:
            return sum(1 for _ in f)
    except UnicodeDecodeError as e:
        raise TabletUnreadableError(path, f"invalid UTF-8: {e.reason}") from e
    except OSError as e:
        raise TabletUnreadableError(path, e.strerror or str(e)) from e
