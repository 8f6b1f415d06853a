"""
Shard segmentation.

Splits a tablet's line range into shards on separator lines. Separator
lines belong to no shard; shards that would be empty (a separator on the
first or last line, or two separators in a row) are dropped.
"""

from .tablet import Tablet, read_window

SEPARATOR = "-----"


def is_separator(line: str) -> bool:
    """Check if a line marks a boundary between shards."""
    return SEPARATOR in line


def segmentation(tablet: Tablet) -> list[tuple[int, int]]:
    """
    Find the shard ranges of a tablet.

    Args:
        tablet: The tablet (or shard) to split.

    Returns:
        Ordered, non-overlapping (start, end) ranges with absolute line
        indices. A tablet without separators yields its own range.

    Raises:
        TabletUnreadableError: If the tablet's file cannot be read.
    """
    segments = []
    ptr = tablet.start

    for num, line in enumerate(read_window(tablet), start=tablet.start):
        if is_separator(line):
            if num - 1 >= ptr:
                segments.append((ptr, num - 1))
            ptr = num + 1

    if tablet.end >= ptr:
        segments.append((ptr, tablet.end))
    return segments


class Shards:
    """
    Iterator over every shard of a tablet.

    Segment boundaries are read from disk when the iterator is created and
    are not cached; call `Tablet.shards()` again to re-read the file.
    """

    def __init__(self, origin: Tablet):
        self.origin = origin
        self._segments = iter(segmentation(origin))

    def __iter__(self):
        return self

    def __next__(self) -> Tablet:
        return Tablet(self.origin.path, next(self._segments))

    def __repr__(self):
        return f"Shards(origin={self.origin!r})"
