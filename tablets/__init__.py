"""
Tablets - Read-only access to segmented text documents

Every document is a Tablet: a path plus an inclusive line range. Tablets
split into Shards on separator lines, and the Transcriptor renders any
tablet or shard as clean Markdown.
"""

from .tablet import (
    EmptyTabletError,
    Shard,
    Tablet,
    TabletError,
    TabletNameError,
    TabletUnreadableError,
)
from .segmenter import SEPARATOR, Shards, segmentation
from .transcriptor import Transcriptor
from .registry import Registry

__version__ = "1.0.0"

__all__ = [
    "Tablet",
    "Shard",
    "Shards",
    "Transcriptor",
    "Registry",
    "SEPARATOR",
    "segmentation",
    "TabletError",
    "TabletUnreadableError",
    "TabletNameError",
    "EmptyTabletError",
]
