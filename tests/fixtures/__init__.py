# Test fixtures
from .sample_tablets import (
    SAMPLE_OWNERSHIP_TABLET,
    SAMPLE_OWNERSHIP_SHARDS,
    SAMPLE_OWNERSHIP_RENDERED_SHARDS,
    SAMPLE_STRINGS_TABLET,
    SAMPLE_FOO_TABLET,
    SAMPLE_DEGENERATE_TABLET,
    write_tablet,
    write_registry_dir,
)

__all__ = [
    "SAMPLE_OWNERSHIP_TABLET",
    "SAMPLE_OWNERSHIP_SHARDS",
    "SAMPLE_OWNERSHIP_RENDERED_SHARDS",
    "SAMPLE_STRINGS_TABLET",
    "SAMPLE_FOO_TABLET",
    "SAMPLE_DEGENERATE_TABLET",
    "write_tablet",
    "write_registry_dir",
]
