"""
Tablet-to-Markdown Transcriptor

Reads the lines addressed by a tablet or shard and cleans each one up
into markdown: doc-comment markers are removed, special example fences
become plain `rust` fences, and whitespace is trimmed.
"""

from .tablet import Tablet, read_window


class Transcriptor:
    """Reads tablets and shards in markdown format."""

    DOC_COMMENT = "//!"

    # Example-block annotations that rustdoc treats specially
    FENCE_ALIASES = {
        "```should_panic": "```rust",
        "```no_run": "```rust",
    }

    @classmethod
    def line_fmt(cls, line: str) -> str:
        """Format one line to match the markdown format."""
        formatted = line.replace(cls.DOC_COMMENT, "")
        for annotation, fence in cls.FENCE_ALIASES.items():
            formatted = formatted.replace(annotation, fence)
        return formatted.strip() + "\n"

    @classmethod
    def read(cls, tablet: Tablet) -> str:
        """
        Read the contents of a tablet or shard as markdown.

        All lines are read before any formatting, so a failed read never
        produces partial output.

        Args:
            tablet: The tablet or shard to transcribe.

        Returns:
            The formatted text, trimmed of surrounding whitespace.

        Raises:
            TabletUnreadableError: If the tablet's file cannot be read.
        """
        lines = read_window(tablet)
        contents = "".join(cls.line_fmt(line) for line in lines)
        return contents.strip()
