"""Default output formatter - sectioned field listing."""

from mediashim.models import ResultTree, StreamKind

NAME_WIDTH = 32


def format_default(tree: ResultTree, title: str | None = None) -> str:
    """Format a result tree as a readable field listing.

    One section per stream, numbered when a kind has several streams,
    followed by the chapter table when chapters were found.
    """
    lines = []

    if title:
        lines.append("=" * 70)
        lines.append(f"File: {title}")
        lines.append("=" * 70)

    for kind in StreamKind:
        records = tree.streams(kind)
        for number, record in enumerate(records, start=1):
            heading = kind.label if len(records) == 1 else f"{kind.label} #{number}"
            lines.append("")
            lines.append(f"## {heading.upper()}")
            for name, value in record.items():
                lines.append(f"  {name:<{NAME_WIDTH}}: {value}")

    if tree.chapters:
        lines.append("")
        lines.append("## CHAPTERS")
        for label, timecode in tree.chapters.items():
            lines.append(f"  {timecode:<{NAME_WIDTH}}: {label}")

    if tree.is_empty:
        lines.append("")
        lines.append("  (no streams)")

    return "\n".join(lines)
