"""Quiet output formatter - one-line summary."""

from mediashim.models import ResultTree, StreamKind
from mediashim.utils.formatting import format_duration, human_size

SUMMARY_KINDS = (StreamKind.VIDEO, StreamKind.AUDIO, StreamKind.TEXT)


def _number(value: object) -> float | None:
    if isinstance(value, (int, float)):
        return float(value)
    return None


def format_quiet(tree: ResultTree, name: str) -> str:
    """Format a result tree as a one-line summary.

    Format: name | duration | size | resolution | 1V 2A 1T
    """
    parts = [name]
    general = tree.first(StreamKind.GENERAL) or {}

    # Duration: already formatted by the normalization policy, unless raw
    duration = general.get("Duration")
    millis = _number(duration)
    if millis is not None:
        parts.append(format_duration(millis))
    else:
        parts.append(str(duration) if duration else "N/A")

    # Size
    size = _number(general.get("FileSize"))
    parts.append(human_size(size) if size is not None else "N/A")

    # Resolution
    video = tree.first(StreamKind.VIDEO) or {}
    width, height = video.get("Width"), video.get("Height")
    parts.append(f"{width}x{height}" if width and height else "N/A")

    # Stream counts
    counts = [
        f"{tree.count(kind)}{kind.label[0]}" for kind in SUMMARY_KINDS if tree.count(kind)
    ]
    parts.append(" ".join(counts) if counts else "no streams")

    return " | ".join(parts)


def format_quiet_list(trees: dict[str, ResultTree]) -> str:
    """Format several result trees as one-line summaries.

    Args:
        trees: Mapping of file path to ResultTree

    Returns:
        Multiple lines, one per file
    """
    return "\n".join(format_quiet(tree, path) for path, tree in trees.items())
