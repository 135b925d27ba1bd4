"""JSON output formatter."""

import json
from typing import Any

from mediashim.models import ResultTree


def format_json(tree: ResultTree, indent: int = 2) -> str:
    """Format a result tree as JSON string.

    Args:
        tree: ResultTree object
        indent: JSON indentation level

    Returns:
        JSON formatted string keyed by section name ("General", "Video", ...)
    """
    return tree.model_dump_json(indent=indent, by_alias=True, exclude_none=True)


def format_json_list(trees: dict[str, ResultTree], indent: int = 2) -> str:
    """Format several result trees as one JSON object keyed by file path.

    Args:
        trees: Mapping of file path to ResultTree
        indent: JSON indentation level

    Returns:
        JSON object formatted string
    """
    data = {path: tree.to_dict() for path, tree in trees.items()}
    return json.dumps(data, indent=indent, ensure_ascii=False)


def to_dict(tree: ResultTree) -> dict[str, Any]:
    """Convert a result tree to dictionary.

    Args:
        tree: ResultTree object

    Returns:
        Dictionary representation
    """
    return tree.to_dict()
