"""Utility functions for mediashim."""

from .deps import (
    check_native_library,
    check_python_dependencies,
    print_dependency_status,
)
from .formatting import (
    divide,
    drop_trailing_zeros,
    format_duration,
    human_size,
    normalize_number,
    percent,
)

__all__ = [
    # Formatting
    "divide",
    "percent",
    "drop_trailing_zeros",
    "normalize_number",
    "human_size",
    "format_duration",
    # Dependency checking
    "check_native_library",
    "check_python_dependencies",
    "print_dependency_status",
]
