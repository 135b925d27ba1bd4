"""Numeric, size and duration formatting helpers.

All functions are pure and can be used on their own, independently of any
session.
"""

from __future__ import annotations

import re

# Decimal numbers as the library prints them ("25", "-3.50", "0.000")
_DECIMAL_RE = re.compile(r"^(-?\d+)\.(\d*?)0*$")
_NUMBER_RE = re.compile(r"^-?\d+(\.\d+)?$")

SIZE_UNITS = ["B", "KB", "MB", "GB", "TB"]

DURATION_STYLES = ("", "hmsm", "hms", "hm")


def divide(x: float, y: float, decimals: int = 3) -> float:
    """Return x / y rounded to the given number of decimals."""
    return round(x / y, decimals)


def percent(x: float, decimals: int = 2) -> str:
    """Format a ratio as a percentage, e.g. 0.1234 -> "12.34%"."""
    return f"{x * 100:.{decimals}f}%"


def drop_trailing_zeros(text: str) -> str:
    """Remove trailing zeros after a decimal point.

    "12.4000" -> "12.4", "12.000" -> "12", anything that is not a plain
    decimal number is returned untouched.
    """
    match = _DECIMAL_RE.match(text)
    if not match:
        return text
    whole, fraction = match.groups()
    return f"{whole}.{fraction}" if fraction else whole


def normalize_number(text: str) -> int | float | str:
    """Convert a decimal string to int/float, keeping other text verbatim.

    Trailing zeros are trimmed first. The number is returned only when it
    prints back as the trimmed text; leading zeros ("007") or digits past
    double precision keep the trimmed string instead.
    """
    if not _NUMBER_RE.match(text):
        return text
    trimmed = drop_trailing_zeros(text)
    number: int | float = float(trimmed) if "." in trimmed else int(trimmed)
    if repr(number) != trimmed:
        return trimmed
    return number


def human_size(
    size_bytes: int | float, unit: str = "", decimals: int = 2, binary: bool = True
) -> str:
    """Convert a byte count to a human-readable size.

    Args:
        size_bytes: Number of bytes
        unit: Target unit (KB, MB, GB, TB). Empty picks the largest unit
            keeping the value at or above 1.
        decimals: Decimal places in the output
        binary: Scale by 1024 when True, by 1000 otherwise

    Returns:
        String like "5.57 GB"

    Raises:
        ValueError: If unit is not one of the supported units
    """
    target = unit.upper()
    if target and target not in SIZE_UNITS:
        raise ValueError(f"Unknown size unit: {unit}")

    factor = 1024 if binary else 1000
    value = float(size_bytes)
    index = 0
    while index < len(SIZE_UNITS) - 1:
        if target:
            if SIZE_UNITS[index] == target:
                break
        elif abs(value) < factor:
            break
        value /= factor
        index += 1

    if SIZE_UNITS[index] == "B":
        return f"{int(value)} B"
    return f"{value:.{decimals}f} {SIZE_UNITS[index]}"


def format_duration(milliseconds: int | float, style: str = "") -> str:
    """Format a duration given in milliseconds.

    Styles:
        ""     -> "01:23:45.678"
        "hmsm" -> "1 h 23 m 45 s 678 ms"
        "hms"  -> "1 h 23 m 45 s"
        "hm"   -> "1 h 23 m"
    """
    if style not in DURATION_STYLES:
        raise ValueError(f"Unknown duration style: {style!r}")

    total_ms = int(milliseconds)
    total_seconds, millis = divmod(total_ms, 1000)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)

    if style == "hmsm":
        return f"{hours} h {minutes} m {seconds} s {millis:03d} ms"
    if style == "hms":
        return f"{hours} h {minutes} m {seconds} s"
    if style == "hm":
        return f"{hours} h {minutes} m"
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}.{millis:03d}"
