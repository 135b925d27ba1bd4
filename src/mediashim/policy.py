"""Field normalization policy.

Maps a field name to the string variant the library should be asked for
instead of the raw value. An integer selects a numbered variant
("Duration" -> "Duration/String3"); an empty string selects the bare
variant ("BitRate" -> "BitRate/String").
"""

from __future__ import annotations

from types import MappingProxyType

BARE_VARIANT = ""

NORMALIZATION_POLICY = MappingProxyType(
    {
        # Durations as HH:MM:SS.mmm
        "Duration": 3,
        "Delay": 3,
        "Video_Delay": 3,
        "Source_Duration": 3,
        # Identifiers
        "ID": BARE_VARIANT,
        "UniqueID": BARE_VARIANT,
        "MenuID": BARE_VARIANT,
        # Bit rates
        "BitRate": BARE_VARIANT,
        "BitRate_Nominal": BARE_VARIANT,
        "BitRate_Maximum": BARE_VARIANT,
        "BitRate_Minimum": BARE_VARIANT,
        "OverallBitRate": BARE_VARIANT,
        "OverallBitRate_Nominal": BARE_VARIANT,
        "OverallBitRate_Maximum": BARE_VARIANT,
        # Languages
        "Language": BARE_VARIANT,
        # Bit depths
        "BitDepth": BARE_VARIANT,
        "BitDepth_Detected": BARE_VARIANT,
        "BitDepth_Stored": BARE_VARIANT,
    }
)

# Timecode variant used for DurationDropFrame on video streams
DROP_FRAME_PARAMETER = "Duration/String4"
DROP_FRAME_FIELD = "DurationDropFrame"


def resolve(field_name: str) -> int | str | None:
    """Return the variant selector for a field, or None if it has no entry."""
    return NORMALIZATION_POLICY.get(field_name)


def variant_parameter(field_name: str, selector: int | str) -> str:
    """Build the parameter name of a field variant."""
    return f"{field_name}/String{selector}"
