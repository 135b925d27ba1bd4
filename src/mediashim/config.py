"""Configuration management for mediashim.

Supports loading configuration from:
1. Environment variables (MEDIASHIM_*)
2. Config file (~/.mediashim/config.yaml)
3. Default values

Example config file (~/.mediashim/config.yaml):
    library:
      path: "/opt/mediainfo/lib/libmediainfo.so.0"
    extraction:
      raw: false
      drop_frame: true
      all_fields: false
    report:
      language_file: "~/.mediashim/lang.csv"
      template_file: "~/.mediashim/template.txt"
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

# Config file search locations (in priority order)
CONFIG_LOCATIONS = [
    Path.home() / ".mediashim" / "config.yaml",
    Path.home() / ".config" / "mediashim" / "config.yaml",
    Path(".mediashim.yaml"),
]


@dataclass
class LibraryConfig:
    """Native library configuration."""

    path: str | None = None


@dataclass
class ExtractionConfig:
    """Default extraction flags."""

    raw: bool = False
    drop_frame: bool = False
    all_fields: bool = False


@dataclass
class ReportConfig:
    """Report text configuration."""

    language_file: str | None = None
    template_file: str | None = None


@dataclass
class MediashimConfig:
    """Main configuration for mediashim."""

    library: LibraryConfig = field(default_factory=LibraryConfig)
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    report: ReportConfig = field(default_factory=ReportConfig)


def _load_yaml_config() -> dict[str, Any]:
    """Load configuration from YAML file if available."""
    try:
        import yaml
    except ImportError:
        return {}

    for config_path in CONFIG_LOCATIONS:
        if config_path.exists():
            try:
                with open(config_path) as f:
                    data = yaml.safe_load(f)
                    return data if data else {}
            except (OSError, yaml.YAMLError):
                continue
    return {}


def _get_env(key: str, default: Any = None) -> Any:
    """Get environment variable with MEDIASHIM_ prefix."""
    return os.environ.get(f"MEDIASHIM_{key}", default)


def _parse_bool(value: str | None) -> bool | None:
    """Parse boolean from string."""
    if value is None:
        return None
    return value.lower() in ("true", "1", "yes", "on")


def _flag(env_key: str, section: dict[str, Any], key: str) -> bool:
    env_value = _parse_bool(_get_env(env_key))
    if env_value is not None:
        return env_value
    return bool(section.get(key, False))


def _expand(path: str | None) -> str | None:
    return os.path.expanduser(path) if path else None


def load_config() -> MediashimConfig:
    """Load configuration from file and environment variables.

    Priority (highest first):
    1. Environment variables (MEDIASHIM_*)
    2. Config file (~/.mediashim/config.yaml)
    3. Default values
    """
    file_config = _load_yaml_config()

    # Library
    library_config = file_config.get("library") or {}
    library = LibraryConfig(
        path=_expand(_get_env("LIBRARY_PATH") or library_config.get("path")),
    )

    # Extraction flags
    extraction_config = file_config.get("extraction") or {}
    extraction = ExtractionConfig(
        raw=_flag("RAW", extraction_config, "raw"),
        drop_frame=_flag("DROP_FRAME", extraction_config, "drop_frame"),
        all_fields=_flag("ALL_FIELDS", extraction_config, "all_fields"),
    )

    # Report inputs
    report_config = file_config.get("report") or {}
    report = ReportConfig(
        language_file=_expand(
            _get_env("LANGUAGE_FILE") or report_config.get("language_file")
        ),
        template_file=_expand(
            _get_env("TEMPLATE_FILE") or report_config.get("template_file")
        ),
    )

    return MediashimConfig(
        library=library,
        extraction=extraction,
        report=report,
    )


# Global config instance (lazy loaded)
_config: MediashimConfig | None = None


def get_config() -> MediashimConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None
