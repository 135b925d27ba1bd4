"""Dependency checking utilities."""

from __future__ import annotations

from typing import Any

from mediashim.backends.native import library_version
from mediashim.exceptions import LibraryUnavailableError


def check_native_library(path: str | None = None) -> dict[str, Any]:
    """Check whether the MediaInfo library can be loaded.

    Returns:
        Dict with 'available', 'version' and 'error' keys.
    """
    try:
        version = library_version(path)
    except LibraryUnavailableError as e:
        return {"available": False, "version": None, "error": str(e)}
    return {"available": True, "version": version, "error": None}


def check_python_dependencies() -> dict[str, bool]:
    """Check availability of optional Python packages.

    Returns:
        Dict mapping package names to availability status.
    """
    packages = {}

    # PyYAML (config files)
    try:
        import yaml  # noqa: F401

        packages["pyyaml"] = True
    except ImportError:
        packages["pyyaml"] = False

    return packages


def print_dependency_status(path: str | None = None) -> None:
    """Print dependency status to stdout."""
    native = check_native_library(path)
    packages = check_python_dependencies()

    print("mediashim dependency status:")
    print("=" * 40)

    print("\nNative library:")
    if native["available"]:
        print(f"  ✓ mediainfo ({native['version']})")
    else:
        print("  ✗ mediainfo")

    print("\nPython packages:")
    for name, available in sorted(packages.items()):
        icon = "✓" if available else "✗"
        print(f"  {icon} {name}")

    # Recommendations
    if not native["available"]:
        print(f"\n⚠️  {native['error']}")
        print("   Install: apt install libmediainfo0v5  /  brew install media-info")
    if not packages["pyyaml"]:
        print("\n💡 For config file support: pip install pyyaml")
