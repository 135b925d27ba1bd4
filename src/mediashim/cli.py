"""
Command-line interface for mediashim.

Usage:
  mediashim movie.mkv                  # Field listing
  mediashim --report movie.mkv         # Library's own text report
  mediashim --json movie.mkv           # JSON result tree
  mediashim -o report.json *.mkv       # JSON export
  mediashim -q *.mkv                   # Quick summary
  mediashim --status                   # Library availability
"""

from __future__ import annotations

import argparse
import logging
import sys

from mediashim._version import __version__
from mediashim.config import get_config
from mediashim.exceptions import InvalidInputError, LibraryUnavailableError, LoadFailureError
from mediashim.formatters import format_default, format_json, format_json_list, format_quiet
from mediashim.language import read_table_text
from mediashim.models import ResultTree
from mediashim.session import MediaSession
from mediashim.utils.deps import print_dependency_status


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="mediashim",
        description="Normalized media metadata from the MediaInfo library.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Modes:
  (default)    Field listing per stream
  --report     Report text produced by the library (honors --template/--language)
  --json       Result tree as JSON
  -q/--quiet   Quick summary only
  --status     Show library availability

Extraction:
  --raw        No variant substitution, keep every field
  --all        Keep empty and bookkeeping fields
  --drop-frame Add DurationDropFrame to video streams

Examples:
  mediashim movie.mkv
  mediashim --drop-frame --json clip.mxf
  mediashim --report --template template.txt movie.mkv
  mediashim -o report.json *.mkv
        """,
    )
    parser.add_argument("files", nargs="*", help="Media file(s) to probe")
    parser.add_argument("-o", "--output", help="Save result trees to JSON file")
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    # Extraction flags
    parser.add_argument("--raw", action="store_true", default=None, help="Raw field values")
    parser.add_argument("--all", dest="all_fields", action="store_true", default=None,
                        help="Keep every field")
    parser.add_argument("--drop-frame", action="store_true", default=None,
                        help="Add drop-frame duration to video streams")

    # Report inputs
    parser.add_argument("--language", metavar="FILE", help="Translation table for --report")
    parser.add_argument("--template", metavar="FILE", help="Report template for --report")
    parser.add_argument("--library", metavar="PATH", help="Path of the MediaInfo library")

    # Mode selection (mutually exclusive)
    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("--report", action="store_true", help="Library report text")
    mode_group.add_argument("--json", action="store_true", help="JSON output")
    mode_group.add_argument("-q", "--quiet", action="store_true", help="Quick summary only")
    mode_group.add_argument("--status", action="store_true", help="Show library status")
    return parser


def _render(args: argparse.Namespace, session: MediaSession, path: str, tree: ResultTree) -> str:
    if args.report:
        return session.report_text()
    if args.json:
        return format_json(tree)
    if args.quiet:
        return format_quiet(tree, path)
    return format_default(tree, title=path)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for mediashim CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    config = get_config()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    library_path = args.library or config.library.path

    # Handle --status mode (no files required)
    if args.status:
        print_dependency_status(library_path)
        return 0

    if not args.files:
        parser.error("the following arguments are required: files")

    # Flags fall back to configuration when not given
    raw = config.extraction.raw if args.raw is None else args.raw
    all_fields = config.extraction.all_fields if args.all_fields is None else args.all_fields
    drop_frame = config.extraction.drop_frame if args.drop_frame is None else args.drop_frame
    language_file = args.language or config.report.language_file
    template_file = args.template or config.report.template_file

    try:
        language = read_table_text(language_file) if language_file else ""
        template = read_table_text(template_file) if template_file else ""
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        session = MediaSession(
            raw=raw,
            drop_frame=drop_frame,
            all_fields=all_fields,
            language_data=language,
            library_path=library_path,
        )
    except LibraryUnavailableError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    results: dict[str, ResultTree] = {}
    errors = 0

    with session:
        if template:
            session.set_option("ReportTemplate", template)

        for file_path in args.files:
            try:
                tree = session.open(file_path)
            except (InvalidInputError, LoadFailureError) as e:
                print(f"Error: {e}", file=sys.stderr)
                errors += 1
                continue

            results[file_path] = tree
            print(_render(args, session, file_path, tree))
            if not args.quiet:
                print()

    # JSON export
    if args.output and results:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(format_json_list(results))
        print(f"Report saved to: {args.output}")

    return 1 if errors > 0 else 0


if __name__ == "__main__":
    sys.exit(main())
