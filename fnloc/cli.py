"""
Command-line interface for fnloc.

Analyzes every Rust file under a directory and prints one line of
metrics per function.
"""

import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from fnloc import __version__
from fnloc.config import OUTPUT_FORMATS, SORT_KEYS, Config, find_config
from fnloc.core.engine import AnalysisEngine
from fnloc.errors import FnlocError
from fnloc.reporting.formatters import format_results, supports_color
from fnloc.reporting.selection import select_results


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="fnloc",
        description="Count lines, cyclomatic complexity and nesting depth of Rust functions.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fnloc                              # Analyze ./src
  fnloc crates/core/src -s complexity -l 10
  fnloc . -m 20 -f json -o report.json
  fnloc . -f csv > functions.csv
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=None,
        help="Directory (or single .rs file) to analyze (default: ./src)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "-m", "--min-lines",
        type=int,
        default=None,
        help="Only show functions with at least this many total lines",
    )
    parser.add_argument(
        "-l", "--limit",
        type=int,
        default=None,
        help="Show only the first N functions after sorting",
    )
    parser.add_argument(
        "-s", "--sort",
        choices=SORT_KEYS,
        default=None,
        help="Sort key (default: code)",
    )
    parser.add_argument(
        "-f", "--format",
        choices=OUTPUT_FORMATS,
        default=None,
        help="Output format (default: table)",
    )
    parser.add_argument(
        "-o", "--output",
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "-c", "--config",
        help="Path to configuration file",
    )
    parser.add_argument(
        "-j", "--jobs",
        type=int,
        default=None,
        help="Number of parallel workers (default: 1)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )
    parser.add_argument(
        "--no-qualify",
        action="store_true",
        help="Show bare function names instead of path::Owner::name",
    )

    return parser


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def load_config(args: argparse.Namespace) -> Config:
    """Load the config file and apply command-line overrides."""
    config_path = args.config or find_config(args.directory or ".")
    config = Config.load(config_path)
    return config.with_overrides(_overrides(args))


def _overrides(args: argparse.Namespace) -> Dict[str, Any]:
    scan: Dict[str, Any] = {}
    report: Dict[str, Any] = {}

    if args.directory is not None:
        scan["directory"] = args.directory
    if args.jobs is not None:
        scan["jobs"] = args.jobs

    if args.min_lines is not None:
        report["min_lines"] = args.min_lines
    if args.limit is not None:
        report["limit"] = args.limit
    if args.sort is not None:
        report["sort"] = args.sort
    if args.format is not None:
        report["format"] = args.format
    if args.no_color:
        report["color"] = False
    if args.no_qualify:
        report["qualify_names"] = False

    return {"scan": scan, "report": report}


def cmd_analyze(args: argparse.Namespace) -> int:
    """Run the analysis and write the report."""
    config = load_config(args)
    report_settings = config.report()

    engine = AnalysisEngine(config)
    directory = config.directory()

    if args.verbose:
        print(f"Analyzing {os.path.abspath(directory)}...", file=sys.stderr)

    report = engine.analyze(directory)

    selected = select_results(
        report.results,
        min_lines=int(report_settings.get("min_lines") or 0),
        sort=report_settings["sort"],
        limit=report_settings.get("limit"),
    )

    use_color = (
        bool(report_settings.get("color", True))
        and not args.output
        and supports_color()
    )
    output = format_results(
        report_settings["format"],
        selected,
        file_count=report.files_analyzed + report.files_skipped,
        use_color=use_color,
        thresholds=config.thresholds(),
    )

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        if args.verbose:
            print(f"Results written to {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(output)

    if args.verbose:
        print(
            f"{len(report.results)} functions in {report.files_analyzed} files "
            f"({report.files_skipped} skipped) in {report.elapsed_seconds}s",
            file=sys.stderr,
        )
        for error in report.errors:
            print(f"  skipped: {error}", file=sys.stderr)

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(args.verbose)

    try:
        return cmd_analyze(args)

    except KeyboardInterrupt:
        print("\nAnalysis interrupted.", file=sys.stderr)
        return 130
    except (FnlocError, FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        if os.environ.get("DEBUG"):
            raise
        return 1


if __name__ == "__main__":
    sys.exit(main())
