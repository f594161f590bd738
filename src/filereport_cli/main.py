"""Generate an HTML report of file counts and sizes per extension.

Usage:
    filereport <input folder path> <output HTML report file path>
    filereport ./documents report.html --config configs/report.yaml
    python -m filereport_cli ./documents report.html -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from filereport_core.config import ReportConfig, load_config
from filereport_core.errors import FileReportError
from filereport_core.logging_utils import setup_logging
from filereport_data.aggregate import Report, aggregate
from filereport_data.sources import FileWalker
from filereport_render.table import render_report, write_report

logger = logging.getLogger(__name__)

USAGE = "Usage: filereport <input folder path> <output HTML report file path>"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_USAGE = 2


def generate_report(input_dir: str, output_path: str, config: Optional[ReportConfig] = None) -> Report:
    """Scan ``input_dir`` and write the HTML report to ``output_path``.

    Args:
        input_dir: Folder to scan recursively
        output_path: Destination of the HTML report (overwritten)
        config: Run settings; defaults to ReportConfig()

    Returns:
        The Report that was rendered

    Raises:
        NotFoundError: If ``input_dir`` is not a directory (nothing is written)
        WriteError: If the report cannot be written
    """
    config = config or ReportConfig()

    walker = FileWalker(input_dir, follow_symlinks=config.follow_symlinks)
    logger.info(f"Scanning: {walker.root}")

    report = aggregate(walker, progress_interval=config.progress_interval)
    report.root = walker.root
    report.skipped = walker.errors + report.skipped

    write_report(render_report(report), output_path)
    logger.info(
        f"Wrote {len(report.groups)} extension groups "
        f"({report.total_files} files, {report.total_bytes} bytes) from {report.root} to {output_path}"
    )
    return report


class UsageError(Exception):
    """Raised instead of exiting when the command line cannot be parsed."""


class ReportArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = ReportArgumentParser(
        prog="filereport",
        description="Summarize file counts and sizes by extension as an HTML table",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        metavar="PATH",
        help="Input folder path followed by the output HTML report path",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML report configuration file",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point. Returns the process exit code."""
    parser = build_parser()
    try:
        args, extras = parser.parse_known_intermixed_args(argv)
    except UsageError:
        print(USAGE)
        return EXIT_USAGE

    if extras or len(args.paths) != 2:
        print(USAGE)
        return EXIT_USAGE

    input_dir, output_path = args.paths

    try:
        config = load_config(args.config) if args.config else ReportConfig()
        if args.verbose:
            config.log_level = "DEBUG"
        setup_logging(config.level, config.log_file)

        report = generate_report(input_dir, output_path, config)
    except (FileReportError, OSError) as e:
        print(f"An error occurred: {e}", file=sys.stderr)
        return EXIT_FAILURE

    if report.skipped:
        logger.warning(
            f"{len(report.skipped)} path(s) under {report.root} could not be read and were left out of the report"
        )
    print(f"Report generated successfully at {output_path}")
    return EXIT_OK


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
