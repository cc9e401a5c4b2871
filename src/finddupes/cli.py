#!/usr/bin/env python3
"""
finddupes CLI — Command line interface for duplicate file detection.
Scans one or more directory trees and prints every set of byte-identical files.
Report-only: nothing is ever deleted, moved or linked.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from typing import List, Optional, NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from finddupes import __version__
from finddupes.core.models import DuplicateSet, ScanParams, ResolveStats, ResolverConfig
from finddupes.commands import ScanCommand
from finddupes.utils.convert_utils import ConvertUtils
from finddupes.services.report_service import ConsoleReporter
from finddupes.aliases import (
    ALGORITHM_ALIASES, ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT,
    EPILOG_TEXT
)


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Filenames that are not valid UTF-8 arrive with lone surrogates; escape them instead of failing
        for stream in (sys.stdout, sys.stderr):
            if hasattr(stream, "reconfigure"):
                stream.reconfigure(encoding='utf-8', errors='backslashreplace')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="finddupes",
            description="finddupes — find byte-identical files by size, then content digest",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "paths",
            nargs="*",
            metavar="PATH",
            help="Files or directories to scan. Default: current directory"
        )

        # Hashing options
        parser.add_argument(
            "--algorithm", "-a",
            choices=ALGORITHM_CHOICES,
            default="sha256",
            type=str,
            help=ALGORITHM_HELP_TEXT
        )
        parser.add_argument(
            "--jobs", "-j",
            default=ResolverConfig.DEFAULT_JOBS,
            type=int,
            metavar='N',
            help="Number of size buckets hashed in parallel. Default: 1"
        )
        parser.add_argument(
            "--chunk-size",
            default=ConvertUtils.bytes_to_human(ResolverConfig.DEFAULT_CHUNK_SIZE),
            type=str,
            metavar='SIZE',
            help="Read size while hashing (e.g., 64KB, 1MB). Does not change results. Default: 64KB"
        )

        # Output options
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Hide 'Reading directory' and 'Ignoring symlink' lines"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and scan statistics"
        )
        parser.add_argument(
            "--version",
            action="version",
            version=f"%(prog)s {__version__}"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.jobs < 1:
            self.error_exit("--jobs must be at least 1", code=2)

        try:
            chunk_size = ConvertUtils.human_to_bytes(args.chunk_size)
        except ValueError as e:
            self.error_exit(f"Invalid chunk size: {e}", code=2)
        if chunk_size <= 0:
            self.error_exit("Chunk size must be positive", code=2)

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams(
                roots=list(args.paths),
                algorithm=ALGORITHM_ALIASES[args.algorithm],
                chunk_size=ConvertUtils.human_to_bytes(args.chunk_size),
                jobs=args.jobs,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}", code=2)

    def run_scan(self, params: ScanParams) -> tuple[List[DuplicateSet], ResolveStats]:
        """Execute the scan; results are printed by the reporter as they are confirmed."""
        reporter = ConsoleReporter(show_progress=not self.quiet)
        if self.verbose:
            print(
                f"Scanning {len(params.roots)} root(s) "
                f"(digest: {params.algorithm.display_name}, jobs: {params.jobs})...",
                file=sys.stderr
            )
        return ScanCommand().execute(params, reporter=reporter)

    def output_summary(self, groups: List[DuplicateSet], stats: ResolveStats) -> None:
        """Print statistics to stderr so stdout stays a clean report."""
        if not self.verbose:
            return
        print(file=sys.stderr)
        print(stats.print_summary(), file=sys.stderr)
        if not groups:
            print("No duplicate files found.", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """Main entry point. Scan errors are diagnostics, not failures: returns 0."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet

        if self.verbose:
            logging.getLogger("finddupes").setLevel(logging.DEBUG)

        self.validate_args(args)
        params = self.create_params(args)

        groups, stats = self.run_scan(params)
        self.output_summary(groups, stats)

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds", file=sys.stderr)
        return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        sys.exit(app.run(argv))
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
