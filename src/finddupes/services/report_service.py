"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/report_service.py
Console rendering of scan progress, diagnostics and duplicate sets.
"""
import sys
from typing import Optional, TextIO

from finddupes.core.interfaces import Reporter
from finddupes.core.models import DigestFailure, DuplicateSet


class ReportService:
    @staticmethod
    def format_duplicate_set(dup: DuplicateSet) -> str:
        """
        Renders one duplicate set as a header line followed by one tab-indented path per file.
        """
        lines = [
            f"These files are identical (size {dup.size}, hash {dup.digest}) "
            f"with {dup.similes} similes:"
        ]
        lines.extend(f"\t{path}" for path in dup.paths)
        return "\n".join(lines)

    @staticmethod
    def format_error(path: str, error: BaseException) -> str:
        return f"Error: {path}: {error}"

    @staticmethod
    def format_digest_error(failure: DigestFailure) -> str:
        return f"Error hashing {failure.record.display_path}: {failure.error}"


class ConsoleReporter(Reporter):
    """
    Writes everything to stdout, in the order the scan produces it.
    `show_progress=False` hides the symlink/directory lines but keeps errors and results.
    """

    def __init__(self, stream: Optional[TextIO] = None, show_progress: bool = True):
        self._stream = stream
        self.show_progress = show_progress

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys sees the output
        return self._stream or sys.stdout

    def _print(self, line: str = "") -> None:
        print(line, file=self.stream)

    def symlink_skipped(self, path: str) -> None:
        if self.show_progress:
            self._print(f"Ignoring symlink : {path}")

    def directory_entered(self, path: str) -> None:
        if self.show_progress:
            self._print(f"Reading directory : {path}")

    def entry_error(self, path: str, error: OSError) -> None:
        self._print(ReportService.format_error(path, error))

    def digest_error(self, failure: DigestFailure) -> None:
        self._print(ReportService.format_digest_error(failure))

    def duplicate_set(self, dup: DuplicateSet) -> None:
        self._print()
        self._print(ReportService.format_duplicate_set(dup))
        self._print()


class NullReporter(Reporter):
    """Discards everything; for library callers that only want the returned sets."""

    def symlink_skipped(self, path: str) -> None:
        pass

    def directory_entered(self, path: str) -> None:
        pass

    def entry_error(self, path: str, error: OSError) -> None:
        pass

    def digest_error(self, failure: DigestFailure) -> None:
        pass

    def duplicate_set(self, dup: DuplicateSet) -> None:
        pass
