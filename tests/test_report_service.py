"""
Tests for console rendering of progress, diagnostics and duplicate sets.
"""
import io

from finddupes.core.models import FileRecord, DuplicateSet, DigestFailure
from finddupes.services.report_service import ReportService, ConsoleReporter, NullReporter


def _dup() -> DuplicateSet:
    files = [
        FileRecord(display_path="./a.txt", location="/tmp/a.txt", size=5),
        FileRecord(display_path="./b.txt", location="/tmp/b.txt", size=5),
    ]
    return DuplicateSet(size=5, digest="ABC123", similes=1, files=files)


class TestReportService:

    def test_format_duplicate_set(self):
        assert ReportService.format_duplicate_set(_dup()) == (
            "These files are identical (size 5, hash ABC123) with 1 similes:\n"
            "\t./a.txt\n"
            "\t./b.txt"
        )

    def test_format_digest_error_names_path_and_cause(self):
        record = FileRecord(display_path="./gone.txt", location="/tmp/gone.txt", size=3)
        failure = DigestFailure(record=record, error=FileNotFoundError(2, "No such file or directory"))

        line = ReportService.format_digest_error(failure)

        assert line.startswith("Error hashing ./gone.txt: ")
        assert "No such file or directory" in line


class TestConsoleReporter:

    def test_progress_lines(self):
        out = io.StringIO()
        reporter = ConsoleReporter(stream=out)

        reporter.directory_entered("./sub")
        reporter.symlink_skipped("./link")

        assert out.getvalue() == "Reading directory : ./sub\nIgnoring symlink : ./link\n"

    def test_duplicate_set_block_is_surrounded_by_blank_lines(self):
        out = io.StringIO()
        ConsoleReporter(stream=out).duplicate_set(_dup())

        assert out.getvalue() == (
            "\n"
            "These files are identical (size 5, hash ABC123) with 1 similes:\n"
            "\t./a.txt\n"
            "\t./b.txt\n"
            "\n"
        )

    def test_quiet_hides_progress_but_keeps_errors(self):
        out = io.StringIO()
        reporter = ConsoleReporter(stream=out, show_progress=False)

        reporter.directory_entered("./sub")
        reporter.symlink_skipped("./link")
        reporter.entry_error("./locked", PermissionError(13, "Permission denied"))

        assert out.getvalue() == "Error: ./locked: [Errno 13] Permission denied\n"

    def test_defaults_to_stdout(self, capsys):
        ConsoleReporter().directory_entered("./x")

        assert capsys.readouterr().out == "Reading directory : ./x\n"

    def test_null_reporter_is_silent(self, capsys):
        reporter = NullReporter()
        reporter.directory_entered("./x")
        reporter.duplicate_set(_dup())

        assert capsys.readouterr().out == ""
