"""
Integration tests for ScanCommand — the orchestration layer between CLI and core.
Verifies correct wiring of walker → grouper → resolver with reporting and stats.
"""
import pytest

from finddupes import ScanCommand, ScanParams, HashAlgorithmName, NullReporter


class TestScanCommand:
    """Test command orchestration logic."""

    def test_execute_returns_sets_and_stats(self, test_files, temp_dir):
        params = ScanParams(roots=[str(temp_dir)])

        groups, stats = ScanCommand().execute(params, reporter=NullReporter())

        assert len(groups) == 2
        assert stats.files_scanned == 7
        assert stats.duplicate_sets == 2
        assert stats.total_time >= 0

    def test_execute_prints_report_by_default(self, temp_dir, capsys):
        (temp_dir / "a.txt").write_bytes(b"hello")
        (temp_dir / "b.txt").write_bytes(b"hello")

        ScanCommand().execute(ScanParams(roots=[str(temp_dir)]))

        out = capsys.readouterr().out
        assert "These files are identical (size 5, hash " \
               "2CF24DBA5FB0A30E26E83B2AC5B9E29E1B161E5C1FA7425E73043362938B9824) with 0 similes:" in out
        assert f"\t{temp_dir / 'a.txt'}" in out
        assert f"\t{temp_dir / 'b.txt'}" in out

    def test_execute_with_xxhash(self, test_files, temp_dir):
        params = ScanParams(roots=[str(temp_dir)], algorithm=HashAlgorithmName.XXHASH)

        groups, _ = ScanCommand().execute(params, reporter=NullReporter())

        assert len(groups) == 2
        assert all(len(g.digest) == 16 for g in groups)

    def test_execute_across_roots_and_missing_root(self, temp_dir, capsys):
        """A missing root is reported; remaining roots are still scanned together."""
        left = temp_dir / "left"
        right = temp_dir / "right"
        left.mkdir()
        right.mkdir()
        (left / "x").write_bytes(b"same bytes")
        (right / "y").write_bytes(b"same bytes")
        missing = temp_dir / "missing"

        groups, stats = ScanCommand().execute(ScanParams(roots=[str(left), str(missing), str(right)]))

        assert len(groups) == 1
        assert groups[0].paths == [str(left / "x"), str(right / "y")]
        assert stats.walk_errors == 1
        assert f"Error: {missing}:" in capsys.readouterr().out

    def test_execute_in_parallel(self, test_files, temp_dir):
        params = ScanParams(roots=[str(temp_dir)], jobs=3)

        groups, stats = ScanCommand().execute(params, reporter=NullReporter())

        assert len(groups) == 2
        assert stats.candidate_buckets == 2


class TestScanParams:

    def test_defaults_to_current_directory(self):
        assert ScanParams().roots == ["."]

    def test_rejects_invalid_jobs(self):
        with pytest.raises(ValueError, match="at least 1"):
            ScanParams(jobs=0)

    def test_rejects_invalid_chunk_size(self):
        with pytest.raises(ValueError, match="Chunk size must be positive"):
            ScanParams(chunk_size=0)

    def test_rejects_empty_root(self):
        with pytest.raises(ValueError, match="Root path cannot be empty"):
            ScanParams(roots=["/tmp", ""])
