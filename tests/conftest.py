"""
Shared fixtures for duplicate-search tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict, List, Tuple
import sys

# Add src/ to sys.path so 'finddupes' is importable from a source checkout
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from finddupes.core.models import DigestFailure, DuplicateSet


class RecordingReporter:
    """Reporter that keeps every event in order for assertions."""

    def __init__(self):
        self.events: List[Tuple[str, object]] = []

    def symlink_skipped(self, path: str) -> None:
        self.events.append(("symlink", path))

    def directory_entered(self, path: str) -> None:
        self.events.append(("directory", path))

    def entry_error(self, path: str, error: OSError) -> None:
        self.events.append(("entry_error", path))

    def digest_error(self, failure: DigestFailure) -> None:
        self.events.append(("digest_error", failure.record.display_path))

    def duplicate_set(self, dup: DuplicateSet) -> None:
        self.events.append(("duplicate_set", dup))

    def of_kind(self, kind: str) -> list:
        return [payload for k, payload in self.events if k == kind]


class CountingHasher:
    """Wraps a real hasher and counts digest computations."""

    def __init__(self, hasher):
        self.hasher = hasher
        self.calls: List[str] = []

    def compute_digest(self, record):
        self.calls.append(record.display_path)
        return self.hasher.compute_digest(record)


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def recorder() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def counting_hasher():
    from finddupes.core.hasher import HasherImpl
    return CountingHasher(HasherImpl())


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates controlled test files for duplicate scenarios:
    - 3 identical 1KB files (one of them in a subdirectory)
    - 2 identical 2KB files
    - 1 unique 1KB file (same size as the first set, different content)
    - 1 unique 1500B file (alone at its size, must never be hashed)
    """
    files = {}

    # Duplicate set #1 (1KB of 'A')
    content_a = b"A" * 1024
    files["dup1_a"] = temp_dir / "dup1_a.txt"
    files["dup1_b"] = temp_dir / "dup1_b.txt"
    files["dup1_a"].write_bytes(content_a)
    files["dup1_b"].write_bytes(content_a)

    # Duplicate set #2 (2KB of 'B')
    content_b = b"B" * 2048
    files["dup2_a"] = temp_dir / "dup2_a.bin"
    files["dup2_b"] = temp_dir / "dup2_b.bin"
    files["dup2_a"].write_bytes(content_b)
    files["dup2_b"].write_bytes(content_b)

    # Same size as set #1, different content (a near-miss)
    files["near_miss"] = temp_dir / "near_miss.txt"
    files["near_miss"].write_bytes(b"Z" * 1024)

    # Alone at its size
    files["unique"] = temp_dir / "unique.txt"
    files["unique"].write_bytes(b"C" * 1500)

    # Subdirectory with a member of set #1
    subdir = temp_dir / "subdir"
    subdir.mkdir()
    files["sub_dup"] = subdir / "dup_in_subdir.txt"
    files["sub_dup"].write_bytes(content_a)

    return files


@pytest.fixture
def make_symlink():
    """Returns a helper that creates a symlink, skipping the test where the OS does not allow it."""
    def _make(link: Path, target: Path) -> Path:
        try:
            link.symlink_to(target)
        except (OSError, NotImplementedError):
            pytest.skip("Symlinks not supported on this platform")
        return link
    return _make
