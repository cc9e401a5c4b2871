"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for the two-stage (size → content digest) duplicate search.
"""

from dataclasses import dataclass, field
from typing import List, Dict
from enum import Enum

from finddupes.utils.convert_utils import ConvertUtils


# =============================
# Enums
# =============================

class HashAlgorithmName(Enum):
    """
    Content digest used to confirm duplicates inside a size bucket.
    """
    SHA256 = "sha256"
    XXHASH = "xxhash"

    @property
    def display_name(self) -> str:
        """Human-readable name for help text and summaries."""
        mapping = {
            HashAlgorithmName.SHA256: "SHA-256",
            HashAlgorithmName.XXHASH: "xxHash64",
        }
        return mapping.get(self, self.value)

    @property
    def description(self) -> str:
        mapping = {
            HashAlgorithmName.SHA256:
                "Cryptographic SHA-256 of the full content (default)",
            HashAlgorithmName.XXHASH:
                "Non-cryptographic xxHash64 of the full content (faster)",
        }
        return mapping.get(self, self.value)

    def __repr__(self) -> str:
        return self.value


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class FileRecord:
    """
    One regular file found by the walker.
    `display_path` is the path as encountered (used in reports),
    `location` is the absolute path used to reopen the file for hashing.
    """
    display_path: str
    location: str
    size: int  # in bytes, measured during the walk

    def __repr__(self):
        return f"<FileRecord path={self.display_path}, size={self.size}>"


# Size (bytes) → records of that size, in encounter order
SizeGroups = Dict[int, List[FileRecord]]

# Uppercase hex digest → records of one size bucket sharing it
DigestGroups = Dict[str, List[FileRecord]]


@dataclass
class DigestFailure:
    """A record whose content could not be digested."""
    record: FileRecord
    error: OSError

    def __repr__(self):
        return f"<DigestFailure path={self.record.display_path}, error={self.error}>"


@dataclass
class DuplicateSet:
    """
    A group of byte-identical files: same size, same content digest.

    `similes` is the number of files in the same size bucket that are NOT
    members of this set. It counts every other member of the bucket,
    including files that failed to digest and members of sibling sets,
    so two sets from one bucket each count the other.
    """
    size: int
    digest: str
    similes: int
    files: List[FileRecord]

    @property
    def paths(self) -> List[str]:
        return [f.display_path for f in self.files]

    @property
    def duplicate_count(self) -> int:
        """How many files are in this set."""
        return len(self.files)

    @property
    def wasted_bytes(self) -> int:
        """Bytes that a single kept copy would free."""
        return self.size * max(0, self.duplicate_count - 1)

    def __repr__(self):
        return f"<DuplicateSet size={self.size}, count={len(self.files)}, similes={self.similes}>"


@dataclass
class BucketResolution:
    """
    Buffered outcome of resolving one size bucket.
    Produced by a single worker; reported by the resolver in bucket order.
    """
    size: int
    member_count: int
    digests_computed: int = 0
    failures: List[DigestFailure] = field(default_factory=list)
    duplicate_sets: List[DuplicateSet] = field(default_factory=list)


@dataclass
class ResolveStats:
    """
    Counters collected during one scan.
    """
    roots: int = 0
    files_scanned: int = 0
    walk_errors: int = 0
    size_buckets: int = 0
    candidate_buckets: int = 0
    digests_computed: int = 0
    digest_errors: int = 0
    duplicate_sets: int = 0
    duplicate_files: int = 0
    wasted_bytes: int = 0
    total_time: float = 0.0

    def reset_resolution(self) -> None:
        """Clears the per-resolve counters so resolving twice does not double them."""
        self.candidate_buckets = 0
        self.digests_computed = 0
        self.digest_errors = 0
        self.duplicate_sets = 0
        self.duplicate_files = 0
        self.wasted_bytes = 0

    def add_bucket(self, resolution: BucketResolution) -> None:
        self.candidate_buckets += 1
        self.digests_computed += resolution.digests_computed
        self.digest_errors += len(resolution.failures)
        for dup in resolution.duplicate_sets:
            self.duplicate_sets += 1
            self.duplicate_files += dup.duplicate_count
            self.wasted_bytes += dup.wasted_bytes

    def print_summary(self) -> str:
        lines = [
            "📊 Scan Statistics:",
            f"Total Execution Time: {self.total_time:.3f}s\n",
            f"Roots: {self.roots}",
            f"Files scanned: {self.files_scanned} ({self.walk_errors} walk errors)",
            f"Size buckets: {self.size_buckets} ({self.candidate_buckets} with 2+ files)",
            f"Digests computed: {self.digests_computed} ({self.digest_errors} failed)",
            f"Duplicate sets: {self.duplicate_sets} ({self.duplicate_files} files)",
            f"Reclaimable space: {ConvertUtils.bytes_to_human(self.wasted_bytes)}",
        ]
        return "\n".join(lines)


"""
DTO for scan parameters with built-in validation.
"""

class ResolverConfig:
    DEFAULT_CHUNK_SIZE = 64 * 1024  # Read size for streaming digests; does not affect results
    DEFAULT_JOBS = 1


@dataclass
class ScanParams:
    """Parameters for one scan with validation."""
    roots: List[str] = field(default_factory=list)
    algorithm: HashAlgorithmName = HashAlgorithmName.SHA256
    chunk_size: int = ResolverConfig.DEFAULT_CHUNK_SIZE
    jobs: int = ResolverConfig.DEFAULT_JOBS

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        # No roots means "scan the current directory"
        if not self.roots:
            self.roots = ["."]

        if any(not root for root in self.roots):
            raise ValueError("Root path cannot be empty")

        if self.chunk_size <= 0:
            raise ValueError("Chunk size must be positive")

        if self.jobs < 1:
            raise ValueError("Number of jobs must be at least 1")
