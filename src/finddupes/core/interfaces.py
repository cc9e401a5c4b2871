"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the duplicate search.
Structural typing keeps the walker, hasher, grouper and reporter swappable
(tests plug in counting hashers and recording reporters).

Key Components:
---------------
- HashAlgorithm: Factory for incremental hash objects (SHA-256, xxHash64).
- Hasher: Computes the content digest of one FileRecord.
- TreeWalker: Enumerates regular files under a root path.
- FileGrouper: Partitions records by size and by digest.
- Reporter: Receives progress lines, diagnostics and duplicate sets.
"""

from typing import Protocol, List, Tuple, Iterator, Optional

from finddupes.core.models import (
    FileRecord,
    SizeGroups,
    DigestGroups,
    DigestFailure,
    DuplicateSet,
)


# ===== Interfaces =====

class HashObject(Protocol):
    """The subset of the hashlib object API the hasher relies on."""
    def update(self, data: bytes) -> None: ...
    def hexdigest(self) -> str: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Returns a fresh incremental hash object so content can be fed in chunks.
    """

    @staticmethod
    def new() -> HashObject:
        ...


class Hasher(Protocol):
    """Interface for computing the content digest of a file."""
    def compute_digest(self, record: FileRecord) -> str: ...


class TreeWalker(Protocol):
    """
    Interface for walking a root path.

    Methods:
        walk: Lazily yields one FileRecord per reachable regular file.
    """
    errors: int

    def walk(self, root: str) -> Iterator[FileRecord]:
        ...


class FileGrouper(Protocol):
    """
    Interface for grouping records by size or by content digest.
    """
    def group_by_size(self, records: Iterator[FileRecord],
                      groups: Optional[SizeGroups] = None) -> SizeGroups:
        """Fold records into size buckets (encounter order preserved)."""
        ...

    def candidate_buckets(self, groups: SizeGroups) -> List[Tuple[int, List[FileRecord]]]:
        """Buckets that could hold a duplicate (2+ members)."""
        ...

    def group_by_digest(self, records: List[FileRecord]) -> Tuple[DigestGroups, List[DigestFailure]]:
        """Group one bucket by digest, collecting per-file failures."""
        ...


class Reporter(Protocol):
    """
    Receives everything the scan has to say, in order.
    """
    def symlink_skipped(self, path: str) -> None: ...
    def directory_entered(self, path: str) -> None: ...
    def entry_error(self, path: str, error: OSError) -> None: ...
    def digest_error(self, failure: DigestFailure) -> None: ...
    def duplicate_set(self, dup: DuplicateSet) -> None: ...
