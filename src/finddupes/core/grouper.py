"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/grouper.py
Implements the two partition passes of the duplicate search:
size buckets over the whole scan, digest groups inside one size bucket.
"""

import logging
from typing import List, Tuple, Iterable, Optional, Callable, Any, Dict

from finddupes.core.interfaces import FileGrouper, Hasher
from finddupes.core.models import FileRecord, SizeGroups, DigestGroups, DigestFailure
from finddupes.core.hasher import HasherImpl

logger = logging.getLogger(__name__)


class FileGrouperImpl(FileGrouper):
    """
    A concrete implementation of FileGrouper.
    Uses an injected Hasher instance for flexibility and testability.
    """

    def __init__(self, hasher: Hasher = None):
        self.hasher = hasher or HasherImpl()

    def group_by_size(self, records: Iterable[FileRecord],
                      groups: Optional[SizeGroups] = None) -> SizeGroups:
        """
        Folds records into size buckets.
        Passing an existing `groups` dict extends it, which is how several roots share buckets.
        """
        if groups is None:
            groups = {}
        for record in records:
            groups.setdefault(record.size, []).append(record)
        return groups

    @staticmethod
    def candidate_buckets(groups: SizeGroups) -> List[Tuple[int, List[FileRecord]]]:
        """Returns (size, records) for every bucket with 2+ files; a lone file has nothing to match."""
        return [(size, records) for size, records in groups.items() if len(records) >= 2]

    def group_by_digest(self, records: List[FileRecord]) -> Tuple[DigestGroups, List[DigestFailure]]:
        """Groups one size bucket by full content digest."""
        return self._group_by(records, self.hasher.compute_digest)

    @staticmethod
    def _group_by(records: List[FileRecord],
                  key_func: Callable[[FileRecord], Any]) -> Tuple[Dict[Any, List[FileRecord]], List[DigestFailure]]:
        """
        Helper method to group records by any computed key.
        Args:
            records: Records to group
            key_func: Function that computes a hashable key from a FileRecord
        Returns:
            (groups in first-seen key order, records whose key could not be computed)
        """
        groups: Dict[Any, List[FileRecord]] = {}
        failures: List[DigestFailure] = []
        for record in records:
            try:
                key = key_func(record)
            except OSError as e:
                logger.debug(f"Could not digest {record.display_path}: {e}")
                failures.append(DigestFailure(record=record, error=e))
                continue
            groups.setdefault(key, []).append(record)

        if failures:
            logger.debug(f"Skipped {len(failures)} files due to digest errors")

        return groups, failures
