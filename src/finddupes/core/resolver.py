"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/resolver.py
Two-phase duplicate resolution: collect by size, then confirm by digest per bucket.

PHASES
------
add(root)   : Walks one root and folds its records into the shared SizeGroups.
              Several calls share the same buckets, so duplicates are found across roots.
resolve()   : Skips buckets with a single file (never hashed), digests every member
              of the remaining buckets and reports each digest group of 2+ files.

PARALLELISM
-----------
With jobs > 1 buckets are resolved on a thread pool. A worker only touches the
record list of its own bucket and returns a BucketResolution, so no locking is
needed. Reporting waits until every bucket is done and then follows bucket
order, which makes the output identical to a sequential run.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Iterator, Tuple

from finddupes.core.models import (
    FileRecord, SizeGroups, DuplicateSet, BucketResolution, ResolveStats, ResolverConfig)
from finddupes.core.interfaces import TreeWalker, FileGrouper, Reporter

logger = logging.getLogger(__name__)


class DuplicateResolver:
    """
    Owns the SizeGroups of one run and turns them into DuplicateSets.
    """

    def __init__(
            self,
            walker: TreeWalker,
            grouper: FileGrouper,
            reporter: Reporter,
            jobs: int = ResolverConfig.DEFAULT_JOBS
    ):
        if jobs < 1:
            raise ValueError("Number of jobs must be at least 1")
        self.walker = walker
        self.grouper = grouper
        self.reporter = reporter
        self.jobs = jobs
        self.size_groups: SizeGroups = {}
        self.stats = ResolveStats()

    def add(self, root: str) -> int:
        """
        Walks `root` and adds every regular file to the size buckets.
        Returns the number of records added from this root.
        """
        before = sum(len(records) for records in self.size_groups.values())
        self.grouper.group_by_size(self.walker.walk(root), self.size_groups)
        added = sum(len(records) for records in self.size_groups.values()) - before

        self.stats.roots += 1
        self.stats.files_scanned += added
        self.stats.walk_errors = self.walker.errors
        logger.debug(f"Added {added} files from {root}")
        return added

    def resolve(self) -> List[DuplicateSet]:
        """
        Confirms duplicates inside every candidate bucket and reports them.
        Returns all duplicate sets in bucket order.
        """
        candidates = self.grouper.candidate_buckets(self.size_groups)
        self.stats.reset_resolution()
        self.stats.size_buckets = len(self.size_groups)
        logger.debug(f"{len(candidates)} of {len(self.size_groups)} size buckets need hashing")

        duplicate_sets: List[DuplicateSet] = []
        for resolution in self._resolutions(candidates):
            for failure in resolution.failures:
                self.reporter.digest_error(failure)
            for dup in resolution.duplicate_sets:
                self.reporter.duplicate_set(dup)
            self.stats.add_bucket(resolution)
            duplicate_sets.extend(resolution.duplicate_sets)

        return duplicate_sets

    def _resolutions(self, candidates: List[Tuple[int, List[FileRecord]]]) -> Iterator[BucketResolution]:
        if self.jobs == 1 or len(candidates) < 2:
            for size, records in candidates:
                yield self.resolve_bucket(size, records)
            return

        with ThreadPoolExecutor(max_workers=self.jobs) as executor:
            futures = [executor.submit(self.resolve_bucket, size, records) for size, records in candidates]
            # Every bucket must finish before the first one is reported
            results = [future.result() for future in futures]
        yield from results

    def resolve_bucket(self, size: int, records: List[FileRecord]) -> BucketResolution:
        """
        Digests every member of one size bucket and builds its duplicate sets.
        Pure with respect to the resolver: nothing is reported here.
        """
        resolution = BucketResolution(size=size, member_count=len(records))
        digest_groups, failures = self.grouper.group_by_digest(records)
        resolution.failures = failures
        resolution.digests_computed = len(records) - len(failures)

        for digest, members in digest_groups.items():
            if len(members) < 2:
                continue
            resolution.duplicate_sets.append(DuplicateSet(
                size=size,
                digest=digest,
                similes=len(records) - len(members),
                files=list(members),
            ))

        logger.debug(
            f"Bucket {size}B: {len(records)} files, {len(digest_groups)} digests, "
            f"{len(resolution.duplicate_sets)} duplicate sets"
        )
        return resolution
