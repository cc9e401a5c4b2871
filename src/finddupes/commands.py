"""
Unified command orchestrator for a duplicate scan.
This is the single place that wires walker → grouper → resolver — used by the CLI
and by library callers.
"""
import time
import logging
from typing import List, Optional, Tuple

from finddupes.core.models import DuplicateSet, ResolveStats, ScanParams
from finddupes.core.interfaces import Reporter
from finddupes.core.walker import TreeWalkerImpl
from finddupes.core.hasher import HasherImpl, algorithm_for
from finddupes.core.grouper import FileGrouperImpl
from finddupes.core.resolver import DuplicateResolver
from finddupes.services.report_service import ConsoleReporter

logger = logging.getLogger(__name__)


class ScanCommand:
    """
    Orchestrates the whole scan:
    1. Build hasher, grouper, walker and resolver from ScanParams
    2. Add every root to the shared size buckets
    3. Resolve duplicates bucket by bucket

    Usage:
        params = ScanParams(roots=["~/Photos", "/mnt/backup"])
        groups, stats = ScanCommand().execute(params)

        # Silent library usage:
        groups, stats = ScanCommand().execute(params, reporter=NullReporter())
    """

    def __init__(self):
        self._resolver: Optional[DuplicateResolver] = None

    def execute(
            self,
            params: ScanParams,
            reporter: Optional[Reporter] = None
    ) -> Tuple[List[DuplicateSet], ResolveStats]:
        """
        Execute a scan with given parameters.

        Args:
            params: Validated scan parameters
            reporter: Receives progress, diagnostics and duplicate sets (console by default)

        Returns:
            Tuple of (duplicate_sets, statistics)

        Scan errors (missing roots, unreadable entries, vanished files) are reported
        through the reporter and never raised.
        """
        start_time = time.time()
        reporter = reporter or ConsoleReporter()

        hasher = HasherImpl(algorithm_for(params.algorithm), chunk_size=params.chunk_size)
        self._resolver = DuplicateResolver(
            walker=TreeWalkerImpl(reporter),
            grouper=FileGrouperImpl(hasher),
            reporter=reporter,
            jobs=params.jobs,
        )

        for root in params.roots:
            self._resolver.add(root)

        duplicate_sets = self._resolver.resolve()

        stats = self._resolver.stats
        stats.total_time = time.time() - start_time
        logger.debug(f"Scan finished in {stats.total_time:.3f}s: {len(duplicate_sets)} duplicate sets")
        return duplicate_sets, stats
