"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/walker.py
Implements the depth-first tree walk that feeds the size buckets.
Features:
- Accepts a file or a directory as root
- Never follows symbolic links found inside the tree
- Uses an explicit stack of directory listings (no recursion limit on deep trees)
- Each listing is read and closed at once, so depth does not hold file descriptors
- Per-entry and per-directory errors are reported and skipped, never raised
"""

import os
import stat
import logging
from typing import Iterator, List, Optional, Tuple

from finddupes.core.models import FileRecord
from finddupes.core.interfaces import TreeWalker, Reporter

logger = logging.getLogger(__name__)

# (directory path, remaining entries of its listing)
_StackFrame = Tuple[str, Iterator[os.DirEntry]]


class TreeWalkerImpl(TreeWalker):
    """
    Walks one root at a time and yields a FileRecord for every regular file.

    Entries are visited in directory-listing order; a subdirectory is fully
    walked before its later siblings, like a recursive descent.

    Attributes:
        reporter: Receives symlink/directory progress and error diagnostics
        errors: Number of entry and listing errors reported so far
    """

    def __init__(self, reporter: Reporter):
        self.reporter = reporter
        self.errors = 0

    def walk(self, root: str) -> Iterator[FileRecord]:
        """
        Lazily yields records under `root`.
        The root itself is followed even if it is a symlink: the user named it explicitly.
        """
        root = os.fspath(root)
        logger.debug(f"Walking root: {root}")

        try:
            root_stat = os.stat(root)
        except OSError as e:
            self._report_error(root, e)
            return

        if stat.S_ISREG(root_stat.st_mode):
            yield self._make_record(root, root_stat.st_size)
            return

        if not stat.S_ISDIR(root_stat.st_mode):
            logger.debug(f"Skipping root that is neither file nor directory: {root}")
            return

        stack: List[_StackFrame] = []
        self._push(stack, root)
        while stack:
            entry = next(stack[-1][1], None)
            if entry is None:
                stack.pop()
                continue

            record = self._process_entry(entry, stack)
            if record is not None:
                yield record

    def _process_entry(self, entry: os.DirEntry, stack: List[_StackFrame]) -> Optional[FileRecord]:
        """
        Classifies one directory entry.
        Returns a FileRecord for regular files, None otherwise (directories are pushed on the stack).
        """
        try:
            if entry.is_symlink():
                self.reporter.symlink_skipped(entry.path)
                return None

            if entry.is_dir(follow_symlinks=False):
                self.reporter.directory_entered(entry.path)
                self._push(stack, entry.path)
                return None

            if entry.is_file(follow_symlinks=False):
                size = entry.stat(follow_symlinks=False).st_size
                return self._make_record(entry.path, size)
        except OSError as e:
            self._report_error(entry.path, e)
            return None

        logger.debug(f"Skipping special file: {entry.path}")
        return None

    def _push(self, stack: List[_StackFrame], dir_path: str) -> None:
        """
        Reads the whole listing of `dir_path`.
        An unreadable directory is reported and skipped; a listing that fails
        partway is reported and the entries read before the failure are kept.
        """
        entries: List[os.DirEntry] = []
        try:
            with os.scandir(dir_path) as it:
                for entry in it:
                    entries.append(entry)
        except OSError as e:
            self._report_error(dir_path, e)
        if entries:
            stack.append((dir_path, iter(entries)))

    @staticmethod
    def _make_record(path: str, size: int) -> FileRecord:
        return FileRecord(
            display_path=path,
            location=os.path.abspath(path),
            size=size,
        )

    def _report_error(self, path: str, error: OSError) -> None:
        self.errors += 1
        logger.debug(f"Walk error at {path}: {error}")
        self.reporter.entry_error(path, error)
