"""
finddupes — find byte-identical files across directory trees.

Core features:
- Two-stage search: size buckets first, content digest (SHA-256) only inside buckets of 2+ files
- Symbolic links are never followed inside a tree
- Several roots share one set of buckets, so duplicates are found across trees
- Report-only: nothing is deleted, moved or linked
"""

# Get version
try:
    from importlib.metadata import version as _version, PackageNotFoundError
    __version__ = _version("finddupes")
except PackageNotFoundError:
    # Running from a source checkout without installation
    __version__ = "0.0.0+unknown"

# Public API — only what users should import directly
from finddupes.commands import ScanCommand
from finddupes.core import (
    ScanParams, HashAlgorithmName, FileRecord, DuplicateSet, ResolveStats, DuplicateResolver)
from finddupes.utils.convert_utils import ConvertUtils
from finddupes.services import ReportService, ConsoleReporter, NullReporter

__all__ = [
    "ScanCommand",
    "ScanParams",
    "HashAlgorithmName",
    "FileRecord",
    "DuplicateSet",
    "ResolveStats",
    "DuplicateResolver",
    "ConvertUtils",
    "ReportService",
    "ConsoleReporter",
    "NullReporter",
    "__version__",
]
