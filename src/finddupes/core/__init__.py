"""
Core duplicate-search engine — walker, hasher, grouper and resolver.

This package contains the whole two-stage search:
- TreeWalkerImpl: depth-first traversal that skips symlinks and yields FileRecords
- HasherImpl + Sha256AlgorithmImpl / XXHashAlgorithmImpl: streaming content digests
- FileGrouperImpl: size buckets and per-bucket digest groups
- DuplicateResolver: collect-by-size, then confirm-by-digest per bucket
- Models: FileRecord, DuplicateSet and configuration objects

No console or CLI dependencies — suitable for library usage.
"""

from .walker import TreeWalkerImpl
from .grouper import FileGrouperImpl
from .hasher import HasherImpl, Sha256AlgorithmImpl, XXHashAlgorithmImpl, algorithm_for
from .resolver import DuplicateResolver
from .models import (
    FileRecord, DuplicateSet, DigestFailure, BucketResolution, ResolveStats,
    HashAlgorithmName, ResolverConfig, ScanParams, SizeGroups, DigestGroups)

__all__ = [
    "TreeWalkerImpl",
    "FileGrouperImpl",
    "HasherImpl",
    "Sha256AlgorithmImpl",
    "XXHashAlgorithmImpl",
    "algorithm_for",
    "DuplicateResolver",
    "FileRecord",
    "DuplicateSet",
    "DigestFailure",
    "BucketResolution",
    "ResolveStats",
    "HashAlgorithmName",
    "ResolverConfig",
    "ScanParams",
    "SizeGroups",
    "DigestGroups",
]
