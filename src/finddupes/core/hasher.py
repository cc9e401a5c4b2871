"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements streaming content digests for FileRecord objects with pluggable hash algorithms.

Content is fed to the algorithm in fixed-size chunks, so memory use does not
grow with file size. The chunk size never changes the resulting digest.
"""

import hashlib
import logging

import xxhash

from finddupes.core.models import FileRecord, HashAlgorithmName, ResolverConfig
from finddupes.core.interfaces import Hasher, HashAlgorithm, HashObject

logger = logging.getLogger(__name__)


# Use the same way to implement and use any other hashing algorithm
class Sha256AlgorithmImpl(HashAlgorithm):
    @staticmethod
    def new() -> HashObject:
        return hashlib.sha256()


class XXHashAlgorithmImpl(HashAlgorithm):
    @staticmethod
    def new() -> HashObject:
        return xxhash.xxh64()


_ALGORITHMS = {
    HashAlgorithmName.SHA256: Sha256AlgorithmImpl,
    HashAlgorithmName.XXHASH: XXHashAlgorithmImpl,
}


def algorithm_for(name: HashAlgorithmName) -> HashAlgorithm:
    """Return the algorithm implementation for a HashAlgorithmName."""
    try:
        return _ALGORITHMS[name]()
    except KeyError:
        raise ValueError(f"Unsupported hash algorithm: {name!r}")


class HasherImpl(Hasher):
    """
    A hasher implementation that supports any algorithm via the HashAlgorithm interface.
    Reads the file at `record.location` in `chunk_size` pieces.
    """

    def __init__(self, algorithm: HashAlgorithm = None, chunk_size: int = ResolverConfig.DEFAULT_CHUNK_SIZE):
        if chunk_size <= 0:
            raise ValueError("Chunk size must be positive")
        self.algorithm = algorithm or Sha256AlgorithmImpl()
        self.chunk_size = chunk_size

    def compute_digest(self, record: FileRecord) -> str:
        """
        Computes the uppercase hex digest of the full file content.

        Raises:
            OSError: If the file vanished or cannot be read.
        """
        digest = self.algorithm.new()
        with open(record.location, 'rb') as f:
            while True:
                chunk = f.read(self.chunk_size)
                if not chunk:
                    break
                digest.update(chunk)
        result = digest.hexdigest().upper()
        logger.debug(f"Digest of {record.display_path}: {result}")
        return result
