"""MD5/SHA-1/SHA-256/SHA-512 checksumming in a single read pass."""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

from chksum.errors import FileReadError

logger = logging.getLogger(__name__)

CHUNK_SIZE = 65536  # 64 KB read chunks

# Report and comparison order.
ALGORITHMS: tuple[str, ...] = ("md5", "sha1", "sha256", "sha512")

HEX_LENGTHS: dict[str, int] = {"md5": 32, "sha1": 40, "sha256": 64, "sha512": 128}


@dataclass(frozen=True)
class DigestSet:
    """Lowercase hex digests of one input under all four algorithms."""

    md5: str
    sha1: str
    sha256: str
    sha512: str

    def get(self, algorithm: str) -> str:
        """Digest for *algorithm* (one of ``ALGORITHMS``)."""
        if algorithm not in ALGORITHMS:
            raise KeyError(algorithm)
        return getattr(self, algorithm)

    def items(self) -> Iterator[tuple[str, str]]:
        """Yield ``(algorithm, hexdigest)`` pairs in ``ALGORITHMS`` order."""
        for name in ALGORITHMS:
            yield name, getattr(self, name)


def _new_hashers() -> dict:
    return {name: hashlib.new(name) for name in ALGORITHMS}


def _finish(hashers: dict) -> DigestSet:
    return DigestSet(**{name: h.hexdigest() for name, h in hashers.items()})


def digest_stream(stream: BinaryIO, chunk_size: int = CHUNK_SIZE, name: str = "<stream>") -> DigestSet:
    """Hash a binary stream with all four algorithms in one pass.

    The stream is read to EOF and is not closed.  Every chunk is fed to
    each accumulator before the next read.

    Args:
        stream: Readable binary file object.
        chunk_size: Bytes per read.
        name: Label used in error messages.

    Returns:
        DigestSet of lowercase hex digests.

    Raises:
        FileReadError: If reading the stream fails.
        ValueError: If chunk_size is not positive.
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    hashers = _new_hashers()
    total = 0
    try:
        while True:
            chunk = stream.read(chunk_size)
            if not chunk:
                break
            for h in hashers.values():
                h.update(chunk)
            total += len(chunk)
    except OSError as e:
        raise FileReadError(name, e) from e

    logger.debug("Hashed %d bytes from %s", total, name)
    return _finish(hashers)


def digest_file(path: Path | str, chunk_size: int = CHUNK_SIZE) -> DigestSet:
    """Compute all four digests of a file.

    Raises:
        FileReadError: If the file cannot be opened (missing, directory,
            permission denied) or a read fails.
    """
    try:
        f = open(path, "rb")
    except OSError as e:
        raise FileReadError(str(path), e) from e
    with f:
        return digest_stream(f, chunk_size=chunk_size, name=str(path))


def digest_bytes(data: bytes) -> DigestSet:
    """Compute all four digests of in-memory bytes."""
    hashers = _new_hashers()
    for h in hashers.values():
        h.update(data)
    return _finish(hashers)
