"""Report formatting and digest verification.

Verification compares the supplied string against every computed digest by
exact, case-sensitive equality.  When nothing matches, the supplied string's
length is used to guess which algorithm the caller meant:

    32 -> md5, 40 -> sha1, 64 -> sha256, 128 -> sha512

This is a heuristic.  A 32-character string that was never an MD5 digest is
still reported as an MD5 mismatch, and a non-hex string of a known length
simply never matches.
"""

from __future__ import annotations

from dataclasses import dataclass

from chksum.checksum import ALGORITHMS, HEX_LENGTHS, DigestSet
from chksum.errors import UnrecognizedDigestFormat, VerificationMismatch

_ALGORITHM_BY_LENGTH = {length: name for name, length in HEX_LENGTHS.items()}


@dataclass(frozen=True)
class Match:
    """A supplied digest that equals one of the computed digests."""

    algorithm: str
    digest: str

    def __str__(self) -> str:
        return f"{self.digest}:{self.algorithm} OK!"


def format_report(digests: DigestSet, filename: str) -> str:
    """One ``<name>sum: <hex>  <filename>`` line per algorithm, newline-terminated."""
    return "".join(f"{name}sum: {hexdigest}  {filename}\n" for name, hexdigest in digests.items())


def classify_length(target: str) -> str | None:
    """Algorithm whose hex digest width equals ``len(target)``, or None."""
    return _ALGORITHM_BY_LENGTH.get(len(target))


def verify(target: str, digests: DigestSet) -> Match:
    """Check *target* against the computed digests.

    Returns:
        Match for the first algorithm (in ``ALGORITHMS`` order) whose digest
        equals *target*.

    Raises:
        VerificationMismatch: No digest matched and the length of *target*
            points at an algorithm.
        UnrecognizedDigestFormat: No digest matched and the length of
            *target* fits none of the algorithms.
    """
    for name, hexdigest in digests.items():
        if target == hexdigest:
            return Match(algorithm=name, digest=hexdigest)

    algorithm = classify_length(target)
    if algorithm is None:
        raise UnrecognizedDigestFormat(target, ALGORITHMS)
    raise VerificationMismatch(algorithm, expected=target, actual=digests.get(algorithm))
