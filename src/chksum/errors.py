"""Exception hierarchy for chksum.

Every error message is meant to be shown to the user as-is: the CLI writes
``str(err)`` to stderr and exits with status 1.
"""

from __future__ import annotations


class ChksumError(Exception):
    """Base class for all chksum errors."""


class ArgumentError(ChksumError):
    """Command-line input is missing or malformed."""

    def __init__(self, detail: str, usage: str = ""):
        msg = detail
        if usage:
            msg += f"\n\n{usage}"
        super().__init__(msg)
        self.detail = detail
        self.usage = usage


class FileReadError(ChksumError, OSError):
    """The input file could not be opened or read to the end.

    Also an OSError, so callers that catch OSError around file access see it.
    The original exception is kept in ``cause``.
    """

    def __init__(self, path: str, cause: BaseException):
        reason = getattr(cause, "strerror", None) or str(cause) or type(cause).__name__
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.cause = cause


class VerificationMismatch(ChksumError):
    """The supplied digest does not match the digest computed for its algorithm.

    ``algorithm`` is inferred from the length of the supplied digest, so it is
    a guess about what the caller intended rather than a proven identity.
    """

    def __init__(self, algorithm: str, expected: str, actual: str):
        super().__init__(f"{actual}:{algorithm} NG!")
        self.algorithm = algorithm
        self.expected = expected
        self.actual = actual


class UnrecognizedDigestFormat(ChksumError):
    """The supplied digest length matches none of the supported algorithms."""

    def __init__(self, target: str, algorithms: tuple[str, ...] = ("md5", "sha1", "sha256", "sha512")):
        super().__init__(f"{'/'.join(algorithms)} NG!")
        self.target = target
        self.algorithms = algorithms


class ConfigError(ChksumError):
    """The configuration file is invalid."""

    def __init__(self, detail: str, hint: str = ""):
        msg = f"Configuration error: {detail}."
        if hint:
            msg += f" {hint}"
        super().__init__(msg)
        self.detail = detail
        self.hint = hint
