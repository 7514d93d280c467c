#!/usr/bin/env python3
"""Command-line entry point for chksum.

Usage:
    # Print md5/sha1/sha256/sha512 of a file
    chksum path/to/file

    # Check a file against a known digest (algorithm inferred from length)
    chksum path/to/file 9e107d9d372bb6826bd81d3542a419d6
"""

from __future__ import annotations

import argparse
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import TextIO

from chksum import terminal
from chksum.checksum import digest_file
from chksum.config import COLOR_MODES, ChksumConfig, config_path, create_default, load_config
from chksum.errors import (
    ArgumentError,
    ChksumError,
    UnrecognizedDigestFormat,
    VerificationMismatch,
)
from chksum.verify import Match, format_report, verify

try:
    VERSION = version("chksum")
except PackageNotFoundError:
    # running from a source checkout without an install
    VERSION = "0+unknown"

EXIT_OK = 0
EXIT_ERR = 1

USAGE = """\
A small tool for checking/generating md5/sha1/sha256/sha512 checksums of a file.
Usage:
  chksum <file> <checksum>
  chksum <file>
  chksum --init-config [--config PATH]
  chksum (-h | --help)
Options:
  -h --help            Show this message.
  -V --version         Show version.
  -v --verbose         Log diagnostics to stderr.
  --color MODE         Colour OK/NG lines: auto, always, or never.
  --no-progress        Do not show the progress line.
  --config PATH        Read settings from PATH instead of the default config.yaml.
  --init-config        Write a commented starter config.yaml (never overwrites)."""

logger = logging.getLogger("chksum")

_log_handler: logging.Handler | None = None


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting the process."""

    def error(self, message: str) -> None:  # type: ignore[override]
        raise ArgumentError(message, USAGE)


def _build_parser() -> argparse.ArgumentParser:
    parser = _Parser(prog="chksum", add_help=False)
    parser.add_argument("file", nargs="?")
    parser.add_argument("checksum", nargs="?")
    parser.add_argument("-h", "--help", action="store_true")
    parser.add_argument("-V", "--version", action="store_true")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("--color", choices=COLOR_MODES)
    parser.add_argument("--no-progress", action="store_true")
    parser.add_argument("--config", type=Path)
    parser.add_argument("--init-config", action="store_true")
    return parser


def _configure_logging(level: int, stream: TextIO) -> None:
    """Route the chksum logger to *stream*, replacing any earlier handler."""
    global _log_handler
    if _log_handler is not None:
        logger.removeHandler(_log_handler)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s", datefmt="%H:%M:%S")
    )
    logger.addHandler(handler)
    logger.setLevel(level)
    _log_handler = handler


def resolve_config(args: argparse.Namespace) -> ChksumConfig:
    """Config file settings with command-line flags applied on top."""
    config = load_config(args.config)
    return config.with_overrides(
        color=args.color,
        progress=False if args.no_progress else None,
        log_level="DEBUG" if args.verbose else None,
    )


def check_file(
    path: str,
    target: str | None = None,
    config: ChksumConfig | None = None,
    progress_stream: TextIO | None = None,
) -> str | Match:
    """Hash *path* and either report all digests or verify *target*.

    Returns:
        The multi-line report when *target* is None, otherwise the Match.

    Raises:
        FileReadError: The file could not be read.
        VerificationMismatch: *target* does not match.
        UnrecognizedDigestFormat: *target* has no known digest length.
    """
    config = config or ChksumConfig()
    show_progress = progress_stream is not None and config.progress
    with terminal.progress(progress_stream or sys.stdout, enabled=show_progress):
        digests = digest_file(path, chunk_size=config.chunk_size)

    if target is None:
        logger.debug("Generating checksums for %s", path)
        return format_report(digests, path)
    logger.debug("Verifying %s against a %d-character digest", path, len(target))
    return verify(target, digests)


def _writeln(stream: TextIO, text: str) -> None:
    stream.write(text if text.endswith("\n") else text + "\n")


def run(
    argv: list[str] | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
) -> int:
    """Run chksum with *argv* (without the program name). Returns the exit code."""
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    try:
        args = _build_parser().parse_args(argv)
        if args.help:
            _writeln(stdout, USAGE)
            return EXIT_OK
        if args.version:
            _writeln(stdout, VERSION)
            return EXIT_OK
        if args.init_config:
            path = create_default(args.config or config_path())
            _writeln(stdout, f"Config file: {path}")
            return EXIT_OK
        if args.file is None:
            raise ArgumentError("please input arguments", USAGE)
        config = resolve_config(args)
    except ChksumError as e:
        _writeln(stderr, str(e))
        return EXIT_ERR

    _configure_logging(config.log_level_number, stderr)

    progress_stream = stdout if terminal.is_tty(stdout) else None
    try:
        result = check_file(args.file, args.checksum, config, progress_stream)
    except (VerificationMismatch, UnrecognizedDigestFormat) as e:
        logger.info("Verification failed for %s", args.file)
        msg = str(e)
        _writeln(stderr, terminal.red(msg) if terminal.use_color(config.color, stderr) else msg)
        return EXIT_ERR
    except ChksumError as e:
        logger.info("Checksum failed: %s", e)
        _writeln(stderr, str(e))
        return EXIT_ERR

    if isinstance(result, Match):
        msg = str(result)
        _writeln(stdout, terminal.green(msg) if terminal.use_color(config.color, stdout) else msg)
    else:
        _writeln(stdout, result)
    return EXIT_OK


def main() -> None:
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
