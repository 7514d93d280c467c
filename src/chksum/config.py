"""chksum configuration: loads and validates an optional config.yaml.

The file lives at ``$CHKSUM_CONFIG`` when set, otherwise at
``$XDG_CONFIG_HOME/chksum/config.yaml`` (``~/.config`` when XDG is unset).
A missing file is not an error: every setting has a default, and command-line
flags are applied on top with ``ChksumConfig.with_overrides``.

If no config exists, create_default() writes a commented starter file.
"""

from __future__ import annotations

import dataclasses
import logging
import os
from dataclasses import dataclass
from pathlib import Path

import yaml

from chksum.checksum import CHUNK_SIZE
from chksum.errors import ConfigError

COLOR_MODES = ("auto", "always", "never")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass(frozen=True)
class ChksumConfig:
    """Settings for one invocation.  Immutable once built."""

    chunk_size: int = CHUNK_SIZE
    color: str = "auto"
    progress: bool = True
    log_level: str = "WARNING"

    def with_overrides(self, **overrides: object) -> ChksumConfig:
        """Copy with the given fields replaced.  ``None`` values are ignored."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        if not changes:
            return self
        return dataclasses.replace(self, **changes)

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)


_DEFAULT_CONFIG = """\
# chksum configuration
# Every key is optional; delete a line to fall back to its default.

# Bytes read from the file per chunk (all four hashes are updated per chunk).
chunk_size: 65536

# Colour OK/NG lines: auto (only on a terminal), always, or never.
color: auto

# Show "calculating checksum..." while hashing (only on a terminal).
progress: true

# Diagnostic logging on stderr: DEBUG, INFO, WARNING, or ERROR.
log_level: WARNING
"""


def config_path() -> Path:
    """Default location of config.yaml."""
    env = os.environ.get("CHKSUM_CONFIG")
    if env:
        return Path(env)
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "chksum" / "config.yaml"


def create_default(path: Path) -> Path:
    """Write a starter config.yaml if it doesn't exist. Returns the path."""
    if not path.exists():
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(_DEFAULT_CONFIG, encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot write {path}: {e}") from e
    return path


def load_config(path: Path | None = None) -> ChksumConfig:
    """Load and validate config.yaml. Returns defaults if file is missing."""
    p = path if path is not None else config_path()
    if not p.exists():
        return ChksumConfig()

    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {p}: {e}") from e

    try:
        data = yaml.safe_load(raw) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {p}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {p}, got {type(data).__name__}")

    bad_keys = [k for k in data if not isinstance(k, str)]
    if bad_keys:
        raise ConfigError(
            f"Keys in {p} must be strings, got {', '.join(repr(k) for k in bad_keys)}",
            hint="Valid keys: chunk_size, color, progress, log_level.",
        )

    unknown = sorted(set(data) - {f.name for f in dataclasses.fields(ChksumConfig)})
    if unknown:
        raise ConfigError(
            f"Unknown key(s) in {p}: {', '.join(map(str, unknown))}",
            hint="Valid keys: chunk_size, color, progress, log_level.",
        )

    chunk_size = data.get("chunk_size", CHUNK_SIZE)
    # bool is an int subclass; reject it explicitly
    if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
        raise ConfigError(f"'chunk_size' must be a positive integer, got {chunk_size!r}")

    color = str(data.get("color", "auto")).lower()
    if color not in COLOR_MODES:
        raise ConfigError(
            f"'color' must be one of {', '.join(COLOR_MODES)}, got {data.get('color')!r}"
        )

    progress = data.get("progress", True)
    if not isinstance(progress, bool):
        raise ConfigError(f"'progress' must be true or false, got {progress!r}")

    log_level = str(data.get("log_level", "WARNING")).upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(
            f"'log_level' must be one of {', '.join(LOG_LEVELS)}, got {data.get('log_level')!r}"
        )

    return ChksumConfig(
        chunk_size=chunk_size,
        color=color,
        progress=progress,
        log_level=log_level,
    )
