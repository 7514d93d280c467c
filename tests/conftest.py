"""Shared test fixtures for chksum."""

from pathlib import Path

import pytest

SAMPLE_CONTENT = b"The quick brown fox jumps over the lazy dog\n"


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the default config path at a file that does not exist."""
    p = tmp_path / "no-such-config" / "config.yaml"
    monkeypatch.setenv("CHKSUM_CONFIG", str(p))
    return p


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """A small text file with known content."""
    p = tmp_path / "testdata.txt"
    p.write_bytes(SAMPLE_CONTENT)
    return p
