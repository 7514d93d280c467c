"""Tests for chksum.config: YAML config loading, validation, and defaults."""

import dataclasses

import pytest

from chksum.checksum import CHUNK_SIZE
from chksum.config import (
    ChksumConfig,
    _DEFAULT_CONFIG,
    config_path,
    create_default,
    load_config,
)
from chksum.errors import ConfigError


def _write(tmp_path, text):
    p = tmp_path / "config.yaml"
    p.write_text(text, encoding="utf-8")
    return p


class TestChksumConfig:
    def test_defaults(self):
        cfg = ChksumConfig()
        assert cfg.chunk_size == CHUNK_SIZE
        assert cfg.color == "auto"
        assert cfg.progress is True
        assert cfg.log_level == "WARNING"

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ChksumConfig().color = "never"  # type: ignore[misc]

    def test_with_overrides(self):
        cfg = ChksumConfig().with_overrides(color="never", progress=False)
        assert cfg.color == "never"
        assert cfg.progress is False
        assert cfg.chunk_size == CHUNK_SIZE

    def test_with_overrides_ignores_none(self):
        base = ChksumConfig(color="always")
        assert base.with_overrides(color=None, log_level=None) is base

    def test_log_level_number(self):
        assert ChksumConfig(log_level="DEBUG").log_level_number == 10


class TestConfigPath:
    def test_env_override(self, tmp_path, monkeypatch):
        monkeypatch.setenv("CHKSUM_CONFIG", str(tmp_path / "x.yaml"))
        assert config_path() == tmp_path / "x.yaml"

    def test_xdg(self, tmp_path, monkeypatch):
        monkeypatch.delenv("CHKSUM_CONFIG", raising=False)
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert config_path() == tmp_path / "chksum" / "config.yaml"


class TestCreateDefault:
    def test_creates_file(self, tmp_path):
        p = create_default(tmp_path / "chksum" / "config.yaml")
        assert p.exists()
        assert "chunk_size:" in p.read_text()

    def test_does_not_overwrite(self, tmp_path):
        p = _write(tmp_path, "color: never\n")
        create_default(p)
        assert p.read_text() == "color: never\n"

    def test_default_file_loads_to_defaults(self, tmp_path):
        p = create_default(tmp_path / "config.yaml")
        assert load_config(p) == ChksumConfig()


class TestLoadConfig:
    def test_missing_file_returns_defaults(self, tmp_path):
        assert load_config(tmp_path / "nonexistent.yaml") == ChksumConfig()

    def test_default_path_missing(self):
        # conftest points CHKSUM_CONFIG at a file that does not exist
        assert load_config() == ChksumConfig()

    def test_default_path_from_env(self, isolated_config):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text("color: always\n", encoding="utf-8")
        assert load_config().color == "always"

    def test_empty_file(self, tmp_path):
        assert load_config(_write(tmp_path, "")) == ChksumConfig()

    def test_all_keys(self, tmp_path):
        p = _write(tmp_path, "chunk_size: 1024\ncolor: Never\nprogress: false\nlog_level: debug\n")
        cfg = load_config(p)
        assert cfg == ChksumConfig(chunk_size=1024, color="never", progress=False, log_level="DEBUG")

    def test_invalid_yaml(self, tmp_path):
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(_write(tmp_path, "color: [unclosed\n"))

    def test_not_a_mapping(self, tmp_path):
        with pytest.raises(ConfigError, match="Expected a YAML mapping"):
            load_config(_write(tmp_path, "- a\n- b\n"))

    def test_unknown_key(self, tmp_path):
        with pytest.raises(ConfigError, match="Unknown key"):
            load_config(_write(tmp_path, "colour: always\n"))

    @pytest.mark.parametrize("value", ["0", "-5", "big", "true"])
    def test_bad_chunk_size(self, tmp_path, value):
        with pytest.raises(ConfigError, match="chunk_size"):
            load_config(_write(tmp_path, f"chunk_size: {value}\n"))

    def test_bad_color(self, tmp_path):
        with pytest.raises(ConfigError, match="'color'"):
            load_config(_write(tmp_path, "color: rainbow\n"))

    def test_bad_progress(self, tmp_path):
        with pytest.raises(ConfigError, match="'progress'"):
            load_config(_write(tmp_path, "progress: sometimes\n"))

    def test_bad_log_level(self, tmp_path):
        with pytest.raises(ConfigError, match="'log_level'"):
            load_config(_write(tmp_path, "log_level: LOUD\n"))

    def test_default_config_documents_every_key(self):
        for f in dataclasses.fields(ChksumConfig):
            assert f"{f.name}:" in _DEFAULT_CONFIG

    @pytest.mark.parametrize("text", ["1: a\nfoo: b\n", "null: a\ncolor: auto\n"])
    def test_non_string_keys(self, tmp_path, text):
        with pytest.raises(ConfigError, match="must be strings"):
            load_config(_write(tmp_path, text))


class TestCreateDefaultErrors:
    def test_unwritable_location(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        with pytest.raises(ConfigError, match="Cannot write"):
            create_default(blocker / "chksum" / "config.yaml")
