"""Tests for configuration loading and validation."""

import os

import pytest

from sloc.config import DEFAULT_CONFIG, CounterConfig, load_config
from sloc.exceptions import InvalidConfigError, SlocError


@pytest.fixture
def isolated(tmp_path, monkeypatch):
    """No global/project config files and no SLOC_* variables."""
    home = tmp_path / "home"
    home.mkdir()
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(work)
    for key in list(os.environ):
        if key.startswith("SLOC_"):
            monkeypatch.delenv(key)
    return work


class TestCounterConfig:
    def test_defaults(self):
        assert DEFAULT_CONFIG.suffixes == (".go",)
        assert DEFAULT_CONFIG.line_comment == "//"
        assert DEFAULT_CONFIG.block_comment_open == "/*"
        assert DEFAULT_CONFIG.block_comment_close == "*/"
        assert DEFAULT_CONFIG.workers == 1
        assert DEFAULT_CONFIG.log_level == "INFO"
        assert not DEFAULT_CONFIG.parallel

    def test_list_suffixes_become_tuple(self):
        assert CounterConfig(suffixes=[".c", ".h"]).suffixes == (".c", ".h")

    def test_single_string_suffix(self):
        assert CounterConfig(suffixes=".rs").suffixes == (".rs",)

    def test_log_level_is_normalized(self):
        assert CounterConfig(log_level="debug").log_level == "DEBUG"

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"suffixes": ()},
            {"suffixes": ("",)},
            {"line_comment": ""},
            {"block_comment_open": ""},
            {"block_comment_close": ""},
            {"workers": 0},
            {"workers": 33},
            {"log_level": "VERBOSE"},
            {"output_format": "xml"},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(InvalidConfigError):
            CounterConfig(**kwargs)


class TestLoadConfig:
    def test_defaults_when_nothing_configured(self, isolated):
        assert load_config() == CounterConfig()

    def test_project_file(self, isolated):
        (isolated / "sloc.toml").write_text('suffixes = [".c", ".h"]\nworkers = 2\n')
        config = load_config()
        assert config.suffixes == (".c", ".h")
        assert config.workers == 2

    def test_explicit_file_beats_project_file(self, isolated, tmp_path):
        (isolated / "sloc.toml").write_text("workers = 2\n")
        explicit = tmp_path / "explicit.toml"
        explicit.write_text("workers = 3\n")
        assert load_config(config_file=explicit).workers == 3

    def test_env_beats_files(self, isolated, monkeypatch):
        (isolated / "sloc.toml").write_text("workers = 2\n")
        monkeypatch.setenv("SLOC_WORKERS", "5")
        monkeypatch.setenv("SLOC_SUFFIXES", ".c, .h")
        monkeypatch.setenv("SLOC_FOLLOW_SYMLINKS", "yes")
        config = load_config()
        assert config.workers == 5
        assert config.suffixes == (".c", ".h")
        assert config.follow_symlinks is True

    def test_overrides_beat_env(self, isolated, monkeypatch):
        monkeypatch.setenv("SLOC_LOG_LEVEL", "DEBUG")
        assert load_config(log_level="ERROR").log_level == "ERROR"

    def test_none_overrides_are_ignored(self, isolated, monkeypatch):
        monkeypatch.setenv("SLOC_WORKERS", "4")
        assert load_config(workers=None).workers == 4

    def test_missing_explicit_file(self, isolated, tmp_path):
        with pytest.raises(SlocError):
            load_config(config_file=tmp_path / "nope.toml")

    def test_malformed_toml(self, isolated):
        (isolated / "sloc.toml").write_text("workers = [\n")
        with pytest.raises(SlocError):
            load_config()

    def test_unknown_key(self, isolated):
        (isolated / "sloc.toml").write_text("colour = 'red'\n")
        with pytest.raises(InvalidConfigError) as exc_info:
            load_config()
        assert exc_info.value.key == "colour"
        assert "colour" in str(exc_info.value)

    def test_bad_env_int(self, isolated, monkeypatch):
        monkeypatch.setenv("SLOC_WORKERS", "many")
        with pytest.raises(InvalidConfigError):
            load_config()

    def test_bad_env_bool(self, isolated, monkeypatch):
        monkeypatch.setenv("SLOC_FOLLOW_SYMLINKS", "maybe")
        with pytest.raises(InvalidConfigError):
            load_config()
