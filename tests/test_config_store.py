"""Tests for the configuration record and its on-disk store."""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from yougile_cli.core import config as config_module
from yougile_cli.core.config import (
    DEFAULT_API_HOST,
    ConfigStore,
    Settings,
    YougileConfig,
    get_config_path,
    get_settings,
)
from yougile_cli.core.errors import ConfigurationError
from yougile_cli.main import EXIT_FAILURE, main


class TestConfigPath:
    """Test the fixed config location."""

    def test_path_under_home(self, tmp_path, monkeypatch):
        """Should live at ~/.config/yougile/config.json."""
        monkeypatch.setenv("HOME", str(tmp_path))
        assert get_config_path() == tmp_path / ".config" / "yougile" / "config.json"

    def test_path_is_deterministic(self):
        """Repeated calls return the same path."""
        assert get_config_path() == get_config_path()

    def test_store_defaults_to_config_path(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert ConfigStore().path == get_config_path()


class TestLoad:
    """Test loading, including every 'absent' outcome."""

    def test_missing_file(self, store):
        """Missing file is absent, not an error."""
        assert store.load() is None

    def test_invalid_json(self, store, config_path):
        """Malformed JSON is treated as no configuration."""
        config_path.parent.mkdir(parents=True)
        config_path.write_text("{not json", encoding="utf-8")
        assert store.load() is None

    def test_empty_file(self, store, config_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text("", encoding="utf-8")
        assert store.load() is None

    def test_json_not_an_object(self, store, config_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text('["apiKey"]', encoding="utf-8")
        assert store.load() is None

    def test_wrong_field_type(self, store, config_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text('{"apiKey": ["not", "a", "string"]}', encoding="utf-8")
        assert store.load() is None

    def test_path_is_directory(self, store, config_path):
        """Read errors are swallowed too."""
        config_path.mkdir(parents=True)
        assert store.load() is None

    def test_name_too_long(self, tmp_path):
        """Errors raised while resolving the path are swallowed as well."""
        store = ConfigStore(tmp_path / ("x" * 300) / "config.json")
        assert store.load() is None
        assert store.has_valid_config() is False

    def test_parent_is_a_file(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        assert ConfigStore(blocker / "config.json").load() is None

    def test_reads_camel_case_keys(self, store, config_path):
        """Files written by earlier versions of the tool load unchanged."""
        config_path.parent.mkdir(parents=True)
        config_path.write_text(json.dumps({
            "apiKey": "abc",
            "apiHost": "https://example.test/api-v2/",
            "defaultColumnId": "col9",
            "someFutureField": 1,
        }), encoding="utf-8")

        config = store.load()

        assert config.api_key == "abc"
        assert config.api_host == "https://example.test/api-v2/"
        assert config.default_column_id == "col9"
        assert config.default_board_id is None

    def test_missing_host_uses_default(self, store, config_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text('{"apiKey": "abc"}', encoding="utf-8")
        assert store.load().api_host == DEFAULT_API_HOST


class TestSave:
    """Test saving and the round-trip law."""

    def test_round_trip_full_record(self, store, sample_config):
        store.save(sample_config)
        assert store.load() == sample_config

    def test_round_trip_minimal_record(self, store):
        config = YougileConfig(api_key="k", api_host="https://yougile.com/api-v2/")
        store.save(config)
        assert store.load() == config

    def test_creates_parent_directories(self, store, config_path):
        assert not config_path.parent.exists()
        store.save(YougileConfig(api_key="k"))
        assert config_path.is_file()

    def test_file_format(self, store, config_path):
        """Pretty-printed JSON with camelCase keys and no unset fields."""
        store.save(YougileConfig(api_key="k", default_project_id="p1"))

        text = config_path.read_text(encoding="utf-8")
        assert text.startswith('{\n  "apiKey": "k"')
        assert json.loads(text) == {
            "apiKey": "k",
            "apiHost": DEFAULT_API_HOST,
            "defaultProjectId": "p1",
        }

    def test_overwrites_whole_record(self, store, sample_config):
        """A save replaces the record; fields not in the new one are gone."""
        store.save(sample_config)
        store.save(YougileConfig(api_key="other"))

        loaded = store.load()
        assert loaded.api_key == "other"
        assert loaded.default_column_id is None

    def test_leaves_no_temp_files(self, store, config_path, sample_config):
        store.save(sample_config)
        store.save(sample_config)
        assert [p.name for p in config_path.parent.iterdir()] == ["config.json"]

    def test_write_error_propagates(self, tmp_path):
        """Unlike reads, write failures reach the caller."""
        blocker = tmp_path / "blocker"
        blocker.write_text("a file, not a directory")
        store = ConfigStore(blocker / "config.json")

        with pytest.raises(OSError):
            store.save(YougileConfig(api_key="k"))

    def test_non_ascii_names(self, store):
        config = YougileConfig(api_key="k", default_project_name="Проект")
        store.save(config)
        assert store.load().default_project_name == "Проект"


class TestHasValidConfig:
    """Test the 'is configured' check."""

    def test_absent_record(self, store):
        assert store.has_valid_config() is False

    def test_empty_key(self, store):
        store.save(YougileConfig(api_key=""))
        assert store.has_valid_config() is False

    def test_missing_key(self, store, config_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text('{"apiHost": "https://yougile.com/api-v2/"}', encoding="utf-8")
        assert store.has_valid_config() is False

    def test_valid(self, configured_store):
        assert configured_store.has_valid_config() is True


class TestRequire:
    def test_raises_without_config(self, store):
        with pytest.raises(ConfigurationError) as exc_info:
            store.require()
        assert "yougile init" in exc_info.value.hint

    def test_returns_record(self, configured_store, sample_config):
        assert configured_store.require() == sample_config


class TestConfigRecord:
    """Test helpers on the configuration record."""

    def test_clear_defaults(self, sample_config):
        cleared = sample_config.clear_defaults()

        assert cleared.api_key == sample_config.api_key
        assert cleared.api_host == sample_config.api_host
        assert cleared.default_project_id is None
        assert cleared.default_board_name is None
        assert cleared.default_column_id is None
        # Original untouched
        assert sample_config.default_column_id == "col1"

    def test_has_default_column(self, sample_config):
        assert sample_config.has_default_column is True
        assert YougileConfig(api_key="k").has_default_column is False

    def test_default_location(self, sample_config):
        assert sample_config.default_location == "Website → Sprint → To do"

    def test_default_location_falls_back_to_ids(self):
        config = YougileConfig(api_key="k", default_project_id="p1", default_column_id="c1")
        assert config.default_location == "p1 → ? → c1"


def test_config_path_fixture_is_isolated(config_path: Path, tmp_path: Path):
    """Sanity check: tests never touch the real home directory."""
    assert tmp_path in config_path.parents


class TestSettings:
    """Test environment-driven runtime settings."""

    @pytest.fixture(autouse=True)
    def _isolated(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(config_module, "_settings", None)

    def test_log_level_is_normalised(self, monkeypatch):
        monkeypatch.setenv("YOUGILE_LOG_LEVEL", " debug ")
        assert Settings().log_level == "DEBUG"

    def test_unknown_log_level_rejected(self, monkeypatch):
        monkeypatch.setenv("YOUGILE_LOG_LEVEL", "verbose")
        with pytest.raises(ValidationError):
            Settings()

    def test_get_settings_reports_bad_environment(self, monkeypatch):
        monkeypatch.setenv("YOUGILE_LOG_LEVEL", "verbose")

        with pytest.raises(ConfigurationError) as exc_info:
            get_settings()

        assert "YOUGILE_LOG_LEVEL" in str(exc_info.value)
        assert "YOUGILE_" in exc_info.value.hint

    def test_main_exits_with_failure(self, monkeypatch):
        monkeypatch.setenv("YOUGILE_LOG_LEVEL", "verbose")
        assert main(["help"]) == EXIT_FAILURE
