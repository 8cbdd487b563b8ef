"""Tests for the typed configuration system."""

import pytest
from pydantic import ValidationError

from ndline.config import Settings, get_settings


class TestDefaults:
    def test_loads_without_env_overrides(self):
        s = Settings()
        assert s.codec.encoding == "utf-8"
        assert s.codec.ensure_ascii is False
        assert s.logging.level == "INFO"
        assert s.logging.format == "json"


class TestEnvOverrides:
    def test_codec_encoding(self, monkeypatch):
        monkeypatch.setenv("NDLINE_CODEC__ENCODING", "latin-1")
        assert Settings().codec.encoding == "iso8859-1"

    def test_codec_ensure_ascii(self, monkeypatch):
        monkeypatch.setenv("NDLINE_CODEC__ENSURE_ASCII", "true")
        assert Settings().codec.ensure_ascii is True

    def test_logging_level_uppercase_normalisation(self, monkeypatch):
        monkeypatch.setenv("NDLINE_LOGGING__LEVEL", "debug")
        assert Settings().logging.level == "DEBUG"

    def test_init_kwargs_beat_env(self, monkeypatch):
        monkeypatch.setenv("NDLINE_LOGGING__FORMAT", "text")
        assert Settings(logging={"format": "json"}).logging.format == "json"


class TestConfigFile:
    def test_toml_file_is_read(self, monkeypatch, tmp_path):
        cfg = tmp_path / "settings.toml"
        cfg.write_text('[codec]\nensure_ascii = true\n\n[logging]\nlevel = "warning"\n')
        monkeypatch.setenv("NDLINE_CONFIG_FILE", str(cfg))
        s = Settings()
        assert s.codec.ensure_ascii is True
        assert s.logging.level == "WARNING"

    def test_env_beats_toml(self, monkeypatch, tmp_path):
        cfg = tmp_path / "settings.toml"
        cfg.write_text("[codec]\nensure_ascii = true\n")
        monkeypatch.setenv("NDLINE_CONFIG_FILE", str(cfg))
        monkeypatch.setenv("NDLINE_CODEC__ENSURE_ASCII", "false")
        assert Settings().codec.ensure_ascii is False

    def test_missing_config_file_raises(self, monkeypatch, tmp_path):
        monkeypatch.setenv("NDLINE_CONFIG_FILE", str(tmp_path / "nope.toml"))
        with pytest.raises(FileNotFoundError, match="NDLINE_CONFIG_FILE not found"):
            Settings()


class TestValidation:
    def test_invalid_log_level_raises(self):
        with pytest.raises(ValidationError, match="level must be one of"):
            Settings(logging={"level": "NONSENSE"})

    def test_invalid_log_format_raises(self):
        with pytest.raises(ValidationError):
            Settings(logging={"format": "xml"})

    def test_unknown_encoding_raises(self):
        with pytest.raises(ValidationError, match="unknown encoding"):
            Settings(codec={"encoding": "klingon-8"})

    @pytest.mark.parametrize("encoding", ["utf-16", "utf-32-le"])
    def test_non_ascii_compatible_encoding_raises(self, encoding):
        with pytest.raises(ValidationError, match="ASCII-compatible"):
            Settings(codec={"encoding": encoding})

    def test_encoding_name_is_normalised(self):
        assert Settings(codec={"encoding": "UTF8"}).codec.encoding == "utf-8"


class TestCaching:
    def test_get_settings_returns_same_instance(self):
        assert get_settings() is get_settings()

    def test_cache_clear_returns_new_instance(self):
        s1 = get_settings()
        get_settings.cache_clear()
        s2 = get_settings()
        assert s1 is not s2
