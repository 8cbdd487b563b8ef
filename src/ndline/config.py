"""Typed configuration — single source of truth for ndline runtime settings.

Loading priority (highest to lowest):
  1. Explicit init kwargs (programmatic overrides, tests)
  2. Environment variables: NDLINE_<SECTION>__<KEY>  (double-underscore separator)
  3. Config file: NDLINE_CONFIG_FILE env var, or conf/settings.toml at project root
  4. Model field defaults

Example env overrides:
  NDLINE_CODEC__ENCODING=utf-16
  NDLINE_CODEC__ENSURE_ASCII=true
  NDLINE_LOGGING__LEVEL=DEBUG
"""

import codecs
import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    TomlConfigSettingsSource,
)

# Derive project root from this file's location: src/ndline/config.py → ../../..
_PROJECT_ROOT = Path(__file__).parent.parent.parent
_DEFAULT_CONFIG = _PROJECT_ROOT / "conf" / "settings.toml"


def _config_file() -> Path:
    """Resolve the config file path.

    Returns NDLINE_CONFIG_FILE if set (raises FileNotFoundError if missing),
    otherwise returns the bundled default at conf/settings.toml.
    """
    if env_val := os.environ.get("NDLINE_CONFIG_FILE"):
        p = Path(env_val)
        if not p.is_file():
            raise FileNotFoundError(f"NDLINE_CONFIG_FILE not found: {p}")
        return p
    return _DEFAULT_CONFIG


# ---------------------------------------------------------------------------
# Section models — each maps to a [section] in conf/settings.toml
# ---------------------------------------------------------------------------


class CodecSettings(BaseModel):
    """How NDJSON bytes are decoded and how values are encoded."""

    # Applied per line to byte input; str input is used as-is.  Byte input
    # is split on b"\n", so the encoding must be ASCII-compatible.
    encoding: str = "utf-8"
    # Escape every non-ASCII character when encoding.
    ensure_ascii: bool = False

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, v: str) -> str:
        try:
            name = codecs.lookup(v).name
        except LookupError as exc:
            raise ValueError(f"unknown encoding {v!r}") from exc
        if "\n".encode(name) != b"\n":
            raise ValueError(f"encoding must be ASCII-compatible, got {v!r}")
        return name


class LoggingSettings(BaseModel):
    """Logging verbosity and output format."""

    level: str = "INFO"
    format: Literal["json", "text"] = "json"

    @field_validator("level", mode="before")
    @classmethod
    def _normalise_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"level must be one of {sorted(valid)}, got {v!r}")
        return v.upper()


# ---------------------------------------------------------------------------
# Root settings class
# ---------------------------------------------------------------------------


class Settings(BaseSettings):
    """All ndline runtime settings, fully resolved and validated."""

    codec: CodecSettings = CodecSettings()
    logging: LoggingSettings = LoggingSettings()

    model_config = SettingsConfigDict(
        env_prefix="NDLINE_",
        env_nested_delimiter="__",  # NDLINE_CODEC__ENCODING → codec.encoding
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        # TOML + env only; no dotenv or secrets directory.
        return (
            init_settings,
            env_settings,
            TomlConfigSettingsSource(settings_cls, toml_file=_config_file()),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide Settings instance (loaded once, cached thereafter).

    Tests should call ``get_settings.cache_clear()`` before each test that
    patches environment variables or the config file.
    """
    return Settings()
