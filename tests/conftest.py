"""Shared pytest helpers and fixtures for the ndline test suite.

FIXTURE_DIR                 — tests/fixtures/, holding small NDJSON files
write_bytes(tmp_path, data) — write raw bytes to a temp .ndjson file
_isolate_state              — autouse: fresh settings cache and structlog state
"""

from pathlib import Path

import pytest
import structlog

from ndline.config import get_settings

FIXTURE_DIR = Path(__file__).parent / "fixtures"

# Decoded form of fixtures/records.ndjson, line for line.
RECORDS = [
    {"id": 1, "name": "alpha", "tags": ["a", "b"]},
    [1, 2, 3],
    "plain string",
    42,
    3.5,
    True,
    False,
    None,
    {"nested": {"deep": [{"k": None}]}, "unicode": "café"},
    {},
]


def write_bytes(tmp_path: Path, data: bytes, name: str = "input.ndjson") -> Path:
    """Write *data* verbatim to ``tmp_path / name`` and return the path."""
    p = tmp_path / name
    p.write_bytes(data)
    return p


@pytest.fixture(autouse=True)
def _isolate_state(monkeypatch):
    """Keep each test independent of the developer's environment and of each other."""
    for var in (
        "NDLINE_CONFIG_FILE",
        "NDLINE_CODEC__ENCODING",
        "NDLINE_CODEC__ENSURE_ASCII",
        "NDLINE_LOGGING__LEVEL",
        "NDLINE_LOGGING__FORMAT",
    ):
        monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    yield
    get_settings.cache_clear()
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
