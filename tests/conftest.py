"""Shared pytest fixtures for the full sysctl_conf test suite."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest


SAMPLE_CONFIG = """
# service endpoint
endpoint = localhost:3000
debug = true
; retries before giving up
retry = 3
log.file = /var/log/console.log
log.name = default.log
-kernel.threshold = 0.75
"""

SAMPLE_SCHEMA = """
endpoint = string
debug = bool
retry = integer
log.file = string
log.name = string
kernel.threshold = float
"""


@pytest.fixture
def write_text_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Provide a helper that writes UTF-8 text under `tmp_path` and returns the path."""

    def _write(name: str, content: str) -> Path:
        """Write `content` to `tmp_path / name`."""

        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_config_path(write_text_file: Callable[[str, str], Path]) -> Path:
    """Provide a config file that conforms to `sample_schema_path`."""

    return write_text_file("app.conf", SAMPLE_CONFIG)


@pytest.fixture
def sample_schema_path(write_text_file: Callable[[str, str], Path]) -> Path:
    """Provide a schema file covering every key in `sample_config_path`."""

    return write_text_file("app.schema", SAMPLE_SCHEMA)
