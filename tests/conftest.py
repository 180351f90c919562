"""Shared test fixtures for common-extensions."""

import logging
import os
import shutil
import tempfile
from pathlib import Path

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test isolation."""
    dir_path = tempfile.mkdtemp()
    yield Path(dir_path)
    shutil.rmtree(dir_path, ignore_errors=True)


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Keep tests away from the user's config file and COMMON_EXT_* variables."""
    for var in list(os.environ):
        if var.startswith("COMMON_EXT_"):
            monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("COMMON_EXT_CONFIG_PATH", str(tmp_path / "missing.toml"))
    yield


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Save and restore root logger state between tests."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    root.handlers[:] = original_handlers
    root.setLevel(original_level)
