"""
Shared test fixtures and configuration.
"""

import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """setup_logging() replaces root handlers; put them back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    """Output root for write-pass tests (not created up front)."""
    return tmp_path / "out"


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch) -> Path:
    """Run from an empty directory so no stray mimic.yml is picked up."""
    work = tmp_path / "work"
    work.mkdir()
    monkeypatch.chdir(work)
    for var in ("MIMIC_OUTPUT_DIR", "MIMIC_LOG_LEVEL", "MIMIC_LOG_FILE"):
        monkeypatch.delenv(var, raising=False)
    return work
