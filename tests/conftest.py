"""Root test configuration — environment isolation and cleanup of runtime artifacts"""

import logging
import shutil
from pathlib import Path

import pytest

from mdpage.config import Settings


_PROJECT_ROOT = Path(__file__).parent.parent

_CLEANUP_DIRS = ["dist"]


@pytest.fixture(autouse=True)
def clear_mdpage_env(monkeypatch):
    """Keep MDPAGE_* variables from the developer's shell out of the tests."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"MDPAGE_{name.upper()}", raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers the CLI installs so they do not outlive CliRunner streams."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)


@pytest.fixture(scope="session", autouse=True)
def cleanup_artifacts():
    """Remove output directories created during the test session."""
    yield
    for name in _CLEANUP_DIRS:
        p = _PROJECT_ROOT / name
        if p.exists():
            shutil.rmtree(p)
