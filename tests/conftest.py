"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import env_validator...' works,
and isolates every test from the real process environment and .env files.
"""
import logging
import os
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from env_validator.config.settings import reset_settings
from env_validator.utils.logger import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def restore_environ():
    """
    Restore os.environ after each test.

    load_dotenv_file() writes to os.environ directly (not through
    monkeypatch), so the whole table is snapshotted and put back.
    """
    saved = dict(os.environ)
    reset_settings()
    yield
    os.environ.clear()
    os.environ.update(saved)
    reset_settings()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """
    Run the test inside an empty temporary directory.

    .env lookup searches upward from the working directory, so this keeps a
    developer's own .env out of the tests.
    """
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def write_dotenv(workdir):
    """Return a helper that writes a .env file into the working directory."""
    def _write(content: str, name: str = ".env") -> Path:
        path = workdir / name
        path.write_text(content)
        return path

    return _write


@pytest.fixture(autouse=True)
def restore_package_logger():
    """
    Undo configure_root_logger() calls made by main() functions under test.

    Their stream handlers bind to the test's captured stderr, which is gone
    once the test ends.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)
