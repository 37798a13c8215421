"""
Pytest configuration and shared fixtures for tfslint tests.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Callable, Iterable

import pytest

from tfslint.core.analyzer import AnalyzerOptions
from tfslint.logging import logging_manager


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir).resolve()


@pytest.fixture
def make_tree(temp_dir) -> Callable[..., Path]:
    """Create files below ``temp_dir`` from relative paths and return the root.

    ``make_tree("src/App/Foo.cs", "tests/App.Tests/FooTests.cs")``
    """

    def _make(*relative_paths: Iterable[str], content: str = "") -> Path:
        for relative in relative_paths:
            path = temp_dir / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        return temp_dir

    return _make


@pytest.fixture
def project_options(temp_dir) -> AnalyzerOptions:
    """Default options rooted at ``temp_dir/src`` and ``temp_dir/tests``."""
    return AnalyzerOptions(src_root=str(temp_dir / "src"), test_root=str(temp_dir / "tests"))


@pytest.fixture
def clean_environment(monkeypatch):
    """Ensure no TFSLINT_* variables leak into configuration tests."""
    for var in list(os.environ):
        if var.upper().startswith("TFSLINT_"):
            monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def in_temp_dir(temp_dir, monkeypatch):
    """Run the test with ``temp_dir`` as working directory."""
    monkeypatch.chdir(temp_dir)
    return temp_dir


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")


@pytest.fixture
def restore_root_logger():
    """Undo LoggingManager.configure so handlers do not leak between tests."""
    root = logging.getLogger()
    level = root.level
    config = logging_manager.config
    yield root
    for handler in logging_manager.handlers:
        root.removeHandler(handler)
        handler.close()
    logging_manager.handlers = []
    logging_manager.config = config
    root.setLevel(level)
