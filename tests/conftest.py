"""Shared pytest configuration and fixtures for all tests."""

import json
import os
from collections.abc import Callable
from pathlib import Path

import pytest


def pytest_configure(config):
    for marker in ("unit", "integration", "doctor", "config", "workspace", "cli"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def bitdoctor_home(tmp_path: Path, monkeypatch) -> Path:
    """Point BITDOCTOR_HOME at an empty temporary directory (no config file)."""
    home = tmp_path / ".bitdoctor"
    home.mkdir()
    monkeypatch.setenv("BITDOCTOR_HOME", str(home))
    return home


@pytest.fixture
def write_config(bitdoctor_home: Path) -> Callable[[dict], Path]:
    """Write a config.json into BITDOCTOR_HOME."""

    def _write(config: dict) -> Path:
        path = bitdoctor_home / "config.json"
        path.write_text(json.dumps(config), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    """A Bit workspace (``.bitmap`` marker) with an empty ``.bit/components`` directory."""
    root = tmp_path / "project"
    (root / ".bit" / "components").mkdir(parents=True)
    (root / ".bitmap").write_text("{}", encoding="utf-8")
    return root


@pytest.fixture
def components_dir(workspace: Path) -> Path:
    return workspace / ".bit" / "components"


@pytest.fixture
def make_link() -> Callable[..., Path]:
    """Create a symlink, making parent directories as needed."""

    def _make(link: Path, target: str | Path) -> Path:
        link.parent.mkdir(parents=True, exist_ok=True)
        os.symlink(str(target), str(link))
        return link

    return _make


@pytest.fixture
def run_cmd():
    """Execute a cmd function and return the result with progress_callback executed."""

    def _run(cmd_func, *args, **kwargs):
        result = cmd_func(*args, **kwargs)
        list(result.progress_callback(result))
        return result

    return _run
