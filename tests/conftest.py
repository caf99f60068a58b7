"""Shared test fixtures for largest."""

import os
from pathlib import Path

import pytest

from largest.exceptions import DirectoryInaccessibleError, EntryInaccessibleError
from largest.scanning.fs import FileSystem


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files and LARGEST_* variables out of tests."""
    home = tmp_path / "home"
    cwd = tmp_path / "cwd"
    home.mkdir()
    cwd.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(cwd)
    for key in list(os.environ):
        if key.startswith("LARGEST_"):
            monkeypatch.delenv(key)
    return cwd


@pytest.fixture
def make_tree(tmp_path):
    """Build a tree from {relative path: size in bytes}; returns its root."""

    def _make(files, name="tree"):
        root = tmp_path / name
        root.mkdir()
        for rel, size in files.items():
            path = root / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(b"x" * size)
        return root

    return _make


class FlakyFileSystem(FileSystem):
    """Local filesystem that refuses chosen directories and entries."""

    def __init__(self, deny_dirs=(), deny_entries=()):
        super().__init__()
        self.deny_dirs = {Path(p) for p in deny_dirs}
        self.deny_entries = {Path(p) for p in deny_entries}

    def list_dir(self, path):
        if Path(path) in self.deny_dirs:
            raise DirectoryInaccessibleError(path, "Permission denied")
        return super().list_dir(path)

    def size_of(self, entry):
        if entry.path in self.deny_entries:
            raise EntryInaccessibleError(entry.path, "Input/output error")
        return super().size_of(entry)


@pytest.fixture
def flaky_fs():
    """Factory for a filesystem with injected access failures."""
    return FlakyFileSystem
