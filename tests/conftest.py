"""Shared pytest fixtures for fns tests."""

import logging
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo any logging.basicConfig(force=True) done by the code under test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def write_program(tmp_path: Path):
    """Write a program to a temporary .fns file and return its path."""

    def _write(source: str, name: str = "main.fns") -> Path:
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path

    return _write
