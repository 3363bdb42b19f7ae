"""
Pytest configuration for minish tests.
All tests automatically run in a temporary directory.
"""
import os
import shutil
from pathlib import Path

import pytest

from minish.console import Console


@pytest.fixture(autouse=True)
def temp_test_dir(request, monkeypatch):
    """
    Automatically run all tests in a temporary directory under ./tmp.

    This fixture:
    - Creates a temporary directory for each test in ./tmp
    - Changes the working directory to that temp directory
    - Restores the original directory after the test completes
    - Cleans up the temp directory automatically
    """
    original_dir = os.getcwd()

    tmp_base = Path(original_dir) / "tmp"
    tmp_base.mkdir(exist_ok=True)

    # Sanitize test name for filesystem
    test_name = request.node.name
    safe_test_name = "".join(c if c.isalnum() or c in ('_', '-') else '_' for c in test_name)
    test_dir = tmp_base / safe_test_name

    # If directory exists, remove it first to ensure clean state
    if test_dir.exists():
        shutil.rmtree(test_dir)

    test_dir.mkdir(parents=True, exist_ok=True)

    monkeypatch.chdir(test_dir)

    yield test_dir.resolve()

    os.chdir(original_dir)

    try:
        shutil.rmtree(test_dir)
    except OSError:
        pass  # Best effort cleanup


class RecordingConsole(Console):
    """Console that records output and serves scripted input"""

    def __init__(self, inputs=None):
        super().__init__()
        self.lines = []
        self.err_lines = []
        self.written = []
        self.exit_codes = []
        self._inputs = list(inputs or [])

    def write(self, text):
        self.written.append(text)

    def println(self, text=""):
        self.lines.append(text)

    def eprintln(self, text=""):
        self.err_lines.append(text)

    def read_line(self):
        if not self._inputs:
            return None
        return self._inputs.pop(0)

    def exit(self, code):
        self.exit_codes.append(code)


@pytest.fixture
def console():
    return RecordingConsole()


@pytest.fixture
def make_executable():
    """
    Factory writing an executable shell script.

    Usage: make_executable(directory, name, body) -> absolute path
    """
    def _make(directory, name, body="#!/bin/sh\nexit 0\n"):
        directory = Path(directory)
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / name
        with open(path, "w", newline='\n') as f:
            f.write(body)
        os.chmod(path, 0o755)
        return str(path.absolute())
    return _make
