"""
Tests for ShellState
"""

import os

import pytest

from minish.state import ShellState


def test_from_os(temp_test_dir):
    state = ShellState.from_os()
    assert state.cwd == os.path.realpath(temp_test_dir)
    assert state.environment["PATH"] == os.environ.get("PATH")


def test_with_cwd_returns_new_state():
    state = ShellState(cwd="/a", environment={"HOME": "/h"})
    moved = state.with_cwd("/b")
    assert moved.cwd == "/b"
    assert moved.environment == {"HOME": "/h"}
    assert state.cwd == "/a"


def test_state_is_frozen():
    state = ShellState(cwd="/a")
    with pytest.raises(AttributeError):
        state.cwd = "/b"


def test_home_directory_fallback(monkeypatch):
    monkeypatch.setenv("HOME", "/os/home")
    assert ShellState(cwd="/", environment={"HOME": "/mine"}).home_directory == "/mine"
    assert ShellState(cwd="/", environment={}).home_directory == os.path.expanduser("~")
