"""
Tests for the interpreter: line handling, state threading and error recovery
"""

import os
import platform

import pytest

from minish.executor import ExternalExecutor
from minish.interpreter import Interpreter
from minish.state import ShellState


@pytest.fixture
def interpreter(console, temp_test_dir):
    state = ShellState(cwd=str(temp_test_dir), environment={"PATH": "", "HOME": str(temp_test_dir)})
    return Interpreter(console, state=state)


def test_pwd_cd_pwd(interpreter, console, temp_test_dir):
    """The working directory changes exactly once, after the cd"""
    interpreter.run_line("pwd")
    interpreter.run_line("cd ..")
    interpreter.run_line("pwd")
    assert console.lines == [str(temp_test_dir), os.path.realpath(temp_test_dir.parent)]


def test_failed_cd_keeps_state(interpreter, console, temp_test_dir):
    interpreter.run_line("cd /nonexistent")
    interpreter.run_line("pwd")
    assert console.lines == ["cd: /nonexistent: No such file or directory", str(temp_test_dir)]


def test_redirect_follows_cd(interpreter, temp_test_dir):
    (temp_test_dir / "work").mkdir()
    interpreter.run_line("cd work")
    interpreter.run_line("echo saved > note.txt")
    assert (temp_test_dir / "work" / "note.txt").read_text() == "saved\n"


def test_empty_lines_do_nothing(interpreter, console):
    before = interpreter.state
    assert interpreter.run_line("") == before
    assert interpreter.run_line("    ") == before
    assert console.lines == []


def test_exit_zero(interpreter, console):
    interpreter.run_line("  exit 0  ")
    assert console.exit_codes == [0]


def test_exit_zero_with_redirection(interpreter, console, temp_test_dir):
    interpreter.run_line("exit 0 > out.txt")
    assert console.exit_codes == [0]
    assert not (temp_test_dir / "out.txt").exists()


def test_explicit_stdout_redirection(interpreter, console, temp_test_dir):
    interpreter.run_line("echo hi 1> f")
    assert (temp_test_dir / "f").read_text() == "hi\n"
    assert console.lines == []


def test_unknown_command(interpreter, console):
    interpreter.run_line("nonexistent_cmd arg")
    assert console.lines == ["nonexistent_cmd arg: command not found"]


def test_io_error_is_reported(interpreter, console, temp_test_dir):
    """A failing redirection does not escape the command cycle"""
    (temp_test_dir / "adir").mkdir()
    interpreter.run_line("echo hi > adir")
    assert len(console.lines) == 1
    assert console.lines[0].startswith("Error executing command: ")
    interpreter.run_line("echo still alive")
    assert console.lines[-1] == "still alive"


def test_spawn_error_is_reported(console, temp_test_dir, make_executable):
    if platform.system() == "Windows":
        pytest.skip("POSIX executables")
    make_executable(temp_test_dir / "bin", "tool")

    def broken_launcher(args, **kwargs):
        raise PermissionError(13, "Permission denied")

    state = ShellState(cwd=str(temp_test_dir), environment={"PATH": str(temp_test_dir / "bin")})
    interpreter = Interpreter(console, state=state, executor=ExternalExecutor(console, launcher=broken_launcher))
    interpreter.run_line("tool")
    assert console.lines == ["Error executing command: [Errno 13] Permission denied"]


def test_type_uses_state_environment(console, temp_test_dir, make_executable):
    if platform.system() == "Windows":
        pytest.skip("POSIX executables")
    tool = make_executable(temp_test_dir / "bin", "tool")
    state = ShellState(cwd=str(temp_test_dir), environment={"PATH": str(temp_test_dir / "bin")})
    interpreter = Interpreter(console, state=state)
    interpreter.run_line("type tool")
    interpreter.run_line("type ls")
    assert console.lines == [f"tool is {tool}", "ls: not found"]


def test_default_state_from_os(console, temp_test_dir):
    interpreter = Interpreter(console)
    assert interpreter.state.cwd == os.path.realpath(os.getcwd())
    assert interpreter.state.environment == dict(os.environ)
