"""
Builtin commands for minish: exit, echo, type, pwd and cd

The dispatcher recognizes a builtin from the command text (after the
redirection clause has been split off) and hands everything else to the
external executor.
"""

from typing import Callable, Optional

from .console import Console
from .executor import ExternalExecutor
from .logging import log_debug
from .redirection import ParsedCommand, open_target, touch_target
from .shell import find_executable, resolve_directory
from .state import ShellState
from .tokenizer import tokenize


BUILTIN_COMMANDS = ("exit", "echo", "type", "pwd", "cd")


def is_builtin(name: str) -> bool:
    return name in BUILTIN_COMMANDS


def expand_home(path: str, home: str) -> str:
    """
    Expand a leading tilde

    `~` alone becomes the home directory; any other path starting with `~`
    gets the home directory concatenated in place of the tilde.
    """
    if not path.startswith("~"):
        return path
    if path == "~":
        return home
    return home + path[1:]


class BuiltinDispatcher:
    """Executes builtins against the shell state"""

    def __init__(self, console: Console, executor: ExternalExecutor,
                 directory_resolver: Callable[[str, str], Optional[str]] = resolve_directory):
        self.console = console
        self.executor = executor
        self.directory_resolver = directory_resolver

    def dispatch(self, parsed: ParsedCommand, state: ShellState) -> ShellState:
        """
        Run one command

        Args:
            parsed: Command text and redirection targets
            state: Current shell state

        Returns:
            The shell state after the command (a new one only after a successful cd)
        """
        command = parsed.command

        if command == "exit 0":
            log_debug("exit 0 requested")
            self.console.exit(0)
            return state
        if command == "pwd":
            self._emit(parsed, state, state.cwd)
            return state
        if command == "echo" or command.startswith("echo "):
            self._emit(parsed, state, self.echo(command))
            return state
        if command.startswith("type "):
            self._emit(parsed, state, self.type_of(command[len("type "):].strip(), state))
            return state
        if command.startswith("cd "):
            self._touch_targets(parsed, state)
            return self.cd(command[len("cd "):].strip(), state)

        self.executor.run(parsed, state)
        return state

    def echo(self, command: str) -> str:
        return " ".join(tokenize(command)[1:])

    def type_of(self, name: str, state: ShellState) -> str:
        if is_builtin(name):
            return f"{name} is a shell builtin"
        executable_path = find_executable(name, state.environment)
        if executable_path:
            return f"{name} is {executable_path}"
        return f"{name}: not found"

    def cd(self, path: str, state: ShellState) -> ShellState:
        target = expand_home(path, state.home_directory)
        resolved = self.directory_resolver(target, state.cwd)
        if resolved is None:
            self.console.println(f"cd: {path}: No such file or directory")
            return state
        log_debug(f"cd: {state.cwd} -> {resolved}")
        return state.with_cwd(resolved)

    def _emit(self, parsed: ParsedCommand, state: ShellState, text: str) -> None:
        """Route builtin output to the stdout target or the console"""
        if parsed.redirect_output is not None:
            with open_target(parsed.redirect_output, state.cwd) as f:
                f.write(text + "\n")
            return
        # Builtins produce no error output: an error target is only created
        if parsed.redirect_error is not None:
            touch_target(parsed.redirect_error, state.cwd)
        self.console.println(text)

    def _touch_targets(self, parsed: ParsedCommand, state: ShellState) -> None:
        for target in (parsed.redirect_output, parsed.redirect_error):
            if target is not None:
                touch_target(target, state.cwd)
