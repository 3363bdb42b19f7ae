"""
Command interpreter for minish: one line in, one command executed

Interpreter.run_line() is the command-cycle boundary. Whatever goes wrong
while running a command is reported on the console and the shell keeps going;
only `exit 0` ends the process.
"""

from typing import Optional

from .builtins import BuiltinDispatcher
from .console import Console
from .executor import ExternalExecutor
from .logging import log_warning
from .redirection import split_redirection
from .state import ShellState


class Interpreter:
    """Holds the shell state and runs command lines against it"""

    def __init__(self, console: Optional[Console] = None, state: Optional[ShellState] = None,
                 executor: Optional[ExternalExecutor] = None,
                 dispatcher: Optional[BuiltinDispatcher] = None):
        self.console = console or Console()
        self.state = state or ShellState.from_os()
        self.executor = executor or ExternalExecutor(self.console)
        self.dispatcher = dispatcher or BuiltinDispatcher(self.console, self.executor)

    def run_line(self, line: str) -> ShellState:
        """
        Interpret one raw command line

        Args:
            line: Line as read from the user

        Returns:
            The shell state after the command
        """
        parsed = split_redirection(line)
        if not parsed.command:
            return self.state

        try:
            self.state = self.dispatcher.dispatch(parsed, self.state)
        except OSError as e:
            log_warning(f"Command failed: {parsed.command!r}: {e!r}")
            self.console.println(f"Error executing command: {e}")

        return self.state
