"""
External command execution for minish

Resolves the program through PATH, spawns it and streams its stdout and
stderr line by line to the console or to redirection targets.
"""

import os
import threading
from contextlib import ExitStack
from typing import Callable, Optional, TextIO

from .console import Console
from .logging import log_debug, log_info
from .redirection import ParsedCommand, open_target
from .shell import find_executable, spawn_command
from .state import ShellState
from .tokenizer import tokenize


LineSink = Callable[[str], None]


def _drain(stream: TextIO, sink: LineSink) -> None:
    """Forward every line of a child stream to a sink until EOF"""
    with stream:
        for line in stream:
            sink(line.rstrip("\n"))


class ExternalExecutor:
    """Runs programs found on PATH"""

    def __init__(self, console: Console, launcher: Callable = spawn_command):
        """
        Args:
            console: Console used for unredirected output and diagnostics
            launcher: Callable with the signature of spawn_command, returning a Popen-like object
        """
        self.console = console
        self.launcher = launcher

    def run(self, parsed: ParsedCommand, state: ShellState) -> Optional[int]:
        """
        Run an external command and wait for it

        The child runs in the directory containing its executable.

        Args:
            parsed: Command text and redirection targets
            state: Current shell state (environment for PATH and the child, cwd for targets)

        Returns:
            Exit status of the child, or None if nothing was run
        """
        parts = tokenize(parsed.command)
        if not parts:
            return None

        program_name, args = parts[0], parts[1:]
        executable_path = find_executable(program_name, state.environment)
        if executable_path is None:
            # Reported on the console even when redirection was requested
            self.console.println(f"{parsed.command}: command not found")
            return None

        with ExitStack() as stack:
            out_sink = self._sink(parsed.redirect_output, state, self.console.println, stack)
            err_sink = self._sink(parsed.redirect_error, state, self.console.eprintln, stack)

            process = self.launcher(
                [program_name] + args,
                executable=executable_path,
                cwd=os.path.dirname(executable_path),
                env=dict(state.environment),
            )

            stderr_errors = []

            def drain_stderr():
                try:
                    _drain(process.stderr, err_sink)
                except OSError as e:
                    stderr_errors.append(e)
                    process.kill()

            stderr_thread = threading.Thread(target=drain_stderr, daemon=True)
            stderr_thread.start()
            # Both streams are drained and the child reaped before the
            # redirect targets are closed, on success and on failure
            try:
                _drain(process.stdout, out_sink)
            except BaseException:
                process.kill()
                raise
            finally:
                stderr_thread.join()
                returncode = process.wait()

            if stderr_errors:
                raise stderr_errors[0]

        if returncode != 0:
            log_info(f"'{program_name}' exited with code {returncode}")
        else:
            log_debug(f"'{program_name}' exited with code 0")
        return returncode

    def _sink(self, target: Optional[str], state: ShellState, console_writer: LineSink,
              stack: ExitStack) -> LineSink:
        if target is None:
            return console_writer
        f = stack.enter_context(open_target(target, state.cwd))
        return lambda line: f.write(line + "\n")
