#!/usr/bin/env python3
"""
Command line interface for minish
"""
import argparse
import sys
from importlib.metadata import PackageNotFoundError, version

from .config import get_config, print_config
from .console import Console
from .interpreter import Interpreter
from .logging import log_debug, log_info, set_log_level_from_string


# Get package version
def get_version():
    """Get the package version"""
    try:
        return version("minish")
    except PackageNotFoundError:
        from . import __version__
        return __version__


def repl(interpreter: Interpreter, prompt: str = None) -> int:
    """
    Read-eval-print loop

    Prints the prompt, reads a line and runs it until `exit 0` terminates the
    process or the input ends.

    Args:
        interpreter: Interpreter to feed lines to
        prompt: Prompt printed before each read (defaults to the configured prompt)

    Returns:
        Exit code (0 at end of input)
    """
    if prompt is None:
        prompt = get_config().prompt
    console = interpreter.console
    log_info(f"minish {get_version()} started in {interpreter.state.cwd}")

    while True:
        console.write(prompt)
        line = console.read_line()
        if line is None:
            log_debug("End of input, leaving the shell")
            console.println()
            return 0
        interpreter.run_line(line)


def main(argv=None):
    """Entry point for the minish command"""
    parser = argparse.ArgumentParser(description="minish - a minimal interactive shell")
    parser.add_argument("--version", action="version", version=f"minish {get_version()}")
    parser.add_argument("--command", "-c", help="Run a single command line and return")
    parser.add_argument("--log-level", "-l", dest="log_level",
                        help="Logging level: QUIET, ERROR, WARNING, INFO or DEBUG")
    parser.add_argument("--show-config", dest="show_config", action="store_true",
                        help="Print the configuration and return")

    args = parser.parse_args(argv)

    try:
        if args.log_level:
            set_log_level_from_string(args.log_level)

        if args.show_config:
            print_config()
            return 0

        interpreter = Interpreter(Console())

        if args.command is not None:
            interpreter.run_line(args.command)
            return 0

        return repl(interpreter)

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
