"""
Output redirection for minish: splitting `>`, `1>` and `2>` clauses off a
command line and opening the target files
"""

import os
import re
from dataclasses import dataclass
from typing import Optional, TextIO

from .logging import log_debug


# Greedy command part: the rightmost operator clause wins
REDIRECT_PATTERN = re.compile(r"(.+)\s+(1?>|2>)\s+(.+)")

STDOUT_OPERATORS = (">", "1>")
STDERR_OPERATORS = ("2>",)


@dataclass
class ParsedCommand:
    """A command line with its optional redirection targets"""
    command: str
    redirect_output: Optional[str] = None  # > or 1>
    redirect_error: Optional[str] = None  # 2>

    @property
    def is_redirected(self) -> bool:
        return self.redirect_output is not None or self.redirect_error is not None


def split_redirection(line: str) -> ParsedCommand:
    """
    Split a trailing redirection clause off a command line

    Only one clause is supported per line. The operator must be separated
    from the command and from the file path by whitespace.

    Args:
        line: Raw command line

    Returns:
        ParsedCommand with the trimmed command text and at most one target set

    Examples:
        >>> split_redirection("echo hi > out.txt")
        ParsedCommand(command='echo hi', redirect_output='out.txt', redirect_error=None)
        >>> split_redirection("ls 2> err.txt")
        ParsedCommand(command='ls', redirect_output=None, redirect_error='err.txt')
    """
    stripped = line.strip()
    match = REDIRECT_PATTERN.fullmatch(stripped)
    if match is None:
        return ParsedCommand(stripped)

    command_part, operator, file_path = match.groups()
    if operator in STDOUT_OPERATORS:
        parsed = ParsedCommand(command_part.strip(), redirect_output=file_path.strip())
    else:
        parsed = ParsedCommand(command_part.strip(), redirect_error=file_path.strip())

    log_debug(f"split_redirection: {line!r} -> {parsed}")
    return parsed


def resolve_target(path: str, cwd: str) -> str:
    """
    Resolve a redirection target against the shell's working directory

    Args:
        path: Target as written on the command line
        cwd: Shell's current working directory

    Returns:
        Absolute path of the target file
    """
    if os.path.isabs(path):
        return path
    return os.path.join(cwd, path)


def open_target(path: str, cwd: str) -> TextIO:
    """
    Open a redirection target for writing

    Missing parent directories are created and any existing content is
    truncated.

    Args:
        path: Target as written on the command line
        cwd: Shell's current working directory

    Returns:
        Text file object open for writing (caller closes it)
    """
    target = resolve_target(path, cwd)
    parent = os.path.dirname(target)
    if parent:
        os.makedirs(parent, exist_ok=True)
    log_debug(f"Opening redirection target: {target}")
    return open(target, "w", encoding="utf-8")


def touch_target(path: str, cwd: str) -> None:
    """Create or truncate a redirection target without writing to it"""
    with open_target(path, cwd):
        pass
