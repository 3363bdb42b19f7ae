"""
OS glue for minish: executable resolution, directory resolution and process spawning

Provides functionality to:
- Split a PATH value into ordered search directories
- Resolve command names to absolute executable paths (first match wins)
- Resolve `cd` targets to canonical directories
- Spawn external programs with piped output
"""

import os
import subprocess
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence

from .logging import log_debug


class ShellPathResolver:
    """Resolves binaries using a PATH value"""

    def __init__(self, path_variable: Optional[str] = None):
        """
        Initialize shell path resolver

        Args:
            path_variable: Colon-separated list of directories.
                           If None, nothing can be resolved.
        """
        self.path_variable = path_variable

    def get_search_paths(self) -> List[str]:
        """
        Get list of directories to search for binaries, in PATH order

        Returns:
            List of directory paths to search
        """
        if not self.path_variable:
            return []
        return [p for p in self.path_variable.split(os.pathsep) if p.strip()]

    def _is_executable(self, candidate: Path) -> bool:
        return candidate.is_file() and os.access(str(candidate), os.X_OK)

    def resolve_command(self, command: str) -> Optional[str]:
        """
        Resolve command name to absolute path

        Searches the PATH directories in order and returns the first match.

        Args:
            command: Command name (e.g., "grep", "ls")

        Returns:
            Absolute path to command if found, None otherwise
        """
        if not command or not command.strip():
            return None

        for search_path in self.get_search_paths():
            full_path = Path(search_path) / command
            if self._is_executable(full_path):
                resolved = str(full_path.absolute())
                log_debug(f"Resolved '{command}' to: {resolved}")
                return resolved

        log_debug(f"Command '{command}' not found in PATH")
        return None


def find_executable(command: str, environment: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    Resolve a command against the PATH of an environment

    Args:
        command: Command name
        environment: Environment mapping; PATH falls back to the OS PATH when absent

    Returns:
        Absolute path to command if found, None otherwise
    """
    path_variable = (environment or {}).get("PATH")
    if path_variable is None:
        path_variable = os.getenv("PATH")
    return ShellPathResolver(path_variable).resolve_command(command)


def resolve_directory(path: str, cwd: str) -> Optional[str]:
    """
    Resolve a directory path against a working directory

    Args:
        path: Absolute path, or path relative to cwd
        cwd: Working directory used for relative paths

    Returns:
        Canonical directory path, or None if it does not exist or is not a directory
    """
    candidate = path if os.path.isabs(path) else os.path.join(cwd, path)
    if not os.path.isdir(candidate):
        log_debug(f"Not a directory: {candidate}")
        return None
    return os.path.realpath(candidate)


def spawn_command(
    args: Sequence[str],
    executable: Optional[str] = None,
    cwd: Optional[str] = None,
    env: Optional[Dict[str, str]] = None,
    stdout=subprocess.PIPE,
    stderr=subprocess.PIPE,
    text: bool = True,
    errors: str = "replace",
    **kwargs
) -> subprocess.Popen:
    """
    Start an external program without going through a shell

    Args:
        args: Argument vector, args[0] being the program name as typed
        executable: Absolute path of the program to run
        cwd: Working directory of the child
        env: Environment of the child (None inherits the current process environment)
        stdout: File object or constant for stdout
        stderr: File object or constant for stderr
        text: Whether to decode output as text
        errors: Decoding error handler used in text mode
        **kwargs: Additional keyword arguments to pass to subprocess.Popen

    Returns:
        subprocess.Popen for the started child

    Examples:
        process = spawn_command(["ls", "-l"], executable="/bin/ls", cwd="/bin")
        for line in process.stdout:
            print(line, end="")
        process.wait()
    """
    log_debug(f"spawn_command: args={list(args)!r}, executable={executable!r}, cwd={cwd!r}")

    return subprocess.Popen(
        list(args),
        executable=executable,
        cwd=cwd,
        env=None if env is None else dict(env),
        stdout=stdout,
        stderr=stderr,
        text=text,
        errors=errors if text else None,
        **kwargs
    )
