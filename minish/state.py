"""
Shell state: current working directory and environment snapshot
"""

import os
from dataclasses import dataclass, field, replace
from typing import Mapping


@dataclass(frozen=True)
class ShellState:
    """
    Immutable snapshot of the interpreter state

    A successful `cd` produces a new state through with_cwd(); nothing else
    changes it.
    """
    cwd: str
    environment: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_os(cls) -> "ShellState":
        """Build the startup state from the process directory and environment"""
        return cls(cwd=os.path.realpath(os.getcwd()), environment=dict(os.environ))

    def with_cwd(self, cwd: str) -> "ShellState":
        return replace(self, cwd=cwd)

    @property
    def home_directory(self) -> str:
        """HOME from the environment, falling back to the user's home directory"""
        value = self.environment.get("HOME")
        if value is None:
            value = os.path.expanduser("~")
        return value
