"""
minish: a minimal interactive command-line shell

A Python package providing:
- A quote and backslash aware command line tokenizer
- Builtins: exit, echo, type, pwd, cd
- PATH-based resolution and execution of external programs
- Redirection of stdout (`>`, `1>`) and stderr (`2>`) to files
"""

__version__ = "0.1.0"

from .logging import (
    set_log_level,
    get_log_level,
)
from .config import (
    get_config,
    reload_config,
    print_config,
)
from .tokenizer import tokenize
from .redirection import ParsedCommand, split_redirection
from .shell import ShellPathResolver, find_executable
from .state import ShellState
from .builtins import BUILTIN_COMMANDS
from .interpreter import Interpreter

__all__ = [
    "tokenize", "ParsedCommand", "split_redirection",
    "ShellPathResolver", "find_executable",
    "ShellState", "BUILTIN_COMMANDS", "Interpreter",
    "set_log_level", "get_log_level",
    "get_config", "reload_config", "print_config",
]
