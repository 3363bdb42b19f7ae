"""
Console capability for minish

Everything the interpreter prints, reads or exits through goes via a Console,
so tests can substitute a recording implementation.
"""

import sys
from typing import Optional, TextIO


class Console:
    """Terminal-backed console"""

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
                 stderr: Optional[TextIO] = None):
        self._stdin = stdin
        self._stdout = stdout
        self._stderr = stderr

    # Streams are looked up lazily so that pytest's capsys replacements apply
    @property
    def stdin(self) -> TextIO:
        return self._stdin or sys.stdin

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    def write(self, text: str) -> None:
        """Write text without a trailing newline and flush"""
        self.stdout.write(text)
        self.stdout.flush()

    def println(self, text: str = "") -> None:
        print(text, file=self.stdout, flush=True)

    def eprintln(self, text: str = "") -> None:
        print(text, file=self.stderr, flush=True)

    def read_line(self) -> Optional[str]:
        """
        Read one line of input

        Returns:
            The line without its trailing newline, or None at end of input
        """
        line = self.stdin.readline()
        if not line:
            return None
        return line.rstrip("\r\n")

    def exit(self, code: int) -> None:
        sys.exit(code)
