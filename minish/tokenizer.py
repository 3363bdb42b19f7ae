"""
Command line tokenizer for minish

Splits a raw command line into words, honoring single quotes, double quotes
and backslash escapes. Malformed input (unterminated quotes, trailing
backslash) is never rejected.
"""

from enum import Enum
from typing import List


class QuoteMode(Enum):
    """Quoting context of the scanner"""
    NONE = "none"
    SINGLE = "single"
    DOUBLE = "double"


# Characters a backslash may escape inside double quotes
DOUBLE_QUOTE_ESCAPABLE = ('"', '\\', '$', '`', '\n')


def tokenize(line: str) -> List[str]:
    """
    Split a command line into tokens

    Args:
        line: Raw command line

    Returns:
        List of tokens with quoting and escaping removed

    Examples:
        >>> tokenize("echo 'a  b'")
        ['echo', 'a  b']
        >>> tokenize("echo a\\\\ b")
        ['echo', 'a b']
    """
    tokens = []
    current = []
    mode = QuoteMode.NONE
    i = 0
    length = len(line)

    while i < length:
        char = line[i]

        if char == '\\' and mode != QuoteMode.SINGLE:
            if i + 1 < length:
                next_char = line[i + 1]
                if mode == QuoteMode.DOUBLE and next_char not in DOUBLE_QUOTE_ESCAPABLE:
                    # Not escapable here: keep the backslash, rescan next_char
                    current.append(char)
                else:
                    current.append(next_char)
                    i += 1
            else:
                current.append(char)
        elif char == "'" and mode != QuoteMode.DOUBLE:
            mode = QuoteMode.NONE if mode == QuoteMode.SINGLE else QuoteMode.SINGLE
        elif char == '"' and mode != QuoteMode.SINGLE:
            mode = QuoteMode.NONE if mode == QuoteMode.DOUBLE else QuoteMode.DOUBLE
        elif char == ' ' and mode == QuoteMode.NONE:
            if current:
                tokens.append(''.join(current))
                current = []
            while i + 1 < length and line[i + 1] == ' ':
                i += 1
        else:
            current.append(char)
        i += 1

    if current:
        tokens.append(''.join(current))

    return tokens
