"""
Command Parser Module

Splits a shell line into a command name and its arguments.

Author: YSNRFD
Version: 1.0.0
"""

from dataclasses import dataclass, field
from typing import Optional, List, Tuple

# (start, end) of a token in the line; None when quoting or escapes changed it
Span = Optional[Tuple[int, int]]


@dataclass
class ParsedCommand:
    """A parsed command line."""
    command: str
    args: List[str] = field(default_factory=list)
    line: str = ""
    spans: List[Span] = field(default_factory=list, repr=False)

    def rest(self, start: int) -> str:
        """
        Arguments from `start` on, as typed.

        Whitespace between the arguments is kept. If any of them was
        quoted or escaped, the unquoted words are joined by single spaces.
        """
        spans = self.spans[start:]
        if not spans:
            return ""
        if any(span is None for span in spans):
            return " ".join(self.args[start:])
        return self.line[spans[0][0]:spans[-1][1]]


class CommandParser:
    """
    Parses shell command lines.

    Handles:
    - Command and arguments separated by whitespace
    - Single and double quoted strings
    - Backslash escapes
    - '#' comment lines

    Example:
        >>> parser = CommandParser()
        >>> cmd = parser.parse('touch /docs/a.txt "hello  world"')
        >>> cmd.args
        ['/docs/a.txt', 'hello  world']
    """

    def __init__(self, history_size: int = 1000):
        self._history: List[str] = []
        self._history_size = history_size

    def parse(self, line: str) -> Optional[ParsedCommand]:
        """
        Parse a command line.

        Args:
            line: Command line string

        Returns:
            ParsedCommand or None if empty
        """
        line = line.strip()

        if not line or line.startswith('#'):
            return None

        self._history.append(line)
        if len(self._history) > self._history_size:
            self._history = self._history[-self._history_size:]

        tokens = self._tokenize(line)

        if not tokens:
            return None

        words = [word for word, _ in tokens]
        spans = [span for _, span in tokens]

        return ParsedCommand(
            command=words[0],
            args=words[1:],
            line=line,
            spans=spans[1:],
        )

    def _tokenize(self, line: str) -> List[Tuple[str, Span]]:
        """Convert a line into words with their positions."""
        tokens: List[Tuple[str, Span]] = []
        current = ""
        in_quote = None
        quoted = False
        start = None
        i = 0

        def flush(end: int) -> None:
            span = None if quoted else (start, end)
            tokens.append((current, span))

        while i < len(line):
            char = line[i]

            if start is None and not char.isspace():
                start = i

            # Handle quotes
            if char in ('"', "'") and in_quote is None:
                in_quote = char
                quoted = True
                i += 1
                continue

            if char == in_quote:
                in_quote = None
                i += 1
                continue

            # Handle escape
            if char == '\\' and i + 1 < len(line):
                current += line[i + 1]
                quoted = True
                i += 2
                continue

            # Inside quotes, just add character
            if in_quote:
                current += char
                i += 1
                continue

            if char.isspace():
                if current or quoted:
                    flush(i)
                    current = ""
                    quoted = False
                start = None
                i += 1
                continue

            current += char
            i += 1

        if current or quoted:
            flush(len(line))

        return tokens

    def get_history(self) -> List[str]:
        """Get command history."""
        return self._history

    def clear_history(self) -> None:
        """Clear command history."""
        self._history.clear()
