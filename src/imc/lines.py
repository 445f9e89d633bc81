"""Line normalization and the shared line cursor."""

import re
from dataclasses import dataclass, field

# LF followed by a single space or tab marks a folded continuation line.
FOLD_PATTERN = re.compile(r"\n[ \t]")


def normalize_line_endings(text: str) -> str:
    """Convert DOS (CRLF) and old Mac (CR) line endings to LF."""
    # CRLF first so a CRLF pair is not turned into two line breaks
    return text.replace("\r\n", "\n").replace("\r", "\n")


def unfold(text: str) -> str:
    """Join folded continuation lines.

    Only the first whitespace character of the continuation is consumed;
    any further leading whitespace stays part of the value.
    """
    return FOLD_PATTERN.sub("", text)


def split_lines(text: str) -> list[str]:
    """Normalize, unfold, and split text into logical lines."""
    return unfold(normalize_line_endings(text)).split("\n")


@dataclass
class SourceLines:
    """Logical lines plus the cursor shared by every level of the descent.

    The cursor starts before the first line, so the first ``advance()``
    lands on line 0. It never moves backwards.
    """

    lines: list[str]
    index: int = field(default=-1)

    @classmethod
    def from_text(cls, text: str) -> "SourceLines":
        return cls(split_lines(text))

    def advance(self) -> bool:
        """Move to the next line. Returns False once the lines are exhausted."""
        if self.index < len(self.lines):
            self.index += 1
        return self.index < len(self.lines)

    @property
    def current(self) -> str:
        return self.lines[self.index]

    @property
    def line_number(self) -> int:
        """1-based number of the current logical line."""
        return self.index + 1

    def __len__(self) -> int:
        return len(self.lines)
