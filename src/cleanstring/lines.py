"""Per-line classification: blank detection and prefix-marker measurement."""

from __future__ import annotations

from dataclasses import dataclass

# A single space directly after the prefix separates it from the content
SEPARATOR = " "


@dataclass(frozen=True, slots=True)
class LineInfo:
    """Classification of a single line.

    ``strip_length`` is only meaningful for non-blank lines. It covers the
    leading whitespace run, the prefix and an optional separator space, or
    is 0 when the prefix does not follow the whitespace (the line is then
    kept verbatim).
    """

    is_blank: bool
    strip_length: int = 0

    def content(self, line: str) -> str:
        """Return the retained part of *line*."""
        return line[self.strip_length :]


def leading_whitespace(line: str) -> int:
    """Return the length of the whitespace run at the start of *line*."""
    pos = 0
    while pos < len(line) and line[pos].isspace():
        pos += 1
    return pos


def classify_line(line: str, prefix: str) -> LineInfo:
    """Classify *line* against the configured *prefix* marker."""
    pos = leading_whitespace(line)

    if pos == len(line):
        return LineInfo(is_blank=True)

    # An empty prefix matches everywhere, leaving just the whitespace run
    if not line.startswith(prefix, pos):
        return LineInfo(is_blank=False, strip_length=0)

    pos += len(prefix)
    if prefix and line.startswith(SEPARATOR, pos):
        pos += len(SEPARATOR)
    return LineInfo(is_blank=False, strip_length=pos)
