"""Cleaning of indented, prefix-marked multi-line string literals."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from enum import Enum, auto

from cleanstring.lines import LineInfo, classify_line

DEFAULT_PREFIX = "|"


class Phase(Enum):
    SEEKING_START = auto()
    BODY = auto()


class Action(Enum):
    DROP = auto()
    KEEP = auto()
    EMIT = auto()


@dataclass(frozen=True, slots=True)
class CleanOptions:
    """Options accepted by clean()."""

    prefix: str | None = None


@dataclass(frozen=True, slots=True)
class Step:
    """How one input line was handled.

    ``phase`` is the phase in effect when the line was read. ``KEEP`` marks
    an interior blank line emitted verbatim, ``EMIT`` a content line emitted
    with its prefix stripped.
    """

    number: int
    line: str
    phase: Phase
    info: LineInfo
    action: Action

    @property
    def text(self) -> str:
        if self.action is Action.EMIT:
            return self.info.content(self.line)
        return self.line


def resolve_prefix(options: CleanOptions | Mapping[str, str] | None) -> str:
    """Resolve the prefix marker, falling back to the default.

    ``None``, an empty mapping, and options without a prefix all resolve to
    ``DEFAULT_PREFIX``.
    """
    if options is None:
        return DEFAULT_PREFIX
    if isinstance(options, CleanOptions):
        prefix = options.prefix
    else:
        prefix = options.get("prefix")
    return DEFAULT_PREFIX if prefix is None else prefix


def scan_lines(text: str, prefix: str) -> Iterator[Step]:
    """Yield a Step for every line of *text*, in input order.

    Blank lines in the body are held back until the next content line
    decides their fate, so each step is yielded with its final action.
    """
    phase = Phase.SEEKING_START
    pending: list[Step] = []

    for number, line in enumerate(text.split("\n"), start=1):
        info = classify_line(line, prefix)

        if phase is Phase.SEEKING_START:
            if info.is_blank:
                yield Step(number, line, phase, info, Action.DROP)
            else:
                yield Step(number, line, phase, info, Action.EMIT)
                phase = Phase.BODY
        elif info.is_blank:
            pending.append(Step(number, line, phase, info, Action.KEEP))
        else:
            yield from pending
            pending.clear()
            yield Step(number, line, phase, info, Action.EMIT)

    for step in pending:
        yield Step(step.number, step.line, step.phase, step.info, Action.DROP)


def clean(text: str | None, options: CleanOptions | Mapping[str, str] | None = None) -> str:
    """Trim blank edge lines and strip the prefix marker from each line.

    Algorithm:
    1. Split into lines on newline.
    2. Discard blank lines until the first non-blank line.
    3. Strip whitespace, prefix and one separator space from each non-blank
       line; lines without the prefix are kept verbatim.
    4. Hold blank lines in the body back, emitting them unchanged only when
       another non-blank line follows. Trailing blanks are dropped.
    5. Rejoin with newline.

    Example::

        clean('''
            |Any literal
            |which needs to be split
        ''')
        # -> "Any literal\\nwhich needs to be split"
    """
    if not text:
        return ""

    prefix = resolve_prefix(options)
    return "\n".join(
        step.text for step in scan_lines(text, prefix) if step.action is not Action.DROP
    )
