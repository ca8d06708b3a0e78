"""--debug line classification dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from cleanstring.clean import Step, scan_lines


def dump_lines(text: str, prefix: str, *, file: TextIO | None = None) -> None:
    """Print how each line of *text* is classified and handled to *file*.

    *file* defaults to the current ``sys.stderr``.
    """
    if file is None:
        file = sys.stderr
    steps = list(scan_lines(text, prefix)) if text else []

    file.write(f"prefix {prefix!r}, {len(steps)} line(s)\n")
    for step in steps:
        file.write(
            f"{step.number:>4} {step.phase.name:<13} {_kind(step)} "
            f"{step.action.name.lower():<4} {step.line!r}\n"
        )


def _kind(step: Step) -> str:
    if step.info.is_blank:
        return "blank      "
    if step.info.strip_length:
        return f"strip[{step.info.strip_length:>3}] "
    return "verbatim   "
