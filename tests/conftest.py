"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from cleanstring.clean import CleanOptions, clean


def join_lines(*lines: str) -> str:
    """Join lines with newline, for writing multi-line inputs explicitly."""
    return "\n".join(lines)


@pytest.fixture
def clean_with():
    """Return a helper that cleans text with the given prefix."""

    def _clean(text: str, prefix: str) -> str:
        return clean(text, CleanOptions(prefix=prefix))

    return _clean
