"""Cleanup of indented multi-line string literals."""

from __future__ import annotations

from cleanstring.clean import DEFAULT_PREFIX, CleanOptions, clean

__version__ = "0.1.0"

__all__ = ["DEFAULT_PREFIX", "CleanOptions", "clean", "__version__"]
