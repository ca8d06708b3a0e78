"""Error types with formatted file context."""

from __future__ import annotations

from pathlib import Path


class ConfigError(Exception):
    """Raised when a config file cannot be parsed or holds a bad value."""

    def __init__(self, message: str, path: Path, key: str | None = None) -> None:
        self.message = message
        self.path = path
        self.key = key
        super().__init__(self.format())

    def format(self) -> str:
        gutter = "  "
        result = f"error: {self.message}\n{gutter}--> {self.path}"
        if self.key is not None:
            result += f"\n{gutter} |\n{gutter} = key: {self.key}"
        return result
