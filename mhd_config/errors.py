"""Exception types raised while loading, resolving and persisting configs."""

from __future__ import annotations

from pathlib import Path


class ConfigError(Exception):
    """Base class for configuration failures."""


class ConfigSourceError(ConfigError):
    """The configuration document could not be read or parsed."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot load config {self.path}: {reason}")


class ConfigTypeError(ConfigError, ValueError):
    """A key is present but its value cannot be coerced to the declared type."""

    def __init__(self, key: str, value: object, expected: str) -> None:
        self.key = key
        self.value = value
        self.expected = expected
        super().__init__(f"{key} must be {expected}, got {value!r}")


class IOWriteError(ConfigError, OSError):
    """A persisted artifact could not be written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        self.path = Path(path)
        super().__init__(f"Cannot write {self.path}: {reason}")
