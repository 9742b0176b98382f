"""Rekompenco exception hierarchy."""

from __future__ import annotations

from pathlib import Path


class RekompencoError(Exception):
    """Base exception for all Rekompenco errors."""


class ConfigError(RekompencoError):
    """Raised when the configuration is invalid or cannot be read."""


class ConfigNotFoundError(ConfigError):
    """Raised when the configuration file does not exist."""


class StoreError(RekompencoError):
    """Raised when the achievement file cannot be loaded."""


class MalformedFileError(StoreError):
    """Raised when a line of the achievement file does not have exactly five fields."""

    def __init__(
        self, path: Path | str | None, line_number: int | None, field_count: int
    ) -> None:
        self.path = Path(path) if path is not None else None
        self.line_number = line_number
        self.field_count = field_count
        where = "malformed row"
        if self.path is not None:
            where = f"{self.path}: malformed row at line {line_number}"
        super().__init__(
            f"{where} "
            f"(expected id, name, description, data type and data; got {field_count} fields)"
        )


class RecordFormatError(StoreError, ValueError):
    """Raised when the data type field is not an unsigned 16-bit decimal integer."""

    def __init__(
        self,
        value: str,
        path: Path | str | None = None,
        line_number: int | None = None,
    ) -> None:
        self.value = value
        self.path = Path(path) if path is not None else None
        self.line_number = line_number
        where = ""
        if self.path is not None:
            where = f"{self.path}: line {line_number}: "
        super().__init__(f"{where}invalid data type {value!r} (expected integer 0-65535)")
