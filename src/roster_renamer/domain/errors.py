from __future__ import annotations

from dataclasses import dataclass

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_VALIDATION = 2
EXIT_CANCELLED = 3


class RenamerError(Exception):
    exit_code = EXIT_FAILURE


class ConfigError(RenamerError):
    """The roster file is missing or cannot be parsed."""

    exit_code = EXIT_VALIDATION


class ValidationError(RenamerError):
    """Input files, class selection or target names are unusable; nothing was changed."""

    exit_code = EXIT_VALIDATION


class StateError(RenamerError):
    """Leftover state on disk (backup directory, manifest) blocks the operation."""

    exit_code = EXIT_FAILURE


class BackupError(RenamerError):
    exit_code = EXIT_FAILURE


class CancelledError(RenamerError):
    exit_code = EXIT_CANCELLED


@dataclass(frozen=True)
class ItemError:
    """A single file that could not be copied, renamed or restored."""

    name: str
    target: str
    reason: str

    def __str__(self) -> str:
        return f"{self.name} -> {self.target}: {self.reason}"
