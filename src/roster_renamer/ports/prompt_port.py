from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class PromptPort(Protocol):
    def pick_folder(self, title: str) -> Path | None:
        """Return an absolute directory path, or None if the operator cancelled."""

    def ask_text(self, message: str) -> str | None:
        """Return the entered text, or None if the operator cancelled."""

    def confirm(self, message: str) -> bool:
        """Return True only on an explicit yes."""
