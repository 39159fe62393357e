from __future__ import annotations

from pathlib import Path
from typing import Protocol

from roster_renamer.domain.models import RenameMapping


class ManifestPort(Protocol):
    def manifest_path(self, folder: Path) -> Path:
        """Return where the manifest for a folder lives."""

    def has_manifest(self, folder: Path) -> bool:
        """Return True if a folder has a pending manifest."""

    def save_manifest(self, folder: Path, mappings: list[RenameMapping]) -> Path:
        """Persist applied mappings and return the manifest path."""

    def load_manifest(self, folder: Path) -> list[RenameMapping]:
        """Return the mappings recorded for a folder."""

    def delete_manifest(self, folder: Path) -> None:
        """Remove the manifest for a folder."""
