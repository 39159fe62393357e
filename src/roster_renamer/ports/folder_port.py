from __future__ import annotations

from pathlib import Path
from typing import Protocol

from roster_renamer.domain.models import CandidateFile


class FolderPort(Protocol):
    def list_files(self, folder: Path) -> list[CandidateFile]:
        """Return the regular, non-hidden files directly inside a folder."""

    def exists(self, path: Path) -> bool:
        """Return True if anything exists at the path."""

    def make_dir(self, path: Path) -> None:
        """Create a directory; fail if it already exists."""

    def copy_file(self, src: Path, dst: Path) -> None:
        """Copy a file with its metadata; never overwrite."""

    def rename_file(self, src: Path, dst: Path) -> None:
        """Rename a file; fail if the destination exists."""
