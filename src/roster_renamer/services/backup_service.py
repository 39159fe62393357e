from __future__ import annotations

import logging
from pathlib import Path

from roster_renamer.domain.errors import BackupError, StateError
from roster_renamer.domain.models import RenamePlan
from roster_renamer.ports.folder_port import FolderPort

logger = logging.getLogger(__name__)


class BackupService:
    def __init__(self, folder: FolderPort, backup_dir_name: str = "_originals_backup") -> None:
        self._folder = folder
        self._backup_dir_name = backup_dir_name

    def backup_dir(self, folder: Path) -> Path:
        return Path(folder) / self._backup_dir_name

    def ensure_absent(self, folder: Path) -> None:
        backup_dir = self.backup_dir(folder)
        if self._folder.exists(backup_dir):
            raise StateError(
                f"Backup directory already exists: {backup_dir}. "
                "It holds originals from an earlier run; move or delete it manually, then run again."
            )

    def create_backup(self, plan: RenamePlan) -> Path:
        """
        Copy every candidate file of the plan into a fresh backup directory
        under its original name. Any failure aborts before a rename happens.
        """
        self.ensure_absent(plan.folder)
        backup_dir = self.backup_dir(plan.folder)
        try:
            self._folder.make_dir(backup_dir)
        except OSError as exc:
            raise BackupError(f"Failed to create backup directory {backup_dir}: {exc}") from exc

        for file in plan.files:
            try:
                self._folder.copy_file(file.path, backup_dir / file.name)
            except OSError as exc:
                raise BackupError(
                    f"Failed to back up {file.name}: {exc}. No file was renamed; "
                    f"remove the partial backup {backup_dir} before running again."
                ) from exc
        logger.debug("Backed up %d file(s) to %s", len(plan.files), backup_dir)
        return backup_dir
