from __future__ import annotations

import logging
from pathlib import Path

from roster_renamer.domain.errors import ItemError
from roster_renamer.domain.models import RenameMapping, UndoReport
from roster_renamer.ports.folder_port import FolderPort
from roster_renamer.ports.manifest_port import ManifestPort

logger = logging.getLogger(__name__)


class UndoService:
    def __init__(self, folder: FolderPort, manifest: ManifestPort) -> None:
        self._folder = folder
        self._manifest = manifest

    def load_manifest(self, folder: Path) -> list[RenameMapping]:
        return self._manifest.load_manifest(folder)

    def undo_rename(self, folder: Path, mappings: list[RenameMapping]) -> UndoReport:
        """
        Rename every recorded file back, newest first, resolving names against
        the given folder. Missing files are skipped, occupied original names
        are never overwritten, and the manifest is removed at the end. The
        backup directory is left alone.
        """
        folder = Path(folder)
        report = UndoReport()
        for mapping in reversed(mappings):
            current = folder / mapping.new_name
            original = folder / mapping.old_name
            if not self._folder.exists(current):
                report.missing.append(mapping)
                continue
            if self._folder.exists(original):
                report.failed.append(
                    ItemError(mapping.new_name, mapping.old_name, "original name is already taken")
                )
                continue
            try:
                self._folder.rename_file(current, original)
            except OSError as exc:
                report.failed.append(ItemError(mapping.new_name, mapping.old_name, str(exc)))
                continue
            report.restored.append(mapping)

        self._manifest.delete_manifest(folder)
        logger.debug(
            "Undo finished in %s: %d restored, %d missing, %d failed",
            folder,
            len(report.restored),
            len(report.missing),
            report.error_count,
        )
        return report
