from __future__ import annotations

from typing import Any

from roster_renamer.adapters.csv_manifest import CsvManifestAdapter
from roster_renamer.adapters.csv_roster import CsvRosterAdapter
from roster_renamer.adapters.local_folder import LocalFolderAdapter
from roster_renamer.domain.models import NameStyle
from roster_renamer.services.backup_service import BackupService
from roster_renamer.services.rename_service import RenameService
from roster_renamer.services.undo_service import UndoService
from roster_renamer.settings import BACKUP_DIR_NAME, MANIFEST_NAME, NAME_STYLE


def build_services(
    name_style: str = NAME_STYLE,
    backup_dir_name: str = BACKUP_DIR_NAME,
    manifest_name: str = MANIFEST_NAME,
    case_insensitive: bool | None = None,
) -> dict[str, Any]:
    folder = LocalFolderAdapter()
    roster = CsvRosterAdapter()
    manifest = CsvManifestAdapter(manifest_name)
    backup_service = BackupService(folder, backup_dir_name)
    return {
        "rename_service": RenameService(
            folder,
            roster,
            manifest,
            backup_service,
            name_style=NameStyle(name_style),
            case_insensitive=case_insensitive,
        ),
        "undo_service": UndoService(folder, manifest),
        "backup_service": backup_service,
        "folder": folder,
        "roster": roster,
        "manifest": manifest,
    }
