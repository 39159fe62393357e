from __future__ import annotations

import csv
import logging
from pathlib import Path

from roster_renamer.domain.errors import StateError
from roster_renamer.domain.models import RenameMapping
from roster_renamer.ports.manifest_port import ManifestPort

logger = logging.getLogger(__name__)

MANIFEST_COLUMNS = ["OldName", "NewName", "OldPath", "NewPath"]


class CsvManifestAdapter(ManifestPort):
    def __init__(self, manifest_name: str = "rename_manifest.csv") -> None:
        self._manifest_name = manifest_name

    @property
    def manifest_name(self) -> str:
        return self._manifest_name

    def manifest_path(self, folder: Path) -> Path:
        return Path(folder) / self._manifest_name

    def has_manifest(self, folder: Path) -> bool:
        return self.manifest_path(folder).is_file()

    def save_manifest(self, folder: Path, mappings: list[RenameMapping]) -> Path:
        path = self.manifest_path(folder)
        try:
            with path.open("w", newline="", encoding="utf-8") as handle:
                writer = csv.DictWriter(handle, fieldnames=MANIFEST_COLUMNS)
                writer.writeheader()
                for mapping in mappings:
                    writer.writerow(
                        {
                            "OldName": mapping.old_name,
                            "NewName": mapping.new_name,
                            "OldPath": str(mapping.old_path),
                            "NewPath": str(mapping.new_path),
                        }
                    )
        except OSError as exc:
            raise StateError(
                f"Failed to write manifest {path}: {exc}. "
                "The backup directory still holds the original files."
            ) from exc
        logger.debug("Wrote %d manifest rows to %s", len(mappings), path)
        return path

    def load_manifest(self, folder: Path) -> list[RenameMapping]:
        path = self.manifest_path(folder)
        if not path.is_file():
            raise StateError(f"No manifest found in {folder}; there is nothing to undo.")
        try:
            with path.open("r", newline="", encoding="utf-8") as handle:
                reader = csv.DictReader(handle)
                missing = [c for c in MANIFEST_COLUMNS if c not in (reader.fieldnames or [])]
                if missing:
                    raise StateError(
                        f"Manifest {path} is malformed (missing {', '.join(missing)}); "
                        "restore from the backup directory manually."
                    )
                mappings = [
                    RenameMapping(
                        old_name=row["OldName"] or "",
                        new_name=row["NewName"] or "",
                        old_path=Path(row["OldPath"] or ""),
                        new_path=Path(row["NewPath"] or ""),
                    )
                    for row in reader
                ]
        except (OSError, UnicodeDecodeError, csv.Error) as exc:
            raise StateError(f"Failed to read manifest {path}: {exc}") from exc
        if any(not m.old_name or not m.new_name for m in mappings):
            raise StateError(
                f"Manifest {path} has rows without OldName/NewName; "
                "restore from the backup directory manually."
            )
        return mappings

    def delete_manifest(self, folder: Path) -> None:
        path = self.manifest_path(folder)
        try:
            path.unlink()
        except FileNotFoundError:
            return
        except OSError as exc:
            raise StateError(f"Failed to delete manifest {path}: {exc}") from exc
        logger.debug("Deleted manifest %s", path)
