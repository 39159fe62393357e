from __future__ import annotations

import logging
from pathlib import Path

from roster_renamer.domain.errors import ItemError, StateError, ValidationError
from roster_renamer.domain.models import (
    CandidateFile,
    NameStyle,
    RenameMapping,
    RenamePlan,
    RenameReport,
    RosterEntry,
)
from roster_renamer.domain.rename_logic import (
    build_mappings,
    check_duplicates,
    check_occupied_targets,
    check_target_names,
    is_case_insensitive_fs,
    select_class,
    validate_candidates,
)
from roster_renamer.ports.folder_port import FolderPort
from roster_renamer.ports.manifest_port import ManifestPort
from roster_renamer.ports.roster_port import RosterPort
from roster_renamer.services.backup_service import BackupService

logger = logging.getLogger(__name__)


class RenameService:
    def __init__(
        self,
        folder: FolderPort,
        roster: RosterPort,
        manifest: ManifestPort,
        backup: BackupService,
        name_style: NameStyle = NameStyle.CLASS_PREFIXED,
        case_insensitive: bool | None = None,
    ) -> None:
        self._folder = folder
        self._roster = roster
        self._manifest = manifest
        self._backup = backup
        self._name_style = name_style
        self._case_insensitive = (
            is_case_insensitive_fs() if case_insensitive is None else case_insensitive
        )

    @property
    def backup(self) -> BackupService:
        return self._backup

    def load_roster(self, roster_path: Path) -> list[RosterEntry]:
        return self._roster.load_roster(roster_path)

    def list_candidates(self, folder: Path) -> list[CandidateFile]:
        try:
            files = self._folder.list_files(folder)
        except OSError as exc:
            raise ValidationError(f"Cannot read folder {folder}: {exc}") from exc
        manifest_name = self._manifest.manifest_path(folder).name
        return [f for f in files if f.name != manifest_name]

    def ensure_ready(self, folder: Path) -> None:
        if self._manifest.has_manifest(folder):
            raise StateError(
                f"A rename manifest already exists in {folder}. "
                "Run undo first, or delete the manifest if that run was already reverted."
            )
        self._backup.ensure_absent(folder)

    def validate_folder(self, folder: Path) -> list[CandidateFile]:
        """Refuse a folder with a pending run, then return its candidates in rename order."""
        folder = Path(folder)
        self.ensure_ready(folder)
        return validate_candidates(self.list_candidates(folder))

    def map_class(
        self, files: list[CandidateFile], roster: list[RosterEntry], class_name: str
    ) -> tuple[list[RosterEntry], list[RenameMapping]]:
        entries = select_class(roster, class_name)
        mappings = build_mappings(files, entries, self._name_style)
        check_target_names(mappings)
        return entries, mappings

    def check_plan(
        self,
        folder: Path,
        class_name: str,
        files: list[CandidateFile],
        entries: list[RosterEntry],
        mappings: list[RenameMapping],
    ) -> RenamePlan:
        """Reject targets that collide with each other or with files left in the folder."""
        check_duplicates(mappings, self._case_insensitive)
        check_occupied_targets(mappings, [f.name for f in files], self._case_insensitive)
        return RenamePlan(
            folder=Path(folder),
            class_name=class_name,
            files=files,
            mappings=mappings,
            roster_count=len(entries),
        )

    def preview_rename(
        self, folder: Path, roster: list[RosterEntry], class_name: str
    ) -> RenamePlan:
        """Validate the folder and class, then build the checked mapping without touching disk."""
        files = self.validate_folder(folder)
        entries, mappings = self.map_class(files, roster, class_name)
        return self.check_plan(folder, class_name, files, entries, mappings)

    def create_backup(self, plan: RenamePlan) -> Path:
        if self._manifest.has_manifest(plan.folder):
            raise StateError(f"A rename manifest already exists in {plan.folder}; run undo first.")
        return self._backup.create_backup(plan)

    def execute_renames(self, mappings: list[RenameMapping]) -> RenameReport:
        report = RenameReport()
        for mapping in mappings:
            if not self._folder.exists(mapping.old_path):
                report.failed.append(
                    ItemError(mapping.old_name, mapping.new_name, "source file is missing")
                )
                continue
            try:
                self._folder.rename_file(mapping.old_path, mapping.new_path)
            except FileExistsError:
                report.failed.append(
                    ItemError(mapping.old_name, mapping.new_name, "target already exists")
                )
                continue
            except OSError as exc:
                report.failed.append(ItemError(mapping.old_name, mapping.new_name, str(exc)))
                continue
            report.applied.append(mapping)
        logger.debug(
            "Rename pass finished: %d applied, %d failed", report.success_count, report.error_count
        )
        return report

    def write_manifest(self, plan: RenamePlan, report: RenameReport) -> Path | None:
        if not report.applied:
            return None
        path = self._manifest.save_manifest(plan.folder, report.applied)
        report.manifest_path = path
        return path

    def apply_rename(self, plan: RenamePlan) -> RenameReport:
        backup_dir = self.create_backup(plan)
        report = self.execute_renames(plan.mappings)
        report.backup_dir = backup_dir
        self.write_manifest(plan, report)
        return report
