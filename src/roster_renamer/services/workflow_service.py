from __future__ import annotations

from pathlib import Path

from roster_renamer.domain.errors import EXIT_FAILURE, EXIT_OK, CancelledError, RenamerError
from roster_renamer.domain.models import RunContext, RunOutcome, RunState
from roster_renamer.domain.rename_logic import distinct_classes
from roster_renamer.ports.event_sink_port import EventSinkPort
from roster_renamer.ports.prompt_port import PromptPort
from roster_renamer.services.rename_service import RenameService
from roster_renamer.services.undo_service import UndoService

_PREVIEW_LIMIT = 50


def _finish_with_error(ctx: RunContext, sink: EventSinkPort, exc: RenamerError) -> None:
    if isinstance(exc, CancelledError):
        sink.emit("warning", f"Cancelled: {exc}")
        ctx.finish(RunOutcome.CANCELLED, exc.exit_code)
    else:
        sink.emit("error", str(exc))
        ctx.finish(RunOutcome.ERROR, exc.exit_code)


class RenameWorkflow:
    """Interactive rename run: roster, folder, class, preview, backup, rename, manifest."""

    def __init__(
        self,
        rename_service: RenameService,
        prompt: PromptPort,
        sink: EventSinkPort,
        roster_path: Path,
    ) -> None:
        self._service = rename_service
        self._prompt = prompt
        self._sink = sink
        self._roster_path = Path(roster_path)

    def run(self, ctx: RunContext | None = None) -> RunContext:
        ctx = ctx or RunContext(roster_path=self._roster_path)
        try:
            self._run(ctx)
        except RenamerError as exc:
            _finish_with_error(ctx, self._sink, exc)
        return ctx

    def _run(self, ctx: RunContext) -> None:
        roster_path = ctx.roster_path or self._roster_path
        ctx.roster = self._service.load_roster(roster_path)
        classes = distinct_classes(ctx.roster)
        ctx.advance(RunState.ROSTER_LOADED)
        self._sink.emit(
            "info", f"Loaded {len(ctx.roster)} student(s) in {len(classes)} class(es) from {roster_path}"
        )

        folder = self._prompt.pick_folder("Folder with the photos to rename")
        if folder is None:
            raise CancelledError("no folder selected.")
        ctx.folder = Path(folder)
        ctx.advance(RunState.FOLDER_SELECTED)

        files = self._service.validate_folder(ctx.folder)
        ctx.advance(RunState.VALIDATED)

        class_name = self._prompt.ask_text(f"Class to process ({', '.join(classes)})")
        if class_name is None:
            raise CancelledError("no class entered.")
        ctx.class_name = class_name

        entries, mappings = self._service.map_class(files, ctx.roster, class_name)
        ctx.advance(RunState.MAPPED)

        plan = self._service.check_plan(ctx.folder, class_name, files, entries, mappings)
        ctx.plan = plan
        ctx.advance(RunState.DUPLICATE_CHECKED)

        if plan.count_mismatch:
            self._sink.emit(
                "warning",
                f"{plan.file_count} photo(s) but {plan.roster_count} student(s) in class {class_name}.",
            )
            if not self._prompt.confirm(
                f"Continue and rename only the first {plan.pair_count} pair(s)?"
            ):
                raise CancelledError("photo and student counts differ.")

        self._sink.emit("info", f"Planned renames in {plan.folder}:")
        for mapping in plan.mappings[:_PREVIEW_LIMIT]:
            self._sink.emit("info", f"  {mapping.old_name} -> {mapping.new_name}")
        if plan.pair_count > _PREVIEW_LIMIT:
            self._sink.emit("info", f"  ... and {plan.pair_count - _PREVIEW_LIMIT} more")
        if not self._prompt.confirm(f"Back up and rename {plan.pair_count} file(s)?"):
            raise CancelledError("rename not confirmed.")

        backup_dir = self._service.create_backup(plan)
        ctx.advance(RunState.BACKED_UP)
        self._sink.emit("info", f"Backed up {plan.file_count} original(s) to {backup_dir}")

        report = self._service.execute_renames(plan.mappings)
        report.backup_dir = backup_dir
        ctx.report = report
        ctx.advance(RunState.RENAMED)

        manifest_path = self._service.write_manifest(plan, report)
        ctx.advance(RunState.MANIFEST_WRITTEN)
        if manifest_path is not None:
            self._sink.emit("info", f"Undo record written to {manifest_path}")

        if report.failed:
            self._sink.emit("warning", report.summary())
            ctx.finish(RunOutcome.ERROR, EXIT_FAILURE)
        else:
            self._sink.emit("info", report.summary())
            ctx.finish(RunOutcome.SUCCESS, EXIT_OK)


class UndoWorkflow:
    """Interactive undo: folder, manifest preview, confirmation, restore."""

    def __init__(self, undo_service: UndoService, prompt: PromptPort, sink: EventSinkPort) -> None:
        self._service = undo_service
        self._prompt = prompt
        self._sink = sink

    def run(self, ctx: RunContext | None = None) -> RunContext:
        ctx = ctx or RunContext()
        try:
            self._run(ctx)
        except RenamerError as exc:
            _finish_with_error(ctx, self._sink, exc)
        return ctx

    def _run(self, ctx: RunContext) -> None:
        folder = self._prompt.pick_folder("Folder to restore")
        if folder is None:
            raise CancelledError("no folder selected.")
        ctx.folder = Path(folder)

        mappings = self._service.load_manifest(ctx.folder)
        ctx.advance(RunState.MANIFEST_LOADED)
        self._sink.emit("info", f"{len(mappings)} rename(s) recorded in {ctx.folder}:")
        for mapping in mappings[:_PREVIEW_LIMIT]:
            self._sink.emit("info", f"  {mapping.new_name} -> {mapping.old_name}")
        if len(mappings) > _PREVIEW_LIMIT:
            self._sink.emit("info", f"  ... and {len(mappings) - _PREVIEW_LIMIT} more")
        if not self._prompt.confirm(f"Restore {len(mappings)} original name(s)?"):
            raise CancelledError("undo not confirmed.")
        ctx.advance(RunState.CONFIRMED)

        report = self._service.undo_rename(ctx.folder, mappings)
        ctx.undo_report = report
        ctx.advance(RunState.RESTORED)
        for mapping in report.missing:
            self._sink.emit("warning", f"Not found, skipped: {mapping.new_name}")

        if report.failed:
            self._sink.emit("warning", report.summary())
            ctx.finish(RunOutcome.ERROR, EXIT_FAILURE)
        else:
            self._sink.emit("info", report.summary())
            ctx.finish(RunOutcome.SUCCESS, EXIT_OK)
