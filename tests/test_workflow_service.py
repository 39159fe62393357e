from pathlib import Path

from roster_renamer.adapters.logging_sink import MemoryEventSink
from roster_renamer.adapters.scripted_prompt import ScriptedPromptAdapter
from roster_renamer.container import build_services
from roster_renamer.domain.models import RunContext, RunOutcome, RunState
from roster_renamer.services.workflow_service import RenameWorkflow, UndoWorkflow


def _roster(tmp_path: Path, rows: list[tuple[str, str]]) -> Path:
    roster_path = tmp_path / "students.csv"
    lines = ["Full Name,Class"] + [f"{name},{class_name}" for name, class_name in rows]
    roster_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return roster_path


def _photos(tmp_path: Path, names: list[str]) -> Path:
    folder = tmp_path / "photos"
    folder.mkdir()
    for name in names:
        (folder / name).write_bytes(f"bytes of {name}".encode())
    return folder


def _names(folder: Path) -> list[str]:
    return sorted(p.name for p in folder.iterdir() if p.is_file())


class _RecordingContext(RunContext):
    def advance(self, state: RunState) -> None:
        self.history = [*getattr(self, "history", []), state]
        super().advance(state)


def _rename(roster_path: Path, prompt: ScriptedPromptAdapter, sink: MemoryEventSink, **kwargs):
    services = build_services(case_insensitive=False, **kwargs)
    return RenameWorkflow(services["rename_service"], prompt, sink, roster_path).run()


def _undo(prompt: ScriptedPromptAdapter, sink: MemoryEventSink):
    services = build_services(case_insensitive=False)
    return UndoWorkflow(services["undo_service"], prompt, sink).run()


def test_example_scenario_rename_then_undo(tmp_path) -> None:
    roster_path = _roster(tmp_path, [("Ann Lee", "7A"), ("Ben Ng", "7A")])
    folder = _photos(tmp_path, ["img2.jpg", "img1.png"])
    sink = MemoryEventSink()

    ctx = _rename(
        roster_path,
        ScriptedPromptAdapter(folders=[folder], texts=["7A"], confirmations=[True]),
        sink,
    )

    assert ctx.outcome is RunOutcome.SUCCESS
    assert ctx.exit_code == 0
    assert ctx.state is RunState.TERMINAL
    assert _names(folder) == ["7A_Ann Lee.png", "7A_Ben Ng.jpg", "rename_manifest.csv"]
    backup_dir = folder / "_originals_backup"
    assert _names(backup_dir) == ["img1.png", "img2.jpg"]
    assert (backup_dir / "img1.png").read_bytes() == b"bytes of img1.png"
    assert (folder / "7A_Ann Lee.png").read_bytes() == b"bytes of img1.png"
    manifest_lines = (folder / "rename_manifest.csv").read_text(encoding="utf-8").splitlines()
    assert manifest_lines[1].startswith("img1.png,7A_Ann Lee.png,")
    assert manifest_lines[2].startswith("img2.jpg,7A_Ben Ng.jpg,")
    assert "  img1.png -> 7A_Ann Lee.png" in sink.messages("info")

    undo_ctx = _undo(ScriptedPromptAdapter(folders=[folder], confirmations=[True]), sink)

    assert undo_ctx.exit_code == 0
    assert _names(folder) == ["img1.png", "img2.jpg"]
    assert (folder / "img1.png").read_bytes() == b"bytes of img1.png"
    assert backup_dir.is_dir()


def test_count_mismatch_requires_confirmation(tmp_path) -> None:
    roster_path = _roster(tmp_path, [(f"Student {i}", "7A") for i in range(7)])
    folder = _photos(tmp_path, [f"img{i}.png" for i in range(5)])
    prompt = ScriptedPromptAdapter(folders=[folder], texts=["7A"], confirmations=[False])
    sink = MemoryEventSink()

    ctx = _rename(roster_path, prompt, sink)

    assert ctx.outcome is RunOutcome.CANCELLED
    assert ctx.exit_code == 3
    assert any("5 photo(s) but 7 student(s)" in m for m in sink.messages("warning"))
    assert prompt.asked[-1] == "Continue and rename only the first 5 pair(s)?"
    assert _names(folder) == [f"img{i}.png" for i in range(5)]
    assert not (folder / "_originals_backup").exists()


def test_count_mismatch_accepted_truncates(tmp_path) -> None:
    roster_path = _roster(tmp_path, [("Ann", "7A"), ("Ben", "7A")])
    folder = _photos(tmp_path, ["a.png", "b.png", "c.png"])
    prompt = ScriptedPromptAdapter(folders=[folder], texts=["7A"], confirmations=[True, True])

    ctx = _rename(roster_path, prompt, MemoryEventSink())

    assert ctx.exit_code == 0
    assert ctx.plan.pair_count == 2
    assert _names(folder) == ["7A_Ann.png", "7A_Ben.png", "c.png", "rename_manifest.csv"]
    assert _names(folder / "_originals_backup") == ["a.png", "b.png", "c.png"]


def test_duplicate_names_abort_before_backup(tmp_path) -> None:
    roster_path = _roster(tmp_path, [("Ann Lee", "7A"), ("Ann Lee", "7A")])
    folder = _photos(tmp_path, ["a.png", "b.png"])
    sink = MemoryEventSink()

    ctx = _rename(
        roster_path,
        ScriptedPromptAdapter(folders=[folder], texts=["7A"], confirmations=[True]),
        sink,
    )

    assert ctx.outcome is RunOutcome.ERROR
    assert ctx.exit_code == 2
    assert any("Duplicate target names" in m for m in sink.messages("error"))
    assert not (folder / "_originals_backup").exists()
    assert _names(folder) == ["a.png", "b.png"]


def test_unknown_class_lists_classes(tmp_path) -> None:
    roster_path = _roster(tmp_path, [("Ann", "7A"), ("Ben", "7B")])
    folder = _photos(tmp_path, ["a.png"])
    sink = MemoryEventSink()

    ctx = _rename(roster_path, ScriptedPromptAdapter(folders=[folder], texts=["9Z"]), sink)

    assert ctx.exit_code == 2
    assert ctx.state is RunState.TERMINAL
    assert "'7A', '7B'" in sink.messages("error")[0]


def test_bad_roster_fails_before_folder_prompt(tmp_path) -> None:
    prompt = ScriptedPromptAdapter()

    ctx = _rename(tmp_path / "missing.csv", prompt, MemoryEventSink())

    assert ctx.exit_code == 2
    assert prompt.asked == []


def test_cancelled_folder_pick_exits_cleanly(tmp_path) -> None:
    roster_path = _roster(tmp_path, [("Ann", "7A")])

    ctx = _rename(roster_path, ScriptedPromptAdapter(folders=[None]), MemoryEventSink())

    assert ctx.outcome is RunOutcome.CANCELLED
    assert ctx.exit_code == 3


def test_declined_final_confirmation_changes_nothing(tmp_path) -> None:
    roster_path = _roster(tmp_path, [("Ann", "7A")])
    folder = _photos(tmp_path, ["a.png"])

    ctx = _rename(
        roster_path,
        ScriptedPromptAdapter(folders=[folder], texts=["7A"], confirmations=[False]),
        MemoryEventSink(),
    )

    assert ctx.exit_code == 3
    assert ctx.state is RunState.TERMINAL
    assert _names(folder) == ["a.png"]
    assert not (folder / "_originals_backup").exists()


def test_existing_backup_blocks_new_run(tmp_path) -> None:
    roster_path = _roster(tmp_path, [("Ann", "7A")])
    folder = _photos(tmp_path, ["a.png"])
    (folder / "_originals_backup").mkdir()

    ctx = _rename(
        roster_path,
        ScriptedPromptAdapter(folders=[folder], texts=["7A"], confirmations=[True]),
        MemoryEventSink(),
    )

    assert ctx.exit_code == 1
    assert _names(folder) == ["a.png"]


def test_unsupported_file_aborts_whole_run(tmp_path) -> None:
    roster_path = _roster(tmp_path, [("Ann", "7A"), ("Ben", "7A")])
    folder = _photos(tmp_path, ["a.png", "notes.docx"])
    sink = MemoryEventSink()

    ctx = _rename(
        roster_path,
        ScriptedPromptAdapter(folders=[folder], texts=["7A"], confirmations=[True]),
        sink,
    )

    assert ctx.exit_code == 2
    assert "notes.docx" in sink.messages("error")[0]
    assert _names(folder) == ["a.png", "notes.docx"]


def test_plain_name_style(tmp_path) -> None:
    roster_path = _roster(tmp_path, [("Ann Lee", "7A")])
    folder = _photos(tmp_path, ["a.JPG"])

    ctx = _rename(
        roster_path,
        ScriptedPromptAdapter(folders=[folder], texts=["7A"], confirmations=[True]),
        MemoryEventSink(),
        name_style="plain",
    )

    assert ctx.exit_code == 0
    assert "Ann Lee.JPG" in _names(folder)


def test_undo_without_manifest_is_an_error(tmp_path) -> None:
    folder = _photos(tmp_path, ["a.png"])
    sink = MemoryEventSink()

    ctx = _undo(ScriptedPromptAdapter(folders=[folder], confirmations=[True]), sink)

    assert ctx.outcome is RunOutcome.ERROR
    assert ctx.exit_code == 1
    assert "nothing to undo" in sink.messages("error")[0]


def test_undo_declined_keeps_manifest(tmp_path) -> None:
    roster_path = _roster(tmp_path, [("Ann", "7A")])
    folder = _photos(tmp_path, ["a.png"])
    _rename(
        roster_path,
        ScriptedPromptAdapter(folders=[folder], texts=["7A"], confirmations=[True]),
        MemoryEventSink(),
    )

    ctx = _undo(ScriptedPromptAdapter(folders=[folder], confirmations=[False]), MemoryEventSink())

    assert ctx.exit_code == 3
    assert ctx.state is RunState.TERMINAL
    assert _names(folder) == ["7A_Ann.png", "rename_manifest.csv"]


def test_undo_after_partial_manual_revert(tmp_path) -> None:
    roster_path = _roster(tmp_path, [("Ann", "7A"), ("Ben", "7A"), ("Cy", "7A")])
    folder = _photos(tmp_path, ["a.png", "b.png", "c.png"])
    _rename(
        roster_path,
        ScriptedPromptAdapter(folders=[folder], texts=["7A"], confirmations=[True]),
        MemoryEventSink(),
    )
    (folder / "7A_Ben.png").rename(folder / "b.png")
    sink = MemoryEventSink()

    ctx = _undo(ScriptedPromptAdapter(folders=[folder], confirmations=[True]), sink)

    assert ctx.exit_code == 0
    assert "Not found, skipped: 7A_Ben.png" in sink.messages("warning")
    assert _names(folder) == ["a.png", "b.png", "c.png"]


def test_rename_run_passes_through_every_state(tmp_path) -> None:
    roster_path = _roster(tmp_path, [("Ann", "7A"), ("Ben", "7A")])
    folder = _photos(tmp_path, ["a.png", "b.png"])
    services = build_services(case_insensitive=False)
    workflow = RenameWorkflow(
        services["rename_service"],
        ScriptedPromptAdapter(folders=[folder], texts=["7A"], confirmations=[True]),
        MemoryEventSink(),
        roster_path,
    )

    ctx = workflow.run(_RecordingContext(roster_path=roster_path))

    assert ctx.history == [
        RunState.ROSTER_LOADED,
        RunState.FOLDER_SELECTED,
        RunState.VALIDATED,
        RunState.MAPPED,
        RunState.DUPLICATE_CHECKED,
        RunState.BACKED_UP,
        RunState.RENAMED,
        RunState.MANIFEST_WRITTEN,
    ]
    assert ctx.state is RunState.TERMINAL
    assert ctx.outcome is RunOutcome.SUCCESS


def test_target_held_by_remaining_file_aborts_before_backup(tmp_path) -> None:
    roster_path = _roster(tmp_path, [("c", "7A")])
    folder = _photos(tmp_path, ["a.png", "b.png", "c.png"])
    sink = MemoryEventSink()

    ctx = _rename(
        roster_path,
        ScriptedPromptAdapter(folders=[folder], texts=["7A"], confirmations=[True, True]),
        sink,
        name_style="plain",
    )

    assert ctx.outcome is RunOutcome.ERROR
    assert ctx.exit_code == 2
    assert ctx.state is RunState.TERMINAL
    assert any("a.png -> c.png" in m for m in sink.messages("error"))
    assert not (folder / "_originals_backup").exists()
    assert _names(folder) == ["a.png", "b.png", "c.png"]


def test_swap_on_renamed_folder_aborts_before_backup(tmp_path) -> None:
    roster_path = _roster(tmp_path, [("Ben", "7A"), ("Ann", "7A")])
    folder = _photos(tmp_path, ["Ann.png", "Ben.png"])

    ctx = _rename(
        roster_path,
        ScriptedPromptAdapter(folders=[folder], texts=["7A"], confirmations=[True]),
        MemoryEventSink(),
        name_style="plain",
    )

    assert ctx.exit_code == 2
    assert not (folder / "_originals_backup").exists()
    assert _names(folder) == ["Ann.png", "Ben.png"]
