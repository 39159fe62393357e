from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

_SRC_ROOT = Path(__file__).resolve().parents[2]
if str(_SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(_SRC_ROOT))

from roster_renamer.container import build_services
from roster_renamer.domain.errors import RenamerError, ValidationError
from roster_renamer.domain.models import NameStyle, RenamePlan
from roster_renamer.settings import NAME_STYLE, ROSTER_PATH


def _init_state() -> None:
    st.session_state.setdefault("services", None)
    st.session_state.setdefault("services_name_style", None)
    st.session_state.setdefault("plan", None)
    st.session_state.setdefault("undo_mappings", None)
    st.session_state.setdefault("undo_folder", None)


def _get_services(name_style: str):
    if (
        st.session_state["services"] is None
        or st.session_state.get("services_name_style") != name_style
    ):
        st.session_state["services"] = build_services(name_style=name_style)
        st.session_state["services_name_style"] = name_style
    return st.session_state["services"]


def _folder_from_input(folder_text: str) -> Path:
    if not folder_text.strip():
        raise ValidationError("Folder path is required.")
    folder = Path(folder_text.strip()).expanduser().resolve()
    if not folder.is_dir():
        raise ValidationError(f"Not a directory: {folder}")
    return folder


def _show_plan(plan: RenamePlan) -> None:
    st.subheader("Preview Plan")
    st.table(
        [
            {"old_name": mapping.old_name, "new_name": mapping.new_name}
            for mapping in plan.mappings
        ]
    )


def main() -> None:
    st.title("Roster Photo Renamer")
    _init_state()

    roster_path = st.text_input("Roster CSV", value=ROSTER_PATH)
    folder_text = st.text_input("Photo folder", help="Absolute path of the folder to rename.")
    class_name = st.text_input("Class")
    plain_names = st.checkbox(
        "Plain names (no class prefix)", value=NAME_STYLE == NameStyle.PLAIN.value
    )
    name_style = NameStyle.PLAIN.value if plain_names else NameStyle.CLASS_PREFIXED.value

    cols = st.columns(3)
    preview_clicked = cols[0].button("Preview")
    apply_clicked = cols[1].button("Apply Rename")
    undo_clicked = cols[2].button("Load Undo")

    if preview_clicked:
        try:
            services = _get_services(name_style)
            folder = _folder_from_input(folder_text)
            rename_service = services["rename_service"]
            roster = rename_service.load_roster(Path(roster_path))
            st.session_state["plan"] = rename_service.preview_rename(folder, roster, class_name)
        except RenamerError as exc:
            st.session_state["plan"] = None
            st.error(f"Preview failed: {exc}")

    plan: RenamePlan | None = st.session_state.get("plan")
    accept_mismatch = False
    if plan is not None:
        _show_plan(plan)
        if plan.count_mismatch:
            st.warning(
                f"{plan.file_count} photo(s) but {plan.roster_count} student(s) in class "
                f"{plan.class_name}; only {plan.pair_count} file(s) will be renamed."
            )
            accept_mismatch = st.checkbox("Continue anyway")

    if apply_clicked:
        try:
            if plan is None:
                raise ValidationError("Run Preview first.")
            if plan.count_mismatch and not accept_mismatch:
                raise ValidationError("Confirm the count mismatch before applying.")
            services = _get_services(name_style)
            report = services["rename_service"].apply_rename(plan)
            st.session_state["plan"] = None
            if report.failed:
                st.warning(report.summary())
            else:
                st.success(report.summary())
            st.info(f"Originals backed up to {report.backup_dir}")
        except RenamerError as exc:
            st.error(f"Apply rename failed: {exc}")

    if undo_clicked:
        try:
            folder = _folder_from_input(folder_text)
            services = _get_services(name_style)
            st.session_state["undo_mappings"] = services["undo_service"].load_manifest(folder)
            st.session_state["undo_folder"] = folder
        except RenamerError as exc:
            st.session_state["undo_mappings"] = None
            st.error(f"Undo failed: {exc}")

    undo_mappings = st.session_state.get("undo_mappings")
    if undo_mappings is not None:
        st.subheader("Undo Preview")
        st.table(
            [{"current_name": m.new_name, "restored_name": m.old_name} for m in undo_mappings]
        )
        confirmed = st.checkbox(f"Restore {len(undo_mappings)} original name(s)")
        if st.button("Restore") and confirmed:
            try:
                services = _get_services(name_style)
                report = services["undo_service"].undo_rename(
                    st.session_state["undo_folder"], undo_mappings
                )
                st.session_state["undo_mappings"] = None
                for mapping in report.missing:
                    st.warning(f"Not found, skipped: {mapping.new_name}")
                st.success(report.summary())
            except RenamerError as exc:
                st.error(f"Undo failed: {exc}")


if __name__ == "__main__":
    main()
