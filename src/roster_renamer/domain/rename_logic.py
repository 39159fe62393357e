from __future__ import annotations

import platform
from collections import defaultdict

from .errors import ValidationError
from .models import CandidateFile, NameStyle, RenameMapping, RosterEntry

SUPPORTED_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png"})
INVALID_FILENAME_CHARS = set('/\\:*?"<>|')


def is_case_insensitive_fs() -> bool:
    return platform.system() in ("Windows", "Darwin")


def is_windows_fs() -> bool:
    return platform.system() == "Windows"


def validate_candidates(files: list[CandidateFile]) -> list[CandidateFile]:
    """
    Reject an empty folder or any unsupported file, then return the files in
    ordinal name order.

    Example:
        validate_candidates([CandidateFile("b.png", ".png", p2), CandidateFile("a.JPG", ".JPG", p1)])
        # [a.JPG, b.png]
    """
    if not files:
        raise ValidationError("no files: the selected folder contains no image files to rename.")
    unsupported = [f.name for f in files if f.extension.lower() not in SUPPORTED_EXTENSIONS]
    if unsupported:
        allowed = ", ".join(sorted(SUPPORTED_EXTENSIONS))
        raise ValidationError(
            f"Unsupported files in folder (allowed: {allowed}): "
            + ", ".join(sorted(unsupported))
            + ". Move or remove them and run again."
        )
    return sorted(files, key=lambda f: f.name)


def distinct_classes(roster: list[RosterEntry]) -> list[str]:
    seen: dict[str, None] = {}
    for entry in roster:
        seen.setdefault(entry.class_name, None)
    return list(seen)


def select_class(roster: list[RosterEntry], class_name: str) -> list[RosterEntry]:
    """Return the entries of one class in roster order."""
    selected = [entry for entry in roster if entry.class_name == class_name]
    if not selected:
        available = ", ".join(repr(name) for name in distinct_classes(roster)) or "(none)"
        raise ValidationError(
            f"class not found: {class_name!r}. Classes in the roster: {available}"
        )
    return selected


def format_new_name(entry: RosterEntry, extension: str, style: NameStyle) -> str:
    """
    Build the target file name; the extension is kept exactly as found.

    Examples:
        >>> format_new_name(RosterEntry("Ann Lee", "7A"), ".PNG", NameStyle.CLASS_PREFIXED)
        '7A_Ann Lee.PNG'
        >>> format_new_name(RosterEntry("Ann Lee", "7A"), ".png", NameStyle.PLAIN)
        'Ann Lee.png'
    """
    if style is NameStyle.PLAIN:
        return f"{entry.full_name}{extension}"
    return f"{entry.class_name}_{entry.full_name}{extension}"


def build_mappings(
    files: list[CandidateFile],
    entries: list[RosterEntry],
    style: NameStyle = NameStyle.CLASS_PREFIXED,
) -> list[RenameMapping]:
    """Pair the i-th sorted file with the i-th roster entry; extra items on either side are left out."""
    mappings: list[RenameMapping] = []
    for file, entry in zip(files, entries):
        new_name = format_new_name(entry, file.extension, style)
        mappings.append(
            RenameMapping(
                old_name=file.name,
                new_name=new_name,
                old_path=file.path,
                new_path=file.path.parent / new_name,
            )
        )
    return mappings


def invalid_name_reason(name: str, extension: str, windows: bool = False) -> str | None:
    stem = name[: len(name) - len(extension)] if extension else name
    if not stem.strip():
        return "empty name"
    for ch in name:
        if ch in INVALID_FILENAME_CHARS:
            return f"invalid character {ch!r}"
        codepoint = ord(ch)
        if codepoint < 32 or codepoint == 127:
            return "control character"
    # Windows drops a trailing space or dot from the stem
    if windows and stem.endswith((" ", ".")):
        return "name ends with a space or dot"
    return None


def check_target_names(mappings: list[RenameMapping], windows: bool | None = None) -> None:
    if windows is None:
        windows = is_windows_fs()
    problems = []
    for mapping in mappings:
        reason = invalid_name_reason(mapping.new_name, mapping.old_path.suffix, windows)
        if reason:
            problems.append(f"{mapping.old_name} -> {mapping.new_name!r} ({reason})")
    if problems:
        raise ValidationError(
            "Roster names produce invalid file names; fix the roster: " + "; ".join(problems)
        )


def find_duplicate_targets(
    mappings: list[RenameMapping], case_insensitive: bool = False
) -> dict[str, list[RenameMapping]]:
    groups: dict[str, list[RenameMapping]] = defaultdict(list)
    for mapping in mappings:
        key = mapping.new_name.casefold() if case_insensitive else mapping.new_name
        groups[key].append(mapping)
    return {key: group for key, group in groups.items() if len(group) > 1}


def check_duplicates(mappings: list[RenameMapping], case_insensitive: bool = False) -> None:
    duplicates = find_duplicate_targets(mappings, case_insensitive)
    if not duplicates:
        return
    details = []
    for group in duplicates.values():
        sources = ", ".join(m.old_name for m in group)
        details.append(f"{group[0].new_name} <- {sources}")
    raise ValidationError(
        "Duplicate target names; make the roster names unique within the class: "
        + "; ".join(details)
    )


def find_occupied_targets(
    mappings: list[RenameMapping], existing_names: list[str], case_insensitive: bool = False
) -> list[RenameMapping]:
    """
    Replay the renames in order against the names already in the folder and
    return every mapping whose target would still be taken when its turn comes.

    A name freed by an earlier rename in the same pass counts as free.

    Example:
        find_occupied_targets([a.png -> c.png], ["a.png", "b.png", "c.png"])
        # [a.png -> c.png]
    """

    def key(name: str) -> str:
        return name.casefold() if case_insensitive else name

    occupied = {key(name) for name in existing_names}
    blocked: list[RenameMapping] = []
    for mapping in mappings:
        if key(mapping.new_name) in occupied:
            blocked.append(mapping)
            continue
        occupied.discard(key(mapping.old_name))
        occupied.add(key(mapping.new_name))
    return blocked


def check_occupied_targets(
    mappings: list[RenameMapping], existing_names: list[str], case_insensitive: bool = False
) -> None:
    blocked = find_occupied_targets(mappings, existing_names, case_insensitive)
    if not blocked:
        return
    details = "; ".join(f"{m.old_name} -> {m.new_name}" for m in blocked)
    raise ValidationError(
        "Target names are already taken by files in the folder; "
        "rename or move those files first: " + details
    )
