from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from .errors import ItemError


class NameStyle(str, Enum):
    CLASS_PREFIXED = "class_prefixed"
    PLAIN = "plain"


@dataclass(frozen=True)
class RosterEntry:
    full_name: str
    class_name: str


@dataclass(frozen=True)
class CandidateFile:
    name: str
    extension: str
    path: Path

    @classmethod
    def from_path(cls, path: Path) -> "CandidateFile":
        return cls(name=path.name, extension=path.suffix, path=path)


@dataclass(frozen=True)
class RenameMapping:
    old_name: str
    new_name: str
    old_path: Path
    new_path: Path


@dataclass
class RenamePlan:
    folder: Path
    class_name: str
    files: list[CandidateFile]
    mappings: list[RenameMapping]
    roster_count: int

    @property
    def file_count(self) -> int:
        return len(self.files)

    @property
    def count_mismatch(self) -> bool:
        return self.file_count != self.roster_count

    @property
    def pair_count(self) -> int:
        return len(self.mappings)


@dataclass
class RenameReport:
    applied: list[RenameMapping] = field(default_factory=list)
    failed: list[ItemError] = field(default_factory=list)
    backup_dir: Path | None = None
    manifest_path: Path | None = None

    @property
    def success_count(self) -> int:
        return len(self.applied)

    @property
    def error_count(self) -> int:
        return len(self.failed)

    def summary(self) -> str:
        lines = [f"Renamed: {self.success_count}", f"Failed: {self.error_count}"]
        lines.extend(f"  - {error}" for error in self.failed)
        return "\n".join(lines)


@dataclass
class UndoReport:
    restored: list[RenameMapping] = field(default_factory=list)
    missing: list[RenameMapping] = field(default_factory=list)
    failed: list[ItemError] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.failed)

    def summary(self) -> str:
        lines = [
            f"Restored: {len(self.restored)}",
            f"Missing (skipped): {len(self.missing)}",
            f"Failed: {self.error_count}",
        ]
        lines.extend(f"  - {error}" for error in self.failed)
        return "\n".join(lines)


class RunState(str, Enum):
    IDLE = "IDLE"
    ROSTER_LOADED = "ROSTER_LOADED"
    FOLDER_SELECTED = "FOLDER_SELECTED"
    VALIDATED = "VALIDATED"
    MAPPED = "MAPPED"
    DUPLICATE_CHECKED = "DUPLICATE_CHECKED"
    BACKED_UP = "BACKED_UP"
    RENAMED = "RENAMED"
    MANIFEST_WRITTEN = "MANIFEST_WRITTEN"
    MANIFEST_LOADED = "MANIFEST_LOADED"
    CONFIRMED = "CONFIRMED"
    RESTORED = "RESTORED"
    TERMINAL = "TERMINAL"


class RunOutcome(str, Enum):
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"
    CANCELLED = "CANCELLED"


@dataclass
class RunContext:
    roster_path: Path | None = None
    roster: list[RosterEntry] = field(default_factory=list)
    folder: Path | None = None
    class_name: str | None = None
    plan: RenamePlan | None = None
    report: RenameReport | None = None
    undo_report: UndoReport | None = None
    state: RunState = RunState.IDLE
    outcome: RunOutcome | None = None
    exit_code: int | None = None

    def advance(self, state: RunState) -> None:
        self.state = state

    def finish(self, outcome: RunOutcome, exit_code: int) -> None:
        self.state = RunState.TERMINAL
        self.outcome = outcome
        self.exit_code = exit_code
