from .errors import (
    BackupError,
    CancelledError,
    ConfigError,
    ItemError,
    RenamerError,
    StateError,
    ValidationError,
)
from .models import (
    CandidateFile,
    NameStyle,
    RenameMapping,
    RenamePlan,
    RenameReport,
    RosterEntry,
    RunContext,
    RunOutcome,
    RunState,
    UndoReport,
)
from .rename_logic import (
    build_mappings,
    check_duplicates,
    check_occupied_targets,
    select_class,
    validate_candidates,
)

__all__ = [
    "BackupError",
    "CancelledError",
    "CandidateFile",
    "ConfigError",
    "ItemError",
    "NameStyle",
    "RenameMapping",
    "RenamePlan",
    "RenameReport",
    "RenamerError",
    "RosterEntry",
    "RunContext",
    "RunOutcome",
    "RunState",
    "StateError",
    "UndoReport",
    "ValidationError",
    "build_mappings",
    "check_duplicates",
    "check_occupied_targets",
    "select_class",
    "validate_candidates",
]
