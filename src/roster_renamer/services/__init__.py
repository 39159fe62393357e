from .backup_service import BackupService
from .rename_service import RenameService
from .undo_service import UndoService
from .workflow_service import RenameWorkflow, UndoWorkflow

__all__ = [
    "BackupService",
    "RenameService",
    "RenameWorkflow",
    "UndoService",
    "UndoWorkflow",
]
