from .console_prompt import ConsolePromptAdapter
from .csv_manifest import CsvManifestAdapter
from .csv_roster import CsvRosterAdapter
from .local_folder import LocalFolderAdapter
from .logging_sink import LoggingEventSink, MemoryEventSink
from .scripted_prompt import ScriptedPromptAdapter

__all__ = [
    "ConsolePromptAdapter",
    "CsvManifestAdapter",
    "CsvRosterAdapter",
    "LocalFolderAdapter",
    "LoggingEventSink",
    "MemoryEventSink",
    "ScriptedPromptAdapter",
]
