from .event_sink_port import EventSinkPort
from .folder_port import FolderPort
from .manifest_port import ManifestPort
from .prompt_port import PromptPort
from .roster_port import RosterPort

__all__ = ["EventSinkPort", "FolderPort", "ManifestPort", "PromptPort", "RosterPort"]
