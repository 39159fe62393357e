from __future__ import annotations

from pathlib import Path
from typing import Iterable

from roster_renamer.ports.prompt_port import PromptPort


class ScriptedPromptAdapter(PromptPort):
    """Answers prompts from prepared queues and records every question asked."""

    def __init__(
        self,
        folders: Iterable[Path | None] = (),
        texts: Iterable[str | None] = (),
        confirmations: Iterable[bool] = (),
    ) -> None:
        self._folders = list(folders)
        self._texts = list(texts)
        self._confirmations = list(confirmations)
        self.asked: list[str] = []

    def pick_folder(self, title: str) -> Path | None:
        self.asked.append(title)
        return self._folders.pop(0) if self._folders else None

    def ask_text(self, message: str) -> str | None:
        self.asked.append(message)
        return self._texts.pop(0) if self._texts else None

    def confirm(self, message: str) -> bool:
        self.asked.append(message)
        return self._confirmations.pop(0) if self._confirmations else False
