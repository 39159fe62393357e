from __future__ import annotations

from pathlib import Path
from typing import Callable

from roster_renamer.ports.prompt_port import PromptPort

_CANCEL_WORDS = {"q", "quit"}


class ConsolePromptAdapter(PromptPort):
    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ) -> None:
        self._input = input_func
        self._output = output_func

    def pick_folder(self, title: str) -> Path | None:
        while True:
            try:
                raw = self._input(f"{title} (q to cancel): ").strip()
            except EOFError:
                return None
            if not raw or raw.lower() in _CANCEL_WORDS:
                return None
            path = Path(raw).expanduser().resolve()
            if path.is_dir():
                return path
            self._output(f"Not a directory: {path}")

    def ask_text(self, message: str) -> str | None:
        try:
            value = self._input(f"{message} (q to cancel): ")
        except EOFError:
            return None
        # returned verbatim; roster values keep their whitespace
        if not value.strip() or value.strip().lower() in _CANCEL_WORDS:
            return None
        return value

    def confirm(self, message: str) -> bool:
        try:
            answer = self._input(f"{message} (y/N): ").strip().lower()
        except EOFError:
            return False
        return answer in ("y", "yes")
