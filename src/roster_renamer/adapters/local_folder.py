from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path

from roster_renamer.domain.models import CandidateFile
from roster_renamer.ports.folder_port import FolderPort

logger = logging.getLogger(__name__)


class LocalFolderAdapter(FolderPort):
    def __init__(self, include_hidden: bool = False) -> None:
        self._include_hidden = include_hidden

    def list_files(self, folder: Path) -> list[CandidateFile]:
        folder = Path(folder)
        if not folder.is_dir():
            raise NotADirectoryError(f"Not a directory: {folder}")
        files: list[CandidateFile] = []
        for item in folder.iterdir():
            if not item.is_file():
                continue
            if not self._include_hidden and item.name.startswith("."):
                continue
            files.append(CandidateFile.from_path(item))
        return files

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def make_dir(self, path: Path) -> None:
        Path(path).mkdir(parents=False, exist_ok=False)
        logger.debug("Created directory %s", path)

    def copy_file(self, src: Path, dst: Path) -> None:
        if Path(dst).exists():
            raise FileExistsError(f"Destination already exists: {dst}")
        shutil.copy2(src, dst)
        logger.debug("Copied %s -> %s", src, dst)

    def rename_file(self, src: Path, dst: Path) -> None:
        # os.rename silently replaces an existing file on POSIX
        if Path(dst).exists():
            raise FileExistsError(f"Destination already exists: {dst}")
        os.rename(src, dst)
        logger.debug("Renamed %s -> %s", src, dst)
