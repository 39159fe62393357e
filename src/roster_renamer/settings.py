from __future__ import annotations

import os

from dotenv import find_dotenv, load_dotenv

load_dotenv(find_dotenv(usecwd=True), override=False)

ROSTER_PATH = os.getenv("ROSTER_PATH", "students.csv")
BACKUP_DIR_NAME = os.getenv("BACKUP_DIR_NAME", "_originals_backup")
MANIFEST_NAME = os.getenv("MANIFEST_NAME", "rename_manifest.csv")
NAME_STYLE = os.getenv("NAME_STYLE", "class_prefixed")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
