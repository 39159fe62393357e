from __future__ import annotations

import csv
import logging
from pathlib import Path

from roster_renamer.domain.errors import ConfigError
from roster_renamer.domain.models import RosterEntry
from roster_renamer.ports.roster_port import RosterPort

logger = logging.getLogger(__name__)

NAME_COLUMN = "Full Name"
CLASS_COLUMN = "Class"


def _normalize_header(value: str) -> str:
    return value.replace("\ufeff", "").strip()


class CsvRosterAdapter(RosterPort):
    """
    Reads a roster CSV with a header row holding "Full Name" and "Class".

    Field values are returned untouched; surrounding whitespace in a name is
    part of the name.
    """

    def load_roster(self, path: Path) -> list[RosterEntry]:
        path = Path(path)
        try:
            with path.open("r", newline="", encoding="utf-8") as handle:
                reader = csv.DictReader(handle)
                if not reader.fieldnames:
                    raise ConfigError(f"Roster file is empty or has no header row: {path}")
                reader.fieldnames = [_normalize_header(name) for name in reader.fieldnames]
                missing = [c for c in (NAME_COLUMN, CLASS_COLUMN) if c not in reader.fieldnames]
                if missing:
                    raise ConfigError(
                        f"Roster file {path} is missing column(s) {', '.join(missing)}; "
                        f"expected a header with {NAME_COLUMN!r} and {CLASS_COLUMN!r}."
                    )
                entries = [
                    RosterEntry(
                        full_name=row.get(NAME_COLUMN) or "",
                        class_name=row.get(CLASS_COLUMN) or "",
                    )
                    for row in reader
                ]
        except FileNotFoundError as exc:
            raise ConfigError(f"Roster file not found: {path}") from exc
        except UnicodeDecodeError as exc:
            raise ConfigError(f"Roster file is not valid UTF-8: {path}") from exc
        except (OSError, csv.Error) as exc:
            raise ConfigError(f"Failed to read roster file {path}: {exc}") from exc

        if not entries:
            raise ConfigError(f"Roster file has no student rows: {path}")
        logger.debug("Loaded %d roster entries from %s", len(entries), path)
        return entries
