from __future__ import annotations

from pathlib import Path
from typing import Protocol

from roster_renamer.domain.models import RosterEntry


class RosterPort(Protocol):
    def load_roster(self, path: Path) -> list[RosterEntry]:
        """Return roster entries in file order."""
