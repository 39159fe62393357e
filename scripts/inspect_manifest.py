from __future__ import annotations

import argparse
import os
from pathlib import Path

from dotenv import load_dotenv

from roster_renamer.adapters.csv_manifest import CsvManifestAdapter
from roster_renamer.domain.errors import StateError

_REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(_REPO_ROOT / ".env", override=False)


def main() -> None:
    parser = argparse.ArgumentParser(description="Show the pending undo record of a photo folder.")
    parser.add_argument("folder", help="Folder that was renamed")
    args = parser.parse_args()

    folder = Path(args.folder).expanduser().resolve()
    manifest = CsvManifestAdapter(os.getenv("MANIFEST_NAME", "rename_manifest.csv"))
    backup_dir = folder / os.getenv("BACKUP_DIR_NAME", "_originals_backup")

    print("Folder:", folder)
    if backup_dir.is_dir():
        originals = sorted(p.name for p in backup_dir.iterdir() if p.is_file())
        print(f"Backup: {backup_dir} ({len(originals)} file(s))")
    else:
        print("Backup: none")

    try:
        mappings = manifest.load_manifest(folder)
    except StateError as exc:
        print("Manifest:", exc)
        return

    print(f"Manifest: {manifest.manifest_path(folder)} ({len(mappings)} rename(s))")
    for mapping in mappings:
        state = "present" if (folder / mapping.new_name).exists() else "missing"
        print(f"- {mapping.new_name} -> {mapping.old_name} [{state}]")


if __name__ == "__main__":
    main()
