"""Roster-driven batch renamer for photo folders, with backup and undo."""

__version__ = "0.1.0"
