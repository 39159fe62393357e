from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from roster_renamer.adapters.console_prompt import ConsolePromptAdapter
from roster_renamer.adapters.logging_sink import LoggingEventSink
from roster_renamer.container import build_services
from roster_renamer.domain.errors import EXIT_FAILURE
from roster_renamer.domain.models import NameStyle
from roster_renamer.ports.event_sink_port import EventSinkPort
from roster_renamer.ports.prompt_port import PromptPort
from roster_renamer.services.workflow_service import RenameWorkflow, UndoWorkflow
from roster_renamer.settings import LOG_LEVEL, NAME_STYLE, ROSTER_PATH


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="roster-renamer",
        description="Rename a folder of photos after the students of one roster class.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Exit codes:
  0  success
  1  backup, I/O or per-file failure, leftover backup/manifest
  2  invalid roster, files, class or duplicate names
  3  cancelled
""",
    )
    parser.add_argument(
        "--undo",
        action="store_true",
        help="Restore the original names recorded in a folder's manifest",
    )
    parser.add_argument(
        "--roster",
        default=ROSTER_PATH,
        help=f"Roster CSV with 'Full Name' and 'Class' columns (default: {ROSTER_PATH})",
    )
    parser.add_argument(
        "--plain-names",
        action="store_true",
        help="Name files '<Full Name><ext>' instead of '<Class>_<Full Name><ext>'",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Show debug output")
    return parser


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(message)s")


def main(
    argv: list[str] | None = None,
    prompt: PromptPort | None = None,
    sink: EventSinkPort | None = None,
) -> int:
    args = create_parser().parse_args(argv)
    _configure_logging(args.verbose)
    prompt = prompt or ConsolePromptAdapter()
    sink = sink or LoggingEventSink()

    name_style = NameStyle.PLAIN.value if args.plain_names else NAME_STYLE
    try:
        services = build_services(name_style=name_style)
    except ValueError:
        sink.emit("error", f"Unknown NAME_STYLE {name_style!r}; use 'class_prefixed' or 'plain'.")
        return EXIT_FAILURE

    if args.undo:
        ctx = UndoWorkflow(services["undo_service"], prompt, sink).run()
    else:
        workflow = RenameWorkflow(
            services["rename_service"], prompt, sink, roster_path=Path(args.roster)
        )
        ctx = workflow.run()
    return ctx.exit_code if ctx.exit_code is not None else EXIT_FAILURE


if __name__ == "__main__":
    sys.exit(main())
