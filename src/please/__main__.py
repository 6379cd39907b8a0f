"""Entry point for please: python -m please <request>"""

from __future__ import annotations

import functools
import logging
import sys

from rich.markup import escape

from please.app import INTERRUPTED_EXIT_CODE, console, err_console, run_session
from please.claude.message_handler import parse_response
from please.claude.prompts import PromptContext
from please.claude.session import ClaudeSession
from please.config import Settings, configure_logging
from please.core.command_runner import run_command
from please.core.history import read_history
from please.core.system import os_label
from please.exceptions import PleaseError

logger = logging.getLogger(__name__)

USAGE = "Usage: please <your request>"


def fatal(message: str) -> int:
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")
    return 1


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        console.print(USAGE, markup=False)
        return 0
    request = " ".join(args)

    try:
        settings = Settings.from_env()
    except PleaseError as e:
        return fatal(str(e))
    configure_logging(settings)

    try:
        history = read_history(settings.history_size, settings.history_file)
    except OSError as e:
        return fatal(f"Could not read shell history: {e}")

    context = PromptContext(os_label=os_label(), history=tuple(history), request=request)
    claude = ClaudeSession.from_settings(settings)
    try:
        suggestions = parse_response(claude.complete(context.build()))
    except PleaseError as e:
        return fatal(str(e))
    except KeyboardInterrupt:
        err_console.print("Interrupted.", markup=False)
        return INTERRUPTED_EXIT_CODE

    if not suggestions:
        console.print("No suggestions available.", markup=False)
        return 0

    logger.debug("Got %d suggestions", len(suggestions))
    run_session(suggestions, functools.partial(run_command, shell=settings.shell))
    return 0


if __name__ == "__main__":
    sys.exit(main())
