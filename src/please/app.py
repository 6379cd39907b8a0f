"""Inline suggestion picker and session resolution."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from rich.console import Console
from rich.markup import escape
from textual.app import App, ComposeResult
from textual.binding import Binding

from please.core.command_runner import CommandResult, run_command
from please.core.session import Key, SessionState, SuggestionSession
from please.exceptions import ExecutionError
from please.widgets.suggestion_list import SuggestionList

logger = logging.getLogger(__name__)

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

Executor = Callable[[str], CommandResult]

# 128 + SIGINT, as reported by the shell
INTERRUPTED_EXIT_CODE = 130


class SuggestionPicker(App[SuggestionSession]):
    """Shows the suggestions below the prompt and waits for a decision."""

    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen:inline {
        height: auto;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit", show=False, priority=True),
    ]

    def __init__(self, session: SuggestionSession) -> None:
        super().__init__()
        self.session = session

    def compose(self) -> ComposeResult:
        yield SuggestionList(self.session)

    def on_mount(self) -> None:
        self.query_one(SuggestionList).focus()

    def on_suggestion_list_session_finished(
        self, event: SuggestionList.SessionFinished
    ) -> None:
        self.exit(event.session)


def resolve_session(session: SuggestionSession, executor: Executor = run_command) -> None:
    """Act on a session the picker has let go of.

    An accepted suggestion is echoed and handed to ``executor``; a rejected
    session prints its notice. A session still idle (the picker was quit)
    counts as an unrecognised key.
    """
    if not session.finished:
        session.handle(Key.OTHER)

    if session.state is SessionState.REJECTED:
        console.print(session.notice, markup=False)
        return

    command = session.selected
    console.print(f"[bold green]$ {escape(command)}[/bold green]")
    try:
        result = executor(command)
    except KeyboardInterrupt:
        result = CommandResult(command=command, exit_code=INTERRUPTED_EXIT_CODE)
    except ExecutionError as e:
        logger.warning("Execution failed: %s", e)
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        return

    if not result.ok:
        logger.warning("Command %r exited with %d", command, result.exit_code)
        err_console.print(f"[bold red]Exit code: {result.exit_code}[/bold red]")


def run_session(suggestions: Sequence[str], executor: Executor = run_command) -> SuggestionSession:
    """Let the user pick one of ``suggestions`` and run it.

    The picker runs inline, so only the suggestion block is redrawn. The
    terminal is back in its normal mode before the executor runs.
    """
    session = SuggestionSession(suggestions)
    SuggestionPicker(session).run(inline=True)
    resolve_session(session, executor)
    return session
