"""Selection state machine for one interactive suggestion session."""

from __future__ import annotations

import enum
import logging
from collections.abc import Sequence

logger = logging.getLogger(__name__)

HEADER = "Suggestions (use Tab to cycle, Enter to accept, Esc to reject):"
SELECTED_MARKER = "-> "
UNSELECTED_MARKER = " " * len(SELECTED_MARKER)

REJECTED_NOTICE = "Suggestions rejected."
EXIT_NOTICE = "Exiting."


class Key(enum.Enum):
    CYCLE = "cycle"
    ACCEPT = "accept"
    REJECT = "reject"
    OTHER = "other"


class SessionState(enum.Enum):
    IDLE = "idle"
    EXECUTED = "executed"
    REJECTED = "rejected"


# Textual key names
KEY_MAP = {
    "tab": Key.CYCLE,
    "enter": Key.ACCEPT,
    "escape": Key.REJECT,
}


def classify_key(name: str) -> Key:
    """Map a terminal key name to a session event. Unknown keys abort."""
    return KEY_MAP.get(name, Key.OTHER)


class SuggestionSession:
    """Tracks the highlighted suggestion until the user accepts or rejects.

    A session starts idle with the top-ranked suggestion selected and is
    single use: once it reaches EXECUTED or REJECTED it accepts no more keys.
    """

    def __init__(self, suggestions: Sequence[str]) -> None:
        if not suggestions:
            raise ValueError("A session needs at least one suggestion")
        self.suggestions: tuple[str, ...] = tuple(suggestions)
        self.selected_index = 0
        self.state = SessionState.IDLE
        self.notice: str | None = None

    @property
    def selected(self) -> str:
        return self.suggestions[self.selected_index]

    @property
    def finished(self) -> bool:
        return self.state is not SessionState.IDLE

    def handle(self, key: Key) -> SessionState:
        """Apply one key event and return the resulting state."""
        if self.finished:
            raise RuntimeError(f"Session already {self.state.value}")

        if key is Key.CYCLE:
            self.selected_index = (self.selected_index + 1) % len(self.suggestions)
        elif key is Key.ACCEPT:
            self.state = SessionState.EXECUTED
        elif key is Key.REJECT:
            self.state = SessionState.REJECTED
            self.notice = REJECTED_NOTICE
        else:
            self.state = SessionState.REJECTED
            self.notice = EXIT_NOTICE

        logger.debug(
            "Key %s -> %s (index %d)", key.value, self.state.value, self.selected_index
        )
        return self.state

    def render_lines(self) -> list[str]:
        """Return the suggestion block with the current selection marked."""
        lines = [HEADER]
        for i, suggestion in enumerate(self.suggestions):
            marker = SELECTED_MARKER if i == self.selected_index else UNSELECTED_MARKER
            lines.append(f"{marker}{suggestion}")
        return lines
