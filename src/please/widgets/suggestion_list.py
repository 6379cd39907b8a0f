"""Suggestion block with the highlighted command, redrawn on every key."""

from __future__ import annotations

from rich.text import Text
from textual import events
from textual.message import Message
from textual.widget import Widget

from please.core.session import Key, SuggestionSession, classify_key


class SuggestionList(Widget, can_focus=True):
    """Draws a SuggestionSession and feeds it every key it receives."""

    DEFAULT_CSS = """
    SuggestionList {
        height: auto;
    }
    """

    class SessionFinished(Message):
        """Posted when the session reaches a terminal state."""
        def __init__(self, session: SuggestionSession) -> None:
            super().__init__()
            self.session = session

    def __init__(self, session: SuggestionSession, **kwargs) -> None:
        super().__init__(**kwargs)
        self.session = session

    def render(self) -> Text:
        lines = self.session.render_lines()
        text = Text(lines[0], style="dim")
        for i, line in enumerate(lines[1:]):
            text.append("\n")
            if i == self.session.selected_index:
                text.append(line, style="bold green")
            else:
                text.append(line)
        return text

    def on_key(self, event: events.Key) -> None:
        # Keep Tab/Enter/Esc away from focus navigation and app bindings.
        event.stop()
        event.prevent_default()
        self._feed(classify_key(event.key))

    def on_paste(self, event: events.Paste) -> None:
        # Pasted text is not a control key, so it ends the session.
        event.stop()
        self._feed(Key.OTHER)

    def _feed(self, key: Key) -> None:
        if self.session.finished:
            return

        self.session.handle(key)
        if self.session.finished:
            self.post_message(self.SessionFinished(self.session))
        else:
            self.refresh()
