"""Textual-powered interactive Pairs interface."""

from __future__ import annotations

import logging

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Static

from ...session import KeyPress, Session, SessionConfig
from ..views import SessionView

logger = logging.getLogger(__name__)


class SessionPanel(Static):
    """Paints the current session screen."""

    def show(self, session: Session) -> None:
        self.update(SessionView(session).render())


class PairsTextualApp(App):
    """Render, then block for the next key and hand it to the session."""

    CSS = """
    Screen {
        layout: vertical;
        height: 100%;
    }

    SessionPanel {
        width: 100%;
        height: 1fr;
        padding: 0 1;
        overflow-y: auto;
    }
    """

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
    ]

    def __init__(self, *, config: SessionConfig | None = None, session: Session | None = None) -> None:
        super().__init__()
        self.session = session if session is not None else Session(config or SessionConfig())
        self.panel: SessionPanel | None = None

    def compose(self) -> ComposeResult:
        self.panel = SessionPanel(id="session")
        yield self.panel
        yield Footer()

    def on_mount(self) -> None:  # pragma: no cover - widget lifecycle glue
        self._refresh_ui()

    def on_key(self, event: events.Key) -> None:
        event.stop()
        running = self.session.handle_key(KeyPress(key=event.key, character=event.character))
        if not running:
            logger.debug("session finished, exiting app")
            self.exit()
            return
        self._refresh_ui()

    def _refresh_ui(self) -> None:
        if self.panel is not None:
            self.panel.show(self.session)


def run_textual_app(*, config: SessionConfig) -> int:
    """Launch the Textual UI and return its exit code."""

    app = PairsTextualApp(config=config)
    app.run()
    return app.return_code or 0
