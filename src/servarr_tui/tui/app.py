"""ServarrTuiApp — the Textual shell around AppState.

Thin coordinator:

    on_key          → key_bindings.from_textual → handlers.routing.handle_events
    interval tick   → AppState.on_tick, marquee, repaint
    network thread  → _NetworkOutcome message → AppState.apply_network_result

Every state mutation happens here, on the Textual event loop.

// [LAW:single-enforcer] on_key is the sole key dispatcher; BINDINGS are unused.
// [LAW:single-enforcer] _handle_exception is the top-level handler; it logs
//   and surfaces the error instead of tearing the terminal down.
"""

from __future__ import annotations

import logging
import traceback

from textual.app import App, ComposeResult
from textual.css.query import NoMatches
from textual.message import Message
from textual.widgets import Static

from servarr_tui.app.key_bindings import from_textual
from servarr_tui.app.state import AppState
from servarr_tui.handlers.routing import handle_events
from servarr_tui.network.client import Network, NetworkOutcome
from servarr_tui.settings import Config
from servarr_tui.tui import rendering

logger = logging.getLogger(__name__)

# Rows taken by the body's own padding and the table header.
_BODY_CHROME = 2


class _NetworkOutcome(Message, bubble=False):
    """Thread-safe bridge: network worker → app message pump."""

    def __init__(self, outcome: NetworkOutcome) -> None:
        self.outcome = outcome
        super().__init__()


class ServarrTuiApp(App):
    """Terminal UI for Radarr and Sonarr."""

    CSS = """
    Screen {
        layers: base overlay;
    }
    #header {
        height: 2;
        padding: 0 1;
    }
    #body {
        height: 1fr;
        padding: 0 1;
        border: round $primary;
    }
    #popup {
        layer: overlay;
        dock: top;
        offset: 0 4;
        margin: 0 6;
        height: auto;
        max-height: 80%;
        display: none;
    }
    #footer {
        dock: bottom;
        height: auto;
        max-height: 2;
        padding: 0 1;
    }
    """

    def __init__(self, config: Config, network: Network | None = None):
        super().__init__()
        if network is None:
            network = Network(self._post_outcome)
        self.state = AppState(config, network)
        self._header_id = "header"
        self._body_id = "body"
        self._popup_id = "popup"
        self._footer_id = "footer"

    # ─── Widgets ─────────────────────────────────────────────────────────

    def compose(self) -> ComposeResult:
        yield Static(id=self._header_id)
        yield Static(id=self._body_id)
        yield Static(id=self._popup_id)
        yield Static(id=self._footer_id)

    def _query_safe(self, widget_id: str) -> Static | None:
        try:
            return self.query_one("#" + widget_id, Static)
        except NoMatches:
            return None

    def on_mount(self) -> None:
        tick_rate = self.state.config.tick_rate_ms / 1000
        self.set_interval(tick_rate, self._tick)
        logger.info(
            "servarr-tui started: %s",
            ", ".join(domain.title for domain in self.state.domains),
        )
        self._tick()

    def on_unmount(self) -> None:
        logger.info("servarr-tui shutting down")
        if self.state.network is not None:
            self.state.network.stop()

    # ─── Event sources ───────────────────────────────────────────────────

    def _post_outcome(self, outcome: NetworkOutcome) -> None:
        """Network sink; runs on the worker thread."""
        self.post_message(_NetworkOutcome(outcome))

    def on__network_outcome(self, message: _NetworkOutcome) -> None:
        self.state.apply_network_result(message.outcome)
        self.refresh_view()

    async def on_key(self, event) -> None:
        key = from_textual(event.key, event.character)
        if key is None:
            return
        event.prevent_default()
        event.stop()
        handle_events(key, self.state)
        if self.state.should_quit:
            self.exit()
            return
        self.refresh_view()

    def _tick(self) -> None:
        self.state.on_tick()
        rendering.advance_marquee(self.state)
        footer = self._query_safe(self._footer_id)
        if footer is not None and len(self.state.error) > footer.size.width:
            self.state.error.scroll_text()
        self.refresh_view()

    # ─── Painting ────────────────────────────────────────────────────────

    def refresh_view(self) -> None:
        header = self._query_safe(self._header_id)
        body = self._query_safe(self._body_id)
        popup = self._query_safe(self._popup_id)
        footer = self._query_safe(self._footer_id)
        if None in (header, body, popup, footer):
            return
        rows = max(body.size.height - _BODY_CHROME, 1)

        header.update(rendering.render_header(self.state))
        body.update(rendering.render_body(self.state, rows))
        overlay = rendering.render_popup(self.state, rows)
        popup.display = overlay is not None
        if overlay is not None:
            popup.update(overlay)
        footer.update(rendering.render_footer(self.state))

    def _handle_exception(self, error: Exception) -> None:
        tb = "".join(traceback.format_exception(type(error), error, error.__traceback__))
        logger.error("unhandled exception: %s\n%s", error, tb)
        self.state.handle_error(f"{type(error).__name__}: {error}")
        # The loop stays up; the error slot shows what happened.
