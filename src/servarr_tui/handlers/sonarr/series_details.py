"""Series details popup (seasons) and the season details popup (episodes)."""

from __future__ import annotations

from servarr_tui.app.sonarr import SONARR
from servarr_tui.handlers.base import K, KeyEventHandler
from servarr_tui.models.servarr_data.sonarr_data import SERIES_DETAILS_BLOCKS
from servarr_tui.models.stateful import StatefulTable


class SeriesDetailsHandler(KeyEventHandler):
    DOMAIN = SONARR
    BLOCKS = SERIES_DETAILS_BLOCKS
    PROMPTS = {"AUTOMATICALLY_SEARCH_SERIES_PROMPT": "TRIGGER_AUTOMATIC_SERIES_SEARCH"}

    def handle_submit(self) -> None:
        if self.block is self.B.SERIES_DETAILS and not self.data.seasons.is_empty():
            self.data.episodes = StatefulTable()
            self.push(self.B.SEASON_DETAILS, self.B.SERIES_DETAILS)

    def handle_esc(self) -> None:
        self.app.pop_navigation_stack()
        if self.block is self.B.SERIES_DETAILS:
            self.data.reset_series_details()
        else:
            self.data.episodes = StatefulTable()

    def handle_char_key_event(self) -> None:
        if self.matches(K.auto_search):
            self.push(self.B.AUTOMATICALLY_SEARCH_SERIES_PROMPT, self.block)
        elif self.matches(K.refresh):
            self.app.should_refresh = True
