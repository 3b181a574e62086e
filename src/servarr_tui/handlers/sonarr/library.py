"""Series library table."""

from __future__ import annotations

from servarr_tui.app.sonarr import SONARR
from servarr_tui.handlers.base import K
from servarr_tui.handlers.library import LibraryTableHandler
from servarr_tui.models.selection import BlockSelectionState
from servarr_tui.models.servarr_data.sonarr_data import DELETE_SERIES_SELECTION, LIBRARY_BLOCKS
from servarr_tui.models.stateful import StatefulTable


class SeriesHandler(LibraryTableHandler):
    DOMAIN = SONARR
    BLOCKS = LIBRARY_BLOCKS
    PROMPTS = {"UPDATE_ALL_SERIES_PROMPT": "UPDATE_ALL_SERIES"}
    TABLE = "SERIES"
    SEARCH = "SEARCH_SERIES"
    SEARCH_ERROR = "SEARCH_SERIES_ERROR"
    FILTER = "FILTER_SERIES"
    FILTER_ERROR = "FILTER_SERIES_ERROR"

    def source(self) -> StatefulTable:
        return self.data.series

    def filtered(self) -> StatefulTable:
        return self.data.filtered_series

    def handle_submit(self) -> None:
        if not self.on_table():
            super().handle_submit()
        elif self.data.selected_series() is not None:
            self.data.reset_series_details()
            self.push(self.B.SERIES_DETAILS)

    def handle_delete(self) -> None:
        if self.on_table() and self.data.selected_series() is not None:
            self.data.selected_block = BlockSelectionState(DELETE_SERIES_SELECTION)
            self.push(self.B.DELETE_SERIES_PROMPT, self.B.SERIES)

    def handle_char_key_event(self) -> None:
        if self.on_table() and self.matches(K.update):
            self.push(self.B.UPDATE_ALL_SERIES_PROMPT)
        else:
            super().handle_char_key_event()
