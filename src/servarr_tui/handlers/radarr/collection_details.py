"""Collection details popup and the movie overview opened from it."""

from __future__ import annotations

from servarr_tui.app.radarr import RADARR
from servarr_tui.handlers.base import K, KeyEventHandler
from servarr_tui.handlers.radarr.library import open_edit_collection
from servarr_tui.models.servarr_data.radarr_data import COLLECTION_DETAILS_BLOCKS


class CollectionDetailsHandler(KeyEventHandler):
    DOMAIN = RADARR
    BLOCKS = COLLECTION_DETAILS_BLOCKS

    def on_details(self) -> bool:
        return self.block is self.B.COLLECTION_DETAILS

    def handle_submit(self) -> None:
        if not self.on_details():
            self.app.pop_navigation_stack()
        elif not self.data.collection_movies.is_empty():
            self.push(self.B.VIEW_MOVIE_OVERVIEW, self.B.COLLECTION_DETAILS)

    def handle_esc(self) -> None:
        self.app.pop_navigation_stack()
        if self.on_details():
            self.data.reset_movie_collection_table()

    def handle_char_key_event(self) -> None:
        if self.on_details() and self.matches(K.edit):
            open_edit_collection(self)
