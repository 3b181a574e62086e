"""Movies library and collections tables."""

from __future__ import annotations

from servarr_tui.app.radarr import RADARR
from servarr_tui.handlers.base import K, KeyEventHandler
from servarr_tui.handlers.library import LibraryTableHandler
from servarr_tui.models.route import Route
from servarr_tui.models.selection import BlockSelectionState
from servarr_tui.models.servarr_data.modals import MovieDetailsModal
from servarr_tui.models.servarr_data.radarr_data import (
    COLLECTIONS_BLOCKS,
    DELETE_MOVIE_SELECTION,
    EDIT_COLLECTION_SELECTION,
    EDIT_MOVIE_SELECTION,
    LIBRARY_BLOCKS,
)
from servarr_tui.models.stateful import StatefulTable
from servarr_tui.models.text import HorizontallyScrollableText


class LibraryHandler(LibraryTableHandler):
    DOMAIN = RADARR
    BLOCKS = LIBRARY_BLOCKS
    PROMPTS = {"UPDATE_ALL_MOVIES_PROMPT": "UPDATE_ALL_MOVIES"}
    TABLE = "MOVIES"
    SEARCH = "SEARCH_MOVIE"
    SEARCH_ERROR = "SEARCH_MOVIE_ERROR"
    FILTER = "FILTER_MOVIES"
    FILTER_ERROR = "FILTER_MOVIES_ERROR"

    def source(self) -> StatefulTable:
        return self.data.movies

    def filtered(self) -> StatefulTable:
        return self.data.filtered_movies

    def handle_submit(self) -> None:
        if not self.on_table():
            super().handle_submit()
            return
        if self.data.selected_movie() is None:
            return
        self.data.movie_details_modal = MovieDetailsModal()
        self.data.movie_info_tabs.set_index(0)
        self.push(self.B.MOVIE_DETAILS)

    def handle_delete(self) -> None:
        if self.on_table() and self.data.selected_movie() is not None:
            self.data.selected_block = BlockSelectionState(DELETE_MOVIE_SELECTION)
            self.push(self.B.DELETE_MOVIE_PROMPT, self.B.MOVIES)

    def handle_char_key_event(self) -> None:
        if not self.on_table():
            return
        if self.matches(K.add):
            self.data.add_movie_search = HorizontallyScrollableText()
            self.begin_text_input()
            self.push(self.B.ADD_MOVIE_SEARCH_INPUT, self.B.MOVIES)
        elif self.matches(K.edit):
            if self.data.populate_edit_movie_fields():
                self.data.selected_block = BlockSelectionState(EDIT_MOVIE_SELECTION)
                self.app.push_navigation_stack(Route(self.B.EDIT_MOVIE_PROMPT, self.B.MOVIES))
        elif self.matches(K.update):
            self.push(self.B.UPDATE_ALL_MOVIES_PROMPT)
        else:
            super().handle_char_key_event()


def open_edit_collection(handler: KeyEventHandler) -> None:
    """Shared by the collections table and the collection details popup."""
    data = handler.data
    if data.populate_edit_collection_fields():
        data.selected_block = BlockSelectionState(EDIT_COLLECTION_SELECTION)
        handler.app.push_navigation_stack(Route(handler.B.EDIT_COLLECTION_PROMPT, handler.block))


class CollectionsHandler(LibraryTableHandler):
    DOMAIN = RADARR
    BLOCKS = COLLECTIONS_BLOCKS
    PROMPTS = {"UPDATE_ALL_COLLECTIONS_PROMPT": "UPDATE_COLLECTIONS"}
    TABLE = "COLLECTIONS"
    SEARCH = "SEARCH_COLLECTION"
    SEARCH_ERROR = "SEARCH_COLLECTION_ERROR"
    FILTER = "FILTER_COLLECTIONS"
    FILTER_ERROR = "FILTER_COLLECTIONS_ERROR"

    def source(self) -> StatefulTable:
        return self.data.collections

    def filtered(self) -> StatefulTable:
        return self.data.filtered_collections

    def handle_submit(self) -> None:
        if not self.on_table():
            super().handle_submit()
        elif self.data.selected_collection() is not None:
            self.push(self.B.COLLECTION_DETAILS)

    def handle_char_key_event(self) -> None:
        if not self.on_table():
            return
        if self.matches(K.edit):
            open_edit_collection(self)
        elif self.matches(K.update):
            self.push(self.B.UPDATE_ALL_COLLECTIONS_PROMPT)
        else:
            super().handle_char_key_event()
