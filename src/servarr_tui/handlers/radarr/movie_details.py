"""Movie details popup: six tabs plus the actions available from any of them."""

from __future__ import annotations

from servarr_tui.app.key_bindings import Key
from servarr_tui.app.radarr import RADARR
from servarr_tui.handlers.base import K, KeyEventHandler
from servarr_tui.models.route import Route
from servarr_tui.models.selection import BlockSelectionState
from servarr_tui.models.servarr_data.radarr_data import EDIT_MOVIE_SELECTION, MOVIE_DETAILS_BLOCKS


class MovieDetailsHandler(KeyEventHandler):
    DOMAIN = RADARR
    BLOCKS = MOVIE_DETAILS_BLOCKS
    PROMPTS = {
        "AUTOMATICALLY_SEARCH_MOVIE_PROMPT": "TRIGGER_AUTOMATIC_SEARCH",
        "UPDATE_AND_SCAN_PROMPT": "UPDATE_AND_SCAN",
        "MANUAL_SEARCH_CONFIRM_PROMPT": "DOWNLOAD_RELEASE",
    }

    def handle_left_right_action(self) -> None:
        tabs = self.data.movie_info_tabs
        if self.key.key is Key.LEFT:
            tabs.previous()
        else:
            tabs.next()
        self.app.pop_and_push_navigation_stack(tabs.get_active_route())

    def handle_submit(self) -> None:
        modal = self.data.movie_details_modal
        if (
            self.block is self.B.MANUAL_SEARCH
            and modal is not None
            and not modal.movie_releases.is_empty()
        ):
            self.push(self.B.MANUAL_SEARCH_CONFIRM_PROMPT, self.block)

    def handle_esc(self) -> None:
        self.app.pop_navigation_stack()
        self.data.reset_movie_info_tabs()

    def handle_char_key_event(self) -> None:
        if self.matches(K.auto_search):
            self.push(self.B.AUTOMATICALLY_SEARCH_MOVIE_PROMPT, self.block)
        elif self.matches(K.update):
            self.push(self.B.UPDATE_AND_SCAN_PROMPT, self.block)
        elif self.matches(K.edit):
            if self.data.populate_edit_movie_fields():
                self.data.selected_block = BlockSelectionState(EDIT_MOVIE_SELECTION)
                self.app.push_navigation_stack(Route(self.B.EDIT_MOVIE_PROMPT, self.block))
        elif self.matches(K.refresh):
            self.app.should_refresh = True
