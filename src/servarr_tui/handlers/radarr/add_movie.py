"""Add movie: search the metadata provider, pick a result, fill the form.

    ADD_MOVIE_SEARCH_INPUT ─enter→ ADD_MOVIE_SEARCH_RESULTS ─enter→ ADD_MOVIE_PROMPT
                                   │ (nothing found)               │ (already added)
                                   └→ ADD_MOVIE_EMPTY_SEARCH_RESULTS └→ ADD_MOVIE_ALREADY_IN_LIBRARY

The search request runs when the results route is dispatched; its applier
swaps the results route for the empty one when nothing came back.
"""

from __future__ import annotations

from servarr_tui.app.radarr import RADARR
from servarr_tui.handlers.wizard import WizardHandler
from servarr_tui.models.route import Route
from servarr_tui.models.selection import BlockSelectionState
from servarr_tui.models.servarr_data.modals import AddMovieModal
from servarr_tui.models.servarr_data.radarr_data import ADD_MOVIE_BLOCKS, ADD_MOVIE_SELECTION


class AddMovieHandler(WizardHandler):
    DOMAIN = RADARR
    BLOCKS = ADD_MOVIE_BLOCKS
    PROMPT = "ADD_MOVIE_PROMPT"
    CONFIRM = "ADD_MOVIE_CONFIRM_PROMPT"
    EVENT = "ADD_MOVIE"
    FORM = "add_movie_modal"
    SELECTS = AddMovieModal.SELECTS
    INPUTS = AddMovieModal.INPUTS

    def teardown(self) -> None:
        self.data.add_movie_modal = None
        self.data.selected_block = None

    def handle(self) -> None:
        if self.block in (self.B.ADD_MOVIE_EMPTY_SEARCH_RESULTS, self.B.ADD_MOVIE_ALREADY_IN_LIBRARY):
            self.app.pop_navigation_stack()
            return
        super().handle()

    def handle_submit(self) -> None:
        if self.block is self.B.ADD_MOVIE_SEARCH_INPUT:
            search = self.data.add_movie_search
            if search is None or search.is_empty():
                return
            self.data.add_searched_movies = None
            self.end_text_input()
            self.push(self.B.ADD_MOVIE_SEARCH_RESULTS, self.B.MOVIES)
        elif self.block is self.B.ADD_MOVIE_SEARCH_RESULTS:
            self.select_result()
        else:
            super().handle_submit()

    def select_result(self) -> None:
        results = self.data.add_searched_movies
        result = results.current_selection() if results is not None else None
        if result is None:
            return
        if any(movie.tmdb_id == result.tmdb_id for movie in self.data.movies.items):
            self.push(self.B.ADD_MOVIE_ALREADY_IN_LIBRARY, self.B.ADD_MOVIE_SEARCH_RESULTS)
            return
        self.data.populate_add_movie_fields()
        self.data.selected_block = BlockSelectionState(ADD_MOVIE_SELECTION)
        self.app.push_navigation_stack(
            Route(self.B.ADD_MOVIE_PROMPT, self.B.ADD_MOVIE_SEARCH_RESULTS)
        )

    def handle_esc(self) -> None:
        if self.block is self.B.ADD_MOVIE_SEARCH_INPUT:
            self.end_text_input()
            self.app.pop_navigation_stack()
            self.data.reset_add_movie()
        elif self.block is self.B.ADD_MOVIE_SEARCH_RESULTS:
            self.app.pop_navigation_stack()
            self.data.add_searched_movies = None
            self.begin_text_input()
        else:
            super().handle_esc()
