"""Delete movie prompt: two toggles on the data container, then yes/no."""

from __future__ import annotations

from servarr_tui.app.radarr import RADARR
from servarr_tui.handlers.wizard import WizardHandler
from servarr_tui.models.servarr_data.radarr_data import DELETE_MOVIE_BLOCKS


class DeleteMovieHandler(WizardHandler):
    DOMAIN = RADARR
    BLOCKS = DELETE_MOVIE_BLOCKS
    PROMPT = "DELETE_MOVIE_PROMPT"
    CONFIRM = "DELETE_MOVIE_CONFIRM_PROMPT"
    EVENT = "DELETE_MOVIE"
    TOGGLES = {
        "DELETE_MOVIE_TOGGLE_DELETE_FILE": "delete_movie_files",
        "DELETE_MOVIE_TOGGLE_ADD_LIST_EXCLUSION": "add_list_exclusion",
    }

    def teardown(self) -> None:
        self.data.reset_delete_movie_preferences()
        self.data.selected_block = None
