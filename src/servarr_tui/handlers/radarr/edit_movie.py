"""Edit movie and edit collection forms."""

from __future__ import annotations

from servarr_tui.app.radarr import RADARR
from servarr_tui.handlers.wizard import WizardHandler
from servarr_tui.models.servarr_data.modals import EditCollectionModal, EditMovieModal
from servarr_tui.models.servarr_data.radarr_data import EDIT_COLLECTION_BLOCKS, EDIT_MOVIE_BLOCKS


class EditMovieHandler(WizardHandler):
    DOMAIN = RADARR
    BLOCKS = EDIT_MOVIE_BLOCKS
    PROMPT = "EDIT_MOVIE_PROMPT"
    CONFIRM = "EDIT_MOVIE_CONFIRM_PROMPT"
    EVENT = "EDIT_MOVIE"
    FORM = "edit_movie_modal"
    TOGGLES = EditMovieModal.TOGGLES
    SELECTS = EditMovieModal.SELECTS
    INPUTS = EditMovieModal.INPUTS

    def teardown(self) -> None:
        self.data.edit_movie_modal = None
        self.data.selected_block = None


class EditCollectionHandler(WizardHandler):
    DOMAIN = RADARR
    BLOCKS = EDIT_COLLECTION_BLOCKS
    PROMPT = "EDIT_COLLECTION_PROMPT"
    CONFIRM = "EDIT_COLLECTION_CONFIRM_PROMPT"
    EVENT = "EDIT_COLLECTION"
    FORM = "edit_collection_modal"
    TOGGLES = EditCollectionModal.TOGGLES
    SELECTS = EditCollectionModal.SELECTS
    INPUTS = EditCollectionModal.INPUTS

    def teardown(self) -> None:
        self.data.edit_collection_modal = None
        self.data.selected_block = None
