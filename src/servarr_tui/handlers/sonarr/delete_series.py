from __future__ import annotations

from servarr_tui.app.sonarr import SONARR
from servarr_tui.handlers.wizard import WizardHandler
from servarr_tui.models.servarr_data.sonarr_data import DELETE_SERIES_BLOCKS


class DeleteSeriesHandler(WizardHandler):
    DOMAIN = SONARR
    BLOCKS = DELETE_SERIES_BLOCKS
    PROMPT = "DELETE_SERIES_PROMPT"
    CONFIRM = "DELETE_SERIES_CONFIRM_PROMPT"
    EVENT = "DELETE_SERIES"
    TOGGLES = {
        "DELETE_SERIES_TOGGLE_DELETE_FILE": "delete_series_files",
        "DELETE_SERIES_TOGGLE_ADD_LIST_EXCLUSION": "add_list_exclusion",
    }

    def teardown(self) -> None:
        self.data.reset_delete_series_preferences()
        self.data.selected_block = None
