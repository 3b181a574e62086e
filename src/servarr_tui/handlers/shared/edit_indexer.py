"""Edit indexer form; the step matrix depends on the indexer's protocol."""

from __future__ import annotations

from servarr_tui.handlers.wizard import WizardHandler
from servarr_tui.models.servarr_data.modals import EditIndexerModal


class EditIndexerHandler(WizardHandler):
    PROMPT = "EDIT_INDEXER_PROMPT"
    CONFIRM = "EDIT_INDEXER_CONFIRM_PROMPT"
    EVENT = "EDIT_INDEXER"
    FORM = "edit_indexer_modal"
    TOGGLES = EditIndexerModal.TOGGLES
    INPUTS = EditIndexerModal.INPUTS

    @classmethod
    def blocks(cls):
        return cls.DOMAIN.shared_blocks.edit_indexer

    def teardown(self) -> None:
        self.data.reset_edit_indexer()
