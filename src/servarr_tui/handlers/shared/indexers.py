"""Indexers: browse, delete, test one or all, open the edit form."""

from __future__ import annotations

from servarr_tui.handlers.base import K, KeyEventHandler
from servarr_tui.models.selection import BlockSelectionState
from servarr_tui.models.servarr_data.modals import EditIndexerModal
from servarr_tui.models.route import Route


class IndexersHandler(KeyEventHandler):
    PROMPTS = {"DELETE_INDEXER_PROMPT": "DELETE_INDEXER"}

    @classmethod
    def blocks(cls):
        return cls.DOMAIN.shared_blocks.indexers

    def on_table(self) -> bool:
        return self.block is self.B.INDEXERS

    def handle_delete(self) -> None:
        if self.on_table() and not self.data.indexers.is_empty():
            self.push(self.B.DELETE_INDEXER_PROMPT)

    def handle_left_right_action(self) -> None:
        if self.on_table():
            self.change_main_tab()

    def handle_submit(self) -> None:
        if not self.on_table():
            self.close_test_results()
            return
        indexer = self.data.indexers.current_selection()
        if indexer is None:
            return
        self.data.edit_indexer_modal = EditIndexerModal.from_indexer(
            indexer, self.data.tag_labels(indexer.tags)
        )
        self.data.selected_block = BlockSelectionState(
            self.DOMAIN.shared_blocks.edit_indexer_sequence(indexer.protocol)
        )
        self.app.push_navigation_stack(Route(self.B.EDIT_INDEXER_PROMPT, self.B.INDEXERS))

    def handle_esc(self) -> None:
        if self.on_table():
            self.handle_main_tab_esc()
        else:
            self.close_test_results()

    def close_test_results(self) -> None:
        self.data.reset_indexer_tests()
        self.app.pop_navigation_stack()

    def handle_char_key_event(self) -> None:
        if not self.on_table():
            return
        if self.matches(K.test_all):
            self.data.reset_indexer_tests()
            self.push(self.B.TEST_ALL_INDEXERS)
        elif self.matches(K.test):
            if not self.data.indexers.is_empty():
                self.data.reset_indexer_tests()
                self.push(self.B.TEST_INDEXER)
        elif self.matches(K.refresh):
            self.app.should_refresh = True
