"""Blocklist: browse, inspect, delete one item or clear everything."""

from __future__ import annotations

from servarr_tui.handlers.base import K, KeyEventHandler


class BlocklistHandler(KeyEventHandler):
    PROMPTS = {
        "DELETE_BLOCKLIST_ITEM_PROMPT": "DELETE_BLOCKLIST_ITEM",
        "BLOCKLIST_CLEAR_ALL_ITEMS_PROMPT": "CLEAR_BLOCKLIST",
    }

    @classmethod
    def blocks(cls):
        return cls.DOMAIN.shared_blocks.blocklist

    def on_table(self) -> bool:
        return self.block is self.B.BLOCKLIST

    def handle_delete(self) -> None:
        if self.on_table() and not self.data.blocklist.is_empty():
            self.push(self.B.DELETE_BLOCKLIST_ITEM_PROMPT)

    def handle_left_right_action(self) -> None:
        if self.on_table():
            self.change_main_tab()

    def handle_submit(self) -> None:
        if self.on_table():
            if not self.data.blocklist.is_empty():
                self.push(self.B.BLOCKLIST_ITEM_DETAILS)
        else:
            self.app.pop_navigation_stack()

    def handle_esc(self) -> None:
        if self.on_table():
            self.handle_main_tab_esc()
        else:
            self.app.pop_navigation_stack()

    def handle_char_key_event(self) -> None:
        if not self.on_table():
            return
        if self.matches(K.clear):
            self.push(self.B.BLOCKLIST_CLEAR_ALL_ITEMS_PROMPT)
        elif self.matches(K.refresh):
            self.app.should_refresh = True
