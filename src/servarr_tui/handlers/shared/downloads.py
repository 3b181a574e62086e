"""Downloads queue: browse, delete an item, ask the server to rescan."""

from __future__ import annotations

from servarr_tui.handlers.base import K, KeyEventHandler


class DownloadsHandler(KeyEventHandler):
    PROMPTS = {
        "DELETE_DOWNLOAD_PROMPT": "DELETE_DOWNLOAD",
        "UPDATE_DOWNLOADS_PROMPT": "UPDATE_DOWNLOADS",
    }

    @classmethod
    def blocks(cls):
        return cls.DOMAIN.shared_blocks.downloads

    def handle_delete(self) -> None:
        if not self.data.downloads.is_empty():
            self.push(self.B.DELETE_DOWNLOAD_PROMPT)

    def handle_left_right_action(self) -> None:
        self.change_main_tab()

    def handle_esc(self) -> None:
        self.handle_main_tab_esc()

    def handle_char_key_event(self) -> None:
        if self.matches(K.update):
            self.push(self.B.UPDATE_DOWNLOADS_PROMPT)
        elif self.matches(K.refresh):
            self.app.should_refresh = True
