"""Root folders: browse, add by path, delete."""

from __future__ import annotations

from servarr_tui.handlers.base import K, KeyEventHandler
from servarr_tui.models.text import HorizontallyScrollableText


class RootFoldersHandler(KeyEventHandler):
    PROMPTS = {"DELETE_ROOT_FOLDER_PROMPT": "DELETE_ROOT_FOLDER"}

    @classmethod
    def blocks(cls):
        return cls.DOMAIN.shared_blocks.root_folders

    def on_table(self) -> bool:
        return self.block is self.B.ROOT_FOLDERS

    def handle_delete(self) -> None:
        if self.on_table() and not self.data.root_folders.is_empty():
            self.push(self.B.DELETE_ROOT_FOLDER_PROMPT)

    def handle_left_right_action(self) -> None:
        if self.on_table():
            self.change_main_tab()

    def handle_submit(self) -> None:
        if self.block is not self.B.ADD_ROOT_FOLDER_PROMPT:
            return
        path = self.data.edit_root_folder
        if path is not None and not path.is_empty():
            self.data.pending.confirm(self.E.ADD_ROOT_FOLDER)
        else:
            self.data.edit_root_folder = None
        self.end_text_input()
        self.app.pop_navigation_stack()

    def handle_esc(self) -> None:
        if self.on_table():
            self.handle_main_tab_esc()
        else:
            self.data.edit_root_folder = None
            self.end_text_input()
            self.app.pop_navigation_stack()

    def handle_char_key_event(self) -> None:
        if not self.on_table():
            return
        if self.matches(K.add):
            self.data.edit_root_folder = HorizontallyScrollableText()
            self.begin_text_input()
            self.push(self.B.ADD_ROOT_FOLDER_PROMPT)
        elif self.matches(K.refresh):
            self.app.should_refresh = True
