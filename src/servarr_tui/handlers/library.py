"""LibraryTableHandler — a searchable, filterable top-level table.

Subclasses name their five blocks and their two tables; this class owns the
search/filter sub-blocks and the shared keys of the table block:

    s → search    f → filter    r → refresh    esc → drop filter and error
    ←/→ → neighbouring main tab

Anything a subclass adds (details, add, edit, delete) goes in the usual
``handle_*`` overrides, calling ``super()`` for the rest.
"""

from __future__ import annotations

from typing import ClassVar

from servarr_tui.handlers.base import K, KeyEventHandler
from servarr_tui.handlers.search_filter import filter_table, search_table
from servarr_tui.models.servarr_data.servarr_data import active_view
from servarr_tui.models.stateful import StatefulTable


class LibraryTableHandler(KeyEventHandler):
    TABLE: ClassVar[str]
    SEARCH: ClassVar[str]
    SEARCH_ERROR: ClassVar[str]
    FILTER: ClassVar[str]
    FILTER_ERROR: ClassVar[str]

    def source(self) -> StatefulTable:
        raise NotImplementedError

    def filtered(self) -> StatefulTable:
        raise NotImplementedError

    def row_text(self, item) -> str:
        return str(item.title)

    def view(self) -> StatefulTable:
        return active_view(self.source(), self.filtered())

    def on_table(self) -> bool:
        return self.block is self.B[self.TABLE]

    # ─── Key routing ─────────────────────────────────────────────────────

    def handle(self) -> None:
        if self.block in (self.B[self.SEARCH_ERROR], self.B[self.FILTER_ERROR]):
            self.app.pop_navigation_stack()
            return
        super().handle()

    def handle_left_right_action(self) -> None:
        if self.on_table():
            self.change_main_tab()

    def handle_submit(self) -> None:
        if self.block is self.B[self.SEARCH]:
            search_table(self.app, self.data, self.view(), self.B[self.SEARCH_ERROR], self.row_text)
        elif self.block is self.B[self.FILTER]:
            filter_table(
                self.app,
                self.data,
                self.source(),
                self.filtered(),
                self.B[self.FILTER_ERROR],
                self.row_text,
            )

    def handle_esc(self) -> None:
        if self.block is self.B[self.SEARCH]:
            self.data.reset_search()
            self.end_text_input()
            self.app.pop_navigation_stack()
        elif self.block is self.B[self.FILTER]:
            self.data.reset_filter()
            self.end_text_input()
            self.app.pop_navigation_stack()
        elif self.on_table():
            self.handle_main_tab_esc()

    def handle_char_key_event(self) -> None:
        if not self.on_table():
            return
        if self.matches(K.search):
            self.data.is_searching = True
            self.begin_text_input()
            self.push(self.B[self.SEARCH])
        elif self.matches(K.filter):
            self.data.reset_filter()
            self.data.is_filtering = True
            self.begin_text_input()
            self.push(self.B[self.FILTER])
        elif self.matches(K.refresh):
            self.app.should_refresh = True
