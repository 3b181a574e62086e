"""KeyEventHandler — one key press against one block.

A handler class owns a set of blocks (``blocks()``); handlers/routing.py picks
the single owner of the current route's block and runs ``handle()`` on a
fresh instance. ``handle()`` routes the key to one ``handle_*`` method:

    up/down/home/end/pgup/pgdown → handle_scroll_* / handle_home / handle_end
    delete                       → handle_delete
    left/right                   → handle_left_right_action
    enter                        → handle_submit
    esc                          → handle_esc
    characters, backspace        → handle_char_key_event

Yes/no prompts never reach those methods: a block listed in ``PROMPTS`` is
answered by the shared confirmation flow (toggle, submit, cancel). On a text
input block (``text_input()`` is not None) the caret keys, characters and
backspace edit the field first.

// [LAW:one-source-of-truth] PROMPTS names blocks and events by member name,
//   so one table serves both domain enumerations.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, ClassVar

from servarr_tui.app.key_bindings import DEFAULT_KEYBINDINGS, Key, KeyBinding, KeyPress
from servarr_tui.models.route import ActiveBlock, Route
from servarr_tui.models.stateful import Scrollable, StatefulTable
from servarr_tui.models.text import HorizontallyScrollableText

if TYPE_CHECKING:
    from servarr_tui.app.domain import ServarrDomain
    from servarr_tui.app.state import AppState
    from servarr_tui.models.servarr_data.servarr_data import ServarrData

logger = logging.getLogger(__name__)

K = DEFAULT_KEYBINDINGS

PAGE_SIZE = 10

_KEY_METHODS: dict[Key, str] = {
    Key.UP: "handle_scroll_up",
    Key.DOWN: "handle_scroll_down",
    Key.HOME: "handle_home",
    Key.END: "handle_end",
    Key.PAGE_UP: "handle_page_up",
    Key.PAGE_DOWN: "handle_page_down",
    Key.DELETE: "handle_delete",
    Key.LEFT: "handle_left_right_action",
    Key.RIGHT: "handle_left_right_action",
    Key.SUBMIT: "handle_submit",
    Key.ESC: "handle_esc",
}


class KeyEventHandler:
    DOMAIN: ClassVar[ServarrDomain]
    BLOCKS: ClassVar[frozenset[ActiveBlock]] = frozenset()
    # prompt block name → event name fired when answered "yes"
    PROMPTS: ClassVar[dict[str, str]] = {}

    def __init__(
        self,
        key: KeyPress,
        app: AppState,
        block: ActiveBlock,
        context: ActiveBlock | None = None,
    ):
        self.key = key
        self.app = app
        self.block = block
        self.context = context

    @classmethod
    def blocks(cls) -> frozenset[ActiveBlock]:
        return cls.BLOCKS

    @classmethod
    def accepts(cls, block: ActiveBlock) -> bool:
        return block in cls.blocks()

    @property
    def data(self) -> ServarrData:
        return self.DOMAIN.data(self.app)

    @property
    def B(self) -> type[ActiveBlock]:
        return self.DOMAIN.blocks

    @property
    def E(self) -> type[Enum]:
        return self.DOMAIN.events

    def handle(self) -> None:
        prompt_event = self.PROMPTS.get(self.block.name)
        if prompt_event is not None:
            self.handle_confirmation_prompt(self.E[prompt_event])
            return
        text = self.text_input()
        if text is not None and self.handle_text_box_keys(text):
            return
        method = _KEY_METHODS.get(self.key.key, "handle_char_key_event")
        getattr(self, method)()

    # ─── Defaults ────────────────────────────────────────────────────────

    def text_input(self) -> HorizontallyScrollableText | None:
        """The field being typed into on this block, if any."""
        return self.data.focused_input(self.block)

    def scrollable(self) -> Scrollable | None:
        """The collection up/down/home/end move on this block, if any."""
        return self.data.focused_collection(self.block)

    def handle_scroll_up(self) -> None:
        target = self.scrollable()
        if target is not None:
            target.scroll_up()

    def handle_scroll_down(self) -> None:
        target = self.scrollable()
        if target is not None:
            target.scroll_down()

    def handle_home(self) -> None:
        target = self.scrollable()
        if target is not None:
            target.scroll_to_top()

    def handle_end(self) -> None:
        target = self.scrollable()
        if target is not None:
            target.scroll_to_bottom()

    def handle_page_up(self) -> None:
        target = self.scrollable()
        if isinstance(target, StatefulTable):
            target.page_up(PAGE_SIZE)

    def handle_page_down(self) -> None:
        target = self.scrollable()
        if isinstance(target, StatefulTable):
            target.page_down(PAGE_SIZE)

    def handle_delete(self) -> None:
        pass

    def handle_left_right_action(self) -> None:
        pass

    def handle_submit(self) -> None:
        pass

    def handle_esc(self) -> None:
        pass

    def handle_char_key_event(self) -> None:
        pass

    # ─── Helpers ─────────────────────────────────────────────────────────

    def matches(self, binding: KeyBinding) -> bool:
        return self.key == binding.key

    def push(self, block: ActiveBlock, context: ActiveBlock | None = None) -> None:
        self.app.push_navigation_stack(Route(block, context))

    def is_main_tab(self) -> bool:
        return any(tab.route.block is self.block for tab in self.data.main_tabs.tabs)

    def change_main_tab(self) -> None:
        """Left/right on a top-level screen moves between the domain's tabs."""
        tabs = self.data.main_tabs
        if self.key.key is Key.LEFT:
            tabs.previous()
        else:
            tabs.next()
        self.app.pop_and_push_navigation_stack(tabs.get_active_route())

    def handle_main_tab_esc(self) -> None:
        """Esc on a top-level screen: drop the filter and the error message."""
        self.data.reset_filter()
        self.app.clear_error()

    def handle_confirmation_prompt(self, event: Enum) -> None:
        pending = self.data.pending
        if self.key.key in (Key.LEFT, Key.RIGHT):
            pending.toggle()
        elif self.key.key is Key.SUBMIT:
            pending.submit(event)
            self.app.pop_navigation_stack()
        elif self.key.key is Key.ESC:
            pending.cancel()
            self.app.pop_navigation_stack()

    def handle_text_box_keys(self, text: HorizontallyScrollableText) -> bool:
        """Edit ``text`` with the caret keys. True when the key was consumed."""
        key = self.key.key
        if key is Key.LEFT:
            text.scroll_left()
        elif key is Key.RIGHT:
            text.scroll_right()
        elif key is Key.HOME:
            text.scroll_home()
        elif key is Key.END:
            text.reset_offset()
        elif key is Key.BACKSPACE:
            text.pop()
        elif key is Key.CHAR:
            text.push(self.key.char)
        else:
            return False
        return True

    def begin_text_input(self) -> None:
        self.app.should_ignore_quit_key = True

    def end_text_input(self) -> None:
        self.app.should_ignore_quit_key = False
