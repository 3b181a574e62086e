"""WizardHandler — a multi-step form driven by a BlockSelectionState.

The prompt block is the form itself. ``data.selected_block`` is the cursor
over the form's StepSequence; the block under the cursor is one of

    toggle   enter flips a bool on the form
    select   enter opens the choice list (route: list block over the prompt)
    input    enter opens the text field (route: input block over the prompt)
    confirm  ←/→ flips yes/no, enter answers

Leaving a list or field with enter moves the cursor to the next step.
Answering the confirm step "yes" arms the form's event; it fires on the
next dispatch cycle and the request builder consumes the form. Esc on the
prompt, or "no", throws the form away.

Subclasses name the data container attribute holding the form (``FORM``),
copy the form's field tables, and say how to tear it down (``teardown()``).
Which choice list or text field a sub-block edits is asked of the data
container.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, ClassVar

from servarr_tui.app.key_bindings import Key
from servarr_tui.handlers.base import KeyEventHandler
from servarr_tui.models.route import ActiveBlock, Route
from servarr_tui.models.selection import BlockSelectionState

if TYPE_CHECKING:
    from servarr_tui.models.servarr_data.servarr_data import ServarrData

logger = logging.getLogger(__name__)


class WizardHandler(KeyEventHandler):
    PROMPT: ClassVar[str]
    CONFIRM: ClassVar[str]
    EVENT: ClassVar[str]
    # data container attribute holding the form; None when the container is the form
    FORM: ClassVar[str | None] = None
    # block name → attribute name on the form
    TOGGLES: ClassVar[dict[str, str]] = {}
    SELECTS: ClassVar[dict[str, str]] = {}
    INPUTS: ClassVar[dict[str, str]] = {}

    @classmethod
    def form_of(cls, data: ServarrData) -> object | None:
        return data if cls.FORM is None else getattr(data, cls.FORM)

    def form(self) -> object | None:
        return self.form_of(self.data)

    def teardown(self) -> None:
        self.data.selected_block = None

    # ─── Helpers ─────────────────────────────────────────────────────────

    @property
    def selection(self) -> BlockSelectionState | None:
        return self.data.selected_block

    def advance_past(self, block: ActiveBlock) -> None:
        selection = self.selection
        if selection is not None:
            selection.select_block(selection.sequence.next_step(block))

    # ─── Sub-blocks (lists and text fields) ──────────────────────────────

    def handle(self) -> None:
        if self.block.name == self.PROMPT:
            self.handle_prompt()
            return
        super().handle()

    def handle_submit(self) -> None:
        if self.block.name in self.SELECTS or self.block.name in self.INPUTS:
            self.end_text_input()
            self.app.pop_navigation_stack()
            self.advance_past(self.block)

    def handle_esc(self) -> None:
        if self.block.name in self.SELECTS or self.block.name in self.INPUTS:
            self.end_text_input()
            self.app.pop_navigation_stack()

    # ─── The form ────────────────────────────────────────────────────────

    def handle_prompt(self) -> None:
        selection = self.selection
        if selection is None or self.form() is None:
            logger.warning("%s open without a form, closing", self.block)
            self.app.pop_navigation_stack()
            self.teardown()
            return

        active = selection.get_active_block()
        key = self.key.key
        if key is Key.UP:
            selection.up()
        elif key is Key.DOWN:
            selection.down()
        elif key in (Key.LEFT, Key.RIGHT):
            if active.name == self.CONFIRM:
                self.data.pending.toggle()
            elif key is Key.LEFT:
                selection.left()
            else:
                selection.right()
        elif key is Key.SUBMIT:
            self.submit_step(active)
        elif key is Key.ESC:
            self.data.pending.cancel()
            self.app.pop_navigation_stack()
            self.teardown()

    def submit_step(self, active: ActiveBlock) -> None:
        if active.name == self.CONFIRM:
            pending = self.data.pending
            pending.submit(self.E[self.EVENT])
            self.app.pop_navigation_stack()
            if pending.action is None:
                self.teardown()
            else:
                self.data.selected_block = None
        elif active.name in self.TOGGLES:
            form = self.form()
            attr = self.TOGGLES[active.name]
            setattr(form, attr, not getattr(form, attr))
        elif active.name in self.INPUTS:
            self.begin_text_input()
            self.app.push_navigation_stack(Route(active, self.block))
        elif active.name in self.SELECTS:
            self.app.push_navigation_stack(Route(active, self.block))
