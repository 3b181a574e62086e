"""System screen and its popups: tasks, queued events, logs, updates."""

from __future__ import annotations

from servarr_tui.app.key_bindings import Key
from servarr_tui.handlers.base import K, KeyEventHandler


class SystemHandler(KeyEventHandler):
    PROMPTS = {"SYSTEM_TASK_START_CONFIRM_PROMPT": "START_TASK"}

    @classmethod
    def blocks(cls):
        return cls.DOMAIN.shared_blocks.system

    def on_main(self) -> bool:
        return self.block is self.B.SYSTEM

    def handle_left_right_action(self) -> None:
        if self.on_main():
            self.change_main_tab()
        elif self.block is self.B.SYSTEM_LOGS:
            for line in self.data.logs:
                if self.key.key is Key.RIGHT:
                    line.scroll_text()
                else:
                    line.reset_offset()

    def handle_submit(self) -> None:
        if self.block is self.B.SYSTEM_TASKS and not self.data.tasks.is_empty():
            self.push(self.B.SYSTEM_TASK_START_CONFIRM_PROMPT, self.B.SYSTEM_TASKS)

    def handle_esc(self) -> None:
        if self.on_main():
            self.handle_main_tab_esc()
            return
        if self.block is self.B.SYSTEM_LOGS:
            for line in self.data.logs:
                line.reset_offset()
        self.app.pop_navigation_stack()

    def handle_char_key_event(self) -> None:
        if not self.on_main():
            return
        popups = {
            K.tasks: self.B.SYSTEM_TASKS,
            K.events: self.B.SYSTEM_QUEUED_EVENTS,
            K.logs: self.B.SYSTEM_LOGS,
            K.update: self.B.SYSTEM_UPDATES,
        }
        for binding, block in popups.items():
            if self.matches(binding):
                self.push(block)
                return
        if self.matches(K.refresh):
            self.app.should_refresh = True
