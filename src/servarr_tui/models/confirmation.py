"""Pending confirmation — the yes/no answer of the open prompt and its action.

Lifecycle:
    toggle()/set  → user moves between Yes and No on the prompt
    submit(event) → Enter: keep ``event`` only if Yes is highlighted
    take()        → dispatcher consumes it exactly once
    cancel()      → Esc: forget both fields
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

E = TypeVar("E")


@dataclass
class PendingConfirmation(Generic[E]):
    is_confirmed: bool = False
    action: E | None = None

    def toggle(self) -> None:
        self.is_confirmed = not self.is_confirmed

    def submit(self, action: E) -> None:
        if self.is_confirmed:
            self.action = action
        else:
            self.cancel()

    def confirm(self, action: E) -> None:
        """Arm ``action`` without going through a yes/no prompt."""
        self.is_confirmed = True
        self.action = action

    def cancel(self) -> None:
        self.is_confirmed = False
        self.action = None

    def take(self) -> E | None:
        """Return the armed action and clear both fields, or None if not armed."""
        if not self.is_confirmed:
            return None
        action = self.action
        self.cancel()
        return action
