"""Stateful collections — cursor-bearing containers behind every table and list.

// [LAW:single-enforcer] Selection clamping lives here only; handlers never
//   index into .items with a raw cursor.
// [LAW:dataflow-not-control-flow] Empty collections are a value (selected=None),
//   not an error path. Every mutator is a no-op on empty.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Generic, Protocol, TypeVar

T = TypeVar("T")


class Scrollable(Protocol):
    """Anything the up/down/home/end keys can move."""

    def scroll_up(self) -> None: ...

    def scroll_down(self) -> None: ...

    def scroll_to_top(self) -> None: ...

    def scroll_to_bottom(self) -> None: ...


class StatefulList(Generic[T]):
    """Ordered items plus an optional selected index.

    Invariant: ``selected`` is None exactly when ``items`` is empty, and is
    always a valid index otherwise.
    """

    __slots__ = ("items", "selected")

    def __init__(self, items: Sequence[T] | None = None):
        self.items: list[T] = []
        self.selected: int | None = None
        if items:
            self.set_items(items)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(items={self.items!r}, selected={self.selected!r})"

    def is_empty(self) -> bool:
        return not self.items

    def set_items(self, items: Sequence[T]) -> None:
        """Replace contents, keeping the cursor where it still makes sense.

        Previous index kept when valid, clamped to the new last index when the
        sequence shrank, first index when nothing was selected.
        """
        self.items = list(items)
        if not self.items:
            self.selected = None
            return
        if self.selected is None:
            self.selected = 0
        else:
            self.selected = min(self.selected, len(self.items) - 1)

    def current_selection(self, default: T | None = None) -> T | None:
        """Return the selected item, or ``default`` when empty."""
        if self.selected is None or not self.items:
            return default
        return self.items[self.selected]

    def select_index(self, index: int | None) -> None:
        """Jump to ``index``, clamped. None on a non-empty list keeps the cursor."""
        if not self.items:
            self.selected = None
            return
        if index is None:
            return
        self.selected = max(0, min(index, len(self.items) - 1))

    # ─── Scrollable ──────────────────────────────────────────────────────

    def scroll_down(self) -> None:
        if not self.items:
            return
        if self.selected is None or self.selected >= len(self.items) - 1:
            self.selected = 0
        else:
            self.selected += 1

    def scroll_up(self) -> None:
        if not self.items:
            return
        if self.selected is None:
            self.selected = 0
        elif self.selected == 0:
            self.selected = len(self.items) - 1
        else:
            self.selected -= 1

    def scroll_to_top(self) -> None:
        if self.items:
            self.selected = 0

    def scroll_to_bottom(self) -> None:
        if self.items:
            self.selected = len(self.items) - 1


class StatefulTable(StatefulList[T]):
    """StatefulList with page movement for tall tables.

    Paging clamps at the ends instead of wrapping.
    """

    __slots__ = ()

    def page_down(self, page_size: int) -> None:
        if not self.items:
            return
        current = self.selected or 0
        self.selected = min(current + max(page_size, 1), len(self.items) - 1)

    def page_up(self, page_size: int) -> None:
        if not self.items:
            return
        current = self.selected or 0
        self.selected = max(current - max(page_size, 1), 0)


class ScrollableText:
    """Multi-line text pane with a clamped vertical offset."""

    __slots__ = ("items", "offset")

    def __init__(self, text: str = ""):
        self.items: list[str] = text.split("\n") if text else []
        self.offset: int = 0

    def get_text(self) -> str:
        return "\n".join(self.items)

    def scroll_down(self) -> None:
        if self.offset < len(self.items) - 1:
            self.offset += 1

    def scroll_up(self) -> None:
        if self.offset > 0:
            self.offset -= 1

    def scroll_to_top(self) -> None:
        self.offset = 0

    def scroll_to_bottom(self) -> None:
        self.offset = max(len(self.items) - 1, 0)
