"""Horizontally scrollable single-line text.

One buffer, two offset readings:

- marquee: ``scroll_text`` / ``reset_offset`` move a display window over the
  text, driven by the UI tick while the owning row is selected;
- caret: ``scroll_left`` / ``scroll_right`` / ``scroll_home`` / ``reset_offset``
  move an insertion point counted back from the END of the text, used by
  input fields for push/pop editing.

A given field uses one reading for its whole lifetime. Equality and hashing
look at the text only; the offset is view state.
"""

from __future__ import annotations

MARQUEE_GAP = "    "


class HorizontallyScrollableText:
    __slots__ = ("text", "offset")

    def __init__(self, text: str = ""):
        self.text: str = text
        self.offset: int = 0

    def __eq__(self, other: object) -> bool:
        if isinstance(other, HorizontallyScrollableText):
            return self.text == other.text
        if isinstance(other, str):
            return self.text == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)

    def __len__(self) -> int:
        return len(self.text)

    def __repr__(self) -> str:
        return f"HorizontallyScrollableText({self.text!r}, offset={self.offset})"

    def __str__(self) -> str:
        return self.text

    def is_empty(self) -> bool:
        return not self.text

    # ─── Marquee ─────────────────────────────────────────────────────────

    def scroll_text(self) -> None:
        """Advance the marquee window by one character, wrapping at the end."""
        if not self.text:
            return
        self.offset = (self.offset + 1) % len(self.text)

    def reset_offset(self) -> None:
        self.offset = 0

    def marquee_view(self) -> str:
        """Text rotated to the current marquee offset, with a gap at the seam."""
        if self.offset == 0:
            return self.text
        return self.text[self.offset:] + MARQUEE_GAP + self.text[: self.offset]

    def tick_marquee(self, width: int, is_selected: bool) -> str:
        """Per-tick hook for a table cell ``width`` columns wide.

        Scrolls only the selected row, and only when it overflows.
        """
        if is_selected and len(self.text) > width:
            self.scroll_text()
            return self.marquee_view()[:width]
        self.reset_offset()
        return self.text[:width]

    # ─── Caret editing ───────────────────────────────────────────────────

    @property
    def caret(self) -> int:
        """Insertion index into ``text``."""
        return len(self.text) - self.offset

    def scroll_left(self) -> None:
        if self.offset < len(self.text):
            self.offset += 1

    def scroll_right(self) -> None:
        if self.offset > 0:
            self.offset -= 1

    def scroll_home(self) -> None:
        self.offset = len(self.text)

    def push(self, character: str) -> None:
        caret = self.caret
        self.text = self.text[:caret] + character + self.text[caret:]

    def pop(self) -> None:
        caret = self.caret
        if caret == 0:
            return
        self.text = self.text[: caret - 1] + self.text[caret:]

    def drain(self) -> str:
        text = self.text
        self.text = ""
        self.offset = 0
        return text
