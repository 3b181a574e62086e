"""Tests for HorizontallyScrollableText: marquee and caret editing."""

from servarr_tui.models.text import MARQUEE_GAP, HorizontallyScrollableText


class TestMarquee:
    def test_scroll_wraps_at_length(self):
        text = HorizontallyScrollableText("abc")
        for _ in range(3):
            text.scroll_text()
        assert text.offset == 0

    def test_scroll_on_empty_is_noop(self):
        text = HorizontallyScrollableText()
        text.scroll_text()
        assert text.offset == 0

    def test_marquee_view_rotates_with_gap(self):
        text = HorizontallyScrollableText("abcdef")
        text.scroll_text()
        text.scroll_text()
        assert text.marquee_view() == "cdef" + MARQUEE_GAP + "ab"

    def test_tick_scrolls_selected_overflowing_row(self):
        text = HorizontallyScrollableText("a long movie title")
        assert text.tick_marquee(5, is_selected=True) == " long"
        assert text.offset == 1

    def test_tick_resets_unselected_row(self):
        text = HorizontallyScrollableText("a long movie title")
        text.scroll_text()
        assert text.tick_marquee(5, is_selected=False) == "a lon"
        assert text.offset == 0

    def test_tick_leaves_fitting_text_alone(self):
        text = HorizontallyScrollableText("short")
        assert text.tick_marquee(10, is_selected=True) == "short"
        assert text.offset == 0


class TestCaretEditing:
    def test_push_appends_at_end(self):
        text = HorizontallyScrollableText()
        for char in "abc":
            text.push(char)
        assert text.text == "abc"

    def test_push_inserts_at_caret(self):
        text = HorizontallyScrollableText("ac")
        text.scroll_left()
        text.push("b")
        assert text.text == "abc"
        assert text.offset == 1

    def test_pop_deletes_before_caret(self):
        text = HorizontallyScrollableText("abc")
        text.scroll_left()
        text.pop()
        assert text.text == "ac"

    def test_pop_at_start_is_noop(self):
        text = HorizontallyScrollableText("abc")
        text.scroll_home()
        text.pop()
        assert text.text == "abc"

    def test_caret_bounds(self):
        text = HorizontallyScrollableText("ab")
        text.scroll_right()
        assert text.offset == 0
        for _ in range(5):
            text.scroll_left()
        assert text.offset == 2
        assert text.caret == 0
        text.reset_offset()
        assert text.caret == 2

    def test_drain(self):
        text = HorizontallyScrollableText("query")
        text.scroll_left()
        assert text.drain() == "query"
        assert text.is_empty()
        assert text.offset == 0


class TestEquality:
    def test_compares_text_only(self):
        left = HorizontallyScrollableText("x")
        right = HorizontallyScrollableText("x")
        right.scroll_text()
        assert left == right
        assert left == "x"
        assert hash(left) == hash(right)
