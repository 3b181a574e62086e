"""Search and filter over a table, shared by every library-style screen.

Both match on text with punctuation and symbols removed, lowercased. Letters
in any script are kept. A query that strips to nothing is treated as
empty. Search moves the cursor of the table being shown (the filtered one while
a filter is active). Filter always narrows the unfiltered source.

Every outcome leaves search/filter mode: the query is cleared, typing no longer
suppresses the quit key, and the input route is popped (found / filtered /
empty query) or replaced by the error route (no match).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import TYPE_CHECKING, TypeVar

from servarr_tui.models.route import ActiveBlock
from servarr_tui.models.stateful import StatefulTable
from servarr_tui.models.text import HorizontallyScrollableText

if TYPE_CHECKING:
    from servarr_tui.app.state import AppState
    from servarr_tui.models.servarr_data.servarr_data import ServarrData

logger = logging.getLogger(__name__)

T = TypeVar("T")

_NON_SEARCH_CHARACTERS = re.compile(r"[^\w\s]|_")


def strip_non_search_characters(text: str) -> str:
    return _NON_SEARCH_CHARACTERS.sub("", text).lower()


def _matches(query: str, item: T, text_of: Callable[[T], str]) -> bool:
    return query in strip_non_search_characters(text_of(item))


def search_table(
    app: AppState,
    data: ServarrData,
    view: StatefulTable[T],
    error_block: ActiveBlock,
    text_of: Callable[[T], str],
) -> bool:
    """Select the first row of ``view`` matching the search query. True if found."""
    query = strip_non_search_characters(data.search.text)
    data.reset_search()
    app.should_ignore_quit_key = False

    if not query:
        app.pop_navigation_stack()
        return False
    index = next((i for i, item in enumerate(view.items) if _matches(query, item, text_of)), None)
    if index is None:
        logger.debug("search %r: no match", query)
        app.pop_and_push_navigation_stack(error_block)
        return False
    app.pop_navigation_stack()
    view.select_index(index)
    return True


def filter_table(
    app: AppState,
    data: ServarrData,
    source: StatefulTable[T],
    filtered: StatefulTable[T],
    error_block: ActiveBlock,
    text_of: Callable[[T], str],
) -> bool:
    """Narrow ``source`` into ``filtered``. True when a filtered view is now active."""
    query = strip_non_search_characters(data.filter.text)
    data.is_filtering = False
    data.filter = HorizontallyScrollableText()
    app.should_ignore_quit_key = False

    if not query:
        app.pop_navigation_stack()
        return False
    matches = [item for item in source.items if _matches(query, item, text_of)]
    if not matches:
        logger.debug("filter %r: no match", query)
        filtered.set_items([])
        app.pop_and_push_navigation_stack(error_block)
        return False
    app.pop_navigation_stack()
    filtered.set_items(matches)
    filtered.select_index(0)
    return True
