"""Tab state — an ordered ring of named sub-views."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from servarr_tui.models.route import ActiveBlock, Route, as_route


@dataclass(frozen=True)
class TabRoute:
    title: str
    route: Route
    help: str = ""
    contextual_help: str | None = None

    @classmethod
    def for_block(
        cls,
        title: str,
        block: ActiveBlock,
        help: str = "",
        contextual_help: str | None = None,
    ) -> TabRoute:
        return cls(title, as_route(block), help, contextual_help)


class TabState:
    """Tabs plus the active index. Invariant: 0 <= index < len(tabs)."""

    __slots__ = ("tabs", "index")

    def __init__(self, tabs: Sequence[TabRoute]):
        if not tabs:
            raise ValueError("TabState needs at least one tab")
        self.tabs: tuple[TabRoute, ...] = tuple(tabs)
        self.index: int = 0

    def __len__(self) -> int:
        return len(self.tabs)

    def next(self) -> None:
        self.index = (self.index + 1) % len(self.tabs)

    def previous(self) -> None:
        self.index = (self.index - 1) % len(self.tabs)

    def set_index(self, index: int) -> TabRoute:
        self.index = max(0, min(index, len(self.tabs) - 1))
        return self.tabs[self.index]

    def select_route(self, route: Route) -> bool:
        """Point the index at the tab owning ``route``. False if none does."""
        for i, tab in enumerate(self.tabs):
            if tab.route == route:
                self.index = i
                return True
        return False

    @property
    def active_tab(self) -> TabRoute:
        return self.tabs[self.index]

    def get_active_route(self) -> Route:
        return self.active_tab.route

    def get_active_tab_help(self) -> str:
        return self.active_tab.help

    def get_active_tab_contextual_help(self) -> str | None:
        return self.active_tab.contextual_help
