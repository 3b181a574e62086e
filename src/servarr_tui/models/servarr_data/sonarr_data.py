"""Sonarr blocks, block groups, wizard sequences and the Sonarr data container."""

from __future__ import annotations

from enum import auto

from servarr_tui.app.key_bindings import (
    BLOCKLIST_CONTEXT_CLUES,
    DEFAULT_KEYBINDINGS as K,
    DOWNLOADS_CONTEXT_CLUES,
    INDEXERS_CONTEXT_CLUES,
    ROOT_FOLDERS_CONTEXT_CLUES,
    SYSTEM_CONTEXT_CLUES,
    build_context_clue_string,
)
from servarr_tui.models.route import ActiveBlock
from servarr_tui.models.selection import StepSequence
from servarr_tui.models.servarr_data.servarr_data import ServarrData, SharedBlocks, active_view
from servarr_tui.models.sonarr_models import Episode, Season, Series
from servarr_tui.models.stateful import Scrollable, StatefulTable
from servarr_tui.models.tabs import TabRoute, TabState
from servarr_tui.models.text import HorizontallyScrollableText


class ActiveSonarrBlock(ActiveBlock):
    ADD_ROOT_FOLDER_PROMPT = auto()
    AUTOMATICALLY_SEARCH_SERIES_PROMPT = auto()
    BLOCKLIST = auto()
    BLOCKLIST_CLEAR_ALL_ITEMS_PROMPT = auto()
    BLOCKLIST_ITEM_DETAILS = auto()
    DELETE_BLOCKLIST_ITEM_PROMPT = auto()
    DELETE_DOWNLOAD_PROMPT = auto()
    DELETE_INDEXER_PROMPT = auto()
    DELETE_ROOT_FOLDER_PROMPT = auto()
    DELETE_SERIES_PROMPT = auto()
    DELETE_SERIES_CONFIRM_PROMPT = auto()
    DELETE_SERIES_TOGGLE_DELETE_FILE = auto()
    DELETE_SERIES_TOGGLE_ADD_LIST_EXCLUSION = auto()
    DOWNLOADS = auto()
    EDIT_INDEXER_PROMPT = auto()
    EDIT_INDEXER_CONFIRM_PROMPT = auto()
    EDIT_INDEXER_API_KEY_INPUT = auto()
    EDIT_INDEXER_NAME_INPUT = auto()
    EDIT_INDEXER_SEED_RATIO_INPUT = auto()
    EDIT_INDEXER_TOGGLE_ENABLE_RSS = auto()
    EDIT_INDEXER_TOGGLE_ENABLE_AUTOMATIC_SEARCH = auto()
    EDIT_INDEXER_TOGGLE_ENABLE_INTERACTIVE_SEARCH = auto()
    EDIT_INDEXER_PRIORITY_INPUT = auto()
    EDIT_INDEXER_URL_INPUT = auto()
    EDIT_INDEXER_TAGS_INPUT = auto()
    FILTER_SERIES = auto()
    FILTER_SERIES_ERROR = auto()
    INDEXERS = auto()
    ROOT_FOLDERS = auto()
    SEARCH_SERIES = auto()
    SEARCH_SERIES_ERROR = auto()
    SEASON_DETAILS = auto()
    SERIES = auto()
    SERIES_DETAILS = auto()
    SYSTEM = auto()
    SYSTEM_LOGS = auto()
    SYSTEM_QUEUED_EVENTS = auto()
    SYSTEM_TASKS = auto()
    SYSTEM_TASK_START_CONFIRM_PROMPT = auto()
    SYSTEM_UPDATES = auto()
    TEST_INDEXER = auto()
    TEST_ALL_INDEXERS = auto()
    UPDATE_ALL_SERIES_PROMPT = auto()
    UPDATE_DOWNLOADS_PROMPT = auto()


B = ActiveSonarrBlock

DEFAULT_SONARR_BLOCK = B.SERIES

LIBRARY_BLOCKS = frozenset({
    B.SERIES,
    B.SEARCH_SERIES,
    B.SEARCH_SERIES_ERROR,
    B.FILTER_SERIES,
    B.FILTER_SERIES_ERROR,
    B.UPDATE_ALL_SERIES_PROMPT,
})
SERIES_DETAILS_BLOCKS = frozenset({
    B.SERIES_DETAILS,
    B.SEASON_DETAILS,
    B.AUTOMATICALLY_SEARCH_SERIES_PROMPT,
})
DELETE_SERIES_BLOCKS = frozenset({
    B.DELETE_SERIES_PROMPT,
    B.DELETE_SERIES_CONFIRM_PROMPT,
    B.DELETE_SERIES_TOGGLE_DELETE_FILE,
    B.DELETE_SERIES_TOGGLE_ADD_LIST_EXCLUSION,
})

SHARED_BLOCKS = SharedBlocks.of(ActiveSonarrBlock)
DOWNLOADS_BLOCKS = SHARED_BLOCKS.downloads
BLOCKLIST_BLOCKS = SHARED_BLOCKS.blocklist
ROOT_FOLDERS_BLOCKS = SHARED_BLOCKS.root_folders
INDEXERS_BLOCKS = SHARED_BLOCKS.indexers
EDIT_INDEXER_BLOCKS = SHARED_BLOCKS.edit_indexer
SYSTEM_BLOCKS = SHARED_BLOCKS.system

DELETE_SERIES_SELECTION = StepSequence.single_column("delete series", [
    B.DELETE_SERIES_TOGGLE_DELETE_FILE,
    B.DELETE_SERIES_TOGGLE_ADD_LIST_EXCLUSION,
    B.DELETE_SERIES_CONFIRM_PROMPT,
])

LIBRARY_CONTEXT_CLUES = [
    (K.delete, K.delete.desc),
    (K.search, K.search.desc),
    (K.filter, K.filter.desc),
    (K.refresh, K.refresh.desc),
    (K.update, "update all"),
    (K.submit, "details"),
    (K.esc, "cancel filter"),
]
SERIES_DETAILS_CONTEXT_CLUES = [
    (K.submit, "season details"),
    (K.auto_search, K.auto_search.desc),
    (K.refresh, K.refresh.desc),
    (K.esc, "close"),
]


def _main_tabs() -> TabState:
    def tab(title: str, block: B, clues) -> TabRoute:
        return TabRoute.for_block(title, block, contextual_help=build_context_clue_string(clues))

    return TabState([
        tab("Library", B.SERIES, LIBRARY_CONTEXT_CLUES),
        tab("Downloads", B.DOWNLOADS, DOWNLOADS_CONTEXT_CLUES),
        tab("Blocklist", B.BLOCKLIST, BLOCKLIST_CONTEXT_CLUES),
        tab("Root Folders", B.ROOT_FOLDERS, ROOT_FOLDERS_CONTEXT_CLUES),
        tab("Indexers", B.INDEXERS, INDEXERS_CONTEXT_CLUES),
        tab("System", B.SYSTEM, SYSTEM_CONTEXT_CLUES),
    ])


class SonarrData(ServarrData):
    def __init__(self) -> None:
        super().__init__(_main_tabs())
        self.series_details_help = build_context_clue_string(SERIES_DETAILS_CONTEXT_CLUES)

        self.series: StatefulTable[Series] = StatefulTable()
        self.filtered_series: StatefulTable[Series] = StatefulTable()
        self.seasons: StatefulTable[Season] = StatefulTable()
        self.episodes: StatefulTable[Episode] = StatefulTable()

        self.delete_series_files = False
        self.add_list_exclusion = False

    def series_view(self) -> StatefulTable[Series]:
        return active_view(self.series, self.filtered_series)

    def selected_series(self) -> Series | None:
        return self.series_view().current_selection()

    def filtered_views(self) -> list[StatefulTable]:
        return [self.filtered_series]

    def collection_targets(self) -> dict[str, Scrollable | None]:
        return super().collection_targets() | {
            "SERIES": self.series_view(),
            "SERIES_DETAILS": self.seasons,
            "SEASON_DETAILS": self.episodes,
        }

    def input_targets(self) -> dict[str, HorizontallyScrollableText | None]:
        return super().input_targets() | {"SEARCH_SERIES": self.search, "FILTER_SERIES": self.filter}

    def populate_seasons(self) -> None:
        series = self.selected_series()
        self.seasons.set_items(series.seasons if series else [])

    def reset_delete_series_preferences(self) -> None:
        self.delete_series_files = False
        self.add_list_exclusion = False

    def reset_series_details(self) -> None:
        self.seasons = StatefulTable()
        self.episodes = StatefulTable()
