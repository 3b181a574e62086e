"""Radarr blocks, block groups, wizard sequences and the Radarr data container.

Block groups are plain frozensets used for membership tests only; each one
is owned by exactly one key handler (tests/test_routing.py enforces that).
"""

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
from servarr_tui.models.radarr_models import (
    AddMovieSearchResult,
    Collection,
    CollectionMovie,
    Movie,
)
from servarr_tui.models.route import ActiveBlock
from servarr_tui.models.selection import StepSequence
from servarr_tui.models.servarr_data.modals import (
    AddMovieModal,
    EditCollectionModal,
    EditMovieModal,
    MovieDetailsModal,
)
from servarr_tui.models.servarr_data.servarr_data import ServarrData, SharedBlocks, active_view
from servarr_tui.models.stateful import Scrollable, StatefulTable
from servarr_tui.models.tabs import TabRoute, TabState
from servarr_tui.models.text import HorizontallyScrollableText


class ActiveRadarrBlock(ActiveBlock):
    ADD_MOVIE_ALREADY_IN_LIBRARY = auto()
    ADD_MOVIE_SEARCH_INPUT = auto()
    ADD_MOVIE_SEARCH_RESULTS = auto()
    ADD_MOVIE_PROMPT = auto()
    ADD_MOVIE_SELECT_MINIMUM_AVAILABILITY = auto()
    ADD_MOVIE_SELECT_QUALITY_PROFILE = auto()
    ADD_MOVIE_SELECT_MONITOR = auto()
    ADD_MOVIE_SELECT_ROOT_FOLDER = auto()
    ADD_MOVIE_CONFIRM_PROMPT = auto()
    ADD_MOVIE_TAGS_INPUT = auto()
    ADD_MOVIE_EMPTY_SEARCH_RESULTS = auto()
    ADD_ROOT_FOLDER_PROMPT = auto()
    AUTOMATICALLY_SEARCH_MOVIE_PROMPT = auto()
    BLOCKLIST = auto()
    BLOCKLIST_CLEAR_ALL_ITEMS_PROMPT = auto()
    BLOCKLIST_ITEM_DETAILS = auto()
    COLLECTIONS = auto()
    COLLECTION_DETAILS = auto()
    CAST = auto()
    CREW = auto()
    DELETE_BLOCKLIST_ITEM_PROMPT = auto()
    DELETE_DOWNLOAD_PROMPT = auto()
    DELETE_INDEXER_PROMPT = auto()
    DELETE_MOVIE_PROMPT = auto()
    DELETE_MOVIE_CONFIRM_PROMPT = auto()
    DELETE_MOVIE_TOGGLE_DELETE_FILE = auto()
    DELETE_MOVIE_TOGGLE_ADD_LIST_EXCLUSION = auto()
    DELETE_ROOT_FOLDER_PROMPT = auto()
    DOWNLOADS = auto()
    EDIT_COLLECTION_PROMPT = auto()
    EDIT_COLLECTION_CONFIRM_PROMPT = auto()
    EDIT_COLLECTION_ROOT_FOLDER_PATH_INPUT = auto()
    EDIT_COLLECTION_SELECT_MINIMUM_AVAILABILITY = auto()
    EDIT_COLLECTION_SELECT_QUALITY_PROFILE = auto()
    EDIT_COLLECTION_TOGGLE_SEARCH_ON_ADD = auto()
    EDIT_COLLECTION_TOGGLE_MONITORED = auto()
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
    EDIT_MOVIE_PROMPT = auto()
    EDIT_MOVIE_CONFIRM_PROMPT = auto()
    EDIT_MOVIE_PATH_INPUT = auto()
    EDIT_MOVIE_SELECT_MINIMUM_AVAILABILITY = auto()
    EDIT_MOVIE_SELECT_QUALITY_PROFILE = auto()
    EDIT_MOVIE_TAGS_INPUT = auto()
    EDIT_MOVIE_TOGGLE_MONITORED = auto()
    FILE_INFO = auto()
    FILTER_COLLECTIONS = auto()
    FILTER_COLLECTIONS_ERROR = auto()
    FILTER_MOVIES = auto()
    FILTER_MOVIES_ERROR = auto()
    INDEXERS = auto()
    MANUAL_SEARCH = auto()
    MANUAL_SEARCH_CONFIRM_PROMPT = auto()
    MOVIE_DETAILS = auto()
    MOVIE_HISTORY = auto()
    MOVIES = auto()
    ROOT_FOLDERS = auto()
    SYSTEM = auto()
    SYSTEM_LOGS = auto()
    SYSTEM_QUEUED_EVENTS = auto()
    SYSTEM_TASKS = auto()
    SYSTEM_TASK_START_CONFIRM_PROMPT = auto()
    SYSTEM_UPDATES = auto()
    TEST_INDEXER = auto()
    TEST_ALL_INDEXERS = auto()
    UPDATE_AND_SCAN_PROMPT = auto()
    UPDATE_ALL_COLLECTIONS_PROMPT = auto()
    UPDATE_ALL_MOVIES_PROMPT = auto()
    UPDATE_DOWNLOADS_PROMPT = auto()
    SEARCH_COLLECTION = auto()
    SEARCH_COLLECTION_ERROR = auto()
    SEARCH_MOVIE = auto()
    SEARCH_MOVIE_ERROR = auto()
    VIEW_MOVIE_OVERVIEW = auto()


B = ActiveRadarrBlock

DEFAULT_RADARR_BLOCK = B.MOVIES

# ─── Block groups ────────────────────────────────────────────────────────

LIBRARY_BLOCKS = frozenset({
    B.MOVIES,
    B.SEARCH_MOVIE,
    B.SEARCH_MOVIE_ERROR,
    B.FILTER_MOVIES,
    B.FILTER_MOVIES_ERROR,
    B.UPDATE_ALL_MOVIES_PROMPT,
})
COLLECTIONS_BLOCKS = frozenset({
    B.COLLECTIONS,
    B.SEARCH_COLLECTION,
    B.SEARCH_COLLECTION_ERROR,
    B.FILTER_COLLECTIONS,
    B.FILTER_COLLECTIONS_ERROR,
    B.UPDATE_ALL_COLLECTIONS_PROMPT,
})
COLLECTION_DETAILS_BLOCKS = frozenset({B.COLLECTION_DETAILS, B.VIEW_MOVIE_OVERVIEW})

SHARED_BLOCKS = SharedBlocks.of(ActiveRadarrBlock)
DOWNLOADS_BLOCKS = SHARED_BLOCKS.downloads
BLOCKLIST_BLOCKS = SHARED_BLOCKS.blocklist
ROOT_FOLDERS_BLOCKS = SHARED_BLOCKS.root_folders
INDEXERS_BLOCKS = SHARED_BLOCKS.indexers
EDIT_INDEXER_BLOCKS = SHARED_BLOCKS.edit_indexer
SYSTEM_BLOCKS = SHARED_BLOCKS.system

ADD_MOVIE_BLOCKS = frozenset({
    B.ADD_MOVIE_SEARCH_INPUT,
    B.ADD_MOVIE_SEARCH_RESULTS,
    B.ADD_MOVIE_EMPTY_SEARCH_RESULTS,
    B.ADD_MOVIE_PROMPT,
    B.ADD_MOVIE_SELECT_MINIMUM_AVAILABILITY,
    B.ADD_MOVIE_SELECT_MONITOR,
    B.ADD_MOVIE_SELECT_QUALITY_PROFILE,
    B.ADD_MOVIE_SELECT_ROOT_FOLDER,
    B.ADD_MOVIE_ALREADY_IN_LIBRARY,
    B.ADD_MOVIE_TAGS_INPUT,
    B.ADD_MOVIE_CONFIRM_PROMPT,
})
EDIT_MOVIE_BLOCKS = frozenset({
    B.EDIT_MOVIE_PROMPT,
    B.EDIT_MOVIE_CONFIRM_PROMPT,
    B.EDIT_MOVIE_PATH_INPUT,
    B.EDIT_MOVIE_SELECT_MINIMUM_AVAILABILITY,
    B.EDIT_MOVIE_SELECT_QUALITY_PROFILE,
    B.EDIT_MOVIE_TAGS_INPUT,
    B.EDIT_MOVIE_TOGGLE_MONITORED,
})
EDIT_COLLECTION_BLOCKS = frozenset({
    B.EDIT_COLLECTION_PROMPT,
    B.EDIT_COLLECTION_CONFIRM_PROMPT,
    B.EDIT_COLLECTION_ROOT_FOLDER_PATH_INPUT,
    B.EDIT_COLLECTION_SELECT_MINIMUM_AVAILABILITY,
    B.EDIT_COLLECTION_SELECT_QUALITY_PROFILE,
    B.EDIT_COLLECTION_TOGGLE_SEARCH_ON_ADD,
    B.EDIT_COLLECTION_TOGGLE_MONITORED,
})
DELETE_MOVIE_BLOCKS = frozenset({
    B.DELETE_MOVIE_PROMPT,
    B.DELETE_MOVIE_CONFIRM_PROMPT,
    B.DELETE_MOVIE_TOGGLE_DELETE_FILE,
    B.DELETE_MOVIE_TOGGLE_ADD_LIST_EXCLUSION,
})
MOVIE_DETAILS_BLOCKS = frozenset({
    B.MOVIE_DETAILS,
    B.MOVIE_HISTORY,
    B.FILE_INFO,
    B.CAST,
    B.CREW,
    B.AUTOMATICALLY_SEARCH_MOVIE_PROMPT,
    B.UPDATE_AND_SCAN_PROMPT,
    B.MANUAL_SEARCH,
    B.MANUAL_SEARCH_CONFIRM_PROMPT,
})

# ─── Wizard sequences ────────────────────────────────────────────────────

ADD_MOVIE_SELECTION = StepSequence.single_column("add movie", [
    B.ADD_MOVIE_SELECT_ROOT_FOLDER,
    B.ADD_MOVIE_SELECT_MONITOR,
    B.ADD_MOVIE_SELECT_MINIMUM_AVAILABILITY,
    B.ADD_MOVIE_SELECT_QUALITY_PROFILE,
    B.ADD_MOVIE_TAGS_INPUT,
    B.ADD_MOVIE_CONFIRM_PROMPT,
])
EDIT_MOVIE_SELECTION = StepSequence.single_column("edit movie", [
    B.EDIT_MOVIE_TOGGLE_MONITORED,
    B.EDIT_MOVIE_SELECT_MINIMUM_AVAILABILITY,
    B.EDIT_MOVIE_SELECT_QUALITY_PROFILE,
    B.EDIT_MOVIE_PATH_INPUT,
    B.EDIT_MOVIE_TAGS_INPUT,
    B.EDIT_MOVIE_CONFIRM_PROMPT,
])
EDIT_COLLECTION_SELECTION = StepSequence.single_column("edit collection", [
    B.EDIT_COLLECTION_TOGGLE_MONITORED,
    B.EDIT_COLLECTION_SELECT_MINIMUM_AVAILABILITY,
    B.EDIT_COLLECTION_SELECT_QUALITY_PROFILE,
    B.EDIT_COLLECTION_ROOT_FOLDER_PATH_INPUT,
    B.EDIT_COLLECTION_TOGGLE_SEARCH_ON_ADD,
    B.EDIT_COLLECTION_CONFIRM_PROMPT,
])
DELETE_MOVIE_SELECTION = StepSequence.single_column("delete movie", [
    B.DELETE_MOVIE_TOGGLE_DELETE_FILE,
    B.DELETE_MOVIE_TOGGLE_ADD_LIST_EXCLUSION,
    B.DELETE_MOVIE_CONFIRM_PROMPT,
])

# ─── Tabs ────────────────────────────────────────────────────────────────

LIBRARY_CONTEXT_CLUES = [
    (K.add, K.add.desc),
    (K.edit, K.edit.desc),
    (K.delete, K.delete.desc),
    (K.search, K.search.desc),
    (K.filter, K.filter.desc),
    (K.refresh, K.refresh.desc),
    (K.update, "update all"),
    (K.submit, "details"),
    (K.esc, "cancel filter"),
]
COLLECTIONS_CONTEXT_CLUES = [
    (K.search, K.search.desc),
    (K.edit, K.edit.desc),
    (K.filter, K.filter.desc),
    (K.refresh, K.refresh.desc),
    (K.update, "update all"),
    (K.submit, "details"),
    (K.esc, "cancel filter"),
]
MOVIE_DETAILS_CONTEXT_CLUES = [
    (K.refresh, K.refresh.desc),
    (K.update, "update and scan"),
    (K.edit, K.edit.desc),
    (K.auto_search, K.auto_search.desc),
    (K.esc, "close"),
]
MANUAL_SEARCH_CONTEXTUAL_CLUES = [(K.submit, "download release")]


def _main_tabs() -> TabState:
    def tab(title: str, block: B, clues) -> TabRoute:
        return TabRoute.for_block(title, block, contextual_help=build_context_clue_string(clues))

    return TabState([
        tab("Library", B.MOVIES, LIBRARY_CONTEXT_CLUES),
        tab("Collections", B.COLLECTIONS, COLLECTIONS_CONTEXT_CLUES),
        tab("Downloads", B.DOWNLOADS, DOWNLOADS_CONTEXT_CLUES),
        tab("Blocklist", B.BLOCKLIST, BLOCKLIST_CONTEXT_CLUES),
        tab("Root Folders", B.ROOT_FOLDERS, ROOT_FOLDERS_CONTEXT_CLUES),
        tab("Indexers", B.INDEXERS, INDEXERS_CONTEXT_CLUES),
        tab("System", B.SYSTEM, SYSTEM_CONTEXT_CLUES),
    ])


def _movie_info_tabs() -> TabState:
    details_help = build_context_clue_string(MOVIE_DETAILS_CONTEXT_CLUES)
    return TabState([
        TabRoute.for_block("Details", B.MOVIE_DETAILS, details_help),
        TabRoute.for_block("History", B.MOVIE_HISTORY, details_help),
        TabRoute.for_block("File", B.FILE_INFO, details_help),
        TabRoute.for_block("Cast", B.CAST, details_help),
        TabRoute.for_block("Crew", B.CREW, details_help),
        TabRoute.for_block(
            "Manual Search",
            B.MANUAL_SEARCH,
            details_help,
            build_context_clue_string(MANUAL_SEARCH_CONTEXTUAL_CLUES),
        ),
    ])


# ─── Data container ──────────────────────────────────────────────────────


class RadarrData(ServarrData):
    def __init__(self) -> None:
        super().__init__(_main_tabs())
        self.movie_info_tabs = _movie_info_tabs()

        self.movies: StatefulTable[Movie] = StatefulTable()
        self.filtered_movies: StatefulTable[Movie] = StatefulTable()
        self.collections: StatefulTable[Collection] = StatefulTable()
        self.filtered_collections: StatefulTable[Collection] = StatefulTable()
        self.collection_movies: StatefulTable[CollectionMovie] = StatefulTable()

        self.add_movie_search: HorizontallyScrollableText | None = None
        self.add_searched_movies: StatefulTable[AddMovieSearchResult] | None = None
        self.add_movie_modal: AddMovieModal | None = None
        self.edit_movie_modal: EditMovieModal | None = None
        self.edit_collection_modal: EditCollectionModal | None = None
        self.movie_details_modal: MovieDetailsModal | None = None

        self.delete_movie_files = False
        self.add_list_exclusion = False

    def movies_view(self) -> StatefulTable[Movie]:
        return active_view(self.movies, self.filtered_movies)

    def collections_view(self) -> StatefulTable[Collection]:
        return active_view(self.collections, self.filtered_collections)

    def selected_movie(self) -> Movie | None:
        return self.movies_view().current_selection()

    def selected_collection(self) -> Collection | None:
        return self.collections_view().current_selection()

    def filtered_views(self) -> list[StatefulTable]:
        return [self.filtered_movies, self.filtered_collections]

    # ─── Focus ──────────────────────────────────────────────────────────

    def forms(self) -> list:
        return super().forms() + [self.add_movie_modal, self.edit_movie_modal, self.edit_collection_modal]

    def collection_targets(self) -> dict[str, Scrollable | None]:
        targets = super().collection_targets() | {
            "MOVIES": self.movies_view(),
            "COLLECTIONS": self.collections_view(),
            "COLLECTION_DETAILS": self.collection_movies,
            "ADD_MOVIE_SEARCH_RESULTS": self.add_searched_movies,
        }
        details = self.movie_details_modal
        if details is not None:
            targets |= {
                "MOVIE_DETAILS": details.movie_details,
                "MOVIE_HISTORY": details.movie_history,
                "CAST": details.movie_cast,
                "CREW": details.movie_crew,
                "MANUAL_SEARCH": details.movie_releases,
            }
        return targets

    def input_targets(self) -> dict[str, HorizontallyScrollableText | None]:
        return super().input_targets() | {
            "SEARCH_MOVIE": self.search,
            "FILTER_MOVIES": self.filter,
            "SEARCH_COLLECTION": self.search,
            "FILTER_COLLECTIONS": self.filter,
            "ADD_MOVIE_SEARCH_INPUT": self.add_movie_search,
        }

    # ─── Modal builders ──────────────────────────────────────────────────

    def populate_edit_movie_fields(self) -> bool:
        movie = self.selected_movie()
        if movie is None:
            return False
        self.edit_movie_modal = EditMovieModal.from_movie(
            movie,
            self.quality_profile_names(),
            self.quality_profile_map.get(movie.quality_profile_id),
            self.tag_labels(movie.tags),
        )
        return True

    def populate_edit_collection_fields(self) -> bool:
        collection = self.selected_collection()
        if collection is None:
            return False
        self.edit_collection_modal = EditCollectionModal.from_collection(
            collection,
            self.quality_profile_names(),
            self.quality_profile_map.get(collection.quality_profile_id),
        )
        return True

    def populate_add_movie_fields(self) -> None:
        self.add_movie_modal = AddMovieModal.build(
            self.root_folders.items, self.quality_profile_names()
        )

    def populate_collection_movies(self) -> None:
        collection = self.selected_collection()
        self.collection_movies.set_items(collection.movies if collection else [])

    # ─── Resets ──────────────────────────────────────────────────────────

    def reset_delete_movie_preferences(self) -> None:
        self.delete_movie_files = False
        self.add_list_exclusion = False

    def reset_movie_info_tabs(self) -> None:
        self.movie_details_modal = None
        self.movie_info_tabs.index = 0

    def reset_add_movie(self) -> None:
        self.add_movie_search = None
        self.add_searched_movies = None
        self.add_movie_modal = None
        self.selected_block = None

    def reset_movie_collection_table(self) -> None:
        self.collection_movies = StatefulTable()
