"""State every Servarr domain carries: the shared screens plus search/filter.

Radarr and Sonarr containers subclass ServarrData and add their library
collections. Shared handlers and shared request specs only touch the
attributes declared here, so one implementation serves both domains.

``focused_collection`` and ``focused_input`` say what a block's keys act on.
Key handlers and the renderer both ask here.

// [LAW:one-source-of-truth] Filtered views live next to their source
//   collection; ``active_view`` is the only place that picks between them.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Generic, TypeVar

from servarr_tui.models.confirmation import PendingConfirmation
from servarr_tui.models.route import ActiveBlock
from servarr_tui.models.selection import BlockSelectionState, StepSequence
from servarr_tui.models.servarr_data.modals import EditIndexerModal
from servarr_tui.models.servarr_models import (
    BlocklistItem,
    DiskSpace,
    DownloadRecord,
    Indexer,
    IndexerProtocol,
    IndexerTestResult,
    QueueEvent,
    RootFolder,
    Task,
)
from servarr_tui.models.stateful import Scrollable, ScrollableText, StatefulList, StatefulTable
from servarr_tui.models.tabs import TabState
from servarr_tui.models.text import HorizontallyScrollableText

E = TypeVar("E")
T = TypeVar("T")


def active_view(source: StatefulTable[T], filtered: StatefulTable[T]) -> StatefulTable[T]:
    """The filtered copy while a filter is applied, the source otherwise."""
    return filtered if filtered.items else source


class ServarrData(Generic[E]):
    def __init__(self, main_tabs: TabState):
        self.main_tabs = main_tabs

        # reference data
        self.quality_profile_map: dict[int, str] = {}
        self.tags_map: dict[int, str] = {}
        self.disk_space: list[DiskSpace] = []
        self.version: str = ""
        self.start_time: datetime | None = None

        # shared screens
        self.downloads: StatefulTable[DownloadRecord] = StatefulTable()
        self.blocklist: StatefulTable[BlocklistItem] = StatefulTable()
        self.root_folders: StatefulTable[RootFolder] = StatefulTable()
        self.indexers: StatefulTable[Indexer] = StatefulTable()
        self.logs: StatefulList[HorizontallyScrollableText] = StatefulList()
        self.tasks: StatefulTable[Task] = StatefulTable()
        self.queued_events: StatefulTable[QueueEvent] = StatefulTable()
        self.updates = ScrollableText()

        # transient form state
        self.selected_block: BlockSelectionState | None = None
        self.edit_indexer_modal: EditIndexerModal | None = None
        self.edit_root_folder: HorizontallyScrollableText | None = None
        self.indexer_test_error: str | None = None
        self.indexer_test_all_results: StatefulTable[IndexerTestResult] | None = None
        self.pending: PendingConfirmation[E] = PendingConfirmation()

        # search / filter
        self.search = HorizontallyScrollableText()
        self.filter = HorizontallyScrollableText()
        self.is_searching = False
        self.is_filtering = False

    # ─── Reference data helpers ──────────────────────────────────────────

    def quality_profile_names(self) -> list[str]:
        return sorted(self.quality_profile_map.values())

    def quality_profile_id(self, name: str | None) -> int | None:
        for profile_id, profile_name in self.quality_profile_map.items():
            if profile_name == name:
                return profile_id
        return None

    def tag_labels(self, tag_ids: list[int]) -> str:
        return ", ".join(self.tags_map[tag] for tag in tag_ids if tag in self.tags_map)

    def tag_ids(self, labels: str) -> list[int]:
        """Comma-separated labels → known tag ids. Unknown labels are dropped."""
        by_label = {label.lower(): tag_id for tag_id, label in self.tags_map.items()}
        wanted = [label.strip().lower() for label in labels.split(",")]
        return [by_label[label] for label in wanted if label in by_label]

    # ─── Focus ──────────────────────────────────────────────────────────

    def forms(self) -> list:
        """Wizard forms that may be open on this domain, None when closed."""
        return [self.edit_indexer_modal]

    def collection_targets(self) -> dict[str, Scrollable | None]:
        """Block name → the collection the cursor keys move on it."""
        return {
            "DOWNLOADS": self.downloads,
            "BLOCKLIST": self.blocklist,
            "ROOT_FOLDERS": self.root_folders,
            "INDEXERS": self.indexers,
            "TEST_ALL_INDEXERS": self.indexer_test_all_results,
            "SYSTEM_LOGS": self.logs,
            "SYSTEM_TASKS": self.tasks,
            "SYSTEM_QUEUED_EVENTS": self.queued_events,
            "SYSTEM_UPDATES": self.updates,
        }

    def input_targets(self) -> dict[str, HorizontallyScrollableText | None]:
        """Block name → the text field typed into on it."""
        return {"ADD_ROOT_FOLDER_PROMPT": self.edit_root_folder}

    def focused_collection(self, block: ActiveBlock) -> Scrollable | None:
        targets = self.collection_targets()
        if block.name in targets:
            return targets[block.name]
        return self._form_field(block, "SELECTS")

    def focused_input(self, block: ActiveBlock) -> HorizontallyScrollableText | None:
        targets = self.input_targets()
        if block.name in targets:
            return targets[block.name]
        return self._form_field(block, "INPUTS")

    def _form_field(self, block: ActiveBlock, table: str):
        for form in self.forms():
            attr = getattr(form, table).get(block.name) if form is not None else None
            if attr is not None:
                return getattr(form, attr)
        return None

    # ─── Resets ──────────────────────────────────────────────────────────

    def filtered_views(self) -> list[StatefulTable]:
        """Every filtered view this domain owns."""
        return []

    def reset_search(self) -> None:
        self.is_searching = False
        self.search = HorizontallyScrollableText()

    def reset_filter(self) -> None:
        self.is_filtering = False
        self.filter = HorizontallyScrollableText()
        for filtered in self.filtered_views():
            filtered.set_items([])

    def reset_edit_indexer(self) -> None:
        self.edit_indexer_modal = None
        self.selected_block = None

    def reset_indexer_tests(self) -> None:
        self.indexer_test_error = None
        self.indexer_test_all_results = None


# ─── Shared block groups ─────────────────────────────────────────────────


@dataclass(frozen=True)
class SharedBlocks:
    """Block groups and wizard sequences of the screens every domain has.

    Both block enumerations spell these members the same way, so the groups
    are derived from member names instead of being listed twice.
    """

    downloads: frozenset[ActiveBlock]
    blocklist: frozenset[ActiveBlock]
    root_folders: frozenset[ActiveBlock]
    indexers: frozenset[ActiveBlock]
    edit_indexer: frozenset[ActiveBlock]
    system: frozenset[ActiveBlock]
    edit_indexer_torrent: StepSequence
    edit_indexer_nzb: StepSequence

    @classmethod
    def of(cls, blocks: type[ActiveBlock]) -> SharedBlocks:
        def group(*names: str) -> frozenset[ActiveBlock]:
            return frozenset(blocks[name] for name in names)

        def sequence(name: str, rows: list[tuple[str, str]]) -> StepSequence:
            return StepSequence(name, [(blocks[left], blocks[right]) for left, right in rows])

        return cls(
            downloads=group("DOWNLOADS", "DELETE_DOWNLOAD_PROMPT", "UPDATE_DOWNLOADS_PROMPT"),
            blocklist=group(
                "BLOCKLIST",
                "BLOCKLIST_ITEM_DETAILS",
                "DELETE_BLOCKLIST_ITEM_PROMPT",
                "BLOCKLIST_CLEAR_ALL_ITEMS_PROMPT",
            ),
            root_folders=group("ROOT_FOLDERS", "ADD_ROOT_FOLDER_PROMPT", "DELETE_ROOT_FOLDER_PROMPT"),
            indexers=group("INDEXERS", "DELETE_INDEXER_PROMPT", "TEST_INDEXER", "TEST_ALL_INDEXERS"),
            edit_indexer=group(*_EDIT_INDEXER_NAMES),
            system=group(
                "SYSTEM",
                "SYSTEM_LOGS",
                "SYSTEM_QUEUED_EVENTS",
                "SYSTEM_TASKS",
                "SYSTEM_TASK_START_CONFIRM_PROMPT",
                "SYSTEM_UPDATES",
            ),
            edit_indexer_torrent=sequence(f"{blocks.__name__} edit torrent indexer", [
                ("EDIT_INDEXER_NAME_INPUT", "EDIT_INDEXER_URL_INPUT"),
                ("EDIT_INDEXER_TOGGLE_ENABLE_RSS", "EDIT_INDEXER_API_KEY_INPUT"),
                ("EDIT_INDEXER_TOGGLE_ENABLE_AUTOMATIC_SEARCH", "EDIT_INDEXER_SEED_RATIO_INPUT"),
                ("EDIT_INDEXER_TOGGLE_ENABLE_INTERACTIVE_SEARCH", "EDIT_INDEXER_TAGS_INPUT"),
                ("EDIT_INDEXER_PRIORITY_INPUT", "EDIT_INDEXER_CONFIRM_PROMPT"),
                ("EDIT_INDEXER_CONFIRM_PROMPT", "EDIT_INDEXER_CONFIRM_PROMPT"),
            ]),
            edit_indexer_nzb=sequence(f"{blocks.__name__} edit usenet indexer", [
                ("EDIT_INDEXER_NAME_INPUT", "EDIT_INDEXER_URL_INPUT"),
                ("EDIT_INDEXER_TOGGLE_ENABLE_RSS", "EDIT_INDEXER_API_KEY_INPUT"),
                ("EDIT_INDEXER_TOGGLE_ENABLE_AUTOMATIC_SEARCH", "EDIT_INDEXER_TAGS_INPUT"),
                ("EDIT_INDEXER_TOGGLE_ENABLE_INTERACTIVE_SEARCH", "EDIT_INDEXER_PRIORITY_INPUT"),
                ("EDIT_INDEXER_CONFIRM_PROMPT", "EDIT_INDEXER_CONFIRM_PROMPT"),
            ]),
        )

    def edit_indexer_sequence(self, protocol: IndexerProtocol) -> StepSequence:
        if protocol is IndexerProtocol.TORRENT:
            return self.edit_indexer_torrent
        return self.edit_indexer_nzb


_EDIT_INDEXER_NAMES = (
    "EDIT_INDEXER_PROMPT",
    "EDIT_INDEXER_CONFIRM_PROMPT",
    "EDIT_INDEXER_API_KEY_INPUT",
    "EDIT_INDEXER_NAME_INPUT",
    "EDIT_INDEXER_SEED_RATIO_INPUT",
    "EDIT_INDEXER_TOGGLE_ENABLE_RSS",
    "EDIT_INDEXER_TOGGLE_ENABLE_AUTOMATIC_SEARCH",
    "EDIT_INDEXER_TOGGLE_ENABLE_INTERACTIVE_SEARCH",
    "EDIT_INDEXER_PRIORITY_INPUT",
    "EDIT_INDEXER_URL_INPUT",
    "EDIT_INDEXER_TAGS_INPUT",
)
