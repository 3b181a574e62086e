"""Form state behind the add/edit wizards and the movie details popup.

A modal is built when its wizard opens, from the entity under the cursor of
the active view, and is thrown away when the wizard is cancelled or its
request has been built.

Each form names its fields per wizard step by block member name: TOGGLES
flip a bool, SELECTS open a choice list, INPUTS open a text field.
"""

from __future__ import annotations

import copy
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import ClassVar, TypeVar

from servarr_tui.models.radarr_models import (
    Collection,
    Credit,
    MinimumAvailability,
    Monitor,
    Movie,
    MovieHistoryItem,
    Release,
)
from servarr_tui.models.servarr_models import Indexer, IndexerProtocol, JsonDict, RootFolder
from servarr_tui.models.stateful import ScrollableText, StatefulList, StatefulTable
from servarr_tui.models.text import HorizontallyScrollableText

T = TypeVar("T")


def _preselect(choices: StatefulList[T], value: T | None) -> None:
    if value in choices.items:
        choices.select_index(choices.items.index(value))


def _choices(items: Sequence[T], current: T | None = None) -> StatefulList[T]:
    choices: StatefulList[T] = StatefulList(items)
    _preselect(choices, current)
    return choices


# ─── Radarr ──────────────────────────────────────────────────────────────


@dataclass
class AddMovieModal:
    TOGGLES: ClassVar[dict[str, str]] = {}
    SELECTS: ClassVar[dict[str, str]] = {
        "ADD_MOVIE_SELECT_ROOT_FOLDER": "root_folder_list",
        "ADD_MOVIE_SELECT_MONITOR": "monitor_list",
        "ADD_MOVIE_SELECT_MINIMUM_AVAILABILITY": "minimum_availability_list",
        "ADD_MOVIE_SELECT_QUALITY_PROFILE": "quality_profile_list",
    }
    INPUTS: ClassVar[dict[str, str]] = {"ADD_MOVIE_TAGS_INPUT": "tags"}

    root_folder_list: StatefulList[RootFolder]
    monitor_list: StatefulList[Monitor]
    minimum_availability_list: StatefulList[MinimumAvailability]
    quality_profile_list: StatefulList[str]
    tags: HorizontallyScrollableText = field(default_factory=HorizontallyScrollableText)

    @classmethod
    def build(cls, root_folders: Sequence[RootFolder], quality_profiles: Sequence[str]) -> AddMovieModal:
        return cls(
            root_folder_list=_choices(root_folders),
            monitor_list=_choices(list(Monitor)),
            minimum_availability_list=_choices(list(MinimumAvailability)),
            quality_profile_list=_choices(quality_profiles),
        )


@dataclass
class EditMovieModal:
    TOGGLES: ClassVar[dict[str, str]] = {"EDIT_MOVIE_TOGGLE_MONITORED": "monitored"}
    SELECTS: ClassVar[dict[str, str]] = {
        "EDIT_MOVIE_SELECT_MINIMUM_AVAILABILITY": "minimum_availability_list",
        "EDIT_MOVIE_SELECT_QUALITY_PROFILE": "quality_profile_list",
    }
    INPUTS: ClassVar[dict[str, str]] = {
        "EDIT_MOVIE_PATH_INPUT": "path",
        "EDIT_MOVIE_TAGS_INPUT": "tags",
    }

    minimum_availability_list: StatefulList[MinimumAvailability]
    quality_profile_list: StatefulList[str]
    monitored: bool
    path: HorizontallyScrollableText
    tags: HorizontallyScrollableText

    @classmethod
    def from_movie(
        cls, movie: Movie, quality_profiles: Sequence[str], profile_name: str | None, tags: str
    ) -> EditMovieModal:
        return cls(
            minimum_availability_list=_choices(list(MinimumAvailability), movie.minimum_availability),
            quality_profile_list=_choices(quality_profiles, profile_name),
            monitored=movie.monitored,
            path=HorizontallyScrollableText(movie.path),
            tags=HorizontallyScrollableText(tags),
        )


@dataclass
class EditCollectionModal:
    TOGGLES: ClassVar[dict[str, str]] = {
        "EDIT_COLLECTION_TOGGLE_MONITORED": "monitored",
        "EDIT_COLLECTION_TOGGLE_SEARCH_ON_ADD": "search_on_add",
    }
    SELECTS: ClassVar[dict[str, str]] = {
        "EDIT_COLLECTION_SELECT_MINIMUM_AVAILABILITY": "minimum_availability_list",
        "EDIT_COLLECTION_SELECT_QUALITY_PROFILE": "quality_profile_list",
    }
    INPUTS: ClassVar[dict[str, str]] = {"EDIT_COLLECTION_ROOT_FOLDER_PATH_INPUT": "path"}

    minimum_availability_list: StatefulList[MinimumAvailability]
    quality_profile_list: StatefulList[str]
    monitored: bool
    search_on_add: bool
    path: HorizontallyScrollableText

    @classmethod
    def from_collection(
        cls, collection: Collection, quality_profiles: Sequence[str], profile_name: str | None
    ) -> EditCollectionModal:
        return cls(
            minimum_availability_list=_choices(
                list(MinimumAvailability), collection.minimum_availability
            ),
            quality_profile_list=_choices(quality_profiles, profile_name),
            monitored=collection.monitored,
            search_on_add=collection.search_on_add,
            path=HorizontallyScrollableText(collection.root_folder_path),
        )


@dataclass
class MovieDetailsModal:
    movie_details: ScrollableText = field(default_factory=ScrollableText)
    file_details: str = ""
    audio_details: str = ""
    video_details: str = ""
    movie_history: StatefulTable[MovieHistoryItem] = field(default_factory=StatefulTable)
    movie_cast: StatefulTable[Credit] = field(default_factory=StatefulTable)
    movie_crew: StatefulTable[Credit] = field(default_factory=StatefulTable)
    movie_releases: StatefulTable[Release] = field(default_factory=StatefulTable)


# ─── Shared ──────────────────────────────────────────────────────────────

_SEED_RATIO_FIELD = "seedCriteria.seedRatio"


def _parse_ratio(text: str) -> float | None:
    """Seed ratio typed into the form, or None to keep the server's value."""
    head, _, tail = text.strip().partition(".")
    if not head.isdigit() or (tail and not tail.isdigit()):
        return None
    return float(text)


@dataclass
class EditIndexerModal:
    TOGGLES: ClassVar[dict[str, str]] = {
        "EDIT_INDEXER_TOGGLE_ENABLE_RSS": "enable_rss",
        "EDIT_INDEXER_TOGGLE_ENABLE_AUTOMATIC_SEARCH": "enable_automatic_search",
        "EDIT_INDEXER_TOGGLE_ENABLE_INTERACTIVE_SEARCH": "enable_interactive_search",
    }
    SELECTS: ClassVar[dict[str, str]] = {}
    INPUTS: ClassVar[dict[str, str]] = {
        "EDIT_INDEXER_NAME_INPUT": "name",
        "EDIT_INDEXER_URL_INPUT": "url",
        "EDIT_INDEXER_API_KEY_INPUT": "api_key",
        "EDIT_INDEXER_SEED_RATIO_INPUT": "seed_ratio",
        "EDIT_INDEXER_TAGS_INPUT": "tags",
        "EDIT_INDEXER_PRIORITY_INPUT": "priority",
    }

    protocol: IndexerProtocol
    name: HorizontallyScrollableText
    url: HorizontallyScrollableText
    api_key: HorizontallyScrollableText
    seed_ratio: HorizontallyScrollableText
    tags: HorizontallyScrollableText
    priority: HorizontallyScrollableText
    enable_rss: bool
    enable_automatic_search: bool
    enable_interactive_search: bool

    @classmethod
    def from_indexer(cls, indexer: Indexer, tags: str) -> EditIndexerModal:
        def text(value: object) -> HorizontallyScrollableText:
            return HorizontallyScrollableText("" if value is None else str(value))

        return cls(
            protocol=indexer.protocol,
            name=text(indexer.name),
            url=text(indexer.field_value("baseUrl")),
            api_key=text(indexer.field_value("apiKey")),
            seed_ratio=text(indexer.field_value(_SEED_RATIO_FIELD)),
            tags=text(tags),
            priority=text(indexer.priority),
            enable_rss=indexer.enable_rss,
            enable_automatic_search=indexer.enable_automatic_search,
            enable_interactive_search=indexer.enable_interactive_search,
        )

    def to_body(self, indexer: Indexer, tag_ids: list[int]) -> JsonDict:
        """The indexer resource as the server sent it, with this form applied."""
        body = copy.deepcopy(indexer.raw)
        body.update(
            name=self.name.text,
            enableRss=self.enable_rss,
            enableAutomaticSearch=self.enable_automatic_search,
            enableInteractiveSearch=self.enable_interactive_search,
            priority=int(self.priority.text) if self.priority.text.isdigit() else indexer.priority,
            tags=tag_ids,
        )
        values = {"baseUrl": self.url.text, "apiKey": self.api_key.text}
        seed_ratio = _parse_ratio(self.seed_ratio.text)
        if self.protocol is IndexerProtocol.TORRENT and seed_ratio is not None:
            values[_SEED_RATIO_FIELD] = seed_ratio
        for entry in body.get("fields") or []:
            if entry.get("name") in values:
                entry["value"] = values[entry["name"]]
        return body
