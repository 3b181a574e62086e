"""ServarrDomain — everything that differs between Radarr and Sonarr, in one value.

The app state, the key routing and the renderer look a domain up from the
current route's block family and never branch on "is this Radarr".
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from servarr_tui.app.dispatcher import BlockDispatcher, Fetch
from servarr_tui.models.route import ActiveBlock
from servarr_tui.models.servarr_data.servarr_data import SharedBlocks
from servarr_tui.network.servarr_network import RequestSpec

if TYPE_CHECKING:
    from servarr_tui.app.state import AppState
    from servarr_tui.models.servarr_data.servarr_data import ServarrData


@dataclass(frozen=True)
class ServarrDomain:
    name: str
    title: str
    blocks: type[ActiveBlock]
    events: type[Enum]
    data_attr: str
    default_block: ActiveBlock
    shared_blocks: SharedBlocks
    dispatcher: BlockDispatcher
    first_render_events: tuple[Enum, ...]
    metadata_events: tuple[Enum, ...]
    requests: Mapping[Enum, RequestSpec]

    def data(self, app: AppState) -> ServarrData:
        return getattr(app, self.data_attr)


def shared_dispatch_table(blocks: type[ActiveBlock], events: type[Enum], data_attr: str) -> dict:
    """Dispatch entries of the screens every domain has."""
    B, E = blocks, events

    def untested(attr: str):
        return lambda app: getattr(getattr(app, data_attr), attr) is None

    return {
        B.DOWNLOADS: [Fetch(E.GET_DOWNLOADS)],
        B.BLOCKLIST: [Fetch(E.GET_BLOCKLIST)],
        B.ROOT_FOLDERS: [Fetch(E.GET_ROOT_FOLDERS)],
        B.INDEXERS: [Fetch(E.GET_INDEXERS)],
        B.TEST_INDEXER: [Fetch(E.TEST_INDEXER, only_if=untested("indexer_test_error"))],
        B.TEST_ALL_INDEXERS: [
            Fetch(E.TEST_ALL_INDEXERS, only_if=untested("indexer_test_all_results"))
        ],
        B.SYSTEM: [Fetch(E.GET_TASKS), Fetch(E.GET_QUEUED_EVENTS), Fetch(E.GET_LOGS)],
        B.SYSTEM_LOGS: [Fetch(E.GET_LOGS)],
        B.SYSTEM_TASKS: [Fetch(E.GET_TASKS)],
        B.SYSTEM_QUEUED_EVENTS: [Fetch(E.GET_QUEUED_EVENTS)],
        B.SYSTEM_UPDATES: [Fetch(E.GET_UPDATES)],
    }


def metadata_events(events: type[Enum]) -> tuple[Enum, ...]:
    """Reference data refreshed on every routing change and poll."""
    E = events
    return (E.GET_QUALITY_PROFILES, E.GET_TAGS, E.GET_ROOT_FOLDERS, E.GET_DOWNLOADS)


def first_render_events(events: type[Enum]) -> tuple[Enum, ...]:
    """Metadata plus the one-time server overview."""
    return metadata_events(events) + (events.GET_OVERVIEW, events.GET_STATUS)
