"""Request specs and the requests both Servarr servers answer the same way.

A RequestSpec says how one event turns into HTTP and how its payload lands
in state:

    build(app)           → Request | None   (event-loop thread, at dispatch)
    apply(app, payload)  → None             (event-loop thread, on result)
    on_error(app, error) → None             (optional; replaces the app error slot)

``build`` returns None when the request needs a selection that is not there
(an empty table); the event is then skipped. Builders that submit a form
consume its modal, so a cancelled or already-sent form can't fire twice.

// [LAW:one-source-of-truth] Per-domain tables merge these shared specs with
//   their own; an event's HTTP shape is defined exactly once.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING

from servarr_tui.models.servarr_models import (
    BlocklistItem,
    DiskSpace,
    DownloadRecord,
    Indexer,
    IndexerTestResult,
    QueueEvent,
    RootFolder,
    Task,
    format_log_line,
    format_updates,
    id_name_map,
)
from servarr_tui.models.stateful import ScrollableText, StatefulTable

if TYPE_CHECKING:
    from servarr_tui.app.state import AppState
    from servarr_tui.models.servarr_data.servarr_data import ServarrData
    from servarr_tui.network.client import NetworkError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Request:
    path: str
    query: dict[str, object] = field(default_factory=dict)
    body: object = None


Builder = Callable[["AppState"], "Request | None"]
Applier = Callable[["AppState", object], None]
ErrorApplier = Callable[["AppState", "NetworkError"], None]


def ignore_payload(app: AppState, payload: object) -> None:
    pass


@dataclass(frozen=True)
class RequestSpec:
    method: str
    build: Builder
    apply: Applier = ignore_payload
    on_error: ErrorApplier | None = None


def fixed(path: str, **query: object) -> Builder:
    def build(app: AppState) -> Request:
        return Request(path, dict(query))

    return build


def get(path: str, apply: Applier, **query: object) -> RequestSpec:
    return RequestSpec("GET", fixed(path, **query), apply)


def command(name: str, **extra: object) -> RequestSpec:
    """POST /command with a fixed body."""

    def build(app: AppState) -> Request:
        return Request("/command", body={"name": name, **extra})

    return RequestSpec("POST", build)


def records(payload: object) -> list:
    """Paged endpoints wrap rows in ``records``; plain ones return the list."""
    if isinstance(payload, dict):
        return list(payload["records"])
    if isinstance(payload, list):
        return payload
    raise TypeError(f"expected a list of records, got {type(payload).__name__}")


# ─── Shared specs ────────────────────────────────────────────────────────


def shared_requests(events: type[Enum], data_attr: str) -> dict[Enum, RequestSpec]:
    """Specs for the screens every Servarr server has, bound to one domain."""
    E = events

    def data(app: AppState) -> ServarrData:
        return getattr(app, data_attr)

    def table(attr: str, parse: Callable[[dict], object]) -> Applier:
        def apply(app: AppState, payload: object) -> None:
            getattr(data(app), attr).set_items([parse(r) for r in records(payload)])

        return apply

    def delete_selected(attr: str, resource: str) -> RequestSpec:
        def build(app: AppState) -> Request | None:
            selected = getattr(data(app), attr).current_selection()
            if selected is None:
                return None
            return Request(f"/{resource}/{selected.id}")

        return RequestSpec("DELETE", build)

    # reference data

    def apply_quality_profiles(app: AppState, payload: object) -> None:
        data(app).quality_profile_map = id_name_map(records(payload), "name")

    def apply_tags(app: AppState, payload: object) -> None:
        data(app).tags_map = id_name_map(records(payload), "label")

    def apply_disk_space(app: AppState, payload: object) -> None:
        data(app).disk_space = [DiskSpace.from_json(r) for r in records(payload)]

    def apply_status(app: AppState, payload: object) -> None:
        target = data(app)
        target.version = str(payload["version"])
        start_time = payload.get("startTime")
        target.start_time = (
            datetime.fromisoformat(str(start_time).replace("Z", "+00:00")) if start_time else None
        )

    # root folders

    def build_add_root_folder(app: AppState) -> Request | None:
        target = data(app)
        if target.edit_root_folder is None or target.edit_root_folder.is_empty():
            return None
        path = target.edit_root_folder.drain()
        target.edit_root_folder = None
        return Request("/rootfolder", body={"path": path})

    # blocklist

    def build_clear_blocklist(app: AppState) -> Request | None:
        ids = [item.id for item in data(app).blocklist.items]
        if not ids:
            return None
        return Request("/blocklist/bulk", body={"ids": ids})

    # indexers

    def build_edit_indexer(app: AppState) -> Request | None:
        target = data(app)
        indexer = target.indexers.current_selection()
        modal = target.edit_indexer_modal
        if indexer is None or modal is None:
            return None
        body = modal.to_body(indexer, target.tag_ids(modal.tags.text))
        target.reset_edit_indexer()
        return Request(f"/indexer/{indexer.id}", body=body)

    def build_test_indexer(app: AppState) -> Request | None:
        indexer = data(app).indexers.current_selection()
        if indexer is None:
            return None
        return Request("/indexer/test", body=indexer.raw)

    def apply_test_indexer(app: AppState, payload: object) -> None:
        data(app).indexer_test_error = ""

    def test_indexer_failed(app: AppState, error: NetworkError) -> None:
        data(app).indexer_test_error = error.message

    def apply_test_all(app: AppState, payload: object) -> None:
        target = data(app)
        names = {indexer.id: indexer.name for indexer in target.indexers.items}
        results: StatefulTable[IndexerTestResult] = StatefulTable()
        results.set_items([IndexerTestResult.from_json(r, names) for r in records(payload)])
        target.indexer_test_all_results = results

    def test_all_failed(app: AppState, error: NetworkError) -> None:
        # Validation failures come back as 400 with the per-indexer results as body.
        if error.status == 400:
            try:
                apply_test_all(app, json.loads(error.body))
                return
            except (ValueError, TypeError, KeyError):
                logger.debug("test-all 400 body is not a result list")
        data(app).indexer_test_all_results = StatefulTable()
        app.handle_error(error.message)

    # system

    def apply_logs(app: AppState, payload: object) -> None:
        logs = data(app).logs
        was_empty = logs.is_empty()
        # newest-first from the server; shown oldest-first
        logs.set_items([format_log_line(r) for r in reversed(records(payload))])
        if was_empty:
            logs.scroll_to_bottom()

    def build_start_task(app: AppState) -> Request | None:
        task = data(app).tasks.current_selection()
        if task is None:
            return None
        return Request("/command", body={"name": task.task_name})

    def apply_updates(app: AppState, payload: object) -> None:
        data(app).updates = ScrollableText(format_updates(records(payload)))

    return {
        E.GET_QUALITY_PROFILES: get("/qualityprofile", apply_quality_profiles),
        E.GET_TAGS: get("/tag", apply_tags),
        E.GET_OVERVIEW: get("/diskspace", apply_disk_space),
        E.GET_STATUS: get("/system/status", apply_status),
        E.GET_DOWNLOADS: get(
            "/queue", table("downloads", DownloadRecord.from_json), page=1, pageSize=500
        ),
        E.DELETE_DOWNLOAD: delete_selected("downloads", "queue"),
        E.UPDATE_DOWNLOADS: command("RefreshMonitoredDownloads"),
        E.GET_BLOCKLIST: get(
            "/blocklist",
            table("blocklist", BlocklistItem.from_json),
            page=1,
            pageSize=10000,
            sortKey="date",
            sortDirection="descending",
        ),
        E.DELETE_BLOCKLIST_ITEM: delete_selected("blocklist", "blocklist"),
        E.CLEAR_BLOCKLIST: RequestSpec("DELETE", build_clear_blocklist),
        E.GET_ROOT_FOLDERS: get("/rootfolder", table("root_folders", RootFolder.from_json)),
        E.ADD_ROOT_FOLDER: RequestSpec("POST", build_add_root_folder),
        E.DELETE_ROOT_FOLDER: delete_selected("root_folders", "rootfolder"),
        E.GET_INDEXERS: get("/indexer", table("indexers", Indexer.from_json)),
        E.EDIT_INDEXER: RequestSpec("PUT", build_edit_indexer),
        E.DELETE_INDEXER: delete_selected("indexers", "indexer"),
        E.TEST_INDEXER: RequestSpec(
            "POST", build_test_indexer, apply_test_indexer, test_indexer_failed
        ),
        E.TEST_ALL_INDEXERS: RequestSpec(
            "POST", fixed("/indexer/testall"), apply_test_all, test_all_failed
        ),
        E.GET_LOGS: get(
            "/log", apply_logs, page=1, pageSize=500, sortKey="time", sortDirection="descending"
        ),
        E.GET_TASKS: get("/system/task", table("tasks", Task.from_json)),
        E.START_TASK: RequestSpec("POST", build_start_task),
        E.GET_QUEUED_EVENTS: get("/command", table("queued_events", QueueEvent.from_json)),
        E.GET_UPDATES: get("/update", apply_updates),
    }
