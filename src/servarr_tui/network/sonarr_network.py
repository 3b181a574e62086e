"""Sonarr request table: shared specs plus the series and episode endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from servarr_tui.models.sonarr_models import Episode, Series
from servarr_tui.network.events import SonarrEvent
from servarr_tui.network.servarr_network import (
    Request,
    RequestSpec,
    command,
    records,
    shared_requests,
)

if TYPE_CHECKING:
    from servarr_tui.app.state import AppState


def _apply_series(app: AppState, payload: object) -> None:
    app.sonarr_data.series.set_items([Series.from_json(r) for r in records(payload)])


def _build_get_episodes(app: AppState) -> Request | None:
    data = app.sonarr_data
    series = data.selected_series()
    season = data.seasons.current_selection()
    if series is None or season is None:
        return None
    return Request("/episode", {"seriesId": series.id, "seasonNumber": season.season_number})


def _apply_episodes(app: AppState, payload: object) -> None:
    app.sonarr_data.episodes.set_items([Episode.from_json(r) for r in records(payload)])


def _build_delete_series(app: AppState) -> Request | None:
    data = app.sonarr_data
    series = data.selected_series()
    if series is None:
        return None
    query = {
        "deleteFiles": data.delete_series_files,
        "addImportListExclusion": data.add_list_exclusion,
    }
    data.reset_delete_series_preferences()
    return Request(f"/series/{series.id}", query)


def _build_series_search(app: AppState) -> Request | None:
    series = app.sonarr_data.selected_series()
    if series is None:
        return None
    return Request("/command", body={"name": "SeriesSearch", "seriesId": series.id})


E = SonarrEvent

# [LAW:one-source-of-truth] SonarrEvent → request shape.
SONARR_REQUESTS: dict[SonarrEvent, RequestSpec] = {
    **shared_requests(SonarrEvent, "sonarr_data"),
    E.GET_SERIES: RequestSpec("GET", lambda app: Request("/series"), _apply_series),
    E.GET_EPISODES: RequestSpec("GET", _build_get_episodes, _apply_episodes),
    E.DELETE_SERIES: RequestSpec("DELETE", _build_delete_series),
    E.TRIGGER_AUTOMATIC_SERIES_SEARCH: RequestSpec("POST", _build_series_search),
    E.UPDATE_ALL_SERIES: command("RefreshSeries"),
}
