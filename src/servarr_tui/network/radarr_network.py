"""Radarr request table: shared specs plus the movie and collection endpoints."""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING

from servarr_tui.models.radarr_models import (
    AddMovieSearchResult,
    Collection,
    Credit,
    Monitor,
    Movie,
    MovieHistoryItem,
    Release,
)
from servarr_tui.models.servarr_data.radarr_data import ActiveRadarrBlock
from servarr_tui.models.servarr_models import convert_runtime, convert_to_gb
from servarr_tui.models.stateful import ScrollableText, StatefulTable
from servarr_tui.network.events import RadarrEvent
from servarr_tui.network.servarr_network import (
    Applier,
    Builder,
    Request,
    RequestSpec,
    command,
    get,
    records,
    shared_requests,
)

if TYPE_CHECKING:
    from servarr_tui.app.state import AppState
    from servarr_tui.models.servarr_data.radarr_data import RadarrData


def _data(app: AppState) -> RadarrData:
    return app.radarr_data


def _table(attr: str, parse) -> Applier:
    def apply(app: AppState, payload: object) -> None:
        getattr(_data(app), attr).set_items([parse(r) for r in records(payload)])

    return apply


def _selected_movie_id(app: AppState) -> int | None:
    movie = _data(app).selected_movie()
    return movie.id if movie is not None else None


def _for_selected_movie(path: str, query_key: str | None = None) -> Builder:
    """Builder for ``path`` with the selected movie's id as path suffix or query param."""

    def build(app: AppState) -> Request | None:
        movie_id = _selected_movie_id(app)
        if movie_id is None:
            return None
        if query_key is None:
            return Request(f"{path}/{movie_id}")
        return Request(path, {query_key: movie_id})

    return build


def _movie_command(name: str) -> RequestSpec:
    def build(app: AppState) -> Request | None:
        movie_id = _selected_movie_id(app)
        if movie_id is None:
            return None
        return Request("/command", body={"name": name, "movieIds": [movie_id]})

    return RequestSpec("POST", build)


# ─── Movie details text ──────────────────────────────────────────────────


def movie_details_text(movie: Movie, quality_profile: str) -> str:
    hours, minutes = convert_runtime(movie.runtime)
    lines = [
        f"Title: {movie.title}",
        f"Year: {movie.year}",
        f"Runtime: {hours}h {minutes}m",
        f"Status: {'Downloaded' if movie.has_file else 'Missing'}",
        f"Description: {movie.overview}",
        f"TMDB: {movie.tmdb_id}",
        f"Quality Profile: {quality_profile}",
        f"Size: {convert_to_gb(movie.size_on_disk):.2f} GB",
        f"Path: {movie.path}",
        f"Studio: {movie.studio}",
        f"Genres: {', '.join(movie.genres)}",
    ]
    if movie.certification:
        lines.append(f"Certification: {movie.certification}")
    return "\n".join(lines)


def _file_info(movie_file: dict) -> tuple[str, str, str]:
    media = movie_file.get("mediaInfo") or {}
    file_details = "\n".join([
        f"Relative Path: {movie_file.get('relativePath', '')}",
        f"Absolute Path: {movie_file.get('path', '')}",
        f"Size: {convert_to_gb(int(movie_file.get('size') or 0)):.2f} GB",
        f"Date Added: {movie_file.get('dateAdded', '')}",
    ])
    audio_details = "\n".join([
        f"Bitrate: {media.get('audioBitrate', 0)}",
        f"Channels: {media.get('audioChannels', 0)}",
        f"Codec: {media.get('audioCodec', '')}",
        f"Languages: {media.get('audioLanguages', '')}",
        f"Stream Count: {media.get('audioStreamCount', 0)}",
    ])
    video_details = "\n".join([
        f"Bit Depth: {media.get('videoBitDepth', 0)}",
        f"Bitrate: {media.get('videoBitrate', 0)}",
        f"Codec: {media.get('videoCodec', '')}",
        f"FPS: {media.get('videoFps', 0)}",
        f"Resolution: {media.get('resolution', '')}",
        f"Scan Type: {media.get('scanType', '')}",
        f"Runtime: {media.get('runTime', '')}",
    ])
    return file_details, audio_details, video_details


# ─── Appliers ────────────────────────────────────────────────────────────


def _apply_search_results(app: AppState, payload: object) -> None:
    results: StatefulTable[AddMovieSearchResult] = StatefulTable()
    results.set_items([AddMovieSearchResult.from_json(r) for r in records(payload)])
    _data(app).add_searched_movies = results
    if results.is_empty() and app.get_current_route().block is ActiveRadarrBlock.ADD_MOVIE_SEARCH_RESULTS:
        app.pop_and_push_navigation_stack(ActiveRadarrBlock.ADD_MOVIE_EMPTY_SEARCH_RESULTS)


def _apply_movie_details(app: AppState, payload: object) -> None:
    data = _data(app)
    modal = data.movie_details_modal
    if modal is None:
        return
    movie = Movie.from_json(payload)
    quality_profile = data.quality_profile_map.get(movie.quality_profile_id, "")
    modal.movie_details = ScrollableText(movie_details_text(movie, quality_profile))
    if movie.movie_file:
        modal.file_details, modal.audio_details, modal.video_details = _file_info(movie.movie_file)


def _modal_table(attr: str, parse) -> Applier:
    def apply(app: AppState, payload: object) -> None:
        modal = _data(app).movie_details_modal
        if modal is not None:
            getattr(modal, attr).set_items([parse(r) for r in records(payload)])

    return apply


def _apply_credits(app: AppState, payload: object) -> None:
    modal = _data(app).movie_details_modal
    if modal is None:
        return
    credits = [Credit.from_json(r) for r in records(payload)]
    modal.movie_cast.set_items([c for c in credits if c.credit_type == "cast"])
    modal.movie_crew.set_items([c for c in credits if c.credit_type == "crew"])


# ─── Builders ────────────────────────────────────────────────────────────


def _build_search_new_movie(app: AppState) -> Request | None:
    search = _data(app).add_movie_search
    if search is None or search.is_empty():
        return None
    return Request("/movie/lookup", {"term": search.text})


def _build_add_movie(app: AppState) -> Request | None:
    data = _data(app)
    modal = data.add_movie_modal
    result = data.add_searched_movies.current_selection() if data.add_searched_movies else None
    if modal is None or result is None:
        return None
    root_folder = modal.root_folder_list.current_selection()
    monitor = modal.monitor_list.current_selection(Monitor.MOVIE_ONLY)
    availability = modal.minimum_availability_list.current_selection()
    body = {
        "tmdbId": result.tmdb_id,
        "title": result.title.text,
        "rootFolderPath": root_folder.path if root_folder else "",
        "qualityProfileId": data.quality_profile_id(modal.quality_profile_list.current_selection()),
        "minimumAvailability": availability.value if availability else "announced",
        "monitored": monitor is not Monitor.NONE,
        "tags": data.tag_ids(modal.tags.text),
        "addOptions": {"monitor": monitor.value, "searchForMovie": True},
    }
    data.add_movie_modal = None
    data.selected_block = None
    return Request("/movie", body=body)


def _build_edit_movie(app: AppState) -> Request | None:
    data = _data(app)
    movie = data.selected_movie()
    modal = data.edit_movie_modal
    if movie is None or modal is None:
        return None
    body = copy.deepcopy(movie.raw)
    availability = modal.minimum_availability_list.current_selection()
    body.update(
        monitored=modal.monitored,
        minimumAvailability=(availability or movie.minimum_availability).value,
        qualityProfileId=data.quality_profile_id(modal.quality_profile_list.current_selection())
        or movie.quality_profile_id,
        path=modal.path.text,
        tags=data.tag_ids(modal.tags.text),
    )
    data.edit_movie_modal = None
    data.selected_block = None
    return Request(f"/movie/{movie.id}", {"moveFiles": True}, body)


def _build_edit_collection(app: AppState) -> Request | None:
    data = _data(app)
    collection = data.selected_collection()
    modal = data.edit_collection_modal
    if collection is None or modal is None:
        return None
    body = copy.deepcopy(collection.raw)
    availability = modal.minimum_availability_list.current_selection()
    body.update(
        monitored=modal.monitored,
        minimumAvailability=(availability or collection.minimum_availability).value,
        qualityProfileId=data.quality_profile_id(modal.quality_profile_list.current_selection())
        or collection.quality_profile_id,
        rootFolderPath=modal.path.text,
        searchOnAdd=modal.search_on_add,
    )
    data.edit_collection_modal = None
    data.selected_block = None
    return Request(f"/collection/{collection.id}", body=body)


def _build_delete_movie(app: AppState) -> Request | None:
    data = _data(app)
    movie_id = _selected_movie_id(app)
    if movie_id is None:
        return None
    query = {"deleteFiles": data.delete_movie_files, "addImportExclusion": data.add_list_exclusion}
    data.reset_delete_movie_preferences()
    return Request(f"/movie/{movie_id}", query)


def _build_download_release(app: AppState) -> Request | None:
    data = _data(app)
    movie_id = _selected_movie_id(app)
    modal = data.movie_details_modal
    release = modal.movie_releases.current_selection() if modal else None
    if movie_id is None or release is None:
        return None
    return Request(
        "/release",
        body={"guid": release.guid, "indexerId": release.indexer_id, "movieId": movie_id},
    )


E = RadarrEvent

# [LAW:one-source-of-truth] RadarrEvent → request shape.
RADARR_REQUESTS: dict[RadarrEvent, RequestSpec] = {
    **shared_requests(RadarrEvent, "radarr_data"),
    E.GET_MOVIES: get("/movie", _table("movies", Movie.from_json)),
    E.GET_COLLECTIONS: get("/collection", _table("collections", Collection.from_json)),
    E.SEARCH_NEW_MOVIE: RequestSpec("GET", _build_search_new_movie, _apply_search_results),
    E.ADD_MOVIE: RequestSpec("POST", _build_add_movie),
    E.EDIT_MOVIE: RequestSpec("PUT", _build_edit_movie),
    E.DELETE_MOVIE: RequestSpec("DELETE", _build_delete_movie),
    E.EDIT_COLLECTION: RequestSpec("PUT", _build_edit_collection),
    E.GET_MOVIE_DETAILS: RequestSpec("GET", _for_selected_movie("/movie"), _apply_movie_details),
    E.GET_MOVIE_HISTORY: RequestSpec(
        "GET",
        _for_selected_movie("/history/movie", "movieId"),
        _modal_table("movie_history", MovieHistoryItem.from_json),
    ),
    E.GET_MOVIE_CREDITS: RequestSpec(
        "GET", _for_selected_movie("/credit", "movieId"), _apply_credits
    ),
    E.GET_RELEASES: RequestSpec(
        "GET",
        _for_selected_movie("/release", "movieId"),
        _modal_table("movie_releases", Release.from_json),
    ),
    E.DOWNLOAD_RELEASE: RequestSpec("POST", _build_download_release),
    E.TRIGGER_AUTOMATIC_SEARCH: _movie_command("MoviesSearch"),
    E.UPDATE_AND_SCAN: _movie_command("RefreshMovie"),
    E.UPDATE_ALL_MOVIES: command("RefreshMovie", movieIds=[]),
    E.UPDATE_COLLECTIONS: command("RefreshCollections"),
}
