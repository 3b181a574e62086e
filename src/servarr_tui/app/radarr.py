"""The Radarr domain: its dispatch table and descriptor."""

from __future__ import annotations

from typing import TYPE_CHECKING

from servarr_tui.app.dispatcher import BlockDispatcher, Fetch
from servarr_tui.app.domain import (
    ServarrDomain,
    first_render_events,
    metadata_events,
    shared_dispatch_table,
)
from servarr_tui.models.servarr_data.radarr_data import (
    DEFAULT_RADARR_BLOCK,
    SHARED_BLOCKS,
    ActiveRadarrBlock,
)
from servarr_tui.network.events import RadarrEvent
from servarr_tui.network.radarr_network import RADARR_REQUESTS

if TYPE_CHECKING:
    from servarr_tui.app.state import AppState

B = ActiveRadarrBlock
E = RadarrEvent


def _populate_collection_movies(app: AppState) -> None:
    app.radarr_data.populate_collection_movies()


def _credits_missing(app: AppState) -> bool:
    modal = app.radarr_data.movie_details_modal
    return modal is not None and (modal.movie_cast.is_empty() or modal.movie_crew.is_empty())


def _releases_missing(app: AppState) -> bool:
    modal = app.radarr_data.movie_details_modal
    return modal is not None and modal.movie_releases.is_empty()


def _search_not_run(app: AppState) -> bool:
    return app.radarr_data.add_searched_movies is None


# [LAW:one-source-of-truth] Radarr block → dispatch actions, in fetch order.
RADARR_DISPATCH = {
    **shared_dispatch_table(B, E, "radarr_data"),
    B.MOVIES: [Fetch(E.GET_MOVIES), Fetch(E.GET_DOWNLOADS)],
    B.COLLECTIONS: [Fetch(E.GET_COLLECTIONS)],
    B.COLLECTION_DETAILS: [_populate_collection_movies],
    B.ADD_MOVIE_SEARCH_RESULTS: [Fetch(E.SEARCH_NEW_MOVIE, only_if=_search_not_run)],
    B.MOVIE_DETAILS: [Fetch(E.GET_MOVIE_DETAILS)],
    B.FILE_INFO: [Fetch(E.GET_MOVIE_DETAILS)],
    B.MOVIE_HISTORY: [Fetch(E.GET_MOVIE_HISTORY)],
    B.CAST: [Fetch(E.GET_MOVIE_CREDITS, only_if=_credits_missing)],
    B.CREW: [Fetch(E.GET_MOVIE_CREDITS, only_if=_credits_missing)],
    B.MANUAL_SEARCH: [Fetch(E.GET_RELEASES, only_if=_releases_missing)],
}

RADARR = ServarrDomain(
    name="radarr",
    title="Radarr",
    blocks=ActiveRadarrBlock,
    events=RadarrEvent,
    data_attr="radarr_data",
    default_block=DEFAULT_RADARR_BLOCK,
    shared_blocks=SHARED_BLOCKS,
    dispatcher=BlockDispatcher("radarr_data", RADARR_DISPATCH),
    first_render_events=first_render_events(RadarrEvent),
    metadata_events=metadata_events(RadarrEvent),
    requests=RADARR_REQUESTS,
)
