"""Key routing: global keys first, then the handler that owns the current block.

    ctrl+c               quit, always
    tab / shift+tab      next / previous server (ignored while typing)
    q                    quit (ignored while typing)
    anything else        owner of the current route's block

// [LAW:single-enforcer] Each block has exactly one owning handler class; the
//   table below is built once and refuses overlapping ownership.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from servarr_tui.app.key_bindings import Key, KeyPress
from servarr_tui.handlers.base import K, KeyEventHandler
from servarr_tui.handlers.radarr.add_movie import AddMovieHandler
from servarr_tui.handlers.radarr.collection_details import CollectionDetailsHandler
from servarr_tui.handlers.radarr.delete_movie import DeleteMovieHandler
from servarr_tui.handlers.radarr.edit_movie import EditCollectionHandler, EditMovieHandler
from servarr_tui.handlers.radarr.library import CollectionsHandler, LibraryHandler
from servarr_tui.handlers.radarr.movie_details import MovieDetailsHandler
from servarr_tui.handlers.radarr.shared import SHARED_HANDLERS as RADARR_SHARED_HANDLERS
from servarr_tui.handlers.sonarr.delete_series import DeleteSeriesHandler
from servarr_tui.handlers.sonarr.library import SeriesHandler
from servarr_tui.handlers.sonarr.series_details import SeriesDetailsHandler
from servarr_tui.handlers.sonarr.shared import SHARED_HANDLERS as SONARR_SHARED_HANDLERS
from servarr_tui.models.route import ActiveBlock

if TYPE_CHECKING:
    from servarr_tui.app.state import AppState

logger = logging.getLogger(__name__)

HANDLERS: tuple[type[KeyEventHandler], ...] = (
    LibraryHandler,
    CollectionsHandler,
    CollectionDetailsHandler,
    AddMovieHandler,
    EditMovieHandler,
    EditCollectionHandler,
    DeleteMovieHandler,
    MovieDetailsHandler,
    *RADARR_SHARED_HANDLERS,
    SeriesHandler,
    SeriesDetailsHandler,
    DeleteSeriesHandler,
    *SONARR_SHARED_HANDLERS,
)


def _ownership(handlers: tuple[type[KeyEventHandler], ...]) -> dict[ActiveBlock, type[KeyEventHandler]]:
    owners: dict[ActiveBlock, type[KeyEventHandler]] = {}
    for handler in handlers:
        for block in handler.blocks():
            if block in owners:
                raise ValueError(
                    f"{block} is owned by both {owners[block].__name__} and {handler.__name__}"
                )
            owners[block] = handler
    return owners


_OWNERS = _ownership(HANDLERS)


def handler_for(block: ActiveBlock) -> type[KeyEventHandler] | None:
    return _OWNERS.get(block)


def handle_events(key: KeyPress, app: AppState) -> None:
    if key.key is Key.CTRL_C:
        app.should_quit = True
        return
    if not app.should_ignore_quit_key:
        if key.key is Key.TAB:
            app.switch_server_tab(forward=True)
            return
        if key.key is Key.BACK_TAB:
            app.switch_server_tab(forward=False)
            return
        if key == K.quit.key:
            app.should_quit = True
            return

    route = app.get_current_route()
    handler = handler_for(route.block)
    if handler is None:
        logger.warning("no key handler owns %s", route.block)
        return
    handler(key, app, route.block, route.context).handle()
