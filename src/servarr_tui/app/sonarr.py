"""The Sonarr domain: its dispatch table and descriptor."""

from __future__ import annotations

from typing import TYPE_CHECKING

from servarr_tui.app.dispatcher import BlockDispatcher, Fetch
from servarr_tui.app.domain import (
    ServarrDomain,
    first_render_events,
    metadata_events,
    shared_dispatch_table,
)
from servarr_tui.models.servarr_data.sonarr_data import (
    DEFAULT_SONARR_BLOCK,
    SHARED_BLOCKS,
    ActiveSonarrBlock,
)
from servarr_tui.network.events import SonarrEvent
from servarr_tui.network.sonarr_network import SONARR_REQUESTS

if TYPE_CHECKING:
    from servarr_tui.app.state import AppState

B = ActiveSonarrBlock
E = SonarrEvent


def _populate_seasons(app: AppState) -> None:
    app.sonarr_data.populate_seasons()


# [LAW:one-source-of-truth] Sonarr block → dispatch actions, in fetch order.
SONARR_DISPATCH = {
    **shared_dispatch_table(B, E, "sonarr_data"),
    B.SERIES: [Fetch(E.GET_SERIES), Fetch(E.GET_DOWNLOADS)],
    B.SERIES_DETAILS: [_populate_seasons],
    B.SEASON_DETAILS: [Fetch(E.GET_EPISODES)],
}

SONARR = ServarrDomain(
    name="sonarr",
    title="Sonarr",
    blocks=ActiveSonarrBlock,
    events=SonarrEvent,
    data_attr="sonarr_data",
    default_block=DEFAULT_SONARR_BLOCK,
    shared_blocks=SHARED_BLOCKS,
    dispatcher=BlockDispatcher("sonarr_data", SONARR_DISPATCH),
    first_render_events=first_render_events(SonarrEvent),
    metadata_events=metadata_events(SonarrEvent),
    requests=SONARR_REQUESTS,
)
