"""In-process Textual tests for ServarrTuiApp.

Uses Textual's run_test() harness: the app runs headless, keys go through
on_key exactly as from a terminal, and the network is a RecordingNetwork.
"""

from servarr_tui.models.servarr_data.radarr_data import ActiveRadarrBlock
from servarr_tui.models.servarr_data.sonarr_data import ActiveSonarrBlock
from servarr_tui.network.client import NetworkError, NetworkResult
from servarr_tui.network.events import RadarrEvent
from tests.harness import (
    current_block,
    movie_json,
    press_and_settle,
    resize_and_settle,
    run_app,
)


async def test_first_tick_fetches_reference_data_and_library():
    async with run_app() as (pilot, app):
        events = app.state.network.events()
        for event in (
            RadarrEvent.GET_QUALITY_PROFILES,
            RadarrEvent.GET_TAGS,
            RadarrEvent.GET_STATUS,
            RadarrEvent.GET_MOVIES,
        ):
            assert event in events
        assert not app.state.is_first_render


async def test_network_outcome_lands_in_state():
    async with run_app() as (pilot, app):
        app._post_outcome(NetworkResult(RadarrEvent.GET_MOVIES, [movie_json(1, "Heat")]))
        await pilot.pause()
        assert app.state.radarr_data.movies.current_selection().title.text == "Heat"
        assert not app.state.is_loading


async def test_network_error_shown_in_footer():
    async with run_app() as (pilot, app):
        app._post_outcome(NetworkError(RadarrEvent.GET_MOVIES, "Failed to send request. refused"))
        await pilot.pause()
        assert app.state.error.text == "Failed to send request. refused"


async def test_tab_switches_server():
    async with run_app() as (pilot, app):
        await press_and_settle(pilot, "tab")
        assert current_block(app.state) is ActiveSonarrBlock.SERIES
        await press_and_settle(pilot, "shift+tab")
        assert current_block(app.state) is ActiveRadarrBlock.MOVIES


async def test_arrows_change_main_tab():
    async with run_app() as (pilot, app):
        await press_and_settle(pilot, "right")
        assert current_block(app.state) is ActiveRadarrBlock.COLLECTIONS
        await press_and_settle(pilot, "left", "left")
        assert current_block(app.state) is ActiveRadarrBlock.SYSTEM


async def test_popup_shown_and_hidden():
    async with run_app() as (pilot, app):
        popup = app.query_one("#popup")
        assert not popup.display
        await press_and_settle(pilot, "u")
        assert current_block(app.state) is ActiveRadarrBlock.UPDATE_ALL_MOVIES_PROMPT
        assert popup.display
        await press_and_settle(pilot, "escape")
        assert not popup.display


async def test_typing_q_in_search_does_not_quit():
    async with run_app() as (pilot, app):
        await press_and_settle(pilot, "s", "q")
        assert current_block(app.state) is ActiveRadarrBlock.SEARCH_MOVIE
        assert app.state.radarr_data.search.text == "q"
        assert not app.state.should_quit


async def test_unhandled_exception_goes_to_error_slot():
    async with run_app() as (pilot, app):
        app._handle_exception(RuntimeError("boom"))
        await pilot.pause()
        assert app.state.error.text == "RuntimeError: boom"
        assert app.is_running


async def test_resize_repaints():
    async with run_app(size=(80, 24)) as (pilot, app):
        await resize_and_settle(pilot, 140, 50)
        assert app.query_one("#body").size.width > 80


async def test_q_quits_and_stops_network():
    async with run_app() as (pilot, app):
        await press_and_settle(pilot, "q")
        assert app.state.should_quit
    assert app.state.network.stopped
