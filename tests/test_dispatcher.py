"""Tests for the block dispatcher: fetch order, context fallback, prompt actions."""

from servarr_tui.app.dispatcher import BlockDispatcher, Fetch
from servarr_tui.app.radarr import RADARR
from servarr_tui.models.radarr_models import Collection, Release
from servarr_tui.models.route import Route
from servarr_tui.models.servarr_data.modals import MovieDetailsModal
from servarr_tui.models.servarr_data.radarr_data import ActiveRadarrBlock
from servarr_tui.network.events import RadarrEvent, SonarrEvent
from tests.harness import collection_json, movies, submitted_events

B = ActiveRadarrBlock
E = RadarrEvent


def dispatch(state, route):
    RADARR.dispatcher.dispatch(state, route)


class TestFetchOrder:
    def test_movies_fetch_library_then_downloads(self, state):
        dispatch(state, Route(B.MOVIES))
        assert submitted_events(state) == [E.GET_MOVIES, E.GET_DOWNLOADS]
        assert state.is_loading

    def test_system_fetches_three_tables(self, state):
        dispatch(state, Route(B.SYSTEM))
        assert submitted_events(state) == [E.GET_TASKS, E.GET_QUEUED_EVENTS, E.GET_LOGS]

    def test_prompt_falls_back_to_context(self, state):
        dispatch(state, Route(B.DELETE_MOVIE_PROMPT, B.MOVIES))
        assert submitted_events(state) == [E.GET_MOVIES, E.GET_DOWNLOADS]

    def test_block_without_actions_or_context(self, state):
        dispatch(state, Route(B.UPDATE_ALL_MOVIES_PROMPT))
        assert submitted_events(state) == []

    def test_tick_count_reset(self, state):
        state.tick_count = 17
        dispatch(state, Route(B.BLOCKLIST))
        assert state.tick_count == 0


class TestConditionalFetch:
    def test_releases_fetched_only_when_missing(self, state):
        state.radarr_data.movies.set_items(movies("Alien"))
        state.radarr_data.movie_details_modal = MovieDetailsModal()
        dispatch(state, Route(B.MANUAL_SEARCH))
        assert submitted_events(state) == [E.GET_RELEASES]

        state.network.clear()
        state.radarr_data.movie_details_modal.movie_releases.set_items([Release()])
        dispatch(state, Route(B.MANUAL_SEARCH))
        assert submitted_events(state) == []

    def test_test_all_runs_once_per_open(self, state):
        dispatch(state, Route(B.TEST_ALL_INDEXERS, B.INDEXERS))
        assert submitted_events(state) == [E.TEST_ALL_INDEXERS]
        state.network.clear()
        state.radarr_data.indexer_test_all_results = state.radarr_data.indexers
        dispatch(state, Route(B.TEST_ALL_INDEXERS, B.INDEXERS))
        assert submitted_events(state) == []

    def test_effect_action_runs(self, state):
        collection = Collection.from_json(collection_json())
        state.radarr_data.collections.set_items([collection])
        dispatch(state, Route(B.COLLECTION_DETAILS))
        assert state.radarr_data.collection_movies.items == collection.movies
        assert submitted_events(state) == []


class TestPromptAction:
    def test_confirmed_action_fires_once(self, state):
        state.radarr_data.pending.confirm(E.UPDATE_ALL_MOVIES)
        dispatch(state, Route(B.DOWNLOADS))
        assert submitted_events(state) == [E.GET_DOWNLOADS, E.UPDATE_ALL_MOVIES]
        assert state.should_refresh

        state.network.clear()
        dispatch(state, Route(B.DOWNLOADS))
        assert submitted_events(state) == [E.GET_DOWNLOADS]

    def test_unconfirmed_action_never_fires(self, state):
        state.radarr_data.pending.action = E.DELETE_MOVIE
        dispatch(state, Route(B.MOVIES))
        assert E.DELETE_MOVIE not in submitted_events(state)

    def test_action_without_selection_is_skipped(self, state):
        state.radarr_data.pending.confirm(E.DELETE_MOVIE)
        dispatch(state, Route(B.UPDATE_ALL_MOVIES_PROMPT))
        assert submitted_events(state) == []
        assert state.radarr_data.pending.action is None


class TestCustomTable:
    def test_fetch_predicate_and_effect_order(self, state):
        calls = []
        dispatcher = BlockDispatcher("radarr_data", {
            B.MOVIES: [
                lambda app: calls.append("effect"),
                Fetch(E.GET_TAGS, only_if=lambda app: False),
                Fetch(E.GET_QUALITY_PROFILES),
            ],
        })
        dispatcher.dispatch(state, Route(B.MOVIES))
        assert calls == ["effect"]
        assert submitted_events(state) == [E.GET_QUALITY_PROFILES]

    def test_events_for_unconfigured_server_are_skipped(self, state):
        state.dispatch_network_event(SonarrEvent.GET_SERIES)
        assert submitted_events(state) == []
        assert not state.is_loading
