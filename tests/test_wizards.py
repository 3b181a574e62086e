"""Multi-step forms: add movie, edit movie/collection/indexer, delete movie/series."""

import logging

import pytest

from servarr_tui.app.key_bindings import Key
from servarr_tui.models.radarr_models import Collection
from servarr_tui.models.route import Route
from servarr_tui.models.servarr_data.radarr_data import ActiveRadarrBlock
from servarr_tui.models.servarr_data.sonarr_data import ActiveSonarrBlock
from servarr_tui.models.servarr_models import Indexer, RootFolder
from servarr_tui.network.client import NetworkResult
from servarr_tui.network.events import RadarrEvent, SonarrEvent
from tests.harness import (
    collection_json,
    current_block,
    current_route,
    indexer_json,
    movies,
    press,
    route_blocks,
    series,
    submitted,
    submitted_events,
    type_text,
)

B = ActiveRadarrBlock
E = RadarrEvent


@pytest.fixture
def radarr(state):
    data = state.radarr_data
    data.movies.set_items(movies("Alien"))
    data.root_folders.set_items([RootFolder(1, "/movies"), RootFolder(2, "/films")])
    data.quality_profile_map = {1: "HD-1080p", 2: "Any"}
    data.tags_map = {3: "hd"}
    return state


def active_step(state):
    return state.radarr_data.selected_block.get_active_block()


class TestAddMovie:
    @pytest.fixture
    def results(self, radarr):
        press(radarr, "a")
        type_text(radarr, "alien")
        press(radarr, Key.SUBMIT)
        radarr.on_tick()
        return radarr

    def test_search_request(self, results):
        assert current_route(results) == Route(B.ADD_MOVIE_SEARCH_RESULTS, B.MOVIES)
        assert submitted(results, E.SEARCH_NEW_MOVIE).query == {"term": "alien"}
        assert not results.should_ignore_quit_key

    def test_empty_results_popup(self, results):
        results.apply_network_result(NetworkResult(E.SEARCH_NEW_MOVIE, []))
        assert current_block(results) is B.ADD_MOVIE_EMPTY_SEARCH_RESULTS
        press(results, "x")
        assert current_block(results) is B.ADD_MOVIE_SEARCH_INPUT

    def test_already_in_library(self, results):
        results.apply_network_result(
            NetworkResult(E.SEARCH_NEW_MOVIE, [{"tmdbId": 1001, "title": "Alien"}])
        )
        press(results, Key.SUBMIT)
        assert current_route(results) == Route(
            B.ADD_MOVIE_ALREADY_IN_LIBRARY, B.ADD_MOVIE_SEARCH_RESULTS
        )
        press(results, Key.ESC)
        assert current_block(results) is B.ADD_MOVIE_SEARCH_RESULTS

    def test_full_flow(self, results):
        results.apply_network_result(
            NetworkResult(E.SEARCH_NEW_MOVIE, [{"tmdbId": 5, "title": "Alien: Romulus"}])
        )
        press(results, Key.SUBMIT)
        assert current_route(results) == Route(B.ADD_MOVIE_PROMPT, B.ADD_MOVIE_SEARCH_RESULTS)
        assert active_step(results) is B.ADD_MOVIE_SELECT_ROOT_FOLDER

        # root folder list: pick the second entry
        press(results, Key.SUBMIT)
        assert current_route(results) == Route(B.ADD_MOVIE_SELECT_ROOT_FOLDER, B.ADD_MOVIE_PROMPT)
        press(results, Key.DOWN, Key.SUBMIT)
        assert current_block(results) is B.ADD_MOVIE_PROMPT
        assert active_step(results) is B.ADD_MOVIE_SELECT_MONITOR

        # quality profile: names are sorted, "HD-1080p" is second
        press(results, Key.DOWN, Key.DOWN, Key.SUBMIT, Key.DOWN, Key.SUBMIT)
        assert active_step(results) is B.ADD_MOVIE_TAGS_INPUT

        press(results, Key.SUBMIT)
        assert results.should_ignore_quit_key
        type_text(results, "hd")
        press(results, Key.SUBMIT)
        assert active_step(results) is B.ADD_MOVIE_CONFIRM_PROMPT

        press(results, Key.RIGHT, Key.SUBMIT)
        assert current_block(results) is B.ADD_MOVIE_SEARCH_RESULTS
        results.network.clear()
        results.on_tick()
        props = submitted(results, E.ADD_MOVIE)
        assert (props.method, props.path) == ("POST", "/movie")
        assert props.body == {
            "tmdbId": 5,
            "title": "Alien: Romulus",
            "rootFolderPath": "/films",
            "qualityProfileId": 1,
            "minimumAvailability": "tba",
            "monitored": True,
            "tags": [3],
            "addOptions": {"monitor": "movieOnly", "searchForMovie": True},
        }
        assert results.radarr_data.add_movie_modal is None
        assert E.SEARCH_NEW_MOVIE not in submitted_events(results)

    def test_esc_on_form_discards_it(self, results):
        results.apply_network_result(NetworkResult(E.SEARCH_NEW_MOVIE, [{"tmdbId": 5, "title": "X"}]))
        press(results, Key.SUBMIT, Key.ESC)
        assert current_block(results) is B.ADD_MOVIE_SEARCH_RESULTS
        assert results.radarr_data.add_movie_modal is None
        assert results.radarr_data.selected_block is None

    def test_esc_on_results_returns_to_typing(self, results):
        press(results, Key.ESC)
        assert current_block(results) is B.ADD_MOVIE_SEARCH_INPUT
        assert results.should_ignore_quit_key
        press(results, Key.ESC)
        assert route_blocks(results) == [B.MOVIES]
        assert results.radarr_data.add_movie_search is None


class TestEditMovie:
    def test_edit_path_and_monitoring(self, radarr):
        press(radarr, "e")
        assert current_route(radarr) == Route(B.EDIT_MOVIE_PROMPT, B.MOVIES)
        modal = radarr.radarr_data.edit_movie_modal
        assert modal.quality_profile_list.current_selection() == "HD-1080p"

        press(radarr, Key.SUBMIT)
        assert modal.monitored is False

        press(radarr, Key.DOWN, Key.DOWN, Key.DOWN, Key.SUBMIT)
        assert current_block(radarr) is B.EDIT_MOVIE_PATH_INPUT
        type_text(radarr, "-1979")
        press(radarr, Key.SUBMIT, Key.DOWN)
        assert active_step(radarr) is B.EDIT_MOVIE_CONFIRM_PROMPT

        press(radarr, Key.RIGHT, Key.SUBMIT)
        radarr.on_tick()
        props = submitted(radarr, E.EDIT_MOVIE)
        assert (props.method, props.path, props.query) == ("PUT", "/movie/1", {"moveFiles": True})
        assert props.body["monitored"] is False
        assert props.body["path"] == "/movies/Alien-1979"
        assert props.body["qualityProfileId"] == 1
        assert props.body["title"] == "Alien"
        assert "moveFiles=true" in props.url

    def test_answering_no_discards_form(self, radarr):
        press(radarr, "e", Key.UP, Key.SUBMIT)
        assert route_blocks(radarr) == [B.MOVIES]
        assert radarr.radarr_data.edit_movie_modal is None
        radarr.on_tick()
        assert E.EDIT_MOVIE not in submitted_events(radarr)

    def test_edit_on_empty_library_does_nothing(self, state):
        press(state, "e")
        assert route_blocks(state) == [B.MOVIES]


class TestEditCollection:
    def test_toggles_and_submit(self, radarr):
        radarr.radarr_data.collections.set_items([Collection.from_json(collection_json())])
        radarr.radarr_data.main_tabs.set_index(1)
        radarr.navigation.reset(B.COLLECTIONS)
        press(radarr, "e")
        assert current_route(radarr) == Route(B.EDIT_COLLECTION_PROMPT, B.COLLECTIONS)
        press(radarr, Key.SUBMIT)
        press(radarr, Key.DOWN, Key.DOWN, Key.DOWN, Key.DOWN, Key.SUBMIT)
        press(radarr, Key.DOWN, Key.RIGHT, Key.SUBMIT)
        radarr.on_tick()
        body = submitted(radarr, E.EDIT_COLLECTION).body
        assert body["monitored"] is False
        assert body["searchOnAdd"] is True
        assert body["rootFolderPath"] == "/movies"
        assert body["minimumAvailability"] == "released"
        assert submitted_events(radarr)[0] is E.GET_COLLECTIONS


class TestDeleteMovie:
    def test_delete_with_files(self, radarr):
        press(radarr, Key.DELETE)
        assert current_route(radarr) == Route(B.DELETE_MOVIE_PROMPT, B.MOVIES)
        press(radarr, Key.SUBMIT)
        assert radarr.radarr_data.delete_movie_files is True
        press(radarr, Key.DOWN, Key.DOWN, Key.RIGHT, Key.SUBMIT)
        radarr.on_tick()
        props = submitted(radarr, E.DELETE_MOVIE)
        assert (props.method, props.path) == ("DELETE", "/movie/1")
        assert props.query == {"deleteFiles": True, "addImportExclusion": False}
        assert radarr.radarr_data.delete_movie_files is False

    def test_cancel_resets_preferences(self, radarr):
        press(radarr, Key.DELETE, Key.SUBMIT, Key.ESC)
        assert route_blocks(radarr) == [B.MOVIES]
        assert radarr.radarr_data.delete_movie_files is False
        assert radarr.radarr_data.selected_block is None


class TestDeleteSeries:
    def test_delete_with_exclusion(self, sonarr_state):
        S = ActiveSonarrBlock
        sonarr_state.sonarr_data.series.set_items(series("The Wire"))
        press(sonarr_state, Key.DELETE)
        assert current_route(sonarr_state) == Route(S.DELETE_SERIES_PROMPT, S.SERIES)
        press(sonarr_state, Key.DOWN, Key.SUBMIT, Key.DOWN, Key.RIGHT, Key.SUBMIT)
        sonarr_state.on_tick()
        props = submitted(sonarr_state, SonarrEvent.DELETE_SERIES)
        assert props.path == "/series/1"
        assert props.query == {"deleteFiles": False, "addImportListExclusion": True}


class TestEditIndexer:
    @pytest.fixture
    def form(self, radarr):
        radarr.radarr_data.main_tabs.set_index(5)
        radarr.navigation.reset(B.INDEXERS)
        radarr.radarr_data.indexers.set_items([Indexer.from_json(indexer_json(tags=[3]))])
        press(radarr, Key.SUBMIT)
        return radarr

    def test_two_column_navigation_and_submit(self, form):
        press(form, Key.RIGHT)
        assert active_step(form) is B.EDIT_INDEXER_URL_INPUT
        press(form, Key.SUBMIT)
        type_text(form, "/v2")
        press(form, Key.SUBMIT)
        assert active_step(form) is B.EDIT_INDEXER_API_KEY_INPUT
        press(form, Key.LEFT, Key.SUBMIT)
        assert form.radarr_data.edit_indexer_modal.enable_rss is False

        press(form, Key.DOWN, Key.DOWN, Key.DOWN, Key.RIGHT)
        assert active_step(form) is B.EDIT_INDEXER_CONFIRM_PROMPT
        press(form, Key.RIGHT, Key.SUBMIT)
        assert route_blocks(form) == [B.INDEXERS]

        form.on_tick()
        props = submitted(form, E.EDIT_INDEXER)
        assert (props.method, props.path) == ("PUT", "/indexer/1")
        assert props.body["enableRss"] is False
        assert props.body["tags"] == [3]
        fields = {entry["name"]: entry["value"] for entry in props.body["fields"]}
        assert fields["baseUrl"] == "https://indexer.example/v2"
        assert fields["seedCriteria.seedRatio"] == 1.0
        assert form.radarr_data.edit_indexer_modal is None


class TestMissingForm:
    def test_prompt_without_form_closes(self, state, caplog):
        state.push_navigation_stack(Route(B.EDIT_MOVIE_PROMPT, B.MOVIES))
        with caplog.at_level(logging.WARNING):
            press(state, Key.DOWN)
        assert route_blocks(state) == [B.MOVIES]
        assert "without a form" in caplog.text
