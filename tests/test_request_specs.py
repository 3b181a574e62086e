"""Request tables: what each event sends and how its payload lands in state."""

import json
from datetime import datetime, timezone

import pytest

from servarr_tui.models.radarr_models import Movie
from servarr_tui.models.servarr_data.radarr_data import ActiveRadarrBlock
from servarr_tui.models.servarr_data.modals import MovieDetailsModal
from servarr_tui.models.servarr_models import BlocklistItem, Indexer, Task
from servarr_tui.models.sonarr_models import Series
from servarr_tui.network.client import NetworkError, NetworkResult
from servarr_tui.network.events import RadarrEvent, SonarrEvent
from servarr_tui.network.radarr_network import RADARR_REQUESTS
from servarr_tui.network.servarr_network import Request, records
from servarr_tui.network.sonarr_network import SONARR_REQUESTS
from tests.harness import deliver, indexer_json, movie_json, movies, series, series_json

E = RadarrEvent


def build(state, event, table=RADARR_REQUESTS):
    return table[event].build(state)


class TestRecords:
    def test_plain_list(self):
        assert records([1, 2]) == [1, 2]

    def test_paged_envelope(self):
        assert records({"page": 1, "records": [{"id": 3}]}) == [{"id": 3}]

    def test_other_shapes_rejected(self):
        with pytest.raises(TypeError):
            records("nope")

    def test_envelope_without_records(self):
        with pytest.raises(KeyError):
            records({"page": 1})


class TestEveryEventHasASpec:
    @pytest.mark.parametrize("event", list(RadarrEvent), ids=lambda e: e.name)
    def test_radarr(self, event):
        assert event in RADARR_REQUESTS

    @pytest.mark.parametrize("event", list(SonarrEvent), ids=lambda e: e.name)
    def test_sonarr(self, event):
        assert event in SONARR_REQUESTS


class TestReferenceData:
    def test_quality_profiles_and_tags(self, state):
        deliver(state, NetworkResult(E.GET_QUALITY_PROFILES, [{"id": 1, "name": "HD"}]))
        deliver(state, NetworkResult(E.GET_TAGS, [{"id": 4, "label": "kids"}]))
        assert state.radarr_data.quality_profile_map == {1: "HD"}
        assert state.radarr_data.tags_map == {4: "kids"}

    def test_status(self, state):
        deliver(
            state,
            NetworkResult(E.GET_STATUS, {"version": "5.2.6", "startTime": "2024-01-02T03:04:05Z"}),
        )
        assert state.radarr_data.version == "5.2.6"
        assert state.radarr_data.start_time == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    def test_status_without_version_is_a_parse_error(self, state):
        deliver(state, NetworkResult(E.GET_STATUS, {}))
        assert state.error.text.startswith("Failed to parse response!")
        assert state.radarr_data.version == ""

    def test_downloads_query(self, state):
        request = build(state, E.GET_DOWNLOADS)
        assert request == Request("/queue", {"page": 1, "pageSize": 500})


class TestLibrary:
    def test_movies_land_in_table(self, state):
        deliver(state, NetworkResult(E.GET_MOVIES, [movie_json(1, "Heat"), movie_json(2, "Ronin")]))
        titles = [movie.title.text for movie in state.radarr_data.movies.items]
        assert titles == ["Heat", "Ronin"]
        assert state.radarr_data.movies.selected == 0

    def test_refetch_keeps_cursor(self, state):
        state.radarr_data.movies.set_items(movies("A", "B", "C"))
        state.radarr_data.movies.select_index(2)
        deliver(state, NetworkResult(E.GET_MOVIES, [movie_json(i) for i in (1, 2, 3)]))
        assert state.radarr_data.movies.selected == 2

    def test_series(self, sonarr_state):
        deliver(sonarr_state, NetworkResult(SonarrEvent.GET_SERIES, [series_json(7, "Dark")]))
        assert sonarr_state.sonarr_data.series.current_selection().id == 7

    def test_episodes_need_a_season(self, sonarr_state):
        sonarr_state.sonarr_data.series.set_items(series("Dark"))
        assert build(sonarr_state, SonarrEvent.GET_EPISODES, SONARR_REQUESTS) is None
        sonarr_state.sonarr_data.populate_seasons()
        assert build(sonarr_state, SonarrEvent.GET_EPISODES, SONARR_REQUESTS) == Request(
            "/episode", {"seriesId": 1, "seasonNumber": 0}
        )

    def test_series_search_command(self, sonarr_state):
        sonarr_state.sonarr_data.series.set_items([Series.from_json(series_json(9))])
        request = build(sonarr_state, SonarrEvent.TRIGGER_AUTOMATIC_SERIES_SEARCH, SONARR_REQUESTS)
        assert request.body == {"name": "SeriesSearch", "seriesId": 9}


class TestMovieDetails:
    @pytest.fixture
    def details(self, state):
        state.radarr_data.movies.set_items(movies("Heat"))
        state.radarr_data.quality_profile_map = {1: "HD-1080p"}
        state.radarr_data.movie_details_modal = MovieDetailsModal()
        return state

    def test_builders_use_selected_movie(self, details):
        assert build(details, E.GET_MOVIE_DETAILS) == Request("/movie/1")
        assert build(details, E.GET_MOVIE_HISTORY) == Request("/history/movie", {"movieId": 1})
        assert build(details, E.GET_RELEASES) == Request("/release", {"movieId": 1})

    def test_details_text(self, details):
        payload = movie_json(1, "Heat", runtime=170, hasFile=True, studio="Warner")
        deliver(details, NetworkResult(E.GET_MOVIE_DETAILS, payload))
        lines = details.radarr_data.movie_details_modal.movie_details.items
        assert "Title: Heat" in lines
        assert "Runtime: 2h 50m" in lines
        assert "Status: Downloaded" in lines
        assert "Quality Profile: HD-1080p" in lines

    def test_credits_split_by_type(self, details):
        payload = [
            {"personName": "Al Pacino", "character": "Hanna", "type": "cast"},
            {"personName": "Michael Mann", "job": "Director", "type": "crew"},
        ]
        deliver(details, NetworkResult(E.GET_MOVIE_CREDITS, payload))
        modal = details.radarr_data.movie_details_modal
        assert [c.person_name for c in modal.movie_cast.items] == ["Al Pacino"]
        assert [c.job for c in modal.movie_crew.items] == ["Director"]

    def test_payload_after_modal_closed_is_dropped(self, details):
        details.radarr_data.movie_details_modal = None
        deliver(details, NetworkResult(E.GET_MOVIE_CREDITS, [{"personName": "x"}]))
        assert details.error.text == ""


class TestSearchResults:
    def test_results_stay_when_user_moved_on(self, state):
        deliver(state, NetworkResult(E.SEARCH_NEW_MOVIE, []))
        assert state.get_current_route().block is ActiveRadarrBlock.MOVIES
        assert state.radarr_data.add_searched_movies.is_empty()


class TestBlocklist:
    def test_clear_sends_every_id(self, state):
        state.radarr_data.blocklist.set_items([BlocklistItem(id=3), BlocklistItem(id=8)])
        assert build(state, E.CLEAR_BLOCKLIST) == Request("/blocklist/bulk", body={"ids": [3, 8]})

    def test_clear_empty_skips(self, state):
        assert build(state, E.CLEAR_BLOCKLIST) is None


class TestIndexerTests:
    @pytest.fixture
    def indexed(self, state):
        state.radarr_data.indexers.set_items(
            [Indexer.from_json(indexer_json(1, "Alpha")), Indexer.from_json(indexer_json(2, "Beta"))]
        )
        return state

    def test_single_test_success_clears_error(self, indexed):
        deliver(indexed, NetworkResult(E.TEST_INDEXER, None))
        assert indexed.radarr_data.indexer_test_error == ""

    def test_single_test_failure_stays_in_popup(self, indexed):
        deliver(indexed, NetworkError(E.TEST_INDEXER, "Request failed. bad key", 400, "[]"))
        assert indexed.radarr_data.indexer_test_error == "Request failed. bad key"
        assert indexed.error.text == ""

    def test_all_results_named(self, indexed):
        payload = [{"id": 1, "isValid": True}, {"id": 2, "isValid": False}]
        deliver(indexed, NetworkResult(E.TEST_ALL_INDEXERS, payload))
        results = indexed.radarr_data.indexer_test_all_results.items
        assert [(r.name, r.is_valid) for r in results] == [("Alpha", True), ("Beta", False)]

    def test_all_400_body_is_results(self, indexed):
        body = json.dumps([
            {"id": 2, "isValid": False, "validationFailures": [{"errorMessage": "Unable to connect"}]}
        ])
        deliver(indexed, NetworkError(E.TEST_ALL_INDEXERS, "Request failed.", 400, body))
        (result,) = indexed.radarr_data.indexer_test_all_results.items
        assert result.name == "Beta"
        assert result.failures == ["Unable to connect"]
        assert indexed.error.text == ""

    def test_all_other_failures_reported(self, indexed):
        deliver(indexed, NetworkError(E.TEST_ALL_INDEXERS, "Failed to send request. refused"))
        assert indexed.radarr_data.indexer_test_all_results.is_empty()
        assert indexed.error.text == "Failed to send request. refused"

    def test_test_sends_indexer_resource(self, indexed):
        request = build(indexed, E.TEST_INDEXER)
        assert request.path == "/indexer/test"
        assert request.body["name"] == "Alpha"


class TestSystem:
    def test_logs_reversed_and_scrolled_to_newest(self, state):
        payload = {
            "records": [
                {"time": "t2", "level": "info", "logger": "Api", "message": "second"},
                {"time": "t1", "level": "warn", "logger": "Api", "message": "first"},
            ]
        }
        deliver(state, NetworkResult(E.GET_LOGS, payload))
        logs = state.radarr_data.logs
        assert [line.text for line in logs.items] == ["t1|WARN|Api|first", "t2|INFO|Api|second"]
        assert logs.selected == 1

    def test_start_task(self, state):
        state.radarr_data.tasks.set_items([Task(name="Backup", task_name="Backup")])
        assert build(state, E.START_TASK) == Request("/command", body={"name": "Backup"})

    def test_updates_text(self, state):
        payload = [
            {
                "version": "5.3.0",
                "releaseDate": "2024-02-01T00:00:00Z",
                "latest": True,
                "changes": {"new": ["Faster"], "fixed": ["Crash"]},
            }
        ]
        deliver(state, NetworkResult(E.GET_UPDATES, payload))
        assert state.radarr_data.updates.get_text() == (
            "5.3.0 - 2024-02-01 (latest)\n"
            "---------------------------\n"
            "New:\n"
            "  * Faster\n"
            "Fixed:\n"
            "  * Crash"
        )


class TestMutations:
    def test_non_get_success_requests_refresh(self, state):
        deliver(state, NetworkResult(E.UPDATE_ALL_MOVIES, {"id": 1}))
        assert state.should_refresh

    def test_get_success_does_not(self, state):
        deliver(state, NetworkResult(E.GET_MOVIES, []))
        assert not state.should_refresh

    def test_delete_download_needs_selection(self, state):
        assert build(state, E.DELETE_DOWNLOAD) is None

    def test_movie_ids_from_selection(self, state):
        state.radarr_data.movies.set_items([Movie.from_json(movie_json(12))])
        assert build(state, E.UPDATE_AND_SCAN).body == {"name": "RefreshMovie", "movieIds": [12]}
