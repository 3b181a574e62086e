"""Search and filter on the library tables, driven through key routing."""

import pytest

from servarr_tui.app.key_bindings import Key
from servarr_tui.handlers.search_filter import strip_non_search_characters
from servarr_tui.models.servarr_data.radarr_data import ActiveRadarrBlock
from servarr_tui.models.servarr_data.sonarr_data import ActiveSonarrBlock
from tests.harness import current_block, movies, press, route_blocks, series, type_text

B = ActiveRadarrBlock


@pytest.fixture
def library(state):
    state.radarr_data.movies.set_items(movies("Apple", "Banana", "Spider-Man: No Way Home"))
    return state


class TestStripNonSearchCharacters:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            pytest.param("Spider-Man: No Way Home", "spiderman no way home", id="punctuation"),
            pytest.param("WALL·E", "walle", id="symbol"),
            pytest.param("Amélie", "amélie", id="accented"),
            pytest.param("千と千尋の神隠し", "千と千尋の神隠し", id="cjk"),
            pytest.param("snake_case", "snakecase", id="underscore"),
            pytest.param("", "", id="empty"),
        ],
    )
    def test_strips(self, raw, expected):
        assert strip_non_search_characters(raw) == expected


class TestSearch:
    def test_s_opens_search_and_suppresses_quit(self, library):
        press(library, "s")
        assert current_block(library) is B.SEARCH_MOVIE
        assert library.should_ignore_quit_key
        assert library.radarr_data.is_searching

    def test_match_selects_row_and_leaves_search(self, library):
        press(library, "s")
        type_text(library, "ban")
        press(library, Key.SUBMIT)
        assert route_blocks(library) == [B.MOVIES]
        assert library.radarr_data.movies.selected == 1
        assert library.radarr_data.search.is_empty()
        assert not library.should_ignore_quit_key

    def test_quit_key_is_text_while_searching(self, library):
        press(library, "s")
        type_text(library, "q")
        assert not library.should_quit
        assert library.radarr_data.search.text == "q"

    def test_punctuation_is_ignored(self, library):
        press(library, "s")
        type_text(library, "spiderman")
        press(library, Key.SUBMIT)
        assert library.radarr_data.movies.selected == 2

    def test_no_match_shows_error_then_any_key_returns(self, library):
        press(library, "s")
        type_text(library, "cherry")
        press(library, Key.SUBMIT)
        assert route_blocks(library) == [B.MOVIES, B.SEARCH_MOVIE_ERROR]
        assert library.radarr_data.movies.selected == 0
        press(library, "x")
        assert route_blocks(library) == [B.MOVIES]

    def test_esc_cancels(self, library):
        press(library, "s")
        type_text(library, "ban")
        press(library, Key.ESC)
        assert route_blocks(library) == [B.MOVIES]
        assert library.radarr_data.search.is_empty()
        assert library.radarr_data.movies.selected == 0

    def test_accented_query_matches(self, state):
        state.radarr_data.movies.set_items(movies("Banana", "Amélie"))
        press(state, "s")
        type_text(state, "é")
        press(state, Key.SUBMIT)
        assert route_blocks(state) == [B.MOVIES]
        assert state.radarr_data.movies.selected == 1

    def test_punctuation_only_query_keeps_cursor(self, library):
        library.radarr_data.movies.select_index(2)
        press(library, "s")
        type_text(library, "-:!")
        press(library, Key.SUBMIT)
        assert route_blocks(library) == [B.MOVIES]
        assert library.radarr_data.movies.selected == 2
        assert library.radarr_data.search.is_empty()
        assert not library.should_ignore_quit_key

    def test_backspace_edits_query(self, library):
        press(library, "s")
        type_text(library, "bax")
        press(library, Key.BACKSPACE)
        assert library.radarr_data.search.text == "ba"


class TestFilter:
    def test_filter_narrows_source(self, library):
        press(library, "f")
        type_text(library, "app")
        press(library, Key.SUBMIT)
        assert route_blocks(library) == [B.MOVIES]
        data = library.radarr_data
        assert [m.title.text for m in data.movies_view().items] == ["Apple"]
        assert len(data.movies) == 3
        assert data.filter.is_empty()
        assert not data.is_filtering

    def test_search_runs_on_filtered_view(self, library):
        press(library, "f")
        type_text(library, "a")
        press(library, Key.SUBMIT)
        press(library, "s")
        type_text(library, "ban")
        press(library, Key.SUBMIT)
        assert library.radarr_data.filtered_movies.current_selection().title.text == "Banana"

    def test_search_misses_rows_outside_filter(self, library):
        press(library, "f")
        type_text(library, "apple")
        press(library, Key.SUBMIT)
        press(library, "s")
        type_text(library, "banana")
        press(library, Key.SUBMIT)
        assert current_block(library) is B.SEARCH_MOVIE_ERROR

    def test_empty_filter_just_closes(self, library):
        press(library, "f", Key.SUBMIT)
        assert route_blocks(library) == [B.MOVIES]
        assert library.radarr_data.filtered_movies.is_empty()

    def test_accented_query_narrows(self, state):
        state.radarr_data.movies.set_items(movies("Amélie", "Banana", "Spirited Away"))
        press(state, "f")
        type_text(state, "é")
        press(state, Key.SUBMIT)
        assert route_blocks(state) == [B.MOVIES]
        assert [m.title.text for m in state.radarr_data.movies_view().items] == ["Amélie"]

    def test_punctuation_only_filter_just_closes(self, library):
        press(library, "f")
        type_text(library, "...")
        press(library, Key.SUBMIT)
        assert route_blocks(library) == [B.MOVIES]
        assert library.radarr_data.filtered_movies.is_empty()
        assert library.radarr_data.movies_view() is library.radarr_data.movies

    def test_no_match_empties_filtered_view(self, library):
        press(library, "f")
        type_text(library, "zzz")
        press(library, Key.SUBMIT)
        assert current_block(library) is B.FILTER_MOVIES_ERROR
        assert library.radarr_data.movies_view() is library.radarr_data.movies

    def test_esc_on_table_clears_filter_and_error(self, library):
        press(library, "f")
        type_text(library, "app")
        press(library, Key.SUBMIT)
        library.handle_error("boom")
        press(library, Key.ESC)
        assert library.radarr_data.filtered_movies.is_empty()
        assert library.error.is_empty()


class TestSonarrLibrary:
    def test_series_filter(self, sonarr_state):
        sonarr_state.sonarr_data.series.set_items(series("The Wire", "Succession"))
        press(sonarr_state, "f")
        type_text(sonarr_state, "wire")
        press(sonarr_state, Key.SUBMIT)
        assert route_blocks(sonarr_state) == [ActiveSonarrBlock.SERIES]
        assert [s.title.text for s in sonarr_state.sonarr_data.series_view().items] == ["The Wire"]
