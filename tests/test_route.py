"""Tests for routes and the navigation stack."""

import pytest

from servarr_tui.models.route import NavigationStack, Route
from servarr_tui.models.servarr_data.radarr_data import ActiveRadarrBlock
from servarr_tui.models.servarr_data.sonarr_data import ActiveSonarrBlock

B = ActiveRadarrBlock


class TestRoute:
    def test_bare_route(self):
        route = Route(B.MOVIES)
        assert route.context is None
        assert route.family is ActiveRadarrBlock

    def test_context_must_share_family(self):
        with pytest.raises(TypeError):
            Route(B.MOVIES, ActiveSonarrBlock.SERIES)

    def test_routes_are_values(self):
        assert Route(B.DELETE_MOVIE_PROMPT, B.MOVIES) == Route(B.DELETE_MOVIE_PROMPT, B.MOVIES)
        assert Route(B.MOVIES).with_context(B.COLLECTIONS) == Route(B.MOVIES, B.COLLECTIONS)


class TestNavigationStack:
    def test_push_then_pop_restores(self):
        stack = NavigationStack(B.MOVIES)
        stack.push(Route(B.MOVIE_DETAILS))
        assert stack.current.block is B.MOVIE_DETAILS
        assert stack.pop() == Route(B.MOVIE_DETAILS)
        assert stack.current == Route(B.MOVIES)

    def test_pop_on_root_is_noop(self):
        stack = NavigationStack(B.MOVIES)
        assert stack.pop() is None
        assert len(stack) == 1
        assert stack.current == Route(B.MOVIES)

    def test_pop_and_push_replaces_top_only(self):
        stack = NavigationStack(B.MOVIES)
        stack.push(B.SEARCH_MOVIE)
        stack.pop_and_push(B.SEARCH_MOVIE_ERROR)
        assert [route.block for route in stack] == [B.MOVIES, B.SEARCH_MOVIE_ERROR]

    def test_pop_and_push_on_root(self):
        stack = NavigationStack(B.MOVIES)
        stack.pop_and_push(B.COLLECTIONS)
        assert stack.root == Route(B.COLLECTIONS)
        assert len(stack) == 1

    def test_reset_and_contains(self):
        stack = NavigationStack(B.MOVIES)
        stack.push(B.MOVIE_DETAILS)
        assert stack.contains(B.MOVIE_DETAILS)
        stack.reset(B.DOWNLOADS)
        assert not stack.contains(B.MOVIE_DETAILS)
        assert stack.current.block is B.DOWNLOADS
