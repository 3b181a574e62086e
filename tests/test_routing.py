"""Key routing: block ownership and the global keys."""

import pytest

import servarr_tui.handlers.routing
from servarr_tui.app.key_bindings import Key, KeyPress
from servarr_tui.handlers.radarr.library import LibraryHandler
from servarr_tui.handlers.radarr.shared import RadarrDownloadsHandler
from servarr_tui.handlers.routing import HANDLERS, handle_events, handler_for
from servarr_tui.handlers.sonarr.shared import SonarrDownloadsHandler
from servarr_tui.models.servarr_data.radarr_data import ActiveRadarrBlock
from servarr_tui.models.servarr_data.sonarr_data import ActiveSonarrBlock
from tests.harness import current_block


class TestOwnership:
    @pytest.mark.parametrize(
        "block",
        [pytest.param(block, id=f"radarr-{block.name}") for block in ActiveRadarrBlock]
        + [pytest.param(block, id=f"sonarr-{block.name}") for block in ActiveSonarrBlock],
    )
    def test_every_block_has_an_owner(self, block):
        owner = handler_for(block)
        assert owner is not None
        assert owner.DOMAIN.blocks is type(block)

    def test_ownership_is_exclusive(self):
        owned = [block for handler in HANDLERS for block in handler.blocks()]
        assert len(owned) == len(set(owned))

    def test_overlap_is_rejected(self):
        with pytest.raises(ValueError, match="owned by both"):
            servarr_tui.handlers.routing._ownership((LibraryHandler, LibraryHandler))

    def test_shared_screens_have_one_handler_per_domain(self):
        assert handler_for(ActiveRadarrBlock.DOWNLOADS) is RadarrDownloadsHandler
        assert handler_for(ActiveSonarrBlock.DOWNLOADS) is SonarrDownloadsHandler


class TestGlobalKeys:
    def test_q_quits(self, state):
        handle_events(KeyPress.of("q"), state)
        assert state.should_quit

    def test_q_is_ignored_while_typing(self, state):
        state.should_ignore_quit_key = True
        handle_events(KeyPress.of("q"), state)
        assert not state.should_quit

    def test_ctrl_c_always_quits(self, state):
        state.should_ignore_quit_key = True
        handle_events(KeyPress(Key.CTRL_C), state)
        assert state.should_quit

    @pytest.mark.parametrize("key", [Key.TAB, Key.BACK_TAB])
    def test_tab_switches_server(self, both_state, key):
        handle_events(KeyPress(key), both_state)
        assert current_block(both_state) is ActiveSonarrBlock.SERIES

    def test_tab_is_ignored_while_typing(self, both_state):
        both_state.should_ignore_quit_key = True
        handle_events(KeyPress(Key.TAB), both_state)
        assert current_block(both_state) is ActiveRadarrBlock.MOVIES

    def test_unowned_block_logs_warning(self, state, monkeypatch, caplog):
        monkeypatch.setattr(servarr_tui.handlers.routing, "_OWNERS", {})
        handle_events(KeyPress(Key.DOWN), state)
        assert "no key handler owns" in caplog.text
