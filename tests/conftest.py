"""Pytest configuration and shared fixtures for servarr-tui tests."""

import pytest

import servarr_tui.io.logging_setup
from tests.harness.builders import make_state


# ---------------------------------------------------------------------------
# State fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def state():
    """Radarr-only AppState past its first render, with a RecordingNetwork."""
    return make_state()


@pytest.fixture
def sonarr_state():
    """Sonarr-only AppState past its first render."""
    return make_state(radarr=False, sonarr=True)


@pytest.fixture
def both_state():
    """Radarr and Sonarr both configured; Radarr is the active server."""
    return make_state(sonarr=True)


# ---------------------------------------------------------------------------
# Environment isolation
# ---------------------------------------------------------------------------

@pytest.fixture
def config_path(tmp_path, monkeypatch):
    """Point SERVARR_TUI_CONFIG at a temp file that does not exist yet."""
    path = tmp_path / "servarr-tui" / "config.json"
    monkeypatch.setenv("SERVARR_TUI_CONFIG", str(path))
    return path


@pytest.fixture
def log_dir(tmp_path, monkeypatch):
    """Send log files to a temp dir and undo logging setup afterwards."""
    directory = tmp_path / "logs"
    monkeypatch.setenv(servarr_tui.io.logging_setup.LOG_DIR_ENV, str(directory))
    servarr_tui.io.logging_setup.reset()
    yield directory
    servarr_tui.io.logging_setup.reset()
