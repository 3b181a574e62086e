"""Textual in-process test harness for servarr-tui.

Re-exports all public API for convenient imports:
    from tests.harness import run_app, press_and_settle, make_state, ...
"""

from tests.harness.app_runner import run_app
from tests.harness.interactions import (
    press_and_settle,
    press_sequence,
    resize_and_settle,
)
from tests.harness.assertions import (
    current_block,
    current_route,
    route_blocks,
    submitted,
    submitted_events,
)
from tests.harness.keys import press, type_text
from tests.harness.builders import (
    RecordingNetwork,
    collection_json,
    deliver,
    download_json,
    indexer_json,
    make_config,
    make_state,
    movie_json,
    movies,
    series,
    series_json,
)

__all__ = [
    "run_app",
    "press_and_settle",
    "press_sequence",
    "resize_and_settle",
    "press",
    "type_text",
    "current_block",
    "current_route",
    "route_blocks",
    "submitted",
    "submitted_events",
    "RecordingNetwork",
    "collection_json",
    "deliver",
    "download_json",
    "indexer_json",
    "make_config",
    "make_state",
    "movie_json",
    "movies",
    "series",
    "series_json",
]
