"""Typed network events.

An event names one remote operation. Its request shape lives in the
per-domain request tables (radarr_network / sonarr_network); the dispatcher
and the handlers only ever deal in event identity.

Events for screens both servers have share member names, which is what lets
the shared handlers and shared request specs work on either enumeration.
"""

from enum import Enum


class RadarrEvent(Enum):
    ADD_MOVIE = "add_movie"
    ADD_ROOT_FOLDER = "add_root_folder"
    CLEAR_BLOCKLIST = "clear_blocklist"
    DELETE_BLOCKLIST_ITEM = "delete_blocklist_item"
    DELETE_DOWNLOAD = "delete_download"
    DELETE_INDEXER = "delete_indexer"
    DELETE_MOVIE = "delete_movie"
    DELETE_ROOT_FOLDER = "delete_root_folder"
    DOWNLOAD_RELEASE = "download_release"
    EDIT_COLLECTION = "edit_collection"
    EDIT_INDEXER = "edit_indexer"
    EDIT_MOVIE = "edit_movie"
    GET_BLOCKLIST = "get_blocklist"
    GET_COLLECTIONS = "get_collections"
    GET_DOWNLOADS = "get_downloads"
    GET_INDEXERS = "get_indexers"
    GET_LOGS = "get_logs"
    GET_MOVIE_CREDITS = "get_movie_credits"
    GET_MOVIE_DETAILS = "get_movie_details"
    GET_MOVIE_HISTORY = "get_movie_history"
    GET_MOVIES = "get_movies"
    GET_OVERVIEW = "get_overview"
    GET_QUALITY_PROFILES = "get_quality_profiles"
    GET_QUEUED_EVENTS = "get_queued_events"
    GET_RELEASES = "get_releases"
    GET_ROOT_FOLDERS = "get_root_folders"
    GET_STATUS = "get_status"
    GET_TAGS = "get_tags"
    GET_TASKS = "get_tasks"
    GET_UPDATES = "get_updates"
    SEARCH_NEW_MOVIE = "search_new_movie"
    START_TASK = "start_task"
    TEST_INDEXER = "test_indexer"
    TEST_ALL_INDEXERS = "test_all_indexers"
    TRIGGER_AUTOMATIC_SEARCH = "trigger_automatic_search"
    UPDATE_ALL_MOVIES = "update_all_movies"
    UPDATE_AND_SCAN = "update_and_scan"
    UPDATE_COLLECTIONS = "update_collections"
    UPDATE_DOWNLOADS = "update_downloads"


class SonarrEvent(Enum):
    ADD_ROOT_FOLDER = "add_root_folder"
    CLEAR_BLOCKLIST = "clear_blocklist"
    DELETE_BLOCKLIST_ITEM = "delete_blocklist_item"
    DELETE_DOWNLOAD = "delete_download"
    DELETE_INDEXER = "delete_indexer"
    DELETE_ROOT_FOLDER = "delete_root_folder"
    DELETE_SERIES = "delete_series"
    EDIT_INDEXER = "edit_indexer"
    GET_BLOCKLIST = "get_blocklist"
    GET_DOWNLOADS = "get_downloads"
    GET_EPISODES = "get_episodes"
    GET_INDEXERS = "get_indexers"
    GET_LOGS = "get_logs"
    GET_OVERVIEW = "get_overview"
    GET_QUALITY_PROFILES = "get_quality_profiles"
    GET_QUEUED_EVENTS = "get_queued_events"
    GET_ROOT_FOLDERS = "get_root_folders"
    GET_SERIES = "get_series"
    GET_STATUS = "get_status"
    GET_TAGS = "get_tags"
    GET_TASKS = "get_tasks"
    GET_UPDATES = "get_updates"
    START_TASK = "start_task"
    TEST_INDEXER = "test_indexer"
    TEST_ALL_INDEXERS = "test_all_indexers"
    TRIGGER_AUTOMATIC_SERIES_SEARCH = "trigger_automatic_series_search"
    UPDATE_ALL_SERIES = "update_all_series"
    UPDATE_DOWNLOADS = "update_downloads"
