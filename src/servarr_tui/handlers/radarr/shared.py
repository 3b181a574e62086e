"""The shared screens, bound to the Radarr domain."""

from __future__ import annotations

from servarr_tui.app.radarr import RADARR
from servarr_tui.handlers.shared.blocklist import BlocklistHandler
from servarr_tui.handlers.shared.downloads import DownloadsHandler
from servarr_tui.handlers.shared.edit_indexer import EditIndexerHandler
from servarr_tui.handlers.shared.indexers import IndexersHandler
from servarr_tui.handlers.shared.root_folders import RootFoldersHandler
from servarr_tui.handlers.shared.system import SystemHandler


class RadarrDownloadsHandler(DownloadsHandler):
    DOMAIN = RADARR


class RadarrBlocklistHandler(BlocklistHandler):
    DOMAIN = RADARR


class RadarrRootFoldersHandler(RootFoldersHandler):
    DOMAIN = RADARR


class RadarrIndexersHandler(IndexersHandler):
    DOMAIN = RADARR


class RadarrEditIndexerHandler(EditIndexerHandler):
    DOMAIN = RADARR


class RadarrSystemHandler(SystemHandler):
    DOMAIN = RADARR


SHARED_HANDLERS = (
    RadarrDownloadsHandler,
    RadarrBlocklistHandler,
    RadarrRootFoldersHandler,
    RadarrIndexersHandler,
    RadarrEditIndexerHandler,
    RadarrSystemHandler,
)
