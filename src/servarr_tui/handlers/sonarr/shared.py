"""The shared screens, bound to the Sonarr domain."""

from __future__ import annotations

from servarr_tui.app.sonarr import SONARR
from servarr_tui.handlers.shared.blocklist import BlocklistHandler
from servarr_tui.handlers.shared.downloads import DownloadsHandler
from servarr_tui.handlers.shared.edit_indexer import EditIndexerHandler
from servarr_tui.handlers.shared.indexers import IndexersHandler
from servarr_tui.handlers.shared.root_folders import RootFoldersHandler
from servarr_tui.handlers.shared.system import SystemHandler


class SonarrDownloadsHandler(DownloadsHandler):
    DOMAIN = SONARR


class SonarrBlocklistHandler(BlocklistHandler):
    DOMAIN = SONARR


class SonarrRootFoldersHandler(RootFoldersHandler):
    DOMAIN = SONARR


class SonarrIndexersHandler(IndexersHandler):
    DOMAIN = SONARR


class SonarrEditIndexerHandler(EditIndexerHandler):
    DOMAIN = SONARR


class SonarrSystemHandler(SystemHandler):
    DOMAIN = SONARR


SHARED_HANDLERS = (
    SonarrDownloadsHandler,
    SonarrBlocklistHandler,
    SonarrRootFoldersHandler,
    SonarrIndexersHandler,
    SonarrEditIndexerHandler,
    SonarrSystemHandler,
)
