"""Config file I/O for servarr-tui.

One JSON file at XDG_CONFIG_HOME/servarr-tui/config.json holds the server
blocks and the tick cadence. ``--config`` or SERVARR_TUI_CONFIG point at a
different file.

    {
      "radarr": {"host": "localhost", "port": 7878, "api_token": "..."},
      "sonarr": {"uri": "https://tv.example.com", "api_token": "..."},
      "tick_rate_ms": 250,
      "tick_until_poll": 400
    }

A missing server block disables that server's tab.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from dataclasses import asdict, dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_ENV = "SERVARR_TUI_CONFIG"

DEFAULT_TICK_RATE_MS = 250
DEFAULT_TICK_UNTIL_POLL = 400

# [LAW:one-source-of-truth] Default API ports per server kind.
DEFAULT_PORTS = {"radarr": 7878, "sonarr": 8989}


@dataclass(frozen=True)
class ServerConfig:
    host: str = "localhost"
    port: int | None = None
    uri: str | None = None
    api_token: str = ""
    ssl: bool = False

    @classmethod
    def from_dict(cls, data: dict, default_port: int | None = None) -> ServerConfig:
        port = data.get("port", default_port)
        return cls(
            host=str(data.get("host", "localhost")),
            port=int(port) if port is not None else None,
            uri=data.get("uri") or None,
            api_token=str(data.get("api_token", "")),
            ssl=bool(data.get("ssl", False)),
        )

    @property
    def base_url(self) -> str:
        """``uri`` verbatim when set, else scheme://host[:port]."""
        if self.uri:
            return self.uri.rstrip("/")
        scheme = "https" if self.ssl else "http"
        if self.port is None:
            return f"{scheme}://{self.host}"
        return f"{scheme}://{self.host}:{self.port}"


@dataclass(frozen=True)
class Config:
    radarr: ServerConfig | None = None
    sonarr: ServerConfig | None = None
    tick_rate_ms: int = DEFAULT_TICK_RATE_MS
    tick_until_poll: int = DEFAULT_TICK_UNTIL_POLL

    @classmethod
    def from_dict(cls, data: dict) -> Config:
        servers = {}
        for name, port in DEFAULT_PORTS.items():
            block = data.get(name)
            servers[name] = ServerConfig.from_dict(block, port) if isinstance(block, dict) else None
        # No server configured at all: point at a local Radarr so the UI has a tab.
        if not any(servers.values()):
            servers["radarr"] = ServerConfig(port=DEFAULT_PORTS["radarr"])
        return cls(
            radarr=servers["radarr"],
            sonarr=servers["sonarr"],
            tick_rate_ms=max(int(data.get("tick_rate_ms", DEFAULT_TICK_RATE_MS)), 1),
            tick_until_poll=max(int(data.get("tick_until_poll", DEFAULT_TICK_UNTIL_POLL)), 1),
        )

    def to_dict(self) -> dict:
        """JSON-ready form; disabled servers are omitted."""
        data: dict = {"tick_rate_ms": self.tick_rate_ms, "tick_until_poll": self.tick_until_poll}
        for name in DEFAULT_PORTS:
            server = getattr(self, name)
            if server is not None:
                data[name] = asdict(server)
        return data


def get_config_path(override: str | None = None) -> Path:
    """Return path to the config file.

    Precedence: explicit override, SERVARR_TUI_CONFIG, then
    XDG_CONFIG_HOME (default ~/.config) / servarr-tui / config.json.
    """
    explicit = override or os.environ.get(CONFIG_ENV)
    if explicit:
        return Path(explicit).expanduser()
    config_home = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "servarr-tui" / "config.json"


def load_settings(path: Path) -> dict:
    """Load raw settings from JSON file. Returns empty dict on missing/corrupt file."""
    # [LAW:dataflow-not-control-flow] Always attempt read; empty dict is the "no data" value.
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("ignoring unreadable config %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def load_config(override: str | None = None) -> Config:
    path = get_config_path(override)
    try:
        return Config.from_dict(load_settings(path))
    except (TypeError, ValueError) as exc:
        logger.warning("invalid values in config %s (%s), using defaults", path, exc)
        return Config.from_dict({})


def save_settings(path: Path, data: dict) -> None:
    """Atomic write of settings dict to JSON file.

    Creates parent directories if needed. Writes to temp file then renames
    to avoid partial writes on crash.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
            f.write("\n")
        os.replace(tmp_path, path)
    except Exception:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise
