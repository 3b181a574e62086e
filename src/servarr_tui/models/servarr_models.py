"""Resource types shared by every Servarr server (Radarr, Sonarr).

Only the fields the TUI reads are modelled; ``from_json`` ignores the rest.
Titles that appear in narrow table cells are HorizontallyScrollableText so the
selected row can marquee.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from servarr_tui.models.text import HorizontallyScrollableText

JsonDict = dict[str, object]


def _int(value: object, default: int = 0) -> int:
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default


def _hst(value: object) -> HorizontallyScrollableText:
    return HorizontallyScrollableText(str(value or ""))


class IndexerProtocol(Enum):
    TORRENT = "torrent"
    USENET = "usenet"

    @classmethod
    def parse(cls, raw: object) -> IndexerProtocol:
        try:
            return cls(str(raw).lower())
        except ValueError:
            return cls.USENET


@dataclass
class DiskSpace:
    free_space: int = 0
    total_space: int = 0

    @classmethod
    def from_json(cls, data: JsonDict) -> DiskSpace:
        return cls(_int(data.get("freeSpace")), _int(data.get("totalSpace")))


@dataclass
class RootFolder:
    id: int = 0
    path: str = ""
    accessible: bool = True
    free_space: int = 0

    @classmethod
    def from_json(cls, data: JsonDict) -> RootFolder:
        return cls(
            id=_int(data.get("id")),
            path=str(data.get("path", "")),
            accessible=bool(data.get("accessible", True)),
            free_space=_int(data.get("freeSpace")),
        )


@dataclass
class DownloadRecord:
    id: int = 0
    title: HorizontallyScrollableText = field(default_factory=HorizontallyScrollableText)
    status: str = ""
    size: int = 0
    sizeleft: int = 0
    output_path: str = ""
    indexer: str = ""
    download_client: str = ""

    @classmethod
    def from_json(cls, data: JsonDict) -> DownloadRecord:
        return cls(
            id=_int(data.get("id")),
            title=_hst(data.get("title")),
            status=str(data.get("status", "")),
            size=_int(data.get("size")),
            sizeleft=_int(data.get("sizeleft")),
            output_path=str(data.get("outputPath") or ""),
            indexer=str(data.get("indexer") or ""),
            download_client=str(data.get("downloadClient") or ""),
        )

    @property
    def progress(self) -> float:
        if self.size <= 0:
            return 0.0
        return 1.0 - (self.sizeleft / self.size)


@dataclass
class BlocklistItem:
    id: int = 0
    source_title: HorizontallyScrollableText = field(default_factory=HorizontallyScrollableText)
    protocol: str = ""
    indexer: str = ""
    date: str = ""

    @classmethod
    def from_json(cls, data: JsonDict) -> BlocklistItem:
        return cls(
            id=_int(data.get("id")),
            source_title=_hst(data.get("sourceTitle")),
            protocol=str(data.get("protocol", "")),
            indexer=str(data.get("indexer") or ""),
            date=str(data.get("date", "")),
        )


@dataclass
class Indexer:
    id: int = 0
    name: str = ""
    implementation: str = ""
    protocol: IndexerProtocol = IndexerProtocol.USENET
    enable_rss: bool = False
    enable_automatic_search: bool = False
    enable_interactive_search: bool = False
    priority: int = 25
    tags: list[int] = field(default_factory=list)
    fields: list[JsonDict] = field(default_factory=list)
    raw: JsonDict = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_json(cls, data: JsonDict) -> Indexer:
        return cls(
            id=_int(data.get("id")),
            name=str(data.get("name", "")),
            implementation=str(data.get("implementation", "")),
            protocol=IndexerProtocol.parse(data.get("protocol")),
            enable_rss=bool(data.get("enableRss", False)),
            enable_automatic_search=bool(data.get("enableAutomaticSearch", False)),
            enable_interactive_search=bool(data.get("enableInteractiveSearch", False)),
            priority=_int(data.get("priority"), 25),
            tags=[_int(t) for t in data.get("tags") or []],
            fields=list(data.get("fields") or []),
            raw=dict(data),
        )

    def field_value(self, name: str, default: object = None) -> object:
        for entry in self.fields:
            if entry.get("name") == name:
                return entry.get("value", default)
        return default


@dataclass
class Task:
    name: str = ""
    task_name: str = ""
    interval: int = 0
    last_execution: str = ""
    next_execution: str = ""

    @classmethod
    def from_json(cls, data: JsonDict) -> Task:
        return cls(
            name=str(data.get("name", "")),
            task_name=str(data.get("taskName", "")),
            interval=_int(data.get("interval")),
            last_execution=str(data.get("lastExecution", "")),
            next_execution=str(data.get("nextExecution", "")),
        )


@dataclass
class QueueEvent:
    id: int = 0
    name: str = ""
    command_name: str = ""
    status: str = ""
    queued: str = ""
    duration: str = ""

    @classmethod
    def from_json(cls, data: JsonDict) -> QueueEvent:
        return cls(
            id=_int(data.get("id")),
            name=str(data.get("name", "")),
            command_name=str(data.get("commandName", "")),
            status=str(data.get("status", "")),
            queued=str(data.get("queued", "")),
            duration=str(data.get("duration") or ""),
        )


def format_log_line(data: JsonDict) -> HorizontallyScrollableText:
    """One log record → one scrollable line: ``time|LEVEL|logger|message``."""
    level = str(data.get("level", "")).upper()
    message = data.get("message") or data.get("exception") or ""
    return HorizontallyScrollableText(
        f"{data.get('time', '')}|{level}|{data.get('logger', '')}|{message}"
    )


def id_name_map(records: list[JsonDict], name_key: str) -> dict[int, str]:
    """Quality profiles and tags arrive as [{id, <name_key>}]; index them by id."""
    return {_int(r.get("id")): str(r.get(name_key, "")) for r in records}


@dataclass
class IndexerTestResult:
    id: int = 0
    name: str = ""
    is_valid: bool = True
    failures: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: JsonDict, names: dict[int, str]) -> IndexerTestResult:
        indexer_id = _int(data.get("id"))
        return cls(
            id=indexer_id,
            name=names.get(indexer_id, str(indexer_id)),
            is_valid=bool(data.get("isValid", True)),
            failures=[
                str(failure.get("errorMessage", ""))
                for failure in data.get("validationFailures") or []
            ],
        )


def format_updates(records: list[JsonDict]) -> str:
    """Render the /update feed as plain text for a ScrollableText pane."""
    lines: list[str] = []
    for record in records:
        header = f"{record.get('version', '')} - {str(record.get('releaseDate', ''))[:10]}"
        if record.get("installed"):
            header += " (installed)"
        elif record.get("latest"):
            header += " (latest)"
        lines.append(header)
        lines.append("-" * len(header))
        changes = record.get("changes") or {}
        for kind in ("new", "fixed"):
            entries = changes.get(kind) or []
            if entries:
                lines.append(f"{kind.title()}:")
                lines.extend(f"  * {entry}" for entry in entries)
        lines.append("")
    return "\n".join(lines).rstrip("\n")


def convert_to_gb(size: int) -> float:
    return size / 1024**3


def convert_runtime(minutes: int) -> tuple[int, int]:
    """Runtime minutes → (hours, minutes)."""
    return divmod(minutes, 60)
