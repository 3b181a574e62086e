"""Sonarr resource types."""

from __future__ import annotations

from dataclasses import dataclass, field

from servarr_tui.models.servarr_models import JsonDict, _hst, _int
from servarr_tui.models.text import HorizontallyScrollableText


@dataclass
class Season:
    season_number: int = 0
    monitored: bool = False
    episode_file_count: int = 0
    episode_count: int = 0
    size_on_disk: int = 0

    @classmethod
    def from_json(cls, data: JsonDict) -> Season:
        stats = data.get("statistics") or {}
        return cls(
            season_number=_int(data.get("seasonNumber")),
            monitored=bool(data.get("monitored", False)),
            episode_file_count=_int(stats.get("episodeFileCount")),
            episode_count=_int(stats.get("episodeCount")),
            size_on_disk=_int(stats.get("sizeOnDisk")),
        )

    @property
    def title(self) -> str:
        return "Specials" if self.season_number == 0 else f"Season {self.season_number}"


@dataclass
class Series:
    id: int = 0
    title: HorizontallyScrollableText = field(default_factory=HorizontallyScrollableText)
    year: int = 0
    status: str = ""
    network: str = ""
    overview: str = ""
    path: str = ""
    series_type: str = "standard"
    monitored: bool = False
    season_folder: bool = True
    quality_profile_id: int = 0
    tags: list[int] = field(default_factory=list)
    seasons: list[Season] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: JsonDict) -> Series:
        return cls(
            id=_int(data.get("id")),
            title=_hst(data.get("title")),
            year=_int(data.get("year")),
            status=str(data.get("status", "")),
            network=str(data.get("network") or ""),
            overview=str(data.get("overview") or ""),
            path=str(data.get("path") or ""),
            series_type=str(data.get("seriesType", "standard")),
            monitored=bool(data.get("monitored", False)),
            season_folder=bool(data.get("seasonFolder", True)),
            quality_profile_id=_int(data.get("qualityProfileId")),
            tags=[_int(t) for t in data.get("tags") or []],
            seasons=[Season.from_json(s) for s in data.get("seasons") or []],
        )


@dataclass
class Episode:
    id: int = 0
    series_id: int = 0
    season_number: int = 0
    episode_number: int = 0
    title: HorizontallyScrollableText = field(default_factory=HorizontallyScrollableText)
    air_date_utc: str = ""
    has_file: bool = False
    monitored: bool = False

    @classmethod
    def from_json(cls, data: JsonDict) -> Episode:
        return cls(
            id=_int(data.get("id")),
            series_id=_int(data.get("seriesId")),
            season_number=_int(data.get("seasonNumber")),
            episode_number=_int(data.get("episodeNumber")),
            title=_hst(data.get("title")),
            air_date_utc=str(data.get("airDateUtc") or ""),
            has_file=bool(data.get("hasFile", False)),
            monitored=bool(data.get("monitored", False)),
        )
