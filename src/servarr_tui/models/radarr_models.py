"""Radarr resource types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from servarr_tui.models.servarr_models import JsonDict, _hst, _int
from servarr_tui.models.text import HorizontallyScrollableText


class MinimumAvailability(Enum):
    TBA = "tba"
    ANNOUNCED = "announced"
    IN_CINEMAS = "inCinemas"
    RELEASED = "released"

    @property
    def display(self) -> str:
        return {
            MinimumAvailability.TBA: "TBA",
            MinimumAvailability.ANNOUNCED: "Announced",
            MinimumAvailability.IN_CINEMAS: "In Cinemas",
            MinimumAvailability.RELEASED: "Released",
        }[self]

    @classmethod
    def parse(cls, raw: object) -> MinimumAvailability:
        try:
            return cls(str(raw))
        except ValueError:
            return cls.ANNOUNCED


class Monitor(Enum):
    MOVIE_ONLY = "movieOnly"
    MOVIE_AND_COLLECTION = "movieAndCollection"
    NONE = "none"

    @property
    def display(self) -> str:
        return {
            Monitor.MOVIE_ONLY: "Movie only",
            Monitor.MOVIE_AND_COLLECTION: "Movie and Collection",
            Monitor.NONE: "None",
        }[self]


@dataclass
class Movie:
    id: int = 0
    title: HorizontallyScrollableText = field(default_factory=HorizontallyScrollableText)
    tmdb_id: int = 0
    year: int = 0
    runtime: int = 0
    status: str = ""
    overview: str = ""
    path: str = ""
    studio: str = ""
    genres: list[str] = field(default_factory=list)
    certification: str = ""
    monitored: bool = False
    has_file: bool = False
    size_on_disk: int = 0
    quality_profile_id: int = 0
    minimum_availability: MinimumAvailability = MinimumAvailability.ANNOUNCED
    tags: list[int] = field(default_factory=list)
    movie_file: JsonDict | None = None
    raw: JsonDict = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_json(cls, data: JsonDict) -> Movie:
        return cls(
            id=_int(data.get("id")),
            title=_hst(data.get("title")),
            tmdb_id=_int(data.get("tmdbId")),
            year=_int(data.get("year")),
            runtime=_int(data.get("runtime")),
            status=str(data.get("status", "")),
            overview=str(data.get("overview") or ""),
            path=str(data.get("path") or ""),
            studio=str(data.get("studio") or ""),
            genres=[str(g) for g in data.get("genres") or []],
            certification=str(data.get("certification") or ""),
            monitored=bool(data.get("monitored", False)),
            has_file=bool(data.get("hasFile", False)),
            size_on_disk=_int(data.get("sizeOnDisk")),
            quality_profile_id=_int(data.get("qualityProfileId")),
            minimum_availability=MinimumAvailability.parse(data.get("minimumAvailability")),
            tags=[_int(t) for t in data.get("tags") or []],
            movie_file=data.get("movieFile") if isinstance(data.get("movieFile"), dict) else None,
            raw=dict(data),
        )


@dataclass
class CollectionMovie:
    title: HorizontallyScrollableText = field(default_factory=HorizontallyScrollableText)
    tmdb_id: int = 0
    year: int = 0
    runtime: int = 0
    overview: str = ""
    genres: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: JsonDict) -> CollectionMovie:
        return cls(
            title=_hst(data.get("title")),
            tmdb_id=_int(data.get("tmdbId")),
            year=_int(data.get("year")),
            runtime=_int(data.get("runtime")),
            overview=str(data.get("overview") or ""),
            genres=[str(g) for g in data.get("genres") or []],
        )


@dataclass
class Collection:
    id: int = 0
    title: HorizontallyScrollableText = field(default_factory=HorizontallyScrollableText)
    root_folder_path: str = ""
    search_on_add: bool = False
    monitored: bool = False
    overview: str = ""
    quality_profile_id: int = 0
    minimum_availability: MinimumAvailability = MinimumAvailability.ANNOUNCED
    movies: list[CollectionMovie] = field(default_factory=list)
    raw: JsonDict = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_json(cls, data: JsonDict) -> Collection:
        return cls(
            id=_int(data.get("id")),
            title=_hst(data.get("title")),
            root_folder_path=str(data.get("rootFolderPath") or ""),
            search_on_add=bool(data.get("searchOnAdd", False)),
            monitored=bool(data.get("monitored", False)),
            overview=str(data.get("overview") or ""),
            quality_profile_id=_int(data.get("qualityProfileId")),
            minimum_availability=MinimumAvailability.parse(data.get("minimumAvailability")),
            movies=[CollectionMovie.from_json(m) for m in data.get("movies") or []],
            raw=dict(data),
        )


@dataclass
class AddMovieSearchResult:
    tmdb_id: int = 0
    title: HorizontallyScrollableText = field(default_factory=HorizontallyScrollableText)
    year: int = 0
    runtime: int = 0
    status: str = ""
    overview: str = ""
    genres: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: JsonDict) -> AddMovieSearchResult:
        return cls(
            tmdb_id=_int(data.get("tmdbId")),
            title=_hst(data.get("title")),
            year=_int(data.get("year")),
            runtime=_int(data.get("runtime")),
            status=str(data.get("status", "")),
            overview=str(data.get("overview") or ""),
            genres=[str(g) for g in data.get("genres") or []],
        )


@dataclass
class Credit:
    person_name: str = ""
    character: str = ""
    department: str = ""
    job: str = ""
    credit_type: str = "cast"

    @classmethod
    def from_json(cls, data: JsonDict) -> Credit:
        return cls(
            person_name=str(data.get("personName", "")),
            character=str(data.get("character") or ""),
            department=str(data.get("department") or ""),
            job=str(data.get("job") or ""),
            credit_type=str(data.get("type", "cast")).lower(),
        )


@dataclass
class MovieHistoryItem:
    source_title: HorizontallyScrollableText = field(default_factory=HorizontallyScrollableText)
    event_type: str = ""
    quality: str = ""
    date: str = ""

    @classmethod
    def from_json(cls, data: JsonDict) -> MovieHistoryItem:
        quality = data.get("quality") or {}
        name = quality.get("quality", {}).get("name", "") if isinstance(quality, dict) else ""
        return cls(
            source_title=_hst(data.get("sourceTitle")),
            event_type=str(data.get("eventType", "")),
            quality=str(name),
            date=str(data.get("date", "")),
        )


@dataclass
class Release:
    guid: str = ""
    title: HorizontallyScrollableText = field(default_factory=HorizontallyScrollableText)
    protocol: str = ""
    indexer: str = ""
    indexer_id: int = 0
    age: int = 0
    size: int = 0
    rejected: bool = False
    rejections: list[str] = field(default_factory=list)
    seeders: int | None = None
    leechers: int | None = None

    @classmethod
    def from_json(cls, data: JsonDict) -> Release:
        return cls(
            guid=str(data.get("guid", "")),
            title=_hst(data.get("title")),
            protocol=str(data.get("protocol", "")),
            indexer=str(data.get("indexer", "")),
            indexer_id=_int(data.get("indexerId")),
            age=_int(data.get("age")),
            size=_int(data.get("size")),
            rejected=bool(data.get("rejected", False)),
            rejections=[str(r) for r in data.get("rejections") or []],
            seeders=_int(data["seeders"]) if data.get("seeders") is not None else None,
            leechers=_int(data["leechers"]) if data.get("leechers") is not None else None,
        )
