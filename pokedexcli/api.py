"""Client for the location and Pokémon endpoints of the PokéAPI."""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

import requests

from pokedexcli.cache import Cache

LOCATION_AREA_URL = "https://pokeapi.co/api/v2/location-area/"
POKEMON_URL = "https://pokeapi.co/api/v2/pokemon/"

_SEPARATOR = "--------------------------------\n"
_CACHE_HIT = "Cache hit!\n"

T = TypeVar("T")


class ApiError(Exception):
    """Raised when data cannot be fetched or decoded."""


@dataclass
class Config:
    """Pagination state for the location area listing."""

    next: str | None = None
    previous: str | None = None


@dataclass(frozen=True)
class LocationArea:
    name: str
    url: str


@dataclass(frozen=True)
class LocationAreas:
    count: int
    next: str
    previous: str | None
    results: tuple[LocationArea, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LocationAreas:
        return cls(
            count=data.get("count") or 0,
            next=data.get("next") or "",
            previous=data.get("previous"),
            results=tuple(
                LocationArea(name=item.get("name", ""), url=item.get("url", ""))
                for item in data.get("results") or ()
            ),
        )


@dataclass(frozen=True)
class LocationAreaInfo:
    name: str
    pokemon_encounters: tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> LocationAreaInfo:
        return cls(
            name=data.get("name", ""),
            pokemon_encounters=tuple(
                (encounter.get("pokemon") or {}).get("name", "")
                for encounter in data.get("pokemon_encounters") or ()
            ),
        )


@dataclass(frozen=True)
class Stat:
    name: str
    base_stat: int


@dataclass(frozen=True)
class Pokemon:
    name: str
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    stats: tuple[Stat, ...] = field(default_factory=tuple)
    types: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Pokemon:
        return cls(
            name=data.get("name", ""),
            base_experience=data.get("base_experience") or 0,
            height=data.get("height") or 0,
            weight=data.get("weight") or 0,
            stats=tuple(
                Stat(
                    name=(item.get("stat") or {}).get("name", ""),
                    base_stat=item.get("base_stat") or 0,
                )
                for item in data.get("stats") or ()
            ),
            types=tuple(
                (item.get("type") or {}).get("name", "")
                for item in data.get("types") or ()
            ),
        )


def _fetch(url: str, cache: Cache, status_message: str | None) -> tuple[bytes, bool]:
    """Return the body for ``url`` and whether it came from the cache.

    When ``status_message`` is given, responses above 299 raise an ApiError
    built from it.
    """
    cached = cache.get(url)
    if cached is not None:
        return cached, True
    try:
        response = requests.get(url, timeout=30)
    except requests.RequestException as exc:
        raise ApiError(f"error fetching data: {exc}") from exc
    if status_message is not None and response.status_code > 299:
        raise ApiError(status_message.format(code=response.status_code))
    data = response.content
    cache.add(url, data)
    return data, False


def _decode(data: bytes, parse: Callable[[dict[str, Any]], T]) -> T:
    try:
        decoded = json.loads(data)
        if not isinstance(decoded, dict):
            raise ValueError(f"expected a JSON object, got {type(decoded).__name__}")
        return parse(decoded)
    except (ValueError, TypeError, AttributeError) as exc:
        raise ApiError(f"error unmarshalling data: {exc}") from exc


def _footer(cache_hit: bool) -> str:
    return (_SEPARATOR + _CACHE_HIT if cache_hit else "") + _SEPARATOR


def get_location_areas(config: Config, url: str | None, cache: Cache) -> str:
    """Fetch one page of location areas, update ``config`` and return the listing."""
    if url is None:
        raise ApiError("cannot fetch location areas, URL is nil")
    data, hit = _fetch(url, cache, None)
    areas = _decode(data, LocationAreas.from_dict)

    config.next = areas.next
    config.previous = areas.previous

    listing = "".join(f"{area.name}\n" for area in areas.results)
    return listing + _footer(hit)


def get_location_area(url: str, cache: Cache) -> str:
    """Fetch one location area and return the Pokémon that can be met there."""
    data, hit = _fetch(url, cache, "bad status code: {code} - location not found")
    info = _decode(data, LocationAreaInfo.from_dict)

    lines = [f"Exploring {info.name}...\n", "Found Pokémon:\n"]
    lines.extend(f" - {name}\n" for name in info.pokemon_encounters)
    return "".join(lines) + _footer(hit)


def get_pokemon(pokemon_name: str, cache: Cache) -> Pokemon:
    """Fetch the details of one Pokémon by name."""
    url = f"{POKEMON_URL}{pokemon_name}/"
    data, _ = _fetch(url, cache, "bad status code: {code}")
    return _decode(data, Pokemon.from_dict)