"""Client for the PokéAPI endpoints the Pokedex uses."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from dataclasses import dataclass
from typing import Any, Callable

from pokedexcli.cache import Cache

BASE_URL = "https://pokeapi.co/api/v2"
FIRST_LOCATION_PAGE = f"{BASE_URL}/location-area/?limit=20"
REQUEST_TIMEOUT = 30.0

Fetcher = Callable[[str], bytes]


class ApiError(Exception):
    """Raised when a request fails or its response cannot be understood."""


@dataclass(frozen=True)
class LocationPage:
    """One page of location-area names with links to its neighbours."""

    names: tuple[str, ...]
    next: str | None = None
    previous: str | None = None


def fetch_url(url: str) -> bytes:
    """Return the body found at ``url``.

    An HTTP error status still yields its body, so that the caller sees
    whatever the server sent; failures to connect raise ApiError.
    """
    try:
        with urllib.request.urlopen(url, timeout=REQUEST_TIMEOUT) as response:
            return response.read()
    except urllib.error.HTTPError as exc:
        with exc:
            return exc.read()
    except (urllib.error.URLError, OSError, ValueError) as exc:
        raise ApiError(f"request to {url} failed: {exc}") from exc


def _decode_object(body: bytes, url: str) -> dict[str, Any]:
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ApiError(f"could not decode the response from {url}") from exc
    if not isinstance(data, dict):
        raise ApiError(f"unexpected response from {url}")
    return data


def _optional_str(value: Any) -> str | None:
    return value if isinstance(value, str) else None


class PokeApiClient:
    """Fetches location pages, location areas and Pokémon records."""

    def __init__(self, cache: Cache, fetcher: Fetcher | None = None) -> None:
        self.cache = cache
        self._fetch = fetcher if fetcher is not None else fetch_url

    def location_page(self, url: str | None = None) -> LocationPage:
        """Return the page of location areas at ``url``, or the first page.

        Raw responses are kept in the cache and reused while they last.
        """
        target = url or FIRST_LOCATION_PAGE
        body = self.cache.get(target)
        if body is None:
            body = self._fetch(target)
            self.cache.add(target, body)
        data = _decode_object(body, target)
        results = data.get("results")
        names = tuple(
            item["name"]
            for item in (results if isinstance(results, list) else [])
            if isinstance(item, dict) and isinstance(item.get("name"), str)
        )
        return LocationPage(
            names=names,
            next=_optional_str(data.get("next")),
            previous=_optional_str(data.get("previous")),
        )

    def location_area(self, name: str) -> list[str]:
        """Return the names of the Pokémon that can be met in an area."""
        url = f"{BASE_URL}/location-area/{name}"
        data = _decode_object(self._fetch(url), url)
        encounters = data.get("pokemon_encounters") or []
        if not isinstance(encounters, list):
            raise ApiError(f"unexpected response from {url}")
        return [
            (encounter.get("pokemon") or {}).get("name", "")
            for encounter in encounters
            if isinstance(encounter, dict)
        ]

    def pokemon(self, name: str) -> dict[str, Any]:
        """Return the full record of the named Pokémon."""
        url = f"{BASE_URL}/pokemon/{name.lower()}"
        return _decode_object(self._fetch(url), url)