import json

import pytest

from pokedexcli.api import (
    FIRST_LOCATION_PAGE,
    ApiError,
    LocationPage,
    PokeApiClient,
    fetch_url,
)
from pokedexcli.cache import Cache


class FakeFetcher:
    def __init__(self, responses):
        self.responses = responses
        self.calls = []

    def __call__(self, url):
        self.calls.append(url)
        try:
            return self.responses[url]
        except KeyError:
            raise ApiError(f"no response for {url}")


@pytest.fixture
def cache():
    with Cache(60) as c:
        yield c


def _page(names, next_url=None, previous_url=None):
    return json.dumps(
        {
            "count": len(names),
            "next": next_url,
            "previous": previous_url,
            "results": [{"name": n, "url": f"http://example.com/{n}"} for n in names],
        }
    ).encode()


def test_location_page_defaults_to_first_page(cache):
    fetcher = FakeFetcher({FIRST_LOCATION_PAGE: _page(["a-area", "b-area"], "http://example.com/next")})
    client = PokeApiClient(cache, fetcher)
    page = client.location_page()
    assert page == LocationPage(("a-area", "b-area"), "http://example.com/next", None)
    assert fetcher.calls == [FIRST_LOCATION_PAGE]


def test_location_page_is_cached(cache):
    url = "http://example.com/page2"
    fetcher = FakeFetcher({url: _page(["c-area"], None, "http://example.com/page1")})
    client = PokeApiClient(cache, fetcher)
    first = client.location_page(url)
    second = client.location_page(url)
    assert first == second
    assert fetcher.calls == [url]
    assert cache.get(url) == fetcher.responses[url]


def test_location_page_uses_cached_body_without_fetching(cache):
    url = "http://example.com/cached"
    cache.add(url, _page(["x-area"]))
    fetcher = FakeFetcher({})
    page = PokeApiClient(cache, fetcher).location_page(url)
    assert page.names == ("x-area",)
    assert fetcher.calls == []


def test_location_page_bad_json_raises(cache):
    fetcher = FakeFetcher({FIRST_LOCATION_PAGE: b"Not Found"})
    with pytest.raises(ApiError):
        PokeApiClient(cache, fetcher).location_page()


def test_location_page_rejects_non_object(cache):
    fetcher = FakeFetcher({FIRST_LOCATION_PAGE: b"[1, 2]"})
    with pytest.raises(ApiError):
        PokeApiClient(cache, fetcher).location_page()


def test_location_area_lists_encounters(cache):
    body = json.dumps(
        {
            "name": "canalave-city-area",
            "pokemon_encounters": [
                {"pokemon": {"name": "tentacool"}},
                {"pokemon": {"name": "staryu"}},
            ],
        }
    ).encode()
    url = "https://pokeapi.co/api/v2/location-area/canalave-city-area"
    fetcher = FakeFetcher({url: body})
    client = PokeApiClient(cache, fetcher)
    assert client.location_area("canalave-city-area") == ["tentacool", "staryu"]
    client.location_area("canalave-city-area")
    assert fetcher.calls == [url, url]


def test_pokemon_lowercases_name(cache):
    url = "https://pokeapi.co/api/v2/pokemon/pikachu"
    record = {"name": "pikachu", "base_experience": 112}
    fetcher = FakeFetcher({url: json.dumps(record).encode()})
    assert PokeApiClient(cache, fetcher).pokemon("PikaChu") == record


def test_pokemon_unknown_raises(cache):
    url = "https://pokeapi.co/api/v2/pokemon/nothing"
    fetcher = FakeFetcher({url: b"Not Found"})
    with pytest.raises(ApiError):
        PokeApiClient(cache, fetcher).pokemon("nothing")


def test_fetch_url_reads_file(tmp_path):
    path = tmp_path / "page.json"
    content = _page(["a-area"])
    path.write_bytes(content)
    assert fetch_url(path.as_uri()) == content


def test_fetch_url_missing_file_raises(tmp_path):
    with pytest.raises(ApiError):
        fetch_url((tmp_path / "missing.json").as_uri())