"""Shared test fixtures for episodeguide."""

import asyncio
import json
import logging
from collections.abc import Callable, Iterator
from typing import Any

import httpx
import pytest
from rich.logging import RichHandler

from episodeguide.catalog.models import Episode, EpisodeImage, Show
from episodeguide.utils.errors import CatalogStatusError


def make_episode(
    season: int = 1,
    number: int = 1,
    name: str = "Pilot",
    summary: str | None = "<p>An episode.</p>",
    image: str | None = "https://static.tvmaze.com/uploads/images/medium_landscape/1/1.jpg",
    url: str | None = None,
) -> Episode:
    """Build an Episode with sensible defaults."""
    return Episode(
        id=season * 1000 + number,
        season=season,
        number=number,
        name=name,
        summary=summary,
        image=EpisodeImage(medium=image, original=image) if image else None,
        url=url or f"https://www.tvmaze.com/episodes/{season * 1000 + number}",
    )


TWELVE_EPISODE_NAMES = [
    "Pilot",
    "Love Me Tender",
    "The Storm",
    "Homecoming",
    "Crossroads",
    "Midnight Train",
    "Lovers and Liars",
    "The Long Night",
    "Reunion",
    "Ashes",
    "Second Chances",
    "Finale",
]


@pytest.fixture
def twelve_episodes() -> list[Episode]:
    """A single-season show with 12 episodes.

    "love" matches episode 2 and 7 by name and episode 10 by summary.
    """
    episodes = []
    for number, name in enumerate(TWELVE_EPISODE_NAMES, start=1):
        summary = f"<p>Episode {number} of the season.</p>"
        if number == 10:
            summary = "<p>Old <b>LOVE</b> returns from the ashes.</p>"
        episodes.append(make_episode(season=1, number=number, name=name, summary=summary))
    return episodes


class FakeCatalog:
    """In-memory stand-in for CatalogClient that records calls.

    Args:
        shows: Shows returned by list_shows
        episodes: Episodes per show id
        failures: Exceptions raised once per show id (0 for list_shows)
    """

    def __init__(
        self,
        shows: list[Show] | None = None,
        episodes: dict[int, list[Episode]] | None = None,
        failures: dict[int, Exception] | None = None,
    ) -> None:
        self.shows = shows or []
        self.episodes = episodes or {}
        self.failures = failures or {}
        self.gates: dict[int, asyncio.Event] = {}
        self.show_calls = 0
        self.episode_calls: list[int] = []

    async def list_shows(self) -> list[Show]:
        self.show_calls += 1
        if 0 in self.failures:
            raise self.failures.pop(0)
        return list(self.shows)

    async def list_episodes(self, show_id: int) -> list[Episode]:
        self.episode_calls.append(show_id)
        if show_id in self.gates:
            await self.gates[show_id].wait()
        if show_id in self.failures:
            raise self.failures.pop(show_id)
        if show_id not in self.episodes:
            raise CatalogStatusError(404, f"https://api.tvmaze.com/shows/{show_id}/episodes")
        return list(self.episodes[show_id])


@pytest.fixture
def fake_catalog(twelve_episodes: list[Episode]) -> FakeCatalog:
    """Catalog with two shows; show 42 has twelve episodes, show 43 has two."""
    return FakeCatalog(
        shows=[Show(id=43, name="zeta"), Show(id=42, name="Alpha")],
        episodes={
            42: twelve_episodes,
            43: [
                make_episode(1, 1, "Beginnings"),
                make_episode(1, 2, "Endings"),
            ],
        },
    )


def episode_payload(episode: Episode) -> dict[str, Any]:
    """TVMaze-shaped JSON for an episode, including fields the models ignore."""
    return {
        "id": episode.id,
        "url": episode.url,
        "name": episode.name,
        "season": episode.season,
        "number": episode.number,
        "type": "regular",
        "airdate": "2011-04-17",
        "runtime": 60,
        "rating": {"average": 8.1},
        "image": (
            {"medium": episode.image.medium, "original": episode.image.original}
            if episode.image
            else None
        ),
        "summary": episode.summary,
        "_links": {"self": {"href": f"https://api.tvmaze.com/episodes/{episode.id}"}},
    }


CatalogRoutes = dict[str, Any]


def catalog_transport(routes: CatalogRoutes, calls: list[str] | None = None) -> httpx.MockTransport:
    """Build a mock transport serving JSON for request paths.

    A route value may be JSON-serializable data (200 response), an
    httpx.Response, or an exception instance to raise.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request.url.path)
        route = routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"name": "Not Found", "status": 404})
        if isinstance(route, Exception):
            raise route
        if isinstance(route, httpx.Response):
            return route
        return httpx.Response(200, content=json.dumps(route).encode(), headers={
            "content-type": "application/json"
        })

    return httpx.MockTransport(handler)


@pytest.fixture
def catalog_routes(twelve_episodes: list[Episode]) -> CatalogRoutes:
    """Default routes: two shows, show 42 with twelve episodes."""
    return {
        "/shows": [
            {"id": 43, "name": "zeta", "language": "English"},
            {"id": 42, "name": "Alpha", "language": "English"},
        ],
        "/shows/42/episodes": [episode_payload(ep) for ep in twelve_episodes],
    }


@pytest.fixture
def transport_factory() -> Callable[..., httpx.MockTransport]:
    return catalog_transport


@pytest.fixture
def episode_factory() -> Callable[..., Episode]:
    return make_episode


@pytest.fixture
def catalog_factory() -> type[FakeCatalog]:
    return FakeCatalog


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Remove handlers installed by setup_logging after each test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler, (RichHandler, logging.FileHandler)):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.NOTSET)
