"""In-memory catalog cache for one browse session."""

import logging

from episodeguide.catalog.client import CatalogClient
from episodeguide.catalog.models import Episode, Show

logger = logging.getLogger(__name__)


class SessionCache:
    """Memoizes catalog reads for the lifetime of a session.

    The show list is fetched once and kept sorted by name. Episode lists are
    fetched lazily, once per show. Nothing is evicted and failed fetches are
    not remembered, so a later call retries.

    Example:
        >>> cache = SessionCache(catalog)
        >>> episodes = await cache.get_episodes(82)  # network
        >>> episodes = await cache.get_episodes(82)  # memory
    """

    def __init__(self, client: CatalogClient) -> None:
        self.client = client
        self._shows: list[Show] | None = None
        self._episodes: dict[int, list[Episode]] = {}
        self.fetch_count = 0

    async def get_shows(self) -> list[Show]:
        """Get all shows sorted case-insensitively by name.

        Raises:
            NetworkError: If the catalog cannot be read
        """
        if self._shows is not None:
            return self._shows

        self.fetch_count += 1
        shows = await self.client.list_shows()
        # sorted() is stable, so names equal under case folding keep catalog order
        self._shows = sorted(shows, key=lambda show: show.name.casefold())
        logger.info(f"Cached {len(self._shows)} shows")
        return self._shows

    async def get_episodes(self, show_id: int) -> list[Episode]:
        """Get the episodes of a show in catalog order.

        Raises:
            NetworkError: If the catalog cannot be read
        """
        cached = self._episodes.get(show_id)
        if cached is not None:
            logger.debug(f"Episodes for show {show_id} served from cache")
            return cached

        self.fetch_count += 1
        episodes = await self.client.list_episodes(show_id)
        self._episodes[show_id] = episodes
        logger.info(f"Cached {len(episodes)} episodes for show {show_id}")
        return episodes

    def is_cached(self, show_id: int) -> bool:
        """Check whether episodes for show_id are already in memory."""
        return show_id in self._episodes

    def find_show(self, show_id: int) -> Show | None:
        """Look up a show in the cached show list without fetching."""
        if self._shows is None:
            return None
        for show in self._shows:
            if show.id == show_id:
                return show
        return None
