"""Async HTTP client for the TVMaze catalog API."""

import logging
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from episodeguide.catalog.models import Episode, Show
from episodeguide.config.schema import TVMAZE_API_URL
from episodeguide.utils.errors import CatalogStatusError, CatalogTransportError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0

_SHOWS = TypeAdapter(list[Show])
_EPISODES = TypeAdapter(list[Episode])


class CatalogClient:
    """Reads shows and episodes from the remote catalog.

    Every call makes exactly one request. Failures raise a NetworkError
    subclass: CatalogStatusError when the catalog answers with a non-2xx
    status, CatalogTransportError when no usable response arrives.

    Example:
        >>> async with CatalogClient() as catalog:
        ...     shows = await catalog.list_shows()
    """

    def __init__(
        self,
        base_url: str = TVMAZE_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the catalog client.

        Args:
            base_url: Catalog API root, e.g. https://api.tvmaze.com
            timeout: Per-request timeout in seconds
            client: Optional preconfigured httpx client (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    async def __aenter__(self) -> "CatalogClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def list_shows(self) -> list[Show]:
        """Fetch every show in the catalog, in catalog order."""
        payload = await self._get_json("/shows")
        return self._decode(_SHOWS, payload, "/shows")

    async def list_episodes(self, show_id: int) -> list[Episode]:
        """Fetch all episodes of one show, in catalog order.

        Args:
            show_id: Catalog identifier of the show
        """
        path = f"/shows/{show_id}/episodes"
        payload = await self._get_json(path)
        return self._decode(_EPISODES, payload, path)

    def _http(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.timeout, follow_redirects=True)
            self._owns_client = True
        return self._client

    async def _get_json(self, path: str) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug(f"GET {url}")

        try:
            response = await self._http().get(url, timeout=self.timeout)
        except httpx.HTTPError as e:
            logger.warning(f"Request to {url} failed: {e}")
            raise CatalogTransportError(f"Could not reach catalog at {url}: {e}") from e

        if not response.is_success:
            logger.warning(f"Catalog returned HTTP {response.status_code} for {url}")
            raise CatalogStatusError(response.status_code, url)

        try:
            return response.json()
        except ValueError as e:
            logger.warning(f"Malformed JSON from {url}: {e}")
            raise CatalogTransportError(f"Malformed response from {url}") from e

    @staticmethod
    def _decode(adapter: TypeAdapter, payload: Any, path: str) -> Any:
        try:
            return adapter.validate_python(payload)
        except ValidationError as e:
            logger.warning(f"Unexpected catalog data from {path}: {e.error_count()} error(s)")
            raise CatalogTransportError(f"Unexpected data in catalog response for {path}") from e
