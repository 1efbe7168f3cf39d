"""Remote catalog access: models and HTTP client."""

from episodeguide.catalog.client import CatalogClient
from episodeguide.catalog.models import Episode, EpisodeImage, Show, episode_code

__all__ = ["CatalogClient", "Episode", "EpisodeImage", "Show", "episode_code"]
