"""Data models for catalog shows and episodes."""

from pydantic import BaseModel, ConfigDict, Field


def episode_code(season: int, number: int) -> str:
    """Format season and episode numbers as an episode code.

    Both parts are zero-padded to at least two digits; larger values are
    kept whole, so ``episode_code(100, 5) == "S100E05"``.

    Example:
        >>> episode_code(1, 2)
        'S01E02'
    """
    return f"S{season:02d}E{number:02d}"


class Show(BaseModel):
    """A TV series from the catalog."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: str


class EpisodeImage(BaseModel):
    """Image URLs attached to an episode."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    medium: str | None = None
    original: str | None = None


class Episode(BaseModel):
    """A single episode of a show."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int | None = None
    season: int = Field(gt=0)
    number: int = Field(gt=0)
    name: str
    summary: str | None = None  # HTML from the catalog
    image: EpisodeImage | None = None
    url: str

    @property
    def code(self) -> str:
        """Episode code such as ``S01E02``."""
        return episode_code(self.season, self.number)

    @property
    def image_url(self) -> str | None:
        """Medium-size image URL if the catalog provides one."""
        if self.image is None:
            return None
        return self.image.medium
