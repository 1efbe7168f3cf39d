"""Configuration schema models using Pydantic."""

from typing import Literal

from pydantic import BaseModel, Field, HttpUrl

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
ThemeName = Literal["auto", "light", "dark"]

TVMAZE_API_URL = "https://api.tvmaze.com"

# Game of Thrones on TVMaze
DEFAULT_SHOW_ID = 82


class GlobalConfig(BaseModel):
    """Global episodeguide configuration."""

    version: str = "1"
    api_base_url: HttpUrl = HttpUrl(TVMAZE_API_URL)
    default_show_id: int = Field(default=DEFAULT_SHOW_ID, gt=0)
    request_timeout: float = Field(default=10.0, gt=0)
    log_level: LogLevel = "WARNING"
    theme: ThemeName = "auto"

    @property
    def api_base(self) -> str:
        """Base URL without a trailing slash, ready for path joining."""
        return str(self.api_base_url).rstrip("/")
