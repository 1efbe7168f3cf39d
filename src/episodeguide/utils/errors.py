"""Custom exceptions for episodeguide."""


class EpisodeGuideError(Exception):
    """Base exception for all episodeguide errors."""

    pass


class ConfigError(EpisodeGuideError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class NetworkError(EpisodeGuideError):
    """A catalog request failed.

    Raised for both transport failures and error responses; the two causes
    are told apart by subclass.
    """

    pass


class CatalogStatusError(NetworkError):
    """The catalog answered with a non-success HTTP status."""

    def __init__(self, status_code: int, url: str) -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"Catalog returned HTTP {status_code} for {url}")


class CatalogTransportError(NetworkError):
    """The request never produced a usable response.

    Covers connection failures, timeouts and bodies that cannot be decoded.
    """

    pass
