"""Text helpers for terminal output."""


def truncate_text(text: str, max_length: int) -> str:
    """Shorten text to max_length characters, ending with an ellipsis.

    Args:
        text: Text to shorten
        max_length: Maximum length of the result, ellipsis included

    Returns:
        The original text if it fits, otherwise a truncated copy
    """
    if len(text) <= max_length:
        return text
    if max_length <= 3:
        return text[:max_length]
    return text[: max_length - 3] + "..."


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return singular when count is exactly 1, plural otherwise."""
    if count == 1:
        return singular
    return plural if plural is not None else f"{singular}s"
