"""Episode search and selection."""

from collections.abc import Sequence

from episodeguide.catalog.models import Episode


def matches(episode: Episode, query: str) -> bool:
    """Check whether an episode matches a free-text query.

    Case-insensitive substring match against the name and the raw summary
    markup. A missing summary counts as empty.
    """
    needle = query.casefold()
    if needle in episode.name.casefold():
        return True
    return needle in (episode.summary or "").casefold()


def filter_episodes(episodes: Sequence[Episode], query: str) -> list[Episode]:
    """Return the episodes that match query, in their original order.

    An empty query matches every episode.

    Args:
        episodes: Episodes to search
        query: Free text typed by the user

    Returns:
        New list holding the matching episodes (the same objects, not copies)
    """
    if not query:
        return list(episodes)
    return [episode for episode in episodes if matches(episode, query)]


def find_by_code(episodes: Sequence[Episode], code: str) -> Episode | None:
    """Return the first episode whose code equals code, or None.

    Comparison is exact, so "s01e02" does not match "S01E02".
    """
    for episode in episodes:
        if episode.code == code:
            return episode
    return None
