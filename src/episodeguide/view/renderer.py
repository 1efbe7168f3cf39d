"""Stateless projections from catalog data to view-models."""

from collections.abc import Sequence

from episodeguide.catalog.models import Episode, Show
from episodeguide.utils.display import pluralize
from episodeguide.view.models import (
    ALL_EPISODES,
    PLACEHOLDER_IMAGE_URL,
    EpisodeCard,
    ErrorNotice,
    Link,
    PageView,
    SelectOption,
    StatusLine,
)

ALL_EPISODES_LABEL = "All episodes"


def episode_label(episode: Episode) -> str:
    """Label used for an episode in headings and selector options."""
    return f"{episode.code} - {episode.name}"


def render_episode_card(episode: Episode) -> EpisodeCard:
    return EpisodeCard(
        code=episode.code,
        heading=episode_label(episode),
        image_url=episode.image_url or PLACEHOLDER_IMAGE_URL,
        summary=episode.summary or "",
        link=Link(url=episode.url, text="View on TVMaze", new_window=True),
    )


def render_episode_cards(episodes: Sequence[Episode]) -> list[EpisodeCard]:
    """Build one card per episode, keeping order."""
    return [render_episode_card(episode) for episode in episodes]


def render_status(shown_count: int, total_count: int) -> StatusLine:
    """Build the status line, e.g. "Showing 3 episodes of 12 total."."""
    noun = pluralize(shown_count, "episode")
    return StatusLine(
        shown=shown_count,
        total=total_count,
        text=f"Showing {shown_count} {noun} of {total_count} total.",
    )


def render_show_options(shows: Sequence[Show]) -> list[SelectOption]:
    return [SelectOption(value=str(show.id), label=show.name) for show in shows]


def render_episode_options(episodes: Sequence[Episode]) -> list[SelectOption]:
    """Build episode selector options, led by the "all episodes" sentinel."""
    options = [SelectOption(value=ALL_EPISODES, label=ALL_EPISODES_LABEL)]
    options.extend(
        SelectOption(value=episode.code, label=episode_label(episode)) for episode in episodes
    )
    return options


def render_error(message: str) -> ErrorNotice:
    return ErrorNotice(message=message)


def render_page(
    *,
    shows: Sequence[Show] = (),
    title: str | None = None,
    show_id: int | None = None,
    episodes: Sequence[Episode] = (),
    displayed: Sequence[Episode] = (),
    search_text: str = "",
    selected_episode: str = ALL_EPISODES,
    error: str | None = None,
    loading: bool = False,
) -> PageView:
    """Assemble a full page.

    When error is set the card list and status line are replaced by the
    error notice; the selectors keep whatever was loaded before.

    Args:
        shows: Shows for the show selector
        title: Heading for the page, usually the show name
        show_id: Currently selected show
        episodes: Full episode list of the selected show
        displayed: Episodes to draw as cards
        search_text: Current search box content
        selected_episode: Current episode selector value
        error: Error message to show instead of the cards
        loading: Whether a fetch is in progress
    """
    if error is not None:
        cards: list[EpisodeCard] = []
        status = None
        notice = render_error(error)
    else:
        cards = render_episode_cards(displayed)
        if show_id is None or loading:
            status = None
        else:
            status = render_status(len(displayed), len(episodes))
        notice = None

    return PageView(
        title=title,
        show_options=render_show_options(shows),
        selected_show=str(show_id) if show_id is not None else None,
        search_text=search_text,
        episode_options=render_episode_options(episodes),
        selected_episode=selected_episode,
        cards=cards,
        status=status,
        error=notice,
        loading=loading,
    )
