"""Declarative view-models describing what the browser shows.

These are plain immutable values. Renderer functions build them from
episodes and shows; the console adapter draws them.
"""

from dataclasses import dataclass, field

# Option value meaning "no episode selected, show everything"
ALL_EPISODES = "all"

PLACEHOLDER_IMAGE_URL = "https://static.tvmaze.com/images/no-img/no-img-portrait-text.png"

ATTRIBUTION_TEXT = "Data from TVMaze.com"
ATTRIBUTION_URL = "https://www.tvmaze.com/"


@dataclass(frozen=True)
class Link:
    """Outbound hyperlink."""

    url: str
    text: str
    new_window: bool = True


@dataclass(frozen=True)
class EpisodeCard:
    """One episode as displayed in the card list."""

    code: str
    heading: str
    image_url: str
    summary: str  # raw markup, interpreted when drawn
    link: Link


@dataclass(frozen=True)
class StatusLine:
    """Count of displayed episodes against the show total."""

    shown: int
    total: int
    text: str


@dataclass(frozen=True)
class SelectOption:
    """One entry of a selector control."""

    value: str
    label: str


@dataclass(frozen=True)
class ErrorNotice:
    """Plain-text error shown in place of the card list."""

    message: str


@dataclass(frozen=True)
class PageView:
    """Everything on screen, top to bottom."""

    title: str | None = None
    show_options: list[SelectOption] = field(default_factory=list)
    selected_show: str | None = None
    search_text: str = ""
    episode_options: list[SelectOption] = field(default_factory=list)
    selected_episode: str = ALL_EPISODES
    cards: list[EpisodeCard] = field(default_factory=list)
    status: StatusLine | None = None
    error: ErrorNotice | None = None
    loading: bool = False
    attribution: Link = field(
        default_factory=lambda: Link(url=ATTRIBUTION_URL, text=ATTRIBUTION_TEXT)
    )
