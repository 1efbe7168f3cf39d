"""View-models, renderers and the rich console adapter."""

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
from episodeguide.view.renderer import (
    render_episode_cards,
    render_episode_options,
    render_error,
    render_page,
    render_show_options,
    render_status,
)

__all__ = [
    "ALL_EPISODES",
    "PLACEHOLDER_IMAGE_URL",
    "EpisodeCard",
    "ErrorNotice",
    "Link",
    "PageView",
    "SelectOption",
    "StatusLine",
    "render_episode_cards",
    "render_episode_options",
    "render_error",
    "render_page",
    "render_show_options",
    "render_status",
]
