"""Browse session: cache, filtering and the controller state machine."""

from episodeguide.session.cache import SessionCache
from episodeguide.session.controller import (
    BrowseController,
    BrowseSession,
    BrowseState,
    NoShowSelected,
    ShowFailed,
    ShowLoaded,
    ShowLoading,
)
from episodeguide.session.filters import filter_episodes, find_by_code

__all__ = [
    "SessionCache",
    "BrowseController",
    "BrowseSession",
    "BrowseState",
    "NoShowSelected",
    "ShowFailed",
    "ShowLoaded",
    "ShowLoading",
    "filter_episodes",
    "find_by_code",
]
