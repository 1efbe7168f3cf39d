"""Browse controller: user events in, page views out.

The controller owns a BrowseSession, the explicit per-session context that
holds the catalog cache and the current view state. Loading a show is a
small state machine:

    NoShowSelected --select_show--> ShowLoading --ok--> ShowLoaded
                                               \\--error--> ShowFailed

select_show is accepted in every state (re-selecting a failed show retries).
search and select_episode are only meaningful once a show is loaded, and
each resets the other: they never combine.
"""

import logging
from dataclasses import dataclass, field

from episodeguide.catalog.models import Episode, Show
from episodeguide.session.cache import SessionCache
from episodeguide.session.filters import filter_episodes, find_by_code
from episodeguide.utils.errors import NetworkError
from episodeguide.view.models import ALL_EPISODES, PageView
from episodeguide.view.renderer import render_page

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NoShowSelected:
    """Nothing loaded yet."""


@dataclass(frozen=True)
class ShowLoading:
    """Episodes for show_id are being fetched."""

    show_id: int


@dataclass(frozen=True)
class ShowLoaded:
    """Episodes for show_id are available."""

    show_id: int
    episodes: tuple[Episode, ...]


@dataclass(frozen=True)
class ShowFailed:
    """Fetching show_id failed; message is shown instead of the cards."""

    show_id: int
    message: str


BrowseState = NoShowSelected | ShowLoading | ShowLoaded | ShowFailed

# Which states accept which events
TRANSITIONS: dict[str, tuple[type, ...]] = {
    "select_show": (NoShowSelected, ShowLoading, ShowLoaded, ShowFailed),
    "search": (ShowLoaded,),
    "select_episode": (ShowLoaded,),
}


@dataclass
class BrowseSession:
    """Everything one browse session remembers.

    The cache lives as long as the session; the rest describes what is on
    screen right now.
    """

    cache: SessionCache
    state: BrowseState = field(default_factory=NoShowSelected)
    shows: list[Show] = field(default_factory=list)
    search_text: str = ""
    selected_episode: str = ALL_EPISODES
    displayed: list[Episode] = field(default_factory=list)
    requested_show_id: int | None = None


class BrowseController:
    """Applies user events to a BrowseSession.

    Example:
        >>> controller = BrowseController(BrowseSession(cache=SessionCache(catalog)))
        >>> await controller.select_show(82)
        >>> controller.search("dragon")
        >>> page = controller.view()
    """

    def __init__(self, session: BrowseSession) -> None:
        self.session = session

    @property
    def state(self) -> BrowseState:
        return self.session.state

    @property
    def current_episodes(self) -> tuple[Episode, ...]:
        """Full episode list of the loaded show (empty if none is loaded)."""
        state = self.session.state
        if isinstance(state, ShowLoaded):
            return state.episodes
        return ()

    def _accepts(self, event: str) -> bool:
        if isinstance(self.session.state, TRANSITIONS[event]):
            return True
        logger.debug(f"Ignoring {event} in state {type(self.session.state).__name__}")
        return False

    async def load_shows(self) -> list[Show]:
        """Fill the show selector.

        Raises:
            NetworkError: If the show list cannot be fetched
        """
        self.session.shows = await self.session.cache.get_shows()
        return self.session.shows

    async def select_show(self, show_id: int) -> BrowseState:
        """Switch to a show, fetching its episodes unless already cached.

        A NetworkError moves the session to ShowFailed instead of raising.
        If another show was requested while this fetch was in flight, the
        result is cached but the newer request keeps the screen.

        Args:
            show_id: Catalog identifier of the show

        Returns:
            The resulting state
        """
        self._accepts("select_show")
        session = self.session
        session.requested_show_id = show_id
        session.search_text = ""
        session.selected_episode = ALL_EPISODES

        if not session.cache.is_cached(show_id):
            session.state = ShowLoading(show_id)
            session.displayed = []

        try:
            episodes = await session.cache.get_episodes(show_id)
        except NetworkError as e:
            if session.requested_show_id != show_id:
                logger.debug(f"Discarding stale failure for show {show_id}")
                return session.state
            logger.info(f"Loading show {show_id} failed: {e}")
            session.state = ShowFailed(show_id, f"Could not load episodes: {e}")
            session.displayed = []
            return session.state

        if session.requested_show_id != show_id:
            logger.debug(f"Discarding stale episodes for show {show_id}")
            return session.state

        session.state = ShowLoaded(show_id, tuple(episodes))
        session.displayed = list(episodes)
        return session.state

    def search(self, text: str) -> list[Episode]:
        """Filter the loaded show's full episode list by free text.

        Resets the episode selector to "all episodes".

        Returns:
            The episodes now displayed
        """
        if not self._accepts("search"):
            return self.session.displayed
        self.session.search_text = text
        self.session.selected_episode = ALL_EPISODES
        self.session.displayed = filter_episodes(self.current_episodes, text)
        return self.session.displayed

    def select_episode(self, code: str) -> list[Episode]:
        """Jump to one episode by code, or back to all with ALL_EPISODES.

        Clears the search text.

        Returns:
            The episodes now displayed
        """
        if not self._accepts("select_episode"):
            return self.session.displayed
        self.session.search_text = ""
        self.session.selected_episode = code

        if code == ALL_EPISODES:
            self.session.displayed = list(self.current_episodes)
        else:
            match = find_by_code(self.current_episodes, code)
            self.session.displayed = [match] if match is not None else []
        return self.session.displayed

    def show_title(self, show_id: int | None) -> str | None:
        if show_id is None:
            return None
        show = self.session.cache.find_show(show_id)
        return show.name if show is not None else f"Show {show_id}"

    def view(self) -> PageView:
        """Build the page for the current state."""
        session = self.session
        state = session.state
        show_id = getattr(state, "show_id", None)

        if isinstance(state, ShowFailed):
            error = state.message
        else:
            error = None

        return render_page(
            shows=session.shows,
            title=self.show_title(show_id),
            show_id=show_id,
            episodes=self.current_episodes,
            displayed=session.displayed,
            search_text=session.search_text,
            selected_episode=session.selected_episode,
            error=error,
            loading=isinstance(state, ShowLoading),
        )
