"""Tests for the browse controller state machine."""

import asyncio

import pytest

from episodeguide.session.cache import SessionCache
from episodeguide.session.controller import (
    BrowseController,
    BrowseSession,
    NoShowSelected,
    ShowFailed,
    ShowLoaded,
    ShowLoading,
)
from episodeguide.utils.errors import CatalogStatusError, CatalogTransportError
from episodeguide.view.models import ALL_EPISODES


@pytest.fixture
def controller(fake_catalog) -> BrowseController:
    return BrowseController(BrowseSession(cache=SessionCache(fake_catalog)))


def _is_subset_by_identity(displayed, episodes) -> bool:
    ids = {id(ep) for ep in episodes}
    return all(id(ep) in ids for ep in displayed)


class TestSelectShow:
    """Tests for selecting a show."""

    def test_initial_state(self, controller) -> None:
        """Test that a new session has nothing selected."""
        assert isinstance(controller.state, NoShowSelected)
        assert controller.current_episodes == ()

    @pytest.mark.asyncio
    async def test_loads_episodes(self, controller, twelve_episodes) -> None:
        """Test that selecting a show loads and displays all its episodes."""
        state = await controller.select_show(42)

        assert isinstance(state, ShowLoaded)
        assert state.show_id == 42
        assert list(state.episodes) == twelve_episodes
        assert controller.session.displayed == twelve_episodes

    @pytest.mark.asyncio
    async def test_loading_state_while_fetching(self, controller, fake_catalog) -> None:
        """Test that the session is in ShowLoading while the fetch is in flight."""
        gate = asyncio.Event()
        fake_catalog.gates[42] = gate

        task = asyncio.create_task(controller.select_show(42))
        await asyncio.sleep(0)

        assert controller.state == ShowLoading(42)
        assert controller.view().loading is True

        gate.set()
        await task
        assert isinstance(controller.state, ShowLoaded)

    @pytest.mark.asyncio
    async def test_cached_show_skips_loading(self, controller, fake_catalog) -> None:
        """Test that a cached show goes straight to ShowLoaded without fetching."""
        await controller.select_show(42)
        await controller.select_show(43)

        gate = asyncio.Event()
        fake_catalog.gates[42] = gate
        state = await controller.select_show(42)

        assert isinstance(state, ShowLoaded)
        assert fake_catalog.episode_calls == [42, 43]

    @pytest.mark.asyncio
    async def test_failure_moves_to_failed(self, controller) -> None:
        """Test that a network error becomes a ShowFailed state, not an exception."""
        state = await controller.select_show(404)

        assert isinstance(state, ShowFailed)
        assert state.show_id == 404
        assert "HTTP 404" in state.message
        assert controller.session.displayed == []

    @pytest.mark.asyncio
    async def test_reselect_after_failure_retries(self, controller, fake_catalog) -> None:
        """Test that selecting a failed show again retries the fetch."""
        fake_catalog.failures[42] = CatalogTransportError("offline")

        assert isinstance(await controller.select_show(42), ShowFailed)
        assert isinstance(await controller.select_show(42), ShowLoaded)
        assert fake_catalog.episode_calls == [42, 42]

    @pytest.mark.asyncio
    async def test_select_show_resets_filters(self, controller) -> None:
        """Test that switching shows clears the search and the episode selection."""
        await controller.select_show(42)
        controller.search("love")
        await controller.select_show(43)

        assert controller.session.search_text == ""
        assert controller.session.selected_episode == ALL_EPISODES
        assert [ep.name for ep in controller.session.displayed] == ["Beginnings", "Endings"]

    @pytest.mark.asyncio
    async def test_stale_response_does_not_replace_newer_show(
        self, controller, fake_catalog
    ) -> None:
        """Test that the most recently requested show keeps the screen."""
        slow = asyncio.Event()
        fake_catalog.gates[42] = slow

        first = asyncio.create_task(controller.select_show(42))
        await asyncio.sleep(0)
        await controller.select_show(43)
        slow.set()
        await first

        assert controller.state.show_id == 43
        assert [ep.name for ep in controller.session.displayed] == ["Beginnings", "Endings"]
        # The stale result is still cached for later
        assert controller.session.cache.is_cached(42)

    @pytest.mark.asyncio
    async def test_stale_failure_is_ignored(self, controller, fake_catalog) -> None:
        """Test that a late failure for an older request leaves the newer show alone."""
        slow = asyncio.Event()
        fake_catalog.gates[42] = slow
        fake_catalog.failures[42] = CatalogStatusError(500, "https://api.tvmaze.com/shows/42/episodes")

        first = asyncio.create_task(controller.select_show(42))
        await asyncio.sleep(0)
        await controller.select_show(43)
        slow.set()
        await first

        assert isinstance(controller.state, ShowLoaded)
        assert controller.state.show_id == 43


class TestSearch:
    """Tests for free-text search."""

    @pytest.mark.asyncio
    async def test_search_filters_full_list(self, controller) -> None:
        """Test that search filters the show's episodes and updates the status."""
        await controller.select_show(42)
        displayed = controller.search("love")

        assert [ep.number for ep in displayed] == [2, 7, 10]
        page = controller.view()
        assert page.status.text == "Showing 3 episodes of 12 total."
        assert page.search_text == "love"

    @pytest.mark.asyncio
    async def test_searches_do_not_compose(self, controller) -> None:
        """Test that each search runs against the full list, not the last result."""
        await controller.select_show(42)
        controller.search("love")
        displayed = controller.search("finale")

        assert [ep.name for ep in displayed] == ["Finale"]

    @pytest.mark.asyncio
    async def test_search_resets_episode_selection(self, controller) -> None:
        """Test that typing resets the episode selector to the sentinel."""
        await controller.select_show(42)
        controller.select_episode("S01E05")
        controller.search("storm")

        assert controller.session.selected_episode == ALL_EPISODES
        assert [ep.name for ep in controller.session.displayed] == ["The Storm"]

    @pytest.mark.asyncio
    async def test_no_match_status(self, controller) -> None:
        """Test the status line when nothing matches."""
        await controller.select_show(42)
        controller.search("xyznotfound")

        page = controller.view()
        assert page.cards == []
        assert page.status.text == "Showing 0 episodes of 12 total."

    @pytest.mark.asyncio
    async def test_displayed_is_subset_of_show(self, controller) -> None:
        """Test that displayed episodes are always the loaded show's own objects."""
        await controller.select_show(42)
        for query in ["love", "the", "", "xyz"]:
            controller.search(query)
            assert _is_subset_by_identity(controller.session.displayed, controller.current_episodes)

    def test_search_ignored_without_show(self, controller) -> None:
        """Test that search before any show is loaded does nothing."""
        assert controller.search("love") == []
        assert controller.session.search_text == ""
        assert isinstance(controller.state, NoShowSelected)


class TestSelectEpisode:
    """Tests for the episode selector."""

    @pytest.mark.asyncio
    async def test_select_single_episode(self, controller, twelve_episodes) -> None:
        """Test that choosing a code shows exactly that episode."""
        await controller.select_show(42)
        displayed = controller.select_episode("S01E04")

        assert len(displayed) == 1
        assert displayed[0] is controller.current_episodes[3]
        assert controller.view().status.text == "Showing 1 episode of 12 total."

    @pytest.mark.asyncio
    async def test_select_clears_search(self, controller) -> None:
        """Test that choosing an episode clears the search text."""
        await controller.select_show(42)
        controller.search("love")
        controller.select_episode("S01E01")

        assert controller.session.search_text == ""
        assert [ep.name for ep in controller.session.displayed] == ["Pilot"]

    @pytest.mark.asyncio
    async def test_select_all_after_search_restores_full_list(self, controller) -> None:
        """Test choosing "all" after typing "love" restores every episode."""
        await controller.select_show(42)
        controller.search("love")
        displayed = controller.select_episode(ALL_EPISODES)

        assert len(displayed) == 12
        page = controller.view()
        assert page.search_text == ""
        assert page.selected_episode == ALL_EPISODES
        assert page.status.text == "Showing 12 episodes of 12 total."

    @pytest.mark.asyncio
    async def test_unknown_code_shows_nothing(self, controller) -> None:
        """Test that an unknown code gives an empty list and a zero count."""
        await controller.select_show(42)
        displayed = controller.select_episode("S05E01")

        assert displayed == []
        assert controller.view().status.text == "Showing 0 episodes of 12 total."

    @pytest.mark.asyncio
    async def test_select_ignored_after_failure(self, controller) -> None:
        """Test that the episode selector does nothing in ShowFailed."""
        await controller.select_show(404)
        assert controller.select_episode("S01E01") == []
        assert isinstance(controller.state, ShowFailed)


class TestView:
    """Tests for page building."""

    def test_empty_page(self, controller) -> None:
        """Test the page before any show is selected."""
        page = controller.view()
        assert page.title is None
        assert page.cards == []
        assert page.status is None
        assert [opt.value for opt in page.episode_options] == [ALL_EPISODES]

    @pytest.mark.asyncio
    async def test_page_uses_show_name_when_known(self, controller) -> None:
        """Test that the title comes from the cached show list."""
        await controller.load_shows()
        await controller.select_show(42)

        page = controller.view()
        assert page.title == "Alpha"
        assert page.selected_show == "42"
        assert [opt.label for opt in page.show_options] == ["Alpha", "zeta"]

    @pytest.mark.asyncio
    async def test_page_title_fallback(self, controller) -> None:
        """Test the title when the show list was never loaded."""
        await controller.select_show(43)
        assert controller.view().title == "Show 43"

    @pytest.mark.asyncio
    async def test_failed_page_shows_error(self, controller) -> None:
        """Test that a failed load replaces cards and status with an error."""
        await controller.select_show(404)

        page = controller.view()
        assert page.error is not None
        assert page.error.message.startswith("Could not load episodes")
        assert page.cards == []
        assert page.status is None

    @pytest.mark.asyncio
    async def test_episode_options_follow_show(self, controller) -> None:
        """Test that the episode selector lists the loaded show's episodes."""
        await controller.select_show(43)

        labels = [opt.label for opt in controller.view().episode_options]
        assert labels == ["All episodes", "S01E01 - Beginnings", "S01E02 - Endings"]
