"""Tests for the explorer search/pagination controller."""

from unittest.mock import Mock
import pytest

from explorer.controller import SearchController
from explorer.pagination import PageState
from fetchers.github import FetchError
from models.data_models import SearchResponse


@pytest.fixture
def fetcher(search_payload):
    """Mock fetcher returning two repos out of 100 for any request."""
    mock = Mock()
    mock.search_repositories.return_value = SearchResponse.model_validate(
        search_payload(count=2, total_count=100)
    )
    return mock


class TestNavigation:
    """Tests for page changes and searches."""

    def test_initial_state(self, fetcher):
        controller = SearchController(fetcher)
        snapshot = controller.snapshot()

        assert snapshot.page == 1
        assert snapshot.search == ""
        assert snapshot.url == "/"
        assert snapshot.items == ()
        assert fetcher.search_repositories.call_count == 0

    def test_ensure_loaded_fetches_once(self, fetcher):
        controller = SearchController(fetcher)
        controller.ensure_loaded()
        controller.ensure_loaded()

        fetcher.search_repositories.assert_called_once_with(1, "")

    def test_initial_data_skips_fetch(self, fetcher, search_payload):
        initial = SearchResponse.model_validate(search_payload(count=1, total_count=5))
        controller = SearchController(fetcher, PageState(page=2, search="go"), initial)

        assert controller.ensure_loaded() is initial
        assert fetcher.search_repositories.call_count == 0
        assert controller.snapshot().url == "/?search=go&page=2"

    def test_change_page_fetches_and_updates_url(self, fetcher):
        controller = SearchController(fetcher)
        controller.change_page(3)

        fetcher.search_repositories.assert_called_with(3, "")
        assert controller.snapshot().url == "/?page=3"

    def test_search_resets_to_first_page(self, fetcher):
        controller = SearchController(fetcher, PageState(page=5))
        controller.submit_search("tensorflow")

        snapshot = controller.snapshot()
        assert snapshot.page == 1
        assert snapshot.search == "tensorflow"
        assert snapshot.url == "/?search=tensorflow&page=1"
        fetcher.search_repositories.assert_called_with(1, "tensorflow")

    def test_clear_search(self, fetcher):
        controller = SearchController(fetcher, PageState(page=4, search="react"))
        controller.clear_search()

        assert controller.state == PageState()
        assert controller.snapshot().url == "/"

    def test_next_page_disabled_at_end(self, fetcher):
        """Total 100: page 4 is the last page, next does nothing."""
        controller = SearchController(fetcher)
        controller.change_page(4)
        fetcher.search_repositories.reset_mock()

        assert controller.next_page() is None
        assert controller.state.page == 4
        assert fetcher.search_repositories.call_count == 0

    def test_next_and_previous(self, fetcher):
        controller = SearchController(fetcher)
        controller.ensure_loaded()

        controller.next_page()
        assert controller.state.page == 2
        controller.previous_page()
        assert controller.state.page == 1
        assert controller.previous_page() is None

    def test_next_page_stops_at_34(self, fetcher, search_payload):
        fetcher.search_repositories.return_value = SearchResponse.model_validate(
            search_payload(count=30, total_count=1_000_000)
        )
        controller = SearchController(fetcher)
        controller.change_page(34)

        assert controller.snapshot().has_next_page is False
        assert controller.next_page() is None
        assert controller.state.page == 34

    def test_snapshot_flags(self, fetcher):
        controller = SearchController(fetcher)
        controller.change_page(2)
        snapshot = controller.snapshot()

        assert len(snapshot.items) == 2
        assert snapshot.total_count == 100
        assert snapshot.total_pages == 4
        assert snapshot.has_next_page is True
        assert snapshot.has_previous_page is True
        assert snapshot.loading is False


class TestHistory:
    """Tests for back/forward navigation."""

    def test_back_and_forward(self, fetcher):
        controller = SearchController(fetcher)
        controller.change_page(2)
        controller.submit_search("rust")

        controller.back()
        assert controller.state == PageState(page=2)
        fetcher.search_repositories.assert_called_with(2, "")

        controller.back()
        assert controller.state == PageState()
        assert controller.back() is None

        controller.forward()
        controller.forward()
        assert controller.state == PageState(page=1, search="rust")
        assert controller.forward() is None

    def test_navigating_after_back_drops_forward_entries(self, fetcher):
        controller = SearchController(fetcher)
        controller.change_page(2)
        controller.change_page(3)
        controller.back()
        controller.submit_search("go")

        assert controller.history == [PageState(), PageState(page=2), PageState(page=1, search="go")]
        assert controller.forward() is None

    def test_same_state_not_pushed_twice(self, fetcher):
        controller = SearchController(fetcher)
        controller.change_page(2)
        controller.change_page(2)

        assert len(controller.history) == 2


class TestFetchFailure:
    """Tests for fetch errors surfacing through the controller."""

    def test_error_propagates_and_state_kept(self, fetcher):
        fetcher.search_repositories.side_effect = FetchError()
        controller = SearchController(fetcher)

        with pytest.raises(FetchError):
            controller.submit_search("python")

        snapshot = controller.snapshot()
        assert snapshot.search == "python"
        assert snapshot.loading is False
        assert fetcher.search_repositories.call_count == 1

    def test_failed_page_change_drops_previous_rows(self, fetcher, search_payload):
        """A failed fetch for page 2 must not show page 1's results as page 2."""
        fetcher.search_repositories.side_effect = [
            SearchResponse.model_validate(search_payload(count=2, total_count=100)),
            FetchError(),
        ]
        controller = SearchController(fetcher)
        controller.ensure_loaded()

        with pytest.raises(FetchError):
            controller.change_page(2)

        snapshot = controller.snapshot()
        assert snapshot.page == 2
        assert snapshot.url == "/?page=2"
        assert snapshot.items == ()
        assert snapshot.total_count == 0
        assert snapshot.has_next_page is False

    def test_ensure_loaded_retries_after_failure(self, fetcher, search_payload):
        fetcher.search_repositories.side_effect = [
            FetchError(),
            SearchResponse.model_validate(search_payload(count=2, total_count=100)),
        ]
        controller = SearchController(fetcher, PageState(page=3))

        with pytest.raises(FetchError):
            controller.ensure_loaded()
        result = controller.ensure_loaded()

        assert len(result.items) == 2
        assert fetcher.search_repositories.call_count == 2
