"""Search/pagination controller for the repository explorer.

Owns the current page state, fetches on every change and keeps a simple
navigation history so back/forward restore earlier pages and searches.
"""

import logging
from typing import Optional
from pydantic import BaseModel, ConfigDict

from explorer.pagination import (
    PageState,
    has_next_page,
    has_previous_page,
    total_pages,
)
from fetchers.github import GitHubSearchFetcher
from models.data_models import Repository, SearchResponse

logger = logging.getLogger(__name__)


class ExplorerState(BaseModel):
    """Immutable snapshot of the controller."""
    model_config = ConfigDict(frozen=True)

    page: int
    search: str
    url: str
    items: tuple[Repository, ...] = ()
    total_count: int = 0
    total_pages: int = 0
    has_next_page: bool = False
    has_previous_page: bool = False
    loading: bool = False


class SearchController:
    """Drive the explorer: page changes, searches and history navigation.

    Every state change pushes the new URL state onto the history and fetches
    the matching page. Fetch errors propagate to the caller; the state change
    that caused them is kept.
    """

    def __init__(
        self,
        fetcher: GitHubSearchFetcher,
        initial_state: Optional[PageState] = None,
        initial_data: Optional[SearchResponse] = None,
    ):
        self.fetcher = fetcher
        self._state = initial_state or PageState()
        self._data = initial_data
        self._loading = False
        self._history: list[PageState] = [self._state]
        self._position = 0

    @property
    def state(self) -> PageState:
        return self._state

    @property
    def history(self) -> list[PageState]:
        return list(self._history)

    def load(self) -> SearchResponse:
        """Fetch the page for the current state.

        The previous response is dropped first, so after a failure the
        snapshot reports no items instead of another page's rows.
        """
        self._data = None
        self._loading = True
        try:
            self._data = self.fetcher.search_repositories(self._state.page, self._state.search)
        finally:
            self._loading = False
        return self._data

    def ensure_loaded(self) -> SearchResponse:
        if self._data is None:
            return self.load()
        return self._data

    def change_page(self, page: int) -> SearchResponse:
        return self._navigate(self._state.with_page(page))

    def next_page(self) -> Optional[SearchResponse]:
        if not has_next_page(self._state.page, self._total_count()):
            logger.debug(f"No next page after page {self._state.page}")
            return None
        return self.change_page(self._state.page + 1)

    def previous_page(self) -> Optional[SearchResponse]:
        if not has_previous_page(self._state.page):
            return None
        return self.change_page(self._state.page - 1)

    def submit_search(self, term: str) -> SearchResponse:
        return self._navigate(self._state.with_search(term))

    def clear_search(self) -> SearchResponse:
        return self._navigate(PageState())

    def back(self) -> Optional[SearchResponse]:
        if self._position == 0:
            return None
        self._position -= 1
        self._state = self._history[self._position]
        return self.load()

    def forward(self) -> Optional[SearchResponse]:
        if self._position >= len(self._history) - 1:
            return None
        self._position += 1
        self._state = self._history[self._position]
        return self.load()

    def snapshot(self) -> ExplorerState:
        total = self._total_count()
        return ExplorerState(
            page=self._state.page,
            search=self._state.search,
            url=self._state.to_url(),
            items=tuple(self._data.items) if self._data else (),
            total_count=total,
            total_pages=total_pages(total),
            has_next_page=has_next_page(self._state.page, total),
            has_previous_page=has_previous_page(self._state.page),
            loading=self._loading,
        )

    def _navigate(self, new_state: PageState) -> SearchResponse:
        if new_state != self._state:
            # Navigating after going back drops the forward entries
            del self._history[self._position + 1:]
            self._history.append(new_state)
            self._position += 1
            self._state = new_state
            logger.debug(f"Navigated to {new_state.to_url()}")
        return self.load()

    def _total_count(self) -> int:
        return self._data.total_count if self._data else 0
