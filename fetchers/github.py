"""GitHub API client for repository search.

Fetches one page of the repository search endpoint at a time. Requests are
unauthenticated; upstream rate limiting surfaces as an ordinary fetch failure.
Successful responses are memoized for a short window so repeated page views
don't hit the API again.
"""

import logging
import threading
import time
from typing import Any, Optional

import requests

from explorer.pagination import PER_PAGE, build_search_query, clamp_page
from models.data_models import SearchResponse

logger = logging.getLogger(__name__)


class FetchError(Exception):
    """Raised when the upstream search request fails for any reason."""

    def __init__(self, message: str = "Failed to fetch", status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class GitHubSearchFetcher:
    """Fetch repository search results from the GitHub API."""

    def __init__(
        self,
        base_url: str = "https://api.github.com",
        cache_ttl: float = 60,
        cache_max_entries: int = 256
    ):
        """Initialize GitHub search client.

        Args:
            base_url: GitHub REST API base URL
            cache_ttl: Seconds a successful response is reused (0 disables)
            cache_max_entries: Most responses kept at once; the oldest go first
        """
        self.base_url = base_url.rstrip("/")
        self.cache_ttl = cache_ttl
        self.cache_max_entries = cache_max_entries
        self.headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28"
        }
        # (page, query) -> (stored_at, response)
        self._cache: dict[tuple[int, str], tuple[float, SearchResponse]] = {}
        self._cache_lock = threading.Lock()

    def _make_github_request(self, url: str, params: Optional[dict] = None) -> requests.Response:
        """Make a GitHub API request and log rate limit info.

        Args:
            url: GitHub API URL to request
            params: Optional query parameters

        Returns:
            Response object from requests
        """
        response = requests.get(url, headers=self.headers, params=params)

        remaining = response.headers.get("X-RateLimit-Remaining")
        limit = response.headers.get("X-RateLimit-Limit")
        if remaining and limit:
            logger.debug(f"Rate limit: {remaining}/{limit} remaining")

        return response

    def build_params(self, page: int, query: str = "") -> dict[str, Any]:
        """Build the search query parameters for a page.

        Args:
            page: Page number (clamped to the searchable window)
            query: User search term, may be empty

        Returns:
            Query parameter dict for the search endpoint
        """
        return {
            "q": build_search_query(query),
            "sort": "stars",
            "order": "desc",
            "per_page": PER_PAGE,
            "page": clamp_page(page),
        }

    def search_repositories(self, page: int = 1, query: str = "") -> SearchResponse:
        """Fetch one page of repositories sorted by stars, descending.

        Args:
            page: Page number (1-indexed, capped at the last reachable page)
            query: Optional search term; the minimum star filter is always added

        Returns:
            SearchResponse with at most PER_PAGE items and the total count

        Raises:
            FetchError: On any non-success status or transport error
        """
        params = self.build_params(page, query)
        cache_key = (params["page"], params["q"])

        cached = self._get_cached(cache_key)
        if cached is not None:
            logger.debug(f"Serving cached search results for {cache_key}")
            return cached

        url = f"{self.base_url}/search/repositories"

        try:
            response = self._make_github_request(url, params=params)
        except requests.RequestException as e:
            logger.error(f"Error searching repositories (page {params['page']}): {e}")
            raise FetchError() from e

        if not response.ok:
            logger.error(
                f"Search request failed: {response.status_code} - "
                f"{response.text[:200]}"
            )
            raise FetchError(status_code=response.status_code)

        try:
            result = SearchResponse.model_validate(response.json())
        except ValueError as e:
            # Covers both invalid JSON and payloads that don't match the model
            logger.error(f"Malformed search response: {e}")
            raise FetchError() from e

        # Upstream never sends more than per_page, but don't rely on it
        result.items = result.items[:PER_PAGE]

        logger.info(
            f"Fetched {len(result.items)} repositories "
            f"(page {params['page']}, total {result.total_count}, q={params['q']!r})"
        )

        self._store_cached(cache_key, result)
        return result

    def clear_cache(self) -> None:
        """Drop all memoized responses."""
        with self._cache_lock:
            self._cache.clear()

    def _get_cached(self, key: tuple[int, str]) -> Optional[SearchResponse]:
        if self.cache_ttl <= 0:
            return None
        with self._cache_lock:
            entry = self._cache.get(key)
            if entry is None:
                return None
            stored_at, response = entry
            if time.monotonic() - stored_at >= self.cache_ttl:
                self._cache.pop(key, None)
                return None
            return response.model_copy(deep=True)

    def _store_cached(self, key: tuple[int, str], response: SearchResponse) -> None:
        if self.cache_ttl <= 0:
            return
        with self._cache_lock:
            now = time.monotonic()

            expired = [k for k, (stored_at, _) in self._cache.items() if now - stored_at >= self.cache_ttl]
            for k in expired:
                del self._cache[k]

            # Dicts keep insertion order, so the first key is the oldest
            self._cache.pop(key, None)
            while self._cache and len(self._cache) >= self.cache_max_entries:
                del self._cache[next(iter(self._cache))]

            self._cache[key] = (now, response.model_copy(deep=True))
