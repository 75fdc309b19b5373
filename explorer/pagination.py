"""Pagination math, search query building and URL state for the explorer.

The search API only exposes the first 1000 results of any query, so with
30 results per page the last reachable page is 34.
"""

import math
from typing import Any, Optional
from urllib.parse import parse_qs, urlencode

from pydantic import BaseModel, ConfigDict, Field

PER_PAGE = 30
MAX_PAGE = 34
MIN_STARS_FILTER = "stars:>5000"


def build_search_query(term: Optional[str] = "") -> str:
    """Combine the user's term with the minimum star filter."""
    term = (term or "").strip()
    if term:
        return f"{term} {MIN_STARS_FILTER}"
    return MIN_STARS_FILTER


def clamp_page(page: int) -> int:
    """Clamp a page number into [1, MAX_PAGE]."""
    return max(1, min(int(page), MAX_PAGE))


def parse_page(raw: Any) -> int:
    """
    Parse a page number from a query string value.

    Missing, empty, non-numeric and zero values fall back to page 1.
    Anything else is clamped to the reachable window.
    """
    if raw is None:
        return 1
    try:
        page = int(str(raw).strip())
    except ValueError:
        return 1
    if page == 0:
        return 1
    return clamp_page(page)


def has_next_page(page: int, total_count: int) -> bool:
    return page * PER_PAGE < total_count and page < MAX_PAGE


def has_previous_page(page: int) -> bool:
    return page > 1


def total_pages(total_count: int) -> int:
    """Number of reachable pages for a result total."""
    return min(MAX_PAGE, math.ceil(total_count / PER_PAGE))


class PageState(BaseModel):
    """Page number and search term as reflected in the address bar.

    `page` and `search` are the only two query parameters. The default state
    (page 1, no search) serializes to the bare root URL. The constructor
    only accepts pages in the reachable window; use `from_params` or
    `with_page` for untrusted input.
    """
    model_config = ConfigDict(frozen=True)

    page: int = Field(1, ge=1, le=MAX_PAGE)
    search: str = ""

    @classmethod
    def from_params(cls, page: Any = None, search: Optional[str] = None) -> "PageState":
        return cls(page=parse_page(page), search=(search or "").strip())

    @classmethod
    def from_query_string(cls, query_string: str) -> "PageState":
        """Parse `page=2&search=react` (a leading `?` or `/?` is allowed)."""
        query_string = query_string.lstrip("/").lstrip("?")
        params = parse_qs(query_string, keep_blank_values=True)
        page = params.get("page", [None])[0]
        search = params.get("search", [""])[0]
        return cls.from_params(page, search)

    def to_query_string(self) -> str:
        if self.is_default:
            return ""
        params = {}
        if self.search:
            params["search"] = self.search
        params["page"] = self.page
        return urlencode(params)

    def to_url(self, path: str = "/") -> str:
        query_string = self.to_query_string()
        return f"{path}?{query_string}" if query_string else path

    @property
    def is_default(self) -> bool:
        return self.page == 1 and not self.search

    def with_page(self, page: int) -> "PageState":
        return PageState(page=clamp_page(page), search=self.search)

    def with_search(self, search: Optional[str]) -> "PageState":
        # A new search always starts over at the first page
        return PageState(page=1, search=(search or "").strip())
