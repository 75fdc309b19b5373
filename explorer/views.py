"""View models for rendering a page of repository search results."""

from typing import Optional
from pydantic import BaseModel

from explorer.pagination import (
    PER_PAGE,
    PageState,
    has_next_page,
    has_previous_page,
    total_pages,
)
from models.data_models import Repository, SearchResponse

NO_DESCRIPTION = "No description available"


class RepoCard(BaseModel):
    """One repository as displayed in the results list."""
    id: int
    name: str
    html_url: str
    owner_login: str
    avatar_url: str
    language: Optional[str] = None
    description: str
    stars: int
    stars_display: str


class RepoPageResponse(BaseModel):
    """Response model for the repository list endpoint."""
    repos: list[RepoCard]
    showing: int
    total_count: int
    page: int
    per_page: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool
    page_label: str
    search: str
    url: str


def build_repo_card(repo: Repository) -> RepoCard:
    return RepoCard(
        id=repo.id,
        name=repo.name,
        html_url=repo.html_url,
        owner_login=repo.owner.login,
        avatar_url=repo.owner.avatar_url,
        language=repo.language or None,
        description=repo.description or NO_DESCRIPTION,
        stars=repo.stargazers_count,
        stars_display=f"{repo.stargazers_count:,}",
    )


def build_repo_page(state: PageState, response: SearchResponse) -> RepoPageResponse:
    """Combine the current page state and a search response into a view."""
    pages = total_pages(response.total_count)
    return RepoPageResponse(
        repos=[build_repo_card(repo) for repo in response.items],
        showing=len(response.items),
        total_count=response.total_count,
        page=state.page,
        per_page=PER_PAGE,
        total_pages=pages,
        has_next_page=has_next_page(state.page, response.total_count),
        has_previous_page=has_previous_page(state.page),
        page_label=f"Page {state.page} of {pages}",
        search=state.search,
        url=state.to_url(),
    )


def render_repo_page(page: RepoPageResponse) -> str:
    """Render a repository page as plain text for the terminal."""
    lines = [
        f"Showing {page.showing} of {page.total_count:,} repositories"
        + (f" matching '{page.search}'" if page.search else ""),
        page.page_label,
        "",
    ]
    for index, card in enumerate(page.repos, start=(page.page - 1) * page.per_page + 1):
        language = f" [{card.language}]" if card.language else ""
        lines.append(f"{index:>4}. {card.owner_login}/{card.name}{language}  ★ {card.stars_display}")
        lines.append(f"      {card.description}")
        lines.append(f"      {card.html_url}")

    nav = []
    if page.has_previous_page:
        nav.append("← Previous")
    if page.has_next_page:
        nav.append("Next →")
    if nav:
        lines.append("")
        lines.append("   ".join(nav))
    return "\n".join(lines)
