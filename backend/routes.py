"""
API routes for the repository explorer and issue table.

Provides endpoints for paging through GitHub repository search results
and for the issue table's row selection.
"""

from typing import List, Optional
from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from explorer.pagination import PageState
from explorer.views import RepoPageResponse, build_repo_page
from fetchers.github import FetchError, GitHubSearchFetcher
from issues.fixture import load_issues
from issues.selection import SelectionController
from issues.table import IssueTableResponse, build_issue_table
from utils.config_loader import load_config
from utils.logger import setup_logger

# Initialize the search client and load the issue fixture once for all routes
config = load_config()
logger = setup_logger(config.log_level, __name__)

fetcher = GitHubSearchFetcher(
    base_url=config.github_api_url,
    cache_ttl=config.search_cache_ttl,
    cache_max_entries=config.search_cache_max_entries
)
issues = load_issues(config.issues_fixture_path)

router = APIRouter(prefix="/api")


class ToggleSelectionRequest(BaseModel):
    """Request body for toggling one issue."""
    selected_ids: List[str] = []
    issue_id: str


class SelectAllRequest(BaseModel):
    """Request body for the select-all checkbox."""
    selected_ids: List[str] = []
    checked: bool


@router.get("/repos", response_model=RepoPageResponse, tags=["repos"])
def list_repos(
    page: Optional[str] = Query(None, description="Page number (1-indexed, max 34). Invalid values fall back to 1."),
    search: Optional[str] = Query(None, description="Search term; the stars:>5000 filter is always applied")
):
    """
    List one page of popular repositories.

    Query Parameters:
    - page: Page number (default: 1, capped at 34)
    - search: Optional search term

    Returns:
    - repos: Repository cards for this page (at most 30)
    - total_count: Total number of matching repositories upstream
    - has_next_page / has_previous_page: Pagination flags
    - url: Address bar URL for this page/search

    Raises:
    - 502: If the upstream search request fails
    """
    state = PageState.from_params(page, search)

    try:
        response = fetcher.search_repositories(state.page, state.search)
        result = build_repo_page(state, response)

        search_log = f", search={state.search!r}" if state.search else ""
        logger.info(
            f"Listed {result.showing} repos (page {state.page}/{result.total_pages}, "
            f"total {result.total_count}{search_log})"
        )

        return result

    except FetchError as e:
        logger.error(f"Failed to list repos for {state.to_url()}: {e}")
        raise HTTPException(status_code=502, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to list repos: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to list repos: {str(e)}")


@router.get("/issues", response_model=IssueTableResponse, tags=["issues"])
def list_issues():
    """
    Get the issue table with nothing selected.

    Returns:
    - rows: Every issue in fixture order, with status label and selectability
    - selection: Empty selection snapshot
    """
    table = build_issue_table(SelectionController(issues))
    logger.info(f"Listed {len(table.rows)} issues ({table.selection.open_count} open)")
    return table


@router.post("/issues/selection/toggle", response_model=IssueTableResponse, tags=["issues"])
def toggle_issue(request: ToggleSelectionRequest):
    """
    Toggle the selection of one issue.

    The client sends the ids it currently has selected; the response holds
    the updated table. Ids that are unknown or not open are dropped.

    Raises:
    - 404: If the issue doesn't exist
    - 409: If the issue is not open (resolved issues can't be selected)
    """
    controller = SelectionController.from_selected(issues, request.selected_ids)

    if not any(issue.id == request.issue_id for issue in issues):
        logger.warning(f"Issue not found for toggle: {request.issue_id}")
        raise HTTPException(status_code=404, detail=f"Issue not found: {request.issue_id}")

    if not controller.is_selectable(request.issue_id):
        logger.warning(f"Rejected toggle of non-open issue: {request.issue_id}")
        raise HTTPException(status_code=409, detail=f"Issue is not open: {request.issue_id}")

    controller.toggle(request.issue_id)
    logger.info(
        f"Toggled issue {request.issue_id}: "
        f"{'selected' if controller.is_selected(request.issue_id) else 'deselected'} "
        f"({controller.total_selected}/{controller.open_count} selected)"
    )

    return build_issue_table(controller)


@router.post("/issues/selection/select-all", response_model=IssueTableResponse, tags=["issues"])
def select_all_issues(request: SelectAllRequest):
    """
    Select every open issue, or clear the selection.

    Body:
    - checked: true selects all open issues, false deselects everything
    """
    controller = SelectionController.from_selected(issues, request.selected_ids)
    controller.select_all(request.checked)
    logger.info(f"Select all ({request.checked}): {controller.total_selected} selected")
    return build_issue_table(controller)
