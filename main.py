#!/usr/bin/env python3
"""
Repo Explorer - Main CLI entrypoint

Browse the most starred GitHub repositories and the bundled issue table
from the terminal, or start the API server.

Usage:
    python main.py repos                                 # First page of popular repos
    python main.py repos --search react --page 2         # Search, second page
    python main.py repos --url "search=python&page=3"    # Restore a shared URL state
    python main.py browse                                # Interactive pager
    python main.py issues --select-all                   # Issue table with every open issue selected
    python main.py serve --port 8080                     # Start the API server
"""

import argparse
import sys
from typing import Callable, Optional

from explorer.controller import SearchController
from explorer.pagination import PageState
from explorer.views import build_repo_page, render_repo_page
from fetchers.github import FetchError, GitHubSearchFetcher
from issues.fixture import FixtureError, load_issues
from issues.selection import SelectionController
from issues.table import build_issue_table, render_issue_table
from models.data_models import SearchResponse
from utils.config_loader import load_config
from utils.logger import setup_logger

logger = setup_logger(name=__name__)

BROWSE_HELP = "Commands: n=next  p=previous  /term=search  c=clear  b=back  f=forward  q=quit"


def show_repos(fetcher: GitHubSearchFetcher, state: PageState) -> bool:
    """
    Fetch and print one page of repositories.

    Args:
        fetcher: Search client
        state: Page and search term to show

    Returns:
        True on success, False if the fetch failed
    """
    try:
        response = fetcher.search_repositories(state.page, state.search)
    except FetchError as e:
        logger.error(f"{e} (page {state.page}, search {state.search!r})")
        return False

    print(render_repo_page(build_repo_page(state, response)))
    print(f"\nURL: {state.to_url()}")
    return True


def browse(
    controller: SearchController,
    read_input: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> None:
    """
    Interactive pager over a SearchController.

    Fetch failures are reported and the loop continues; the page/search
    change that triggered them is kept.
    """
    def show():
        state = controller.state
        snapshot = controller.snapshot()
        response = SearchResponse(items=list(snapshot.items), total_count=snapshot.total_count)
        write(render_repo_page(build_repo_page(state, response)))
        write(f"URL: {snapshot.url}")

    try:
        controller.ensure_loaded()
        show()
    except FetchError as e:
        write(f"Error: {e}")

    write(BROWSE_HELP)

    while True:
        try:
            command = read_input("> ").strip()
        except EOFError:
            break

        if not command:
            continue
        if command == "q":
            break

        try:
            if command == "n":
                result = controller.next_page()
            elif command == "p":
                result = controller.previous_page()
            elif command.startswith("/"):
                result = controller.submit_search(command[1:])
            elif command == "c":
                result = controller.clear_search()
            elif command == "b":
                result = controller.back()
            elif command == "f":
                result = controller.forward()
            else:
                write(BROWSE_HELP)
                continue
        except FetchError as e:
            write(f"Error: {e}")
            continue

        if result is None:
            write("Nothing to do")
            continue
        show()


def show_issues(
    fixture: Optional[str],
    select_all: bool = False,
    toggle_ids: Optional[list[str]] = None,
) -> bool:
    """
    Print the issue table with an optional selection applied.

    Toggles are applied in order after select-all. Toggling an unknown
    or non-open issue is reported and skipped.
    """
    try:
        issues = load_issues(fixture)
    except FixtureError as e:
        logger.error(str(e))
        return False

    controller = SelectionController(issues)
    if select_all:
        controller.select_all(True)

    for issue_id in toggle_ids or []:
        if not controller.is_selectable(issue_id):
            logger.warning(f"Skipping {issue_id}: not an open issue")
            continue
        controller.toggle(issue_id)

    print(render_issue_table(build_issue_table(controller)))
    return True


def main():
    """Main CLI entrypoint."""
    parser = argparse.ArgumentParser(
        description="Repo Explorer - Browse popular GitHub repositories and the issue table",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Most starred repositories
  python main.py repos

  # Search for a term (always limited to repos with more than 5000 stars)
  python main.py repos --search tensorflow

  # Issue table with two issues toggled
  python main.py issues --toggle <id> --toggle <id>
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Repos command
    repos_parser = subparsers.add_parser(
        "repos",
        help="Print one page of repository search results"
    )
    repos_parser.add_argument(
        "--page",
        type=int,
        default=1,
        help="Page number (default: 1, max: 34)"
    )
    repos_parser.add_argument(
        "--search",
        type=str,
        default="",
        help="Search term"
    )
    repos_parser.add_argument(
        "--url",
        type=str,
        default=None,
        help="URL query string to restore, e.g. 'search=react&page=2' (overrides --page/--search)"
    )

    # Browse command
    browse_parser = subparsers.add_parser(
        "browse",
        help="Interactively page through repository search results"
    )
    browse_parser.add_argument(
        "--search",
        type=str,
        default="",
        help="Initial search term"
    )

    # Issues command
    issues_parser = subparsers.add_parser(
        "issues",
        help="Print the issue table"
    )
    issues_parser.add_argument(
        "--fixture",
        type=str,
        default=None,
        help="Path to an issues JSON fixture (default: ISSUES_FIXTURE_PATH or the bundled fixture)"
    )
    issues_parser.add_argument(
        "--select-all",
        action="store_true",
        help="Select every open issue"
    )
    issues_parser.add_argument(
        "--toggle",
        action="append",
        default=[],
        metavar="ID",
        help="Toggle selection of an issue (repeatable)"
    )

    # Serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Start the API server"
    )
    serve_parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to run the API server on (default: 8000)"
    )
    serve_parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="Host to bind the server to (default: 127.0.0.1)"
    )
    serve_parser.add_argument(
        "--no-reload",
        action="store_true",
        help="Disable auto-reload (use for production)"
    )

    args = parser.parse_args()

    # Show help if no command provided
    if not args.command:
        parser.print_help()
        sys.exit(1)

    config = load_config()
    setup_logger(config.log_level)

    if args.command == "repos":
        if args.url is not None:
            state = PageState.from_query_string(args.url)
        else:
            state = PageState.from_params(args.page, args.search)

        fetcher = GitHubSearchFetcher(config.github_api_url, cache_ttl=0)
        sys.exit(0 if show_repos(fetcher, state) else 1)

    elif args.command == "browse":
        fetcher = GitHubSearchFetcher(
            config.github_api_url,
            cache_ttl=config.search_cache_ttl,
            cache_max_entries=config.search_cache_max_entries
        )
        controller = SearchController(fetcher, PageState.from_params(1, args.search))
        browse(controller)
        sys.exit(0)

    elif args.command == "issues":
        fixture = args.fixture or config.issues_fixture_path
        success = show_issues(fixture, select_all=args.select_all, toggle_ids=args.toggle)
        sys.exit(0 if success else 1)

    elif args.command == "serve":
        from backend.server import run_server
        run_server(args.host, args.port, reload=not args.no_reload)


if __name__ == "__main__":
    main()
