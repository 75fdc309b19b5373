"""Shared pytest fixtures and configuration."""

import pytest

from models.data_models import Issue


@pytest.fixture
def test_env(monkeypatch):
    """
    Set valid test environment variables so config can be loaded
    during tests without depending on a local .env file.
    """
    monkeypatch.setenv("GITHUB_API_URL", "https://github.test/api/")
    monkeypatch.setenv("SEARCH_CACHE_TTL", "0")
    monkeypatch.setenv("CORS_ORIGINS", "http://localhost:5173, http://localhost:3000")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    
    return {
        "github_api_url": "https://github.test/api",
        "search_cache_ttl": 0,
        "cors_origins": ["http://localhost:5173", "http://localhost:3000"],
        "log_level": "DEBUG",
    }


@pytest.fixture
def sample_issues():
    """Two open issues around one resolved issue."""
    return [
        Issue(id="1", name="TypeError", message="x is undefined", status="open", numEvents=3, numUsers=2, value=1),
        Issue(id="2", name="SyntaxError", message="Unexpected token", status="resolved", numEvents=5, numUsers=1, value=1),
        Issue(id="3", name="RangeError", message="Stack overflow", status="open", numEvents=1, numUsers=1, value=2),
    ]


def make_repo(repo_id: int, name: str = None, stars: int = 10000, **overrides):
    """Build one repository record the way the search API returns it."""
    repo = {
        "id": repo_id,
        "name": name or f"repo-{repo_id}",
        "full_name": f"owner-{repo_id}/{name or f'repo-{repo_id}'}",
        "owner": {
            "login": f"owner-{repo_id}",
            "avatar_url": f"https://avatars.githubusercontent.com/u/{repo_id}",
        },
        "stargazers_count": stars,
        "description": f"Description of repo {repo_id}",
        "html_url": f"https://github.com/owner-{repo_id}/{name or f'repo-{repo_id}'}",
        "language": "Python",
        "forks_count": 12,
    }
    repo.update(overrides)
    return repo


@pytest.fixture
def search_payload():
    """Factory for a search API response body."""
    def _payload(count: int = 2, total_count: int = 100):
        return {
            "total_count": total_count,
            "incomplete_results": False,
            "items": [make_repo(i + 1, stars=100000 - i) for i in range(count)],
        }
    return _payload
