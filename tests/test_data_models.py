"""Tests for Pydantic data models."""

import pytest
from pydantic import ValidationError

from models.data_models import Issue, Repository, SearchResponse


class TestRepository:
    """Test Repository model."""

    def test_parses_search_api_item(self, search_payload):
        """Test that an upstream item parses and extra fields are ignored."""
        item = search_payload(count=1)["items"][0]
        repo = Repository.model_validate(item)

        assert repo.id == 1
        assert repo.owner.login == "owner-1"
        assert repo.owner.avatar_url.endswith("/u/1")
        assert repo.stargazers_count == 100000
        assert not hasattr(repo, "forks_count")

    def test_description_and_language_optional(self):
        """Test that description and language can be null."""
        repo = Repository(
            id=7,
            name="awesome",
            owner={"login": "someone"},
            html_url="https://github.com/someone/awesome",
            description=None,
            language=None,
        )
        assert repo.description is None
        assert repo.language is None
        assert repo.stargazers_count == 0

    def test_missing_owner_rejected(self):
        """Test that a repository without owner is invalid."""
        with pytest.raises(ValidationError):
            Repository(id=1, name="x", html_url="https://github.com/x/x")


class TestSearchResponse:
    """Test SearchResponse model."""

    def test_parses_payload(self, search_payload):
        response = SearchResponse.model_validate(search_payload(count=3, total_count=42))
        assert len(response.items) == 3
        assert response.total_count == 42

    def test_empty_defaults(self):
        response = SearchResponse()
        assert response.items == []
        assert response.total_count == 0


class TestIssue:
    """Test Issue model."""

    def test_parses_camel_case_fixture_keys(self):
        """Test that fixture keys numEvents/numUsers map to snake_case fields."""
        issue = Issue.model_validate({
            "id": "abc",
            "name": "TypeError",
            "message": "boom",
            "status": "open",
            "numEvents": 10,
            "numUsers": 4,
            "value": 1,
        })
        assert issue.num_events == 10
        assert issue.num_users == 4
        assert issue.is_open

    def test_resolved_is_not_open(self):
        issue = Issue(id="1", name="n", message="m", status="resolved")
        assert not issue.is_open

    def test_invalid_status_rejected(self):
        """Test that only open/resolved statuses are accepted."""
        with pytest.raises(ValidationError):
            Issue(id="1", name="n", message="m", status="closed")

    def test_issue_is_immutable(self):
        """Test that issues can't be changed after load."""
        issue = Issue(id="1", name="n", message="m", status="open")
        with pytest.raises(ValidationError):
            issue.status = "resolved"
