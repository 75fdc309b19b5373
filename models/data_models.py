"""Data models for GitHub search results and issue tracker records."""

from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


class RepositoryOwner(BaseModel):
    """Owner block embedded in a repository search result."""
    login: str
    avatar_url: str = ""


class Repository(BaseModel):
    """Repository record as returned by the GitHub search API.
    
    Only the fields the explorer displays are kept; everything else in the
    upstream payload is ignored.
    """
    id: int
    name: str
    owner: RepositoryOwner
    stargazers_count: int = 0
    description: Optional[str] = None
    html_url: str
    language: Optional[str] = None


class SearchResponse(BaseModel):
    """One page of repository search results."""
    items: list[Repository] = []
    total_count: int = 0


class Issue(BaseModel):
    """Issue record from the bundled fixture.
    
    The fixture uses camelCase keys (numEvents, numUsers); both spellings
    are accepted on input.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    message: str
    status: Literal["open", "resolved"]
    num_events: int = Field(0, alias="numEvents")
    num_users: int = Field(0, alias="numUsers")
    value: float = 0

    @property
    def is_open(self) -> bool:
        return self.status == "open"
