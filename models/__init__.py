"""Data models for the repository explorer and issue table."""

from models.config_models import Config
from models.data_models import Issue, Repository, RepositoryOwner, SearchResponse

__all__ = [
    "Config",
    "Issue",
    "Repository",
    "RepositoryOwner",
    "SearchResponse",
]
