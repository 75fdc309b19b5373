"""Configuration models for validation using Pydantic."""

from typing import Optional
from pydantic import BaseModel, Field, field_validator


class Config(BaseModel):
    """Application configuration."""
    
    github_api_url: str = Field(
        default="https://api.github.com",
        description="Base URL of the GitHub REST API"
    )
    search_cache_ttl: float = Field(
        default=60,
        ge=0,
        description="Seconds a successful search response is reused (0 disables)"
    )
    search_cache_max_entries: int = Field(
        default=256,
        ge=1,
        description="Most search responses kept in memory at once"
    )
    issues_fixture_path: Optional[str] = Field(
        None,
        description="Path to the issues JSON fixture (defaults to the bundled one)"
    )
    cors_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:5173"],
        description="Origins allowed to call the API"
    )
    log_level: str = Field(default="INFO", description="Logging level")
    
    @field_validator("github_api_url")
    @classmethod
    def validate_github_api_url(cls, v: str) -> str:
        """Validate API URL format and drop any trailing slash."""
        if not v.startswith(("https://", "http://")):
            raise ValueError("GitHub API URL must start with http:// or https://")
        return v.rstrip("/")
    
    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_cors_origins(cls, v):
        """Accept a comma separated string as well as a list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v
    
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")
        return v_upper
