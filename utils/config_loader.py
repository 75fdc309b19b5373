"""Configuration loader that reads from .env and validates with Pydantic."""

import os
import sys
from pathlib import Path
from dotenv import load_dotenv
from pydantic import ValidationError

from models.config_models import Config


def load_config() -> Config:
    """
    Load and validate configuration from environment variables.
    
    Reads from .env file in the project root and validates the settings
    using Pydantic models. Every setting has a default, so a missing .env
    file is fine.
    
    Returns:
        Config: Validated configuration object
        
    Raises:
        SystemExit: If configuration is invalid
    """
    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)
    
    # Only pass values that are actually set so model defaults apply
    values = {
        "github_api_url": os.getenv("GITHUB_API_URL"),
        "search_cache_ttl": os.getenv("SEARCH_CACHE_TTL"),
        "search_cache_max_entries": os.getenv("SEARCH_CACHE_MAX_ENTRIES"),
        "issues_fixture_path": os.getenv("ISSUES_FIXTURE_PATH"),
        "cors_origins": os.getenv("CORS_ORIGINS"),
        "log_level": os.getenv("LOG_LEVEL"),
    }
    
    try:
        return Config(**{key: value for key, value in values.items() if value})
        
    except ValidationError as e:
        print("❌ Configuration validation failed:", file=sys.stderr)
        print("\nPlease check your .env file. Invalid fields:", file=sys.stderr)
        
        for error in e.errors():
            field_path = " → ".join(str(x) for x in error["loc"])
            message = error["msg"]
            print(f"  • {field_path}: {message}", file=sys.stderr)
        
        print("\nHint: Copy .env.example to .env and adjust the values.", file=sys.stderr)
        sys.exit(1)
