"""Load the static issue fixture."""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from models.data_models import Issue

logger = logging.getLogger(__name__)

DEFAULT_FIXTURE_PATH = Path(__file__).parent / "data" / "issues.json"


class FixtureError(Exception):
    """Raised when the issue fixture is missing or malformed."""


def load_issues(path: Optional[Union[str, Path]] = None) -> list[Issue]:
    """
    Read and validate the issue fixture.
    
    Args:
        path: JSON file holding an array of issue records
              (defaults to the bundled fixture)
    
    Returns:
        Issues in file order
    
    Raises:
        FixtureError: If the file can't be read, isn't a JSON array,
                      or holds an invalid or duplicate record
    """
    fixture_path = Path(path) if path else DEFAULT_FIXTURE_PATH
    
    try:
        raw = json.loads(fixture_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise FixtureError(f"Cannot read issue fixture {fixture_path}: {e}") from e
    except json.JSONDecodeError as e:
        raise FixtureError(f"Issue fixture {fixture_path} is not valid JSON: {e}") from e
    
    if not isinstance(raw, list):
        raise FixtureError(f"Issue fixture {fixture_path} must contain a JSON array")
    
    issues = []
    seen_ids = set()
    for index, record in enumerate(raw):
        try:
            issue = Issue.model_validate(record)
        except ValidationError as e:
            raise FixtureError(f"Invalid issue at index {index} in {fixture_path}: {e}") from e
        if issue.id in seen_ids:
            raise FixtureError(f"Duplicate issue id {issue.id!r} in {fixture_path}")
        seen_ids.add(issue.id)
        issues.append(issue)
    
    open_count = sum(1 for issue in issues if issue.is_open)
    logger.info(f"Loaded {len(issues)} issues ({open_count} open) from {fixture_path}")
    
    return issues
