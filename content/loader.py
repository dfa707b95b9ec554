"""
Snapshot loader: turns the upstream fetcher's JSON into WebsiteContent.
"""

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from content.models import WebsiteContent

logger = logging.getLogger(__name__)


class InvalidSnapshotError(ValueError):
    """Raised when a snapshot is not a well-formed WebsiteContent."""


def parse_website_content(data: dict, source: str = "<memory>") -> WebsiteContent:
    """Validate a decoded snapshot dict. Unknown keys are ignored."""
    if not isinstance(data, dict):
        raise InvalidSnapshotError(
            f"{source}: expected a JSON object, got {type(data).__name__}"
        )
    try:
        return WebsiteContent.model_validate(data)
    except ValidationError as exc:
        logger.error("Snapshot %s failed validation (%d errors)", source, exc.error_count())
        raise InvalidSnapshotError(f"{source}: {exc}") from exc


def load_website_content(path: Union[str, Path]) -> WebsiteContent:
    """
    Read a snapshot JSON file.

    Raises FileNotFoundError if the file does not exist, InvalidSnapshotError
    if it is not valid JSON or does not describe a site.
    """
    path = Path(path)
    raw = path.read_text(encoding="utf-8")
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise InvalidSnapshotError(f"{path}: invalid JSON ({exc})") from exc

    site = parse_website_content(data, source=str(path))
    logger.info("Loaded snapshot %s — %s (%d pages)", path, site.url, len(site.pages))
    return site
