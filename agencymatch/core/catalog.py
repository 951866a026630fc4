"""YAML-backed agency catalog: the profile store the engine reads from."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from agencymatch.core.schemas import CandidateProfile

logger = logging.getLogger(__name__)


def load_catalog(path: str | Path) -> list[CandidateProfile]:
    """Load and validate every agency profile listed under ``agencies:``.

    Raises:
        FileNotFoundError: If the catalog file does not exist.
        ValueError: If the document is malformed or a record fails validation.
    """
    path = Path(path)
    if not path.exists():
        msg = f"Catalog file not found: {path}"
        raise FileNotFoundError(msg)

    try:
        raw: Any = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        msg = f"Catalog file is not valid YAML: {path}: {e}"
        raise ValueError(msg) from e
    if not isinstance(raw, dict):
        msg = f"Catalog must be a mapping with an 'agencies' key in {path}"
        raise ValueError(msg)

    records = raw.get("agencies", [])
    if not isinstance(records, list):
        msg = f"'agencies' must be a list in {path}"
        raise ValueError(msg)

    profiles: list[CandidateProfile] = []
    for index, record in enumerate(records):
        try:
            profiles.append(CandidateProfile.model_validate(record))
        except ValidationError as e:
            msg = f"Invalid agency at index {index} in {path}: {e}"
            raise ValueError(msg) from e

    logger.debug("Loaded %d agencies from %s", len(profiles), path)
    return profiles

