"""
Object File Persistence — JSON and YAML resource files.

The format is picked from the file suffix: .yaml/.yml files are YAML,
everything else is JSON.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict

import yaml
from pydantic import ValidationError as PydanticValidationError

from ..models.resource import Resource
from ..validation import YAML_SUFFIXES, ValidationError, validate_object_file

logger = logging.getLogger(__name__)


def load_object(path: Path) -> Dict[str, Any]:
    """
    Load an object file as a plain mapping.

    Raises:
        ValidationError: If the file is missing, unreadable or malformed
    """
    logger.debug(f"Loading object from {path}")
    return validate_object_file(path)


def load_resource(path: Path) -> Resource:
    """
    Load an object file as a typed resource.

    Raises:
        ValidationError: If the file is unreadable, malformed, or is not a
            valid resource
    """
    data = load_object(path)
    try:
        resource = Resource.model_validate(data)
    except PydanticValidationError as e:
        raise ValidationError(
            f"Invalid resource in {path}",
            details={"path": str(path), "errors": e.errors(include_url=False)},
        ) from e
    logger.debug(
        f"Resource loaded: {resource.kind}/{resource.metadata.name}, "
        f"{len(resource.status.conditions)} condition(s)"
    )
    return resource


def save_resource(resource: Resource, path: Path) -> None:
    """
    Save a resource to a JSON or YAML file.

    Uses atomic write (write to temp, then rename) to prevent corruption.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_path = path.with_suffix(path.suffix + ".tmp")
    data = resource.to_dict()

    with temp_path.open("w", encoding="utf-8") as f:
        if path.suffix.lower() in YAML_SUFFIXES:
            yaml.safe_dump(data, f, sort_keys=False)
        else:
            json.dump(data, f, indent=2)
            f.write("\n")

    # Atomic rename
    temp_path.replace(path)
    logger.info(f"Resource saved: {resource.kind}/{resource.metadata.name} → {path.name}")
