"""
Validation — Error types and input checks.

Two error kinds surface from this package:

- DecodeError: condition data in an unstructured object does not have the
  shape of a condition. Raised by the unstructured getter only.
- ValidationError: an object file is missing, unreadable or malformed.

## Usage

    from statusmirror.validation import DecodeError

    try:
        set_mirror_condition_from_unstructured(source, target, "Ready")
    except DecodeError as e:
        print(f"Cannot read source condition: {e}")
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


class ValidationError(Exception):
    """Raised when validation fails."""

    def __init__(self, message: str, field: Optional[str] = None, details: Optional[Dict] = None):
        self.message = message
        self.field = field
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.field:
            return f"{self.field}: {self.message}"
        return self.message


class DecodeError(ValidationError):
    """Raised when condition data cannot be decoded into a Condition."""
    pass


YAML_SUFFIXES = (".yaml", ".yml")


def validate_path_exists(path: Path, description: str = "Path") -> None:
    """Validate that a path exists."""
    if not path.exists():
        raise ValidationError(f"{description} does not exist: {path}")


def validate_file_readable(path: Path, description: str = "File") -> str:
    """Validate that a file exists and is readable, returning its text."""
    validate_path_exists(path, description)

    if not path.is_file():
        raise ValidationError(f"{description} is not a file: {path}")

    try:
        return path.read_text(encoding="utf-8")
    except PermissionError:
        raise ValidationError(f"{description} is not readable: {path}")
    except (OSError, UnicodeDecodeError) as e:
        raise ValidationError(f"{description} cannot be read: {e}")


def validate_object_file(path: Path, description: str = "Object file") -> Dict[str, Any]:
    """
    Validate and load an object file.

    YAML is used for .yaml/.yml files, JSON for everything else.

    Returns:
        Parsed top-level mapping

    Raises:
        ValidationError: If the file is unreadable, malformed, or its top
            level is not a mapping
    """
    content = validate_file_readable(path, description)

    if path.suffix.lower() in YAML_SUFFIXES:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ValidationError(
                f"Invalid YAML in {description}",
                details={"path": str(path), "error": str(e)},
            )
    else:
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise ValidationError(
                f"Invalid JSON in {description}",
                details={"path": str(path), "error": str(e), "line": e.lineno},
            )

    if not isinstance(data, dict):
        raise ValidationError(
            f"{description} must contain a mapping at the top level",
            details={"path": str(path), "type": type(data).__name__},
        )

    return data
