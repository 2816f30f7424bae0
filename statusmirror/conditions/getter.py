"""
Condition Getters — Read a condition by type from typed or unstructured objects.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError

from ..models.base import ConditionGetter
from ..models.condition import Condition
from ..validation import DecodeError

CONDITIONS_PATH = "status.conditions"


def get_condition(obj: ConditionGetter, condition_type: str) -> Optional[Condition]:
    """
    Get the condition with the given type from an object.

    Args:
        obj: Object carrying conditions
        condition_type: Condition type to look up

    Returns:
        A copy of the condition, or None if the object doesn't have it
    """
    for condition in obj.get_conditions():
        if condition.type == condition_type:
            return condition.model_copy(deep=True)
    return None


def get_nested_value(obj: Mapping[str, Any], path: str) -> Any:
    """
    Get a nested value from a mapping using dot notation.

    Returns None as soon as a key is missing; raises DecodeError when an
    intermediate value is present but is not a mapping.
    """
    current: Any = obj
    walked = []

    for part in path.split("."):
        if current is None:
            return None
        if not isinstance(current, Mapping):
            raise DecodeError(
                f"expected an object, got {type(current).__name__}",
                field=".".join(walked) or None,
            )
        current = current.get(part)
        walked.append(part)

    return current


def unstructured_get(obj: Mapping[str, Any], condition_type: str) -> Optional[Condition]:
    """
    Get the condition with the given type from an unstructured object.

    Only the entry matching condition_type is decoded; other entries are
    checked for being objects but not validated.

    Args:
        obj: Object as a plain mapping (e.g. parsed JSON or YAML)
        condition_type: Condition type to look up

    Returns:
        The decoded condition, or None if the object doesn't have it

    Raises:
        DecodeError: If the condition data does not have the shape of a condition
    """
    conditions = get_nested_value(obj, CONDITIONS_PATH)
    if conditions is None:
        return None

    if not isinstance(conditions, list):
        raise DecodeError(
            f"expected a list, got {type(conditions).__name__}",
            field=CONDITIONS_PATH,
        )

    for index, entry in enumerate(conditions):
        field = f"{CONDITIONS_PATH}[{index}]"
        if not isinstance(entry, Mapping):
            raise DecodeError(f"expected an object, got {type(entry).__name__}", field=field)

        if entry.get("type") != condition_type:
            continue

        try:
            return Condition.model_validate(dict(entry))
        except PydanticValidationError as e:
            raise DecodeError(
                f"invalid {condition_type} condition",
                field=field,
                details={"errors": e.errors(include_url=False)},
            ) from e

    return None
