"""
Conditions Module — Get, set and mirror conditions.
"""

from .getter import get_condition, unstructured_get
from .mirror import (
    NOT_YET_REPORTED_REASON,
    FallbackCondition,
    MirrorOption,
    MirrorOptions,
    TargetConditionType,
    bool_to_status,
    new_mirror_condition,
    new_mirror_condition_for,
    set_mirror_condition,
    set_mirror_condition_from_unstructured,
)
from .owner import get_condition_owner_info
from .setter import set_condition

__all__ = [
    "NOT_YET_REPORTED_REASON",
    "MirrorOption",
    "MirrorOptions",
    "TargetConditionType",
    "FallbackCondition",
    "new_mirror_condition",
    "new_mirror_condition_for",
    "set_mirror_condition",
    "set_mirror_condition_from_unstructured",
    "bool_to_status",
    "get_condition",
    "unstructured_get",
    "set_condition",
    "get_condition_owner_info",
]
