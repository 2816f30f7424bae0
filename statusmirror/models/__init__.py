"""
Models — Pydantic schemas for conditions and the resources that carry them.
"""

from .base import ConditionGetter, ConditionSetter
from .condition import Condition, ConditionStatus
from .resource import ObjectMeta, Resource, ResourceStatus

__all__ = [
    "Condition",
    "ConditionGetter",
    "ConditionSetter",
    "ConditionStatus",
    "ObjectMeta",
    "Resource",
    "ResourceStatus",
]
