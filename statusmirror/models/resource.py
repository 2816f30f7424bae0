"""
Resource Model — A typed object that owns a set of conditions.

Resources are what conditions get read from and written to. The on-disk
shape mirrors the unstructured form:

    kind: Machine
    metadata:
      name: m1
      generation: 3
    status:
      conditions: [...]
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from .base import ConditionSetter
from .condition import Condition


class ObjectMeta(BaseModel):
    """Identity and generation of a resource."""

    name: str
    namespace: Optional[str] = None
    generation: int = 0


class ResourceStatus(BaseModel):
    """Observed state of a resource."""

    conditions: List[Condition] = Field(default_factory=list)

    @field_validator("conditions", mode="before")
    @classmethod
    def _conditions_from_null(cls, value: Any) -> Any:
        # `conditions:` with nothing under it arrives as None
        if value is None:
            return []
        return value


class Resource(BaseModel, ConditionSetter):
    """
    A resource carrying conditions.

    Implements ConditionSetter, so conditions can be both read from and
    written to it.
    """

    kind: str
    metadata: ObjectMeta
    status: ResourceStatus = Field(default_factory=ResourceStatus)

    @field_validator("status", mode="before")
    @classmethod
    def _status_from_null(cls, value: Any) -> Any:
        if value is None:
            return {}
        return value

    @property
    def generation(self) -> int:
        return self.metadata.generation

    def get_conditions(self) -> List[Condition]:
        return self.status.conditions

    def set_conditions(self, conditions: List[Condition]) -> None:
        self.status.conditions = conditions

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using wire names, leaving out unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
