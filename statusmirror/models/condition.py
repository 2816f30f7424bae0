"""
Condition Model — A timestamped status record attached to a resource.

A condition describes one aspect of a resource's state:

    {"type": "Ready", "status": "False", "reason": "WaitingForInfra",
     "message": "infra not ready", "lastTransitionTime": "2026-01-01T00:00:00Z"}

Field names follow Python conventions; the camelCase wire names are accepted
as aliases and used when serializing.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConditionStatus(str, Enum):
    """Three-valued status of a condition."""

    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


class Condition(BaseModel):
    """A single status condition."""

    model_config = ConfigDict(populate_by_name=True)

    type: str
    status: ConditionStatus
    reason: str = ""
    message: str = ""
    # Set by the writer when absent
    last_transition_time: Optional[datetime] = Field(default=None, alias="lastTransitionTime")
    observed_generation: Optional[int] = Field(default=None, alias="observedGeneration")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using wire names, leaving out unset fields."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @field_validator("status", mode="before")
    @classmethod
    def _status_from_bool(cls, value: Any) -> Any:
        # Unquoted True/False in YAML arrives as a bool
        if isinstance(value, bool):
            return "True" if value else "False"
        return value

    @field_validator("reason", "message", mode="before")
    @classmethod
    def _text_from_null(cls, value: Any) -> Any:
        # An empty YAML field (`message:`) arrives as None
        if value is None:
            return ""
        return value
