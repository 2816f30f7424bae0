"""
Condition Setter — Write a condition to an object, replacing any condition
of the same type.

The setter owns the stamping rules that builders leave open:

- observed_generation is always the target object's generation.
- Each type appears once; duplicates of the replaced type are dropped.
- last_transition_time is kept when the status doesn't change, and defaults
  to now when the status changes (or the condition is new) and the incoming
  condition has no transition time of its own.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Optional

from ..models.base import ConditionSetter
from ..models.condition import Condition

logger = logging.getLogger(__name__)


def set_condition(
    obj: ConditionSetter,
    condition: Condition,
    now: Optional[datetime] = None,
) -> None:
    """
    Set a condition on an object.

    Args:
        obj: Object to write to
        condition: Condition to set; the caller's instance is not modified
        now: Timestamp used for transitions (default: current UTC time)
    """
    now = now or datetime.now(timezone.utc)
    new = condition.model_copy(deep=True)
    new.observed_generation = obj.generation

    conditions = list(obj.get_conditions())

    for index, existing in enumerate(conditions):
        if existing.type != new.type:
            continue

        if existing.status != new.status:
            if new.last_transition_time is None:
                new.last_transition_time = now
            logger.debug(
                f"Condition {new.type}: {existing.status.value} → {new.status.value}"
            )
        else:
            new.last_transition_time = existing.last_transition_time

        # Later entries of the same type are stale duplicates
        conditions = [
            c for i, c in enumerate(conditions) if i <= index or c.type != new.type
        ]
        conditions[index] = new
        obj.set_conditions(conditions)
        return

    if new.last_transition_time is None:
        new.last_transition_time = now
    logger.debug(f"Condition {new.type} added with status {new.status.value}")

    conditions.append(new)
    obj.set_conditions(conditions)
