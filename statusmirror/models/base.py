"""
Condition Owner Interfaces — What an object must offer to have conditions
read from or written to it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List

from .condition import Condition


class ConditionGetter(ABC):
    """An object whose conditions can be read."""

    @abstractmethod
    def get_conditions(self) -> List[Condition]:
        """Return the object's conditions."""
        pass


class ConditionSetter(ConditionGetter):
    """An object whose conditions can be read and replaced."""

    @property
    @abstractmethod
    def generation(self) -> int:
        """Generation stamped on conditions written to this object."""
        pass

    @abstractmethod
    def set_conditions(self, conditions: List[Condition]) -> None:
        """Replace the object's conditions."""
        pass
