"""
Mirror Conditions — Copy a condition from one object onto another.

A mirror condition reflects a condition of a source object on a target
object, optionally under a different type. When the source condition is
missing, the mirror is either a caller-supplied fallback or an Unknown
"not yet reported" placeholder.

## Usage

    from statusmirror.models import ConditionStatus
    from statusmirror.conditions import (
        FallbackCondition,
        TargetConditionType,
        set_mirror_condition,
    )

    set_mirror_condition(
        infra_machine,
        machine,
        "Ready",
        TargetConditionType("InfraReady"),
        FallbackCondition(ConditionStatus.FALSE, "NotProvisioned", "infra not provisioned yet"),
    )
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from ..models.base import ConditionGetter, ConditionSetter
from ..models.condition import Condition, ConditionStatus
from .getter import get_condition, unstructured_get
from .owner import get_condition_owner_info
from .setter import set_condition

# Reason of conditions generated because an expected condition does not
# exist on an object.
NOT_YET_REPORTED_REASON = "NotYetReported"


class MirrorOption(ABC):
    """Configuration that modifies options for a mirror call."""

    @abstractmethod
    def apply_to_mirror(self, options: MirrorOptions) -> None:
        """Apply this configuration to the given mirror options."""
        pass


@dataclass
class MirrorOptions:
    """Options for a single mirror operation."""

    target_condition_type: str
    fallback_status: Optional[ConditionStatus] = None
    fallback_reason: str = ""
    fallback_message: str = ""

    def apply_options(self, opts: Sequence[MirrorOption]) -> MirrorOptions:
        """
        Apply the given options in order, then return self for chaining.

        Later options overwrite fields set by earlier ones.
        """
        for opt in opts:
            opt.apply_to_mirror(self)
        return self


@dataclass(frozen=True)
class TargetConditionType(MirrorOption):
    """Use a different type for the mirror condition than the source's."""

    condition_type: str

    def apply_to_mirror(self, options: MirrorOptions) -> None:
        options.target_condition_type = self.condition_type


@dataclass(frozen=True)
class FallbackCondition(MirrorOption):
    """Condition to use when the source condition does not exist."""

    status: ConditionStatus
    reason: str = ""
    message: str = ""

    def apply_to_mirror(self, options: MirrorOptions) -> None:
        options.fallback_status = self.status
        options.fallback_reason = self.reason
        options.fallback_message = self.message


def new_mirror_condition(
    source_obj: Any,
    condition: Optional[Condition],
    source_condition_type: str,
    opts: Sequence[MirrorOption] = (),
) -> Condition:
    """
    Build a mirror of a condition of source_obj.

    Args:
        source_obj: Object the condition was read from; only used to
            describe the condition's origin in messages
        condition: The source condition, or None if it does not exist
        source_condition_type: Type of the source condition
        opts: Mirror options, applied in order

    Returns:
        A new condition:
        - a copy of condition, retyped and with its origin appended to the
          message, if condition exists;
        - the fallback condition, if one is configured;
        - an Unknown / NotYetReported condition otherwise.
    """
    mirror_opts = MirrorOptions(target_condition_type=source_condition_type)
    mirror_opts.apply_options(opts)

    owner = get_condition_owner_info(source_obj)

    if condition is not None:
        # observed_generation is left to the setter: the source object's
        # generation means nothing on the target.
        return Condition(
            type=mirror_opts.target_condition_type,
            status=condition.status,
            reason=condition.reason,
            message=f"{condition.message} (from {owner})".strip(),
            # Transition time is when the source condition changed
            last_transition_time=condition.last_transition_time,
        )

    if mirror_opts.fallback_status:
        return Condition(
            type=mirror_opts.target_condition_type,
            status=mirror_opts.fallback_status,
            reason=mirror_opts.fallback_reason,
            message=mirror_opts.fallback_message,
        )

    return Condition(
        type=mirror_opts.target_condition_type,
        status=ConditionStatus.UNKNOWN,
        reason=NOT_YET_REPORTED_REASON,
        message=f"Condition {source_condition_type} not yet reported from {owner}",
    )


def new_mirror_condition_for(
    source_obj: ConditionGetter,
    source_condition_type: str,
    *opts: MirrorOption,
) -> Condition:
    """
    Read source_condition_type from source_obj and build its mirror.

    See new_mirror_condition for the possible results.
    """
    condition = get_condition(source_obj, source_condition_type)
    return new_mirror_condition(source_obj, condition, source_condition_type, opts)


def set_mirror_condition(
    source_obj: ConditionGetter,
    target_obj: ConditionSetter,
    source_condition_type: str,
    *opts: MirrorOption,
) -> None:
    """Mirror source_condition_type from source_obj onto target_obj."""
    mirror = new_mirror_condition_for(source_obj, source_condition_type, *opts)
    set_condition(target_obj, mirror)


def set_mirror_condition_from_unstructured(
    source_obj: Mapping[str, Any],
    target_obj: ConditionSetter,
    source_condition_type: str,
    *opts: MirrorOption,
) -> None:
    """
    Mirror source_condition_type from an unstructured source_obj onto target_obj.

    Raises:
        DecodeError: If the source condition cannot be decoded. target_obj
            is left untouched.
    """
    condition = unstructured_get(source_obj, source_condition_type)
    mirror = new_mirror_condition(source_obj, condition, source_condition_type, opts)
    set_condition(target_obj, mirror)


def bool_to_status(status: bool) -> ConditionStatus:
    """Convert a bool to ConditionStatus.TRUE or ConditionStatus.FALSE."""
    if status:
        return ConditionStatus.TRUE
    return ConditionStatus.FALSE
