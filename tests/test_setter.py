"""
Tests for the condition setter.

These tests verify:
- Append vs replace by type
- observed_generation stamping
- Transition time rules (new, changed status, unchanged status)
"""

from datetime import datetime, timedelta, timezone

from statusmirror.conditions import set_condition
from statusmirror.models import Condition, ConditionStatus

NOW = datetime(2026, 6, 1, tzinfo=timezone.utc)


def make_condition(status: ConditionStatus = ConditionStatus.TRUE, **kwargs) -> Condition:
    """Create a Ready condition for testing."""
    return Condition(type=kwargs.pop("type", "Ready"), status=status, **kwargs)


class TestSetConditionAppend:
    """Tests for adding a new condition."""

    def test_appends(self, target):
        set_condition(target, make_condition(), now=NOW)
        assert [c.type for c in target.get_conditions()] == ["Ready"]

    def test_keeps_other_types(self, target):
        set_condition(target, make_condition(type="Available"), now=NOW)
        set_condition(target, make_condition(type="Ready"), now=NOW)
        assert [c.type for c in target.get_conditions()] == ["Available", "Ready"]

    def test_stamps_generation(self, target):
        set_condition(target, make_condition(observed_generation=99), now=NOW)
        assert target.get_conditions()[0].observed_generation == 3

    def test_defaults_transition_time(self, target):
        set_condition(target, make_condition(), now=NOW)
        assert target.get_conditions()[0].last_transition_time == NOW

    def test_keeps_given_transition_time(self, target, t0):
        set_condition(target, make_condition(last_transition_time=t0), now=NOW)
        assert target.get_conditions()[0].last_transition_time == t0

    def test_does_not_modify_argument(self, target):
        condition = make_condition()
        set_condition(target, condition, now=NOW)
        assert condition.observed_generation is None
        assert condition.last_transition_time is None


class TestSetConditionReplace:
    """Tests for replacing an existing condition."""

    def test_replaces_in_place(self, target):
        set_condition(target, make_condition(type="Available"), now=NOW)
        set_condition(target, make_condition(type="Ready", reason="A"), now=NOW)
        set_condition(target, make_condition(type="Available", reason="B"), now=NOW)

        assert [c.type for c in target.get_conditions()] == ["Available", "Ready"]
        assert target.get_conditions()[0].reason == "B"

    def test_status_change_updates_transition_time(self, target, t0):
        set_condition(target, make_condition(ConditionStatus.FALSE), now=t0)
        later = t0 + timedelta(hours=1)
        set_condition(target, make_condition(ConditionStatus.TRUE), now=later)

        condition = target.get_conditions()[0]
        assert condition.status == ConditionStatus.TRUE
        assert condition.last_transition_time == later

    def test_status_change_keeps_given_transition_time(self, target, t0):
        set_condition(target, make_condition(ConditionStatus.FALSE), now=NOW)
        set_condition(target, make_condition(ConditionStatus.TRUE, last_transition_time=t0), now=NOW)
        assert target.get_conditions()[0].last_transition_time == t0

    def test_same_status_keeps_existing_transition_time(self, target, t0):
        set_condition(target, make_condition(reason="Old"), now=t0)
        set_condition(target, make_condition(reason="New", message="updated"), now=NOW)

        condition = target.get_conditions()[0]
        assert condition.last_transition_time == t0
        assert condition.reason == "New"
        assert condition.message == "updated"

    def test_generation_restamped(self, target):
        set_condition(target, make_condition(), now=NOW)
        target.metadata.generation = 4
        set_condition(target, make_condition(), now=NOW)
        assert target.get_conditions()[0].observed_generation == 4

    def test_drops_duplicate_types(self, target, t0):
        """Stale duplicates of the replaced type are removed."""
        target.set_conditions([
            make_condition(ConditionStatus.FALSE, reason="First", last_transition_time=t0),
            make_condition(ConditionStatus.TRUE, type="Available"),
            make_condition(ConditionStatus.FALSE, reason="Stale"),
        ])

        set_condition(target, make_condition(ConditionStatus.TRUE, reason="Fresh"), now=NOW)

        assert [(c.type, c.status, c.reason) for c in target.get_conditions()] == [
            ("Ready", ConditionStatus.TRUE, "Fresh"),
            ("Available", ConditionStatus.TRUE, ""),
        ]
        assert target.get_conditions()[0].last_transition_time == NOW
