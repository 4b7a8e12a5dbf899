"""Tests for method activities."""

import pytest

from powermonitor.core import Activity, MethodActivity, Quantity, Unit


def test_method_activity_is_an_activity(make_activity):
    assert isinstance(make_activity("a.B.c", "a.B"), Activity)


def test_identifier_unfiltered(make_activity):
    assert make_activity("a.B.c", "a.B").get_identifier(False) == "a.B.c"


def test_identifier_filtered(make_activity):
    assert make_activity("a.B.c", "a.B").get_identifier(True) == "a.B"


def test_identifier_falls_back_to_filtered_qualifier(make_activity):
    activity = make_activity(None, "a.B")
    assert activity.get_identifier(False) == "a.B"
    assert activity.get_identifier(True) == "a.B"


def test_not_finalized_without_quantity(make_activity):
    assert not make_activity("a.B.c", "a.B").is_finalized()


def test_finalize(make_activity):
    activity = make_activity("a.B.c", "a.B")
    activity.finalize(Quantity(2.5, Unit.WATT))
    assert activity.is_finalized()
    assert activity.represented_quantity == Quantity(2.5, Unit.WATT)


def test_finalize_twice_fails(make_activity):
    activity = make_activity("a.B.c", "a.B", value=1.0)
    with pytest.raises(ValueError):
        activity.finalize(Quantity(2.0, Unit.WATT))
    assert activity.represented_quantity.value == 1.0


def test_system_time(make_activity):
    activity = make_activity("a.B.c", "a.B", system_time=123456)
    assert activity.get_system_time() == 123456
    assert isinstance(activity, MethodActivity)
