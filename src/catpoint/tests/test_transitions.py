"""
Tests for the alarm transition table and event classifiers
"""

import pytest

from catpoint.domain import AlarmStatus, ArmingStatus
from catpoint.services.transitions import (
    AlarmEvent,
    TRANSITIONS,
    classify_arming,
    classify_image,
    classify_sensor_change,
    next_status,
)


# =============================================================================
# Transition Table
# =============================================================================

class TestTransitionTable:
    """Table lookups"""

    @pytest.mark.parametrize("current,event,expected", [
        (AlarmStatus.NO_ALARM, AlarmEvent.SENSOR_ACTIVATED, AlarmStatus.PENDING_ALARM),
        (AlarmStatus.PENDING_ALARM, AlarmEvent.SENSOR_ACTIVATED, AlarmStatus.ALARM),
        (AlarmStatus.PENDING_ALARM, AlarmEvent.SENSOR_REACTIVATED, AlarmStatus.ALARM),
        (AlarmStatus.PENDING_ALARM, AlarmEvent.LAST_SENSOR_DEACTIVATED, AlarmStatus.NO_ALARM),
        (AlarmStatus.PENDING_ALARM, AlarmEvent.SENSOR_DEACTIVATED, AlarmStatus.PENDING_ALARM),
        (AlarmStatus.ALARM, AlarmEvent.SENSOR_ACTIVATED, AlarmStatus.ALARM),
        (AlarmStatus.ALARM, AlarmEvent.SENSOR_REACTIVATED, AlarmStatus.ALARM),
        (AlarmStatus.ALARM, AlarmEvent.SENSOR_DEACTIVATED, AlarmStatus.PENDING_ALARM),
        (AlarmStatus.ALARM, AlarmEvent.LAST_SENSOR_DEACTIVATED, AlarmStatus.PENDING_ALARM),
        (AlarmStatus.NO_ALARM, AlarmEvent.SENSOR_REACTIVATED, AlarmStatus.NO_ALARM),
    ])
    def test_sensor_rules(self, current, event, expected):
        assert next_status(current, event) == expected

    @pytest.mark.parametrize("current", list(AlarmStatus))
    def test_inactive_sensor_deactivated_is_identity(self, current):
        assert next_status(current, AlarmEvent.INACTIVE_SENSOR_DEACTIVATED) == current

    @pytest.mark.parametrize("current", list(AlarmStatus))
    def test_overrides_from_any_status(self, current):
        assert next_status(current, AlarmEvent.CAT_DETECTED_ARMED_HOME) == AlarmStatus.ALARM
        assert next_status(current, AlarmEvent.ARMED_HOME_WITH_CAT) == AlarmStatus.ALARM
        assert next_status(current, AlarmEvent.NO_CAT_ALL_CLEAR) == AlarmStatus.NO_ALARM
        assert next_status(current, AlarmEvent.DISARMED) == AlarmStatus.NO_ALARM

    @pytest.mark.parametrize("current", list(AlarmStatus))
    def test_non_triggering_events_are_identity(self, current):
        for event in (
            AlarmEvent.CAT_DETECTED_NOT_ARMED_HOME,
            AlarmEvent.NO_CAT_SENSORS_ACTIVE,
            AlarmEvent.ARMED,
        ):
            assert next_status(current, event) == current

    def test_sensor_entries_all_change_status(self):
        sensor_events = {
            AlarmEvent.SENSOR_ACTIVATED,
            AlarmEvent.SENSOR_REACTIVATED,
            AlarmEvent.SENSOR_DEACTIVATED,
            AlarmEvent.LAST_SENSOR_DEACTIVATED,
            AlarmEvent.INACTIVE_SENSOR_DEACTIVATED,
        }
        entries = {k: v for k, v in TRANSITIONS.items() if k[1] in sensor_events}
        assert len(entries) == 6
        for (current, _event), target in entries.items():
            assert current != target

    def test_every_pair_yields_a_valid_status(self):
        for current in AlarmStatus:
            for event in AlarmEvent:
                assert next_status(current, event) in set(AlarmStatus)


# =============================================================================
# Classifiers
# =============================================================================

class TestClassifySensorChange:
    """classify_sensor_change"""

    def test_activation(self):
        assert classify_sensor_change(False, True, False) == AlarmEvent.SENSOR_ACTIVATED
        assert classify_sensor_change(False, True, True) == AlarmEvent.SENSOR_ACTIVATED

    def test_reactivation(self):
        assert classify_sensor_change(True, True, False) == AlarmEvent.SENSOR_REACTIVATED

    def test_deactivation_with_others_active(self):
        assert classify_sensor_change(True, False, True) == AlarmEvent.SENSOR_DEACTIVATED

    def test_last_deactivation(self):
        assert classify_sensor_change(True, False, False) == AlarmEvent.LAST_SENSOR_DEACTIVATED

    def test_inactive_deactivation(self):
        assert classify_sensor_change(False, False, True) == AlarmEvent.INACTIVE_SENSOR_DEACTIVATED
        assert classify_sensor_change(False, False, False) == AlarmEvent.INACTIVE_SENSOR_DEACTIVATED


class TestClassifyImage:
    """classify_image"""

    def test_cat_while_armed_home(self):
        event = classify_image(True, ArmingStatus.ARMED_HOME, False)
        assert event == AlarmEvent.CAT_DETECTED_ARMED_HOME

    @pytest.mark.parametrize("arming", [ArmingStatus.DISARMED, ArmingStatus.ARMED_AWAY])
    def test_cat_while_not_armed_home(self, arming):
        assert classify_image(True, arming, False) == AlarmEvent.CAT_DETECTED_NOT_ARMED_HOME

    def test_no_cat_with_active_sensor(self):
        event = classify_image(False, ArmingStatus.ARMED_HOME, True)
        assert event == AlarmEvent.NO_CAT_SENSORS_ACTIVE

    def test_no_cat_all_clear(self):
        assert classify_image(False, ArmingStatus.ARMED_AWAY, False) == AlarmEvent.NO_CAT_ALL_CLEAR


class TestClassifyArming:
    """classify_arming"""

    @pytest.mark.parametrize("cat", [True, False])
    def test_disarm(self, cat):
        assert classify_arming(ArmingStatus.DISARMED, cat) == AlarmEvent.DISARMED

    def test_arm_home_with_cat(self):
        assert classify_arming(ArmingStatus.ARMED_HOME, True) == AlarmEvent.ARMED_HOME_WITH_CAT

    def test_arm_away_with_cat(self):
        assert classify_arming(ArmingStatus.ARMED_AWAY, True) == AlarmEvent.ARMED

    def test_arm_home_without_cat(self):
        assert classify_arming(ArmingStatus.ARMED_HOME, False) == AlarmEvent.ARMED
