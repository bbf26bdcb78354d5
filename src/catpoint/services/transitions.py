"""
Catpoint Alarm Transition Table

AlarmStatus transitions as data: (current status, event kind) -> next status.
Only status-changing pairs are listed; every other pair is identity.

Key rules:
1. ALARM is sticky against sensor activation
2. Sensor activation escalates NO_ALARM -> PENDING_ALARM -> ALARM
3. Re-activating an active sensor while PENDING_ALARM escalates to ALARM
4. Deactivation while ALARM steps down to PENDING_ALARM;
   deactivating the last active sensor while PENDING_ALARM clears it
5. Deactivating an inactive sensor never changes status
"""

from enum import Enum

from ..domain.enums import AlarmStatus, ArmingStatus


class AlarmEvent(str, Enum):
    """Event kinds evaluated by the transition table."""
    # Sensor events
    SENSOR_ACTIVATED = "sensor_activated"                      # inactive -> active
    SENSOR_REACTIVATED = "sensor_reactivated"                  # active -> active
    SENSOR_DEACTIVATED = "sensor_deactivated"                  # others still active
    LAST_SENSOR_DEACTIVATED = "last_sensor_deactivated"        # nothing left active
    INACTIVE_SENSOR_DEACTIVATED = "inactive_sensor_deactivated"

    # Camera events
    CAT_DETECTED_ARMED_HOME = "cat_detected_armed_home"
    CAT_DETECTED_NOT_ARMED_HOME = "cat_detected_not_armed_home"
    NO_CAT_SENSORS_ACTIVE = "no_cat_sensors_active"
    NO_CAT_ALL_CLEAR = "no_cat_all_clear"

    # Arming events
    DISARMED = "disarmed"
    ARMED = "armed"
    ARMED_HOME_WITH_CAT = "armed_home_with_cat"


_ALL_STATUSES = tuple(AlarmStatus)


def _from_any(event: AlarmEvent, to_status: AlarmStatus) -> dict:
    return {(status, event): to_status for status in _ALL_STATUSES}


TRANSITIONS: dict[tuple[AlarmStatus, AlarmEvent], AlarmStatus] = {
    # Sensor activation
    (AlarmStatus.NO_ALARM, AlarmEvent.SENSOR_ACTIVATED): AlarmStatus.PENDING_ALARM,
    (AlarmStatus.PENDING_ALARM, AlarmEvent.SENSOR_ACTIVATED): AlarmStatus.ALARM,
    (AlarmStatus.PENDING_ALARM, AlarmEvent.SENSOR_REACTIVATED): AlarmStatus.ALARM,

    # Sensor deactivation
    (AlarmStatus.PENDING_ALARM, AlarmEvent.LAST_SENSOR_DEACTIVATED): AlarmStatus.NO_ALARM,
    (AlarmStatus.ALARM, AlarmEvent.SENSOR_DEACTIVATED): AlarmStatus.PENDING_ALARM,
    (AlarmStatus.ALARM, AlarmEvent.LAST_SENSOR_DEACTIVATED): AlarmStatus.PENDING_ALARM,

    # Camera and arming overrides
    **_from_any(AlarmEvent.CAT_DETECTED_ARMED_HOME, AlarmStatus.ALARM),
    **_from_any(AlarmEvent.NO_CAT_ALL_CLEAR, AlarmStatus.NO_ALARM),
    **_from_any(AlarmEvent.DISARMED, AlarmStatus.NO_ALARM),
    **_from_any(AlarmEvent.ARMED_HOME_WITH_CAT, AlarmStatus.ALARM),
}


def next_status(current: AlarmStatus, event: AlarmEvent) -> AlarmStatus:
    """Look up the status that follows `current` on `event`."""
    return TRANSITIONS.get((current, event), current)


# =============================================================================
# Event Classification
# =============================================================================

def classify_sensor_change(
    was_active: bool,
    now_active: bool,
    others_active: bool,
) -> AlarmEvent:
    """Classify a sensor activation change.

    Args:
        was_active: Sensor state before the change
        now_active: Requested sensor state
        others_active: Whether any other sensor in the store is active

    Returns:
        The sensor event kind
    """
    if now_active:
        return AlarmEvent.SENSOR_REACTIVATED if was_active else AlarmEvent.SENSOR_ACTIVATED
    if not was_active:
        return AlarmEvent.INACTIVE_SENSOR_DEACTIVATED
    if others_active:
        return AlarmEvent.SENSOR_DEACTIVATED
    return AlarmEvent.LAST_SENSOR_DEACTIVATED


def classify_image(
    cat_detected: bool,
    arming_status: ArmingStatus,
    any_sensor_active: bool,
) -> AlarmEvent:
    """Classify the outcome of processing a camera image."""
    if cat_detected:
        if arming_status == ArmingStatus.ARMED_HOME:
            return AlarmEvent.CAT_DETECTED_ARMED_HOME
        return AlarmEvent.CAT_DETECTED_NOT_ARMED_HOME
    if any_sensor_active:
        return AlarmEvent.NO_CAT_SENSORS_ACTIVE
    return AlarmEvent.NO_CAT_ALL_CLEAR


def classify_arming(arming_status: ArmingStatus, cat_detected: bool) -> AlarmEvent:
    """Classify an arming status change.

    `cat_detected` is the last known camera result.
    """
    if arming_status == ArmingStatus.DISARMED:
        return AlarmEvent.DISARMED
    if arming_status == ArmingStatus.ARMED_HOME and cat_detected:
        return AlarmEvent.ARMED_HOME_WITH_CAT
    return AlarmEvent.ARMED
