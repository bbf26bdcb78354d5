"""
Catpoint Core Enums

Alarm status, arming status and sensor types shared by the store,
the security service and any presentation layer.
String-valued so they serialize directly into the JSON store.
"""

from enum import Enum


# =============================================================================
# Alarm Status (state machine output)
# =============================================================================

class AlarmStatus(str, Enum):
    """System threat level. Exactly one value exists at any time."""
    NO_ALARM = "no_alarm"
    PENDING_ALARM = "pending_alarm"
    ALARM = "alarm"

    @property
    def description(self) -> str:
        return _ALARM_DESCRIPTIONS[self]


_ALARM_DESCRIPTIONS = {
    AlarmStatus.NO_ALARM: "Cool and Good",
    AlarmStatus.PENDING_ALARM: "I'm in Danger...",
    AlarmStatus.ALARM: "Awooga!",
}


# =============================================================================
# Arming Status (user controlled)
# =============================================================================

class ArmingStatus(str, Enum):
    """User-selected mode governing whether triggers can raise an alarm."""
    DISARMED = "disarmed"
    ARMED_HOME = "armed_home"
    ARMED_AWAY = "armed_away"

    @property
    def is_armed(self) -> bool:
        return self is not ArmingStatus.DISARMED


# =============================================================================
# Sensor Types
# =============================================================================

class SensorType(str, Enum):
    """Binary contact/presence sensor kinds."""
    DOOR = "door"
    WINDOW = "window"
    MOTION = "motion"
