"""
catpoint: home security alarm service.

Tracks door/window/motion sensors and an arming mode, and derives a single
alarm status from sensor activity and camera cat detection.
"""

from catpoint.domain import AlarmStatus, ArmingStatus, Sensor, SensorType
from catpoint.services import (
    SecurityService,
    SecurityServiceConfig,
    StatusListener,
    InMemorySecurityRepository,
    JsonFileSecurityRepository,
)
from catpoint.hardware import CatDetector, FakeCatDetector

__version__ = "1.0.0"

__all__ = [
    "AlarmStatus",
    "ArmingStatus",
    "Sensor",
    "SensorType",
    "SecurityService",
    "SecurityServiceConfig",
    "StatusListener",
    "InMemorySecurityRepository",
    "JsonFileSecurityRepository",
    "CatDetector",
    "FakeCatDetector",
]
