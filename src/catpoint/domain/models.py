"""
Catpoint Core Models

Sensor and persisted state models.
Uses Pydantic for validation and serialization.
"""

import uuid
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .enums import AlarmStatus, ArmingStatus, SensorType


# =============================================================================
# Sensor
# =============================================================================

class Sensor(BaseModel):
    """A binary door/window/motion sensor.

    Identity is (name, sensor_type): two sensors with the same name and type
    are the same sensor for set membership, whatever their `active` flag or
    generated `sensor_id`.
    """
    model_config = ConfigDict(validate_assignment=True)

    name: str
    sensor_type: SensorType
    active: bool = False
    sensor_id: str = Field(default_factory=lambda: uuid.uuid4().hex)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Sensor name must not be empty")
        return v

    @property
    def identity(self) -> tuple[str, SensorType]:
        return (self.name, self.sensor_type)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Sensor):
            return NotImplemented
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(self.identity)

    def __lt__(self, other: "Sensor") -> bool:
        # Display order: name, then type
        return (self.name, self.sensor_type.value) < (other.name, other.sensor_type.value)


# =============================================================================
# Persisted Store Snapshot
# =============================================================================

class SecurityState(BaseModel):
    """Serialized contents of a security store."""
    alarm_status: AlarmStatus = AlarmStatus.NO_ALARM
    arming_status: ArmingStatus = ArmingStatus.DISARMED
    sensors: list[Sensor] = Field(default_factory=list)
