"""
Security Repository - sensor and status store

Durable home for the alarm status, arming status and sensor set.
The security service reads and writes them only through this contract.

Stores:
- InMemorySecurityRepository: process-local, for tests and demos
- JsonFileSecurityRepository: persists a SecurityState JSON document
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, Optional, Set, Tuple, Union

from ..domain.enums import AlarmStatus, ArmingStatus, SensorType
from ..domain.models import SecurityState, Sensor

logger = logging.getLogger(__name__)


# =============================================================================
# Repository Contract
# =============================================================================

class SecurityRepository(ABC):
    """Get/set contract for sensors and process-wide statuses."""

    @abstractmethod
    def get_alarm_status(self) -> AlarmStatus:
        pass

    @abstractmethod
    def set_alarm_status(self, status: AlarmStatus) -> None:
        pass

    @abstractmethod
    def get_arming_status(self) -> ArmingStatus:
        pass

    @abstractmethod
    def set_arming_status(self, status: ArmingStatus) -> None:
        pass

    @abstractmethod
    def get_sensors(self) -> Set[Sensor]:
        pass

    @abstractmethod
    def add_sensor(self, sensor: Sensor) -> None:
        pass

    @abstractmethod
    def remove_sensor(self, sensor: Sensor) -> None:
        pass

    @abstractmethod
    def update_sensor(self, sensor: Sensor) -> None:
        """Persist the sensor's activation flag."""
        pass


# =============================================================================
# In-Memory Store
# =============================================================================

class InMemorySecurityRepository(SecurityRepository):
    """Process-local store. Defaults: NO_ALARM, DISARMED, no sensors."""

    def __init__(
        self,
        sensors: Optional[Iterable[Sensor]] = None,
        alarm_status: AlarmStatus = AlarmStatus.NO_ALARM,
        arming_status: ArmingStatus = ArmingStatus.DISARMED,
    ):
        self._alarm_status = alarm_status
        self._arming_status = arming_status
        self._sensors: Dict[Tuple[str, SensorType], Sensor] = {}
        for sensor in sensors or ():
            self._sensors[sensor.identity] = sensor

    def get_alarm_status(self) -> AlarmStatus:
        return self._alarm_status

    def set_alarm_status(self, status: AlarmStatus) -> None:
        self._alarm_status = AlarmStatus(status)
        self._changed()

    def get_arming_status(self) -> ArmingStatus:
        return self._arming_status

    def set_arming_status(self, status: ArmingStatus) -> None:
        self._arming_status = ArmingStatus(status)
        self._changed()

    def get_sensors(self) -> Set[Sensor]:
        return set(self._sensors.values())

    def add_sensor(self, sensor: Sensor) -> None:
        self._sensors[sensor.identity] = sensor
        self._changed()

    def remove_sensor(self, sensor: Sensor) -> None:
        if self._sensors.pop(sensor.identity, None) is not None:
            self._changed()

    def update_sensor(self, sensor: Sensor) -> None:
        stored = self._sensors.get(sensor.identity)
        if stored is None:
            # Unknown sensors are persisted as-is
            self._sensors[sensor.identity] = sensor
        elif stored is not sensor:
            stored.active = sensor.active
        self._changed()

    def snapshot(self) -> SecurityState:
        """Current contents as a serializable model."""
        return SecurityState(
            alarm_status=self._alarm_status,
            arming_status=self._arming_status,
            sensors=sorted(self._sensors.values()),
        )

    def _changed(self) -> None:
        """Hook called after every mutation."""


# =============================================================================
# JSON File Store
# =============================================================================

class JsonFileSecurityRepository(InMemorySecurityRepository):
    """Store persisted as a single JSON document.

    The file is loaded once on construction (if present) and rewritten
    after every mutation.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        state = self._load()
        super().__init__(
            sensors=state.sensors,
            alarm_status=state.alarm_status,
            arming_status=state.arming_status,
        )
        logger.info(
            f"[JsonFileRepository] Loaded {self.path}: "
            f"{len(state.sensors)} sensors, {state.alarm_status.value}, "
            f"{state.arming_status.value}"
        )

    def _load(self) -> SecurityState:
        if not self.path.exists():
            return SecurityState()
        return SecurityState.model_validate_json(self.path.read_text(encoding="utf-8"))

    def _changed(self) -> None:
        # Sibling temp file + rename: a failed write leaves the previous document intact
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            f.write(self.snapshot().model_dump_json(indent=2))
        tmp_path.replace(self.path)
