"""
Catpoint Security Service - alarm status state machine

Combines sensor activation events, arming mode changes and camera
cat detection into a single AlarmStatus:
NO_ALARM → PENDING_ALARM → ALARM

Every operation reads the current status from the repository, decides
through the transition table, writes back only on change and then
notifies listeners. Collaborator errors propagate to the caller.
"""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional, Set

from ..domain.enums import AlarmStatus, ArmingStatus
from ..domain.models import Sensor
from ..hardware.cat_detector import CatDetector
from .listeners import ListenerRegistry, StatusListener
from .repository import SecurityRepository
from .transitions import (
    AlarmEvent,
    classify_arming,
    classify_image,
    classify_sensor_change,
    next_status,
)

logger = logging.getLogger(__name__)


@dataclass
class SecurityServiceConfig:
    """Configuration for SecurityService."""
    # Percent scale (0-100), passed through to the cat detector
    cat_confidence_threshold: float = 50.0


@dataclass
class TransitionResult:
    """Result of evaluating one event against the transition table."""
    from_status: AlarmStatus
    to_status: AlarmStatus
    event: AlarmEvent
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def changed(self) -> bool:
        return self.from_status != self.to_status


class SecurityService:
    """Alarm status state machine.

    Stateless apart from the listener registry and the cached result of
    the last processed image; all alarm, arming and sensor state lives in
    the repository. Each public operation runs under a re-entrant lock so
    read → decide → write → notify is one critical section.
    """

    def __init__(
        self,
        repository: SecurityRepository,
        cat_detector: CatDetector,
        config: Optional[SecurityServiceConfig] = None,
    ):
        self.repository = repository
        self.cat_detector = cat_detector
        self.config = config or SecurityServiceConfig()

        self._listeners = ListenerRegistry()
        self._lock = threading.RLock()

        # Last camera result, consumed by set_arming_status(ARMED_HOME)
        self._last_cat_detected: Optional[bool] = None

    @property
    def last_cat_detected(self) -> Optional[bool]:
        """Result of the last processed image (None before the first one)."""
        return self._last_cat_detected

    # =========================================================================
    # Listeners
    # =========================================================================

    def add_status_listener(self, listener: StatusListener) -> None:
        with self._lock:
            self._listeners.add(listener)

    def remove_status_listener(self, listener: StatusListener) -> None:
        with self._lock:
            self._listeners.remove(listener)

    # =========================================================================
    # Status Queries
    # =========================================================================

    def get_alarm_status(self) -> AlarmStatus:
        return self.repository.get_alarm_status()

    def get_arming_status(self) -> ArmingStatus:
        return self.repository.get_arming_status()

    def get_sensors(self) -> Set[Sensor]:
        return self.repository.get_sensors()

    # =========================================================================
    # Sensor Management
    # =========================================================================

    def add_sensor(self, sensor: Sensor) -> None:
        with self._lock:
            self.repository.add_sensor(sensor)

    def remove_sensor(self, sensor: Sensor) -> None:
        with self._lock:
            self.repository.remove_sensor(sensor)

    # =========================================================================
    # Events
    # =========================================================================

    def set_alarm_status(self, status: AlarmStatus) -> None:
        """Manually set the alarm status (e.g. a user reset)."""
        with self._lock:
            self._commit_status(self.repository.get_alarm_status(), AlarmStatus(status))

    def change_sensor_activation_status(self, sensor: Sensor, active: bool) -> TransitionResult:
        """Update one sensor's activation flag and re-evaluate the alarm status.

        The sensor's current `active` value is taken as its previous state.
        The new value is always persisted, whether or not the status changes.
        """
        with self._lock:
            current = self.repository.get_alarm_status()
            others_active = any(
                s.active for s in self.repository.get_sensors() if s != sensor
            )
            event = classify_sensor_change(sensor.active, active, others_active)

            sensor.active = active
            self.repository.update_sensor(sensor)

            result = self._evaluate(current, event)
            self._listeners.broadcast("sensor_status_changed")
            return result

    def process_image(self, image: Any) -> TransitionResult:
        """Run cat detection on a camera image and re-evaluate the alarm status.

        Inference runs outside the lock; only the evaluation that follows
        is serialized with other events.
        """
        cat_detected = bool(
            self.cat_detector.contains_cat(image, self.config.cat_confidence_threshold)
        )
        logger.info(f"[SecurityService] Image processed: cat_detected={cat_detected}")

        with self._lock:
            self._last_cat_detected = cat_detected
            current = self.repository.get_alarm_status()
            event = classify_image(
                cat_detected,
                self.repository.get_arming_status(),
                any(s.active for s in self.repository.get_sensors()),
            )
            result = self._evaluate(current, event)
            self._listeners.broadcast("cat_detected", cat_detected)
            return result

    def set_arming_status(self, status: ArmingStatus) -> TransitionResult:
        """Change the arming mode.

        Arming (home or away) silently resets every sensor to inactive,
        on every call. Arming home while the last image showed a cat
        raises the alarm immediately.

        Sensors and arming status are committed before the alarm status,
        so listeners notified of the new alarm status see both.
        """
        status = ArmingStatus(status)
        with self._lock:
            if status.is_armed:
                self._reset_sensors()

            self.repository.set_arming_status(status)
            logger.info(f"[SecurityService] Arming status set to {status.value}")

            current = self.repository.get_alarm_status()
            event = classify_arming(status, bool(self._last_cat_detected))
            result = self._evaluate(current, event)

            if status.is_armed:
                self._listeners.broadcast("sensor_status_changed")
            return result

    # =========================================================================
    # Internal
    # =========================================================================

    def _reset_sensors(self) -> None:
        # Direct writes: a reset is not run through the sensor rules
        for sensor in self.repository.get_sensors():
            if sensor.active:
                logger.debug(f"[SecurityService] Resetting sensor {sensor.name}")
            sensor.active = False
            self.repository.update_sensor(sensor)

    def _evaluate(self, current: AlarmStatus, event: AlarmEvent) -> TransitionResult:
        result = TransitionResult(
            from_status=current,
            to_status=next_status(current, event),
            event=event,
        )
        if result.changed:
            self._commit_status(result.from_status, result.to_status, event)
        else:
            logger.debug(
                f"[SecurityService] {event.value}: status unchanged ({current.value})"
            )
        return result

    def _commit_status(
        self,
        current: AlarmStatus,
        new_status: AlarmStatus,
        event: Optional[AlarmEvent] = None,
    ) -> None:
        if new_status == current:
            return
        self.repository.set_alarm_status(new_status)
        logger.info(
            f"[SecurityService] {current.value} → {new_status.value}"
            f" ({event.value if event else 'manual'})"
        )
        self._listeners.broadcast("notify", new_status)
