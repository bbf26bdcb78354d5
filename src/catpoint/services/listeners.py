"""
Status Listeners

Observers notified synchronously after each committed state change.
A failing listener is logged and skipped; it never blocks the others
or rolls back the change that triggered the broadcast.
"""

import logging
from typing import Any, List, Protocol, runtime_checkable

from ..domain.enums import AlarmStatus

logger = logging.getLogger(__name__)


@runtime_checkable
class StatusListener(Protocol):
    """Notification capability expected from status observers."""

    def notify(self, status: AlarmStatus) -> None:
        """Alarm status changed to `status`."""

    def sensor_status_changed(self) -> None:
        """One or more sensors changed activation state."""

    def cat_detected(self, detected: bool) -> None:
        """A camera image was processed. Optional; listeners without it are skipped."""


class ListenerRegistry:
    """Ordered, duplicate-free collection of status listeners."""

    def __init__(self) -> None:
        self._listeners: List[StatusListener] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def __contains__(self, listener: Any) -> bool:
        return listener in self._listeners

    def add(self, listener: StatusListener) -> None:
        if listener in self._listeners:
            return
        self._listeners.append(listener)
        logger.debug(f"[Listeners] Added {type(listener).__name__}")

    def remove(self, listener: StatusListener) -> None:
        if listener not in self._listeners:
            return
        self._listeners.remove(listener)
        logger.debug(f"[Listeners] Removed {type(listener).__name__}")

    def broadcast(self, method: str, *args: Any) -> None:
        """Call `method` on every listener in registration order.

        Args:
            method: Listener method name (notify, sensor_status_changed, cat_detected)
            *args: Positional arguments for the method
        """
        # Snapshot so listeners may unregister themselves mid-broadcast
        for listener in list(self._listeners):
            handler = getattr(listener, method, None)
            if handler is None:
                continue
            try:
                handler(*args)
            except Exception as e:
                logger.error(
                    f"[Listeners] Error in {type(listener).__name__}.{method}: {e}",
                    exc_info=True,
                )
