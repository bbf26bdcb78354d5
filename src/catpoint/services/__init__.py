"""Catpoint Services"""

from .transitions import (
    AlarmEvent,
    TRANSITIONS,
    next_status,
    classify_sensor_change,
    classify_image,
    classify_arming,
)
from .listeners import StatusListener, ListenerRegistry
from .repository import (
    SecurityRepository,
    InMemorySecurityRepository,
    JsonFileSecurityRepository,
)
from .security_service import (
    SecurityService,
    SecurityServiceConfig,
    TransitionResult,
)

__all__ = [
    # Transition Table
    'AlarmEvent',
    'TRANSITIONS',
    'next_status',
    'classify_sensor_change',
    'classify_image',
    'classify_arming',
    # Listeners
    'StatusListener',
    'ListenerRegistry',
    # Repository
    'SecurityRepository',
    'InMemorySecurityRepository',
    'JsonFileSecurityRepository',
    # Security Service
    'SecurityService',
    'SecurityServiceConfig',
    'TransitionResult',
]
