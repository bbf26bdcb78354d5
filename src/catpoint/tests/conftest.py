"""
Shared fixtures for catpoint tests
"""

from unittest.mock import Mock

import numpy as np
import pytest

from catpoint.domain import Sensor, SensorType
from catpoint.hardware.cat_detector import CatDetector
from catpoint.services import SecurityService, StatusListener
from catpoint.testing import create_standard_repository


@pytest.fixture
def repository():
    """Standard in-memory store: door, window, motion, all inactive."""
    return create_standard_repository()


@pytest.fixture
def cat_detector():
    """Detector mock; tests set `contains_cat.return_value`."""
    detector = Mock(spec=CatDetector)
    detector.contains_cat.return_value = False
    return detector


@pytest.fixture
def listener():
    return Mock(spec=StatusListener)


@pytest.fixture
def service(repository, cat_detector, listener):
    service = SecurityService(repository, cat_detector)
    service.add_status_listener(listener)
    return service


@pytest.fixture
def door(repository):
    """The stored door sensor (same object the store holds)."""
    return next(s for s in repository.get_sensors() if s.sensor_type == SensorType.DOOR)


@pytest.fixture
def window(repository):
    return next(s for s in repository.get_sensors() if s.sensor_type == SensorType.WINDOW)


@pytest.fixture
def image():
    return np.zeros((64, 64, 3), dtype=np.uint8)


@pytest.fixture
def new_sensor():
    return Sensor(name="Garage Door", sensor_type=SensorType.DOOR)
