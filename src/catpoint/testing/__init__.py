"""Catpoint Testing Helpers"""

from .standard_config import create_standard_sensors, create_standard_repository

__all__ = [
    'create_standard_sensors',
    'create_standard_repository',
]
