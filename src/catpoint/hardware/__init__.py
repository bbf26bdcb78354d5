"""Catpoint Hardware Integrations"""

from .cat_detector import (
    CatDetector,
    FakeCatDetector,
    YOLOCatDetector,
    HAS_YOLO,
    load_image,
)

__all__ = [
    'CatDetector',
    'FakeCatDetector',
    'YOLOCatDetector',
    'HAS_YOLO',
    'load_image',
]
