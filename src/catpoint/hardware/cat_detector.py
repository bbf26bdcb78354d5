"""
Cat Detector - camera image classification

Detectors answer one question: does this image contain a cat with at
least the given confidence? Thresholds use the 0-100 percent scale.

- FakeCatDetector: random answer, for running without a vision backend
- YOLOCatDetector: pretrained COCO YOLO model (class "cat")
"""

import logging
import random
import time
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

import cv2
import numpy as np

# Ultralytics YOLO
try:
    from ultralytics import YOLO
    HAS_YOLO = True
except ImportError:
    HAS_YOLO = False

logger = logging.getLogger(__name__)

CAT_CLASS_NAME = "cat"


class CatDetector(ABC):
    """Image classification contract used by the security service."""

    @abstractmethod
    def contains_cat(self, image: np.ndarray, confidence_threshold: float) -> bool:
        """
        Args:
            image: BGR image as loaded by OpenCV
            confidence_threshold: Minimum confidence, percent (0-100)

        Returns:
            True if a cat is detected at or above the threshold
        """
        pass


class FakeCatDetector(CatDetector):
    """Returns a random answer; optionally seeded for reproducibility."""

    def __init__(self, seed: Optional[int] = None):
        self._random = random.Random(seed)

    def contains_cat(self, image: np.ndarray, confidence_threshold: float) -> bool:
        return self._random.random() < 0.5


class YOLOCatDetector(CatDetector):
    """
    YOLO cat detector

    Uses a pretrained COCO model and keeps only the "cat" class.
    """

    def __init__(
        self,
        model_name: str = "yolo11n.pt",
        device: str = "cpu",
    ):
        """
        Args:
            model_name: YOLO model name or weights path
            device: 'cpu' or 'cuda'
        """
        if not HAS_YOLO:
            raise RuntimeError("ultralytics not installed. Install: pip install catpoint[yolo]")

        self.model_name = model_name
        self.device = device

        logger.info(f"[YOLO] Loading model: {model_name}")
        self.model = YOLO(model_name)

        if device == "cuda":
            self.model.to("cuda")

        # COCO class names: {0: 'person', 15: 'cat', ...}
        self.class_names = self.model.names
        self.cat_class_ids = [
            class_id for class_id, name in self.class_names.items()
            if name == CAT_CLASS_NAME
        ]
        if not self.cat_class_ids:
            raise RuntimeError(f"Model {model_name} has no '{CAT_CLASS_NAME}' class")

        # Stats
        self.frame_count = 0
        self.detection_count = 0
        self.total_inference_time = 0.0

    def contains_cat(self, image: np.ndarray, confidence_threshold: float) -> bool:
        start_time = time.time()

        results = self.model(
            image,
            conf=confidence_threshold / 100.0,
            classes=self.cat_class_ids,
            verbose=False,
        )

        self.total_inference_time += time.time() - start_time
        self.frame_count += 1

        detections = sum(len(result.boxes) for result in results)
        self.detection_count += detections
        logger.debug(f"[YOLO] {detections} cat detections (threshold {confidence_threshold}%)")
        return detections > 0

    def get_stats(self) -> Dict:
        """Inference statistics"""
        avg_fps = 0
        if self.total_inference_time > 0:
            avg_fps = self.frame_count / self.total_inference_time

        return {
            "frame_count": self.frame_count,
            "detection_count": self.detection_count,
            "total_inference_time": self.total_inference_time,
            "avg_inference_time": self.total_inference_time / self.frame_count if self.frame_count > 0 else 0,
            "avg_fps": avg_fps,
        }


def load_image(path: Union[str, Path]) -> np.ndarray:
    """Read an image file as a BGR array."""
    image = cv2.imread(str(path))
    if image is None:
        raise FileNotFoundError(f"Cannot read image: {path}")
    return image
