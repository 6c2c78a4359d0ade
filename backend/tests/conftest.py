"""
Shared fixtures for archery form tests.

Poses are built in pixel-like units with y growing downward. The default
archer is right-handed: left (bow) arm extended to the left of the image,
right (draw) elbow bent at 100 degrees.
"""

import math
from typing import Dict, List, Optional, Tuple

import pytest

from core.domain.pose import BodyPart, PoseLandmark


LANDMARK_COUNT = 33


def make_landmarks(
    points: Dict[BodyPart, Tuple[float, float]],
    count: int = LANDMARK_COUNT,
) -> List[Optional[PoseLandmark]]:
    """Build a BlazePose-indexed landmark list, None everywhere not given."""
    landmarks: List[Optional[PoseLandmark]] = [None] * count
    for part, (x, y) in points.items():
        landmarks[part.value] = PoseLandmark(x=x, y=y)
    return landmarks


def ideal_points() -> Dict[BodyPart, Tuple[float, float]]:
    """Straight bow arm, 100 degree draw elbow, level shoulders and hips."""
    draw_dir = math.radians(80)
    return {
        BodyPart.NOSE: (250.0, 150.0),
        BodyPart.LEFT_SHOULDER: (200.0, 200.0),
        BodyPart.RIGHT_SHOULDER: (300.0, 200.0),
        BodyPart.LEFT_ELBOW: (100.0, 200.0),
        BodyPart.LEFT_WRIST: (0.0, 200.0),
        BodyPart.RIGHT_ELBOW: (400.0, 200.0),
        BodyPart.RIGHT_WRIST: (400.0 + 100.0 * math.cos(draw_dir), 200.0 - 100.0 * math.sin(draw_dir)),
        BodyPart.LEFT_HIP: (220.0, 400.0),
        BodyPart.RIGHT_HIP: (280.0, 400.0),
    }


def points_with_draw_length(draw_length: float) -> Dict[BodyPart, Tuple[float, float]]:
    """Ideal pose with the draw arm laid straight out to a given length."""
    points = ideal_points()
    points[BodyPart.RIGHT_ELBOW] = (300.0 + draw_length / 2, 200.0)
    points[BodyPart.RIGHT_WRIST] = (300.0 + draw_length, 200.0)
    return points


def landmarks_to_json(landmarks: List[Optional[PoseLandmark]]) -> List[Optional[dict]]:
    return [{"x": lm.x, "y": lm.y} if lm is not None else None for lm in landmarks]


@pytest.fixture
def ideal_landmarks() -> List[Optional[PoseLandmark]]:
    return make_landmarks(ideal_points())
