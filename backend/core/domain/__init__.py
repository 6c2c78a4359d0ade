"""
Domain Models

Pure data structures representing archery form analysis concepts.
No external dependencies - just Python dataclasses and enums.
"""

from .pose import PoseLandmark, BodyPart, Landmarks, MIN_LANDMARK_COUNT
from .analysis import (
    Handedness,
    ShotPhase,
    FormCriterion,
    FormMeasurements,
    FrameAnalysis,
)

__all__ = [
    "PoseLandmark",
    "BodyPart",
    "Landmarks",
    "MIN_LANDMARK_COUNT",
    "Handedness",
    "ShotPhase",
    "FormCriterion",
    "FormMeasurements",
    "FrameAnalysis",
]
