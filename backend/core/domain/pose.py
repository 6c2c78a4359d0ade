"""
Pose Domain Models

Data structures for representing the 2D body landmarks supplied by an
upstream pose estimator (MediaPipe / BlazePose layout).

BlazePose returns 33 landmarks:
https://developers.google.com/mediapipe/solutions/vision/pose_landmarker

Any landmark may be missing in a given frame. A missing landmark is stored
as None in the sequence, never as a placeholder point.
"""
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Sequence


class BodyPart(IntEnum):
    """
    BlazePose landmark indices.

    Single source of truth for every index lookup in the analysis.
    Only the landmarks relevant to archery form are listed.
    """
    # Face
    NOSE = 0
    LEFT_EYE = 2
    RIGHT_EYE = 5
    LEFT_EAR = 7
    RIGHT_EAR = 8

    # Upper body
    LEFT_SHOULDER = 11
    RIGHT_SHOULDER = 12
    LEFT_ELBOW = 13
    RIGHT_ELBOW = 14
    LEFT_WRIST = 15
    RIGHT_WRIST = 16

    # Lower body
    LEFT_HIP = 23
    RIGHT_HIP = 24


# A frame must carry at least up to the hip indices to be analyzable
MIN_LANDMARK_COUNT = 25


@dataclass(frozen=True)
class PoseLandmark:
    """
    A single body landmark.

    Attributes:
        x: Horizontal position
        y: Vertical position (grows downward in image coordinates)
        z: Depth, carried through but not used by the 2D analysis
        visibility: Detector confidence (0.0 to 1.0)

    Note:
        Units are whatever the pose source emits (pixels or normalized).
        They only need to be consistent within a session.
    """
    x: float
    y: float
    z: float = 0.0
    visibility: float = 1.0


Landmarks = Sequence[Optional[PoseLandmark]]


def get_landmark(landmarks: Optional[Landmarks], body_part: BodyPart) -> Optional[PoseLandmark]:
    """Option-checked index lookup into a landmark sequence."""
    if landmarks is None:
        return None
    index = body_part.value
    if 0 <= index < len(landmarks):
        return landmarks[index]
    return None


_ARM_PARTS = {
    "left": (BodyPart.LEFT_SHOULDER, BodyPart.LEFT_ELBOW, BodyPart.LEFT_WRIST),
    "right": (BodyPart.RIGHT_SHOULDER, BodyPart.RIGHT_ELBOW, BodyPart.RIGHT_WRIST),
}


def arm_landmarks(landmarks: Landmarks, side: str) -> tuple[Optional[PoseLandmark], ...]:
    """Shoulder, elbow and wrist for one side ("left" or "right")."""
    return tuple(get_landmark(landmarks, part) for part in _ARM_PARTS[side])
