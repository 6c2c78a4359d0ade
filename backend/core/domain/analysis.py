"""
Form Analysis Domain Models

Data structures for representing archery form analysis results,
including handedness, per-criterion scores and shot phases.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class Handedness(Enum):
    """Which side of the body a hand or arm is on."""
    LEFT = "left"
    RIGHT = "right"

    @property
    def opposite(self) -> "Handedness":
        return Handedness.RIGHT if self is Handedness.LEFT else Handedness.LEFT


class ShotPhase(Enum):
    """
    Coarse phases of the shot cycle.

    Derived from the frame-to-frame change in draw length:
    - IDLE: No clear movement, or not enough data
    - DRAWING: String being pulled back
    - ANCHOR: Held at full draw
    - RELEASE: Draw length collapsing as the string is let go
    - FOLLOW_THROUGH: Short draw length after the shot
    """
    IDLE = "idle"
    DRAWING = "drawing"
    ANCHOR = "anchor"
    RELEASE = "release"
    FOLLOW_THROUGH = "follow_through"


class FormCriterion(Enum):
    """The five scored aspects of archery form, in feedback order."""
    BOW_ARM_STRAIGHTNESS = "bow_arm_straightness"
    DRAW_ARM_ANGLE = "draw_arm_angle"
    SHOULDER_ALIGNMENT = "shoulder_alignment"
    STANCE = "stance"
    HEAD_POSITION = "head_position"


@dataclass(frozen=True)
class FormMeasurements:
    """
    Raw geometry behind each score.

    Angles are in degrees, offsets in input coordinate units.
    """
    bow_arm_angle: float          # Shoulder-elbow-wrist on the bow side
    draw_arm_angle: float         # Shoulder-elbow-wrist on the draw side
    shoulder_tilt: float          # Shoulder line from horizontal
    hip_offset: float             # Vertical hip misalignment
    hip_width: float              # Horizontal hip spread (not scored)
    head_offset: float            # Nose distance from shoulder midline


@dataclass(frozen=True)
class FrameAnalysis:
    """
    Complete form analysis of a single frame.

    Either fully populated or not produced at all; the analyzer returns
    None instead of a partial result.

    Attributes:
        dominant_hand: Draw-hand side
        bow_arm: Side holding the bow (opposite of dominant hand)
        draw_arm: Side pulling the string (same as dominant hand)
        scores: Criterion name -> score in [0, 100]
        feedback: One message per criterion outside tolerance
        draw_length: Draw shoulder to draw wrist distance
        bow_arm_extension: Bow shoulder to bow wrist distance
        overall_score: Unweighted mean of all scores
        is_drawing: Whether the string looks like it is being pulled
    """
    dominant_hand: Handedness
    bow_arm: Handedness
    draw_arm: Handedness
    scores: Mapping[str, float]
    feedback: tuple[str, ...]
    draw_length: float
    bow_arm_extension: float
    overall_score: float
    is_drawing: bool
    measurements: Optional[FormMeasurements] = field(default=None, compare=False)

    def __post_init__(self):
        # Read-only copy so scores cannot drift from overall_score
        object.__setattr__(self, "scores", MappingProxyType(dict(self.scores)))

    @property
    def grade(self) -> str:
        """Convert overall score to letter grade."""
        if self.overall_score >= 90:
            return "A"
        elif self.overall_score >= 80:
            return "B"
        elif self.overall_score >= 70:
            return "C"
        elif self.overall_score >= 60:
            return "D"
        else:
            return "F"

    def score_for(self, criterion: FormCriterion) -> float:
        """Get the score for a specific criterion."""
        return self.scores[criterion.value]
