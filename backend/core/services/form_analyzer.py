"""
Form Analyzer Service

Scores archery shooting form from a single frame of pose landmarks.

This is the main entry point for per-frame analysis. It is stateless:
every call looks at one frame only and returns either a complete
FrameAnalysis or None when the frame cannot be analyzed.
"""

import logging
import math
from typing import Optional, Tuple

from ..domain.pose import BodyPart, Landmarks, MIN_LANDMARK_COUNT, arm_landmarks, get_landmark
from ..domain.analysis import (
    Handedness,
    FormCriterion,
    FormMeasurements,
    FrameAnalysis,
)
from .angle_calculator import AngleCalculator

logger = logging.getLogger(__name__)


def clamp_score(value: float) -> float:
    """Clamp a raw score into the 0-100 range."""
    return max(0.0, min(100.0, value))


def determine_dominant_hand(landmarks: Landmarks) -> Optional[Handedness]:
    """
    Infer the draw hand from how far each wrist sits from the shoulder midline.

    The more laterally extended wrist belongs to the bow arm, so the dominant
    (draw) hand is the other side. Left is only chosen when the right wrist
    is strictly further out; an exact tie reports a right-handed archer.

    Returns:
        Dominant hand, or None if either shoulder or wrist is missing
    """
    left_shoulder = get_landmark(landmarks, BodyPart.LEFT_SHOULDER)
    right_shoulder = get_landmark(landmarks, BodyPart.RIGHT_SHOULDER)
    left_wrist = get_landmark(landmarks, BodyPart.LEFT_WRIST)
    right_wrist = get_landmark(landmarks, BodyPart.RIGHT_WRIST)

    if left_shoulder is None or right_shoulder is None or left_wrist is None or right_wrist is None:
        return None

    center_x = (left_shoulder.x + right_shoulder.x) / 2
    left_extension = abs(left_wrist.x - center_x)
    right_extension = abs(right_wrist.x - center_x)

    return Handedness.LEFT if right_extension > left_extension else Handedness.RIGHT


class FormAnalyzer:
    """
    Analyzes archery form from one frame of landmarks.

    This service:
    1. Works out which arm holds the bow and which draws
    2. Measures elbow angles, shoulder tilt, hip and head offsets
    3. Scores five criteria on linear 0-100 ramps
    4. Emits feedback for criteria outside tolerance
    5. Measures draw length and bow arm extension

    Usage:
        analyzer = FormAnalyzer()
        analysis = analyzer.analyze(landmarks)
        if analysis:
            print(f"Overall score: {analysis.overall_score:.0f}")
    """

    # -------------------------------------------------------------------------
    # Tolerances for scoring (degrees or coordinate units)
    # -------------------------------------------------------------------------

    BOW_ARM_MIN_ANGLE = 120.0       # Score 0 at or below this elbow angle
    BOW_ARM_RAMP = 0.6              # Degrees per score point above the minimum
    BOW_ARM_FEEDBACK_ANGLE = 160.0

    IDEAL_DRAW_ANGLE = 100.0        # Full draw elbow is ~90-110 degrees
    DRAW_ARM_PENALTY = 2.0
    DRAW_ARM_TOLERANCE = 15.0

    SHOULDER_PENALTY = 5.0
    SHOULDER_TOLERANCE = 10.0

    HIP_PENALTY = 2.0
    HIP_TOLERANCE = 20.0

    HEAD_DIVISOR = 2.0
    HEAD_TOLERANCE = 30.0

    DRAWING_RATIO = 0.8             # Draw length vs bow arm extension

    def __init__(self):
        """Initialize the form analyzer."""
        self.angle_calculator = AngleCalculator()

    # -------------------------------------------------------------------------
    # Main Analysis Method
    # -------------------------------------------------------------------------

    def analyze(self, landmarks: Optional[Landmarks]) -> Optional[FrameAnalysis]:
        """
        Analyze archery form in a single frame.

        Args:
            landmarks: Landmarks indexed by BodyPart, None where not detected

        Returns:
            Complete FrameAnalysis, or None if the frame is indeterminate
        """
        if landmarks is None or len(landmarks) < MIN_LANDMARK_COUNT:
            logger.debug("Indeterminate frame: expected at least %d landmarks", MIN_LANDMARK_COUNT)
            return None

        dominant_hand = determine_dominant_hand(landmarks)
        if dominant_hand is None:
            logger.debug("Indeterminate frame: handedness could not be determined")
            return None

        bow_arm = dominant_hand.opposite
        draw_arm = dominant_hand

        bow_shoulder, bow_elbow, bow_wrist = arm_landmarks(landmarks, bow_arm.value)
        draw_shoulder, draw_elbow, draw_wrist = arm_landmarks(landmarks, draw_arm.value)
        left_hip = get_landmark(landmarks, BodyPart.LEFT_HIP)
        right_hip = get_landmark(landmarks, BodyPart.RIGHT_HIP)
        nose = get_landmark(landmarks, BodyPart.NOSE)

        required = (
            bow_shoulder, bow_elbow, bow_wrist,
            draw_shoulder, draw_elbow, draw_wrist,
            left_hip, right_hip, nose,
        )
        if any(point is None for point in required):
            logger.debug("Indeterminate frame: missing landmarks required for scoring")
            return None

        if not all(math.isfinite(point.x) and math.isfinite(point.y) for point in required):
            logger.debug("Indeterminate frame: non-finite landmark coordinates")
            return None

        calc = self.angle_calculator
        shoulder_mid_x, _ = calc.calculate_midpoint(bow_shoulder, draw_shoulder)

        measurements = FormMeasurements(
            bow_arm_angle=calc.calculate_angle(bow_shoulder, bow_elbow, bow_wrist),
            draw_arm_angle=calc.calculate_angle(draw_shoulder, draw_elbow, draw_wrist),
            shoulder_tilt=abs(calc.calculate_line_tilt(bow_shoulder, draw_shoulder)),
            hip_offset=abs(left_hip.y - right_hip.y),
            hip_width=abs(left_hip.x - right_hip.x),
            head_offset=abs(nose.x - shoulder_mid_x),
        )

        scores: dict[str, float] = {}
        feedback: list[str] = []
        for criterion, (score, message) in (
            (FormCriterion.BOW_ARM_STRAIGHTNESS, self._score_bow_arm(measurements.bow_arm_angle, bow_arm)),
            (FormCriterion.DRAW_ARM_ANGLE, self._score_draw_arm(measurements.draw_arm_angle)),
            (FormCriterion.SHOULDER_ALIGNMENT, self._score_shoulders(measurements.shoulder_tilt)),
            (FormCriterion.STANCE, self._score_stance(measurements.hip_offset)),
            (FormCriterion.HEAD_POSITION, self._score_head(measurements.head_offset)),
        ):
            scores[criterion.value] = score
            if message:
                feedback.append(message)

        draw_length = calc.calculate_distance(draw_shoulder, draw_wrist)
        bow_arm_extension = calc.calculate_distance(bow_shoulder, bow_wrist)

        return FrameAnalysis(
            dominant_hand=dominant_hand,
            bow_arm=bow_arm,
            draw_arm=draw_arm,
            scores=scores,
            feedback=tuple(feedback),
            draw_length=draw_length,
            bow_arm_extension=bow_arm_extension,
            overall_score=sum(scores.values()) / len(scores),
            is_drawing=draw_length > bow_arm_extension * self.DRAWING_RATIO,
            measurements=measurements,
        )

    # -------------------------------------------------------------------------
    # Scoring
    # -------------------------------------------------------------------------

    def _score_bow_arm(self, angle: float, bow_arm: Handedness) -> Tuple[float, Optional[str]]:
        """Bow arm should be nearly straight (160-180 degrees)."""
        score = clamp_score((angle - self.BOW_ARM_MIN_ANGLE) / self.BOW_ARM_RAMP)
        if angle < self.BOW_ARM_FEEDBACK_ANGLE:
            return score, f"Straighten your {bow_arm.value} arm more ({angle:.1f}°)"
        return score, None

    def _score_draw_arm(self, angle: float) -> Tuple[float, Optional[str]]:
        """Draw elbow should sit behind the arrow line at full draw."""
        deviation = abs(angle - self.IDEAL_DRAW_ANGLE)
        score = clamp_score(100 - deviation * self.DRAW_ARM_PENALTY)
        if deviation > self.DRAW_ARM_TOLERANCE:
            return score, f"Adjust draw arm elbow position ({angle:.1f}°)"
        return score, None

    def _score_shoulders(self, tilt: float) -> Tuple[float, Optional[str]]:
        score = clamp_score(100 - tilt * self.SHOULDER_PENALTY)
        if tilt > self.SHOULDER_TOLERANCE:
            return score, "Level your shoulders"
        return score, None

    def _score_stance(self, hip_offset: float) -> Tuple[float, Optional[str]]:
        score = clamp_score(100 - hip_offset * self.HIP_PENALTY)
        if hip_offset > self.HIP_TOLERANCE:
            return score, "Square your stance - align your hips"
        return score, None

    def _score_head(self, head_offset: float) -> Tuple[float, Optional[str]]:
        score = clamp_score(100 - head_offset / self.HEAD_DIVISOR)
        if head_offset > self.HEAD_TOLERANCE:
            return score, "Keep your head centered and upright"
        return score, None


# =============================================================================
# Convenience function for quick usage
# =============================================================================

def analyze_archery_form(landmarks: Optional[Landmarks]) -> Optional[FrameAnalysis]:
    """
    Quick function to analyze one frame of landmarks.

    Usage:
        analysis = analyze_archery_form(landmarks)
        if analysis:
            print(analysis.feedback)
    """
    return FormAnalyzer().analyze(landmarks)
