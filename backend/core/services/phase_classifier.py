"""
Shot Phase Classifier

Labels the current phase of the shot cycle by comparing the draw length
of two consecutive frame analyses. Memoryless: the caller supplies the
previous analysis on each call.
"""

from dataclasses import dataclass
from typing import Optional, Protocol

from ..domain.analysis import ShotPhase


class HasDrawLength(Protocol):
    """Anything carrying a draw length, e.g. a FrameAnalysis."""
    draw_length: float


@dataclass(frozen=True)
class PhaseThresholds:
    """
    Draw length thresholds, in input coordinate units.

    The defaults assume a fixed camera distance within a session.
    They are not normalized by body size.
    """
    drawing_delta: float = 5.0      # Growth per frame that counts as drawing
    anchor_min_length: float = 100.0
    anchor_max_delta: float = 3.0   # Stability required to count as anchored
    release_delta: float = 10.0     # Collapse per frame that counts as release
    follow_through_max_length: float = 80.0


class ShotPhaseClassifier:
    """
    Classifies the shot phase from two consecutive analyses.

    Rules are checked in a fixed priority order:
    1. DRAWING: draw length grew by more than drawing_delta
    2. ANCHOR: long draw held nearly still
    3. RELEASE: draw length dropped by more than release_delta
    4. FOLLOW_THROUGH: short draw length
    5. IDLE: anything else, or either analysis missing

    Usage:
        classifier = ShotPhaseClassifier()
        phase = classifier.classify(current, previous)
    """

    def __init__(self, thresholds: Optional[PhaseThresholds] = None):
        self.thresholds = thresholds or PhaseThresholds()

    def classify(
        self,
        current: Optional[HasDrawLength],
        previous: Optional[HasDrawLength],
    ) -> ShotPhase:
        """
        Classify the phase for the current frame.

        Args:
            current: Analysis of the current frame
            previous: Analysis of the immediately preceding frame

        Returns:
            ShotPhase label (IDLE when either analysis is missing)
        """
        if current is None or previous is None:
            return ShotPhase.IDLE

        t = self.thresholds
        current_draw = current.draw_length
        previous_draw = previous.draw_length

        if current_draw > previous_draw + t.drawing_delta:
            return ShotPhase.DRAWING
        if current_draw > t.anchor_min_length and abs(current_draw - previous_draw) < t.anchor_max_delta:
            return ShotPhase.ANCHOR
        if current_draw < previous_draw - t.release_delta:
            return ShotPhase.RELEASE
        if current_draw < t.follow_through_max_length:
            return ShotPhase.FOLLOW_THROUGH

        return ShotPhase.IDLE


_default_classifier = ShotPhaseClassifier()


def detect_shot_phase(
    current: Optional[HasDrawLength],
    previous: Optional[HasDrawLength],
) -> ShotPhase:
    """Classify with the default thresholds."""
    return _default_classifier.classify(current, previous)
