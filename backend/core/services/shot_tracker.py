"""
Shot Tracker

Caller-side helper that feeds frames through the form analyzer and the
phase classifier, carrying the previous analysis between calls.

The analyzer and classifier stay pure; this is the one place that holds
the "previous frame" pointer.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from ..domain.pose import Landmarks
from ..domain.analysis import FrameAnalysis, ShotPhase
from .form_analyzer import FormAnalyzer
from .phase_classifier import ShotPhaseClassifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameResult:
    """Analysis and phase for one processed frame."""
    frame_number: int
    analysis: Optional[FrameAnalysis]
    phase: ShotPhase


class ShotTracker:
    """
    Processes a stream of frames in order.

    An indeterminate frame clears the previous analysis, since the
    classifier only compares contiguous frames. The next good frame
    is then reported as IDLE.

    Usage:
        tracker = ShotTracker()
        for landmarks in stream:
            result = tracker.process(landmarks)
            print(result.phase.value)
    """

    def __init__(
        self,
        analyzer: Optional[FormAnalyzer] = None,
        classifier: Optional[ShotPhaseClassifier] = None,
    ):
        self.analyzer = analyzer or FormAnalyzer()
        self.classifier = classifier or ShotPhaseClassifier()
        self.previous: Optional[FrameAnalysis] = None
        self.frames_processed = 0

    def process(self, landmarks: Optional[Landmarks], frame_number: Optional[int] = None) -> FrameResult:
        """
        Analyze the next frame and classify its phase.

        Args:
            landmarks: Landmarks for the frame
            frame_number: Caller's frame number (defaults to a running count)
        """
        if frame_number is None:
            frame_number = self.frames_processed

        analysis = self.analyzer.analyze(landmarks)
        phase = self.classifier.classify(analysis, self.previous)

        if analysis is None and self.previous is not None:
            logger.debug("Frame %d indeterminate, dropping previous analysis", frame_number)

        self.previous = analysis
        self.frames_processed += 1

        return FrameResult(frame_number=frame_number, analysis=analysis, phase=phase)

    def reset(self) -> None:
        """Forget the previous analysis and restart the frame count."""
        self.previous = None
        self.frames_processed = 0
