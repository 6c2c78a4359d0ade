"""
Services Layer

Business logic services for archery form analysis.
These services operate on domain models and hold no shared state.
"""

from .angle_calculator import AngleCalculator
from .form_analyzer import FormAnalyzer, analyze_archery_form, determine_dominant_hand
from .phase_classifier import ShotPhaseClassifier, PhaseThresholds, detect_shot_phase
from .shot_tracker import ShotTracker, FrameResult

__all__ = [
    "AngleCalculator",
    "FormAnalyzer",
    "analyze_archery_form",
    "determine_dominant_hand",
    "ShotPhaseClassifier",
    "PhaseThresholds",
    "detect_shot_phase",
    "ShotTracker",
    "FrameResult",
]
