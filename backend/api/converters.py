"""
Schema <-> Domain Conversion

Shared by the REST routes and the WebSocket handler.
"""

from typing import List, Optional, Sequence

from core.domain.pose import PoseLandmark
from core.domain.analysis import FrameAnalysis, ShotPhase
from core.services import FrameResult

from .schemas import (
    LandmarkSchema,
    FrameAnalysisSchema,
    FormMeasurementsSchema,
    FrameResultSchema,
    HandednessEnum,
    ShotPhaseEnum,
)


def to_domain_landmarks(
    landmarks: Sequence[Optional[LandmarkSchema]]
) -> List[Optional[PoseLandmark]]:
    """Convert API landmarks to domain landmarks, keeping gaps as None."""
    return [
        PoseLandmark(x=lm.x, y=lm.y, z=lm.z, visibility=lm.visibility) if lm is not None else None
        for lm in landmarks
    ]


def convert_analysis(analysis: Optional[FrameAnalysis]) -> Optional[FrameAnalysisSchema]:
    """Convert domain FrameAnalysis to API schema."""
    if analysis is None:
        return None

    measurements = None
    if analysis.measurements is not None:
        m = analysis.measurements
        measurements = FormMeasurementsSchema(
            bow_arm_angle=m.bow_arm_angle,
            draw_arm_angle=m.draw_arm_angle,
            shoulder_tilt=m.shoulder_tilt,
            hip_offset=m.hip_offset,
            hip_width=m.hip_width,
            head_offset=m.head_offset,
        )

    return FrameAnalysisSchema(
        dominant_hand=HandednessEnum(analysis.dominant_hand.value),
        bow_arm=HandednessEnum(analysis.bow_arm.value),
        draw_arm=HandednessEnum(analysis.draw_arm.value),
        scores=dict(analysis.scores),
        feedback=list(analysis.feedback),
        draw_length=analysis.draw_length,
        bow_arm_extension=analysis.bow_arm_extension,
        overall_score=analysis.overall_score,
        grade=analysis.grade,
        is_drawing=analysis.is_drawing,
        measurements=measurements,
    )


def convert_phase(phase: ShotPhase) -> ShotPhaseEnum:
    return ShotPhaseEnum(phase.value)


def convert_frame_result(result: FrameResult) -> FrameResultSchema:
    return FrameResultSchema(
        frame_number=result.frame_number,
        analysis=convert_analysis(result.analysis),
        phase=convert_phase(result.phase),
    )
