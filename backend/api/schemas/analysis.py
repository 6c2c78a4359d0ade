"""
Analysis API Schemas

Pydantic models for form analysis API requests and responses.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from enum import Enum

from .pose import LandmarkSchema


class HandednessEnum(str, Enum):
    """Body side for API."""
    LEFT = "left"
    RIGHT = "right"


class ShotPhaseEnum(str, Enum):
    """Shot phases for API."""
    IDLE = "idle"
    DRAWING = "drawing"
    ANCHOR = "anchor"
    RELEASE = "release"
    FOLLOW_THROUGH = "follow_through"


class FormMeasurementsSchema(BaseModel):
    """
    Raw geometry behind the scores.

    Angles in degrees, offsets in input coordinate units.
    """
    bow_arm_angle: float = Field(..., description="Bow elbow angle (degrees)")
    draw_arm_angle: float = Field(..., description="Draw elbow angle (degrees)")
    shoulder_tilt: float = Field(..., description="Shoulder line from horizontal (degrees)")
    hip_offset: float = Field(..., description="Vertical hip misalignment")
    hip_width: float = Field(..., description="Horizontal hip spread")
    head_offset: float = Field(..., description="Nose offset from shoulder midline")


class FrameAnalysisSchema(BaseModel):
    """
    Form analysis of a single frame.
    """
    dominant_hand: HandednessEnum = Field(..., description="Draw hand")
    bow_arm: HandednessEnum = Field(..., description="Arm holding the bow")
    draw_arm: HandednessEnum = Field(..., description="Arm pulling the string")
    scores: dict[str, float] = Field(..., description="Criterion -> score (0-100)")
    feedback: List[str] = Field(default_factory=list, description="Corrections, one per failing criterion")
    draw_length: float = Field(..., ge=0.0, description="Draw shoulder to draw wrist")
    bow_arm_extension: float = Field(..., ge=0.0, description="Bow shoulder to bow wrist")
    overall_score: float = Field(..., ge=0.0, le=100.0, description="Mean of criterion scores")
    grade: str = Field(..., description="Letter grade (A-F)")
    is_drawing: bool = Field(..., description="Whether the string appears drawn")
    measurements: Optional[FormMeasurementsSchema] = Field(None, description="Raw measurements")

    class Config:
        json_schema_extra = {
            "example": {
                "dominant_hand": "right",
                "bow_arm": "left",
                "draw_arm": "right",
                "scores": {
                    "bow_arm_straightness": 100.0,
                    "draw_arm_angle": 86.0,
                    "shoulder_alignment": 92.5,
                    "stance": 100.0,
                    "head_position": 95.0
                },
                "feedback": [],
                "draw_length": 153.2,
                "bow_arm_extension": 200.0,
                "overall_score": 94.7,
                "grade": "A",
                "is_drawing": False
            }
        }


class FrameAnalysisResponse(BaseModel):
    """
    Response from single-frame analysis.

    success is false when the frame was indeterminate (too few or missing
    landmarks); that is not an HTTP error.
    """
    success: bool = Field(..., description="Whether the frame could be analyzed")
    analysis: Optional[FrameAnalysisSchema] = Field(None, description="Analysis (null if indeterminate)")
    error: Optional[str] = Field(None, description="Reason the frame was not analyzed")
    processing_time_ms: float = Field(..., description="Time taken to process in milliseconds")


class DrawLengthSchema(BaseModel):
    """Minimal analysis shape needed for phase classification."""
    draw_length: float = Field(..., ge=0.0, description="Draw length for the frame")


class PhaseRequest(BaseModel):
    """
    Request to classify the shot phase from two consecutive frames.
    """
    current: Optional[DrawLengthSchema] = Field(None, description="Current frame")
    previous: Optional[DrawLengthSchema] = Field(None, description="Immediately preceding frame")

    class Config:
        json_schema_extra = {
            "example": {
                "current": {"draw_length": 101.0},
                "previous": {"draw_length": 100.0}
            }
        }


class PhaseResponse(BaseModel):
    """Shot phase classification result."""
    phase: ShotPhaseEnum = Field(..., description="Shot phase")


class SequenceRequest(BaseModel):
    """
    Request to analyze consecutive frames in order.
    """
    frames: List[List[Optional[LandmarkSchema]]] = Field(..., description="Frames of BlazePose-indexed landmarks")


class FrameResultSchema(BaseModel):
    """Per-frame result within a sequence."""
    frame_number: int = Field(..., description="Index of the frame in the request")
    analysis: Optional[FrameAnalysisSchema] = Field(None, description="Analysis (null if indeterminate)")
    phase: ShotPhaseEnum = Field(..., description="Shot phase")


class SequenceResponse(BaseModel):
    """
    Results for a sequence of frames.
    """
    results: List[FrameResultSchema] = Field(default_factory=list, description="Per-frame results")
    analyzed_frames: int = Field(..., description="Frames that produced an analysis")
    processing_time_ms: float = Field(..., description="Time taken to process in milliseconds")


class HealthResponse(BaseModel):
    """
    Health check response.
    """
    status: str = Field("healthy", description="Service status")
    version: str = Field(..., description="API version")
