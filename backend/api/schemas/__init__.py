"""
API Schemas

Pydantic models for request/response validation.
"""

from .pose import (
    LandmarkSchema,
    FrameRequest,
    WebSocketMessageType,
    WebSocketMessage,
    FrameMessage,
)

from .analysis import (
    HandednessEnum,
    ShotPhaseEnum,
    FormMeasurementsSchema,
    FrameAnalysisSchema,
    FrameAnalysisResponse,
    DrawLengthSchema,
    PhaseRequest,
    PhaseResponse,
    SequenceRequest,
    FrameResultSchema,
    SequenceResponse,
    HealthResponse,
)

__all__ = [
    # Pose schemas
    "LandmarkSchema",
    "FrameRequest",
    "WebSocketMessageType",
    "WebSocketMessage",
    "FrameMessage",
    # Analysis schemas
    "HandednessEnum",
    "ShotPhaseEnum",
    "FormMeasurementsSchema",
    "FrameAnalysisSchema",
    "FrameAnalysisResponse",
    "DrawLengthSchema",
    "PhaseRequest",
    "PhaseResponse",
    "SequenceRequest",
    "FrameResultSchema",
    "SequenceResponse",
    "HealthResponse",
]
