"""
Pose API Schemas

Pydantic models for landmark input and WebSocket messages.
These define the JSON structure for communication with the frontend.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from enum import Enum


class LandmarkSchema(BaseModel):
    """
    Single body landmark as sent by the client.

    Coordinates may be pixels or normalized values, as long as the client
    is consistent within a session.
    """
    x: float = Field(..., description="Horizontal position")
    y: float = Field(..., description="Vertical position (grows downward)")
    z: float = Field(0.0, description="Depth (unused by the 2D analysis)")
    visibility: float = Field(1.0, ge=0.0, le=1.0, description="Detection confidence")

    class Config:
        allow_inf_nan = False
        json_schema_extra = {
            "example": {
                "x": 312.5,
                "y": 204.0,
                "z": 0.0,
                "visibility": 0.95
            }
        }


class FrameRequest(BaseModel):
    """
    One frame of landmarks to analyze.

    Landmarks are indexed by the BlazePose layout; use null for
    landmarks that were not detected.
    """
    landmarks: List[Optional[LandmarkSchema]] = Field(..., description="BlazePose-indexed landmarks")
    frame_number: int = Field(0, ge=0, description="Optional frame number")

    class Config:
        json_schema_extra = {
            "example": {
                "landmarks": [
                    {"x": 250.0, "y": 150.0},
                    None,
                ],
                "frame_number": 0
            }
        }


# =============================================================================
# WebSocket Message Schemas
# =============================================================================

class WebSocketMessageType(str, Enum):
    """Types of WebSocket messages."""
    # Client -> Server
    FRAME = "frame"                    # Send landmarks for analysis
    START_SESSION = "start_session"    # Start new analysis session
    END_SESSION = "end_session"        # End analysis session

    # Server -> Client
    FORM_RESULT = "form_result"        # Form analysis result
    ERROR = "error"                    # Error message
    SESSION_STARTED = "session_started"
    SESSION_ENDED = "session_ended"


class WebSocketMessage(BaseModel):
    """
    Base WebSocket message structure.

    All WebSocket communication uses this format.
    """
    type: WebSocketMessageType = Field(..., description="Message type")
    data: dict = Field(default_factory=dict, description="Message payload")
    timestamp: int = Field(..., description="Unix timestamp in milliseconds")

    class Config:
        json_schema_extra = {
            "example": {
                "type": "frame",
                "data": {"landmarks": [], "frame_number": 0},
                "timestamp": 1704067200000
            }
        }


class FrameMessage(BaseModel):
    """
    WebSocket payload containing one frame of landmarks.

    Sent from frontend to backend for real-time form analysis.
    """
    landmarks: List[Optional[LandmarkSchema]] = Field(..., description="BlazePose-indexed landmarks")
    frame_number: Optional[int] = Field(None, ge=0, description="Frame sequence number")
