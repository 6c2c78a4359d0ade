"""
REST API Routes

FastAPI routes for archery form analysis.
Handles HTTP requests for single-frame analysis, phase classification
and ordered frame sequences.
"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException

from .schemas import (
    FrameRequest,
    FrameAnalysisResponse,
    PhaseRequest,
    PhaseResponse,
    SequenceRequest,
    SequenceResponse,
    HealthResponse,
)
from .converters import (
    to_domain_landmarks,
    convert_analysis,
    convert_phase,
    convert_frame_result,
)
from config import Settings, get_settings
from core.services import FormAnalyzer, ShotTracker, detect_shot_phase

# Configure logging
logger = logging.getLogger(__name__)

# Create router
router = APIRouter()

INDETERMINATE_MESSAGE = "Frame could not be analyzed: missing or insufficient landmarks"

# =============================================================================
# Health Check
# =============================================================================

@router.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Health check endpoint"
)
async def health_check(settings: Settings = Depends(get_settings)) -> HealthResponse:
    """
    Check if the API is running.

    Returns:
        Health status and version information
    """
    return HealthResponse(
        status="healthy",
        version=settings.APP_VERSION,
    )


# =============================================================================
# Form Analysis
# =============================================================================

@router.post(
    "/analysis/frame",
    response_model=FrameAnalysisResponse,
    tags=["Form Analysis"],
    summary="Analyze archery form in a single frame"
)
async def analyze_frame(request: FrameRequest) -> FrameAnalysisResponse:
    """
    Score archery form from one frame of landmarks.

    For a live feed, use the WebSocket endpoint instead so the shot phase
    can be tracked between frames.

    Args:
        request: BlazePose-indexed landmarks

    Returns:
        Scores, feedback and measurements, or success=false if the
        frame is indeterminate
    """
    start_time = time.time()

    analysis = FormAnalyzer().analyze(to_domain_landmarks(request.landmarks))

    processing_time = (time.time() - start_time) * 1000

    if analysis is None:
        return FrameAnalysisResponse(
            success=False,
            analysis=None,
            error=INDETERMINATE_MESSAGE,
            processing_time_ms=processing_time
        )

    return FrameAnalysisResponse(
        success=True,
        analysis=convert_analysis(analysis),
        error=None,
        processing_time_ms=processing_time
    )


@router.post(
    "/analysis/phase",
    response_model=PhaseResponse,
    tags=["Form Analysis"],
    summary="Classify the shot phase from two consecutive frames"
)
async def classify_phase(request: PhaseRequest) -> PhaseResponse:
    """
    Classify the shot phase from the draw length of the current frame and
    the immediately preceding one.

    Either frame may be null, in which case the phase is idle.
    """
    phase = detect_shot_phase(request.current, request.previous)
    return PhaseResponse(phase=convert_phase(phase))


@router.post(
    "/analysis/sequence",
    response_model=SequenceResponse,
    tags=["Form Analysis"],
    summary="Analyze consecutive frames in order"
)
async def analyze_sequence(
    request: SequenceRequest,
    settings: Settings = Depends(get_settings),
) -> SequenceResponse:
    """
    Analyze an ordered list of frames, classifying each frame's phase
    against the one before it.

    Frames must be contiguous. An indeterminate frame breaks the chain,
    so the next analyzable frame is reported as idle.
    """
    if len(request.frames) > settings.MAX_BATCH_FRAMES:
        raise HTTPException(
            status_code=413,
            detail=f"Too many frames: {len(request.frames)} (max {settings.MAX_BATCH_FRAMES})"
        )

    start_time = time.time()

    tracker = ShotTracker()
    results = [
        convert_frame_result(tracker.process(to_domain_landmarks(frame), frame_number=i))
        for i, frame in enumerate(request.frames)
    ]

    processing_time = (time.time() - start_time) * 1000
    analyzed = sum(1 for r in results if r.analysis is not None)

    logger.info(f"Analyzed sequence: {analyzed}/{len(results)} frames in {processing_time:.1f}ms")

    return SequenceResponse(
        results=results,
        analyzed_frames=analyzed,
        processing_time_ms=processing_time,
    )
