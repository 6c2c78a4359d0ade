"""
Archery Form Coach Backend API

FastAPI application for real-time archery form analysis from pose landmarks.

Run with:
    uvicorn main:app --reload --host 0.0.0.0 --port 8000

API docs available at:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import get_settings
from api.routes import router as api_router
from api.websocket import websocket_endpoint

settings = get_settings()

# =============================================================================
# Logging Configuration
# =============================================================================

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan (startup/shutdown)
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup code before app starts accepting requests,
    and cleanup code when app shuts down.
    """
    # Startup
    logger.info(f"{settings.APP_NAME} starting up...")
    logger.info(f"API docs: http://localhost:{settings.PORT}/docs")
    logger.info(f"WebSocket: ws://localhost:{settings.PORT}/ws/form")

    yield  # App runs here

    # Shutdown
    logger.info(f"{settings.APP_NAME} shutting down...")


# =============================================================================
# FastAPI App
# =============================================================================

app = FastAPI(
    title=settings.APP_NAME,
    description="""
    **Real-Time Archery Form Analyzer**

    Scores archery shooting form from 2D pose landmarks, frame by frame.

    ## Features

    - **Per-frame Scoring** of bow arm, draw arm, shoulders, stance and head
    - **Coaching Feedback** for each criterion outside tolerance
    - **Shot Phase Tracking** (drawing, anchor, release, follow-through)

    ## Endpoints

    - `GET /api/health` - Health check
    - `POST /api/analysis/frame` - Analyze one frame of landmarks
    - `POST /api/analysis/phase` - Classify phase from two draw lengths
    - `POST /api/analysis/sequence` - Analyze consecutive frames
    - `WS /ws/form` - Real-time analysis stream

    ## WebSocket Protocol

    Connect to `/ws/form` and send frames as JSON:
```json
    {
        "type": "frame",
        "data": {"landmarks": [...], "frame_number": 0},
        "timestamp": 1704067200000
    }
```
    """,
    version=settings.APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


# =============================================================================
# CORS Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Routes
# =============================================================================

# Include REST API routes
app.include_router(api_router, prefix="/api")

# WebSocket endpoint
app.websocket("/ws/form")(websocket_endpoint)


# =============================================================================
# Root endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - API information.
    """
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "description": "Real-Time Archery Form Analyzer",
        "docs": "/docs",
        "health": "/api/health",
        "websocket": "/ws/form"
    }


# =============================================================================
# Run directly (for development)
# =============================================================================

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower()
    )
