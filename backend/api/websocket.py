"""
WebSocket Handler

Real-time form analysis via WebSocket connection.
Allows the frontend to stream landmark frames and receive scores,
feedback and the current shot phase for each one.
"""

import json
import time
import logging
from typing import Optional
from fastapi import WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from .schemas import (
    WebSocketMessageType,
    FrameMessage,
)
from .converters import to_domain_landmarks, convert_analysis
from core.services import ShotTracker

# Configure logging
logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class ConnectionManager:
    """
    Manages WebSocket connections.

    Each connection gets its own ShotTracker, which holds the previous
    frame's analysis for phase classification.
    """

    def __init__(self):
        self.active_connections: list[WebSocket] = []
        self.trackers: dict[WebSocket, ShotTracker] = {}

    async def connect(self, websocket: WebSocket) -> None:
        """Accept new WebSocket connection."""
        await websocket.accept()
        self.active_connections.append(websocket)

        # Create dedicated tracker for this connection
        self.trackers[websocket] = ShotTracker()

        logger.info(f"New WebSocket connection. Total: {len(self.active_connections)}")

    def disconnect(self, websocket: WebSocket) -> None:
        """Handle WebSocket disconnection."""
        if websocket in self.active_connections:
            self.active_connections.remove(websocket)

        self.trackers.pop(websocket, None)

        logger.info(f"WebSocket disconnected. Remaining: {len(self.active_connections)}")

    def get_tracker(self, websocket: WebSocket) -> Optional[ShotTracker]:
        """Get shot tracker for a connection."""
        return self.trackers.get(websocket)

    async def send_json(self, websocket: WebSocket, data: dict) -> None:
        """Send JSON data to a specific connection."""
        try:
            await websocket.send_json(data)
        except Exception as e:
            logger.error(f"Failed to send WebSocket message: {e}")

    async def send_error(self, websocket: WebSocket, error: str) -> None:
        await self.send_json(websocket, {
            "type": WebSocketMessageType.ERROR.value,
            "data": {"error": error},
            "timestamp": _now_ms()
        })


# Global connection manager
manager = ConnectionManager()


async def websocket_endpoint(websocket: WebSocket) -> None:
    """
    WebSocket endpoint for real-time form analysis.

    Protocol:
    1. Client connects
    2. Client sends landmark frames in capture order
    3. Server responds with analysis and shot phase per frame
    4. Client sends end_session or disconnects when done

    Message format (client -> server):
    {
        "type": "frame",
        "data": {
            "landmarks": [{"x": 250.0, "y": 150.0}, null, ...],
            "frame_number": 0
        },
        "timestamp": 1704067200000
    }

    Message format (server -> client):
    {
        "type": "form_result",
        "data": {
            "frame_number": 0,
            "analysis": { ... } | null,
            "phase": "drawing",
            "processing_time_ms": 0.4
        },
        "timestamp": 1704067200001
    }
    """
    await manager.connect(websocket)

    try:
        # Send session started message
        await manager.send_json(websocket, {
            "type": WebSocketMessageType.SESSION_STARTED.value,
            "data": {"message": "Connected to archery form analysis"},
            "timestamp": _now_ms()
        })

        # Main message loop
        while True:
            try:
                # Receive message from client
                data = await websocket.receive_json()

                if not isinstance(data, dict):
                    await manager.send_error(websocket, "Message must be a JSON object")
                    continue

                # Process based on message type
                msg_type = data.get("type")

                if msg_type == WebSocketMessageType.FRAME.value:
                    await handle_frame(websocket, data)

                elif msg_type == WebSocketMessageType.START_SESSION.value:
                    tracker = manager.get_tracker(websocket)
                    if tracker:
                        tracker.reset()
                    await manager.send_json(websocket, {
                        "type": WebSocketMessageType.SESSION_STARTED.value,
                        "data": {"message": "Session reset"},
                        "timestamp": _now_ms()
                    })

                elif msg_type == WebSocketMessageType.END_SESSION.value:
                    await manager.send_json(websocket, {
                        "type": WebSocketMessageType.SESSION_ENDED.value,
                        "data": {"message": "Session ended"},
                        "timestamp": _now_ms()
                    })
                    break

                else:
                    await manager.send_error(websocket, f"Unknown message type: {msg_type}")

            except json.JSONDecodeError:
                await manager.send_error(websocket, "Invalid JSON")

    except WebSocketDisconnect:
        logger.info("Client disconnected")
    except Exception as e:
        logger.error(f"WebSocket error: {e}")
    finally:
        manager.disconnect(websocket)


async def handle_frame(websocket: WebSocket, message: dict) -> None:
    """
    Analyze one landmark frame and return form result with shot phase.
    """
    start_time = time.time()

    try:
        frame = FrameMessage.model_validate(message.get("data", {}))
    except ValidationError as e:
        await manager.send_error(websocket, f"Invalid frame data: {e.error_count()} error(s)")
        return

    # Get tracker for this connection
    tracker = manager.get_tracker(websocket)
    if not tracker:
        await manager.send_error(websocket, "Session not initialized")
        return

    result = tracker.process(to_domain_landmarks(frame.landmarks), frame_number=frame.frame_number)

    processing_time = (time.time() - start_time) * 1000

    analysis = convert_analysis(result.analysis)

    await manager.send_json(websocket, {
        "type": WebSocketMessageType.FORM_RESULT.value,
        "data": {
            "frame_number": result.frame_number,
            "analysis": analysis.model_dump(mode="json") if analysis else None,
            "phase": result.phase.value,
            "processing_time_ms": processing_time
        },
        "timestamp": _now_ms()
    })
