"""
WebSocket Handler

Real-time club head tracing via WebSocket connection.
Allows frontend to stream pose frames and receive club head positions
as they are traced.
"""

import json
import time
import logging
from typing import Optional
from fastapi import WebSocket, WebSocketDisconnect
from pydantic import ValidationError

from .schemas import (
    WebSocketMessageType,
    PoseFrameSchema,
    TracerConfigSchema,
    ClubHeadPositionSchema,
    TrajectorySummarySchema,
)
from core.services import ClubHeadTracer
from core.settings import settings

# Configure logging
logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.time() * 1000)


class ConnectionManager:
    """
    Manages WebSocket connections.

    Every connection owns its own tracer, so parallel sessions never
    share trajectory state.
    """

    def __init__(self):
        self.active_connections: list[WebSocket] = []
        self.tracers: dict[WebSocket, ClubHeadTracer] = {}

    async def connect(self, websocket: WebSocket) -> None:
        """Accept new WebSocket connection."""
        await websocket.accept()
        self.active_connections.append(websocket)

        # Create dedicated tracer for this connection
        self.tracers[websocket] = ClubHeadTracer(settings.tracer_config())

        logger.info(f"New WebSocket connection. Total: {len(self.active_connections)}")

    def disconnect(self, websocket: WebSocket) -> None:
        """Handle WebSocket disconnection."""
        if websocket in self.active_connections:
            self.active_connections.remove(websocket)

        self.tracers.pop(websocket, None)

        logger.info(f"WebSocket disconnected. Remaining: {len(self.active_connections)}")

    def get_tracer(self, websocket: WebSocket) -> Optional[ClubHeadTracer]:
        """Get the tracer for a connection."""
        return self.tracers.get(websocket)

    def set_tracer(self, websocket: WebSocket, tracer: ClubHeadTracer) -> None:
        self.tracers[websocket] = tracer

    async def send_json(self, websocket: WebSocket, data: dict) -> None:
        """Send JSON data to a specific connection."""
        try:
            await websocket.send_json(data)
        except Exception as e:
            logger.error(f"Failed to send WebSocket message: {e}")

    async def send_message(
        self,
        websocket: WebSocket,
        msg_type: WebSocketMessageType,
        data: dict,
    ) -> None:
        await self.send_json(websocket, {
            "type": msg_type.value,
            "data": data,
            "timestamp": _now_ms(),
        })

    async def send_error(self, websocket: WebSocket, error: str) -> None:
        await self.send_message(websocket, WebSocketMessageType.ERROR, {"error": error})


# Global connection manager
manager = ConnectionManager()


async def websocket_endpoint(websocket: WebSocket) -> None:
    """
    WebSocket endpoint for real-time club head tracing.

    Protocol:
    1. Client connects
    2. Client optionally sends start_session (with tracer options)
    3. Client sends pose frames one at a time
    4. Server responds with the stored club head position (or null)
    5. Client sends end_session and receives the trajectory summary

    Message format (client -> server):
    {
        "type": "frame",
        "data": {
            "landmarks": [...33 points...],
            "frame_number": 0,
            "timestamp_ms": 0
        },
        "timestamp": 1704067200000
    }

    Message format (server -> client):
    {
        "type": "club_head",
        "data": {
            "frame_number": 0,
            "position": { ... },
            "processing_time_ms": 0.4
        },
        "timestamp": 1704067200001
    }
    """
    await manager.connect(websocket)

    try:
        await manager.send_message(websocket, WebSocketMessageType.SESSION_STARTED, {
            "message": "Connected to club head tracing",
        })

        # Main message loop
        while True:
            try:
                data = await websocket.receive_json()
            except json.JSONDecodeError:
                await manager.send_error(websocket, "Invalid JSON")
                continue

            if not isinstance(data, dict):
                await manager.send_error(websocket, "Message must be a JSON object")
                continue

            msg_type = data.get("type")

            if msg_type == WebSocketMessageType.FRAME.value:
                await handle_frame(websocket, data)

            elif msg_type == WebSocketMessageType.START_SESSION.value:
                await handle_start_session(websocket, data)

            elif msg_type == WebSocketMessageType.END_SESSION.value:
                await handle_end_session(websocket)
                break

            else:
                await manager.send_error(websocket, f"Unknown message type: {msg_type}")

    except WebSocketDisconnect:
        logger.info("Client disconnected")
    except Exception as e:
        logger.error(f"WebSocket error: {e}")
    finally:
        manager.disconnect(websocket)


async def handle_start_session(websocket: WebSocket, message: dict) -> None:
    """Start a new trace, optionally with tracer options."""
    try:
        options = TracerConfigSchema(**(message.get("data") or {}))
        config = options.apply_to(settings.tracer_config())
    except (ValidationError, ValueError, TypeError) as e:
        logger.warning(f"Rejected session config: {e}")
        await manager.send_error(websocket, f"Invalid tracer config: {e}")
        return

    manager.set_tracer(websocket, ClubHeadTracer(config))
    await manager.send_message(websocket, WebSocketMessageType.SESSION_STARTED, {
        "message": "Tracer reset",
        "config": TracerConfigSchema.from_domain(config).model_dump(),
    })


async def handle_frame(websocket: WebSocket, message: dict) -> None:
    """
    Trace one pose frame and return the stored club head position.
    """
    start_time = time.time()

    tracer = manager.get_tracer(websocket)
    if tracer is None:
        await manager.send_error(websocket, "Tracer not initialized")
        return

    try:
        frame = PoseFrameSchema(**(message.get("data") or {}))
    except (ValidationError, TypeError) as e:
        logger.warning(f"Rejected frame message: {e}")
        await manager.send_error(websocket, f"Invalid frame: {e}")
        return

    position = tracer.process_frame(frame.to_domain())
    processing_time = (time.time() - start_time) * 1000

    await manager.send_message(websocket, WebSocketMessageType.CLUB_HEAD, {
        "frame_number": frame.frame_number,
        "position": (
            ClubHeadPositionSchema.from_domain(position).model_dump(mode="json")
            if position is not None else None
        ),
        "processing_time_ms": processing_time,
    })


async def handle_end_session(websocket: WebSocket) -> None:
    """Send the trajectory summary and close the session."""
    tracer = manager.get_tracer(websocket)
    if tracer is not None:
        summary = TrajectorySummarySchema.from_domain(tracer.get_trajectory())
        await manager.send_message(
            websocket,
            WebSocketMessageType.TRAJECTORY_SUMMARY,
            summary.model_dump(mode="json"),
        )

    await manager.send_message(websocket, WebSocketMessageType.SESSION_ENDED, {
        "message": "Session ended",
    })
