"""
API Schemas

Pydantic models for request/response validation.
"""

from .pose import (
    LandmarkSchema,
    PoseFrameSchema,
)

from .trajectory import (
    HandednessEnum,
    SwingPhaseEnum,
    TracerConfigSchema,
    ClubHeadPositionSchema,
    TrajectorySummarySchema,
    TrajectoryResponse,
    BuildTrajectoryRequest,
    HealthResponse,
    WebSocketMessageType,
    WebSocketMessage,
)

__all__ = [
    # Pose schemas
    "LandmarkSchema",
    "PoseFrameSchema",
    # Trajectory schemas
    "HandednessEnum",
    "SwingPhaseEnum",
    "TracerConfigSchema",
    "ClubHeadPositionSchema",
    "TrajectorySummarySchema",
    "TrajectoryResponse",
    "BuildTrajectoryRequest",
    "HealthResponse",
    # WebSocket schemas
    "WebSocketMessageType",
    "WebSocketMessage",
]
