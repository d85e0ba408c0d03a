"""
Trajectory API Schemas

Pydantic models for club head tracing requests and responses.
"""

from pydantic import BaseModel, Field
from typing import Optional, List
from enum import Enum
from dataclasses import asdict

from core.domain.config import TracerConfig
from core.domain.trajectory import ClubHeadPosition, ClubHeadTrajectory
from .pose import PoseFrameSchema


class HandednessEnum(str, Enum):
    """Swinging side for API."""
    LEFT = "left"
    RIGHT = "right"


class SwingPhaseEnum(str, Enum):
    """Swing phases for API."""
    ADDRESS = "address"
    BACKSWING = "backswing"
    TOP = "top"
    DOWNSWING = "downswing"
    IMPACT = "impact"
    FOLLOW_THROUGH = "follow-through"


class TracerConfigSchema(BaseModel):
    """Tracer options. Omitted fields fall back to the server defaults."""
    min_confidence: Optional[float] = Field(None, ge=0.0, le=1.0, description="Minimum fused confidence")
    smoothing_factor: Optional[float] = Field(None, ge=0.0, le=1.0, description="0 disables smoothing")
    interpolation_frames: Optional[int] = Field(None, ge=0, description="Informational only")
    max_gap_frames: Optional[int] = Field(None, ge=0, description="Longest gap to interpolate")
    club_length_multiplier: Optional[float] = Field(None, gt=0.0, description="Baseline club/arm ratio hint")

    def apply_to(self, base: TracerConfig) -> TracerConfig:
        """Overlay the fields that were set onto a base config."""
        changes = self.model_dump(exclude_none=True)
        return TracerConfig(**{**asdict(base), **changes})

    @classmethod
    def from_domain(cls, config: TracerConfig) -> "TracerConfigSchema":
        return cls(**asdict(config))


class ClubHeadPositionSchema(BaseModel):
    """Club head position for one frame."""
    x: float = Field(..., ge=0.0, le=1.0)
    y: float = Field(..., ge=0.0, le=1.0)
    z: float = Field(..., ge=0.0, le=1.0)
    confidence: float = Field(..., ge=0.0, le=1.0)
    frame: int = Field(..., ge=0, description="Source frame index")
    timestamp_ms: float = Field(..., description="Video timestamp in milliseconds")
    handedness: HandednessEnum
    club_length: float = Field(..., ge=0.0, description="Estimated club length (normalized)")
    swing_phase: SwingPhaseEnum

    class Config:
        json_schema_extra = {
            "example": {
                "x": 0.62,
                "y": 0.71,
                "z": 0.0,
                "confidence": 0.78,
                "frame": 12,
                "timestamp_ms": 400.0,
                "handedness": "right",
                "club_length": 0.31,
                "swing_phase": "backswing"
            }
        }

    @classmethod
    def from_domain(cls, position: ClubHeadPosition) -> "ClubHeadPositionSchema":
        return cls(
            x=position.x,
            y=position.y,
            z=position.z,
            confidence=position.confidence,
            frame=position.frame,
            timestamp_ms=position.timestamp_ms,
            handedness=HandednessEnum(position.handedness.value),
            club_length=position.club_length,
            swing_phase=SwingPhaseEnum(position.swing_phase.value),
        )


class TrajectorySummarySchema(BaseModel):
    """Quality summary of a trajectory."""
    total_frames: int = Field(..., ge=0)
    duration_ms: float = Field(..., description="Last minus first timestamp")
    handedness: HandednessEnum
    average_confidence: float = Field(..., ge=0.0, le=1.0)
    smoothness: float = Field(..., ge=0.0, le=1.0)
    completeness: float = Field(..., ge=0.0, le=1.0)

    @classmethod
    def from_domain(cls, trajectory: ClubHeadTrajectory) -> "TrajectorySummarySchema":
        return cls(
            total_frames=trajectory.total_frames,
            duration_ms=trajectory.duration_ms,
            handedness=HandednessEnum(trajectory.handedness.value),
            average_confidence=trajectory.average_confidence,
            smoothness=trajectory.smoothness,
            completeness=trajectory.completeness,
        )


class TrajectoryResponse(TrajectorySummarySchema):
    """Complete club head trajectory."""
    positions: List[ClubHeadPositionSchema] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, trajectory: ClubHeadTrajectory) -> "TrajectoryResponse":
        summary = TrajectorySummarySchema.from_domain(trajectory)
        return cls(
            **summary.model_dump(),
            positions=[ClubHeadPositionSchema.from_domain(p) for p in trajectory.positions],
        )


class BuildTrajectoryRequest(BaseModel):
    """Pose frames of one video plus optional tracer options."""
    frames: List[PoseFrameSchema] = Field(..., description="Frames in playback order")
    config: Optional[TracerConfigSchema] = Field(None, description="Tracer option overrides")


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    environment: str = Field(..., description="Deployment environment")


# =============================================================================
# WebSocket Message Schemas
# =============================================================================

class WebSocketMessageType(str, Enum):
    """Types of WebSocket messages."""
    # Client -> Server
    FRAME = "frame"                    # Send one pose frame
    START_SESSION = "start_session"    # Start tracing a new video
    END_SESSION = "end_session"        # Finish and request the summary

    # Server -> Client
    CLUB_HEAD = "club_head"            # Stored position for a frame (or null)
    TRAJECTORY_SUMMARY = "trajectory_summary"
    ERROR = "error"
    SESSION_STARTED = "session_started"
    SESSION_ENDED = "session_ended"


class WebSocketMessage(BaseModel):
    """
    Base WebSocket message structure.

    All WebSocket communication uses this format.
    """
    type: WebSocketMessageType = Field(..., description="Message type")
    data: dict = Field(default_factory=dict, description="Message payload")
    timestamp: int = Field(0, description="Unix timestamp in milliseconds")

    class Config:
        json_schema_extra = {
            "example": {
                "type": "frame",
                "data": {"landmarks": [], "frame_number": 0, "timestamp_ms": 0},
                "timestamp": 1704067200000
            }
        }
