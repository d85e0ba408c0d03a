"""
Club Head Trajectory Domain Models

Data structures for the inferred club head path: per-frame estimator
candidates, fused positions, and the finished trajectory with its
quality summary.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class Handedness(str, Enum):
    """Which side of the body is swinging the club."""
    LEFT = "left"
    RIGHT = "right"


class SwingPhase(Enum):
    """
    Coarse temporal buckets of a golf swing.

    Used only to bias fusion weights; boundaries are a fixed fraction of
    the sequence, not biomechanical events:
    - ADDRESS: Setup position
    - BACKSWING: Club moving back
    - TOP: Top of backswing
    - DOWNSWING: Transition and acceleration
    - IMPACT: Club meets ball
    - FOLLOW_THROUGH: After impact
    """
    ADDRESS = "address"
    BACKSWING = "backswing"
    TOP = "top"
    DOWNSWING = "downswing"
    IMPACT = "impact"
    FOLLOW_THROUGH = "follow-through"


class EstimationMethod(Enum):
    """Geometric or temporal method that produced a candidate."""
    ARM_EXTENSION = "arm_extension"
    SHOULDER_WRIST = "shoulder_wrist"
    BODY_CENTER = "body_center"
    TRAJECTORY_PREDICTION = "trajectory_prediction"


@dataclass(frozen=True)
class ClubHeadCandidate:
    """
    One estimator's proposal for the club head in a frame, before fusion.

    Coordinates are normalized but not yet clamped.
    """
    x: float
    y: float
    z: float
    handedness: Handedness
    club_length: float
    confidence: float
    method: EstimationMethod


@dataclass(frozen=True)
class ClubHeadPosition:
    """
    Fused and smoothed club head position for a single frame.

    Attributes:
        x, y, z: Normalized position, clamped to [0, 1]
        confidence: 0-1 confidence score
        frame: Source frame index
        timestamp_ms: Video timestamp in milliseconds
        handedness: Resolved swinging side
        club_length: Estimated club length in normalized units
        swing_phase: Coarse phase label
    """
    x: float
    y: float
    z: float
    confidence: float
    frame: int
    timestamp_ms: float
    handedness: Handedness
    club_length: float
    swing_phase: SwingPhase


@dataclass
class ClubHeadTrajectory:
    """
    Complete club head path for one video.

    This is the main result object returned after tracing a swing.
    An empty trajectory carries zero/default summary fields.
    """
    positions: list[ClubHeadPosition] = field(default_factory=list)
    total_frames: int = 0
    duration_ms: float = 0.0
    handedness: Handedness = Handedness.RIGHT
    average_confidence: float = 0.0
    smoothness: float = 0.0
    completeness: float = 0.0

    def get_position_at_frame(self, frame: int) -> Optional[ClubHeadPosition]:
        """Get the position recorded for a frame index."""
        for position in self.positions:
            if position.frame == frame:
                return position
        return None

    @property
    def frames(self) -> list[int]:
        """Frame indices in trajectory order."""
        return [p.frame for p in self.positions]
