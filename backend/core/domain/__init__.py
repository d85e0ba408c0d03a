"""
Domain Models

Pure data structures for pose landmarks and club head trajectories.
No external dependencies - just Python dataclasses and enums.
"""

from .pose import (
    PoseLandmark,
    PoseFrame,
    BodyPart,
    LandmarkSet,
    IncompleteLandmarksError,
    REQUIRED_LANDMARK_COUNT,
)
from .trajectory import (
    Handedness,
    SwingPhase,
    EstimationMethod,
    ClubHeadCandidate,
    ClubHeadPosition,
    ClubHeadTrajectory,
)
from .config import TracerConfig

__all__ = [
    "PoseLandmark",
    "PoseFrame",
    "BodyPart",
    "LandmarkSet",
    "IncompleteLandmarksError",
    "REQUIRED_LANDMARK_COUNT",
    "Handedness",
    "SwingPhase",
    "EstimationMethod",
    "ClubHeadCandidate",
    "ClubHeadPosition",
    "ClubHeadTrajectory",
    "TracerConfig",
]
