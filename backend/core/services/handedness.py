"""
Handedness Resolver

Decides which side is swinging the club in a frame by fusing four weak
signals. The decision picks the wrist, elbow and shoulder the geometry
estimators read.
"""

import logging
from typing import Optional, Sequence

from ..domain.pose import LandmarkSet
from ..domain.trajectory import ClubHeadPosition, Handedness, SwingPhase
from .constants import (
    HANDEDNESS_HISTORY_WEIGHT,
    HANDEDNESS_HISTORY_WINDOW,
    HANDEDNESS_LENGTH_WEIGHT,
    HANDEDNESS_MIN_HISTORY,
    HANDEDNESS_PHASE_WEIGHT,
    HANDEDNESS_PHASE_WINDOW,
    HANDEDNESS_PHASES,
    HANDEDNESS_POSITION_WEIGHT,
)

logger = logging.getLogger(__name__)


def _sign(value: float) -> float:
    if value > 0:
        return 1.0
    if value < 0:
        return -1.0
    return 0.0


def _right_fraction_bias(positions: Sequence[ClubHeadPosition]) -> float:
    """Fraction of right-side samples minus 0.5 (range -0.5..0.5)."""
    if not positions:
        return 0.0
    right_count = sum(1 for p in positions if p.handedness == Handedness.RIGHT)
    return right_count / len(positions) - 0.5


class HandednessResolver:
    """
    Resolves the swinging side for a frame.

    Signals (positive favours right):
    - Position (0.3): which wrist sits further from the body center x
    - Forearm length (0.3): which forearm is longer in the image
    - History (0.2): share of `right` decisions in the last 5 samples
    - Phase (0.2): share of `right` in the last 3 samples, only during
      backswing and downswing

    The history and phase signals are silent until 5 samples exist.
    A combined score of exactly 0 resolves to RIGHT. That default is a
    convention, not evidence; left-handed golfers at address can land on it.

    Usage:
        side = HandednessResolver.resolve(landmarks, history, phase)
    """

    @staticmethod
    def position_score(landmarks: LandmarkSet) -> float:
        """+1 when the right wrist is further from body center x, -1 for left."""
        right_wrist = landmarks.wrist("right")
        left_wrist = landmarks.wrist("left")
        center = landmarks.hip_midpoint()
        if right_wrist is None or left_wrist is None or center is None:
            return 0.0

        right_offset = abs(right_wrist.x - center[0])
        left_offset = abs(left_wrist.x - center[0])
        return _sign(right_offset - left_offset)

    @staticmethod
    def length_score(landmarks: LandmarkSet) -> float:
        """+1 when the right forearm is longer, -1 when the left is."""
        right_wrist = landmarks.wrist("right")
        right_elbow = landmarks.elbow("right")
        left_wrist = landmarks.wrist("left")
        left_elbow = landmarks.elbow("left")
        if None in (right_wrist, right_elbow, left_wrist, left_elbow):
            return 0.0

        right_length = right_wrist.distance_2d(right_elbow)
        left_length = left_wrist.distance_2d(left_elbow)
        return _sign(right_length - left_length)

    @staticmethod
    def history_bias(history: Sequence[ClubHeadPosition]) -> float:
        if len(history) < HANDEDNESS_MIN_HISTORY:
            return 0.0
        return _right_fraction_bias(history[-HANDEDNESS_HISTORY_WINDOW:])

    @staticmethod
    def phase_bias(
        history: Sequence[ClubHeadPosition],
        phase: Optional[SwingPhase],
    ) -> float:
        if len(history) < HANDEDNESS_MIN_HISTORY:
            return 0.0
        if phase not in HANDEDNESS_PHASES:
            return 0.0
        return _right_fraction_bias(history[-HANDEDNESS_PHASE_WINDOW:])

    @classmethod
    def score(
        cls,
        landmarks: LandmarkSet,
        history: Sequence[ClubHeadPosition],
        phase: Optional[SwingPhase] = None,
    ) -> float:
        """Weighted sum of the four signals; positive favours right."""
        return (
            cls.position_score(landmarks) * HANDEDNESS_POSITION_WEIGHT
            + cls.length_score(landmarks) * HANDEDNESS_LENGTH_WEIGHT
            + cls.history_bias(history) * HANDEDNESS_HISTORY_WEIGHT
            + cls.phase_bias(history, phase) * HANDEDNESS_PHASE_WEIGHT
        )

    @classmethod
    def resolve(
        cls,
        landmarks: LandmarkSet,
        history: Sequence[ClubHeadPosition],
        phase: Optional[SwingPhase] = None,
    ) -> Handedness:
        """
        Resolve the swinging side for a frame.

        Args:
            landmarks: Validated landmarks of the frame
            history: Trajectory accumulated so far
            phase: Phase of the frame, used by the phase signal

        Returns:
            Handedness.LEFT for a negative score, otherwise RIGHT
        """
        total = cls.score(landmarks, history, phase)
        if total == 0:
            logger.debug("Handedness signals tied, defaulting to right")
        return Handedness.LEFT if total < 0 else Handedness.RIGHT
