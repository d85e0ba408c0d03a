"""
Geometry Estimators

Independent club head candidates computed from different landmark
subsets, plus one prediction from the trajectory history.

Every estimator is pure: it reads the frame and the history and
returns a ClubHeadCandidate, or None when a landmark it needs is
missing. A missing candidate is simply left out of fusion.
"""

import math
from typing import Optional, Sequence
import numpy as np

from ..domain.pose import LandmarkSet, PoseLandmark
from ..domain.trajectory import (
    ClubHeadCandidate,
    ClubHeadPosition,
    EstimationMethod,
    Handedness,
)
from .constants import (
    ARM_EXTENSION_ANGLE,
    ARM_EXTENSION_CONFIDENCE,
    ARM_EXTENSION_DEPTH_WEIGHT,
    ARM_EXTENSION_MULTIPLIER,
    ARM_EXTENSION_Y_OFFSET,
    BODY_CENTER_ANGLE,
    BODY_CENTER_CONFIDENCE,
    BODY_CENTER_DEPTH_WEIGHT,
    BODY_CENTER_MULTIPLIER,
    BODY_CENTER_Y_OFFSET,
    PREDICTION_CONFIDENCE,
    PREDICTION_MIN_HISTORY,
    PREDICTION_VELOCITY_SCALE,
    SHOULDER_WRIST_ANGLE,
    SHOULDER_WRIST_CONFIDENCE,
    SHOULDER_WRIST_DEPTH_WEIGHT,
    SHOULDER_WRIST_MULTIPLIER,
    SHOULDER_WRIST_Y_OFFSET,
)


class GeometryEstimator:
    """
    Proposes club head positions from pose landmarks.

    Geometric methods:
    - Arm extension (forearm direction)
    - Shoulder-wrist line
    - Body center reference (hip midpoint)

    Temporal method:
    - Trajectory prediction (linear extrapolation of recent positions)

    All methods are static - no state needed.
    """

    # -------------------------------------------------------------------------
    # Core Vector Projection
    # -------------------------------------------------------------------------

    @staticmethod
    def project_from_wrist(
        wrist: PoseLandmark,
        origin: tuple[float, float],
        side: Handedness,
        multiplier: float,
        angle_offset: float,
        y_offset: float,
    ) -> tuple[float, float, float]:
        """
        Extend the origin->wrist direction beyond the wrist.

        The 2D reference vector runs from `origin` to the wrist. The club is
        placed at the wrist plus that vector's length times `multiplier`,
        rotated by `angle_offset` (clockwise for a right-side swing,
        counter-clockwise for left), then shifted down by `y_offset`.

        Returns:
            (x, y, club_length)
        """
        reference = np.array([wrist.x - origin[0], wrist.y - origin[1]])
        club_length = float(np.linalg.norm(reference)) * multiplier

        direction = 1.0 if side == Handedness.RIGHT else -1.0
        angle = math.atan2(reference[1], reference[0]) + direction * angle_offset

        x = wrist.x + math.cos(angle) * club_length
        y = wrist.y + math.sin(angle) * club_length + y_offset
        return x, y, club_length

    # -------------------------------------------------------------------------
    # Geometric Methods
    # -------------------------------------------------------------------------

    @staticmethod
    def arm_extension(
        landmarks: LandmarkSet,
        side: Handedness,
    ) -> Optional[ClubHeadCandidate]:
        """
        Extend the dominant forearm (elbow -> wrist) by 2.2x at 60 degrees.

        Most reliable at address and through the downswing.
        """
        wrist = landmarks.wrist(side)
        elbow = landmarks.elbow(side)
        if wrist is None or elbow is None:
            return None

        x, y, club_length = GeometryEstimator.project_from_wrist(
            wrist,
            (elbow.x, elbow.y),
            side,
            ARM_EXTENSION_MULTIPLIER,
            ARM_EXTENSION_ANGLE,
            ARM_EXTENSION_Y_OFFSET,
        )
        return ClubHeadCandidate(
            x=x,
            y=y,
            z=wrist.depth + elbow.depth * ARM_EXTENSION_DEPTH_WEIGHT,
            handedness=side,
            club_length=club_length,
            confidence=min(wrist.confidence, elbow.confidence) * ARM_EXTENSION_CONFIDENCE,
            method=EstimationMethod.ARM_EXTENSION,
        )

    @staticmethod
    def shoulder_wrist(
        landmarks: LandmarkSet,
        side: Handedness,
    ) -> Optional[ClubHeadCandidate]:
        """Extend the shoulder -> wrist line by 1.8x at 45 degrees."""
        wrist = landmarks.wrist(side)
        shoulder = landmarks.shoulder(side)
        if wrist is None or shoulder is None:
            return None

        x, y, club_length = GeometryEstimator.project_from_wrist(
            wrist,
            (shoulder.x, shoulder.y),
            side,
            SHOULDER_WRIST_MULTIPLIER,
            SHOULDER_WRIST_ANGLE,
            SHOULDER_WRIST_Y_OFFSET,
        )
        return ClubHeadCandidate(
            x=x,
            y=y,
            z=wrist.depth + shoulder.depth * SHOULDER_WRIST_DEPTH_WEIGHT,
            handedness=side,
            club_length=club_length,
            confidence=min(wrist.confidence, shoulder.confidence) * SHOULDER_WRIST_CONFIDENCE,
            method=EstimationMethod.SHOULDER_WRIST,
        )

    @staticmethod
    def body_center(
        landmarks: LandmarkSet,
        side: Handedness,
    ) -> Optional[ClubHeadCandidate]:
        """Extend the hip midpoint -> wrist line by 1.5x at 36 degrees (pi/2.5)."""
        wrist = landmarks.wrist(side)
        left_hip = landmarks.hip("left")
        right_hip = landmarks.hip("right")
        center = landmarks.hip_midpoint()
        if wrist is None or left_hip is None or right_hip is None or center is None:
            return None

        x, y, club_length = GeometryEstimator.project_from_wrist(
            wrist,
            (center[0], center[1]),
            side,
            BODY_CENTER_MULTIPLIER,
            BODY_CENTER_ANGLE,
            BODY_CENTER_Y_OFFSET,
        )
        confidence = min(wrist.confidence, left_hip.confidence, right_hip.confidence)
        return ClubHeadCandidate(
            x=x,
            y=y,
            z=wrist.depth + center[2] * BODY_CENTER_DEPTH_WEIGHT,
            handedness=side,
            club_length=club_length,
            confidence=confidence * BODY_CENTER_CONFIDENCE,
            method=EstimationMethod.BODY_CENTER,
        )

    # -------------------------------------------------------------------------
    # Temporal Method
    # -------------------------------------------------------------------------

    @staticmethod
    def trajectory_prediction(
        history: Sequence[ClubHeadPosition],
    ) -> Optional[ClubHeadCandidate]:
        """
        Extrapolate from the last three trajectory positions.

        velocity = last - third-to-last; prediction = last + velocity * 0.5.
        Side and club length carry over from the last position.
        """
        if len(history) < PREDICTION_MIN_HISTORY:
            return None

        recent = history[-PREDICTION_MIN_HISTORY:]
        first = np.array([recent[0].x, recent[0].y, recent[0].z])
        last = np.array([recent[-1].x, recent[-1].y, recent[-1].z])
        predicted = last + (last - first) * PREDICTION_VELOCITY_SCALE

        return ClubHeadCandidate(
            x=float(predicted[0]),
            y=float(predicted[1]),
            z=float(predicted[2]),
            handedness=recent[-1].handedness,
            club_length=recent[-1].club_length,
            confidence=PREDICTION_CONFIDENCE,
            method=EstimationMethod.TRAJECTORY_PREDICTION,
        )

    # -------------------------------------------------------------------------
    # All Candidates
    # -------------------------------------------------------------------------

    @classmethod
    def estimate_all(
        cls,
        landmarks: LandmarkSet,
        side: Handedness,
        history: Sequence[ClubHeadPosition],
    ) -> list[ClubHeadCandidate]:
        """
        Run every estimator for a frame.

        Args:
            landmarks: Validated landmarks of the frame
            side: Resolved swinging side
            history: Trajectory accumulated so far (read only)

        Returns:
            Candidates from the estimators that had their landmarks,
            in method order
        """
        candidates = [
            cls.arm_extension(landmarks, side),
            cls.shoulder_wrist(landmarks, side),
            cls.body_center(landmarks, side),
            cls.trajectory_prediction(history),
        ]
        return [c for c in candidates if c is not None]
