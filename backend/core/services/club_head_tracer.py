"""
Club Head Tracer Service

High-level service that turns a sequence of pose frames into a smooth,
continuous club head trajectory.

This is the main entry point for tracing a swing. Each video gets its own
tracer instance; the trajectory it holds is the only mutable state.
"""

import logging
from dataclasses import replace
from typing import Iterable, Optional

from ..domain.config import TracerConfig
from ..domain.pose import IncompleteLandmarksError, LandmarkSet, PoseFrame
from ..domain.trajectory import ClubHeadPosition, ClubHeadTrajectory, SwingPhase
from .constants import DEFAULT_FRAME_INTERVAL_MS, TIME_LOOKUP_TOLERANCE_MS
from .fusion import FusedEstimate, fuse_candidates
from .gap_interpolator import interpolate_gap
from .geometry import GeometryEstimator
from .handedness import HandednessResolver
from .phase_classifier import classify_phase
from .temporal_filter import blend_with_previous, smooth_estimate
from .trajectory_metrics import summarize_trajectory

logger = logging.getLogger(__name__)


def _clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    return max(low, min(high, value))


def _clamp_position(position: ClubHeadPosition) -> ClubHeadPosition:
    return replace(
        position,
        x=_clamp(position.x),
        y=_clamp(position.y),
        z=_clamp(position.z),
        confidence=_clamp(position.confidence),
        club_length=max(0.0, position.club_length),
    )


class ClubHeadTracer:
    """
    Traces the club head through a golf swing from pose landmarks.

    For every frame this service:
    1. Classifies the coarse swing phase
    2. Resolves the swinging side
    3. Collects candidates from the geometry estimators
    4. Fuses them with confidence and phase weights
    5. Smooths against the previous position, adaptively by confidence
    6. Blends again with the configured smoothing factor on storage
    7. Fills short frame gaps and appends to the trajectory

    Usage:
        tracer = ClubHeadTracer()

        # Whole video at once
        trajectory = tracer.build_trajectory(frames)
        print(f"Smoothness: {trajectory.smoothness:.2f}")

        # Or frame by frame
        for frame in frames:
            tracer.process_frame(frame)
        trajectory = tracer.get_trajectory()
    """

    def __init__(self, config: Optional[TracerConfig] = None):
        """Initialize the tracer with an empty trajectory."""
        self.config = config or TracerConfig()
        self._trajectory: list[ClubHeadPosition] = []
        self._last_valid: Optional[ClubHeadPosition] = None

    # -------------------------------------------------------------------------
    # State
    # -------------------------------------------------------------------------

    @property
    def positions(self) -> list[ClubHeadPosition]:
        """Copy of the positions stored so far."""
        return list(self._trajectory)

    @property
    def last_valid_position(self) -> Optional[ClubHeadPosition]:
        """Most recent position that came from a real frame."""
        return self._last_valid

    def clear(self) -> None:
        """Drop the trajectory so the tracer can start a new video."""
        self._trajectory = []
        self._last_valid = None

    reset = clear

    def update_config(self, **changes) -> TracerConfig:
        """
        Replace individual config fields.

        Raises:
            TypeError: for unknown field names
            ValueError: for out-of-range values
        """
        self.config = replace(self.config, **changes)
        return self.config

    # -------------------------------------------------------------------------
    # Per-Frame Detection
    # -------------------------------------------------------------------------

    def _estimate(
        self,
        frame: PoseFrame,
    ) -> Optional[tuple[FusedEstimate, SwingPhase]]:
        """Fused estimate for a frame, before smoothing."""
        try:
            landmarks = LandmarkSet.from_frame(frame)
        except IncompleteLandmarksError as e:
            logger.debug(f"Skipping frame {frame.frame_number}: {e}")
            return None

        if not landmarks.has_arms():
            logger.debug(f"Skipping frame {frame.frame_number}: wrists or elbows missing")
            return None

        phase = classify_phase(frame.frame_number, len(self._trajectory))
        side = HandednessResolver.resolve(landmarks, self._trajectory, phase)
        candidates = GeometryEstimator.estimate_all(landmarks, side, self._trajectory)

        fused = fuse_candidates(candidates, phase)
        if fused is None:
            logger.debug(f"Skipping frame {frame.frame_number}: no usable candidates")
            return None
        return fused, phase

    def _finalize(
        self,
        fused: FusedEstimate,
        phase: SwingPhase,
        frame: PoseFrame,
    ) -> ClubHeadPosition:
        """Adaptively smooth, clamp and stamp a fused estimate."""
        if self._trajectory:
            fused = smooth_estimate(fused, self._trajectory[-1])

        timestamp_ms = frame.timestamp_ms
        if timestamp_ms is None:
            timestamp_ms = frame.frame_number * DEFAULT_FRAME_INTERVAL_MS

        return _clamp_position(ClubHeadPosition(
            x=fused.x,
            y=fused.y,
            z=fused.z,
            confidence=fused.confidence,
            frame=frame.frame_number,
            timestamp_ms=float(timestamp_ms),
            handedness=fused.handedness,
            club_length=fused.club_length,
            swing_phase=phase,
        ))

    def detect_position(self, frame: PoseFrame) -> Optional[ClubHeadPosition]:
        """
        Estimate the club head for a frame without storing it.

        Args:
            frame: Pose frame with 33 landmarks

        Returns:
            Smoothed, clamped position, or None if the frame is unusable
        """
        estimate = self._estimate(frame)
        if estimate is None:
            return None
        fused, phase = estimate
        return self._finalize(fused, phase, frame)

    # -------------------------------------------------------------------------
    # Trajectory Building
    # -------------------------------------------------------------------------

    def add_position(self, position: ClubHeadPosition) -> ClubHeadPosition:
        """
        Store a position, filling a short gap before it.

        The position is clamped to the unit range and, when smoothing is
        enabled, blended with the last stored position using
        config.smoothing_factor as the weight of the previous one.

        Returns:
            The position as stored

        Raises:
            ValueError: if the frame index does not follow the last one
        """
        position = _clamp_position(position)

        if self._trajectory:
            last = self._trajectory[-1]
            if position.frame <= last.frame:
                raise ValueError(
                    f"Frame {position.frame} does not follow frame {last.frame}"
                )
            if self.config.smoothing_enabled:
                position = blend_with_previous(position, last, self.config.smoothing_factor)

            filled = interpolate_gap(
                last,
                position,
                len(self._trajectory),
                self.config.max_gap_frames,
            )
            if filled:
                logger.debug(
                    f"Interpolated {len(filled)} frames between {last.frame} and {position.frame}"
                )
            self._trajectory.extend(filled)

        self._trajectory.append(position)
        self._last_valid = position
        return position

    def process_frame(self, frame: PoseFrame) -> Optional[ClubHeadPosition]:
        """
        Trace one frame and store the result.

        Returns:
            The stored position, or None when the frame was skipped
            (unusable landmarks, low confidence, or out of order)
        """
        if self._trajectory and frame.frame_number <= self._trajectory[-1].frame:
            logger.warning(
                f"Ignoring frame {frame.frame_number}: not after frame {self._trajectory[-1].frame}"
            )
            return None

        estimate = self._estimate(frame)
        if estimate is None:
            return None

        fused, phase = estimate
        if fused.confidence < self.config.min_confidence:
            logger.debug(
                f"Skipping frame {frame.frame_number}: confidence {fused.confidence:.2f} "
                f"below {self.config.min_confidence:.2f}"
            )
            return None

        return self.add_position(self._finalize(fused, phase, frame))

    def build_trajectory(self, frames: Iterable[PoseFrame]) -> ClubHeadTrajectory:
        """
        Trace a whole video.

        Clears any previous trajectory, then processes the frames in order.

        Args:
            frames: Pose frames in playback order

        Returns:
            Complete ClubHeadTrajectory with summary scores
        """
        self.clear()
        for frame in frames:
            self.process_frame(frame)

        trajectory = self.get_trajectory()
        logger.info(
            f"Built club head trajectory: {trajectory.total_frames} points, "
            f"confidence {trajectory.average_confidence:.2f}, "
            f"smoothness {trajectory.smoothness:.2f}, "
            f"completeness {trajectory.completeness:.2f}"
        )
        return trajectory

    def get_trajectory(self) -> ClubHeadTrajectory:
        """Snapshot of the trajectory with its summary."""
        return summarize_trajectory(self._trajectory)

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def get_position_at_frame(self, frame: int) -> Optional[ClubHeadPosition]:
        """Position stored for a frame index, if any."""
        for position in self._trajectory:
            if position.frame == frame:
                return position
        return None

    def get_position_at_time(self, timestamp_ms: float) -> Optional[ClubHeadPosition]:
        """Closest position within one 60 fps frame (16.67 ms) of a timestamp."""
        best = None
        best_diff = TIME_LOOKUP_TOLERANCE_MS
        for position in self._trajectory:
            diff = abs(position.timestamp_ms - timestamp_ms)
            if diff < best_diff:
                best = position
                best_diff = diff
        return best
