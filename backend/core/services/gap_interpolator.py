"""
Gap Interpolator

Synthesizes positions for short runs of missing frames by linear
blending between the last stored position and the incoming one.
"""

from ..domain.trajectory import ClubHeadPosition
from .phase_classifier import classify_phase


def interpolate_gap(
    start: ClubHeadPosition,
    end: ClubHeadPosition,
    trajectory_length: int,
    max_gap_frames: int,
) -> list[ClubHeadPosition]:
    """
    Build the positions for the frames strictly between start and end.

    Position, confidence and timestamp are blended linearly. Every filled
    position takes the end position's side and club length; its phase is
    recomputed for its own frame index against
    trajectory_length + gap.

    Args:
        start: Last stored position
        end: Incoming position
        trajectory_length: Number of positions stored before the gap
        max_gap_frames: Longest gap (end.frame - start.frame) that is filled

    Returns:
        The filled positions in frame order; empty when the frames are
        adjacent or the gap is longer than max_gap_frames
    """
    gap = end.frame - start.frame
    if gap <= 1 or gap > max_gap_frames:
        return []

    filled = []
    for step in range(1, gap):
        progress = step / gap
        frame = start.frame + step
        filled.append(ClubHeadPosition(
            x=start.x + (end.x - start.x) * progress,
            y=start.y + (end.y - start.y) * progress,
            z=start.z + (end.z - start.z) * progress,
            confidence=start.confidence * (1 - progress) + end.confidence * progress,
            frame=frame,
            timestamp_ms=start.timestamp_ms + (end.timestamp_ms - start.timestamp_ms) * progress,
            handedness=end.handedness,
            club_length=end.club_length,
            swing_phase=classify_phase(frame, trajectory_length + gap),
        ))
    return filled
