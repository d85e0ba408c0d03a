"""
Trajectory Metrics

Quality summary of a finished club head trajectory: mean confidence,
smoothness of the path, and completeness of the swing it covers.
"""

import math
from typing import Sequence
import numpy as np

from ..domain.trajectory import ClubHeadPosition, ClubHeadTrajectory, SwingPhase
from .constants import COVERAGE_SPAN


def average_confidence(positions: Sequence[ClubHeadPosition]) -> float:
    if not positions:
        return 0.0
    return float(np.mean([p.confidence for p in positions]))


def calculate_smoothness(positions: Sequence[ClubHeadPosition]) -> float:
    """
    Smoothness of the path in the image plane.

    1 - (mean absolute turning angle between consecutive segments) / pi,
    over every triplet of consecutive points. Paths shorter than three
    points score 1.0.
    """
    if len(positions) < 3:
        return 1.0

    points = np.array([[p.x, p.y] for p in positions], dtype=np.float64)
    segments = np.diff(points, axis=0)
    headings = np.arctan2(segments[:, 1], segments[:, 0])

    turns = np.abs(np.diff(headings))
    turns = np.where(turns > math.pi, 2 * math.pi - turns, turns)

    return float(max(0.0, 1.0 - turns.mean() / math.pi))


def calculate_completeness(positions: Sequence[ClubHeadPosition]) -> float:
    """
    How much of a full swing the trajectory covers.

    Average of:
    - the share of the six swing phases that appear, and
    - min(1, (x range + y range) / 0.5) as a spatial coverage proxy.
    """
    if not positions:
        return 0.0

    phases_seen = {p.swing_phase for p in positions}
    phase_completeness = len(phases_seen) / len(SwingPhase)

    xs = [p.x for p in positions]
    ys = [p.y for p in positions]
    span = (max(xs) - min(xs)) + (max(ys) - min(ys))
    coverage_completeness = min(1.0, span / COVERAGE_SPAN)

    return (phase_completeness + coverage_completeness) / 2


def summarize_trajectory(positions: Sequence[ClubHeadPosition]) -> ClubHeadTrajectory:
    """
    Build the trajectory result with its summary fields.

    An empty position list returns a trajectory with every summary field
    at its default.
    """
    if not positions:
        return ClubHeadTrajectory()

    return ClubHeadTrajectory(
        positions=list(positions),
        total_frames=len(positions),
        duration_ms=positions[-1].timestamp_ms - positions[0].timestamp_ms,
        handedness=positions[0].handedness,
        average_confidence=average_confidence(positions),
        smoothness=calculate_smoothness(positions),
        completeness=calculate_completeness(positions),
    )
