"""
Phase Classifier

Maps a frame position to a coarse swing phase.

This is a temporal heuristic, not a biomechanical detector: it buckets
the ratio of frame index to sequence length into fixed fractions. Real
phase boundaries vary with the golfer's tempo. The labels only bias
fusion weights and the handedness resolver.
"""

from ..domain.trajectory import SwingPhase
from .constants import PHASE_BOUNDARIES


def classify_phase(frame_index: int, total_frames: int) -> SwingPhase:
    """
    Classify a frame into one of the six swing phases.

    Args:
        frame_index: Index of the frame being classified
        total_frames: Length the index is measured against (the tracer
                      passes the current trajectory length)

    Returns:
        SwingPhase for progress = frame_index / total_frames;
        ADDRESS when total_frames is 0

    Example:
        classify_phase(4, 10)   # SwingPhase.TOP
    """
    if total_frames <= 0:
        return SwingPhase.ADDRESS

    progress = frame_index / total_frames
    for upper_bound, phase in PHASE_BOUNDARIES:
        if progress < upper_bound:
            return phase
    return SwingPhase.FOLLOW_THROUGH
