"""
Temporal Filter

Exponential blends of a new club head point with the previous trajectory
position to damp frame-to-frame jitter.

Two passes run per stored frame: a confidence-adaptive blend on the
fused estimate, then a fixed-weight blend with the configured
smoothing factor when the position is stored.
"""

from dataclasses import replace
from typing import Optional, TypeVar

from ..domain.trajectory import ClubHeadPosition
from .constants import CONFIDENCE_DECAY, CONFIDENCE_SMOOTHING_SCALE, MAX_SMOOTHING
from .fusion import FusedEstimate

# FusedEstimate or ClubHeadPosition
Point = TypeVar("Point", FusedEstimate, ClubHeadPosition)


def effective_smoothing(confidence: float) -> float:
    """Blend weight given to the previous position: min(0.3, confidence * 0.5)."""
    return min(MAX_SMOOTHING, max(0.0, confidence) * CONFIDENCE_SMOOTHING_SCALE)


def blend_with_previous(
    current: Point,
    previous: ClubHeadPosition,
    factor: float,
) -> Point:
    """
    output = current * (1 - factor) + previous * factor, per coordinate;
    confidence = min(current, previous * 0.9).
    """
    keep = 1.0 - factor
    return replace(
        current,
        x=current.x * keep + previous.x * factor,
        y=current.y * keep + previous.y * factor,
        z=current.z * keep + previous.z * factor,
        confidence=min(current.confidence, previous.confidence * CONFIDENCE_DECAY),
    )


def smooth_estimate(
    current: FusedEstimate,
    previous: Optional[ClubHeadPosition],
) -> FusedEstimate:
    """
    Blend the fused estimate with the previous position, weighted by
    the estimate's own confidence.

    Args:
        current: Fused estimate for this frame
        previous: Last trajectory position, or None at the start

    Returns:
        The smoothed estimate (unchanged when there is no previous position)
    """
    if previous is None:
        return current
    return blend_with_previous(current, previous, effective_smoothing(current.confidence))
