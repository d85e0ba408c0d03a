"""
Fusion Engine

Combines the per-frame estimator candidates into a single club head
estimate, weighting each by its own confidence and a phase multiplier.
"""

from dataclasses import dataclass
from typing import Optional, Sequence
import numpy as np

from ..domain.trajectory import ClubHeadCandidate, Handedness, SwingPhase
from .constants import PHASE_METHOD_MULTIPLIERS


@dataclass(frozen=True)
class FusedEstimate:
    """Weighted average of the candidates, before temporal smoothing."""
    x: float
    y: float
    z: float
    confidence: float
    club_length: float
    handedness: Handedness


def method_weights(
    candidates: Sequence[ClubHeadCandidate],
    phase: SwingPhase,
) -> np.ndarray:
    """
    Normalized fusion weights for a candidate list.

    Each weight is the candidate's confidence times the phase multiplier
    for its method (1.0 when the phase table has no entry). Returns an
    all-zero array when the total weight is zero.
    """
    multipliers = PHASE_METHOD_MULTIPLIERS.get(phase, {})
    weights = np.array(
        [c.confidence * multipliers.get(c.method, 1.0) for c in candidates],
        dtype=np.float64,
    )
    total = weights.sum()
    if total <= 0:
        return np.zeros_like(weights)
    return weights / total


def fuse_candidates(
    candidates: Sequence[ClubHeadCandidate],
    phase: SwingPhase,
) -> Optional[FusedEstimate]:
    """
    Fuse candidates into one estimate.

    Position, club length and confidence are weighted averages. The side
    comes from the highest-weighted candidate (first one on ties).

    Returns:
        FusedEstimate, or None if there are no candidates or their total
        weight is zero (the frame is skipped)
    """
    if not candidates:
        return None

    weights = method_weights(candidates, phase)
    if not weights.any():
        return None

    values = np.array(
        [[c.x, c.y, c.z, c.confidence, c.club_length] for c in candidates],
        dtype=np.float64,
    )
    x, y, z, confidence, club_length = weights @ values

    best = candidates[int(np.argmax(weights))]
    return FusedEstimate(
        x=float(x),
        y=float(y),
        z=float(z),
        confidence=float(confidence),
        club_length=float(club_length),
        handedness=best.handedness,
    )
