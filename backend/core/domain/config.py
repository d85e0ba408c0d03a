"""
Tracer Configuration

Tunable options for the club head tracer. Fixed algorithm constants
live in core.services.constants; this is only what callers may change.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TracerConfig:
    """
    Club head tracer options.

    Attributes:
        min_confidence: Fused positions below this are left out of the trajectory
        smoothing_factor: Weight of the previous position in the blend applied
                          when a position is stored; 0 disables that blend
        interpolation_frames: Informational only, kept for client compatibility
        max_gap_frames: Longest frame gap that is filled by interpolation
        club_length_multiplier: Baseline club/arm ratio hint; the estimators
                                use their own fixed multipliers instead
    """
    min_confidence: float = 0.3
    smoothing_factor: float = 0.2
    interpolation_frames: int = 3
    max_gap_frames: int = 5
    club_length_multiplier: float = 2.5

    def __post_init__(self):
        if not 0.0 <= self.min_confidence <= 1.0:
            raise ValueError(f"min_confidence must be in [0, 1], got {self.min_confidence}")
        if not 0.0 <= self.smoothing_factor <= 1.0:
            raise ValueError(f"smoothing_factor must be in [0, 1], got {self.smoothing_factor}")
        if self.interpolation_frames < 0:
            raise ValueError(f"interpolation_frames must be >= 0, got {self.interpolation_frames}")
        if self.max_gap_frames < 0:
            raise ValueError(f"max_gap_frames must be >= 0, got {self.max_gap_frames}")
        if self.club_length_multiplier <= 0:
            raise ValueError(
                f"club_length_multiplier must be positive, got {self.club_length_multiplier}"
            )

    @property
    def smoothing_enabled(self) -> bool:
        return self.smoothing_factor > 0
