"""
Services Layer

Club head estimation components and the tracer that orchestrates them.
"""

from .geometry import GeometryEstimator
from .handedness import HandednessResolver
from .phase_classifier import classify_phase
from .fusion import FusedEstimate, fuse_candidates, method_weights
from .temporal_filter import smooth_estimate, effective_smoothing, blend_with_previous
from .gap_interpolator import interpolate_gap
from .trajectory_metrics import (
    calculate_smoothness,
    calculate_completeness,
    summarize_trajectory,
)
from .club_head_tracer import ClubHeadTracer

__all__ = [
    "GeometryEstimator",
    "HandednessResolver",
    "classify_phase",
    "FusedEstimate",
    "fuse_candidates",
    "method_weights",
    "smooth_estimate",
    "effective_smoothing",
    "blend_with_previous",
    "interpolate_gap",
    "calculate_smoothness",
    "calculate_completeness",
    "summarize_trajectory",
    "ClubHeadTracer",
]
