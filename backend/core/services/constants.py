"""
Club Head Tracer Constants

Every fixed tuning number used by the estimators, handedness resolver,
phase classifier, fusion engine, temporal filter and metrics.
Kept in one place so fusion behaviour can be audited without reading
the estimator code.
"""

import math

from ..domain.trajectory import EstimationMethod, SwingPhase


# =============================================================================
# Geometry Estimators
# =============================================================================

# Arm extension: wrist + forearm direction rotated 60 degrees
ARM_EXTENSION_MULTIPLIER = 2.2
ARM_EXTENSION_ANGLE = math.pi / 3
ARM_EXTENSION_Y_OFFSET = 0.08
ARM_EXTENSION_DEPTH_WEIGHT = 0.3
ARM_EXTENSION_CONFIDENCE = 0.9

# Shoulder-wrist line: wrist + shoulder->wrist direction rotated 45 degrees
SHOULDER_WRIST_MULTIPLIER = 1.8
SHOULDER_WRIST_ANGLE = math.pi / 4
SHOULDER_WRIST_Y_OFFSET = 0.06
SHOULDER_WRIST_DEPTH_WEIGHT = 0.2
SHOULDER_WRIST_CONFIDENCE = 0.8

# Body center: wrist + hip midpoint->wrist direction rotated 36 degrees
BODY_CENTER_MULTIPLIER = 1.5
BODY_CENTER_ANGLE = math.pi / 2.5
BODY_CENTER_Y_OFFSET = 0.05
BODY_CENTER_DEPTH_WEIGHT = 0.1
BODY_CENTER_CONFIDENCE = 0.7

# Trajectory prediction: last point + half the velocity over 3 samples
PREDICTION_MIN_HISTORY = 3
PREDICTION_VELOCITY_SCALE = 0.5
PREDICTION_CONFIDENCE = 0.6


# =============================================================================
# Handedness Resolver
# =============================================================================

HANDEDNESS_POSITION_WEIGHT = 0.3
HANDEDNESS_LENGTH_WEIGHT = 0.3
HANDEDNESS_HISTORY_WEIGHT = 0.2
HANDEDNESS_PHASE_WEIGHT = 0.2

HANDEDNESS_HISTORY_WINDOW = 5
HANDEDNESS_PHASE_WINDOW = 3
# History-based signals stay silent until this many samples exist
HANDEDNESS_MIN_HISTORY = 5

HANDEDNESS_PHASES = (SwingPhase.BACKSWING, SwingPhase.DOWNSWING)


# =============================================================================
# Phase Classifier
# =============================================================================

# (upper bound of progress, phase); anything past the last bound is follow-through
PHASE_BOUNDARIES = (
    (0.1, SwingPhase.ADDRESS),
    (0.4, SwingPhase.BACKSWING),
    (0.5, SwingPhase.TOP),
    (0.8, SwingPhase.DOWNSWING),
    (0.9, SwingPhase.IMPACT),
)


# =============================================================================
# Fusion Engine
# =============================================================================

PHASE_METHOD_MULTIPLIERS: dict[SwingPhase, dict[EstimationMethod, float]] = {
    SwingPhase.ADDRESS: {
        EstimationMethod.ARM_EXTENSION: 1.5,
        EstimationMethod.SHOULDER_WRIST: 1.2,
        EstimationMethod.BODY_CENTER: 1.0,
    },
    SwingPhase.BACKSWING: {
        EstimationMethod.ARM_EXTENSION: 1.2,
        EstimationMethod.SHOULDER_WRIST: 1.5,
        EstimationMethod.BODY_CENTER: 1.1,
    },
    SwingPhase.TOP: {
        EstimationMethod.ARM_EXTENSION: 1.1,
        EstimationMethod.SHOULDER_WRIST: 1.3,
        EstimationMethod.BODY_CENTER: 1.5,
    },
    SwingPhase.DOWNSWING: {
        EstimationMethod.ARM_EXTENSION: 1.5,
        EstimationMethod.SHOULDER_WRIST: 1.2,
        EstimationMethod.BODY_CENTER: 1.0,
    },
    SwingPhase.IMPACT: {
        EstimationMethod.ARM_EXTENSION: 1.2,
        EstimationMethod.SHOULDER_WRIST: 1.2,
        EstimationMethod.BODY_CENTER: 1.2,
        EstimationMethod.TRAJECTORY_PREDICTION: 1.2,
    },
    SwingPhase.FOLLOW_THROUGH: {
        EstimationMethod.ARM_EXTENSION: 1.1,
        EstimationMethod.SHOULDER_WRIST: 1.2,
        EstimationMethod.BODY_CENTER: 1.0,
        EstimationMethod.TRAJECTORY_PREDICTION: 1.5,
    },
}


# =============================================================================
# Temporal Filter
# =============================================================================

MAX_SMOOTHING = 0.3
CONFIDENCE_SMOOTHING_SCALE = 0.5
CONFIDENCE_DECAY = 0.9


# =============================================================================
# Tracer / Trajectory
# =============================================================================

# Frame interval assumed when a frame carries no timestamp (30 fps)
DEFAULT_FRAME_INTERVAL_MS = 33.33

# One 60 fps frame
TIME_LOOKUP_TOLERANCE_MS = 16.67

# x-range + y-range that counts as full spatial coverage
COVERAGE_SPAN = 0.5
