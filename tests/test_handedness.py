"""Tests for the handedness resolver and the phase classifier."""

import pytest

from conftest import ADDRESS_POSE, build_frame, make_position, mirror_pose
from core.domain.pose import BodyPart, LandmarkSet
from core.domain.trajectory import Handedness, SwingPhase
from core.services.handedness import HandednessResolver
from core.services.phase_classifier import classify_phase


def _symmetric_frame():
    """Mirror-symmetric pose; every landmark signal cancels out."""
    pose = dict(ADDRESS_POSE)
    pose[BodyPart.LEFT_HIP] = (0.375, 0.625)
    pose[BodyPart.RIGHT_HIP] = (0.625, 0.625)
    pose[BodyPart.LEFT_WRIST] = (0.25, 0.5)
    pose[BodyPart.RIGHT_WRIST] = (0.75, 0.5)
    pose[BodyPart.LEFT_ELBOW] = (0.25, 0.375)
    pose[BodyPart.RIGHT_ELBOW] = (0.75, 0.375)
    return LandmarkSet.from_frame(build_frame(pose))


# =====================================================================
# Handedness
# =====================================================================

class TestHandednessResolver:
    def test_right_handed_address(self, address_frame):
        landmarks = LandmarkSet.from_frame(address_frame)
        assert HandednessResolver.position_score(landmarks) == 1.0
        assert HandednessResolver.length_score(landmarks) == 1.0
        assert HandednessResolver.resolve(landmarks, []) == Handedness.RIGHT

    def test_mirrored_pose_is_left(self):
        landmarks = LandmarkSet.from_frame(build_frame(mirror_pose(ADDRESS_POSE)))
        assert HandednessResolver.resolve(landmarks, []) == Handedness.LEFT

    def test_tie_defaults_to_right(self):
        landmarks = _symmetric_frame()
        assert HandednessResolver.score(landmarks, []) == 0.0
        assert HandednessResolver.resolve(landmarks, []) == Handedness.RIGHT

    def test_history_needs_five_samples(self):
        history = [make_position(i, handedness=Handedness.LEFT) for i in range(4)]
        assert HandednessResolver.history_bias(history) == 0.0

    def test_history_bias_breaks_tie(self):
        landmarks = _symmetric_frame()
        history = [make_position(i, handedness=Handedness.LEFT) for i in range(5)]
        assert HandednessResolver.history_bias(history) == pytest.approx(-0.5)
        assert HandednessResolver.resolve(landmarks, history, SwingPhase.TOP) == Handedness.LEFT

    def test_history_uses_last_five(self):
        history = (
            [make_position(i, handedness=Handedness.LEFT) for i in range(5)]
            + [make_position(5 + i, handedness=Handedness.RIGHT) for i in range(5)]
        )
        assert HandednessResolver.history_bias(history) == pytest.approx(0.5)

    def test_phase_bias_only_in_backswing_and_downswing(self):
        history = [make_position(i, handedness=Handedness.RIGHT) for i in range(5)]
        assert HandednessResolver.phase_bias(history, SwingPhase.BACKSWING) == pytest.approx(0.5)
        assert HandednessResolver.phase_bias(history, SwingPhase.DOWNSWING) == pytest.approx(0.5)
        assert HandednessResolver.phase_bias(history, SwingPhase.TOP) == 0.0
        assert HandednessResolver.phase_bias(history, SwingPhase.ADDRESS) == 0.0

    def test_phase_bias_uses_last_three(self):
        history = (
            [make_position(i, handedness=Handedness.RIGHT) for i in range(3)]
            + [make_position(3 + i, handedness=Handedness.LEFT) for i in range(3)]
        )
        assert HandednessResolver.phase_bias(history, SwingPhase.BACKSWING) == pytest.approx(-0.5)

    def test_landmark_signals_outweigh_history(self, address_frame):
        landmarks = LandmarkSet.from_frame(address_frame)
        history = [make_position(i, handedness=Handedness.LEFT) for i in range(5)]
        assert HandednessResolver.resolve(landmarks, history, SwingPhase.BACKSWING) == Handedness.RIGHT


# =====================================================================
# Phase classifier
# =====================================================================

class TestPhaseClassifier:
    def test_empty_sequence_is_address(self):
        assert classify_phase(0, 0) == SwingPhase.ADDRESS
        assert classify_phase(7, 0) == SwingPhase.ADDRESS

    @pytest.mark.parametrize("frame_index,expected", [
        (0, SwingPhase.ADDRESS),
        (9, SwingPhase.ADDRESS),
        (10, SwingPhase.BACKSWING),
        (39, SwingPhase.BACKSWING),
        (40, SwingPhase.TOP),
        (49, SwingPhase.TOP),
        (50, SwingPhase.DOWNSWING),
        (79, SwingPhase.DOWNSWING),
        (80, SwingPhase.IMPACT),
        (89, SwingPhase.IMPACT),
        (90, SwingPhase.FOLLOW_THROUGH),
        (150, SwingPhase.FOLLOW_THROUGH),
    ])
    def test_boundaries(self, frame_index, expected):
        assert classify_phase(frame_index, 100) == expected
