"""Tests for trajectory summary metrics."""

import pytest

from conftest import make_position
from core.domain.trajectory import Handedness, SwingPhase
from core.services.trajectory_metrics import (
    average_confidence,
    calculate_completeness,
    calculate_smoothness,
    summarize_trajectory,
)


def test_empty_summary_defaults():
    trajectory = summarize_trajectory([])
    assert trajectory.positions == []
    assert trajectory.total_frames == 0
    assert trajectory.duration_ms == 0.0
    assert trajectory.handedness == Handedness.RIGHT
    assert trajectory.average_confidence == 0.0
    assert trajectory.smoothness == 0.0
    assert trajectory.completeness == 0.0


def test_smoothness_short_trajectory():
    assert calculate_smoothness([make_position(0), make_position(1)]) == 1.0


def test_smoothness_straight_line():
    positions = [make_position(i, x=0.1 + 0.1 * i, y=0.2 + 0.05 * i) for i in range(6)]
    assert calculate_smoothness(positions) == pytest.approx(1.0)


def test_smoothness_reversal():
    positions = [
        make_position(0, x=0.2, y=0.5),
        make_position(1, x=0.4, y=0.5),
        make_position(2, x=0.2, y=0.5),
    ]
    assert calculate_smoothness(positions) == pytest.approx(0.0)


def test_smoothness_right_angle():
    positions = [
        make_position(0, x=0.2, y=0.2),
        make_position(1, x=0.4, y=0.2),
        make_position(2, x=0.4, y=0.4),
    ]
    assert calculate_smoothness(positions) == pytest.approx(0.5)


def test_smoothness_wraps_turn_angle():
    # Heading goes from just under pi to just over -pi: a small turn
    positions = [
        make_position(0, x=0.5, y=0.50),
        make_position(1, x=0.3, y=0.51),
        make_position(2, x=0.1, y=0.50),
    ]
    assert calculate_smoothness(positions) > 0.9


def test_completeness_address_only_is_low():
    positions = [make_position(i, swing_phase=SwingPhase.ADDRESS) for i in range(5)]
    completeness = calculate_completeness(positions)
    assert completeness == pytest.approx((1 / 6) / 2)
    assert completeness < 0.5


def test_completeness_full_swing():
    phases = list(SwingPhase)
    positions = [
        make_position(i, x=0.2 + 0.1 * i, y=0.8 - 0.1 * i, swing_phase=phase)
        for i, phase in enumerate(phases)
    ]
    assert calculate_completeness(positions) == pytest.approx(1.0)


def test_summary_fields():
    positions = [
        make_position(0, confidence=0.4, timestamp_ms=100.0, handedness=Handedness.LEFT),
        make_position(1, confidence=0.6, timestamp_ms=133.0),
        make_position(2, confidence=0.8, timestamp_ms=166.0),
    ]
    trajectory = summarize_trajectory(positions)
    assert trajectory.total_frames == 3
    assert trajectory.duration_ms == pytest.approx(66.0)
    assert trajectory.handedness == Handedness.LEFT
    assert trajectory.average_confidence == pytest.approx(average_confidence(positions))
    assert trajectory.average_confidence == pytest.approx(0.6)
    assert trajectory.frames == [0, 1, 2]
    assert trajectory.get_position_at_frame(1) is positions[1]
