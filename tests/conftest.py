"""Shared pose builders and fixtures."""

import math

import pytest

from core.domain.pose import BodyPart, PoseFrame, PoseLandmark
from core.domain.trajectory import ClubHeadPosition, Handedness, SwingPhase


# Approximate address pose of a right-handed golfer, face-on camera.
# The right wrist sits further from the hips and the right forearm is longer.
ADDRESS_POSE = {
    BodyPart.NOSE: (0.50, 0.20),
    BodyPart.LEFT_SHOULDER: (0.45, 0.35),
    BodyPart.RIGHT_SHOULDER: (0.55, 0.35),
    BodyPart.LEFT_ELBOW: (0.43, 0.45),
    BodyPart.RIGHT_ELBOW: (0.58, 0.44),
    BodyPart.LEFT_WRIST: (0.47, 0.55),
    BodyPart.RIGHT_WRIST: (0.56, 0.56),
    BodyPart.LEFT_HIP: (0.46, 0.60),
    BodyPart.RIGHT_HIP: (0.54, 0.60),
}

_MIRRORED_PART = {
    BodyPart.NOSE: BodyPart.NOSE,
    BodyPart.LEFT_SHOULDER: BodyPart.RIGHT_SHOULDER,
    BodyPart.RIGHT_SHOULDER: BodyPart.LEFT_SHOULDER,
    BodyPart.LEFT_ELBOW: BodyPart.RIGHT_ELBOW,
    BodyPart.RIGHT_ELBOW: BodyPart.LEFT_ELBOW,
    BodyPart.LEFT_WRIST: BodyPart.RIGHT_WRIST,
    BodyPart.RIGHT_WRIST: BodyPart.LEFT_WRIST,
    BodyPart.LEFT_HIP: BodyPart.RIGHT_HIP,
    BodyPart.RIGHT_HIP: BodyPart.LEFT_HIP,
}


def build_frame(
    pose=None,
    frame_number=0,
    timestamp_ms=None,
    visibility=1.0,
    missing=(),
    count=33,
):
    """Create a PoseFrame with `count` landmarks from a {BodyPart: (x, y)} pose."""
    pose = pose or ADDRESS_POSE
    landmarks = [PoseLandmark(x=0.5, y=0.5, z=0.0, visibility=visibility) for _ in range(count)]
    for part, (x, y) in pose.items():
        if part.value < count:
            landmarks[part.value] = PoseLandmark(
                x=x, y=y, z=0.0, visibility=visibility, body_part=part
            )
    for part in missing:
        if part.value < count:
            landmarks[part.value] = None
    return PoseFrame(
        landmarks=landmarks,
        timestamp_ms=timestamp_ms,
        frame_number=frame_number,
        confidence=visibility,
    )


def mirror_pose(pose):
    """Left-handed version of a pose: swap sides and flip x."""
    return {_MIRRORED_PART[part]: (1.0 - x, y) for part, (x, y) in pose.items()}


def swing_pose(t):
    """Address pose with both arms rotated about the shoulders; t in [0, 1]."""
    angle = math.pi * 1.5 * t
    pose = dict(ADDRESS_POSE)
    for shoulder, arm_parts in (
        (BodyPart.LEFT_SHOULDER, (BodyPart.LEFT_ELBOW, BodyPart.LEFT_WRIST)),
        (BodyPart.RIGHT_SHOULDER, (BodyPart.RIGHT_ELBOW, BodyPart.RIGHT_WRIST)),
    ):
        sx, sy = pose[shoulder]
        for part in arm_parts:
            px, py = pose[part]
            radius = math.hypot(px - sx, py - sy)
            base = math.atan2(py - sy, px - sx)
            pose[part] = (
                sx + math.cos(base + angle) * radius,
                sy + math.sin(base + angle) * radius,
            )
    return pose


def make_position(frame, x=0.5, y=0.5, z=0.0, confidence=0.8,
                  handedness=Handedness.RIGHT, club_length=0.3,
                  swing_phase=SwingPhase.ADDRESS, timestamp_ms=None):
    return ClubHeadPosition(
        x=x,
        y=y,
        z=z,
        confidence=confidence,
        frame=frame,
        timestamp_ms=frame * 33.33 if timestamp_ms is None else timestamp_ms,
        handedness=handedness,
        club_length=club_length,
        swing_phase=swing_phase,
    )


def frame_to_json(frame):
    """Serialize a PoseFrame the way a client would send it."""
    return {
        "landmarks": [
            None if lm is None else {
                "x": lm.x, "y": lm.y, "z": lm.z, "visibility": lm.visibility,
                "body_part": lm.body_part.name if lm.body_part else None,
            }
            for lm in frame.landmarks
        ],
        "timestamp_ms": frame.timestamp_ms,
        "frame_number": frame.frame_number,
        "confidence": frame.confidence,
    }


@pytest.fixture
def address_frame():
    return build_frame()


@pytest.fixture
def swing_frames():
    """Forty frames of a synthetic swing at 30 fps."""
    n_frames = 40
    return [
        build_frame(swing_pose(i / (n_frames - 1)), frame_number=i, timestamp_ms=i * 33.33)
        for i in range(n_frames)
    ]
