"""
Pose Domain Models

Data structures for representing human body pose landmarks
delivered by the upstream pose estimator (MediaPipe-compatible).

MediaPipe Pose returns 33 landmarks:
https://developers.google.com/mediapipe/solutions/vision/pose_landmarker
"""
import math
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


# Number of points a frame must carry before any landmark is trusted
REQUIRED_LANDMARK_COUNT = 33


class BodyPart(IntEnum):
    """
    MediaPipe Pose landmark indices.

    These map directly to MediaPipe's 33-point pose model.
    We include the ones the club head tracer reads.
    """
    # Face
    NOSE = 0

    # Upper body
    LEFT_SHOULDER = 11
    RIGHT_SHOULDER = 12
    LEFT_ELBOW = 13
    RIGHT_ELBOW = 14
    LEFT_WRIST = 15
    RIGHT_WRIST = 16

    # Lower body
    LEFT_HIP = 23
    RIGHT_HIP = 24


class IncompleteLandmarksError(ValueError):
    """Raised when a frame carries fewer landmarks than the pose model defines."""

    def __init__(self, found: int, required: int = REQUIRED_LANDMARK_COUNT):
        self.found = found
        self.required = required
        super().__init__(
            f"Pose frame has {found} landmarks, {required} required"
        )


@dataclass(frozen=True)
class PoseLandmark:
    """
    A single body landmark with optional depth and visibility.

    Attributes:
        x: Horizontal position (0.0 = left edge, 1.0 = right edge)
        y: Vertical position (0.0 = top edge, 1.0 = bottom edge)
        z: Depth (smaller = closer to camera), None if not estimated
        visibility: Confidence score (0.0 to 1.0), None if not reported
        body_part: Which body part this landmark represents

    Note:
        Coordinates are normalized to image dimensions.
        A missing visibility counts as fully visible and a missing
        depth counts as 0.0.
    """
    x: float
    y: float
    z: Optional[float] = None
    visibility: Optional[float] = None
    body_part: Optional[BodyPart] = None

    @property
    def depth(self) -> float:
        """Depth with the missing value read as 0.0."""
        return self.z if self.z is not None else 0.0

    @property
    def confidence(self) -> float:
        """Visibility with the missing value read as 1.0."""
        return self.visibility if self.visibility is not None else 1.0

    def is_visible(self, threshold: float = 0.5) -> bool:
        """Check if landmark is visible above confidence threshold."""
        return self.confidence >= threshold

    @property
    def is_finite(self) -> bool:
        """False when any coordinate or the visibility is NaN or infinite."""
        return all(
            math.isfinite(value)
            for value in (self.x, self.y, self.depth, self.confidence)
        )

    def distance_2d(self, other: "PoseLandmark") -> float:
        """Euclidean distance to another landmark in the image plane."""
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5


@dataclass
class PoseFrame:
    """
    A complete pose detection result for a single video frame.

    Attributes:
        landmarks: 33 body landmarks; an entry is None when the detector
                   dropped that point
        timestamp_ms: Video timestamp in milliseconds (None if unknown)
        frame_number: Sequential frame number
        confidence: Overall detection confidence
    """
    landmarks: list[Optional[PoseLandmark]]
    timestamp_ms: Optional[float] = None
    frame_number: int = 0
    confidence: float = 1.0

    def get_landmark(self, body_part: BodyPart) -> Optional[PoseLandmark]:
        """Get a specific landmark by body part."""
        index = body_part.value
        if 0 <= index < len(self.landmarks):
            return self.landmarks[index]
        return None


class LandmarkSet:
    """
    Validated, named view over the landmarks of one frame.

    Built with `LandmarkSet.from_frame`, which fails fast with
    `IncompleteLandmarksError` when the frame is shorter than the
    pose model. Accessors take a side ("left" or "right").
    """

    _SIDE_PARTS = {
        "left": {
            "wrist": BodyPart.LEFT_WRIST,
            "elbow": BodyPart.LEFT_ELBOW,
            "shoulder": BodyPart.LEFT_SHOULDER,
            "hip": BodyPart.LEFT_HIP,
        },
        "right": {
            "wrist": BodyPart.RIGHT_WRIST,
            "elbow": BodyPart.RIGHT_ELBOW,
            "shoulder": BodyPart.RIGHT_SHOULDER,
            "hip": BodyPart.RIGHT_HIP,
        },
    }

    def __init__(self, frame: PoseFrame):
        self._frame = frame

    @classmethod
    def from_frame(cls, frame: PoseFrame) -> "LandmarkSet":
        """Validate the landmark count and wrap the frame."""
        if len(frame.landmarks) < REQUIRED_LANDMARK_COUNT:
            raise IncompleteLandmarksError(len(frame.landmarks))
        return cls(frame)

    @property
    def frame(self) -> PoseFrame:
        return self._frame

    def _landmark(self, body_part: BodyPart) -> Optional[PoseLandmark]:
        # Non-finite points are treated as dropped
        landmark = self._frame.get_landmark(body_part)
        if landmark is None or not landmark.is_finite:
            return None
        return landmark

    def _part(self, side: str, name: str) -> Optional[PoseLandmark]:
        try:
            body_part = self._SIDE_PARTS[side][name]
        except KeyError:
            raise ValueError(f"Unknown side: {side!r}") from None
        return self._landmark(body_part)

    def wrist(self, side: str) -> Optional[PoseLandmark]:
        return self._part(side, "wrist")

    def elbow(self, side: str) -> Optional[PoseLandmark]:
        return self._part(side, "elbow")

    def shoulder(self, side: str) -> Optional[PoseLandmark]:
        return self._part(side, "shoulder")

    def hip(self, side: str) -> Optional[PoseLandmark]:
        return self._part(side, "hip")

    @property
    def nose(self) -> Optional[PoseLandmark]:
        return self._landmark(BodyPart.NOSE)

    def has_arms(self) -> bool:
        """Both wrists and both elbows are present."""
        return all(
            lm is not None
            for lm in (
                self.wrist("left"), self.wrist("right"),
                self.elbow("left"), self.elbow("right"),
            )
        )

    def hip_midpoint(self) -> Optional[tuple[float, float, float]]:
        """Midpoint of both hips as (x, y, z), or None if either is missing."""
        left_hip = self.hip("left")
        right_hip = self.hip("right")
        if left_hip is None or right_hip is None:
            return None
        return (
            (left_hip.x + right_hip.x) / 2,
            (left_hip.y + right_hip.y) / 2,
            (left_hip.depth + right_hip.depth) / 2,
        )
