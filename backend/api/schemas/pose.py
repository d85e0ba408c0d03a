"""
Pose API Schemas

Pydantic models for the pose frames clients send to the tracer.
These define the JSON structure for communication with frontend.
"""

from pydantic import BaseModel, Field
from typing import Optional, List

from core.domain.pose import BodyPart, PoseFrame, PoseLandmark


class LandmarkSchema(BaseModel):
    """
    Single body landmark from the pose estimator.

    Coordinates are normalized (nominally 0.0 to 1.0; the estimator may
    report points slightly outside the image).
    """
    x: float = Field(..., allow_inf_nan=False, description="Horizontal position (0=left, 1=right)")
    y: float = Field(..., allow_inf_nan=False, description="Vertical position (0=top, 1=bottom)")
    z: Optional[float] = Field(None, allow_inf_nan=False, description="Depth (negative=closer to camera)")
    visibility: Optional[float] = Field(None, ge=0.0, le=1.0, description="Detection confidence")
    body_part: Optional[str] = Field(None, description="Body part name (e.g., 'LEFT_SHOULDER')")

    class Config:
        json_schema_extra = {
            "example": {
                "x": 0.45,
                "y": 0.32,
                "z": -0.15,
                "visibility": 0.95,
                "body_part": "LEFT_SHOULDER"
            }
        }

    def to_domain(self) -> PoseLandmark:
        body_part = None
        if self.body_part and self.body_part in BodyPart.__members__:
            body_part = BodyPart[self.body_part]
        return PoseLandmark(
            x=self.x,
            y=self.y,
            z=self.z,
            visibility=self.visibility,
            body_part=body_part,
        )


class PoseFrameSchema(BaseModel):
    """
    Complete pose detection result for one frame.

    Should contain all 33 MediaPipe landmarks; shorter frames are
    accepted and skipped by the tracer. A null entry is a dropped point.
    """
    landmarks: List[Optional[LandmarkSchema]] = Field(..., description="33 body landmarks")
    timestamp_ms: Optional[float] = Field(None, ge=0, description="Video timestamp in milliseconds")
    frame_number: int = Field(..., ge=0, description="Sequential frame number")
    confidence: float = Field(1.0, ge=0.0, le=1.0, description="Overall detection confidence")

    class Config:
        json_schema_extra = {
            "example": {
                "landmarks": [
                    {"x": 0.5, "y": 0.2, "z": 0.0, "visibility": 0.99, "body_part": "NOSE"}
                ],
                "timestamp_ms": 1500,
                "frame_number": 45,
                "confidence": 0.92
            }
        }

    def to_domain(self) -> PoseFrame:
        return PoseFrame(
            landmarks=[lm.to_domain() if lm is not None else None for lm in self.landmarks],
            timestamp_ms=self.timestamp_ms,
            frame_number=self.frame_number,
            confidence=self.confidence,
        )
