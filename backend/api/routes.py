"""
REST API Routes

FastAPI routes for club head tracing.
Handles HTTP requests that turn pose frame sequences into trajectories.
"""

import logging
from fastapi import APIRouter, HTTPException

from .schemas import (
    BuildTrajectoryRequest,
    HealthResponse,
    TracerConfigSchema,
    TrajectoryResponse,
)
from core.services import ClubHeadTracer
from core.settings import settings

# Configure logging
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

# Create router
router = APIRouter()

# =============================================================================
# Health Check
# =============================================================================

@router.get(
    "/health",
    response_model=HealthResponse,
    tags=["Health"],
    summary="Health check endpoint"
)
async def health_check() -> HealthResponse:
    """
    Check if the API is running.

    Returns:
        Health status and version information
    """
    return HealthResponse(
        status="healthy",
        version=API_VERSION,
        environment=settings.environment,
    )


# =============================================================================
# Club Head Tracing
# =============================================================================

@router.get(
    "/trajectory/config",
    response_model=TracerConfigSchema,
    tags=["Club Head Tracing"],
    summary="Default tracer configuration"
)
async def get_default_config() -> TracerConfigSchema:
    """Return the tracer options used when a request sets none."""
    return TracerConfigSchema.from_domain(settings.tracer_config())


@router.post(
    "/trajectory",
    response_model=TrajectoryResponse,
    tags=["Club Head Tracing"],
    summary="Trace the club head through a swing"
)
async def build_trajectory(request: BuildTrajectoryRequest) -> TrajectoryResponse:
    """
    Build a club head trajectory from pose frames.

    The frames are traced in the order given. Frames that cannot be
    used (missing landmarks, low confidence) leave gaps; short gaps are
    interpolated.

    Args:
        request: Pose frames of one video and optional tracer options

    Returns:
        Trajectory positions with smoothness and completeness scores
    """
    config = settings.tracer_config()
    if request.config is not None:
        try:
            config = request.config.apply_to(config)
        except ValueError as e:
            logger.warning(f"Rejected tracer config: {e}")
            raise HTTPException(status_code=422, detail=str(e))

    try:
        tracer = ClubHeadTracer(config)
        trajectory = tracer.build_trajectory(
            frame.to_domain() for frame in request.frames
        )
    except Exception as e:
        logger.error(f"Trajectory build failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))

    return TrajectoryResponse.from_domain(trajectory)
