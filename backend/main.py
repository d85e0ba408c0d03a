"""
Club Tracer Backend API

Reconstructs the golf club head path from per-frame pose landmarks.
Frames are posted whole (POST /api/trajectory) or streamed one by one
over /ws/trajectory.

Run with:
    uvicorn main:app --reload

Every option below comes from core.settings (CLUBTRACER_* variables).
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import router as api_router, API_VERSION
from api.websocket import manager, websocket_endpoint
from core.settings import Settings, settings

logger = logging.getLogger(__name__)

WEBSOCKET_PATH = "/ws/trajectory"

DESCRIPTION = """
Infers a smooth, continuous club head trajectory from body landmarks.

Each frame is estimated from arm, shoulder and body-center geometry,
fused by confidence and swing phase, smoothed against the previous
position, and short gaps are interpolated. Trajectories are scored for
smoothness and completeness.
"""


def configure_logging(level: str) -> None:
    """Root logging setup shared by the API and the tracer."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f" Club Tracer API {API_VERSION} ({settings.environment}) ready")
    logger.info(f" Tracer defaults: {settings.tracer_config()}")

    yield

    open_sessions = len(manager.active_connections)
    if open_sessions:
        logger.warning(f" Shutting down with {open_sessions} open tracing sessions")
    logger.info(" Club Tracer API stopped")


def create_app(app_settings: Settings = settings) -> FastAPI:
    """Build the FastAPI app: REST router under /api plus the tracing socket."""
    app = FastAPI(
        title="Club Tracer API",
        description=DESCRIPTION,
        version=API_VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix="/api")
    app.add_api_websocket_route(WEBSOCKET_PATH, websocket_endpoint)

    @app.get("/", tags=["Root"])
    async def root():
        """Service index."""
        return {
            "name": app.title,
            "version": API_VERSION,
            "environment": app_settings.environment,
            "docs": app.docs_url,
            "health": "/api/health",
            "websocket": WEBSOCKET_PATH,
        }

    return app


configure_logging(settings.log_level)
app = create_app()


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "development",
        log_level=settings.log_level.lower(),
    )
