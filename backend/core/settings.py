"""
Application Settings

Environment-driven defaults for the tracer and the API.
Variables use the CLUBTRACER_ prefix, e.g. CLUBTRACER_MIN_CONFIDENCE=0.4.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.config import TracerConfig


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CLUBTRACER_", env_file=".env")

    environment: str = "development"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]

    # Tracer defaults
    min_confidence: float = 0.3
    smoothing_factor: float = 0.2
    interpolation_frames: int = 3
    max_gap_frames: int = 5
    club_length_multiplier: float = 2.5

    def tracer_config(self) -> TracerConfig:
        """Default TracerConfig built from these settings."""
        return TracerConfig(
            min_confidence=self.min_confidence,
            smoothing_factor=self.smoothing_factor,
            interpolation_frames=self.interpolation_frames,
            max_gap_frames=self.max_gap_frames,
            club_length_multiplier=self.club_length_multiplier,
        )


settings = Settings()
