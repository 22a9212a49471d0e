"""Application configuration."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from BEZIER_GAP_* environment variables and .env.

    Priority: environment variables > .env > defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="BEZIER_GAP_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Frame the curves are edited and sampled in
    canvas_width: float = 600.0
    canvas_height: float = 500.0
    padding: float = 40.0  # screen margin around the frame (editor only)
    point_radius: float = 5.0  # hit-test tolerance

    # Resampling
    sample_count: int = 8
    dense_steps: int = 1000  # evaluations per arc

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    dev_mode: bool = True

    # Logging
    log_json: bool = False
    log_level: str = "INFO"
    log_file: str | None = None
    error_log_file: str | None = None  # ERROR and above only


settings = Settings()
