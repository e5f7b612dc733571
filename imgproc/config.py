"""Library configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Library settings, overridable through ``IMGPROC_*`` environment variables."""

    # Grayscale
    MORE_GREEN: bool = False  # Default weighting when the caller passes more_green=None
    LOG_RESULTS: bool = True  # Emit a debug record for each converted buffer

    model_config = {"env_prefix": "IMGPROC_"}


settings = Settings()
