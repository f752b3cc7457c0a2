"""Environment-based configuration via pydantic-settings."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Generation settings, configurable via SETTLERS_* env vars."""

    model_config = {"env_prefix": "SETTLERS_"}

    log_level: str = "INFO"
    default_seed: int | None = None
    validate_output: bool = True
