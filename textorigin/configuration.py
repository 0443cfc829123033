"""The configuration module."""

import tomllib
from datetime import timedelta
from pathlib import Path

from pydantic import BaseModel, Field


class Configuration(BaseModel):
    """Configuration of the application."""

    project_name: str = "Text Origin"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"  # noqa: S104, it is required for Docker deployment.
    api_port: int = 7123
    api_max_requests_per_interval: int = 1
    api_rate_limiter_interval: timedelta = timedelta(seconds=1)
    cors_origins: list[str] = ["*"]

    # Artificial latency of interactive analyses.
    processing_delay: timedelta = timedelta(milliseconds=1500)
    max_upload_size: int = Field(10 * 2**20, gt=0)  # 10 MB

    # Match multi-word buzzwords as consecutive tokens. Changes calibrated scores.
    buzzword_phrase_matching: bool = False


def load_configuration(
    configuration_file: Path = Path("config.toml"),
) -> Configuration:
    """Load configuration from the configuration file, if there is one."""
    if not configuration_file.exists():
        return Configuration()
    with configuration_file.open("rb") as f:
        settings = tomllib.load(f)
    return Configuration(**settings)


config = load_configuration()
