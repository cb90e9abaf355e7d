"""The configuration module."""

import tomllib
from datetime import timedelta
from pathlib import Path

from pydantic import BaseModel, Field

PACKAGE_DIRECTORY = Path(__file__).resolve().parent


class Configuration(BaseModel):
    """Configuration of the application."""

    project_name: str = "Lexidetect"

    api_host: str = "0.0.0.0"  # noqa: S104, it is required for Docker deployment.
    api_port: int = 7123
    api_max_requests_per_interval: int = 5
    api_rate_limiter_interval: timedelta = timedelta(seconds=1)
    cors_origins: list[str] = ["*"]

    fingerprints_file: Path = PACKAGE_DIRECTORY / "data" / "fingerprints.toml"

    # Soft floor enforced by callers. The engine has its own safety floor.
    min_words: int = Field(50, ge=1)
    max_words: int = Field(800, ge=1)
    sentence_threshold: float = Field(70.0, ge=0.0, le=100.0)

    log_level: str = "INFO"


def load_configuration(
    configuration_file: Path = Path("config.toml"),
) -> Configuration:
    """Load configuration from the configuration file."""
    if not configuration_file.exists():
        return Configuration()
    with configuration_file.open("rb") as f:
        settings = tomllib.load(f)
    return Configuration(**settings)


config = load_configuration()
