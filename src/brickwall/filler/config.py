"""Brick wall filler configuration."""

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv(usecwd=True) or None


class FillerConfig(BaseSettings):
    """Configuration settings for the brick wall filler."""

    write_log: bool = False
    """Whether to write a log file describing each fill. Default: False."""

    log_dir: str = "logs"
    """Directory in which fill logs are written. Default: "logs"."""

    show_wall: bool = True
    """Whether fill logs include the initial shape and the filled wall. Default: True."""

    distinct_exit_codes: bool = True
    """Whether each kind of input error exits with its own status.

    If False, every input error exits with status 1.  Default: True.
    """

    model_config = SettingsConfigDict(
        env_prefix="BRICKWALL_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="ignore",
    )


config = FillerConfig()
