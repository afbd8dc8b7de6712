"""Build configuration models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ..core.constants import (
    DEFAULT_CONTAINER_NAME,
    DEFAULT_OUTPUT_PATH,
    DEFAULT_PROJECT_PATH,
)
from ..services.exceptions import ConfigError


class Command(str, Enum):
    """Subcommand selected on the command line."""
    BUILD = "build"
    RUN = "run"


class BuildConfig(BaseModel):
    """Parsed configuration for a single invocation."""
    model_config = ConfigDict(frozen=True)

    command: Command
    binary_name: str = Field(min_length=1)
    project_path: str = DEFAULT_PROJECT_PATH
    output_path: str = DEFAULT_OUTPUT_PATH
    container_name: str = Field(default=DEFAULT_CONTAINER_NAME, min_length=1)
    env_file: Optional[str] = None
    volume: Optional[str] = None

    @classmethod
    def from_options(cls, command: Command, **options) -> "BuildConfig":
        """Build a config from CLI options, dropping unset values.

        Raises:
            ConfigError: If a required option is missing or invalid
        """
        if not options.get("binary_name"):
            raise ConfigError("Missing required option '-b' / '--bin'.")
        values = {key: value for key, value in options.items() if value is not None}
        try:
            return cls(command=command, **values)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            )
            raise ConfigError(f"Invalid configuration: {problems}") from e
