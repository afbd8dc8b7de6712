"""Service layer for running docker and shared exceptions."""

from .docker_service import DockerService
from .exceptions import (
    LambdaMuslError,
    ConfigError,
    TemplateError,
    RecipeIOError,
    DockerServiceError,
    SubprocessSpawnError,
    SubprocessExitError,
    SignalError,
)

__all__ = [
    "DockerService",
    "LambdaMuslError",
    "ConfigError",
    "TemplateError",
    "RecipeIOError",
    "DockerServiceError",
    "SubprocessSpawnError",
    "SubprocessExitError",
    "SignalError",
]
