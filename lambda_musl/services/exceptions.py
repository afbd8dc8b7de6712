"""Custom exceptions for lambda-musl."""

from typing import Optional


class LambdaMuslError(Exception):
    """Base exception for all lambda-musl errors."""

    exit_code = 1


class ConfigError(LambdaMuslError):
    """Exception raised for missing or invalid configuration."""

    pass


class TemplateError(LambdaMuslError):
    """Exception raised when the Dockerfile template fails to render."""

    pass


class RecipeIOError(LambdaMuslError):
    """Exception raised when the rendered Dockerfile cannot be written or removed."""

    pass


class DockerServiceError(LambdaMuslError):
    """Exception raised for docker subprocess operations."""

    pass


class SubprocessSpawnError(DockerServiceError):
    """Exception raised when the docker executable cannot be started."""

    pass


class SubprocessExitError(DockerServiceError):
    """Exception raised when a docker step exits with a non-zero status."""

    def __init__(self, step: str, returncode: int, message: Optional[str] = None):
        super().__init__(
            message or f"docker {step} failed with exit code {returncode}"
        )
        self.step = step
        self.returncode = returncode

    @property
    def exit_code(self) -> int:
        # A child killed by a signal reports a negative returncode
        return self.returncode if self.returncode > 0 else 1


class SignalError(LambdaMuslError):
    """Exception raised when the interrupt handler cannot be installed."""

    pass
