"""Docker service running the docker CLI as a subprocess."""

import asyncio
import logging
import shlex
from typing import Sequence

from .exceptions import SubprocessExitError, SubprocessSpawnError

logger = logging.getLogger(__name__)

DOCKER_EXECUTABLE = "docker"


class DockerService:
    """Service for running docker subcommands with inherited stdio."""

    def __init__(self, executable: str = DOCKER_EXECUTABLE):
        """Initialize Docker service.

        Args:
            executable: Name or path of the docker executable
        """
        self.executable = executable

    async def run(self, step: str, args: Sequence[str]) -> None:
        """Run a docker subcommand and wait for it to exit.

        Args:
            step: Name of the step, used in logs and errors
            args: Arguments passed verbatim after the executable

        Raises:
            SubprocessSpawnError: If docker cannot be started
            SubprocessExitError: If docker exits with a non-zero status
        """
        cmd = [self.executable, *args]
        logger.info(f"Running {step}: {shlex.join(cmd)}")

        returncode = await self._wait(cmd)
        if returncode != 0:
            logger.error(f"docker {step} exited with status {returncode}")
            raise SubprocessExitError(step, returncode)

    async def _wait(self, cmd: list[str]) -> int:
        """Spawn the command and return its exit status."""
        try:
            process = await asyncio.create_subprocess_exec(*cmd)
        except FileNotFoundError as e:
            raise SubprocessSpawnError(
                f"{self.executable} executable not found. Is Docker installed and on PATH?"
            ) from e
        except OSError as e:
            raise SubprocessSpawnError(f"Failed to start {self.executable}: {e}") from e

        # Cancelling this coroutine leaves the child running to completion
        return await process.wait()
