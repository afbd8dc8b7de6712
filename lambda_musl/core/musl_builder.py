"""Orchestration of docker steps for musl builds."""

import asyncio
import logging
import os
import signal
import uuid
from enum import Enum
from typing import List, Mapping, Optional

from ..models.config import BuildConfig, Command
from ..services.docker_service import DockerService
from ..services.exceptions import SignalError
from .constants import (
    ARTIFACT_CONTAINER,
    ARTIFACT_DIR,
    BUILD_CONTEXT,
    BUILDER_TARGET,
    CI_CACHE_FLAGS,
    CI_ENV_VAR,
    MUSL_FILE,
    PORT_MAPPING,
    RUNNER_TARGET,
)
from .recipe import RenderedRecipe, render_recipe

logger = logging.getLogger(__name__)


class BuilderState(str, Enum):
    """Progress of a builder through its docker steps."""
    INIT = "init"
    BUILT = "built"
    CREATED = "created"
    COPIED = "copied"
    STARTED = "started"
    ERROR = "error"


class MuslBuilder:
    """Drives the docker build, create, copy and run steps for one config.

    The Dockerfile is rendered when the builder is constructed and removed
    when :meth:`execute` finishes, whatever the outcome.
    """

    def __init__(
        self,
        config: BuildConfig,
        runner: Optional[DockerService] = None,
        environ: Optional[Mapping[str, str]] = None,
        recipe: Optional[RenderedRecipe] = None,
    ):
        """Initialize builder and render the Dockerfile.

        Args:
            config: Parsed configuration
            runner: Service used to invoke docker
            environ: Environment consulted for CI detection (defaults to os.environ)
            recipe: Already rendered Dockerfile, rendered from config if omitted
        """
        self.config = config
        self.runner = runner or DockerService()
        self.environ = os.environ if environ is None else environ
        self.recipe = recipe or render_recipe(config)
        self.state = BuilderState.INIT
        self.last_tag: Optional[str] = None
        self.interrupted = False

    @property
    def is_ci(self) -> bool:
        """Whether the GitHub Actions cache backend should be used."""
        return self.environ.get(CI_ENV_VAR) == "true"

    async def execute(self) -> None:
        """Run the docker steps for the configured command.

        Raises:
            SubprocessSpawnError: If docker cannot be started
            SubprocessExitError: If any docker step fails
            SignalError: If the interrupt handler cannot be installed
        """
        try:
            tag = await self._create_container()
            if self.config.command == Command.BUILD:
                await self._extract_musl_binary()
            else:
                await self._start_container()
            logger.debug(f"Finished {self.config.command.value} with image {tag}")
        except BaseException:
            self.state = BuilderState.ERROR
            raise
        finally:
            self.recipe.release()

    def build_args(self, tag: str) -> List[str]:
        """Arguments for the image build step."""
        target = BUILDER_TARGET if self.config.command == Command.BUILD else RUNNER_TARGET
        args = [
            "build",
            BUILD_CONTEXT,
            "-f",
            str(self.recipe.path),
            "--target",
            target,
            "-t",
            tag,
        ]
        if self.is_ci:
            args.extend(CI_CACHE_FLAGS)
        return args

    def create_args(self, tag: str) -> List[str]:
        """Arguments for the container create step, image tag last."""
        args = ["create", "--name", self.config.container_name, "-p", PORT_MAPPING]
        if self.config.env_file:
            args.extend(["--env-file", self.config.env_file])
        if self.config.volume:
            args.extend(["--volume", self.config.volume])
        args.append(tag)
        return args

    def copy_args(self) -> List[str]:
        """Arguments for copying the artifact archive out of the container."""
        return [
            "cp",
            f"{ARTIFACT_CONTAINER}:{ARTIFACT_DIR}/{MUSL_FILE}",
            self.config.output_path,
        ]

    def remove_args(self) -> List[str]:
        return ["rm", self.config.container_name]

    def start_args(self) -> List[str]:
        return ["start", self.config.container_name, "-a"]

    async def _create_container(self) -> str:
        """Build the image under a fresh tag and create the container from it."""
        tag = str(uuid.uuid4())
        self.last_tag = tag

        if self.is_ci:
            logger.info("CI detected, using GitHub Actions build cache")
        await self.runner.run("build", self.build_args(tag))
        self.state = BuilderState.BUILT

        await self.runner.run("create", self.create_args(tag))
        self.state = BuilderState.CREATED
        return tag

    async def _extract_musl_binary(self) -> None:
        """Copy out the archive and remove the container."""
        if self.config.container_name != ARTIFACT_CONTAINER:
            logger.warning(
                f"Copying {MUSL_FILE} from container '{ARTIFACT_CONTAINER}', "
                f"not '{self.config.container_name}'"
            )
        await self.runner.run("cp", self.copy_args())
        self.state = BuilderState.COPIED

        await self.runner.run("rm", self.remove_args())

    async def _start_container(self) -> None:
        """Attach to the container until it exits or SIGINT arrives."""
        loop = asyncio.get_running_loop()
        interrupt = asyncio.Event()
        try:
            loop.add_signal_handler(signal.SIGINT, interrupt.set)
        except (NotImplementedError, RuntimeError, ValueError) as e:
            raise SignalError(f"Failed to install interrupt handler: {e}") from e

        try:
            listener = asyncio.create_task(
                self._cleanup_on_interrupt(interrupt, self.config.container_name)
            )
            self.state = BuilderState.STARTED
            start = asyncio.create_task(self.runner.run("start", self.start_args()))

            await asyncio.wait({listener, start}, return_when=asyncio.FIRST_COMPLETED)

            if interrupt.is_set():
                self.interrupted = True
                start.cancel()
                await asyncio.gather(start, return_exceptions=True)
                await listener
                return

            listener.cancel()
            await asyncio.gather(listener, return_exceptions=True)
            start.result()
        finally:
            loop.remove_signal_handler(signal.SIGINT)

    async def _cleanup_on_interrupt(self, interrupt: asyncio.Event, container_name: str) -> None:
        """Wait for SIGINT, then drop the Dockerfile and remove the container."""
        await interrupt.wait()
        self.recipe.release()
        await self.runner.run("rm", ["rm", container_name])
        logger.warning(f"Interrupted, removed container {container_name}")
