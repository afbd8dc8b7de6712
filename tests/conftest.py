import pytest
from click.testing import CliRunner

from lambda_musl.models.config import BuildConfig, Command
from lambda_musl.services.docker_service import DockerService


class RecordingDockerService(DockerService):
    """DockerService that records argv vectors instead of spawning docker.

    ``exit_codes`` maps a docker subcommand (build, create, cp, rm, start) to
    the status it should report; ``hooks`` maps a subcommand to a coroutine
    function awaited in place of the child process.
    """

    def __init__(self, exit_codes=None, hooks=None):
        super().__init__()
        self.calls = []
        self.exit_codes = exit_codes or {}
        self.hooks = hooks or {}

    async def _wait(self, cmd):
        args = cmd[1:]
        self.calls.append(args)
        hook = self.hooks.get(args[0])
        if hook is not None:
            await hook()
        return self.exit_codes.get(args[0], 0)

    @property
    def subcommands(self):
        return [args[0] for args in self.calls]

    def args_for(self, subcommand):
        return [args for args in self.calls if args[0] == subcommand]


@pytest.fixture
def cli_runner():
    """Provides a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    """Runs the test from an empty project directory."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CI", raising=False)
    return tmp_path


@pytest.fixture
def docker_service():
    """Provides a recording docker service that succeeds on every step."""
    return RecordingDockerService()


@pytest.fixture
def make_docker_service():
    """Factory for recording docker services with scripted exit codes."""
    return RecordingDockerService


@pytest.fixture
def make_config():
    """Factory for build configurations with sensible defaults."""
    def _make(command=Command.BUILD, **overrides):
        values = {"binary_name": "handler"}
        values.update(overrides)
        return BuildConfig(command=command, **values)
    return _make
