"""Tests for configuration models."""

import pytest
from pydantic import ValidationError

from lambda_musl.models.config import BuildConfig, Command
from lambda_musl.services.exceptions import ConfigError


class TestBuildConfig:
    """Test cases for BuildConfig."""

    def test_defaults(self):
        config = BuildConfig(command=Command.BUILD, binary_name="handler")

        assert config.project_path == "."
        assert config.output_path == "."
        assert config.container_name == "lambda"
        assert config.env_file is None
        assert config.volume is None

    def test_frozen(self):
        """Test the configuration cannot change after parsing."""
        config = BuildConfig(command=Command.RUN, binary_name="handler")

        with pytest.raises(ValidationError):
            config.binary_name = "other"

    def test_empty_binary_name(self):
        with pytest.raises(ValidationError):
            BuildConfig(command=Command.BUILD, binary_name="")

    def test_command_from_string(self):
        assert BuildConfig(command="run", binary_name="handler").command == Command.RUN


class TestFromOptions:
    """Test cases for building a config from CLI options."""

    def test_drops_unset_options(self):
        config = BuildConfig.from_options(
            Command.BUILD,
            binary_name="handler",
            project_path="src",
            output_path=None,
            env_file=None,
            volume="/tmp:/data",
        )

        assert config.project_path == "src"
        assert config.output_path == "."
        assert config.env_file is None
        assert config.volume == "/tmp:/data"

    @pytest.mark.parametrize("binary_name", [None, ""])
    def test_missing_binary_name(self, binary_name):
        with pytest.raises(ConfigError, match="--bin"):
            BuildConfig.from_options(Command.BUILD, binary_name=binary_name)

    def test_invalid_option(self):
        """Test pydantic errors are reported as ConfigError."""
        with pytest.raises(ConfigError, match="container_name"):
            BuildConfig.from_options(Command.RUN, binary_name="handler", container_name="")
