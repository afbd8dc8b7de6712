"""Constants used throughout the lambda-musl application."""


# Docker-related constants
BUILD_CONTEXT = "."
BUILDER_TARGET = "builder"
RUNNER_TARGET = "runner"
PORT_MAPPING = "9000:8080"

# GitHub Actions cache backend, only enabled when CI=true
CI_ENV_VAR = "CI"
CI_CACHE_FLAGS = [
    "--cache-to",
    "type=gha,mode=max",
    "--cache-from",
    "type=gha",
]

# Artifact produced by the builder stage
MUSL_FILE = "bootstrap.zip"
ARTIFACT_DIR = "/opt/app"
# The copy source always names the "lambda" container
ARTIFACT_CONTAINER = "lambda"

# Container configuration
DEFAULT_CONTAINER_NAME = "lambda"
DEFAULT_PROJECT_PATH = "."
DEFAULT_OUTPUT_PATH = "."
DOCKERFILE_PREFIX = "Dockerfile.lambda-musl."

# Exit codes
EXIT_INTERRUPTED = 130  # 128 + SIGINT

# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
