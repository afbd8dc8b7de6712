"""CLI helper functions for lambda-musl.

The helpers provide:
- The options shared by the build and run commands
- Logging setup for the command group
- The error boundary that turns builder failures into exit codes
"""

import asyncio
import logging
import sys
from typing import Callable

import click
from rich.console import Console
from rich.markup import escape

from lambda_musl.core.constants import (
    DEFAULT_CONTAINER_NAME,
    DEFAULT_PROJECT_PATH,
    EXIT_INTERRUPTED,
    LOG_FORMAT,
)
from lambda_musl.core.musl_builder import MuslBuilder
from lambda_musl.models.config import BuildConfig, Command
from lambda_musl.services.exceptions import LambdaMuslError

console = Console(stderr=True, highlight=False, soft_wrap=True)


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr, INFO and above when verbose."""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )


def common_options(func: Callable) -> Callable:
    """Attach the options accepted by every subcommand."""
    options = [
        click.option('-p', '--path', 'project_path', default=DEFAULT_PROJECT_PATH,
                     show_default=True, envvar='LAMBDA_MUSL_PATH',
                     help='Directory to use as root of project'),
        click.option('-b', '--bin', 'binary_name', envvar='LAMBDA_MUSL_BIN',
                     help='Name of the binary to build (required)'),
        click.option('-c', '--container-name', default=DEFAULT_CONTAINER_NAME,
                     show_default=True, envvar='LAMBDA_MUSL_CONTAINER_NAME',
                     help='Name of the created container'),
        click.option('-e', '--env-file', help='Env file passed to docker create'),
        click.option('-v', '--volume', help='Volume mapping passed to docker create'),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def run_builder(command: Command, **options) -> None:
    """Build the config, execute the builder and exit on failure.

    Every lambda-musl error is reported as a single line on stderr and the
    process exits with the error's exit code.
    """
    try:
        config = BuildConfig.from_options(command, **options)
        builder = MuslBuilder(config)
        verb = "Building" if command == Command.BUILD else "Running"
        console.print(
            f"[bold]{verb}[/bold] {escape(config.binary_name)} "
            f"from {escape(config.project_path)}"
        )
        asyncio.run(builder.execute())
    except LambdaMuslError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(e.exit_code)
    except KeyboardInterrupt:
        click.echo("Aborted.", err=True)
        sys.exit(EXIT_INTERRUPTED)

    if builder.interrupted:
        console.print(f"[yellow]Interrupted.[/yellow] Removed container {escape(config.container_name)}")
        sys.exit(EXIT_INTERRUPTED)
