"""Main CLI entry point for lambda-musl."""

import click

from lambda_musl import __version__
from .commands.build import build
from .commands.run import run
from .helpers import configure_logging


@click.group()
@click.version_option(__version__, prog_name='lambda-musl')
@click.option('--verbose', is_flag=True, help='Log each docker invocation')
def cli(verbose):
    """lambda-musl - Build static musl binaries for Lambda inside Docker"""
    configure_logging(verbose)


# Register commands
cli.add_command(build)
cli.add_command(run)


if __name__ == '__main__':
    cli()
