"""Build command for lambda-musl."""

import click

from lambda_musl.cli.helpers import common_options, run_builder
from ...core.constants import DEFAULT_OUTPUT_PATH
from ...models.config import Command


@click.command()
@common_options
@click.option('--output-path', default=DEFAULT_OUTPUT_PATH, show_default=True,
              envvar='LAMBDA_MUSL_OUTPUT_PATH',
              help='Directory to copy bootstrap.zip into')
def build(**options):
    """Build the musl binary and copy bootstrap.zip to the host"""
    run_builder(Command.BUILD, **options)
