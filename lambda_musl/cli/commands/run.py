"""Run command for lambda-musl."""

import click

from lambda_musl.cli.helpers import common_options, run_builder
from ...models.config import Command


@click.command()
@common_options
def run(**options):
    """Build the runner image and serve the function on port 9000"""
    run_builder(Command.RUN, **options)
