"""
Entry point for python -m codecbench
"""

import click
from codecbench import __version__
from codecbench.cli import run, write_schema

@click.group(invoke_without_command=True)
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx):
    """codecbench - serialization size benchmark (Avro, JSON, pickle, msgpack)"""
    if ctx.invoked_subcommand is None:
        ctx.invoke(run)

cli.add_command(run)
cli.add_command(write_schema)

if __name__ == '__main__':
    cli()
