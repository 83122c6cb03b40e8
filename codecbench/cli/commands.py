"""
CLI commands for codecbench.
"""

import click
import shutil
import sys
from pathlib import Path

from codecbench.context.compression import COMPRESSORS
from codecbench.context.encoding import BUNDLED_SCHEMA_PATH, CODECS
from codecbench.exceptions import BenchError
from codecbench.models import HarnessConfig
from codecbench.services import BenchmarkHarness, format_line, render_table, write_results


@click.command()
@click.option('--schema', '-s', 'schema_path', default='schema', show_default=True,
              type=click.Path(dir_okay=False), help='Avro schema file')
@click.option('--count', '-n', default=1000, show_default=True, type=click.IntRange(min=0),
              help='Number of records to generate')
@click.option('--seed', type=int, default=None, help='Seed for reproducible measurements')
@click.option('--codec', '-c', 'codecs', multiple=True, type=click.Choice(list(CODECS)),
              help='Codec to benchmark (repeatable, default: all)')
@click.option('--compressor', '-z', 'compressors', multiple=True, type=click.Choice(list(COMPRESSORS)),
              help='Compressor to apply (repeatable, default: gzip)')
@click.option('--no-plain', is_flag=True, help='Skip the uncompressed variant of each codec')
@click.option('--table', is_flag=True, help='Print a summary table after the run')
@click.option('--output', '-o', type=click.Path(dir_okay=False), default=None,
              help='Write results as JSON to this file')
@click.option('--verbose', '-v', is_flag=True, help='Show progress and timings on stderr')
def run(schema_path, count, seed, codecs, compressors, no_plain, table, output, verbose):
    """
    Encode a synthetic dataset with every codec and report sizes.

    Example:
        codecbench run --codec avro --codec json --compressor zstd --table
    """
    config = HarnessConfig(
        record_count=count,
        seed=seed,
        schema_path=Path(schema_path),
        codecs=tuple(codecs) or tuple(CODECS),
        compressors=tuple(compressors) or ('gzip',),
        include_plain=not no_plain,
    )
    harness = BenchmarkHarness(config, verbose=verbose)

    try:
        results = harness.run(on_result=lambda r: click.echo(format_line(r)))
    except BenchError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if table:
        render_table(results)

    if output:
        try:
            saved = write_results(results, config, Path(output))
        except OSError as e:
            click.echo(f"Error: cannot write results to {output}: {e}", err=True)
            sys.exit(1)
        click.echo(f"\n✓ Results saved to {saved}")


@click.command(name='schema')
@click.argument('path', default='schema', type=click.Path(dir_okay=False))
@click.option('--force', '-f', is_flag=True, help='Overwrite an existing file')
def write_schema(path, force):
    """
    Write the bundled Avro schema to PATH (default: ./schema).

    Example:
        codecbench schema && codecbench run
    """
    target = Path(path)
    if target.exists() and not force:
        click.echo(f"Error: {target} already exists (use --force to overwrite)", err=True)
        sys.exit(1)

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(BUNDLED_SCHEMA_PATH, target)
    except OSError as e:
        click.echo(f"Error: cannot write schema to {target}: {e}", err=True)
        sys.exit(1)
    click.echo(f"✓ Schema written to {target}")
