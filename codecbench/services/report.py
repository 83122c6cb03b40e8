"""
Result presentation: one-line summaries, a rich table and a JSON dump.
"""

import json
import time
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.table import Table

from codecbench.models import BenchResult, HarnessConfig


def format_line(result: BenchResult) -> str:
    """Single summary line, e.g. ``   avro uncompressed length 146000 - 1000 metrics, 146 bytes per metric``."""
    return "%20s length %d - %d metrics, %d bytes per metric" % (
        result.label, result.size_bytes, result.record_count, result.bytes_per_record)


def render_table(results: List[BenchResult], console: Optional[Console] = None):
    """Print a summary table; ratios are relative to the same codec uncompressed."""
    console = console or Console()

    plain_sizes = {r.codec: r.size_bytes for r in results if r.compression == 'none'}

    table = Table(title="Encoding size comparison")
    table.add_column("Codec", style="cyan")
    table.add_column("Compression")
    table.add_column("Bytes", justify="right")
    table.add_column("Bytes/record", justify="right")
    table.add_column("Ratio", justify="right")
    table.add_column("Encode", justify="right")
    table.add_column("Decode", justify="right")

    for r in results:
        plain = plain_sizes.get(r.codec)
        ratio = f"{plain / r.size_bytes:.2f}x" if plain and r.size_bytes else "-"
        table.add_row(
            r.codec,
            r.compression,
            f"{r.size_bytes:,}",
            f"{r.bytes_per_record:,}",
            ratio,
            f"{r.encode_time * 1000:.2f}ms",
            f"{r.decode_time * 1000:.2f}ms",
        )

    console.print(table)


def write_results(results: List[BenchResult], config: HarnessConfig, output: Path) -> Path:
    """Save results as JSON, creating the parent directory if needed."""
    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    document = {
        'timestamp': time.strftime('%Y-%m-%d %H:%M:%S'),
        'record_count': config.record_count,
        'seed': config.seed,
        'schema': str(config.schema_path),
        'results': [r.to_dict() for r in results],
    }
    with open(output_path, 'w') as f:
        json.dump(document, f, indent=2)
    return output_path
