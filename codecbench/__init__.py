"""
codecbench - Serialization size benchmark harness

Compares a schema-based binary encoding (Avro), JSON and a native binary
format (pickle), plus msgpack, optionally followed by gzip or zstd, over a
synthetic dataset of cellular telemetry records.

Architecture:
- Models: Pure data structures (Record, Dataset, BenchResult)
- Protocols: Interface contracts (EncoderProtocol, CompressorProtocol)
- Context: Domain implementations (Generation, Encoding, Compression)
- Services: Orchestration (BenchmarkHarness, reporting)
- CLI: User interface (run, schema commands)
"""

__version__ = "1.0.0"
__license__ = "MIT"

from codecbench import models, protocols
from codecbench.exceptions import (
    BenchError, SchemaLoadError, SchemaMismatchError, EncodingError, DecodeError, CorruptDataError,
)
from codecbench.context import generate, build_codec, build_compressor, load_schema
from codecbench.services import BenchmarkHarness

__all__ = [
    'models',
    'protocols',
    'BenchError',
    'SchemaLoadError',
    'SchemaMismatchError',
    'EncodingError',
    'DecodeError',
    'CorruptDataError',
    'generate',
    'build_codec',
    'build_compressor',
    'load_schema',
    'BenchmarkHarness',
]
