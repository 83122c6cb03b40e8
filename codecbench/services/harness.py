"""
Benchmark harness: runs every codec/compression combination over one dataset.

Sequence:
    load schema -> generate dataset (once)
    for each codec, for plain and each compressor:
        encode -> [compress] -> record size -> [decompress] -> decode

The first failure propagates to the caller; nothing is retried and no
partial results are returned.
"""

import random
import sys
import time
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from codecbench.context.compression import build_compressor
from codecbench.context.encoding import build_codec, load_schema
from codecbench.context.generation import generate
from codecbench.models import BenchResult, Dataset, HarnessConfig
from codecbench.protocols import CompressorProtocol, EncoderProtocol


@dataclass
class Preparation:
    """Parsed schema plus the dataset under test."""
    schema: Dict[str, Any]
    dataset: Dataset


class BenchmarkHarness:
    """Measure encoded size and round-trip each configured combination."""

    def __init__(self, config: Optional[HarnessConfig] = None,
                 rng: Optional[random.Random] = None,
                 clock: Optional[Callable[[], datetime]] = None,
                 verbose: bool = False):
        self.config = config or HarnessConfig()
        if rng is None:
            rng = random.Random(self.config.seed)
        self.rng = rng
        self.clock = clock
        self.verbose = verbose

    def _log(self, message: str):
        if self.verbose:
            print(message, file=sys.stderr)

    def prepare(self) -> Preparation:
        """
        Load the schema, then generate the dataset.

        The schema is read first so a missing or broken schema file fails
        before any data is generated.
        """
        schema = load_schema(self.config.schema_path)
        self._log(f"[schema] loaded {self.config.schema_path}")

        start = time.perf_counter()
        dataset = generate(self.config.record_count, rng=self.rng, clock=self.clock)
        self._log(f"[generate] {len(dataset)} records in {time.perf_counter() - start:.3f}s")
        return Preparation(schema=schema, dataset=dataset)

    def run_combination(self, codec: EncoderProtocol,
                        compressor: Optional[CompressorProtocol],
                        dataset: Dataset) -> BenchResult:
        """Encode, optionally compress, then reverse both steps."""
        start = time.perf_counter()
        payload = codec.encode(dataset)
        if compressor is not None:
            payload = compressor.compress(payload)
        encode_time = time.perf_counter() - start

        size = len(payload)

        start = time.perf_counter()
        if compressor is not None:
            payload = compressor.decompress(payload)
        codec.decode(payload)
        decode_time = time.perf_counter() - start

        result = BenchResult(
            codec=codec.name,
            compression=compressor.name if compressor is not None else 'none',
            size_bytes=size,
            record_count=len(dataset),
            encode_time=encode_time,
            decode_time=decode_time,
        )
        self._log(f"[{result.label}] encode {encode_time * 1000:.2f}ms, "
                  f"decode {decode_time * 1000:.2f}ms")
        return result

    def run(self, on_result: Optional[Callable[[BenchResult], None]] = None) -> List[BenchResult]:
        """
        Run all configured combinations.

        Args:
            on_result: Called with each result as soon as it is measured

        Returns:
            Results in execution order
        """
        prep = self.prepare()

        modes: List[Optional[CompressorProtocol]] = []
        if self.config.include_plain:
            modes.append(None)
        modes.extend(build_compressor(name) for name in self.config.compressors)

        results = []
        for codec_name in self.config.codecs:
            codec = build_codec(codec_name, prep.schema)
            for compressor in modes:
                result = self.run_combination(codec, compressor, prep.dataset)
                results.append(result)
                if on_result is not None:
                    on_result(result)
        return results
