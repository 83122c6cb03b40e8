"""
Compression context: general-purpose compressors at maximum effort.
"""

import gzip
import zlib
from typing import Callable, Dict

import zstandard as zstd

from codecbench.exceptions import CorruptDataError
from codecbench.protocols import CompressorProtocol

__all__ = [
    'GzipCompressor',
    'ZstdCompressor',
    'COMPRESSORS',
    'build_compressor',
]


class GzipCompressor(CompressorProtocol):
    """gzip -9. mtime is pinned to 0 so output depends only on the input."""

    def __init__(self, level: int = 9):
        self._level = level

    @property
    def name(self) -> str:
        return "gzip"

    @property
    def level(self) -> int:
        return self._level

    def compress(self, data: bytes) -> bytes:
        return gzip.compress(data, compresslevel=self._level, mtime=0)

    def decompress(self, data: bytes) -> bytes:
        if not data:
            raise CorruptDataError("Invalid gzip stream", "empty input")
        try:
            return gzip.decompress(data)
        except (OSError, EOFError, zlib.error) as e:
            raise CorruptDataError("Invalid gzip stream", str(e)) from e


class ZstdCompressor(CompressorProtocol):
    """Zstandard at its maximum level."""

    def __init__(self, level: int = zstd.MAX_COMPRESSION_LEVEL):
        self._level = level

    @property
    def name(self) -> str:
        return "zstd"

    @property
    def level(self) -> int:
        return self._level

    def compress(self, data: bytes) -> bytes:
        cctx = zstd.ZstdCompressor(level=self._level, write_content_size=True)
        return cctx.compress(data)

    def decompress(self, data: bytes) -> bytes:
        dctx = zstd.ZstdDecompressor()
        try:
            return dctx.decompress(data)
        except zstd.ZstdError as e:
            raise CorruptDataError("Invalid zstd frame", str(e)) from e


COMPRESSORS: Dict[str, Callable[[], CompressorProtocol]] = {
    'gzip': GzipCompressor,
    'zstd': ZstdCompressor,
}


def build_compressor(name: str) -> CompressorProtocol:
    """Instantiate a registered compressor by name."""
    if name not in COMPRESSORS:
        raise KeyError(f"Unknown compressor '{name}' (available: {', '.join(COMPRESSORS)})")
    return COMPRESSORS[name]()
