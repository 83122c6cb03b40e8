"""
Context layer - domain-specific implementations.
"""

from codecbench.context.generation import generate
from codecbench.context.encoding import AvroCodec, JsonCodec, MsgpackCodec, PickleCodec, build_codec, load_schema
from codecbench.context.compression import GzipCompressor, ZstdCompressor, build_compressor

__all__ = [
    'generate',
    'AvroCodec',
    'JsonCodec',
    'MsgpackCodec',
    'PickleCodec',
    'build_codec',
    'load_schema',
    'GzipCompressor',
    'ZstdCompressor',
    'build_compressor',
]
