"""
Encoding context: codec adapters for the benchmarked formats.
"""

from typing import Any, Callable, Dict, Optional

from codecbench.context.encoding.avro import AvroCodec, load_schema, parse_schema, BUNDLED_SCHEMA_PATH
from codecbench.context.encoding.json_codec import JsonCodec
from codecbench.context.encoding.msgpack_codec import MsgpackCodec
from codecbench.context.encoding.native import PickleCodec
from codecbench.protocols import EncoderProtocol

# Codec name -> factory taking the parsed Avro schema
CODECS: Dict[str, Callable[[Optional[Dict[str, Any]]], EncoderProtocol]] = {
    'avro': lambda schema: AvroCodec(schema),
    'json': lambda schema: JsonCodec(),
    'pickle': lambda schema: PickleCodec(),
    'msgpack': lambda schema: MsgpackCodec(),
}


def build_codec(name: str, schema: Optional[Dict[str, Any]] = None) -> EncoderProtocol:
    """Instantiate a registered codec by name."""
    if name not in CODECS:
        raise KeyError(f"Unknown codec '{name}' (available: {', '.join(CODECS)})")
    if name == 'avro' and schema is None:
        raise ValueError("The avro codec needs a parsed schema")
    return CODECS[name](schema)


__all__ = [
    'AvroCodec',
    'JsonCodec',
    'MsgpackCodec',
    'PickleCodec',
    'CODECS',
    'BUNDLED_SCHEMA_PATH',
    'build_codec',
    'load_schema',
    'parse_schema',
]
