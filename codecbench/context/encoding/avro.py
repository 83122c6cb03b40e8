"""
Avro codec (schema-based binary encoding) backed by fastavro.

The container is written without an Object Container File header, so the
reported size is the bare binary encoding of the dataset.
"""

import io
import json
from pathlib import Path
from typing import Any, Dict, Union

import fastavro
from fastavro.schema import SchemaParseException
from fastavro.validation import ValidationError, validate

from codecbench.exceptions import DecodeError, SchemaLoadError, SchemaMismatchError
from codecbench.models import Dataset, to_epoch_micros
from codecbench.protocols import EncoderProtocol

# Schema shipped with the package, written out by `codecbench schema`
BUNDLED_SCHEMA_PATH = Path(__file__).parent.parent.parent / "data" / "schema.avsc"


def parse_schema(text: str) -> Dict[str, Any]:
    """Parse Avro schema JSON text into a fastavro schema."""
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaLoadError("Schema is not valid JSON", str(e)) from e

    try:
        return fastavro.parse_schema(raw)
    except (SchemaParseException, ValueError, KeyError, TypeError) as e:
        raise SchemaLoadError("Invalid Avro schema", str(e)) from e


def load_schema(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read and parse the schema file.

    Raises:
        SchemaLoadError: if the file is missing, unreadable or malformed
    """
    schema_path = Path(path)
    try:
        text = schema_path.read_text(encoding='utf-8')
    except OSError as e:
        raise SchemaLoadError(f"Cannot read schema file {schema_path}", str(e)) from e
    return parse_schema(text)


class AvroCodec(EncoderProtocol):
    """Encode datasets with a pre-parsed Avro schema."""

    def __init__(self, schema: Dict[str, Any]):
        self.schema = schema

    @property
    def name(self) -> str:
        return "avro"

    def encode(self, dataset: Dataset) -> bytes:
        container = dataset.to_dict()
        try:
            for item in container['metrics']:
                item['timestamp'] = to_epoch_micros(item['timestamp'])
        except TypeError as e:
            raise SchemaMismatchError("Record timestamp is not a datetime", str(e)) from e

        try:
            validate(container, self.schema, raise_errors=True)
        except ValidationError as e:
            raise SchemaMismatchError("Dataset does not match Avro schema", str(e)) from e

        buf = io.BytesIO()
        try:
            fastavro.schemaless_writer(buf, self.schema, container)
        except (ValueError, TypeError, KeyError, AttributeError) as e:
            raise SchemaMismatchError("Avro writer rejected dataset", str(e)) from e
        return buf.getvalue()

    def decode(self, data: bytes) -> Dataset:
        try:
            container = fastavro.schemaless_reader(io.BytesIO(data), self.schema)
        except (EOFError, ValueError, IndexError, UnicodeDecodeError) as e:
            raise DecodeError("Malformed Avro payload", str(e)) from e

        try:
            return Dataset.from_dict(container)
        except (KeyError, TypeError) as e:
            raise SchemaMismatchError("Avro schema does not describe a metric container", str(e)) from e
