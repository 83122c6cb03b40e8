"""
JSON codec.

Compact separators, ISO-8601 timestamps.
"""

import json
from datetime import datetime
from typing import Any

from codecbench.exceptions import DecodeError, EncodingError
from codecbench.models import Dataset
from codecbench.protocols import EncoderProtocol


def _default(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class JsonCodec(EncoderProtocol):
    """Plain-text JSON encoding of the metric container."""

    @property
    def name(self) -> str:
        return "json"

    def encode(self, dataset: Dataset) -> bytes:
        try:
            text = json.dumps(dataset.to_dict(), default=_default, separators=(',', ':'),
                              allow_nan=False)
        except (TypeError, ValueError) as e:
            raise EncodingError("Cannot encode dataset as JSON", str(e)) from e
        return text.encode('utf-8')

    def decode(self, data: bytes) -> Dataset:
        try:
            raw = json.loads(data)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise DecodeError("Malformed JSON payload", str(e)) from e

        try:
            for item in raw['metrics']:
                item['timestamp'] = datetime.fromisoformat(item['timestamp'])
            return Dataset.from_dict(raw)
        except (KeyError, TypeError, ValueError) as e:
            raise DecodeError("JSON payload is not a metric container", str(e)) from e
