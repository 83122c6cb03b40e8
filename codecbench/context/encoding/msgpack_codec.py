"""
MessagePack codec.

Timestamps travel as integer microseconds since the epoch so they survive
the round trip exactly.
"""

import msgpack

from codecbench.exceptions import DecodeError, EncodingError
from codecbench.models import Dataset, from_epoch_micros, to_epoch_micros
from codecbench.protocols import EncoderProtocol


class MsgpackCodec(EncoderProtocol):
    """Binary serialization of the metric container via msgpack."""

    @property
    def name(self) -> str:
        return "msgpack"

    def encode(self, dataset: Dataset) -> bytes:
        container = dataset.to_dict()
        try:
            for item in container['metrics']:
                item['timestamp'] = to_epoch_micros(item['timestamp'])
            return msgpack.packb(container, use_bin_type=True)
        except (TypeError, ValueError, OverflowError) as e:
            raise EncodingError("Cannot encode dataset as msgpack", str(e)) from e

    def decode(self, data: bytes) -> Dataset:
        try:
            raw = msgpack.unpackb(data, raw=False)
        except (msgpack.UnpackException, ValueError, TypeError) as e:
            raise DecodeError("Malformed msgpack payload", str(e)) from e

        try:
            for item in raw['metrics']:
                item['timestamp'] = from_epoch_micros(item['timestamp'])
            return Dataset.from_dict(raw)
        except (KeyError, TypeError, OverflowError) as e:
            raise DecodeError("msgpack payload is not a metric container", str(e)) from e
