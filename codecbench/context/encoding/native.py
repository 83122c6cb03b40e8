"""
Native binary codec.

Uses pickle, Python's own structural serialization, on the dataclasses
directly. Only decode payloads produced by this harness.
"""

import pickle

from codecbench.exceptions import DecodeError, EncodingError
from codecbench.models import Dataset
from codecbench.protocols import EncoderProtocol


class PickleCodec(EncoderProtocol):
    """Pickle the dataset object graph."""

    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL):
        self.protocol = protocol

    @property
    def name(self) -> str:
        return "pickle"

    def encode(self, dataset: Dataset) -> bytes:
        try:
            return pickle.dumps(dataset, protocol=self.protocol)
        except (pickle.PicklingError, TypeError, AttributeError) as e:
            raise EncodingError("Cannot pickle dataset", str(e)) from e

    def decode(self, data: bytes) -> Dataset:
        try:
            obj = pickle.loads(data)
        except (pickle.UnpicklingError, EOFError, ValueError, TypeError, AttributeError,
                ImportError, IndexError, KeyError, OverflowError, MemoryError) as e:
            raise DecodeError("Malformed pickle payload", str(e)) from e

        if not isinstance(obj, Dataset):
            raise DecodeError("Pickle payload is not a dataset", type(obj).__name__)
        return obj
