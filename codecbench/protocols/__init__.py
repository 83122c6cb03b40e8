"""
Protocols (interfaces) for codecbench components.

This module defines abstract contracts that implementations must follow.
"""

from abc import ABC, abstractmethod
from codecbench.models import Dataset

__all__ = [
    'EncoderProtocol',
    'CompressorProtocol',
]


class EncoderProtocol(ABC):
    """Protocol for encoding/decoding a dataset."""

    @abstractmethod
    def encode(self, dataset: Dataset) -> bytes:
        """
        Serialize a dataset into bytes.

        Args:
            dataset: Records to encode

        Returns:
            Encoded byte data

        Raises:
            EncodingError: if the dataset cannot be represented
        """
        pass

    @abstractmethod
    def decode(self, data: bytes) -> Dataset:
        """
        Decode bytes back to a dataset.

        Args:
            data: Encoded byte data

        Returns:
            Reconstructed dataset

        Raises:
            DecodeError: if the payload is malformed
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return codec name used in reports."""
        pass


class CompressorProtocol(ABC):
    """Protocol for compression/decompression."""

    @abstractmethod
    def compress(self, data: bytes) -> bytes:
        """Compress byte data."""
        pass

    @abstractmethod
    def decompress(self, data: bytes) -> bytes:
        """Decompress byte data. Raises CorruptDataError on invalid input."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return compressor name used in reports."""
        pass

    @property
    @abstractmethod
    def level(self) -> int:
        """Return compression level."""
        pass
