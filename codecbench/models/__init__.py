"""
Data models for codecbench.

This module contains pure data structures with no business logic.
"""

from dataclasses import dataclass, fields, asdict
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Dict, Optional, Any, Tuple

__all__ = [
    'Metadata',
    'Measurements',
    'Record',
    'Dataset',
    'HarnessConfig',
    'BenchResult',
    'EPOCH',
    'to_epoch_micros',
    'from_epoch_micros',
]

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_epoch_micros(moment: datetime) -> int:
    """Convert an aware datetime to integer microseconds since the epoch."""
    delta = moment - EPOCH
    return (delta.days * 86400 + delta.seconds) * 1_000_000 + delta.microseconds


def from_epoch_micros(micros: int) -> datetime:
    """Inverse of to_epoch_micros; always returns a UTC datetime."""
    return EPOCH + timedelta(microseconds=micros)


def _check_keys(raw: Any, expected: set, where: str):
    """Raise KeyError unless ``raw`` is a mapping with exactly ``expected`` keys."""
    if not isinstance(raw, dict):
        raise TypeError(f"{where} must be a mapping, got {type(raw).__name__}")
    if set(raw) != expected:
        missing = sorted(expected - set(raw))
        unknown = sorted(set(raw) - expected)
        raise KeyError(f"{where}: missing {missing}, unknown {unknown}")


def _typed(cls, raw: Dict[str, Any]):
    """Build a dataclass from a mapping, checking keys and field types."""
    _check_keys(raw, {f.name for f in fields(cls)}, cls.__name__)
    for f in fields(cls):
        if not isinstance(raw[f.name], f.type):
            raise TypeError(f"{cls.__name__}.{f.name} must be {f.type.__name__}, "
                            f"got {type(raw[f.name]).__name__}")
    return cls(**raw)


@dataclass(frozen=True)
class Metadata:
    """Descriptive tags attached to every telemetry record."""
    band_tag: str
    carrier: str
    cell_id: str
    event_type: str
    imei: str
    serial_number: str


@dataclass(frozen=True)
class Measurements:
    """Radio measurements of a single record."""
    band: str
    cell_id: float
    cqi: float
    dl_bw: float
    earfcn: float
    mcs: float
    phy_cell_id: float
    pmi: float
    ri: float
    rsrp: float
    rsrq: float
    rssi: float
    sinr: float
    txpower: float
    ul_bw: float

    @classmethod
    def metric_names(cls) -> List[str]:
        """Names of the float metrics (everything except ``band``)."""
        return [f.name for f in fields(cls) if f.name != 'band']


@dataclass(frozen=True)
class Record:
    """A single telemetry record."""
    timestamp: datetime
    metadata: Metadata
    data: Measurements

    def to_dict(self) -> Dict[str, Any]:
        return {
            'timestamp': self.timestamp,
            'metadata': asdict(self.metadata),
            'data': asdict(self.data),
        }

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> 'Record':
        _check_keys(raw, {'timestamp', 'metadata', 'data'}, cls.__name__)
        return _typed(cls, {
            'timestamp': raw['timestamp'],
            'metadata': _typed(Metadata, raw['metadata']),
            'data': _typed(Measurements, raw['data']),
        })


@dataclass(frozen=True)
class Dataset:
    """Ordered, read-only collection of records."""
    records: Tuple[Record, ...] = ()

    def __len__(self) -> int:
        return len(self.records)

    def __iter__(self):
        return iter(self.records)

    def to_dict(self) -> Dict[str, Any]:
        """Container form: ``{"metrics": [record, ...]}``."""
        return {'metrics': [record.to_dict() for record in self.records]}

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> 'Dataset':
        _check_keys(raw, {'metrics'}, cls.__name__)
        if not isinstance(raw['metrics'], list):
            raise TypeError(f"Dataset.metrics must be a list, got {type(raw['metrics']).__name__}")
        return cls(records=tuple(Record.from_dict(item) for item in raw['metrics']))


@dataclass
class HarnessConfig:
    """Settings for one benchmark run."""
    record_count: int = 1000
    seed: Optional[int] = None
    schema_path: Path = Path('schema')
    codecs: Tuple[str, ...] = ('avro', 'json', 'pickle', 'msgpack')
    compressors: Tuple[str, ...] = ('gzip',)
    include_plain: bool = True


@dataclass
class BenchResult:
    """Outcome of a single codec/compression combination."""
    codec: str
    compression: str
    size_bytes: int
    record_count: int
    encode_time: float = 0.0
    decode_time: float = 0.0

    @property
    def label(self) -> str:
        if self.compression == 'none':
            return f"{self.codec} uncompressed"
        return f"{self.codec} {self.compression}"

    @property
    def bytes_per_record(self) -> int:
        if self.record_count <= 0:
            return 0
        return self.size_bytes // self.record_count

    def to_dict(self) -> Dict[str, Any]:
        return {
            'codec': self.codec,
            'compression': self.compression,
            'size_bytes': self.size_bytes,
            'record_count': self.record_count,
            'bytes_per_record': self.bytes_per_record,
            'encode_time': self.encode_time,
            'decode_time': self.decode_time,
        }
