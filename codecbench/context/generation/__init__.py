"""
Synthetic telemetry generation.

Builds records shaped like cellular modem reports: constant metadata tags and
one uniform random float per radio metric. Randomness comes from an explicit
``random.Random`` so runs can be reproduced with a seed.
"""

import random
from datetime import datetime, timezone
from typing import Callable, Optional

from codecbench.models import Dataset, Measurements, Metadata, Record

__all__ = ['generate', 'make_record', 'DEFAULT_COUNT', 'METADATA_VALUES', 'BAND']

# Number of records in a generated dataset
DEFAULT_COUNT = 1000

METADATA_VALUES = {
    'band_tag': '3',
    'carrier': '4g',
    'cell_id': '5149123',
    'event_type': 'cellular',
    'imei': '13124125123',
    'serial_number': 'S121Z1231',
}

BAND = '5g'


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def make_record(rng: random.Random, clock: Callable[[], datetime] = utc_now) -> Record:
    """Generate one record with some quasi-reasonable values."""
    metrics = {name: rng.random() for name in Measurements.metric_names()}
    return Record(
        timestamp=clock(),
        metadata=Metadata(**METADATA_VALUES),
        data=Measurements(band=BAND, **metrics),
    )


def generate(count: int = DEFAULT_COUNT,
             rng: Optional[random.Random] = None,
             clock: Optional[Callable[[], datetime]] = None) -> Dataset:
    """
    Generate a dataset of ``count`` records.

    Args:
        count: Number of records (must be >= 0)
        rng: Random source; a fresh unseeded one is used when omitted
        clock: Timestamp source, called once per record

    Returns:
        Dataset with exactly ``count`` records
    """
    if count < 0:
        raise ValueError(f"Record count must be non-negative, got {count}")

    rng = rng if rng is not None else random.Random()
    clock = clock or utc_now
    return Dataset(records=tuple(make_record(rng, clock) for _ in range(count)))
