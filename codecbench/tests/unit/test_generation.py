"""
Unit tests for synthetic dataset generation
"""

import random
from dataclasses import asdict, fields
from datetime import timezone

import pytest

from codecbench.context.generation import BAND, METADATA_VALUES, generate
from codecbench.models import Measurements, Metadata

METRIC_KEYS = {
    'cell_id', 'cqi', 'dl_bw', 'earfcn', 'mcs', 'phy_cell_id', 'pmi', 'ri',
    'rsrp', 'rsrq', 'rssi', 'sinr', 'txpower', 'ul_bw',
}


class TestGenerate:
    """Shape and content of generated datasets"""

    @pytest.mark.parametrize("count", [0, 1, 20, 1000])
    def test_exact_record_count(self, count, rng):
        dataset = generate(count, rng=rng)
        assert len(dataset) == count

    def test_fixed_key_sets(self, small_dataset):
        metadata_keys = {f.name for f in fields(Metadata)}
        data_keys = {f.name for f in fields(Measurements)}

        for record in small_dataset:
            assert set(asdict(record.metadata)) == metadata_keys
            assert set(asdict(record.data)) == data_keys

        assert data_keys == METRIC_KEYS | {'band'}
        assert set(Measurements.metric_names()) == METRIC_KEYS

    def test_metadata_values_are_constant(self, small_dataset):
        for record in small_dataset:
            assert asdict(record.metadata) == METADATA_VALUES
            assert record.metadata.carrier == "4g"
            assert record.data.band == BAND

    def test_metrics_are_uniform_floats(self, small_dataset):
        for record in small_dataset:
            for name in METRIC_KEYS:
                value = getattr(record.data, name)
                assert isinstance(value, float)
                assert 0.0 <= value < 1.0

    def test_same_seed_same_metrics(self, clock):
        first = generate(50, rng=random.Random(7), clock=clock)
        second = generate(50, rng=random.Random(7), clock=clock)

        assert [r.data for r in first] == [r.data for r in second]

    def test_different_seeds_differ(self):
        first = generate(10, rng=random.Random(1))
        second = generate(10, rng=random.Random(2))

        assert [r.data for r in first] != [r.data for r in second]

    def test_clock_called_once_per_record(self, rng, clock):
        dataset = generate(5, rng=rng, clock=clock)

        assert clock.calls == 5
        timestamps = [r.timestamp for r in dataset]
        assert timestamps == sorted(timestamps)
        assert len(set(timestamps)) == 5

    def test_default_clock_is_utc(self, rng):
        dataset = generate(1, rng=rng)
        assert dataset.records[0].timestamp.tzinfo == timezone.utc

    def test_negative_count_rejected(self, rng):
        with pytest.raises(ValueError):
            generate(-1, rng=rng)

    def test_records_are_immutable(self, small_dataset):
        record = small_dataset.records[0]
        with pytest.raises(AttributeError):
            record.data.cqi = 0.5
