"""
Timing benchmarks for every codec, with and without gzip

Each codec is built fresh per call, so encoder setup cost is part of the
measurement.
"""

import pytest

from codecbench.context.compression import GzipCompressor
from codecbench.context.encoding import CODECS, build_codec

CODEC_NAMES = sorted(CODECS)


@pytest.mark.benchmark(group="encode")
class TestEncodeBenchmarks:
    """Encode the default 1000-record dataset"""

    @pytest.mark.parametrize("codec_name", CODEC_NAMES)
    def test_encode(self, benchmark, codec_name, parsed_schema, full_dataset):
        def encode():
            return build_codec(codec_name, parsed_schema).encode(full_dataset)

        payload = benchmark(encode)
        assert len(payload) > 0

    @pytest.mark.parametrize("codec_name", CODEC_NAMES)
    def test_encode_gzip(self, benchmark, codec_name, parsed_schema, full_dataset):
        compressor = GzipCompressor()

        def encode_and_compress():
            return compressor.compress(build_codec(codec_name, parsed_schema).encode(full_dataset))

        payload = benchmark(encode_and_compress)
        assert len(payload) > 0


@pytest.mark.benchmark(group="decode")
class TestDecodeBenchmarks:
    """Decode a pre-encoded 1000-record dataset"""

    @pytest.mark.parametrize("codec_name", CODEC_NAMES)
    def test_decode(self, benchmark, codec_name, parsed_schema, full_dataset):
        payload = build_codec(codec_name, parsed_schema).encode(full_dataset)

        def decode():
            return build_codec(codec_name, parsed_schema).decode(payload)

        decoded = benchmark(decode)
        assert len(decoded) == len(full_dataset)

    @pytest.mark.parametrize("codec_name", CODEC_NAMES)
    def test_decode_gzip(self, benchmark, codec_name, parsed_schema, full_dataset):
        compressor = GzipCompressor()
        payload = compressor.compress(build_codec(codec_name, parsed_schema).encode(full_dataset))

        def decompress_and_decode():
            return build_codec(codec_name, parsed_schema).decode(compressor.decompress(payload))

        decoded = benchmark(decompress_and_decode)
        assert len(decoded) == len(full_dataset)
