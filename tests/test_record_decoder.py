"""Tests for record decoding and the stream types."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from kinesis_stream_connector.config import Region
from kinesis_stream_connector.stream import (
    DefaultRecordDecoder,
    InitialStreamPosition,
    RecordDecoder,
    StreamRecord,
)


@pytest.fixture
def record():
    return StreamRecord(
        partition_key="user-42",
        sequence_number="49590338271490256608559692538361571095921575989136588898",
        data=b'{"event": "click"}',
        shard_id="shardId-000000000001",
        approximate_arrival_timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc),
    )


class TestDefaultRecordDecoder:
    """Test the pass-through decoder."""

    def test_decode(self, record):
        """Test that the decoder emits one (partition_key, record) tuple."""
        assert DefaultRecordDecoder().decode(record) == [("user-42", record)]

    def test_output_fields(self):
        """Test the declared output fields."""
        assert DefaultRecordDecoder().output_fields() == ("partition_key", "record")

    def test_equality(self):
        """Test that default decoders compare equal to each other."""
        assert DefaultRecordDecoder() == DefaultRecordDecoder()

    def test_abstract(self):
        """Test that RecordDecoder can't be instantiated directly."""
        with pytest.raises(TypeError):
            RecordDecoder()


class TestStreamRecord:
    """Test the raw record model."""

    def test_frozen(self, record):
        """Test that records are immutable."""
        with pytest.raises(ValidationError):
            record.partition_key = "other"

    def test_optional_fields(self):
        """Test that shard and arrival time are optional."""
        record = StreamRecord(partition_key="k", sequence_number="1", data=b"")
        assert record.shard_id is None
        assert record.approximate_arrival_timestamp is None
        assert "data_length=0" in repr(record)


class TestEnums:
    """Test the initial position and region enumerations."""

    def test_initial_position_values(self):
        """Test the stream API literals."""
        assert [p.value for p in InitialStreamPosition] == ["TRIM_HORIZON", "LATEST", "AT_TIMESTAMP"]

    def test_region_from_name(self):
        """Test resolving regions by member name and id."""
        assert Region.from_name("US_WEST_1") is Region.US_WEST_1
        assert Region.from_name("us-west-1") is Region.US_WEST_1
        assert Region.from_name(Region.SA_EAST_1) is Region.SA_EAST_1

        with pytest.raises(ValueError):
            Region.from_name("nowhere")
