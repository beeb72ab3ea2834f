"""Record decoding strategies.

A decoder turns one raw stream record into the tuples the connector emits
into the topology. The connector configuration only carries a decoder; the
fetch loop is what calls it.
"""

from abc import ABC, abstractmethod
from typing import Any, Tuple

from .stream_record import StreamRecord


class RecordDecoder(ABC):
    """Converts a raw stream record into zero or more output tuples."""

    @abstractmethod
    def decode(self, record: StreamRecord) -> list[Tuple[Any, ...]]:
        """Decode a record.

        Args:
            record: The raw record read from the stream.

        Returns:
            The tuples to emit, possibly none. Each tuple lines up with
            output_fields().
        """
        pass

    @abstractmethod
    def output_fields(self) -> Tuple[str, ...]:
        """Names of the positions in every tuple returned by decode()."""
        pass


class DefaultRecordDecoder(RecordDecoder):
    """Pass-through decoder emitting the partition key and the record itself."""

    FIELD_PARTITION_KEY = "partition_key"
    FIELD_RECORD = "record"

    def decode(self, record: StreamRecord) -> list[Tuple[Any, ...]]:
        return [(record.partition_key, record)]

    def output_fields(self) -> Tuple[str, ...]:
        return (self.FIELD_PARTITION_KEY, self.FIELD_RECORD)

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return "DefaultRecordDecoder()"
