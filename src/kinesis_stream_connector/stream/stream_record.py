from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


class StreamRecord(BaseModel):
    """A single raw record fetched from a stream shard."""

    model_config = ConfigDict(frozen=True)

    partition_key: str
    sequence_number: str
    data: bytes
    shard_id: Optional[str] = None
    approximate_arrival_timestamp: Optional[datetime] = None

    def __repr__(self):
        return (
            f"StreamRecord(shard_id={self.shard_id}, partition_key={self.partition_key}, "
            f"sequence_number={self.sequence_number}, data_length={len(self.data)})"
        )
