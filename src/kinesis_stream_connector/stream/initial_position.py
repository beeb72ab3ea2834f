from enum import Enum


class InitialStreamPosition(str, Enum):
    """Where to start reading a shard that has no checkpoint yet."""

    TRIM_HORIZON = "TRIM_HORIZON"
    """Oldest record still retained by the stream."""

    LATEST = "LATEST"
    """Only records written after the reader attaches."""

    AT_TIMESTAMP = "AT_TIMESTAMP"
    """Records written at or after a given point in time."""


DEFAULT_INITIAL_POSITION = InitialStreamPosition.LATEST
