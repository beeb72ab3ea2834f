"""Kinesis Stream Connector - Main Package.

This package provides the configuration layer of a stream consumer connector:
- ConnectorConfig: stream, fetch, checkpoint and decoding settings
- RecordDecoder: pluggable conversion of raw records into output tuples
- ConfigLoader: loading settings from JSON and YAML files
"""

# Stream types first; the config package depends on them
from .stream import (
    InitialStreamPosition,
    StreamRecord,
    RecordDecoder,
    DefaultRecordDecoder,
)

from .config import (
    BaseConfig,
    ConfigValidationError,
    ValidationResult,
    ConfigLoader,
    ConnectorConfig,
    Region,
    DEFAULT_REGION,
)

__version__ = "0.1.0"

__all__ = [
    # Configuration classes
    "ConnectorConfig",
    "BaseConfig",
    "ConfigValidationError",
    "ValidationResult",
    "ConfigLoader",
    "Region",
    "DEFAULT_REGION",

    # Stream types
    "InitialStreamPosition",
    "StreamRecord",
    "RecordDecoder",
    "DefaultRecordDecoder",
]
