"""Configuration management for kinesis-stream-connector.

This package provides the connector configuration object together with the
validation base class and the file loader it builds on.
"""

from .base_config import BaseConfig, ConfigValidationError, ValidationResult
from .config_loader import ConfigLoader
from .region import DEFAULT_REGION, Region
from .connector_config import (
    ConnectorConfig,
    DEFAULT_CHECKPOINT_INTERVAL_MILLIS,
    DEFAULT_CHECKPOINT_STORE_PATH_PREFIX,
    DEFAULT_CHECKPOINT_STORE_SESSION_TIMEOUT_MILLIS,
    DEFAULT_MAX_RECORDS_PER_FETCH,
    DEFAULT_TOPOLOGY_NAME,
    check_value_is_positive,
)

__all__ = [
    "BaseConfig",
    "ConfigValidationError",
    "ValidationResult",
    "ConfigLoader",
    "Region",
    "DEFAULT_REGION",
    "ConnectorConfig",
    "DEFAULT_CHECKPOINT_INTERVAL_MILLIS",
    "DEFAULT_CHECKPOINT_STORE_PATH_PREFIX",
    "DEFAULT_CHECKPOINT_STORE_SESSION_TIMEOUT_MILLIS",
    "DEFAULT_MAX_RECORDS_PER_FETCH",
    "DEFAULT_TOPOLOGY_NAME",
    "check_value_is_positive",
]
