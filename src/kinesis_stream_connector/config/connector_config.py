"""Stream connector configuration.

ConnectorConfig holds everything needed to construct the stream consumer
connector: stream identity, fetch tuning, checkpoint store coordinates,
checkpoint cadence, initial read position, record decoding strategy and the
owning topology name.

A config starts from a minimal instance and is completed through fluent
``with_*`` methods that validate their argument, mutate the receiver and
return it:

    config = (
        ConnectorConfig("clickstream", "zk1:2181,zk2:2181")
        .with_region(Region.EU_WEST_1)
        .with_max_records_per_fetch(500)
        .with_initial_stream_position(InitialStreamPosition.TRIM_HORIZON)
    )
"""

import importlib
import inspect
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .auto_validate import auto_validate_after_init
from .base_config import BaseConfig, ValidationResult
from .config_loader import ConfigLoader
from .region import DEFAULT_REGION, Region
from ..stream.initial_position import DEFAULT_INITIAL_POSITION, InitialStreamPosition
from ..stream.record_decoder import DefaultRecordDecoder, RecordDecoder

logger = logging.getLogger(__name__)

DEFAULT_MAX_RECORDS_PER_FETCH = 10000
DEFAULT_CHECKPOINT_INTERVAL_MILLIS = 60000
DEFAULT_CHECKPOINT_STORE_PATH_PREFIX = "kinesis_storm_spout"
DEFAULT_CHECKPOINT_STORE_SESSION_TIMEOUT_MILLIS = 10000
DEFAULT_TOPOLOGY_NAME = "UNNAMED_TOPOLOGY"


def check_value_is_positive(value: int, name: str) -> None:
    """Raise ValueError unless value is a strictly positive int."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"Value of {name} must be positive, but was {value!r}")


def check_record_decoder(decoder: RecordDecoder) -> None:
    """Raise ValueError unless decoder is a RecordDecoder instance."""
    if decoder is None:
        raise ValueError("record_decoder cannot be None")
    if not isinstance(decoder, RecordDecoder):
        raise ValueError(
            f"record_decoder must be a RecordDecoder instance, but was {decoder!r}"
        )


def _resolve_decoder(decoder: Union[str, RecordDecoder]) -> RecordDecoder:
    if not isinstance(decoder, str):
        return decoder

    if ':' in decoder:
        module_name, _, class_name = decoder.partition(':')
    else:
        module_name, _, class_name = decoder.rpartition('.')
    if not module_name or not class_name:
        raise ValueError(f"Invalid record decoder path: {decoder!r}")

    try:
        module = importlib.import_module(module_name)
        decoder_cls = module
        # Nested classes come out of to_dict() as Outer.Inner
        for attr in class_name.split('.'):
            decoder_cls = getattr(decoder_cls, attr)
    except (ImportError, AttributeError) as e:
        raise ValueError(f"Cannot load record decoder {decoder!r}: {e}") from e

    if not (isinstance(decoder_cls, type) and issubclass(decoder_cls, RecordDecoder)) \
            or inspect.isabstract(decoder_cls):
        raise ValueError(f"{decoder!r} is not a RecordDecoder class")
    return decoder_cls()


@auto_validate_after_init
class ConnectorConfig(BaseConfig):
    """Configuration for the stream consumer connector.

    ``stream_name`` and ``checkpoint_store_connection_string`` are fixed at
    construction. Tunable fields change only through the ``with_*`` methods,
    and ``owning_topology_name`` through set_owning_topology_name(), which
    the connector runtime calls once it knows its topology.

    Instances are not synchronized; finish configuring before sharing one
    with worker threads.
    """

    def __init__(self, stream_name: str, checkpoint_store_connection_string: str) -> None:
        """Create a config with every tunable field at its default.

        Neither argument is checked here. An empty stream name or connection
        string shows up only as a validation warning.

        Args:
            stream_name: Name of the stream to consume.
            checkpoint_store_connection_string: Endpoint of the checkpoint
                store (e.g. "localhost:2181").
        """
        super().__init__()
        self._stream_name = stream_name
        self._checkpoint_store_connection_string = checkpoint_store_connection_string

        self._region = DEFAULT_REGION
        self._max_records_per_fetch = DEFAULT_MAX_RECORDS_PER_FETCH
        self._initial_position = DEFAULT_INITIAL_POSITION
        self._checkpoint_interval_millis = DEFAULT_CHECKPOINT_INTERVAL_MILLIS
        self._checkpoint_store_path_prefix = DEFAULT_CHECKPOINT_STORE_PATH_PREFIX
        self._checkpoint_store_session_timeout_millis = DEFAULT_CHECKPOINT_STORE_SESSION_TIMEOUT_MILLIS
        self._record_decoder: RecordDecoder = DefaultRecordDecoder()
        self._owning_topology_name = DEFAULT_TOPOLOGY_NAME

    @classmethod
    def from_settings(
        cls,
        stream_name: str,
        max_records_per_fetch: int,
        initial_position: Union[InitialStreamPosition, str],
        checkpoint_store_path_prefix: str,
        checkpoint_store_connection_string: str,
        checkpoint_store_session_timeout_millis: int,
        checkpoint_interval_millis: int,
        record_decoder: RecordDecoder,
    ) -> 'ConnectorConfig':
        """Create a config with every tunable field given explicitly.

        Args:
            stream_name: Name of the stream to consume.
            max_records_per_fetch: Max number of records to fetch in a single call.
            initial_position: Where to read from when a shard has no checkpoint.
            checkpoint_store_path_prefix: Path prefix for connector state in the checkpoint store.
            checkpoint_store_connection_string: Endpoint of the checkpoint store.
            checkpoint_store_session_timeout_millis: Checkpoint store session timeout.
            checkpoint_interval_millis: How often to save checkpoints.
            record_decoder: Converts a raw record into output tuples.

        Raises:
            ValueError: If an integer setting is not positive, the position is
                unknown or the decoder is not a RecordDecoder. Nothing is built
                in that case.
        """
        check_value_is_positive(max_records_per_fetch, "max_records_per_fetch")
        check_value_is_positive(
            checkpoint_store_session_timeout_millis, "checkpoint_store_session_timeout_millis"
        )
        check_value_is_positive(checkpoint_interval_millis, "checkpoint_interval_millis")
        position = InitialStreamPosition(initial_position)
        check_record_decoder(record_decoder)

        config = cls(stream_name, checkpoint_store_connection_string)
        config._max_records_per_fetch = max_records_per_fetch
        config._initial_position = position
        config._checkpoint_store_path_prefix = checkpoint_store_path_prefix
        config._checkpoint_store_session_timeout_millis = checkpoint_store_session_timeout_millis
        config._checkpoint_interval_millis = checkpoint_interval_millis
        config._record_decoder = record_decoder
        config._invalidate_validation()
        return config

    @property
    def stream_name(self) -> str:
        """Name of the stream."""
        return self._stream_name

    @property
    def region(self) -> Region:
        """Region hosting the stream."""
        return self._region

    @property
    def max_records_per_fetch(self) -> int:
        """Max number of records fetched in a single call."""
        return self._max_records_per_fetch

    @property
    def initial_position(self) -> InitialStreamPosition:
        """Read position for shards without a checkpoint."""
        return self._initial_position

    @property
    def checkpoint_interval_millis(self) -> int:
        """Checkpoint interval (e.g. checkpoint every 30 seconds)."""
        return self._checkpoint_interval_millis

    @property
    def checkpoint_store_connection_string(self) -> str:
        """Checkpoint store connection string."""
        return self._checkpoint_store_connection_string

    @property
    def checkpoint_store_path_prefix(self) -> str:
        """Prefix used when storing connector state in the checkpoint store."""
        return self._checkpoint_store_path_prefix

    @property
    def checkpoint_store_session_timeout_millis(self) -> int:
        """Checkpoint store session timeout."""
        return self._checkpoint_store_session_timeout_millis

    @property
    def record_decoder(self) -> RecordDecoder:
        """Decoder used to convert a raw record into output tuples."""
        return self._record_decoder

    @property
    def owning_topology_name(self) -> str:
        """Name of the topology running the connector."""
        return self._owning_topology_name

    def with_record_decoder(self, decoder: RecordDecoder) -> 'ConnectorConfig':
        check_record_decoder(decoder)
        self._record_decoder = decoder
        self._invalidate_validation()
        return self

    def with_checkpoint_store_path_prefix(self, prefix: str) -> 'ConnectorConfig':
        self._checkpoint_store_path_prefix = prefix
        self._invalidate_validation()
        return self

    def with_checkpoint_store_session_timeout_millis(self, timeout_millis: int) -> 'ConnectorConfig':
        check_value_is_positive(timeout_millis, "checkpoint_store_session_timeout_millis")
        self._checkpoint_store_session_timeout_millis = timeout_millis
        self._invalidate_validation()
        return self

    def with_checkpoint_interval_millis(self, interval_millis: int) -> 'ConnectorConfig':
        check_value_is_positive(interval_millis, "checkpoint_interval_millis")
        self._checkpoint_interval_millis = interval_millis
        self._invalidate_validation()
        return self

    def with_initial_stream_position(
        self, position: Union[InitialStreamPosition, str]
    ) -> 'ConnectorConfig':
        self._initial_position = InitialStreamPosition(position)
        self._invalidate_validation()
        return self

    def with_max_records_per_fetch(self, max_records: int) -> 'ConnectorConfig':
        check_value_is_positive(max_records, "max_records_per_fetch")
        self._max_records_per_fetch = max_records
        self._invalidate_validation()
        return self

    def with_region(self, region: Union[Region, str]) -> 'ConnectorConfig':
        """Set the stream's region, given as a Region or its name/id.

        Raises:
            ValueError: If region is None or unknown.
        """
        if region is None:
            raise ValueError("region cannot be None")
        self._region = Region.from_name(region)
        self._invalidate_validation()
        return self

    def set_owning_topology_name(self, topology_name: str) -> None:
        """Record the name of the topology running the connector.

        Called by the connector runtime once it learns its topology, before
        any worker reads the config. No validation is applied.
        """
        logger.debug(f"Stream {self._stream_name!r} owned by topology {topology_name!r}")
        self._owning_topology_name = topology_name

    def _validate_impl(self) -> ValidationResult:
        errors = []
        warnings = []

        for name, value in (
            ("max_records_per_fetch", self._max_records_per_fetch),
            ("checkpoint_interval_millis", self._checkpoint_interval_millis),
            ("checkpoint_store_session_timeout_millis", self._checkpoint_store_session_timeout_millis),
        ):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                errors.append(f"{name} must be positive, but was {value!r}")

        if self._region is None:
            errors.append("region cannot be None")
        if not isinstance(self._record_decoder, RecordDecoder):
            errors.append(f"record_decoder must be a RecordDecoder instance, but was {self._record_decoder!r}")

        if not self._stream_name or not str(self._stream_name).strip():
            warnings.append("stream_name is empty")
        if not self._checkpoint_store_connection_string or not str(self._checkpoint_store_connection_string).strip():
            warnings.append("checkpoint_store_connection_string is empty")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to a plain dictionary.

        The result is accepted by from_dict() as long as the decoder class
        can be imported and built without arguments.
        """
        decoder_type = type(self._record_decoder)
        return {
            "stream_name": self._stream_name,
            "region": self._region.value,
            "max_records_per_fetch": self._max_records_per_fetch,
            "initial_position": self._initial_position.value,
            "checkpoint_interval_millis": self._checkpoint_interval_millis,
            "checkpoint_store": {
                "connection_string": self._checkpoint_store_connection_string,
                "path_prefix": self._checkpoint_store_path_prefix,
                "session_timeout_millis": self._checkpoint_store_session_timeout_millis,
            },
            "record_decoder": f"{decoder_type.__module__}:{decoder_type.__qualname__}",
            "topology_name": self._owning_topology_name,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ConnectorConfig':
        """Create a ConnectorConfig instance from a dictionary.

        Args:
            data: Dictionary containing configuration parameters.
            Expected structure:
            {
                'stream_name': str,
                'checkpoint_store': {
                    'connection_string': str,
                    'path_prefix': str (optional),
                    'session_timeout_millis': int (optional)
                },
                'region': str (optional, e.g. 'us-east-1' or 'US_EAST_1'),
                'max_records_per_fetch': int (optional),
                'initial_position': str (optional, e.g. 'TRIM_HORIZON'),
                'checkpoint_interval_millis': int (optional),
                'record_decoder': str or RecordDecoder (optional,
                    'package.module:ClassName'),
                'topology_name': str (optional)
            }
            A flat 'checkpoint_store_connection_string' key is accepted in
            place of 'checkpoint_store.connection_string'.

        Returns:
            ConnectorConfig instance.

        Raises:
            ValueError: If required parameters are missing or invalid.
        """
        stream_name = data.get('stream_name')
        if not stream_name:
            raise ValueError("'stream_name' is required in configuration")

        checkpoint_store = data.get('checkpoint_store') or {}
        if not isinstance(checkpoint_store, dict):
            raise ValueError(
                f"'checkpoint_store' must be a mapping, got {type(checkpoint_store).__name__}"
            )
        connection_string = checkpoint_store.get(
            'connection_string', data.get('checkpoint_store_connection_string')
        )
        if not connection_string:
            raise ValueError("'checkpoint_store.connection_string' is required in configuration")

        config = cls(stream_name, connection_string)

        if 'region' in data:
            config.with_region(data['region'])
        if 'max_records_per_fetch' in data:
            config.with_max_records_per_fetch(data['max_records_per_fetch'])
        if 'initial_position' in data:
            config.with_initial_stream_position(data['initial_position'])
        if 'checkpoint_interval_millis' in data:
            config.with_checkpoint_interval_millis(data['checkpoint_interval_millis'])
        if 'path_prefix' in checkpoint_store:
            config.with_checkpoint_store_path_prefix(checkpoint_store['path_prefix'])
        if 'session_timeout_millis' in checkpoint_store:
            config.with_checkpoint_store_session_timeout_millis(checkpoint_store['session_timeout_millis'])
        if data.get('record_decoder') is not None:
            config.with_record_decoder(_resolve_decoder(data['record_decoder']))
        if 'topology_name' in data:
            config.set_owning_topology_name(data['topology_name'])

        return config

    @classmethod
    def from_file(
        cls,
        config_file: Union[str, Path],
        base_config: Optional[Dict[str, Any]] = None
    ) -> 'ConnectorConfig':
        """Load configuration from a JSON or YAML file.

        Args:
            config_file: Path to JSON or YAML configuration file.
            base_config: Base configuration dictionary the file is merged over.

        Raises:
            FileNotFoundError: If the configuration file doesn't exist.
            ValueError: If the file format or a value is invalid.
        """
        merged_config = ConfigLoader.load_config(
            config_file=config_file,
            base_config=base_config
        )
        return cls.from_dict(merged_config)

    def __repr__(self) -> str:
        return (
            f"ConnectorConfig("
            f"stream_name='{self._stream_name}', "
            f"region='{self._region.value}', "
            f"topology_name='{self._owning_topology_name}'"
            f")"
        )
