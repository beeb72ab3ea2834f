"""Tests for configuration loading functionality."""

import json
import os
import tempfile

import pytest
import yaml

from kinesis_stream_connector.config import ConfigLoader, ConnectorConfig, Region
from kinesis_stream_connector.stream import DefaultRecordDecoder, InitialStreamPosition


class DecoderHolder:
    class NestedDecoder(DefaultRecordDecoder):
        pass


def _write_temp(content: str, suffix: str) -> str:
    with tempfile.NamedTemporaryFile(mode='w', suffix=suffix, delete=False) as f:
        f.write(content)
        return f.name


class TestConfigLoader:
    """Test configuration loading utilities."""

    def test_load_from_json_file(self):
        """Test loading configuration from JSON file."""
        config_data = {
            "stream_name": "orders",
            "checkpoint_store": {
                "connection_string": "localhost:2181",
                "session_timeout_millis": 5000
            }
        }
        config_file = _write_temp(json.dumps(config_data), '.json')

        try:
            assert ConfigLoader.load_from_file(config_file) == config_data
        finally:
            os.unlink(config_file)

    def test_load_from_yaml_file(self):
        """Test loading configuration from YAML file."""
        config_data = {"stream_name": "orders", "max_records_per_fetch": 100}
        config_file = _write_temp(yaml.safe_dump(config_data), '.yaml')

        try:
            assert ConfigLoader.load_from_file(config_file) == config_data
        finally:
            os.unlink(config_file)

    def test_load_unknown_extension_falls_back_to_yaml(self):
        """Test that content in an unknown extension is parsed as JSON, then YAML."""
        config_file = _write_temp("stream_name: orders\n", '.conf')

        try:
            assert ConfigLoader.load_from_file(config_file) == {"stream_name": "orders"}
        finally:
            os.unlink(config_file)

    def test_load_empty_file(self):
        """Test that an empty file yields an empty configuration."""
        config_file = _write_temp("", '.json')

        try:
            assert ConfigLoader.load_from_file(config_file) == {}
        finally:
            os.unlink(config_file)

    def test_load_missing_file(self):
        """Test that a missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            ConfigLoader.load_from_file("/nonexistent/connector.json")

    def test_load_invalid_json(self):
        """Test that malformed JSON raises ValueError."""
        config_file = _write_temp("{not json", '.json')

        try:
            with pytest.raises(ValueError, match="Invalid configuration file format"):
                ConfigLoader.load_from_file(config_file)
        finally:
            os.unlink(config_file)

    def test_load_non_mapping(self):
        """Test that a top-level list is rejected."""
        config_file = _write_temp("- a\n- b\n", '.yml')

        try:
            with pytest.raises(ValueError, match="mapping"):
                ConfigLoader.load_from_file(config_file)
        finally:
            os.unlink(config_file)

    def test_merge_configs(self):
        """Test merging multiple configuration dictionaries."""
        base_config = {
            "stream_name": "base",
            "checkpoint_store": {
                "connection_string": "localhost:2181",
                "path_prefix": "base_prefix"
            },
            "max_records_per_fetch": 3
        }
        override_config = {
            "stream_name": "override",
            "checkpoint_store": {
                "path_prefix": "override_prefix",
                "session_timeout_millis": 2000
            }
        }

        result = ConfigLoader.merge_configs(base_config, override_config)

        assert result == {
            "stream_name": "override",
            "checkpoint_store": {
                "connection_string": "localhost:2181",
                "path_prefix": "override_prefix",
                "session_timeout_millis": 2000
            },
            "max_records_per_fetch": 3
        }

    def test_load_config_without_sources(self):
        """Test that no sources gives an empty configuration."""
        assert ConfigLoader.load_config() == {}


class TestConnectorConfigLoading:
    """Test building ConnectorConfig from dictionaries and files."""

    def test_from_dict_complete(self):
        """Test creating ConnectorConfig from a complete dictionary."""
        config = ConnectorConfig.from_dict({
            "stream_name": "orders",
            "region": "eu-west-1",
            "max_records_per_fetch": 500,
            "initial_position": "TRIM_HORIZON",
            "checkpoint_interval_millis": 30000,
            "checkpoint_store": {
                "connection_string": "zk1:2181,zk2:2181",
                "path_prefix": "orders_spout",
                "session_timeout_millis": 20000
            },
            "record_decoder": "kinesis_stream_connector.stream.record_decoder:DefaultRecordDecoder",
            "topology_name": "orders-topology"
        })

        assert config.stream_name == "orders"
        assert config.region == Region.EU_WEST_1
        assert config.max_records_per_fetch == 500
        assert config.initial_position == InitialStreamPosition.TRIM_HORIZON
        assert config.checkpoint_interval_millis == 30000
        assert config.checkpoint_store_connection_string == "zk1:2181,zk2:2181"
        assert config.checkpoint_store_path_prefix == "orders_spout"
        assert config.checkpoint_store_session_timeout_millis == 20000
        assert isinstance(config.record_decoder, DefaultRecordDecoder)
        assert config.owning_topology_name == "orders-topology"

    def test_from_dict_with_defaults(self):
        """Test creating ConnectorConfig with only the required keys."""
        config = ConnectorConfig.from_dict({
            "stream_name": "orders",
            "checkpoint_store_connection_string": "localhost:2181"
        })

        assert config.to_dict() == ConnectorConfig("orders", "localhost:2181").to_dict()

    def test_to_dict_round_trip(self):
        """Test that to_dict() output is accepted by from_dict()."""
        original = (
            ConnectorConfig("orders", "localhost:2181")
            .with_region(Region.AP_NORTHEAST_1)
            .with_checkpoint_store_session_timeout_millis(1234)
        )

        assert ConnectorConfig.from_dict(original.to_dict()).to_dict() == original.to_dict()

    def test_nested_decoder_round_trip(self):
        """Test that a decoder nested in another class survives to_dict()/from_dict()."""
        original = ConnectorConfig("orders", "localhost:2181").with_record_decoder(
            DecoderHolder.NestedDecoder()
        )
        data = original.to_dict()
        assert data["record_decoder"].endswith(":DecoderHolder.NestedDecoder")

        restored = ConnectorConfig.from_dict(data)

        assert type(restored.record_decoder) is DecoderHolder.NestedDecoder

    @pytest.mark.parametrize("data,missing", [
        ({"checkpoint_store": {"connection_string": "localhost:2181"}}, "stream_name"),
        ({"stream_name": "orders"}, "connection_string"),
    ])
    def test_from_dict_missing_required(self, data, missing):
        """Test that missing required keys raise ValueError."""
        with pytest.raises(ValueError, match=missing):
            ConnectorConfig.from_dict(data)

    def test_from_dict_invalid_value(self):
        """Test that invalid values are rejected by the fluent checks."""
        with pytest.raises(ValueError, match="checkpoint_interval_millis"):
            ConnectorConfig.from_dict({
                "stream_name": "orders",
                "checkpoint_store": {"connection_string": "localhost:2181"},
                "checkpoint_interval_millis": -5
            })

    def test_from_dict_unknown_decoder(self):
        """Test that an unimportable decoder path raises ValueError."""
        with pytest.raises(ValueError, match="record decoder"):
            ConnectorConfig.from_dict({
                "stream_name": "orders",
                "checkpoint_store": {"connection_string": "localhost:2181"},
                "record_decoder": "kinesis_stream_connector.stream.record_decoder.NoSuchDecoder"
            })

    @pytest.mark.parametrize("path", [
        "collections:OrderedDict",
        "builtins.str",
        "kinesis_stream_connector.stream.record_decoder:RecordDecoder.decode",
        "kinesis_stream_connector.stream.record_decoder:RecordDecoder",
    ])
    def test_from_dict_non_decoder_path(self, path):
        """Test that an import path to something other than a decoder class is rejected."""
        with pytest.raises(ValueError, match="not a RecordDecoder class"):
            ConnectorConfig.from_dict({
                "stream_name": "orders",
                "checkpoint_store": {"connection_string": "localhost:2181"},
                "record_decoder": path
            })

    def test_from_dict_non_decoder_object(self):
        """Test that a non-decoder object under record_decoder is rejected."""
        with pytest.raises(ValueError, match="RecordDecoder instance"):
            ConnectorConfig.from_dict({
                "stream_name": "orders",
                "checkpoint_store": {"connection_string": "localhost:2181"},
                "record_decoder": 123
            })

    def test_from_dict_checkpoint_store_not_mapping(self):
        """Test that a scalar checkpoint_store section raises ValueError."""
        with pytest.raises(ValueError, match="must be a mapping"):
            ConnectorConfig.from_dict({
                "stream_name": "orders",
                "checkpoint_store": "zk:2181"
            })

    def test_from_file_yaml(self):
        """Test loading ConnectorConfig from a YAML file over a base config."""
        config_file = _write_temp(
            "stream_name: clicks\n"
            "initial_position: AT_TIMESTAMP\n"
            "checkpoint_store:\n"
            "  connection_string: zk:2181\n",
            '.yaml'
        )

        try:
            config = ConnectorConfig.from_file(
                config_file,
                base_config={"region": "US_EAST_2", "stream_name": "ignored"}
            )

            assert config.stream_name == "clicks"
            assert config.region == Region.US_EAST_2
            assert config.initial_position == InitialStreamPosition.AT_TIMESTAMP
            assert config.checkpoint_store_connection_string == "zk:2181"
        finally:
            os.unlink(config_file)

    def test_from_file_json(self):
        """Test loading ConnectorConfig from a JSON file."""
        config_file = _write_temp(json.dumps({
            "stream_name": "clicks",
            "checkpoint_store": {"connection_string": "zk:2181"},
            "max_records_per_fetch": 25
        }), '.json')

        try:
            config = ConnectorConfig.from_file(config_file)
            assert config.max_records_per_fetch == 25
        finally:
            os.unlink(config_file)
