import pytest
import json
import sys
import os
import logging

# Add project root to sys.path to allow importing project modules
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

import config_loader
import constants

def test_load_config_without_file_returns_defaults():
    """No config path means transport defaults: no timeout, no custom headers, unbounded workers."""
    config = config_loader.load_config()
    assert config == {
        'user_agent': None,
        'request_timeout_seconds': None,
        'max_workers': None,
        'chunk_size': constants.DEFAULT_CHUNK_SIZE,
        'log_file': None,
        'log_level': constants.DEFAULT_LOG_LEVEL,
    }


def test_load_config_valid(tmp_path):
    """Tests loading a valid configuration file."""
    valid_config_data = {
        "user_agent": "TestAgent/1.0",
        "request_timeout_seconds": 15,
        "max_workers": 4,
        "chunk_size": 1024,
        "log_file": "logs/page-loader.log",
        "log_level": "debug",
    }
    config_file = tmp_path / "valid_config.json"
    config_file.write_text(json.dumps(valid_config_data))

    loaded_config = config_loader.load_config(str(config_file))

    assert loaded_config['user_agent'] == "TestAgent/1.0"
    assert loaded_config['request_timeout_seconds'] == 15
    assert loaded_config['max_workers'] == 4
    assert loaded_config['chunk_size'] == 1024
    assert loaded_config['log_file'] == "logs/page-loader.log"
    assert loaded_config['log_level'] == "DEBUG" # Normalized


def test_load_config_partial_file_applies_defaults(tmp_path):
    config_file = tmp_path / "partial.json"
    config_file.write_text(json.dumps({"max_workers": 2}))

    loaded_config = config_loader.load_config(str(config_file))

    assert loaded_config['max_workers'] == 2
    assert loaded_config['request_timeout_seconds'] is None
    assert loaded_config['chunk_size'] == constants.DEFAULT_CHUNK_SIZE


def test_load_config_unknown_keys_are_ignored(tmp_path, caplog):
    config_file = tmp_path / "unknown.json"
    config_file.write_text(json.dumps({"target_domain": "example.com", "max_workers": 3}))

    with caplog.at_level(logging.WARNING):
        loaded_config = config_loader.load_config(str(config_file))

    assert 'target_domain' not in loaded_config
    assert loaded_config['max_workers'] == 3
    assert "Ignoring unknown config keys" in caplog.text


# Expect ValueError for invalid JSON
def test_load_config_invalid_json(tmp_path):
    """Tests loading a file with invalid JSON raises ValueError."""
    config_file = tmp_path / "invalid_json.json"
    config_file.write_text('{"max_workers": 3, ...')

    with pytest.raises(ValueError) as e:
        config_loader.load_config(str(config_file))

    assert "Error decoding JSON" in str(e.value)
    assert isinstance(e.value.__cause__, json.JSONDecodeError)


def test_load_config_not_an_object(tmp_path):
    config_file = tmp_path / "list.json"
    config_file.write_text("[1, 2, 3]")
    with pytest.raises(ValueError) as e:
        config_loader.load_config(str(config_file))
    assert "must contain a JSON object" in str(e.value)


@pytest.mark.parametrize("key, value, message", [
    ("request_timeout_seconds", -1, "Config 'request_timeout_seconds' must be a positive number or null."),
    ("request_timeout_seconds", "fast", "Config 'request_timeout_seconds' must be a positive number or null."),
    ("max_workers", 0, "Config 'max_workers' must be a positive integer or null."),
    ("max_workers", True, "Config 'max_workers' must be a positive integer or null."),
    ("chunk_size", None, "Config 'chunk_size' must be a positive integer."),
    ("user_agent", 42, "Config 'user_agent' must be a string or null."),
    ("log_file", ["a"], "Config 'log_file' must be a string or null."),
    ("log_level", "LOUD", "Config 'log_level' must be one of"),
])
def test_load_config_invalid_values(tmp_path, key, value, message):
    """Tests invalid option values raise ValueError with a descriptive message."""
    config_file = tmp_path / "invalid_value_config.json"
    config_file.write_text(json.dumps({key: value}))

    with pytest.raises(ValueError) as e:
        config_loader.load_config(str(config_file))

    assert message in str(e.value)


# Expect FileNotFoundError
def test_load_config_file_not_found(tmp_path):
    """Tests loading a non-existent config file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        config_loader.load_config(str(tmp_path / "non_existent_config.json"))
