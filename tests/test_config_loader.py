# file: tests/test_config_loader.py

import pytest
import json
from unittest.mock import patch, mock_open

from gamecommands.utils.config_loader import ConfigLoader
from gamecommands.core.exceptions import ConfigurationError

@pytest.fixture
def config_loader(temp_config_dir):
    """Initializes ConfigLoader with a temporary directory."""
    return ConfigLoader(temp_config_dir)

def test_config_loader_creates_directory(tmp_path):
    """Tests if the config directory is created on initialization."""
    config_dir = tmp_path / "nested" / "config"
    ConfigLoader(config_dir)

    assert config_dir.is_dir()

def test_load_all_configs_creates_defaults(config_loader, temp_config_dir):
    """Tests that default config files are created if they don't exist."""
    config_loader.load_all_configs()

    for filename in config_loader.defaults.keys():
        assert (temp_config_dir / filename).exists()

def test_load_all_configs_includes_serialization_defaults(config_loader):
    config_loader.load_all_configs()

    serialization_config = config_loader.get_config("serialization_config.json")
    assert serialization_config["pickle_protocol"] is None
    assert serialization_config["commands_file"] == "commands.bin"

    system_config = config_loader.get_config("system_config.json")
    assert system_config["logging"]["level"] == "INFO"

def test_load_all_configs_picks_up_extra_files(config_loader, temp_config_dir):
    (temp_config_dir / "extra_config.json").write_text(json.dumps({"answer": 42}))

    config_loader.load_all_configs()

    assert config_loader.get("extra_config.json", "answer") == 42

def test_existing_config_is_merged_with_defaults(config_loader, temp_config_dir):
    """Keys missing from an existing file fall back to defaults."""
    (temp_config_dir / "serialization_config.json").write_text(json.dumps({"pickle_protocol": 2}))

    config_loader.load_all_configs()

    assert config_loader.get("serialization_config.json", "pickle_protocol") == 2
    assert config_loader.get("serialization_config.json", "commands_file") == "commands.bin"

def test_save_config_writes_to_file(config_loader, temp_config_dir):
    """Tests saving a configuration to a file."""
    test_data = {"key": "value"}
    filename = "test_config.json"

    config_loader.save_config(filename, test_data)

    file_path = temp_config_dir / filename
    assert file_path.exists()
    with open(file_path, 'r') as f:
        assert json.load(f) == test_data
    assert config_loader.get_config(filename) == test_data

def test_load_config_handles_json_decode_error(config_loader, temp_config_dir):
    """Tests that a corrupt JSON file is handled gracefully."""
    filename = "corrupt_config.json"
    file_path = temp_config_dir / filename

    with open(file_path, 'w') as f:
        f.write("{'invalid_json':}")

    default_data = {"default": True}
    loaded_config = config_loader._load_config(filename, default_data)

    # Should return default data
    assert loaded_config == default_data
    # Should have moved the corrupt file to a timestamped backup
    assert not file_path.exists()
    assert len(list(temp_config_dir.glob(f"{filename}.*.bak"))) == 1

def test_load_config_rejects_non_object_json(config_loader, temp_config_dir):
    filename = "list_config.json"
    (temp_config_dir / filename).write_text("[1, 2, 3]")

    assert config_loader._load_config(filename, {"default": True}) == {"default": True}

def test_save_config_raises_configuration_error_on_io_error(config_loader):
    """Tests that save_config raises ConfigurationError on file write failure."""
    with patch("builtins.open", mock_open()) as mocked_file:
        mocked_file.side_effect = IOError("Disk full")

        with pytest.raises(ConfigurationError):
            config_loader.save_config("any_file.json", {"data": "any"})

def test_save_config_raises_configuration_error_on_unserializable_data(config_loader):
    with pytest.raises(ConfigurationError):
        config_loader.save_config("bad.json", {"data": object()})

def test_get_config_before_loading_returns_defaults(config_loader):
    assert config_loader.get_config("system_config.json") == {"logging": {"level": "INFO"}}
    assert config_loader.get_config("unknown.json") == {}

def test_get_returns_default_for_missing_key(config_loader):
    config_loader.load_all_configs()

    assert config_loader.get("system_config.json", "missing", "fallback") == "fallback"

def test_get_data_dir_returns_config_dir(config_loader, temp_config_dir):
    assert config_loader.get_data_dir() == temp_config_dir
