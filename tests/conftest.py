"""
Shared pytest fixtures for Eye on Cursor preferences tests.
"""
import os
import sys
import json
import tempfile
import pytest
from unittest.mock import MagicMock

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from eyeprefs.config import SettingsStore


@pytest.fixture
def temp_config_dir():
    """Create temporary config directory."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield tmpdir


@pytest.fixture
def config_file(temp_config_dir):
    return os.path.join(temp_config_dir, 'eye-on-cursor', 'settings.json')


@pytest.fixture
def store(config_file):
    """SettingsStore writing to a temporary file."""
    return SettingsStore(config_file)


@pytest.fixture
def write_settings(config_file):
    """Write raw settings JSON before a store is created."""
    def _write(data):
        os.makedirs(os.path.dirname(config_file), exist_ok=True)
        with open(config_file, 'w', encoding='utf-8') as f:
            if isinstance(data, str):
                f.write(data)
            else:
                json.dump(data, f)
        return config_file
    return _write


@pytest.fixture
def mock_store():
    """Mock store with typed getters returning fixed values."""
    store = MagicMock()
    store.get_enum.return_value = 1
    store.get_int.return_value = 3
    store.get_boolean.return_value = False
    store.connect.return_value = 1
    return store


@pytest.fixture
def sample_metadata():
    return {
        "name": "Eye on Cursor",
        "uuid": "eye-on-cursor@djinnalexio.github.io",
        "version": 7,
        "description": "Eyes that follow your cursor",
        "url": "https://github.com/djinnalexio/eye-on-cursor",
        "shell-version": ["46", "47"],
    }
