# file: tests/conftest.py

import pytest
from unittest.mock import MagicMock, patch

from gamecommands.core.game_state import GameState

@pytest.fixture
def temp_config_dir(tmp_path):
    """Creates a temporary directory for config files."""
    return tmp_path

@pytest.fixture
def game_state():
    """A fresh game state for each test; nothing is shared between tests."""
    return GameState()

# --- Global Mock for psutil.Process ---
# This ensures that MemoryLogFilter uses a mock process during tests,
# preventing actual system calls.
class MockProcess:
    def memory_info(self):
        return MagicMock(rss=100 * 1024 * 1024) # Default 100MB RSS

mock_psutil_process = MockProcess()

@pytest.fixture(scope="session", autouse=True)
def mock_psutil_process_globally():
    """Globally patches psutil.Process for all tests."""
    with patch('psutil.Process', return_value=mock_psutil_process):
        yield
