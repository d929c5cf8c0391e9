"""
Global pytest configuration and fixtures.
"""
from datetime import datetime, timedelta, timezone
from typing import Dict

import pytest

from freelancerpro.config import FreelancerProConfig, reload_config
from freelancerpro.services import AuthService, DataStore, build_demo_data
from freelancerpro.services.demo_data import DEMO_PASSWORD
from freelancerpro.services.passwords import hash_password
from freelancerpro.storage import InMemoryStorage

# Cheap hash so tests do not spend time in scrypt
FAST_HASH_METHOD = "pbkdf2:sha256:1000"


class TickingClock:
    """Deterministic clock advancing one second per call."""

    def __init__(self, start: datetime = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)):
        self.current = start
        self.calls = 0

    def __call__(self) -> datetime:
        value = self.current
        self.current += timedelta(seconds=1)
        self.calls += 1
        return value


class FrozenClock:
    """Clock that never advances."""

    def __init__(self, instant: datetime = datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)):
        self.instant = instant

    def __call__(self) -> datetime:
        return self.instant


@pytest.fixture
def test_env_vars(tmp_path) -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        "FREELANCERPRO_DATA_DIR": str(tmp_path / "data"),
        "ENVIRONMENT": "testing",
        "DEBUG": "false",
        "LOG_LEVEL": "WARNING",
        "PASSWORD_HASH_METHOD": FAST_HASH_METHOD,
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)

    # Clear the global config to force reload with test values
    import freelancerpro.config.settings
    freelancerpro.config.settings._config = None

    yield test_env_vars

    # Clean up
    freelancerpro.config.settings._config = None


@pytest.fixture
def test_config(mock_env) -> FreelancerProConfig:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def frozen_clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def memory_storage() -> InMemoryStorage:
    return InMemoryStorage()


@pytest.fixture
def store(memory_storage, clock) -> DataStore:
    """Empty data store over in-memory storage with a ticking clock."""
    return DataStore(memory_storage, clock=clock)


@pytest.fixture
def demo_data():
    """The demo document with a cheaply hashed demo password."""
    return build_demo_data(password_hash=hash_password(DEMO_PASSWORD, FAST_HASH_METHOD))


@pytest.fixture
def demo_store(store, demo_data) -> DataStore:
    """Data store seeded with the demo document."""
    store.load_demo_data(demo_data)
    return store


@pytest.fixture
def auth(store) -> AuthService:
    return AuthService(store, hash_method=FAST_HASH_METHOD)


# Pytest configuration for different test types
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )
    config.addinivalue_line(
        "markers", "slow: mark test as slow running"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        # Add unit marker for tests in tests/unit/
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)

        # Add integration marker for tests in tests/integration/
        elif "tests/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
