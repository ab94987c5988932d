"""Pytest configuration and shared fixtures for selector-monads tests."""

from types import SimpleNamespace

import pytest


@pytest.fixture(autouse=True)
def _reset_library_config(monkeypatch):
    """Start every test with no stored config and a clean environment."""
    from selector_monads._config import reset

    for name in ("SELECTOR_MONADS_LOG_LEVEL", "SELECTOR_MONADS_LOG_FORMAT", "SELECTOR_MONADS_TRACE"):
        monkeypatch.delenv(name, raising=False)
    reset()
    yield
    reset()


@pytest.fixture
def sample_just():
    """Sample Just value for testing."""
    from selector_monads import Just

    return Just("hello")


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from selector_monads import Nothing

    return Nothing


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from selector_monads import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from selector_monads import Err

    return Err(ValueError("test error"))


@pytest.fixture
def app_state():
    """Root state with a session pointing at user "1"."""
    return {
        "session": {"user_id": "1"},
        "users": {
            "1": {
                "id": "1",
                "created_at": "",
                "profile_url": "http://website.test/user/1/profile",
            },
        },
    }


@pytest.fixture
def call_counter():
    """A callable that records the arguments of every call."""
    calls = []

    def counter(*args):
        calls.append(args)

    return SimpleNamespace(fn=counter, calls=calls)
