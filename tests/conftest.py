"""Shared fixtures for scw-connect tests."""

import pytest

from scw_connect.config.schema import ExecSettings, DEBUG_ENV, SECURE_ENV


@pytest.fixture(autouse=True)
def clean_flags(monkeypatch):
    """Run every test with DEBUG and exec_secure unset."""
    monkeypatch.delenv(DEBUG_ENV, raising=False)
    monkeypatch.delenv(SECURE_ENV, raising=False)


@pytest.fixture
def default_settings():
    """Settings with every flag off."""
    return ExecSettings()


@pytest.fixture
def debug_settings():
    return ExecSettings(debug=True)


@pytest.fixture
def secure_settings():
    return ExecSettings(secure=True)


@pytest.fixture
def server():
    """Addresses of a server reachable directly or through a gateway."""
    return {
        'public_addr': '51.15.1.2',
        'private_addr': '10.1.2.3',
        'gateway_addr': '51.15.9.9',
    }
