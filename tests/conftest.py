"""Pytest configuration and fixtures for authorize-intent tests."""

import hashlib
from typing import Dict

import pytest

from authorize_intent import AuthorizeIntentBuilder


@pytest.fixture
def client_config() -> Dict[str, str]:
    """Return the identity a test client registers with."""
    return {
        "package_name": "com.example.app",
        "client_id": "client123",
        "redirect_uri": "https://app.example.com/callback",
    }


@pytest.fixture
def make_builder(client_config):
    """Create builders for the test client, with optional overrides."""

    def _make(**overrides) -> AuthorizeIntentBuilder:
        config = {**client_config, "digest": hashlib.sha256, **overrides}
        return AuthorizeIntentBuilder(
            config["package_name"],
            config["client_id"],
            config["digest"],
            config["redirect_uri"],
        )

    return _make


@pytest.fixture
def builder(make_builder) -> AuthorizeIntentBuilder:
    """Return a builder with the default configuration."""
    return make_builder()


@pytest.fixture
def recorder():
    """Create a callable that records the arguments of each call."""

    class Recorder:
        def __init__(self):
            self.calls = []

        def __call__(self, *args):
            self.calls.append(args)

    return Recorder
