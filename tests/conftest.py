"""
Global pytest configuration and fixtures.
"""

import logging

import pytest

from cognito_auth.models import OAuth2Settings
from cognito_auth.providers.cognito import AmazonCognitoProvider
from tests.provider_testkit import FakeHTTPLayer, FakeResponse, FakeStateHandler


@pytest.fixture
def cognito_settings() -> OAuth2Settings:
    return OAuth2Settings(
        client_id="cid",
        client_secret="secret",
        custom_properties={"domainName": "acme"},
    )


@pytest.fixture
def state_handler() -> FakeStateHandler:
    return FakeStateHandler()


@pytest.fixture
def make_provider(cognito_settings, state_handler):
    """Build a provider around a fake HTTP layer answering with ``payload``."""

    def _make(payload=None, *, status_code=200, settings=None, error=None):
        http_layer = FakeHTTPLayer(FakeResponse(status_code, payload or {}), error=error)
        provider = AmazonCognitoProvider(http_layer, state_handler, settings or cognito_settings)
        return provider, http_layer

    return _make


@pytest.fixture(autouse=True)
def reset_root_logger():
    """Keep CLI logging configuration from leaking between tests."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
