import pytest

from cognito_auth.contracts import SocialProvider
from cognito_auth.models import OAuth2Settings
from cognito_auth.providers.cognito import AmazonCognitoProvider
from cognito_auth.providers.registry import SocialProviderRegistry
from tests.provider_testkit import FakeHTTPLayer


def test_get_by_id() -> None:
    provider = AmazonCognitoProvider(FakeHTTPLayer(), None, OAuth2Settings())
    registry = SocialProviderRegistry([provider])

    assert registry.get("cognito") is provider
    assert registry.get("github") is None
    assert "cognito" in registry
    assert registry.ids == ["cognito"]
    assert len(registry) == 1


def test_duplicate_ids_rejected() -> None:
    layer = FakeHTTPLayer()
    with pytest.raises(ValueError, match="Duplicate provider id: cognito"):
        SocialProviderRegistry(
            [
                AmazonCognitoProvider(layer, None, OAuth2Settings()),
                AmazonCognitoProvider(layer, None, OAuth2Settings()),
            ]
        )


def test_provider_satisfies_protocol() -> None:
    provider = AmazonCognitoProvider(FakeHTTPLayer(), None, OAuth2Settings())
    assert isinstance(provider, SocialProvider)
