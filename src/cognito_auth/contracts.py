"""Contracts and shared errors for plugging providers into a host auth framework."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Protocol, runtime_checkable

from .models import CommonSocialProfile, OAuth2Info, OAuth2Settings


class ProviderError(Exception):
    """Standardized provider error with HTTP-style status information."""

    def __init__(self, error: str, description: str | None = None, status_code: int = 400):
        super().__init__(description or error)
        self.error = error
        self.description = description
        self.status_code = status_code


class ProfileRetrievalError(ProviderError):
    """The provider could not deliver a profile for the given credentials."""

    def __init__(self, description: str, status_code: int = 400):
        super().__init__("profile_retrieval_failed", description, status_code=status_code)


class ProfileParseError(ProviderError):
    """The provider answered with a body that does not match the expected shape."""

    def __init__(self, description: str, status_code: int = 502):
        super().__init__("invalid_profile", description, status_code=status_code)


class MissingCustomPropertyError(ProviderError, LookupError):
    """A custom property required to build a request is absent from the settings."""

    def __init__(self, key: str, provider_id: str):
        super().__init__(
            "invalid_configuration",
            f"[{provider_id}] Missing custom property '{key}' in provider settings",
            status_code=500,
        )
        self.key = key


@runtime_checkable
class HTTPResponse(Protocol):
    """The slice of an HTTP response used by providers."""

    status_code: int

    def json(self) -> Any: ...


@runtime_checkable
class HTTPLayer(Protocol):
    """Performs authenticated requests on behalf of providers."""

    async def get(self, url: str, *, headers: Mapping[str, str] | None = None) -> HTTPResponse:
        """Issue a GET request and return the response."""


@runtime_checkable
class SocialStateHandler(Protocol):
    """Host-owned handler for the OAuth2 ``state`` parameter.

    Providers only carry it along; it is used by the authorization step of the
    flow, which the host framework drives.
    """

    async def state(self) -> str:
        """Build a serialized state value for a new authorization request."""

    async def unserialize(self, state: str) -> bool:
        """Validate a state value returned by the provider."""


@runtime_checkable
class SocialProfileParser(Protocol):
    """Maps provider content to a normalized profile."""

    def parse(self, content: Any, auth_info: OAuth2Info | None = None) -> CommonSocialProfile:
        """Parse the provider content into a profile."""


@runtime_checkable
class SocialProvider(Protocol):
    """Interface all social providers must implement."""

    id: str
    settings: OAuth2Settings

    async def retrieve_profile(self, auth_info: OAuth2Info) -> CommonSocialProfile:
        """Retrieve the profile for the given auth info."""

    def with_settings(self, f: Callable[[OAuth2Settings], OAuth2Settings]) -> SocialProvider:
        """Return a copy of the provider holding ``f(settings)``."""


__all__ = [
    "HTTPLayer",
    "HTTPResponse",
    "MissingCustomPropertyError",
    "ProfileParseError",
    "ProfileRetrievalError",
    "ProviderError",
    "SocialProfileParser",
    "SocialProvider",
    "SocialStateHandler",
]
