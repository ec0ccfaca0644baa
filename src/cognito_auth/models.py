"""Pydantic models shared between the host framework and the Cognito adapter.

These types describe what flows across the adapter boundary: the provider
settings supplied by the host application, the token bundle produced by the
OAuth2 flow, and the normalized profile handed back to the framework.

## Security-relevant fields

- ``OAuth2Settings.client_secret``: never logged; masked by ``masked_dump()``.
- ``OAuth2Info.access_token``: sent only as a Bearer header, never logged.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import Field, field_serializer, field_validator

from ._base import FrozenModel


class OAuth2Info(FrozenModel):
    """Token bundle obtained by the host framework through the OAuth2 flow.

    Only ``access_token`` is read by the Cognito adapter.
    """

    access_token: str
    token_type: str | None = None
    expires_in: int | None = None
    refresh_token: str | None = None
    params: dict[str, str] | None = None


class OAuth2Settings(FrozenModel):
    """Per-deployment configuration for one OAuth2 provider instance.

    ``api_url`` overrides the provider's built-in profile endpoint template.
    ``custom_properties`` carries provider-specific values; the Cognito
    provider requires ``domainName`` there when a profile is fetched.
    """

    authorization_url: str | None = None
    access_token_url: str | None = None
    redirect_url: str | None = None
    api_url: str | None = None
    client_id: str | None = None
    client_secret: str | None = None
    scope: str | None = None
    authorization_params: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    access_token_params: Mapping[str, str] = Field(default_factory=dict, validate_default=True)
    custom_properties: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator(
        "authorization_params", "access_token_params", "custom_properties", mode="after"
    )
    @classmethod
    def _read_only(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        # copies made by model_copy share these, so they must not be writable
        return MappingProxyType(dict(value))

    @field_serializer("authorization_params", "access_token_params", "custom_properties")
    def _as_dict(self, value: Mapping[str, str]) -> dict[str, str]:
        return dict(value)

    def masked_dump(self) -> dict[str, Any]:
        """Dump the settings with the client secret replaced by a mask."""
        data = self.model_dump()
        if data.get("client_secret"):
            data["client_secret"] = "********"
        return data


class LoginInfo(FrozenModel):
    """Identifies a user within one identity provider."""

    provider_id: str
    provider_key: str


class CommonSocialProfile(FrozenModel):
    """Normalized profile shape shared by all identity-provider adapters."""

    login_info: LoginInfo
    first_name: str | None = None
    last_name: str | None = None
    full_name: str | None = None
    email: str | None = None
    avatar_url: str | None = None


__all__ = [
    "CommonSocialProfile",
    "LoginInfo",
    "OAuth2Info",
    "OAuth2Settings",
]
