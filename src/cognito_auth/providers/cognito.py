"""Amazon Cognito OAuth2 provider.

Fetches the user profile from the Cognito ``oauth2/userInfo`` endpoint of a
hosted user-pool domain and maps it onto ``CommonSocialProfile``.

See https://docs.aws.amazon.com/cognito/latest/developerguide
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ConfigDict, StrictStr, ValidationError, field_validator

from .._base import FrozenModel
from ..contracts import MissingCustomPropertyError, ProfileParseError, ProfileRetrievalError
from ..models import CommonSocialProfile, LoginInfo, OAuth2Info
from .base import OAuth2Provider

logger = logging.getLogger(__name__)

ID = "cognito"
API = "https://%s.auth.eu-central-1.amazoncognito.com/oauth2/userInfo"
DOMAIN_NAME_PROPERTY = "domainName"

SPECIFIED_PROFILE_ERROR = (
    "[%s] Error retrieving profile information. Error message: %s, type: %s, code: %s"
)


class _CognitoError(FrozenModel):
    """Error object nested under the top-level ``error`` key."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    message: StrictStr
    type: StrictStr
    code: int

    @field_validator("code", mode="before")
    @classmethod
    def _integral_number(cls, value: Any) -> Any:
        # JSON numbers such as 401.0 are accepted; booleans and strings are not
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ValueError("code must be a JSON number")
        if isinstance(value, float) and not value.is_integer():
            raise ValueError("code must be an integral number")
        return int(value)


class _CognitoUserInfoResponse(FrozenModel):
    """Success body of the userInfo endpoint."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    username: StrictStr
    given_name: str | None = None
    family_name: str | None = None
    email: str | None = None

    @field_validator("given_name", "family_name", "email", mode="before")
    @classmethod
    def _non_string_as_missing(cls, value: Any) -> Any:
        return value if isinstance(value, str) else None


class AmazonCognitoProfileParser:
    """Profile parser for the common social profile."""

    def parse(self, content: Any, auth_info: OAuth2Info | None = None) -> CommonSocialProfile:
        if not isinstance(content, dict):
            raise ProfileParseError(f"[{ID}] Profile response was not a JSON object")
        try:
            parsed = _CognitoUserInfoResponse.model_validate(content)
        except ValidationError as exc:
            raise ProfileParseError(f"[{ID}] Profile response was invalid: {exc}") from exc

        # may need adjustments according to the user pool's attribute mapping
        return CommonSocialProfile(
            login_info=LoginInfo(provider_id=ID, provider_key=parsed.username),
            first_name=parsed.given_name,
            last_name=parsed.family_name,
            full_name=parsed.username,
            email=parsed.email,
        )


class BaseAmazonCognitoProvider(OAuth2Provider):
    """Base Amazon Cognito OAuth2 provider."""

    id = ID

    @property
    def urls(self) -> dict[str, str]:
        return {"api": self.settings.api_url or API}

    def profile_url(self) -> str:
        """Endpoint URL with the configured user-pool domain substituted in."""
        try:
            domain_name = self.settings.custom_properties[DOMAIN_NAME_PROPERTY]
        except KeyError:
            raise MissingCustomPropertyError(DOMAIN_NAME_PROPERTY, self.id) from None
        template = self.urls["api"]
        # an override without a placeholder is used verbatim
        if "%s" not in template:
            return template
        return template % domain_name

    async def build_profile(self, auth_info: OAuth2Info) -> CommonSocialProfile:
        """Build the social profile.

        Args:
            auth_info: The auth info received from the provider.

        Returns:
            The normalized profile.

        Raises:
            MissingCustomPropertyError: ``domainName`` is not configured.
            ProfileRetrievalError: Cognito answered with an error object.
            ProfileParseError: The response body has an unexpected shape.
        """
        url = self.profile_url()
        logger.debug("Fetching Cognito profile", extra={"provider": self.id, "url": url})
        resp = await self.http_layer.get(
            url, headers={"Authorization": f"Bearer {auth_info.access_token}"}
        )
        payload = resp.json()

        error = payload.get("error") if isinstance(payload, dict) else None
        if isinstance(error, dict):
            try:
                parsed_error = _CognitoError.model_validate(error)
            except ValidationError as exc:
                raise ProfileParseError(f"[{self.id}] Error response was invalid: {exc}") from exc
            logger.warning(
                "Cognito userInfo endpoint returned an error",
                extra={
                    "provider": self.id,
                    "endpoint": "userInfo",
                    "status_code": resp.status_code,
                    "provider_error": parsed_error.type,
                },
            )
            raise ProfileRetrievalError(
                SPECIFIED_PROFILE_ERROR
                % (self.id, parsed_error.message, parsed_error.type, parsed_error.code)
            )

        return self.profile_parser.parse(payload, auth_info)


class AmazonCognitoProvider(BaseAmazonCognitoProvider):
    """The Amazon Cognito OAuth2 provider.

    Args:
        http_layer: The HTTP layer implementation.
        state_handler: The state handler implementation.
        settings: The provider settings.
    """

    profile_parser = AmazonCognitoProfileParser()


__all__ = [
    "API",
    "DOMAIN_NAME_PROPERTY",
    "ID",
    "SPECIFIED_PROFILE_ERROR",
    "AmazonCognitoProfileParser",
    "AmazonCognitoProvider",
    "BaseAmazonCognitoProvider",
]
