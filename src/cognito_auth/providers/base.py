"""Shared behavior for OAuth2 social providers."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

from ..contracts import (
    HTTPLayer,
    ProfileRetrievalError,
    ProviderError,
    SocialProfileParser,
    SocialStateHandler,
)
from ..models import CommonSocialProfile, OAuth2Info, OAuth2Settings

logger = logging.getLogger(__name__)

UNSPECIFIED_PROFILE_ERROR = "[%s] Error retrieving profile information"

P = TypeVar("P", bound="OAuth2Provider")


class OAuth2Provider:
    """Base class for providers that build a profile from an OAuth2 access token.

    Subclasses set ``id`` and ``profile_parser`` and implement ``build_profile``.
    Instances are immutable value objects: ``with_settings`` returns a new
    provider instead of changing this one.
    """

    id: str
    profile_parser: SocialProfileParser

    def __init__(
        self,
        http_layer: HTTPLayer,
        state_handler: SocialStateHandler | None,
        settings: OAuth2Settings,
    ):
        self._http_layer = http_layer
        self._state_handler = state_handler
        self._settings = settings

    @property
    def http_layer(self) -> HTTPLayer:
        return self._http_layer

    @property
    def state_handler(self) -> SocialStateHandler | None:
        return self._state_handler

    @property
    def settings(self) -> OAuth2Settings:
        return self._settings

    @property
    def urls(self) -> dict[str, str]:
        """URLs needed to retrieve the profile data."""
        return {}

    async def build_profile(self, auth_info: OAuth2Info) -> CommonSocialProfile:
        raise NotImplementedError

    async def retrieve_profile(self, auth_info: OAuth2Info) -> CommonSocialProfile:
        """Build the profile, normalizing unexpected failures.

        Provider errors propagate as they are. Anything else (transport
        failures, undecodable bodies) is wrapped in a ``ProfileRetrievalError``
        chained from the original exception.
        """
        try:
            return await self.build_profile(auth_info)
        except ProviderError:
            raise
        except Exception as exc:
            logger.warning(
                "Profile retrieval failed unexpectedly",
                extra={"provider": self.id, "error_type": type(exc).__name__},
            )
            raise ProfileRetrievalError(UNSPECIFIED_PROFILE_ERROR % self.id) from exc

    def with_settings(self: P, f: Callable[[OAuth2Settings], OAuth2Settings]) -> P:
        """Get a provider initialized with new settings.

        Args:
            f: Receives the current settings and returns different settings.

        Returns:
            A new provider sharing this provider's HTTP layer and state handler.
        """
        return type(self)(self._http_layer, self._state_handler, f(self._settings))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self.id!r})"
