"""Lookup of configured social providers by their id."""

from __future__ import annotations

from collections.abc import Iterable

from .base import OAuth2Provider


class SocialProviderRegistry:
    """Holds the providers a host application has configured.

    A user can link several identities; the provider id in ``LoginInfo``
    selects the provider that owns each of them.
    """

    def __init__(self, providers: Iterable[OAuth2Provider]):
        self._providers: dict[str, OAuth2Provider] = {}
        for provider in providers:
            if provider.id in self._providers:
                raise ValueError(f"Duplicate provider id: {provider.id}")
            self._providers[provider.id] = provider

    @property
    def ids(self) -> list[str]:
        return list(self._providers)

    def get(self, provider_id: str) -> OAuth2Provider | None:
        return self._providers.get(provider_id)

    def __contains__(self, provider_id: object) -> bool:
        return provider_id in self._providers

    def __len__(self) -> int:
        return len(self._providers)
