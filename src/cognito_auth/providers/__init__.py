"""OAuth2 provider implementations.

This module contains the concrete providers and the lookup registry.
"""

from .base import UNSPECIFIED_PROFILE_ERROR, OAuth2Provider
from .cognito import AmazonCognitoProfileParser, AmazonCognitoProvider, BaseAmazonCognitoProvider
from .registry import SocialProviderRegistry

__all__ = [
    "UNSPECIFIED_PROFILE_ERROR",
    "AmazonCognitoProfileParser",
    "AmazonCognitoProvider",
    "BaseAmazonCognitoProvider",
    "OAuth2Provider",
    "SocialProviderRegistry",
]
