"""cognito-auth - Amazon Cognito OAuth2 profile adapter.

Fetches the user profile behind an OAuth2 access token from a Cognito hosted
user-pool domain and normalizes it for the host authentication framework.

## Quick Example

```python
from cognito_auth import AmazonCognitoProvider, HttpxHTTPLayer, OAuth2Info, OAuth2Settings

provider = AmazonCognitoProvider(
    HttpxHTTPLayer(),
    None,
    OAuth2Settings(custom_properties={"domainName": "acme"}),
)
profile = await provider.build_profile(OAuth2Info(access_token="..."))
print(profile.login_info.provider_key)
```
"""

from .contracts import (
    HTTPLayer,
    MissingCustomPropertyError,
    ProfileParseError,
    ProfileRetrievalError,
    ProviderError,
    SocialProfileParser,
    SocialProvider,
    SocialStateHandler,
)
from .http import HttpxHTTPLayer, create_http_client
from .models import CommonSocialProfile, LoginInfo, OAuth2Info, OAuth2Settings
from .providers import (
    AmazonCognitoProfileParser,
    AmazonCognitoProvider,
    BaseAmazonCognitoProvider,
    OAuth2Provider,
    SocialProviderRegistry,
)

__all__ = [
    # Models
    "CommonSocialProfile",
    "LoginInfo",
    "OAuth2Info",
    "OAuth2Settings",
    # Contracts
    "HTTPLayer",
    "SocialProfileParser",
    "SocialProvider",
    "SocialStateHandler",
    # Errors
    "MissingCustomPropertyError",
    "ProfileParseError",
    "ProfileRetrievalError",
    "ProviderError",
    # Transport
    "HttpxHTTPLayer",
    "create_http_client",
    # Providers
    "AmazonCognitoProfileParser",
    "AmazonCognitoProvider",
    "BaseAmazonCognitoProvider",
    "OAuth2Provider",
    "SocialProviderRegistry",
]
