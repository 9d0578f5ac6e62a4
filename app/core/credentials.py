from typing import Generator, Optional, Protocol, runtime_checkable

import httpx

from app.core.config import SearchSettings
from app.core.exceptions import ConfigurationError


@runtime_checkable
class CredentialResolver(Protocol):
    """
    Produces the httpx auth flow used on every call to the index.
    Request signing for managed clusters plugs in here by returning its own httpx.Auth.
    """

    def resolve(self) -> Optional[httpx.Auth]: ...


class AnonymousCredentials:
    def resolve(self) -> Optional[httpx.Auth]:
        return None


class BasicCredentials:
    def __init__(self, username: str, password: str):
        self.username = username
        self.password = password

    def resolve(self) -> Optional[httpx.Auth]:
        return httpx.BasicAuth(self.username, self.password)


class ApiKeyAuth(httpx.Auth):
    def __init__(self, api_key: str):
        self.api_key = api_key

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        request.headers["Authorization"] = f"ApiKey {self.api_key}"
        yield request


class ApiKeyCredentials:
    def __init__(self, api_key: str):
        self.api_key = api_key

    def resolve(self) -> Optional[httpx.Auth]:
        return ApiKeyAuth(self.api_key)


def resolve_credentials(settings: SearchSettings) -> CredentialResolver:
    if settings.api_key and (settings.username or settings.password):
        raise ConfigurationError("Configure either SEARCH_API_KEY or SEARCH_USERNAME/SEARCH_PASSWORD, not both")

    if settings.api_key:
        return ApiKeyCredentials(settings.api_key)

    if settings.username or settings.password:
        if not (settings.username and settings.password):
            raise ConfigurationError("SEARCH_USERNAME and SEARCH_PASSWORD must be set together")
        return BasicCredentials(settings.username, settings.password)

    return AnonymousCredentials()
