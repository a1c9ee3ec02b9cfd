from logging import getLogger
from os import environ as env
from typing import Any, TypeVar

from dotenv import load_dotenv

from ._config import Config
from ._services._network_session import HttpxSession, NetworkSession
from ._services.auth_manager import AuthManager, auth_token_request
from ._services.request_manager import RequestManager
from ._utils._logs import setup_logging
from ._utils._request_spec import RequestSpec
from ._utils.constants import (
    ENV_API_HOST,
    ENV_API_SCHEME,
    ENV_CLIENT_ID,
    ENV_CLIENT_SECRET,
    ENV_TIMEOUT,
    ENV_TOKEN_PATH,
    LOGGER_NAME,
)
from .models.auth import OAuthToken
from .models.exceptions import CredentialsMissingError

T = TypeVar("T")

load_dotenv()


class PetSaveClient:
    """Entry point wiring configuration, transport, pipeline and auth.

    Example:
        ```python
        async with PetSaveClient() as client:
            animals = await client.load(
                RequestSpec(
                    host="api.petfinder.com",
                    path="/v2/animals",
                    queries={"type": "dog"},
                    requires_auth=True,
                    decoder=JSONResponseDecoder(AnimalsContainer),
                )
            )
        ```
    """

    def __init__(
        self,
        *,
        host: str | None = None,
        client_id: str | None = None,
        client_secret: str | None = None,
        session: NetworkSession | None = None,
        token: OAuthToken | None = None,
        debug: bool = False,
    ) -> None:
        overrides: dict[str, Any] = {
            "scheme": env.get(ENV_API_SCHEME),
            "host": host or env.get(ENV_API_HOST),
            "token_path": env.get(ENV_TOKEN_PATH),
            "client_id": client_id or env.get(ENV_CLIENT_ID),
            "client_secret": client_secret or env.get(ENV_CLIENT_SECRET),
            "timeout": env.get(ENV_TIMEOUT),
        }
        self._config = Config(
            **{key: value for key, value in overrides.items() if value is not None},
            debug=debug,
        )

        setup_logging(self._config.debug)
        log = getLogger(LOGGER_NAME)
        log.debug("CONFIG:")
        log.debug(f"{self._config.model_dump(exclude={'client_secret'})}\n")

        self._owns_session = session is None
        self._session = session or HttpxSession(timeout=self._config.timeout)
        self._requests = RequestManager(
            self._session, default_scheme=self._config.scheme
        )
        self._auth: AuthManager[OAuthToken] | None = None
        if self._config.client_id and self._config.client_secret:
            self._auth = AuthManager(
                self._requests, auth_token_request(self._config), token=token
            )

    @property
    def config(self) -> Config:
        return self._config

    @property
    def requests(self) -> RequestManager:
        return self._requests

    @property
    def auth(self) -> AuthManager[OAuthToken]:
        """Token manager for the configured client credentials.

        Raises:
            CredentialsMissingError: If no client id or secret is configured.
        """
        if self._auth is None:
            raise CredentialsMissingError()
        return self._auth

    async def load(self, request: RequestSpec[T]) -> T:
        """Send a request, attaching a bearer token when it requires auth.

        Raises:
            NetworkError: From the token fetch or the request itself.
            CredentialsMissingError: If auth is required but not configured.
        """
        auth_token: str | None = None
        if request.requires_auth:
            auth_token = (await self.auth.get_token()).token
        return await self._requests.load(request, auth_token)

    async def aclose(self) -> None:
        """Close the transport session, unless it was passed in."""
        if self._owns_session and isinstance(self._session, HttpxSession):
            await self._session.aclose()

    async def __aenter__(self) -> "PetSaveClient":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()
