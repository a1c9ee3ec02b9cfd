from logging import getLogger
from typing import Generic, TypeVar

from .._config import Config
from .._utils._coalescer import Coalescer
from .._utils._decoders import JSONResponseDecoder
from .._utils._request_spec import FormBody, RequestMethod, RequestSpec
from .._utils.constants import LOGGER_NAME
from ..models.auth import AuthToken, OAuthToken
from ..models.exceptions import CredentialsMissingError
from .request_manager import RequestManager

TokenT = TypeVar("TokenT", bound=AuthToken)


def auth_token_request(config: Config) -> RequestSpec[OAuthToken]:
    """OAuth2 client-credentials request for the configured token endpoint.

    Raises:
        CredentialsMissingError: If the client id or secret is not configured.
    """
    if not config.client_id or not config.client_secret:
        raise CredentialsMissingError()

    return RequestSpec(
        method=RequestMethod.POST,
        scheme=config.scheme,
        host=config.host,
        path=config.token_path,
        body=FormBody(
            {
                "grant_type": "client_credentials",
                "client_id": config.client_id,
                "client_secret": config.client_secret,
            }
        ),
        decoder=JSONResponseDecoder[OAuthToken](OAuthToken),
    )


class AuthManager(Generic[TokenT]):
    """Caches a bearer token and refreshes it at most once at a time.

    A valid cached token is returned without touching the network. When the
    token is missing, expired or a refresh is forced, the fetch goes through
    a ``Coalescer`` so concurrent callers share one token request. A failed
    fetch leaves the cache as it was.
    """

    def __init__(
        self,
        request_manager: RequestManager,
        token_request: RequestSpec[TokenT],
        *,
        token: TokenT | None = None,
    ) -> None:
        self._logger = getLogger(LOGGER_NAME)
        self._request_manager = request_manager
        self._token_request = token_request
        self._current_token = token
        self._task: Coalescer[TokenT] = Coalescer(self._fetch_token)

    @property
    def current_token(self) -> TokenT | None:
        return self._current_token

    def invalidate(self) -> None:
        """Drop the cached token; the next ``get_token`` fetches a new one."""
        self._current_token = None

    async def get_token(self, force_refresh: bool = False) -> TokenT:
        """Return a valid token, fetching one if needed.

        Args:
            force_refresh: Fetch a new token even if the cached one is valid.

        Returns:
            TokenT: The cached token or the freshly fetched one.

        Raises:
            NetworkError: If the token request failed.
        """
        token = self._current_token
        if token is not None and not token.is_expired and not force_refresh:
            return token
        return await self._task.execute()

    async def _fetch_token(self) -> TokenT:
        self._logger.debug("Requesting a new auth token")
        token = await self._request_manager.load(self._token_request)
        self._current_token = token
        return token
